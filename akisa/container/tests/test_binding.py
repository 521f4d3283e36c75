from akisa.container.binding import Binding


class Widget:
    def __init__(self, size: int = 1) -> None:
        self.size = size


def test_value_binding_returns_value():
    value = ["a", "b"]
    binding = Binding(value)
    assert not binding.is_factory
    assert binding.produce() is value
    assert binding.produce(1, 2) is value


def test_factory_binding_calls_with_parameters():
    binding = Binding(Widget, shared=True)
    assert binding.is_factory
    assert binding.shared
    assert binding.produce(5).size == 5
    assert binding.produce().size == 1


def test_callable_instance_is_a_value():
    class Handler:
        def __call__(self) -> str:
            return "called"

    handler = Handler()
    assert Binding(handler).produce() is handler
