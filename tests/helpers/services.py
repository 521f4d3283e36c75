"""Sample application services used to exercise container wiring.

A small signup flow: a repository and a mailer behind interfaces, a clock
behind a Protocol, and a service class that needs all three.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol


class Clock(Protocol):
    def now(self) -> float: ...


class FixedClock:
    def __init__(self, at: float = 1000.0) -> None:
        self.at = at

    def now(self) -> float:
        return self.at


class UserRepository(ABC):
    @abstractmethod
    def find(self, user_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    def save(self, user: dict[str, Any]) -> None: ...


class InMemoryUserRepository(UserRepository):
    def __init__(self, clock: Clock) -> None:
        self.clock = clock
        self._users: dict[str, dict[str, Any]] = {}

    def find(self, user_id: str) -> dict[str, Any] | None:
        return self._users.get(user_id)

    def save(self, user: dict[str, Any]) -> None:
        self._users[user["id"]] = {**user, "saved_at": self.clock.now()}


class Mailer(ABC):
    @abstractmethod
    def send(self, to: str, body: str) -> None: ...


class OutboxMailer(Mailer):
    def __init__(self) -> None:
        self.outbox: list[tuple[str, str]] = []

    def send(self, to: str, body: str) -> None:
        self.outbox.append((to, body))


class SignupService:
    def __init__(self, users: UserRepository, mailer: Mailer, clock: Clock) -> None:
        self.users = users
        self.mailer = mailer
        self.clock = clock

    def register(self, user_id: str, email: str) -> dict[str, Any]:
        if self.users.find(user_id) is not None:
            raise ValueError(f"user '{user_id}' already exists")
        self.users.save({"id": user_id, "email": email})
        self.mailer.send(email, f"Welcome {user_id}")
        return self.users.find(user_id)


def build_signup(users: UserRepository, mailer: Mailer) -> SignupService:
    return SignupService(users, mailer, FixedClock(at=0.0))


class Chicken:
    def __init__(self, egg: "Egg") -> None:
        self.egg = egg


class Egg:
    def __init__(self, chicken: Chicken) -> None:
        self.chicken = chicken
