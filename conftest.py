"""Root-level pytest fixtures shared by unit and end-to-end tests."""

from __future__ import annotations

import pytest

from akisa.container.container import Container
from akisa.services.logger.memory_logger import MemoryLogger


@pytest.fixture
def memory_logger() -> MemoryLogger:
    return MemoryLogger()


@pytest.fixture
def container(memory_logger: MemoryLogger) -> Container:
    """Empty container that records its log output in *memory_logger*."""
    return Container(logger=memory_logger)
