"""Pytest configuration and shared fixtures."""

import random
import sys
from typing import Callable, List, Tuple

import pytest

from multicast_demo.logging.config import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Route structlog output to the current stderr so stdout stays clean."""
    configure_logging(level="WARNING", stream=sys.stderr)


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(20210506)


@pytest.fixture
def call_log() -> List[Tuple[str, str]]:
    """Shared list recording (callback name, argument) pairs."""
    return []


@pytest.fixture
def make_recorder(call_log) -> Callable[[str], Callable[[str], None]]:
    """Factory for named callbacks that append to ``call_log``."""

    def factory(name: str) -> Callable[[str], None]:
        def record(text: str) -> None:
            call_log.append((name, text))

        record.__name__ = name
        return record

    return factory
