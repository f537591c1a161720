"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

import pytest
from loguru import logger


@dataclass(frozen=True)
class FakeContext:
    """Position context with only the side-to-move king square."""

    king: int | None


@dataclass
class FakePosition:
    """Position returning a fixed destination enumeration."""

    dests: list[tuple[int, list[int]]] = field(default_factory=list)
    king: int | None = None

    def ctx(self) -> FakeContext:
        return FakeContext(king=self.king)

    def all_dests(self, ctx: FakeContext) -> Iterator[tuple[int, list[int]]]:
        return iter(self.dests)


@pytest.fixture
def make_position() -> Callable[..., FakePosition]:
    """Factory for positions with a fixed destination enumeration."""

    def _make(dests: list[tuple[int, list[int]]], king: int | None = None) -> FakePosition:
        return FakePosition(dests=dests, king=king)

    return _make


@pytest.fixture(autouse=True)
def _reset_loguru() -> Iterator[None]:
    """Restore the default loguru sink after tests that reconfigure logging."""
    yield
    logger.remove()
    logger.add(sys.stderr)
