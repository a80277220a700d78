"""Shared pytest fixtures and test helpers for pwctl tests."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Callable, Generator

import pytest
from click.testing import CliRunner

from pwctl.services.password import PasswordService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ``PWCTL_*`` variables from the developer's shell."""
    for key in list(os.environ):
        if key.startswith("PWCTL_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pw = logging.getLogger("pwctl")
    pw_level = pw.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pw.setLevel(pw_level)


@pytest.fixture
def seeded_randbelow() -> Callable[[int], int]:
    """Deterministic stand-in for ``secrets.randbelow``."""
    return random.Random(1234).randrange


@pytest.fixture
def service(seeded_randbelow: Callable[[int], int]) -> PasswordService:
    return PasswordService(randbelow=seeded_randbelow)


@pytest.fixture
def failing_randbelow() -> Callable[[int], Callable[[int], int]]:
    """Factory: a source that succeeds *after* times, then raises OSError."""

    def build(after: int = 0) -> Callable[[int], int]:
        calls = {"n": 0}

        def randbelow(n: int) -> int:
            if calls["n"] >= after:
                raise OSError("entropy source unavailable")
            calls["n"] += 1
            return 0

        return randbelow

    return build