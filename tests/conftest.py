"""Global pytest configuration.

Restores the package log level after every test so that tests which switch
verbosity (CLI flags, debug toggles) do not leak into one another.
"""

from __future__ import annotations

import pytest

from wirecross.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_log_level():
    yield
    configure_logging()


@pytest.fixture
def example_paths() -> tuple[str, str]:
    """The small two-wire example with crossings at (3,3) and (6,5)."""
    return "R8,U5,L5,D3", "U7,R6,D4,L4"
