"""
stackasm - Shared Test Fixtures
===============================

pytest fixtures used across the test modules.
"""

from pathlib import Path
from typing import Callable

import pytest

from stackasm.assembler import Compiler


@pytest.fixture
def compiler() -> Compiler:
    """Fixture: a fresh Compiler with no predefined labels."""
    return Compiler()


@pytest.fixture
def write_program(tmp_path: Path) -> Callable[..., Path]:
    """
    Fixture: write program text to a file under tmp_path.

    Returns a function taking the source (str or bytes) and an optional
    file name, and returning the written path.
    """
    def _write(source: str | bytes, name: str = "program.sm") -> Path:
        path = tmp_path / name
        if isinstance(source, str):
            path.write_text(source)
        else:
            path.write_bytes(source)
        return path

    return _write


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep SMASM_* variables from the developer's shell out of the tests."""
    for name in ("SMASM_ENCODING", "SMASM_FORMAT", "SMASM_BYTEORDER", "SMASM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
