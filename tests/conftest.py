"""Pytest configuration and fixtures for the test suite."""

import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
import yaml

from token_estimator.config import CONFIG_ENV, LOG_LEVEL_ENV, MODE_ENV
from token_estimator.samples import Sample


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's environment from leaking into config loading."""
    for var in (CONFIG_ENV, LOG_LEVEL_ENV, MODE_ENV):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_yaml(temp_dir: Path) -> Callable[[str, object], Path]:
    """Write an object as YAML into the temp dir and return its path."""
    def _write(name: str, doc: object) -> Path:
        path = temp_dir / name
        path.write_text(yaml.safe_dump(doc), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def simple_english() -> Sample:
    """44 characters, 8 words, 14 basic tokens."""
    return Sample(label="Simple English", text="Hello world! This is a simple test sentence.")


@pytest.fixture
def c_code() -> Sample:
    """43 characters, 4 words, 19 basic tokens."""
    return Sample(label="C Code", text='int main() { printf("Hello\\n"); return 0; }')
