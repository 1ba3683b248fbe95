"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from brainz_query.utils.output import set_verbosity

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[search]
default_entity = "release-group"
limit = 50
offset = 10
""")
    return config_path


@pytest.fixture(autouse=True)
def reset_verbosity() -> Generator[None, None, None]:
    """Keep --verbose/--quiet from one CLI invocation out of the next test."""
    yield
    set_verbosity()
