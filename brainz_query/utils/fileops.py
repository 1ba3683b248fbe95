"""Owner-only file writes for the brainz-query config file."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

PRIVATE_DIR_MODE = 0o700
PRIVATE_FILE_MODE = 0o600


def ensure_private_dir(path: Path) -> None:
    """Create ``path`` and any missing parents as owner-only directories.

    Directories that already exist keep their permissions, so writing a
    config into the working directory leaves that directory untouched.
    """
    missing: list[Path] = []
    current = path
    while not current.exists():
        missing.append(current)
        current = current.parent
    for directory in reversed(missing):
        directory.mkdir(exist_ok=True)
        # mkdir's mode argument is masked by the umask
        directory.chmod(PRIVATE_DIR_MODE)


def write_private_file(path: Path, content: str) -> None:
    """Replace ``path`` with ``content``, readable by the owner only.

    The content is written to a sibling temporary file first, so an
    interrupted write never leaves a truncated config behind.
    """
    ensure_private_dir(path.parent)
    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            temp_name = handle.name
            os.chmod(temp_name, PRIVATE_FILE_MODE)
            handle.write(content)
        os.replace(temp_name, path)
    except BaseException:
        if temp_name is not None:
            Path(temp_name).unlink(missing_ok=True)
        raise
