"""Tests for parity between package imports and declared dependencies."""

from __future__ import annotations

import ast
import re
import sys
import tomllib
from pathlib import Path

# Import name to distribution name, where they differ.
_DISTRIBUTIONS = {"tomli_w": "tomli-w"}


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _requirement_name(requirement: str) -> str:
    match = re.match(r"[A-Za-z0-9_.-]+", requirement)
    assert match is not None
    return match.group(0).lower().replace("_", "-")


def _imported_modules(package_dir: Path) -> set[str]:
    modules: set[str] = set()
    for source in package_dir.rglob("*.py"):
        tree = ast.parse(source.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                modules.update(alias.name.split(".")[0] for alias in node.names)
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                modules.add(node.module.split(".")[0])
    return modules


def test_pyproject_covers_third_party_imports() -> None:
    """Every third-party import in brainz_query should be a runtime dependency."""
    repo_root = _repo_root()

    pyproject_data = tomllib.loads((repo_root / "pyproject.toml").read_text(encoding="utf-8"))
    dependency_names = {
        _requirement_name(requirement)
        for requirement in pyproject_data["project"]["dependencies"]
    }

    imported = _imported_modules(repo_root / "brainz_query")
    third_party = {
        name
        for name in imported
        if name not in sys.stdlib_module_names and name not in {"__future__", "brainz_query"}
    }

    for module in sorted(third_party):
        distribution = _DISTRIBUTIONS.get(module, module)
        assert distribution in dependency_names, (
            f"Module '{module}' is imported by brainz_query but '{distribution}' "
            "is missing from pyproject.toml dependencies."
        )
