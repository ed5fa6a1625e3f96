#!/usr/bin/env python3
"""Bump the package version in pyproject.toml and _version.py."""

import re
import sys
from pathlib import Path

PYPROJECT_PATH = Path("pyproject.toml")
VERSION_PATH = Path("src/fizzbuzz_cps/_version.py")


def _replace_first(path: Path, pattern: str, replacement: str) -> None:
    content = path.read_text()
    content = re.sub(pattern, replacement, content, count=1, flags=re.MULTILINE)
    path.write_text(content)


def update_version(
    new_version: str,
    pyproject_path: Path = PYPROJECT_PATH,
    version_path: Path = VERSION_PATH,
) -> None:
    """Update version in project files."""
    # Only the version field of the [project] table, which comes first
    _replace_first(pyproject_path, r'^version = "[^"]*"', f'version = "{new_version}"')
    print(f"Updated {pyproject_path} to version {new_version}")

    _replace_first(
        version_path, r'^__version__ = "[^"]*"', f'__version__ = "{new_version}"'
    )
    print(f"Updated {version_path} to version {new_version}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("Usage: python scripts/update_version.py <version>")
        sys.exit(1)

    update_version(sys.argv[1])
