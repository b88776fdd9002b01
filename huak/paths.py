"""Filesystem path helpers."""

from __future__ import annotations

import shutil
import sys
from pathlib import Path


def parse_filename(path):
    """Return the final component of a path."""
    name = Path(path).name
    if name in ("", ".."):
        raise ValueError("failed to read name from path")
    return name


def search_parents_for_filepath(start, filename, steps):
    """Look for a file in start and its parents, checking at most steps directories."""
    current = Path(start)
    for _ in range(steps):
        candidate = current / filename
        if candidate.exists():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def copy_dir(source, destination):
    """Copy the directory source into the existing directory destination."""
    source = Path(source)
    destination = Path(destination)
    if not source.is_dir():
        print(f"`from` {source} does not exist", file=sys.stderr)
        raise FileNotFoundError(f"{source} is not a directory")
    if not destination.is_dir():
        print(f"`to` {destination} does not exist", file=sys.stderr)
        raise FileNotFoundError(f"{destination} is not a directory")
    shutil.copytree(source, destination / source.name)
    return True