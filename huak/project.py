"""Python projects."""

from __future__ import annotations

import sys
from pathlib import Path

from huak.config import Config
from huak.venv import DEFAULT_VENV_NAME, Venv


class Project:
    """A Python project: its root, configuration and virtual environment."""

    def __init__(self, root, config=None, venv=None):
        self.root = Path(root)
        self.config = config if config is not None else Config()
        self.venv = venv

    @classmethod
    def find(cls, path):
        """Build a project from path, rooting it where the manifest was found."""
        path = Path(path)
        config = Config.find(path)
        try:
            venv = Venv.find(path)
        except FileNotFoundError as exc:
            print(exc, file=sys.stderr)
            print("initializing project with default .venv", file=sys.stderr)
            venv = Venv(path / DEFAULT_VENV_NAME)
        manifest_path = config.manifest.path
        root = manifest_path.parent if manifest_path is not None else path
        return cls(root, config, venv)

    def __repr__(self):
        return f"Project(root={self.root!r}, venv={self.venv!r})"