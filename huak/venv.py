"""Python virtual environments."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from huak.command import run_command
from huak.errors import wrap
from huak.package import PythonPackage
from huak.paths import parse_filename, search_parents_for_filepath

DEFAULT_SEARCH_STEPS = 5
DEFAULT_VENV_NAME = ".venv"
BIN_NAME = "bin"
WINDOWS_BIN_NAME = "Scripts"
DEFAULT_PYTHON_ALIAS = "python"
PYTHON3_ALIAS = "python3"

_VENV_NAMES = (".venv", "venv")


def _is_windows():
    return os.name == "nt"


def _cwd():
    try:
        return Path.cwd()
    except OSError as exc:
        raise wrap(exc) from exc


@dataclass
class Venv:
    """A Python virtual environment rooted at path."""

    path: Path

    def __post_init__(self):
        self.path = Path(self.path)

    @classmethod
    def find(cls, start):
        """Search start and its parents for a ".venv" or "venv" directory."""
        for name in _VENV_NAMES:
            found = search_parents_for_filepath(start, name, DEFAULT_SEARCH_STEPS)
            if found is not None:
                return cls(found)
        raise FileNotFoundError(f"could not find venv from {start}")

    @classmethod
    def default(cls):
        """A venv named ".venv" in the current directory."""
        try:
            cwd = Path.cwd()
        except OSError:
            cwd = Path(".")
        return cls(cwd / DEFAULT_VENV_NAME)

    def name(self):
        """The directory name of the venv, such as ".venv"."""
        return parse_filename(self.path)

    def create(self):
        """Create the venv at its path unless it already exists."""
        if self.path.exists():
            return
        parent = self.path.parent
        if parent == self.path:
            raise wrap(ValueError("Invalid venv path"))
        try:
            name = self.name()
        except ValueError as exc:
            raise wrap(exc) from exc
        run_command(self.python_alias(), ["-m", "venv", name], parent)

    def python_alias(self):
        """The command used to run Python when creating the venv."""
        if sys.platform.startswith("linux"):
            return PYTHON3_ALIAS
        return DEFAULT_PYTHON_ALIAS

    def bin_path(self):
        """The directory holding the venv's executables."""
        return self.path / (WINDOWS_BIN_NAME if _is_windows() else BIN_NAME)

    def module_path(self, module):
        """The path of an executable installed into the venv."""
        path = self.bin_path() / module
        if not _is_windows():
            return path
        return path.with_suffix(".exe")

    def exec_module(self, module, args, cwd):
        """Run a venv executable with args from cwd, installing it if missing."""
        self.create()
        module_path = self.module_path(module)
        if not module_path.exists():
            self.install_package(PythonPackage.from_string(module))
        run_command(str(module_path), args, cwd)

    def install_package(self, package):
        """Install a package into the venv with pip."""
        self.exec_module("pip", ["install", str(package)], _cwd())

    def uninstall_package(self, name):
        """Uninstall a package from the venv with pip."""
        self.exec_module("pip", ["uninstall", name, "-y"], _cwd())