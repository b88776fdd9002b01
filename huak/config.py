"""Project configuration found on disk."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path

from huak.package import PythonPackage
from huak.paths import search_parents_for_filepath
from huak.pyproject import PyProjectToml

DEFAULT_SEARCH_STEPS = 5
MANIFEST_NAME = "pyproject.toml"


@dataclass
class Manifest:
    """A manifest file and its parsed contents."""

    path: Path | None = None
    toml: PyProjectToml = field(default_factory=PyProjectToml)

    @classmethod
    def load(cls, path):
        """Load a manifest; paths that are not a pyproject.toml give a default."""
        path = Path(path)
        if path.name != MANIFEST_NAME:
            return cls()
        return cls(path, PyProjectToml.open(path))


@dataclass
class Config:
    """Configuration of a project, backed by its manifest."""

    manifest: Manifest = field(default_factory=Manifest)

    @classmethod
    def find(cls, start):
        """Search start and its parents for a pyproject.toml."""
        manifest_path = search_parents_for_filepath(
            start, MANIFEST_NAME, DEFAULT_SEARCH_STEPS
        )
        if manifest_path is None:
            print("no manifest found", file=sys.stderr)
            print("creating default manifest", file=sys.stderr)
            return cls()
        return cls(Manifest.load(manifest_path))

    def project_name(self):
        """The project name from the manifest."""
        return self.manifest.toml.project.name

    def project_version(self):
        """The project version from the manifest."""
        return self.manifest.toml.project.version

    def dependency_list(self):
        """The project's dependencies as packages."""
        return [
            PythonPackage.from_string(dependency)
            for dependency in self.manifest.toml.project.dependencies
        ]