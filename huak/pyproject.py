"""Reading and writing pyproject.toml files."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

HUAK_REQUIRES = "huak-core>=1.0.0"
HUAK_BUILD_BACKEND = "huak.core.build.api"

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\b": "\\b",
    "\f": "\\f",
}


def _toml_string(value):
    parts = []
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            parts.append(f"\\u{ord(ch):04X}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def _toml_array(items):
    return "[" + ", ".join(_toml_string(item) for item in items) + "]"


def _field(table, key, kind, where):
    if key not in table:
        raise ValueError(f"missing field `{key}` in {where}")
    value = table[key]
    if not isinstance(value, kind):
        raise ValueError(f"invalid type for `{key}` in {where}")
    return value


def _string_list(table, key, where):
    values = _field(table, key, list, where)
    if not all(isinstance(value, str) for value in values):
        raise ValueError(f"invalid type for `{key}` in {where}")
    return list(values)


def _optional_string(table, key, where):
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"invalid type for `{key}` in {where}")
    return value


@dataclass
class Author:
    """An entry of [[project.authors]]."""

    name: str | None = None
    email: str | None = None

    @classmethod
    def _from_table(cls, table):
        if not isinstance(table, dict):
            raise ValueError("invalid type for author")
        return cls(
            name=_optional_string(table, "name", "author"),
            email=_optional_string(table, "email", "author"),
        )


@dataclass
class ProjectTable:
    """The [project] table."""

    name: str = ""
    version: str = "0.0.1"
    description: str = ""
    dependencies: list[str] = field(default_factory=list)
    authors: list[Author] = field(default_factory=list)

    @classmethod
    def _from_table(cls, table):
        where = "project"
        return cls(
            name=_field(table, "name", str, where),
            version=_field(table, "version", str, where),
            description=_field(table, "description", str, where),
            dependencies=_string_list(table, "dependencies", where),
            authors=[
                Author._from_table(entry)
                for entry in _field(table, "authors", list, where)
            ],
        )

    def _lines(self):
        yield "[project]"
        yield f"name = {_toml_string(self.name)}"
        yield f"version = {_toml_string(self.version)}"
        yield f"description = {_toml_string(self.description)}"
        yield f"dependencies = {_toml_array(self.dependencies)}"
        if not self.authors:
            yield "authors = []"
        for author in self.authors:
            yield ""
            yield "[[project.authors]]"
            if author.name is not None:
                yield f"name = {_toml_string(author.name)}"
            if author.email is not None:
                yield f"email = {_toml_string(author.email)}"


@dataclass
class BuildSystem:
    """The [build-system] table."""

    requires: list[str] = field(default_factory=lambda: [HUAK_REQUIRES])
    backend: str = HUAK_BUILD_BACKEND

    @classmethod
    def _from_table(cls, table):
        where = "build-system"
        return cls(
            requires=_string_list(table, "requires", where),
            backend=_field(table, "build-backend", str, where),
        )

    def _lines(self):
        yield f"requires = {_toml_array(self.requires)}"
        yield f"build-backend = {_toml_string(self.backend)}"

    def to_string(self):
        """Serialize the table's contents as a TOML document."""
        return "\n".join(self._lines()) + "\n"


@dataclass
class PyProjectToml:
    """A pyproject.toml document."""

    project: ProjectTable = field(default_factory=ProjectTable)
    build_system: BuildSystem = field(default_factory=BuildSystem)

    @classmethod
    def from_string(cls, string):
        """Parse a document; raises ValueError when it is malformed."""
        data = tomllib.loads(string)
        project = _field(data, "project", dict, "document")
        build_system = _field(data, "build-system", dict, "document")
        return cls(
            project=ProjectTable._from_table(project),
            build_system=BuildSystem._from_table(build_system),
        )

    @classmethod
    def open(cls, path):
        """Read and parse the file at path."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise OSError(f"failed to read toml file from {path}") from exc
        try:
            return cls.from_string(text)
        except ValueError as exc:
            raise ValueError("failed to build toml") from exc

    def to_string(self):
        """Serialize the document as TOML."""
        lines = [*self.project._lines(), "", "[build-system]", *self.build_system._lines()]
        return "\n".join(lines) + "\n"