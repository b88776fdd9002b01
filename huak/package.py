"""Python package requirement strings."""

from __future__ import annotations

DEFAULT_VERSION_OP = "=="


def package_string_from_parts(name, op=None, version=None):
    """Join a name, comparison operator and version into a requirement."""
    if version is None:
        return name
    return f"{name}{op or DEFAULT_VERSION_OP}{version}"


class PythonPackage:
    """A Python package, kept alongside its requirement string."""

    def __init__(self, name, op=None, version=None):
        self.name = name
        self.op = op
        self.version = version
        self._string = package_string_from_parts(name, op, version)

    @classmethod
    def from_string(cls, string):
        """Wrap a raw requirement string without parsing it."""
        package = cls("")
        package._string = string
        return package

    def __str__(self):
        return self._string

    def __repr__(self):
        return (
            f"PythonPackage(string={self._string!r}, name={self.name!r}, "
            f"op={self.op!r}, version={self.version!r})"
        )

    def __eq__(self, other):
        if not isinstance(other, PythonPackage):
            return NotImplemented
        return (self._string, self.name, self.op, self.version) == (
            other._string,
            other.name,
            other.op,
            other.version,
        )

    def __hash__(self):
        return hash((self._string, self.name, self.op, self.version))