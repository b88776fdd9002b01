import pytest

from huak.pyproject import Author, BuildSystem, ProjectTable, PyProjectToml

SAMPLE = """[project]
name = "Test"
version = "0.1.0"
description = ""
dependencies = ["click==8.1.3", "black==22.8.0"]

[[project.authors]]
name = "Jane Doe"
email = "jane@example.com"

[build-system]
requires = ["huak-core>=1.0.0"]
build-backend = "huak.core.build.api"
"""


def test_build_system():
    data = BuildSystem(requires=[], backend="")
    assert data.requires == []
    assert data.backend == ""
    assert data.to_string() == 'requires = []\nbuild-backend = ""\n'


def test_build_system_defaults():
    data = BuildSystem()
    assert data.requires == ["huak-core>=1.0.0"]
    assert data.backend == "huak.core.build.api"


def test_serialize():
    toml = PyProjectToml.from_string(SAMPLE)
    assert toml.to_string() == SAMPLE


def test_deserialize():
    toml = PyProjectToml.from_string(SAMPLE)
    assert toml.project.name == "Test"
    assert toml.project.authors[0].name == "Jane Doe"
    assert toml.project.dependencies == ["click==8.1.3", "black==22.8.0"]
    assert toml.build_system.backend == "huak.core.build.api"


def test_project_defaults():
    project = ProjectTable()
    assert project.name == ""
    assert project.version == "0.0.1"
    assert project.dependencies == []
    assert project.authors == []


def test_default_round_trip():
    toml = PyProjectToml()
    toml.project.name = "demo"
    parsed = PyProjectToml.from_string(toml.to_string())
    assert parsed == toml


def test_author_with_missing_fields_round_trips():
    toml = PyProjectToml(
        project=ProjectTable(name="x", authors=[Author(name="Only Name"), Author()])
    )
    parsed = PyProjectToml.from_string(toml.to_string())
    assert parsed.project.authors == [Author(name="Only Name"), Author()]


def test_string_escapes_round_trip():
    toml = PyProjectToml(project=ProjectTable(name='we"ird\\name', description="a\nb"))
    parsed = PyProjectToml.from_string(toml.to_string())
    assert parsed.project.name == 'we"ird\\name'
    assert parsed.project.description == "a\nb"


def test_missing_field_raises():
    broken = SAMPLE.replace('version = "0.1.0"\n', "")
    with pytest.raises(ValueError, match="version"):
        PyProjectToml.from_string(broken)


def test_missing_build_system_raises():
    broken = SAMPLE.split("[build-system]")[0]
    with pytest.raises(ValueError):
        PyProjectToml.from_string(broken)


def test_invalid_toml_raises():
    with pytest.raises(ValueError):
        PyProjectToml.from_string("[project\nname=")


def test_open_reads_file(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text(SAMPLE)
    assert PyProjectToml.open(path).project.name == "Test"


def test_open_missing_file(tmp_path):
    with pytest.raises(OSError, match="failed to read toml file"):
        PyProjectToml.open(tmp_path / "pyproject.toml")


def test_open_malformed_file(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text("[project]\n")
    with pytest.raises(ValueError, match="failed to build toml"):
        PyProjectToml.open(path)