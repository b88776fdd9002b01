import pytest

from huak.config import Config, Manifest
from huak.package import PythonPackage

PYPROJECT = """[project]
name = "Test"
version = "0.1.0"
description = ""
dependencies = ["click==8.1.3", "black==22.8.0"]

[[project.authors]]
name = "Example Author"
email = "author@example.com"

[build-system]
requires = ["huak-core>=1.0.0"]
build-backend = "huak.core.build.api"
"""


@pytest.fixture
def project_dir(tmp_path):
    root = tmp_path / "a" / "b" / "mock-project"
    (root / "src" / "mock_project").mkdir(parents=True)
    (root / "pyproject.toml").write_text(PYPROJECT)
    return root


def test_find_reads_manifest(project_dir):
    config = Config.find(project_dir)
    assert config.manifest.path == project_dir / "pyproject.toml"
    assert config.project_name() == "Test"
    assert config.project_version() == "0.1.0"


def test_find_searches_parents(project_dir):
    config = Config.find(project_dir / "src" / "mock_project")
    assert config.manifest.path == project_dir / "pyproject.toml"


def test_dependency_list(project_dir):
    deps = Config.find(project_dir).dependency_list()
    assert [str(dep) for dep in deps] == ["click==8.1.3", "black==22.8.0"]
    assert deps[0] == PythonPackage.from_string("click==8.1.3")


def test_find_without_manifest_gives_default(tmp_path, capsys):
    start = tmp_path / "a" / "b" / "c" / "d" / "e"
    start.mkdir(parents=True)
    config = Config.find(start)
    assert config.manifest.path is None
    assert config.project_name() == ""
    assert config.project_version() == "0.0.1"
    assert config.dependency_list() == []
    assert "no manifest found" in capsys.readouterr().err


def test_manifest_load_ignores_other_files(tmp_path):
    other = tmp_path / "setup.cfg"
    other.write_text("")
    manifest = Manifest.load(other)
    assert manifest == Manifest()


def test_manifest_load_bad_file_raises(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text("[project]\n")
    with pytest.raises(ValueError):
        Manifest.load(path)