from pathlib import Path

import pytest

from huak.paths import copy_dir, parse_filename, search_parents_for_filepath


@pytest.fixture
def mock_project(tmp_path):
    root = tmp_path / "resources" / "mock-project"
    package = root / "src" / "mock_project"
    package.mkdir(parents=True)
    (root / "pyproject.toml").write_text('[project]\nname = "mock_project"\n')
    (package / "__init__.py").write_text("")
    return root


def test_parse_filename():
    assert parse_filename(Path("a") / "b" / ".venv") == ".venv"
    assert parse_filename("project") == "project"


@pytest.mark.parametrize("path", ["/", "a/.."])
def test_parse_filename_without_name(path):
    with pytest.raises(ValueError):
        parse_filename(path)


def test_copy_dir(mock_project, tmp_path):
    target = tmp_path / "target"
    target.mkdir()

    assert copy_dir(mock_project, target) is True
    assert (target / "mock-project").exists()
    assert (target / "mock-project" / "pyproject.toml").exists()
    assert (target / "mock-project" / "src" / "mock_project" / "__init__.py").exists()


def test_copy_dir_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_dir(tmp_path / "missing", tmp_path)


def test_copy_dir_existing_copy_fails(mock_project, tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    copy_dir(mock_project, target)
    with pytest.raises(FileExistsError):
        copy_dir(mock_project, target)


def test_search_parents_for_filepath(mock_project, tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    copy_dir(mock_project, target)

    result = search_parents_for_filepath(
        target / "mock-project" / "src", "pyproject.toml", 5
    )

    assert result is not None and result.exists()
    assert result == target / "mock-project" / "pyproject.toml"


def test_search_respects_steps(mock_project):
    start = mock_project / "src"
    assert search_parents_for_filepath(start, "pyproject.toml", 1) is None
    assert search_parents_for_filepath(start, "pyproject.toml", 2) == (
        mock_project / "pyproject.toml"
    )


def test_search_zero_steps(mock_project):
    assert search_parents_for_filepath(mock_project, "pyproject.toml", 0) is None


def test_search_missing_file(mock_project):
    assert search_parents_for_filepath(mock_project, "nothing-here.cfg", 3) is None