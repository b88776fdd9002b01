"""Operations on projects: creating, cleaning, formatting, linting and more."""

from __future__ import annotations

import shutil

from huak.errors import CliError, ErrorKind, wrap
from huak.paths import parse_filename
from huak.pyproject import PyProjectToml

MANIFEST_NAME = "pyproject.toml"
FMT_MODULE = "black"
LINT_MODULE = "ruff"
TEST_MODULE = "pytest"
LINE_LENGTH = "79"


def _require_venv(project):
    if project.venv is None:
        raise CliError(ErrorKind.VENV_NOT_FOUND, 1)
    return project.venv


def _require_manifest(project):
    path = project.root / MANIFEST_NAME
    if not path.exists():
        raise wrap(FileNotFoundError("No pyproject.toml found"))
    return path


def _exec_tool(venv, module, args, cwd, kind):
    try:
        venv.exec_module(module, args, cwd)
    except CliError as exc:
        raise CliError(kind, exc.status_code, exc) from exc


def create_toml(project):
    """A default pyproject document named after the project's directory."""
    toml = PyProjectToml()
    toml.project.name = parse_filename(project.root)
    return toml


def clean_project(project):
    """Remove the project's dist directory if there is one."""
    dist_path = project.root / "dist"
    if not dist_path.is_dir():
        return
    try:
        shutil.rmtree(dist_path)
    except OSError as exc:
        raise wrap(exc) from exc


def fmt_project(project, check=False):
    """Format the project's Python code with black from its root."""
    venv = _require_venv(project)
    args = [".", "--line-length", LINE_LENGTH]
    if check:
        args.append("--check")
    _exec_tool(venv, FMT_MODULE, args, project.root, ErrorKind.BLACK)


def init_project(project):
    """Add a pyproject.toml to an existing project directory."""
    toml = create_toml(project)
    path = project.root / MANIFEST_NAME
    if path.exists():
        raise FileExistsError("a pyproject.toml already exists")
    path.write_text(toml.to_string(), encoding="utf-8")


def install_project_dependencies(project):
    """Install every dependency listed in the project's manifest."""
    _require_manifest(project)
    venv = _require_venv(project)
    for dependency in project.config.dependency_list():
        venv.install_package(dependency)


def lint_project(project):
    """Lint the project's Python code with ruff from its root."""
    venv = _require_venv(project)
    try:
        venv_name = venv.name()
    except ValueError as exc:
        raise wrap(exc) from exc
    args = [".", "--extend-exclude", venv_name]
    _exec_tool(venv, LINT_MODULE, args, project.root, ErrorKind.RUFF)


def create_project(project):
    """Write a pyproject.toml and a src/<name> package for a new project."""
    toml = create_toml(project)
    toml_path = project.root / MANIFEST_NAME
    if toml_path.exists():
        raise FileExistsError("a pyproject.toml already exists")
    toml_path.write_text(toml.to_string(), encoding="utf-8")

    package_dir = project.root / "src" / toml.project.name
    package_dir.mkdir(parents=True, exist_ok=True)
    (package_dir / "__init__.py").write_text("", encoding="utf-8")


def remove_project_dependency(project, dependency):
    """Uninstall a dependency and drop it from the project's manifest."""
    venv = _require_venv(project)
    venv.uninstall_package(dependency)

    path = project.root / MANIFEST_NAME
    try:
        toml = PyProjectToml.open(path)
    except (OSError, ValueError) as exc:
        raise wrap(exc) from exc
    toml.project.dependencies = [
        entry
        for entry in toml.project.dependencies
        if not entry.startswith(dependency)
    ]
    try:
        text = toml.to_string()
    except ValueError as exc:
        raise CliError(ErrorKind.IO_ERROR, 1) from exc
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise wrap(exc) from exc


def test_project(project):
    """Run the project's tests with pytest from its root."""
    venv = _require_venv(project)
    _exec_tool(venv, TEST_MODULE, [], project.root, ErrorKind.PYTEST)


def get_project_version(project):
    """The version declared in the project's manifest."""
    _require_manifest(project)
    return project.config.project_version()