# huak

An opinionated package manager for Python projects. It creates a project
skeleton with a `pyproject.toml`, manages a project virtual environment
(`.venv` or `venv`), installs and removes dependencies, and runs black, ruff
and pytest inside that environment.

It needs nothing beyond the standard library (Python 3.11 or later).

## Installation

```sh
pip install .
```

This installs the `huak` command. `python -m huak.cli` works as well.

## Usage

Every command runs from the current working directory. The project's
`pyproject.toml` is looked for in the current directory and up to four of its
parents; the directory where it is found is the project root. The virtual
environment is looked for the same way, first as `.venv`, then as `venv`.

```sh
huak new my-project      # create ./my-project with pyproject.toml and src/my-project/__init__.py
huak new                 # the same in the current directory, which must be empty
huak init                # add a pyproject.toml to the project directory
huak install             # install the dependencies listed in pyproject.toml into the venv
huak remove click        # uninstall a dependency and drop it from pyproject.toml
huak fmt                 # format code with black (line length 79)
huak fmt --check         # only check the formatting
huak lint                # lint with ruff, excluding the venv directory
huak test                # run pytest
huak clean               # remove the dist/ directory
huak clean-pycache       # remove __pycache__ directories and .pyc files under the current directory
huak version             # print "Version: <name>-<version>"
huak help                # show the list of commands
```

`huak new` refuses a target directory that already exists (or, without a path,
a current directory that is not empty); use `huak init` there instead.
`huak init` and `huak new` refuse to overwrite an existing `pyproject.toml`.

`huak remove NAME` drops every dependency entry that begins with `NAME`.

Tools that are not yet in the venv (black, ruff, pytest, and pip-installed
dependencies) are installed into it with pip on first use. If no venv is
found, one named `.venv` is created in the current directory with
`python3 -m venv` on Linux and `python -m venv` elsewhere.

Set `HUAK_MUTE_COMMAND` to `true`, `True`, `TRUE` or `1` to capture the output of
the tools huak runs instead of showing it directly; captured output becomes
part of the error message when a tool fails.

On failure huak prints the error to stderr and exits with the status of the
tool that failed, or 1. Run without a subcommand, it prints its help and exits
with status 2.

### The pyproject.toml it reads and writes

huak writes a `[project]` table with `name`, `version` (`0.0.1` by default),
`description`, `dependencies` and `authors`, and a `[build-system]` table. When
it reads a manifest it expects all of these fields; a manifest missing one is
reported as an error. Other tables and fields are not kept when huak rewrites
the file (as `huak remove` does).

## What huak does not do

The `activate`, `add`, `build`, `doc`, `publish`, `run` and `update` commands
are accepted but report that the feature is not implemented. huak does not
resolve or lock dependency versions, build distributions or upload them to a
package index.

## Library use

The same operations are available from Python:

```python
from pathlib import Path

from huak.ops import get_project_version
from huak.project import Project

project = Project.find(Path.cwd())
print(get_project_version(project))
```

`huak.ops` also holds `create_project`, `init_project`, `clean_project`,
`fmt_project`, `lint_project`, `test_project`, `install_project_dependencies`
and `remove_project_dependency`. `huak.venv.Venv`, `huak.pyproject.PyProjectToml`
and `huak.package.PythonPackage` cover virtual environments, manifests and
requirement strings.

Operations raise `huak.errors.CliError`, which carries an `ErrorKind` and the
exit status of the tool that failed; `init_project` and `create_project` raise
`FileExistsError` when a `pyproject.toml` is already there.