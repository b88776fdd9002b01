"""The huak command line."""

from __future__ import annotations

import argparse
import shutil
import sys
from importlib.metadata import PackageNotFoundError, version as _dist_version
from pathlib import Path

from huak import ops
from huak.errors import CliError, ErrorKind, wrap
from huak.project import Project

ABOUT = "A Python package manager inspired by Cargo"

_DELETE_DIRECTORY_PATTERN = "__pycache__"
_DELETE_FILE_PATTERN = "*.pyc"


def _program_version():
    try:
        return _dist_version("huak")
    except PackageNotFoundError:
        return "unknown"


def build_parser():
    """Build the argument parser with every huak subcommand."""
    parser = argparse.ArgumentParser(prog="huak", description=ABOUT)
    parser.add_argument(
        "-V", "--version", action="version", version=f"huak {_program_version()}"
    )
    sub = parser.add_subparsers(dest="command", metavar="SUBCOMMAND")

    sub.add_parser("activate", help="Activate the project's virtual environment.")

    add = sub.add_parser("add", help="Add a Python module to the existing project.")
    add.add_argument("dependency")

    sub.add_parser("build", help="Build tarball and wheel for the project.")
    sub.add_parser("clean", help="Remove tarball and wheel from the built project.")
    sub.add_parser(
        "clean-pycache", help="Remove all .pyc files and __pycache__ directories."
    )

    doc = sub.add_parser(
        "doc", help="Builds and uploads current project to a registry."
    )
    doc.add_argument(
        "--check", action="store_true", help="Check if Python code is formatted."
    )

    sub.add_parser(
        "help", help="Display Huak commands and general usage information."
    )

    fmt = sub.add_parser("fmt", help="Format Python code.")
    fmt.add_argument(
        "--check", action="store_true", help="Check if Python code is formatted."
    )

    sub.add_parser("init", help="Initialize the existing project.")
    sub.add_parser("install", help="Install the dependencies of an existing project.")
    sub.add_parser("lint", help="Lint Python code.")

    new = sub.add_parser("new", help="Create a project from scratch.")
    new.add_argument("path", nargs="?", default=None)

    sub.add_parser(
        "publish", help="Builds and uploads current project to a registry."
    )

    remove = sub.add_parser("remove", help="Remove a dependency from the project.")
    remove.add_argument("dependency")

    run_cmd = sub.add_parser(
        "run", help="Run a command within the project's environment context."
    )
    run_cmd.add_argument("command_args", nargs="+", metavar="command")

    sub.add_parser("test", help="Test Python code.")

    update = sub.add_parser("update", help="Update dependencies added to the project.")
    update.add_argument("dependency", nargs="?", default="*")

    sub.add_parser("version", help="Display the version of the project.")
    return parser


def _cwd():
    try:
        return Path.cwd()
    except OSError as exc:
        raise wrap(exc) from exc


def _cwd_project():
    return Project.find(_cwd())


def clean_pycache(root):
    """Remove every __pycache__ directory and .pyc file under root.

    Every path is attempted; CliError(IO_ERROR) is raised afterwards if any
    removal failed.
    """
    root = Path(root)
    success = True

    for directory in sorted(root.rglob(_DELETE_DIRECTORY_PATTERN)):
        if not directory.exists():
            continue
        try:
            if directory.is_dir():
                shutil.rmtree(directory)
            else:
                directory.unlink()
        except OSError:
            success = False

    for file in sorted(root.rglob(_DELETE_FILE_PATTERN)):
        if not file.exists():
            continue
        try:
            file.unlink()
        except OSError:
            success = False

    if not success:
        raise CliError(ErrorKind.IO_ERROR, 1)


def new_project(path=None):
    """Create a new project at path (relative to the cwd), or in an empty cwd."""
    cwd = _cwd()
    target = cwd / path if path else cwd

    if target.exists() and target != cwd:
        raise CliError(ErrorKind.DIRECTORY_EXISTS, 1)
    if target == cwd and any(target.iterdir()):
        raise CliError(ErrorKind.DIRECTORY_EXISTS, 1)

    if target != cwd:
        target.mkdir(parents=True, exist_ok=True)

    project = Project(target)
    ops.create_project(project)
    return project


def _not_implemented(_args):
    raise CliError(ErrorKind.NOT_IMPLEMENTED, 1)


def _help(_args):
    build_parser().print_help()


def _clean(_args):
    ops.clean_project(_cwd_project())


def _clean_pycache(_args):
    clean_pycache(_cwd())


def _fmt(args):
    ops.fmt_project(_cwd_project(), bool(getattr(args, "check", False)))


def _init(_args):
    ops.init_project(_cwd_project())


def _install(_args):
    ops.install_project_dependencies(_cwd_project())


def _lint(_args):
    ops.lint_project(_cwd_project())


def _new(args):
    new_project(getattr(args, "path", None))


def _remove(args):
    dependency = getattr(args, "dependency", None)
    if not dependency:
        raise CliError(ErrorKind.MISSING_ARGUMENTS, 1)
    ops.remove_project_dependency(_cwd_project(), dependency)


def _test(_args):
    ops.test_project(_cwd_project())


def _version(_args):
    project = _cwd_project()
    project_version = ops.get_project_version(project)
    name = project.config.project_name()
    print(f"Version: {name}-{project_version}")


_HANDLERS = {
    "activate": _not_implemented,
    "add": _not_implemented,
    "build": _not_implemented,
    "clean": _clean,
    "clean-pycache": _clean_pycache,
    "doc": _not_implemented,
    "help": _help,
    "fmt": _fmt,
    "init": _init,
    "install": _install,
    "lint": _lint,
    "new": _new,
    "publish": _not_implemented,
    "remove": _remove,
    "run": _not_implemented,
    "test": _test,
    "update": _not_implemented,
    "version": _version,
}


def run(args):
    """Dispatch parsed arguments to their subcommand; failures raise CliError."""
    handler = _HANDLERS.get(getattr(args, "command", None))
    if handler is None:
        raise CliError(ErrorKind.UNKNOWN_COMMAND, 1)
    try:
        handler(args)
    except CliError:
        raise
    except (OSError, ValueError) as exc:
        raise wrap(exc) from exc


def main(argv=None):
    """Run the huak command line and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help(sys.stderr)
        return 2
    try:
        run(args)
    except CliError as exc:
        print(exc, file=sys.stderr)
        return exc.status_code
    return 0


if __name__ == "__main__":
    sys.exit(main())