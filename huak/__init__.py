"""An opinionated package manager for Python projects: venvs, manifests, and tool runs."""

__version__ = "0.0.1"
__all__ = ["__version__"]