[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huak"
version = "0.0.1"
description = "An opinionated package manager for Python projects: bootstrap, format, lint, test and manage dependencies."
requires-python = ">=3.11"
dependencies = []
keywords = ["package-manager", "pyproject", "venv", "packaging", "workflow"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
huak = "huak.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["huak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
