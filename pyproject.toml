[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "commitui"
version = "0.1.0"
description = "A terminal interface for writing conventional commit messages"
requires-python = ">=3.11"
keywords = ["git", "commit", "tui", "cli", "conventional-commits", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
commitui = "commitui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["commitui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
