[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ansiterm"
version = "0.1.0"
description = "ANSI escape sequences for text styling, colors, screen control and raw mode"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "ansi", "escape-codes", "color", "tty", "raw-mode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ansiterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
