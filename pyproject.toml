[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "guart"
version = "0.1.0"
description = "Text-mode widget toolkit that draws windows, lists and buttons with ANSI escape sequences."
requires-python = ">=3.10"
dependencies = []
keywords = ["tui", "terminal", "ansi", "widgets", "serial", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
guart-demo = "guart.app:main"

[tool.hatch.build.targets.wheel]
packages = ["guart"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
