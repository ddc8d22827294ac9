[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpad"
version = "0.1.0"
description = "A small terminal notepad that keeps its text in a two-dimensional linked grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["notepad", "text editor", "terminal", "curses", "linked list", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridpad = "gridpad.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
