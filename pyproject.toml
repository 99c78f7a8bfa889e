[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fyle"
version = "0.1.0"
description = "Interactive console file manager that indexes a directory tree, shows it, searches file names and saves the index as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["file manager", "indexing", "search", "directory tree", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fyle = "fyle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fyle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
