[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metamanager"
version = "0.1.0"
description = "Track files and directories under a root, tag them and give them ids for quick lookup"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "directories", "tags", "ids", "bookmarks", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metamanager = "metamanager.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["metamanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
