"""Locating the .mm directory and small file-system helpers."""

from __future__ import annotations

import os

from metamanager.errors import UninitializedRootError

IGNORE_FILE_NAME = "ignore.json"
DATA_FILE_NAME = "data.json"
CONFIG_FILE_NAME = "config.json"
MM_DIR_NAME = ".mm"

ENV_DIR_VARIABLE = "MM_TEST_ENV_DIR"


def is_file_present(path: str | os.PathLike[str]) -> bool:
    """Return whether a file or directory exists at *path*.

    Errors other than the path not existing are raised.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def is_root_initialized() -> bool:
    """Return whether the current directory holds a .mm directory."""
    return is_file_present(os.path.join(".", MM_DIR_NAME))


def get_abs_mm_dir_path() -> str:
    """Absolute path of the .mm directory inside the current directory."""
    return os.path.abspath(os.path.join(".", MM_DIR_NAME))


def is_file_empty(path: str | os.PathLike[str]) -> bool:
    """Return whether the file at *path* has size zero."""
    return os.stat(path).st_size == 0


def is_mm_dir_present(path: str | os.PathLike[str]) -> bool:
    """Return whether *path* directly contains a .mm directory."""
    return is_file_present(os.path.abspath(os.path.join(path, MM_DIR_NAME)))


def find_mm_dir_path_from(path: str | os.PathLike[str]) -> str | None:
    """Search *path* and its ancestors for a .mm directory.

    Returns the absolute path of the first one found, or None.
    """
    current = os.fspath(path)
    while True:
        if is_mm_dir_present(current):
            return os.path.abspath(os.path.join(current, MM_DIR_NAME))
        parent = os.path.dirname(current)
        if parent == current:
            return None
        current = parent


def find_mm_dir_path() -> str | None:
    """Find the .mm directory governing the working directory.

    The MM_TEST_ENV_DIR environment variable, when set, replaces the
    working directory as the starting point.
    """
    start = os.environ.get(ENV_DIR_VARIABLE) or os.getcwd()
    return find_mm_dir_path_from(start)


def find_root_dir() -> str | None:
    """Return the managed root directory (the parent of .mm), or None."""
    mm_dir = find_mm_dir_path()
    if mm_dir is None:
        return None
    return os.path.normpath(os.path.join(mm_dir, ".."))


def save_to_file(location: str | os.PathLike[str], data: bytes) -> None:
    """Write *data* to *location*, replacing any existing content."""
    with open(location, "wb") as handle:
        handle.write(data)


def require_initialized() -> str:
    """Return the .mm directory path or raise UninitializedRootError."""
    mm_dir = find_mm_dir_path()
    if mm_dir is None:
        raise UninitializedRootError()
    return mm_dir