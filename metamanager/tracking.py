"""Initialising a managed root and tracking or untracking paths in it."""

from __future__ import annotations

import os

from metamanager.config import Config
from metamanager.dirtree import DirTreeManager
from metamanager.errors import (
    ActionForbiddenError,
    AlreadyInitializedError,
    InvalidPathError,
    UnexpectedError,
)
from metamanager.paths import (
    CONFIG_FILE_NAME,
    DATA_FILE_NAME,
    IGNORE_FILE_NAME,
    MM_DIR_NAME,
    find_root_dir,
    is_file_present,
    save_to_file,
)
from metamanager.scanner import track
from metamanager.storage import get_storage


def init_root(loc: str) -> None:
    """Create the .mm directory for *loc* and store a tree holding only it."""
    if not is_file_present(loc):
        raise InvalidPathError()
    dir_path = os.path.abspath(loc)
    config_dir = os.path.join(dir_path, MM_DIR_NAME)
    if is_file_present(config_dir):
        raise AlreadyInitializedError()

    os.mkdir(config_dir, 0o755)
    for name in (CONFIG_FILE_NAME, IGNORE_FILE_NAME, DATA_FILE_NAME):
        save_to_file(os.path.join(config_dir, name), b"")

    save_to_file(
        os.path.join(config_dir, CONFIG_FILE_NAME),
        Config(root_path=dir_path).to_json(),
    )

    storage = get_storage()
    manager = DirTreeManager()
    manager.merge_node_with_path(dir_path)
    storage.write(manager.root)


def track_path(path_exp: str) -> None:
    """Start tracking *path_exp*; a trailing "*" tracks a whole directory."""
    storage = get_storage()
    manager = DirTreeManager(storage.read())
    manager.merge_node(track(path_exp))
    storage.write(manager.root)


def remove_subtree(path_exp: str, manager: DirTreeManager) -> None:
    """Untrack *path_exp* in *manager*.

    A trailing "*" untracks only what lies below the directory; otherwise
    the node and its subtree are untracked. The root cannot be untracked.
    """
    if not path_exp:
        raise InvalidPathError()
    if path_exp.endswith("*"):
        manager.split_children_from_path(os.path.abspath(path_exp[:-1]))
        return

    abs_path = os.path.abspath(path_exp)
    root_dir = find_root_dir()
    if root_dir is None:
        raise UnexpectedError()
    if abs_path == root_dir:
        raise ActionForbiddenError("untracking root folder is not allowed")
    manager.split_node_with_path(abs_path)


def untrack_path(path_exp: str) -> None:
    """Stop tracking *path_exp* and store the result."""
    storage = get_storage()
    manager = DirTreeManager(storage.read())
    remove_subtree(path_exp, manager)
    storage.write(manager.root)