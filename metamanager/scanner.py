"""Building tree nodes from the file system."""

from __future__ import annotations

import os

from metamanager.config import IgnoreManager
from metamanager.errors import InvalidPathError
from metamanager.nodes import DirNode, FileNode, create_tree_node_from_path
from metamanager.paths import is_file_present
from metamanager.tree import TreeNode


class PathIgnorer:
    """Decides whether an absolute path is on the ignore list."""

    def __init__(self, ignore_manager: IgnoreManager) -> None:
        self.ignore_manager = ignore_manager

    def should_ignore(self, path: str) -> bool:
        """Return whether *path* is one of the ignored paths."""
        return path in self.ignore_manager.paths


class ScanHandler:
    """Attaches nodes discovered while scanning to their parents."""

    def __init__(self, ignorer: PathIgnorer) -> None:
        self.ignorer = ignorer

    def handle(self, parent: TreeNode, child: TreeNode) -> None:
        """Attach *child* below *parent*."""
        parent.add_child(child)


def scan_directory(dir_path: str) -> TreeNode:
    """Build the tree of everything at and below the directory *dir_path*."""
    if not is_file_present(dir_path):
        raise InvalidPathError()
    abs_path = os.path.abspath(dir_path)
    top = DirNode(abs_path=abs_path, entry=os.stat(abs_path))

    ignore_manager = IgnoreManager.for_current_root()
    try:
        ignore_manager.load()
    except (OSError, ValueError):
        # A missing or empty ignore file simply means nothing is ignored.
        pass
    handler = ScanHandler(PathIgnorer(ignore_manager))

    return _scan_dir(top, handler)


def _scan_dir(info: DirNode, handler: ScanHandler) -> TreeNode:
    node = TreeNode(info)
    with os.scandir(info.abs_path) as iterator:
        entries = sorted(iterator, key=lambda entry: entry.name)

    for entry in entries:
        child_path = os.path.abspath(info.abs_path + "/" + entry.name)
        stat = entry.stat(follow_symlinks=False)
        if entry.is_dir(follow_symlinks=False):
            child = _scan_dir(DirNode(abs_path=child_path, entry=stat), handler)
        else:
            child = TreeNode(FileNode(abs_path=child_path, entry=stat))
        handler.handle(node, child)

    return node


def track(path: str) -> TreeNode:
    """Build the node or subtree that *path* asks to be tracked.

    A plain path gives a single node; a path ending in "*" gives the whole
    subtree of that directory.
    """
    if not path:
        raise InvalidPathError()
    if path.endswith("*"):
        return scan_directory(os.path.abspath(path[:-1]))
    return create_tree_node_from_path(os.path.abspath(path))