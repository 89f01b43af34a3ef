"""Tagging tracked files and directories."""

from __future__ import annotations

from typing import Optional

from metamanager.dirtree import DirTreeManager
from metamanager.errors import InvalidOperationError, UnexpectedError
from metamanager.nodes import GeneralNode
from metamanager.storage import TreeStorage
from metamanager.tree import walk


class TagManager:
    """Adds, removes and looks up tags on the nodes of a tracked tree."""

    def __init__(self, tree: Optional[DirTreeManager]) -> None:
        self.tree = tree

    def _loaded_tree(self) -> DirTreeManager:
        if self.tree is None:
            raise InvalidOperationError("invalid operation, tree not loaded")
        return self.tree

    def add_tag(self, path: str, tag: str) -> None:
        """Tag the node tracking *path* with *tag*."""
        self._loaded_tree().find_node_by_abs_path(path).add_tag(tag)

    def delete_tag(self, path: str, tag: str) -> None:
        """Remove *tag* from the node tracking *path*."""
        self._loaded_tree().find_node_by_abs_path(path).delete_tag(tag)

    def get_tagged_nodes(self, tag: str) -> list[str]:
        """Absolute paths of all nodes carrying *tag*, breadth first."""
        result = []
        for node in walk(self._loaded_tree().root):
            info = node.info
            if not isinstance(info, GeneralNode):
                raise UnexpectedError()
            if tag in info.tags:
                result.append(info.abs_path)
        return result

    def get_node_tags(self, path: str) -> list[str]:
        """Tags of the node tracking *path*."""
        return list(self._loaded_tree().find_node_by_abs_path(path).tags)

    def save(self, storage: TreeStorage) -> None:
        """Write the tagged tree to *storage*."""
        storage.write(self._loaded_tree().root)