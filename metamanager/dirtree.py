"""Operations on the tree of tracked files and directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable, Optional

from metamanager.errors import (
    InvalidOperationError,
    NodeNotFoundError,
    UnexpectedError,
)
from metamanager.nodes import GeneralNode, create_tree_node_from_path
from metamanager.tree import TreeNode, walk


def _node_info(node: TreeNode) -> GeneralNode:
    info = node.info
    if not isinstance(info, GeneralNode):
        raise UnexpectedError()
    return info


def _parent_path(path: str) -> str:
    return os.path.normpath(os.path.join(path, os.pardir))


def _paths_between(root_path: str, path: str) -> list[str]:
    """Paths from just below *root_path* down to *path*, outermost first."""
    chain: list[str] = []
    current = path
    while current and current != root_path:
        chain.append(current)
        parent = _parent_path(current)
        if parent == current or os.path.basename(parent) == os.pardir:
            raise InvalidOperationError(
                f"path {path} is not under the tracked root {root_path}"
            )
        current = parent
    chain.reverse()
    return chain


@dataclass
class DirTreeManager:
    """Owns the tree of tracked nodes, rooted at the managed directory."""

    root: Optional[TreeNode] = None

    def split_children_from_path(self, path: str) -> None:
        """Stop tracking everything below the node at *path*."""
        self.find_tree_node_by_abs_path(path).children = []

    def split_node_with_path(self, path: str) -> None:
        """Stop tracking the node at *path* together with its subtree."""
        if self.root is None:
            raise InvalidOperationError()
        if _node_info(self.root).abs_path == path:
            self.root = None
            return
        parent = self.find_tree_node_by_abs_path(_parent_path(path))
        parent.children = [
            child for child in parent.children if _node_info(child).abs_path != path
        ]

    def merge_node_with_path(self, path: str) -> None:
        """Track the existing file or directory at *path*."""
        self.merge_node(create_tree_node_from_path(path))

    def merge_node(self, tree_node: Optional[TreeNode]) -> None:
        """Merge every node of *tree_node* into the tracked tree.

        Missing intermediate directories are created from the file system.
        """
        if tree_node is None:
            raise InvalidOperationError()
        if self.root is None:
            self.root = tree_node
            return
        root_path = _node_info(self.root).abs_path
        for node in walk(tree_node):
            path = _node_info(node).abs_path
            self._create_path_nodes(_paths_between(root_path, path))

    def _create_path_nodes(self, paths: Iterable[str]) -> None:
        current = self.root
        if current is None:
            raise InvalidOperationError()
        for path in paths:
            for child in current.children:
                if _node_info(child).abs_path == path:
                    following = child
                    break
            else:
                following = create_tree_node_from_path(path)
                current.children.append(following)
            current = following

    def find_tree_node_by_id(self, node_id: str) -> TreeNode:
        """Tree node whose payload carries *node_id*."""
        for node in walk(self.root):
            info = node.info
            if not isinstance(info, GeneralNode):
                raise UnexpectedError("info not convertiable to NodeInformable")
            if info.id == node_id:
                return node
        raise NodeNotFoundError()

    def find_file_node_by_id(self, node_id: str) -> GeneralNode:
        """Payload of the node carrying *node_id*."""
        return _node_info(self.find_tree_node_by_id(node_id))

    def find_tree_node_by_abs_path(self, path: str) -> TreeNode:
        """Tree node tracking the absolute *path*."""
        for node in walk(self.root):
            if _node_info(node).abs_path == path:
                return node
        raise NodeNotFoundError()

    def find_node_by_abs_path(self, path: str) -> GeneralNode:
        """Payload of the node tracking the absolute *path*."""
        return _node_info(self.find_tree_node_by_abs_path(path))