"""Tags and ids on tracked nodes, and listing of the tracked tree."""

from __future__ import annotations

import os

from metamanager.dirtree import DirTreeManager
from metamanager.errors import InvalidOperationError, NodeNotFoundError
from metamanager.printer import TreePrinter
from metamanager.storage import get_storage
from metamanager.tags import TagManager

EMPTY_ID = "<empty>"


def _load_tree() -> tuple[DirTreeManager, object]:
    storage = get_storage()
    return DirTreeManager(storage.read()), storage


def tag_add(path: str, tag: str) -> None:
    """Add *tag* to the tracked node at *path* and store the tree."""
    tree, storage = _load_tree()
    tags = TagManager(tree)
    tags.add_tag(os.path.abspath(path), tag)
    tags.save(storage)


def tag_delete(path: str, tag: str) -> None:
    """Remove *tag* from the tracked node at *path* and store the tree."""
    abs_path = os.path.abspath(path)
    tree, storage = _load_tree()
    tags = TagManager(tree)
    tags.delete_tag(abs_path, tag)
    tags.save(storage)


def tag_get(tag: str) -> list[str]:
    """Absolute paths of the tracked nodes carrying *tag*."""
    tree, _ = _load_tree()
    return TagManager(tree).get_tagged_nodes(tag)


def node_tags(path: str) -> list[str]:
    """Tags of the tracked node at *path*."""
    tree, _ = _load_tree()
    return TagManager(tree).get_node_tags(os.path.abspath(path))


def id_set(path: str, node_id: str) -> None:
    """Give the tracked node at *path* the id *node_id* and store the tree.

    Raises InvalidOperationError if another node already has that id.
    """
    abs_path = os.path.abspath(path)
    tree, storage = _load_tree()
    try:
        holder = tree.find_file_node_by_id(node_id)
    except NodeNotFoundError:
        pass
    else:
        raise InvalidOperationError(
            f"id: {node_id} is already set for node {holder.abs_path}"
        )
    tree.find_node_by_abs_path(abs_path).id = node_id
    storage.write(tree.root)


def id_get(path: str) -> str:
    """Id of the tracked node at *path*, or "<empty>" when none is set."""
    tree, _ = _load_tree()
    node_id = tree.find_node_by_abs_path(os.path.abspath(path)).id
    return node_id or EMPTY_ID


def id_jump(node_id: str) -> str:
    """Absolute path of the tracked node carrying *node_id*."""
    tree, _ = _load_tree()
    return tree.find_file_node_by_id(node_id).abs_path


def render_tracks(show_tags: bool, show_ids: bool) -> str:
    """Render the tracked tree below the working directory."""
    tree, _ = _load_tree()
    start = tree.find_tree_node_by_abs_path(os.getcwd())
    kinds = ["node"]
    if show_ids:
        kinds.append("id")
    if show_tags:
        kinds.append("tags")
    return TreePrinter(start).render(kinds)