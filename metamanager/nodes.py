"""File and directory payloads stored in the tracked tree."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, TypeVar

from metamanager.tree import TreeNode

_NodeT = TypeVar("_NodeT", bound="GeneralNode")


@dataclass
class GeneralNode:
    """Information shared by tracked files and directories."""

    kind: ClassVar[str] = "DIR"

    abs_path: str = ""
    tags: list[str] = field(default_factory=list)
    # A user friendly id that uniquely finds a node; empty means unset.
    id: str = ""
    entry: Optional[os.stat_result] = field(
        default=None, compare=False, repr=False
    )

    @property
    def name(self) -> str:
        """Kind of the node, "FILE" or "DIR"."""
        return self.kind

    def add_tag(self, tag: str) -> None:
        """Add *tag* unless the node already carries it."""
        if tag not in self.tags:
            self.tags.append(tag)

    def delete_tag(self, tag: str) -> None:
        """Remove every occurrence of *tag*."""
        self.tags = [existing for existing in self.tags if existing != tag]

    def to_json(self) -> bytes:
        """Encode the node as a JSON object with Parent, Tags and Id."""
        document = {
            "Parent": self.abs_path,
            "Tags": list(self.tags) if self.tags else None,
            "Id": self.id,
        }
        return json.dumps(document, separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_json(cls: type[_NodeT], data: bytes | str) -> _NodeT:
        """Decode a node written by to_json."""
        document = json.loads(data)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ValueError("node document must be a JSON object")
        tags = document.get("Tags") or []
        if not isinstance(tags, list):
            raise ValueError("node tags must be a JSON array")
        return cls(
            abs_path=document.get("Parent") or "",
            tags=[str(tag) for tag in tags],
            id=document.get("Id") or "",
        )


@dataclass
class FileNode(GeneralNode):
    """A tracked regular file."""

    kind: ClassVar[str] = "FILE"


@dataclass
class DirNode(GeneralNode):
    """A tracked directory."""

    kind: ClassVar[str] = "DIR"


class FileNodeJSONSerializer:
    """Serializer for tree payloads that are FileNode or DirNode."""

    def info_marshal(self, info: Any) -> tuple[bytes, str]:
        """Encode *info*, tagging it "FILE" for files and "DIR" otherwise."""
        if not isinstance(info, GeneralNode):
            raise TypeError(
                f"cannot serialize payload of type {type(info).__name__}"
            )
        kind = "FILE" if isinstance(info, FileNode) else "DIR"
        return info.to_json(), kind

    def info_unmarshal(self, data: bytes, serialization_info: str) -> GeneralNode:
        """Decode a payload of the kind named by *serialization_info*."""
        if serialization_info == "FILE":
            return FileNode.from_json(data)
        if serialization_info == "DIR":
            return DirNode.from_json(data)
        raise ValueError(
            f"unknown serializationInfo: {serialization_info} found"
        )


def create_tree_node(path: str, is_dir: bool) -> TreeNode:
    """Create a childless tree node for *path* of the given kind."""
    info: GeneralNode = DirNode(abs_path=path) if is_dir else FileNode(abs_path=path)
    return TreeNode(info)


def create_tree_node_from_path(path: str) -> TreeNode:
    """Create a tree node for an existing *path*, reading its kind from disk."""
    return create_tree_node(path, os.path.isdir(os.stat(path) and path))