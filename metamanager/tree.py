"""A generic tree of nodes, its traversal and its JSON encoding."""

from __future__ import annotations

import base64
import json
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Protocol


class InfoSerializer(Protocol):
    """Encodes and decodes the payload stored in each tree node."""

    def info_marshal(self, info: Any) -> tuple[bytes, str]:
        """Encode *info*, returning its bytes and a tag naming its kind."""

    def info_unmarshal(self, data: bytes, serialization_info: str) -> Any:
        """Decode bytes produced by info_marshal back into a payload."""


def _encode_bytes(data: Optional[bytes]) -> Optional[str]:
    if data is None:
        return None
    return base64.b64encode(data).decode("ascii")


def _decode_bytes(text: Optional[str]) -> bytes:
    if text is None:
        return b""
    if not isinstance(text, str):
        raise ValueError("expected a base64 string in tree node document")
    return base64.b64decode(text, validate=True)


@dataclass(eq=False)
class TreeNode:
    """A node holding an arbitrary payload and an ordered list of children."""

    info: Any = None
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, node: TreeNode) -> None:
        """Append *node* to this node's children."""
        self.children.append(node)

    def to_json(self, serializer: InfoSerializer) -> bytes:
        """Encode this subtree as JSON using *serializer* for payloads.

        Payload and child documents are stored as base64 strings under
        "Info" and "Children"; a node without children has null children.
        """
        info_bytes, kind = serializer.info_marshal(self.info)
        children = [
            _encode_bytes(child.to_json(serializer)) for child in self.children
        ]
        document = {
            "Info": _encode_bytes(info_bytes),
            "Children": children or None,
            "SerializationInfo": kind,
        }
        return json.dumps(document, separators=(",", ":")).encode("utf-8")

    @classmethod
    def from_json(
        cls, data: bytes | str, serializer: InfoSerializer
    ) -> TreeNode:
        """Decode a subtree written by to_json."""
        document = json.loads(data)
        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ValueError("tree node document must be a JSON object")
        info = serializer.info_unmarshal(
            _decode_bytes(document.get("Info")),
            document.get("SerializationInfo") or "",
        )
        node = cls(info)
        for child in document.get("Children") or []:
            node.children.append(cls.from_json(_decode_bytes(child), serializer))
        return node


def walk(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes of the tree under *root* breadth first.

    Children that are None or carry no payload are skipped together with
    everything below them.
    """
    if root is None:
        return
    queue: deque[TreeNode] = deque([root])
    while queue:
        node = queue.popleft()
        queue.extend(
            child
            for child in node.children
            if child is not None and child.info is not None
        )
        yield node


def count_nodes(root: Optional[TreeNode]) -> int:
    """Number of nodes that walk() visits."""
    return sum(1 for _ in walk(root))