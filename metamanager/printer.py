"""Rendering nested lists and the tracked tree as text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Any, Callable, Iterable, NamedTuple, Optional

from metamanager.errors import InvalidOperationError
from metamanager.nodes import GeneralNode
from metamanager.tree import TreeNode


class _StyleChars(NamedTuple):
    item_single: str
    item_top: str
    item_first: str
    item_middle: str
    item_vertical: str
    item_bottom: str


class ListStyle(Enum):
    """Bullet and connector characters used when rendering a list."""

    DEFAULT = _StyleChars("*", "*", "*", "*", "  ", "*")
    CONNECTED_LIGHT = _StyleChars("──", "┌─", "├─", "├─", "│  ", "└─")


@dataclass
class _Item:
    text: str
    level: int


class ListWriter:
    """Collects items at indentation levels and renders them as a list."""

    def __init__(self, style: ListStyle = ListStyle.DEFAULT) -> None:
        self.style = style
        self._items: list[_Item] = []
        self._level = 0

    def append_item(self, item: Any) -> None:
        """Add *item* at the current indentation level."""
        self._items.append(_Item(str(item), self._level))

    def indent(self) -> None:
        """Shift following items right, at most one level past the last item."""
        if self._items and self._level <= self._items[-1].level:
            self._level += 1

    def unindent(self) -> None:
        """Shift following items one level left, never below zero."""
        if self._level > 0:
            self._level -= 1

    def _has_more_in_level(self, level: int, index: int) -> bool:
        for item in islice(self._items, index + 1, None):
            if item.level < level:
                return False
            if item.level == level:
                return True
        return False

    def _bullet(self, index: int, item: _Item) -> tuple[str, bool]:
        chars = self.style.value
        is_top = index == 0
        is_first = is_top or item.level > self._items[index - 1].level
        is_last = not self._has_more_in_level(item.level, index)
        is_bottom = index == len(self._items) - 1
        if is_first and is_last:
            bullet = chars.item_single if is_top else chars.item_bottom
        elif is_top:
            bullet = chars.item_top
        elif is_first:
            bullet = chars.item_first
        elif is_bottom or is_last:
            bullet = chars.item_bottom
        else:
            bullet = chars.item_middle
        return bullet, is_last

    def _render_item(self, index: int, item: _Item) -> Iterable[str]:
        vertical = self.style.value.item_vertical
        blank = " " * len(vertical)
        prefix = "".join(
            vertical if self._has_more_in_level(level, index) else blank
            for level in range(item.level)
        )
        bullet, is_last = self._bullet(index, item)
        first, *rest = item.text.split("\n")
        yield f"{prefix}{bullet} {first}"
        continuation = blank if is_last else vertical
        for line in rest:
            yield f"{prefix}{continuation}{line}"

    def render(self) -> str:
        """The list as text, one line per item line."""
        return "\n".join(
            line
            for index, item in enumerate(self._items)
            for line in self._render_item(index, item)
        )


def node_name(abs_path: str) -> str:
    """Last component of a slash separated path."""
    return abs_path.split("/")[-1]


def _print_node(info: GeneralNode, writer: ListWriter) -> None:
    writer.append_item(node_name(info.abs_path))


def _print_tags(info: GeneralNode, writer: ListWriter) -> None:
    writer.indent()
    if info.tags:
        writer.append_item("<tags>")
        writer.indent()
        for tag in info.tags:
            writer.append_item(tag)
        writer.unindent()
    writer.unindent()


def _print_id(info: GeneralNode, writer: ListWriter) -> None:
    if info.id:
        writer.indent()
        writer.append_item("id: " + info.id)
        writer.unindent()


_PRINTERS: dict[str, tuple[Callable[[GeneralNode, ListWriter], None], str]] = {
    "node": (_print_node, "NodePrinter"),
    "tags": (_print_tags, "TagsPrinter"),
    "id": (_print_id, "IdPrinter"),
}


def build_printer(kinds: Iterable[str], info: Any) -> Callable[[ListWriter], None]:
    """Function writing the parts of *info* named by *kinds*, in order."""
    steps = []
    for kind in kinds:
        if kind not in _PRINTERS:
            raise ValueError(f"unimplemented printing kind: {kind}")
        printer, role = _PRINTERS[kind]
        if not isinstance(info, GeneralNode):
            raise TypeError(f"info not convertible to {role}")
        steps.append(printer)

    def print_info(writer: ListWriter) -> None:
        for step in steps:
            step(info, writer)

    return print_info


class TreePrinter:
    """Renders a tracked tree as a connected list."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self.root = root

    def render(self, kinds: Iterable[str]) -> str:
        """Render every node, showing the parts named by *kinds*."""
        if self.root is None:
            raise InvalidOperationError("no tree to print")
        writer = ListWriter(ListStyle.CONNECTED_LIGHT)
        self._render_node(list(kinds), self.root, writer)
        return writer.render()

    def _render_node(
        self, kinds: list[str], node: TreeNode, writer: ListWriter
    ) -> None:
        build_printer(kinds, node.info)(writer)
        writer.indent()
        for child in node.children:
            self._render_node(kinds, child, writer)
        writer.unindent()