"""Command line interface for managing tracked paths, tags and ids."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Callable, Optional, Sequence

from metamanager.annotate import (
    id_get,
    id_jump,
    id_set,
    node_tags,
    render_tracks,
    tag_add,
    tag_delete,
    tag_get,
)
from metamanager.config import IgnoreManager
from metamanager.errors import (
    InvalidNumberOfArgumentsError,
    MetaManagerError,
    UninitializedRootError,
    error_occurred_message,
)
from metamanager.paths import is_root_initialized, require_initialized
from metamanager.printer import ListStyle, ListWriter
from metamanager.tracking import init_root, track_path, untrack_path

PROG = "PathTracer"

_REPORTED_ERRORS = (MetaManagerError, OSError, ValueError, TypeError)

Action = Callable[[argparse.Namespace], Optional[str]]


class _UsageError(Exception):
    """Raised when the command line cannot be parsed."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        raise _UsageError(message)


def _command(
    action: Action,
    arity: Optional[int] = None,
    success: Optional[str] = None,
    needs_root: bool = True,
) -> Callable[[argparse.Namespace], None]:
    """Wrap *action* with argument checks and error reporting."""

    def handler(namespace: argparse.Namespace) -> None:
        try:
            if arity is not None and len(namespace.args) != arity:
                raise InvalidNumberOfArgumentsError()
            if needs_root:
                require_initialized()
            output = action(namespace)
        except _REPORTED_ERRORS as error:
            print(error)
            return
        if output is not None:
            print(output)
        if success is not None:
            print(success)

    return handler


def _render_list(items: Sequence[str]) -> str:
    writer = ListWriter(ListStyle.DEFAULT)
    for item in items:
        writer.append_item(item)
    return writer.render()


def _run_init(namespace: argparse.Namespace) -> None:
    if len(namespace.args) != 1:
        print(error_occurred_message(), " The command expects only 1 argument")
        return
    try:
        init_root(namespace.args[0])
    except _REPORTED_ERRORS as error:
        print(error_occurred_message(), error)
        return
    print("Root path initialized successfully")


def _ignore_add(namespace: argparse.Namespace) -> None:
    if not namespace.args:
        raise InvalidNumberOfArgumentsError()
    if not is_root_initialized():
        raise UninitializedRootError()
    manager = IgnoreManager.for_current_root()
    manager.load()
    manager.add(os.path.abspath(namespace.args[0]))
    manager.save()


def _ignore_list(namespace: argparse.Namespace) -> str:
    if not is_root_initialized():
        raise UninitializedRootError()
    manager = IgnoreManager.for_current_root()
    manager.load()
    return _render_list(manager.paths)


def _tag_delete(namespace: argparse.Namespace) -> str:
    path, tag = namespace.args
    tag_delete(path, tag)
    return f"tag {tag} deleted successfully"


def _node_list_tags(namespace: argparse.Namespace) -> str:
    return "[" + " ".join(node_tags(namespace.args[0])) + "]"


def _add_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("args", nargs="*")


def _message(text: str) -> Callable[[argparse.Namespace], None]:
    def handler(_: argparse.Namespace) -> None:
        print(text)

    return handler


def _help_of(parser: argparse.ArgumentParser) -> Callable[[argparse.Namespace], None]:
    def handler(_: argparse.Namespace) -> None:
        parser.print_help()

    return handler


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for every command and sub-command."""
    root = _Parser(prog=PROG, description="Manage your paths using this!")
    root.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    root.set_defaults(handler=_help_of(root))
    commands = root.add_subparsers(title="commands", parser_class=_Parser)

    init = commands.add_parser(
        "init", help="Initializes the root of the directory which you want manage"
    )
    _add_args(init)
    init.set_defaults(handler=_run_init)

    track = commands.add_parser(
        "track", help="Starts tracking a file/folder/all-files-and-folder-at-a-loc"
    )
    _add_args(track)
    track.set_defaults(
        handler=_command(
            lambda ns: track_path(ns.args[0]),
            arity=1,
            success="Location tracked successfully",
        )
    )

    untrack = commands.add_parser(
        "untrack", help="Untracks an entire subtree rooted at node"
    )
    _add_args(untrack)
    untrack.set_defaults(
        handler=_command(
            lambda ns: untrack_path(ns.args[0]),
            arity=1,
            success="Location untracked successfully",
        )
    )

    id_parser = commands.add_parser(
        "id",
        help="id is an unique string which can be assigned to any node "
        "and used later for searching",
    )
    id_parser.set_defaults(handler=_message("id called"))
    id_commands = id_parser.add_subparsers(parser_class=_Parser)
    id_get_parser = id_commands.add_parser(
        "get", help="Gets the id of the file/dir. Return <empty> if no id set"
    )
    _add_args(id_get_parser)
    id_get_parser.set_defaults(
        handler=_command(lambda ns: id_get(ns.args[0]), arity=1)
    )
    id_jump_parser = id_commands.add_parser(
        "jump", help="Jumps to the dir path or parent of a file"
    )
    _add_args(id_jump_parser)
    id_jump_parser.set_defaults(
        handler=_command(lambda ns: id_jump(ns.args[0]), arity=1)
    )
    id_set_parser = id_commands.add_parser("set", help="Sets id for a particular node")
    _add_args(id_set_parser)
    id_set_parser.set_defaults(
        handler=_command(
            lambda ns: id_set(ns.args[0], ns.args[1]),
            arity=2,
            success="id set successfully",
        )
    )

    ignore = commands.add_parser("ignore", help="Ignore list commands")
    ignore.set_defaults(handler=_help_of(ignore))
    ignore_commands = ignore.add_subparsers(parser_class=_Parser)
    ignore_add = ignore_commands.add_parser(
        "ignoreAdd", aliases=["add"], help="Adds a path to the ignore list"
    )
    _add_args(ignore_add)
    ignore_add.set_defaults(
        handler=_command(
            _ignore_add, success="Path added to ignore list", needs_root=False
        )
    )
    ignore_list = ignore_commands.add_parser(
        "ignoreList", aliases=["list"], help="Lists the ignored paths"
    )
    _add_args(ignore_list)
    ignore_list.set_defaults(handler=_command(_ignore_list, needs_root=False))

    node = commands.add_parser(
        "node", aliases=["ls"], help="Node : {file | dir} cmds"
    )
    node.set_defaults(handler=_message("node called"))
    node_commands = node.add_subparsers(parser_class=_Parser)
    list_tag = node_commands.add_parser(
        "listTag", aliases=["lt", "tag"], help="List tags of a file/dir"
    )
    _add_args(list_tag)
    list_tag.set_defaults(handler=_command(_node_list_tags, arity=1))
    list_tracks = node_commands.add_parser(
        "nodeListTrack",
        aliases=["ltrack", "ltr", "tr", "tracks"],
        help="Lists all the tracked files/dirs from a particular root "
        "in a tree structure",
    )
    _add_args(list_tracks)
    list_tracks.add_argument(
        "-t", "--tag", action="store_true",
        help="flag to enrich the listing with tags for each node",
    )
    list_tracks.add_argument(
        "-i", "--id", action="store_true",
        help="flag to enrich the listing with id for each node",
    )
    list_tracks.set_defaults(
        handler=_command(lambda ns: render_tracks(ns.tag, ns.id))
    )

    tag = commands.add_parser("tag", help="Tagging related commands")
    tag.set_defaults(handler=_help_of(tag))
    tag_commands = tag.add_subparsers(parser_class=_Parser)
    tag_add_parser = tag_commands.add_parser(
        "tagAdd", aliases=["add"], help="Adds tag to a file/dir"
    )
    _add_args(tag_add_parser)
    tag_add_parser.set_defaults(
        handler=_command(
            lambda ns: tag_add(ns.args[0], ns.args[1]),
            arity=2,
            success="Tag added successfully",
        )
    )
    tag_delete_parser = tag_commands.add_parser(
        "tagDelete", aliases=["delete"],
        help="Deletes tag from a node (i.e., file/dir)",
    )
    _add_args(tag_delete_parser)
    tag_delete_parser.set_defaults(handler=_command(_tag_delete, arity=2))
    tag_get_parser = tag_commands.add_parser(
        "tagGet", aliases=["get"], help="Gets files/dirs with a particular tag"
    )
    _add_args(tag_get_parser)
    tag_get_parser.set_defaults(
        handler=_command(lambda ns: _render_list(tag_get(ns.args[0])), arity=1)
    )

    return root


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    parser = build_parser()
    try:
        namespace = parser.parse_args(argv)
    except _UsageError:
        return 1
    except SystemExit as done:
        return done.code if isinstance(done.code, int) else 0
    namespace.handler(namespace)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())