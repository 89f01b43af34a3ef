# metamanager

A small command-line tool for keeping track of files and directories under a
chosen root directory. Tracked files and directories can carry tags and a unique
id, which you can later use to find them again or to print their path.

All state lives in a `.mm` directory at the root. `init` creates these files in
it:

- `config.json`: the root path, as `{"RootPath": ...}`
- `data.json`: the tracked tree, with tags and ids
- `ignore.json`: a list of ignored paths (created empty)

Most commands look for `.mm` in the current directory and then in each parent
directory in turn, so they work from anywhere below the root. When the
environment variable `MM_TEST_ENV_DIR` is set, the search starts there instead
of in the working directory. The `ignore` commands are the exception: they only
look for `.mm` in the current directory.

## Installation

```
pip install .
```

This installs the `metamanager` command. No third-party libraries are needed.

## Usage

Initialize a root. The tracked tree then holds only the root directory itself:

```
metamanager init /path/to/project
```

Track a single file or directory, or a whole directory tree. For a tree, end the
path with `*` and put it in quotes. Any directories between the root and the
tracked path are added to the tree as well:

```
metamanager track /path/to/project/notes.txt
metamanager track "/path/to/project/src*"
```

Stop tracking a node and everything below it. With a trailing `*`, only the
children of the directory are dropped. Untracking the root itself is refused.

```
metamanager untrack /path/to/project/src
metamanager untrack "/path/to/project/build*"
```

Tag tracked files and directories, find them again by tag, and list the tags of
one node. `tag add` does not add a tag a node already has.

```
metamanager tag add notes.txt important
metamanager tag get important
metamanager tag delete notes.txt important
metamanager node listTag notes.txt
```

The long names `tagAdd`, `tagGet` and `tagDelete` work too, and `node` has the
alias `ls`, `listTag` the aliases `lt` and `tag`.

Give a node an id, read it back (`<empty>` when none is set), and print the
path of the node that has an id. An id already used by another node is refused.

```
metamanager id set src/app main-app
metamanager id get src/app
metamanager id jump main-app
```

Show the tracked tree below the current directory (which must itself be
tracked), with ids and tags if you ask for them:

```
metamanager node tracks --id --tag
```

`nodeListTrack`, `ltrack`, `ltr` and `tr` are other names for `tracks`; `-i`
and `-t` are the short flags.

Add a path to the ignore list, and show the list:

```
metamanager ignore add build
metamanager ignore list
```

`ignore.json` starts out empty, and both `ignore` commands need it to hold a
JSON object, so write `{}` into `.mm/ignore.json` before the first `ignore add`.

Errors are printed on standard output and the command still exits with status
0; only a command line that cannot be parsed gives status 1.

## Using it from Python

The commands are thin wrappers over plain functions that raise exceptions from
`metamanager.errors` (all derived from `MetaManagerError`):

- `metamanager.tracking`: `init_root`, `track_path`, `untrack_path`,
  `remove_subtree`
- `metamanager.annotate`: `tag_add`, `tag_delete`, `tag_get`, `node_tags`,
  `id_set`, `id_get`, `id_jump`, `render_tracks`
- `metamanager.dirtree.DirTreeManager`: merging, splitting and looking up
  nodes of the tracked tree
- `metamanager.storage`: `get_storage` and `FileStorage`, which read and write
  `data.json`
- `metamanager.printer`: `ListWriter` and `TreePrinter` for text rendering

## What it does not do

- The ignore list is stored and loaded when a directory is scanned, but
  scanning does not yet skip the paths on it: every file and directory below a
  `*` path is tracked.
- There is no way to re-initialize a root that already has a `.mm` directory.

## Running the tests

```
pip install ".[test]"
pytest
```