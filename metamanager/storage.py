"""Reading and writing the tracked tree."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from metamanager.errors import InvalidOperationError, UninitializedRootError
from metamanager.nodes import FileNodeJSONSerializer
from metamanager.paths import DATA_FILE_NAME, find_mm_dir_path, save_to_file
from metamanager.tree import TreeNode


class TreeStorage(ABC):
    """A place the tracked tree can be read from and written to."""

    @abstractmethod
    def read(self) -> TreeNode:
        """Return the stored tree."""

    @abstractmethod
    def write(self, root: TreeNode) -> None:
        """Store the tree rooted at *root*."""


@dataclass
class FileStorage(TreeStorage):
    """Stores the tree as JSON in a single data file."""

    data_file_path: str

    def read(self) -> TreeNode:
        """Read and decode the tree from the data file."""
        with open(self.data_file_path, "rb") as handle:
            data = handle.read()
        return TreeNode.from_json(data, FileNodeJSONSerializer())

    def write(self, root: Optional[TreeNode]) -> None:
        """Encode the tree and replace the data file's content with it."""
        if root is None:
            raise InvalidOperationError("cannot store an empty tree")
        save_to_file(self.data_file_path, root.to_json(FileNodeJSONSerializer()))


def get_storage() -> FileStorage:
    """Storage backed by the data file of the governing .mm directory."""
    mm_dir = find_mm_dir_path()
    if mm_dir is None:
        raise UninitializedRootError()
    return FileStorage(os.path.join(mm_dir, DATA_FILE_NAME))