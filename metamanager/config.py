"""The root configuration and the list of ignored paths."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field

from metamanager.paths import IGNORE_FILE_NAME, get_abs_mm_dir_path


@dataclass
class Config:
    """Configuration written into .mm/config.json at initialisation."""

    root_path: str

    def to_json(self) -> bytes:
        """Encode the configuration as JSON."""
        return json.dumps(
            {"RootPath": self.root_path}, separators=(",", ":")
        ).encode("utf-8")


def default_ignore_file_path() -> str:
    """Absolute path of the ignore file in the current directory's .mm."""
    return os.path.abspath(get_abs_mm_dir_path() + "/" + IGNORE_FILE_NAME)


@dataclass
class IgnoreManager:
    """Holds the ignored absolute paths and persists them as JSON."""

    ignore_file_path: str
    paths: list[str] = field(default_factory=list)

    @classmethod
    def for_current_root(cls) -> IgnoreManager:
        """Manager bound to the ignore file under the current directory."""
        return cls(default_ignore_file_path())

    def load(self) -> None:
        """Read the ignored paths from the ignore file.

        Raises OSError if the file cannot be read and ValueError if it
        does not hold a JSON object.
        """
        with open(self.ignore_file_path, "rb") as handle:
            document = json.loads(handle.read())
        if document is None:
            return
        if not isinstance(document, dict):
            raise ValueError("ignore file must hold a JSON object")
        if "Paths" in document:
            paths = document["Paths"] or []
            if not isinstance(paths, list):
                raise ValueError("ignored paths must be a JSON array")
            self.paths = [str(path) for path in paths]

    def save(self) -> None:
        """Write the ignored paths to the ignore file."""
        document = {"Paths": list(self.paths) if self.paths else None}
        with open(self.ignore_file_path, "wb") as handle:
            handle.write(json.dumps(document, separators=(",", ":")).encode("utf-8"))

    def add(self, path: str) -> None:
        """Append *path* to the ignored paths."""
        self.paths.append(path)