"""Track, tag and give ids to files and directories under a managed root."""

__version__ = "0.1.0"