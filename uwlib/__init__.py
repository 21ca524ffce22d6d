"""Arrays, ordered maps, line readers, files, timestamps, argument parsing and debug dumps."""

__version__ = "0.1.0"

__all__ = ["errors", "array", "interfaces", "iterator", "timestamp", "map", "args", "file", "dump"]