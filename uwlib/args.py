"""Parsing of key=value command-line arguments."""

from .map import Map


def parse_kvargs(argv):
    """Turn argv into a Map.

    argv[0] is stored under the integer key 0. Each other argument is
    split at its first '='; an argument without '=' maps to None. Later
    duplicates overwrite earlier values.
    """
    kwargs = Map()
    argv = list(argv)
    if not argv:
        return kwargs
    kwargs[0] = argv[0]
    for arg in argv[1:]:
        if isinstance(arg, (bytes, bytearray)):
            arg = bytes(arg).decode("utf-8")
        key, sep, value = arg.partition("=")
        kwargs[key] = value if sep else None
    return kwargs