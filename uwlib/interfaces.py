"""Registry of named interfaces and the line-reader protocol."""

from abc import ABC, abstractmethod

from .errors import EndOfFileError, panic

_MAX_INTERFACES = 0xFFFFFFFF - 1

_registered = []  # list of (name, method names)


def register_interface(name, methods):
    """Register an interface with the given method names and return its id."""
    if len(_registered) == _MAX_INTERFACES:
        panic("Cannot define more interfaces than %u\n", _MAX_INTERFACES)
    _registered.append((name, tuple(methods)))
    return len(_registered) - 1


def _lookup(interface_id):
    if not 0 <= interface_id < len(_registered):
        panic("Interfaces %u is not registered yet\n", interface_id)
    return _registered[interface_id]


def get_interface_name(interface_id):
    """Return the name an interface was registered with."""
    return _lookup(interface_id)[0]


def get_interface_methods(interface_id):
    """Return the method names of an interface, in declaration order."""
    return _lookup(interface_id)[1]


def _make_methods(interface_id, methods):
    result = {}
    for method_name in get_interface_methods(interface_id):
        method = methods.get(method_name)
        if method is None:
            panic(
                "Method %s for interface %s is not defined\n",
                method_name,
                get_interface_name(interface_id),
            )
        result[method_name] = method
    return result


def create_interfaces(implementations):
    """Build an interface table from {interface_id: {method_name: callable}}.

    Every method of every interface must be provided.
    """
    return {
        interface_id: _make_methods(interface_id, methods)
        for interface_id, methods in implementations.items()
    }


def update_interfaces(ancestor, implementations):
    """Derive an interface table from an ancestor's one.

    Methods given for interfaces the ancestor already has override the
    inherited ones (None keeps the inherited method); new interfaces must
    be provided in full.
    """
    result = {interface_id: dict(methods) for interface_id, methods in ancestor.items()}
    for interface_id, methods in implementations.items():
        if interface_id in ancestor:
            merged = dict(ancestor[interface_id])
            for method_name in get_interface_methods(interface_id):
                method = methods.get(method_name)
                if method is not None:
                    merged[method_name] = method
            result[interface_id] = merged
        else:
            result[interface_id] = _make_methods(interface_id, methods)
    return result


class LineReader(ABC):
    """Something that yields text lines one at a time."""

    @abstractmethod
    def start(self):
        """Prepare to read lines from the beginning."""

    @abstractmethod
    def read_line(self):
        """Return the next line; raise EndOfFileError when there are no more."""

    @abstractmethod
    def unread_line(self, line):
        """Push a line back so the next read returns it; return success."""

    @abstractmethod
    def line_number(self):
        """Return the current line number."""

    @abstractmethod
    def stop(self):
        """Finish reading and release resources."""

    def __iter__(self):
        while True:
            try:
                yield self.read_line()
            except EndOfFileError:
                return

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


LINE_READER_INTERFACE_ID = register_interface(
    "LineReader",
    ("start", "read_line", "get_line_number", "unread_line", "stop"),
)