"""An insertion-ordered map with copied keys and type-strict key matching."""

import copy
import operator

from .errors import IndexOutOfRangeError, KeyNotFoundError, panic


def _prepare(value):
    if isinstance(value, BaseException):
        panic("Map cannot contain Status values")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return value


def _equal(a, b):
    """Compare values the way the map does: booleans never match numbers."""
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    return a == b


class _Key:
    """Hash-table wrapper that keeps booleans apart from integers."""

    __slots__ = ("value",)

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, _Key):
            return NotImplemented
        return _equal(self.value, other.value)

    def __hash__(self):
        if isinstance(self.value, bool):
            return hash(("bool", self.value))
        return hash(self.value)


class Map:
    """Key-value mapping that remembers insertion order.

    Keys are deep-copied on insertion so that later changes to the
    original object cannot corrupt the map.
    """

    def __init__(self, *args):
        self._pairs = []  # [key, value] in insertion order
        self._index = {}  # _Key -> position in _pairs
        if args:
            self.update(*args)

    def __repr__(self):
        inner = ", ".join(f"{k!r}: {v!r}" for k, v in self._pairs)
        return f"Map({{{inner}}})"

    def _store(self, key, value):
        wrapped = _Key(key)
        position = self._index.get(wrapped)
        if position is not None:
            self._pairs[position][1] = value
            return
        self._index[wrapped] = len(self._pairs)
        self._pairs.append([key, value])

    def update(self, *args):
        """Set keys and values given as alternating arguments.

        A missing final value stands for None. An exception among the
        arguments is raised; pairs before it stay in the map.
        """
        pairs = iter(args)
        for key in pairs:
            if isinstance(key, BaseException):
                raise key
            key = _prepare(key)
            value = next(pairs, None)
            if isinstance(value, BaseException):
                raise value
            value = _prepare(value)
            self._store(key, value)

    def __setitem__(self, key, value):
        key = copy.deepcopy(_prepare(key))
        self._store(key, _prepare(value))

    def _position(self, key):
        if isinstance(key, (bytes, bytearray)):
            key = bytes(key).decode("utf-8")
        return self._index.get(_Key(key))

    def __getitem__(self, key):
        position = self._position(key)
        if position is None:
            raise KeyNotFoundError(key)
        return self._pairs[position][1]

    def get(self, key, default=None):
        """Return the value for key, or default if the key is absent."""
        position = self._position(key)
        if position is None:
            return default
        return self._pairs[position][1]

    def __contains__(self, key):
        return self._position(key) is not None

    def delete(self, key):
        """Remove key; return False if it was not in the map."""
        position = self._position(key)
        if position is None:
            return False
        removed_key, _ = self._pairs.pop(position)
        del self._index[_Key(removed_key)]
        for wrapped, pos in self._index.items():
            if pos > position:
                self._index[wrapped] = pos - 1
        return True

    def __delitem__(self, key):
        if not self.delete(key):
            raise KeyNotFoundError(key)

    def __len__(self):
        return len(self._pairs)

    def item(self, index):
        """Return the (key, value) pair at insertion position index."""
        index = operator.index(index)
        if not 0 <= index < len(self._pairs):
            raise IndexOutOfRangeError(f"index {index} out of range")
        key, value = self._pairs[index]
        return key, value

    def __iter__(self):
        for key, _ in self._pairs:
            yield key

    def items(self):
        """Yield (key, value) pairs in insertion order."""
        for key, value in self._pairs:
            yield key, value

    def __eq__(self, other):
        if not isinstance(other, Map):
            return NotImplemented
        if len(self._pairs) != len(other._pairs):
            return False
        return all(
            _equal(k1, k2) and _equal(v1, v2)
            for (k1, v1), (k2, v2) in zip(self._pairs, other._pairs)
        )

    def __hash__(self):
        return hash(("Map", tuple((_Key(k), _Key(v)) for k, v in self._pairs)))

    def __bool__(self):
        return bool(self._pairs)

    def __deepcopy__(self, memo):
        result = Map()
        memo[id(self)] = result
        for key, value in self._pairs:
            # keys are already private copies
            result._store(key, copy.deepcopy(value, memo))
        return result