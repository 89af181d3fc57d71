"""Small containers, numeric helpers and file helpers used by the dk tools."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Any, Iterable, Union

_EMPTY_KEY = 0
_HASH_SEED = 5381
_KEY_BYTES = 4

PathLike = Union[str, Path]


def _wrap32(value: int) -> int:
    """Reduce an integer to the signed 32-bit range."""
    return ((value + (1 << 31)) & 0xFFFFFFFF) - (1 << 31)


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def parse_digits(text: str) -> int:
    """Accumulate each character as a decimal digit into a 32-bit integer.

    No validation is done: every character contributes ``ord(ch) - ord('0')``.
    """
    result = 0
    for ch in text:
        result = _wrap32(result * 10 + (ord(ch) - ord("0")))
    return result


def parse_digits_float(text: str) -> float:
    """Accumulate each character as a decimal digit in single precision."""
    result = 0.0
    for ch in text:
        result = _to_float32(result * 10 + (ord(ch) - ord("0")))
    return result


def clamp(x, low, high):
    """Limit ``x`` to the closed range ``[low, high]``."""
    return min(max(x, low), high)


def lerp(a, b, t):
    """Linear interpolation between ``a`` and ``b`` by ``t``."""
    return a + t * (b - a)


def map_range(x, in_min, in_max, out_min, out_max):
    """Map ``x`` from one range onto another."""
    return (x - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


class FixedHashMap:
    """Open table of integer keys with one slot per hash.

    Keys that hash to the same slot share it: a later ``put`` replaces the
    earlier pair. Key ``0`` marks an empty slot.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.size = 0
        self.pairs: list[tuple[int, Any]] = [(_EMPTY_KEY, None)] * capacity

    def slot(self, key: int) -> int:
        """Return the slot index that ``key`` hashes to."""
        key = _wrap32(key)
        digest = _HASH_SEED
        for shift in range(_KEY_BYTES):
            digest = _wrap32((digest << 5) + digest + key + (key >> (shift * 8)))
        return digest % self.capacity

    def get(self, key: int) -> Any:
        """Return the value stored in the slot of ``key``, or None if empty."""
        return self.pairs[self.slot(key)][1]

    def put(self, key: int, value: Any) -> None:
        """Store ``value`` in the slot of ``key``, replacing what was there."""
        self.pairs[self.slot(key)] = (key, value)
        self.size += 1

    def remove(self, key: int) -> None:
        """Probe from the slot of ``key`` and clear the matching pair."""
        index = self.slot(key)
        for _ in range(self.capacity):
            stored, _value = self.pairs[index]
            if stored == key:
                self.pairs[index] = (_EMPTY_KEY, None)
                self.size -= 1
                return
            if stored == _EMPTY_KEY:
                break
            index = (index + 1) % self.capacity
        raise KeyError(key)

    def resize(self, new_capacity: int) -> None:
        """Rehash every occupied slot into a table of ``new_capacity`` slots."""
        fresh = FixedHashMap(new_capacity)
        for key, value in self.pairs:
            if key != _EMPTY_KEY:
                fresh.put(key, value)
        self.capacity = fresh.capacity
        self.size = fresh.size
        self.pairs = fresh.pairs

    def format(self) -> str:
        """Return one line per slot: index, key and value."""
        return "".join(
            f"{index}) KEY={key}, VALUE={'(null)' if value is None else value}\n"
            for index, (key, value) in enumerate(self.pairs)
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, Any]]) -> "FixedHashMap":
        """Build a table sized to the number of pairs and put each of them."""
        items = list(pairs)
        table = cls(len(items))
        for key, value in items:
            table.put(key, value)
        return table


class IntStack:
    """Stack of 32-bit integers that doubles when full and halves when sparse."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._data: list[int] = []

    def push(self, value: int) -> None:
        """Push a value, doubling the capacity if the stack is full."""
        if len(self._data) == self.capacity:
            self.capacity *= 2
        self._data.append(_wrap32(value))

    def pop(self) -> int:
        """Pop the top value; an empty stack yields 0."""
        if not self._data:
            return 0
        value = self._data.pop()
        if self._data and len(self._data) == self.capacity // 4:
            self.capacity //= 2
        return value

    def peek(self) -> int:
        """Return the top value without removing it; an empty stack yields 0."""
        return self._data[-1] if self._data else 0

    def __len__(self) -> int:
        return len(self._data)


class MemoryArena:
    """Bump allocator over a block of integer cells."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self.size = 0
        self.data = [0] * capacity

    def allocate(self, size: int) -> int:
        """Reserve ``size`` cells and return the offset of the first one."""
        if size < 0:
            raise ValueError("size must not be negative")
        if self.size + size > self.capacity:
            raise MemoryError("arena exhausted")
        offset = self.size
        self.size += size
        return offset

    def reset(self) -> None:
        """Forget every allocation."""
        self.size = 0

    def resize(self, new_capacity: int) -> None:
        """Grow or shrink the block, keeping the cells that still fit."""
        if new_capacity < 0:
            raise ValueError("capacity must not be negative")
        if new_capacity >= self.capacity:
            self.data.extend([0] * (new_capacity - self.capacity))
        else:
            del self.data[new_capacity:]
        self.capacity = new_capacity
        self.size = min(self.size, new_capacity)


def write_file_bin(filename: PathLike, data: bytes) -> None:
    """Write raw bytes to a file, replacing its contents."""
    Path(filename).write_bytes(bytes(data))


def read_file_bin(filename: PathLike, size: int) -> bytes:
    """Read at most ``size`` bytes from the start of a file."""
    with open(filename, "rb") as handle:
        return handle.read(size)


def read_file(filename: PathLike) -> bytes:
    """Return the whole contents of a file."""
    return Path(filename).read_bytes()