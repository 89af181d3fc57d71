"""Table of named symbols kept in insertion order."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass
class Symbol:
    """A name bound to a 64-bit value or memory address."""

    name: str
    value: int


class SymbolTable:
    """A list of symbols looked up by name; duplicates are allowed."""

    def __init__(self) -> None:
        self._symbols: list[Symbol] = []

    def add(self, name: str, value: int) -> Symbol:
        """Append a symbol and return it."""
        symbol = Symbol(name, value)
        self._symbols.append(symbol)
        return symbol

    def get_by_index(self, index: int) -> Symbol:
        """Return the symbol at a position; raise IndexError if there is none."""
        if not 0 <= index < len(self._symbols):
            raise IndexError(f"symbol index {index} out of range")
        return self._symbols[index]

    def _position(self, name: str) -> int | None:
        return next(
            (pos for pos, symbol in enumerate(self._symbols) if symbol.name == name),
            None,
        )

    def get(self, name: str) -> Symbol:
        """Return the first symbol with this name; raise KeyError if absent."""
        position = self._position(name)
        if position is None:
            raise KeyError(name)
        return self._symbols[position]

    def remove(self, name: str) -> None:
        """Remove the first symbol with this name, moving the last symbol into its place."""
        position = self._position(name)
        if position is None:
            return
        last = self._symbols.pop()
        if position < len(self._symbols):
            self._symbols[position] = last

    def format(self) -> str:
        """Return one tab-indented line per symbol."""
        return "".join(
            f"\tSymbol: {symbol.name}, value: {symbol.value}\n" for symbol in self._symbols
        )

    def print(self) -> None:
        """Write the formatted table to standard output."""
        stream = sys.stdout
        stream.write(self.format())
        stream.flush()

    def __contains__(self, name: object) -> bool:
        return any(symbol.name == name for symbol in self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)