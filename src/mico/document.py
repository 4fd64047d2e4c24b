"""Document — the ordered sequence of entries exchanged by parser and emitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .entry import Entry
from .values import Value, VList


@dataclass
class Document:
    """Entries in source (or construction) order.

    Keys are not unique: duplicates are kept as separate entries, so the
    lookup helpers return the first match or every match rather than acting
    like a dict.
    """

    entries: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    # -- Building ---------------------------------------------------------

    def append(self, entry: Entry) -> None:
        self.entries.append(entry)

    def add(self, key: str, value) -> Entry:
        """Append ``Entry(key, value)`` and return it."""
        entry = Entry(key, value)
        self.entries.append(entry)
        return entry

    def extend(self, entries: Iterable[Entry]) -> None:
        self.entries.extend(entries)

    # -- Lookup -----------------------------------------------------------

    def get(self, key: str, default: Value | None = None) -> Value | None:
        """Value of the first entry named *key*, or *default*."""
        for entry in self.entries:
            if entry.key == key:
                return entry.value
        return default

    def get_all(self, key: str) -> list[Value]:
        return [entry.value for entry in self.entries if entry.key == key]

    def keys(self) -> list[str]:
        return [entry.key for entry in self.entries]

    def to_pairs(self) -> list[tuple[str, str | list[str]]]:
        """Plain ``(key, str | list[str])`` pairs, e.g. for JSON output."""
        pairs: list[tuple[str, str | list[str]]] = []
        for entry in self.entries:
            if isinstance(entry.value, VList):
                pairs.append((entry.key, list(entry.value.items)))
            else:
                pairs.append((entry.key, entry.value.value))
        return pairs
