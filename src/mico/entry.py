"""Entry — one key paired with one value."""

from __future__ import annotations

from dataclasses import dataclass

from .values import Value, VList, VString, to_value


@dataclass(frozen=True)
class Entry:
    key: str
    value: Value

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", self.key.strip())
        object.__setattr__(self, "value", to_value(self.value))

    @property
    def is_list(self) -> bool:
        return isinstance(self.value, VList)

    @property
    def is_string(self) -> bool:
        return isinstance(self.value, VString)
