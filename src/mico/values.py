"""Value types for mico."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class VString:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", self.value.strip())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VList:
    items: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # any iterable of str; stored as a tuple
        if isinstance(self.items, (str, bytes)):
            raise TypeError(
                f"items must be an iterable of str, not {type(self.items).__name__}"
            )
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, str):
                raise TypeError(
                    f"list items must be str, not {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(self.items) + "]"


Value = Union[VString, VList]


def to_value(obj) -> Value:
    """Convert *obj* to a Value.

    ``str`` becomes a VString, a list or tuple of ``str`` becomes a VList,
    and existing values are returned as they are.
    """
    if isinstance(obj, (VString, VList)):
        return obj
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, (list, tuple)):
        return VList(obj)
    raise TypeError(f"cannot convert {type(obj).__name__} to a mico value")
