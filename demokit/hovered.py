"""What the pointer is currently over in a nested list."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class HoverKind(Enum):
    HEADER = "header"
    ITEM = "item"
    LIST = "list"
    NONE = "none"


_LABELS = {
    HoverKind.HEADER: "Header",
    HoverKind.LIST: "List container",
    HoverKind.NONE: "Nothing",
}


@dataclass(frozen=True)
class Hovered:
    """The hovered part; items carry their name."""

    kind: HoverKind = HoverKind.NONE
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is HoverKind.ITEM) != (self.name is not None):
            raise ValueError("only an item hover carries a name, and it must have one")

    @classmethod
    def item(cls, name: str) -> "Hovered":
        return cls(HoverKind.ITEM, name)

    def __str__(self) -> str:
        if self.kind is HoverKind.ITEM:
            return self.name or ""
        return _LABELS[self.kind]