"""State of a to-do list: entries, a view filter and the actions on them."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from demokit.storage import JsonStorage

STORAGE_KEY = "demokit.todomvc.entries"


@dataclass(frozen=True)
class Entry:
    id: int
    description: str
    completed: bool = False


class Filter(Enum):
    ALL = "All"
    ACTIVE = "Active"
    COMPLETED = "Completed"

    def __str__(self) -> str:
        return self.value

    def fits(self, entry: Entry) -> bool:
        """Whether ``entry`` is shown under this filter."""
        if self is Filter.ACTIVE:
            return not entry.completed
        if self is Filter.COMPLETED:
            return entry.completed
        return True

    def as_href(self) -> str:
        return _HREFS[self]


_HREFS = {
    Filter.ALL: "#/",
    Filter.ACTIVE: "#/active",
    Filter.COMPLETED: "#/completed",
}


def _toggled(entry: Entry) -> Entry:
    return dataclasses.replace(entry, completed=not entry.completed)


def _entry_from_json(data: Any) -> Entry:
    if not isinstance(data, dict):
        raise TypeError("entry must be an object")
    entry_id = data["id"]
    description = data["description"]
    completed = data["completed"]
    if isinstance(entry_id, bool) or not isinstance(entry_id, int) or entry_id < 0:
        raise ValueError("entry id must be a non-negative integer")
    if not isinstance(description, str):
        raise TypeError("description must be a string")
    if not isinstance(completed, bool):
        raise TypeError("completed must be a boolean")
    return Entry(id=entry_id, description=description, completed=completed)


@dataclass(frozen=True)
class TodoState:
    """An immutable to-do list; every action returns a new state."""

    entries: Tuple[Entry, ...] = ()
    filter: Filter = Filter.ALL

    def _with(self, entries: List[Entry]) -> "TodoState":
        return dataclasses.replace(self, entries=tuple(entries))

    def add(self, description: str) -> "TodoState":
        """Append a new entry whose id follows the last one's, starting at 1."""
        next_id = self.entries[-1].id + 1 if self.entries else 1
        return self._with([*self.entries, Entry(id=next_id, description=description)])

    def edit(self, entry_id: int, description: str) -> "TodoState":
        """Change an entry's text; an empty text removes the entry."""
        if not description:
            return self.remove(entry_id)
        entries = list(self.entries)
        for position, entry in enumerate(entries):
            if entry.id == entry_id:
                entries[position] = dataclasses.replace(entry, description=description)
                break
        return self._with(entries)

    def remove(self, entry_id: int) -> "TodoState":
        return self._with([e for e in self.entries if e.id != entry_id])

    def set_filter(self, filter: Filter) -> "TodoState":
        return dataclasses.replace(self, filter=filter)

    def toggle_all(self) -> "TodoState":
        """Flip the completion of every entry the current filter shows."""
        return self._with(
            [_toggled(e) if self.filter.fits(e) else e for e in self.entries]
        )

    def toggle(self, entry_id: int) -> "TodoState":
        entries = list(self.entries)
        for position, entry in enumerate(entries):
            if entry.id == entry_id:
                entries[position] = _toggled(entry)
                break
        return self._with(entries)

    def clear_completed(self) -> "TodoState":
        return self._with([e for e in self.entries if Filter.ACTIVE.fits(e)])

    def completed_count(self) -> int:
        return sum(1 for e in self.entries if Filter.COMPLETED.fits(e))

    def all_completed(self) -> bool:
        """True when every entry is both shown by the filter and completed."""
        return all(self.filter.fits(e) and e.completed for e in self.entries)

    def visible(self) -> List[Entry]:
        return [e for e in self.entries if self.filter.fits(e)]

    @classmethod
    def load(cls, storage: JsonStorage) -> "TodoState":
        """Load stored entries; anything unreadable gives an empty list."""
        data = storage.get(STORAGE_KEY)
        try:
            if not isinstance(data, list):
                raise TypeError("entries must be a list")
            entries = tuple(_entry_from_json(item) for item in data)
        except (KeyError, TypeError, ValueError):
            entries = ()
        return cls(entries=entries, filter=Filter.ALL)

    def save(self, storage: JsonStorage) -> None:
        storage.set(STORAGE_KEY, [dataclasses.asdict(e) for e in self.entries])