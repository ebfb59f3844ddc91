"""A list of randomly generated people with reordering actions."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from demokit.person import Person
from demokit.randomness import swap_two_distinct

log = logging.getLogger(__name__)

_MAX_LISTED_IDS = 20


class PersonList:
    """People with increasing ids; each action returns whether a redraw is needed."""

    def __init__(self, ratio: float = 0.5, rng: Optional[random.Random] = None) -> None:
        self.persons: List[Person] = []
        self.last_id = 0
        self.keyed = True
        self.build_component_ratio = ratio
        self._rng = rng if rng is not None else random.Random()

    def _new_person(self) -> Person:
        self.last_id += 1
        return Person.random(self.last_id, self.build_component_ratio, self._rng)

    def create(self, count: int) -> bool:
        for _ in range(count):
            self.persons.append(self._new_person())
        return True

    def prepend(self, count: int) -> bool:
        for _ in range(count):
            self.persons.insert(0, self._new_person())
        return True

    def change_ratio(self, ratio: float) -> bool:
        if self.build_component_ratio == ratio:
            return False
        self.build_component_ratio = ratio
        log.info("Ratio changed: %s", ratio)
        return True

    def delete_by_id(self, person_id: int) -> bool:
        for position, person in enumerate(self.persons):
            if person.info.id == person_id:
                del self.persons[position]
                return True
        return False

    def delete_everybody(self) -> bool:
        self.persons.clear()
        return True

    def swap_random(self) -> bool:
        """Swap two distinct random people; needs at least two."""
        pair = swap_two_distinct(self.persons, self._rng)
        if pair is None:
            raise ValueError("need at least two persons to swap")
        lo, hi = pair
        log.info("Swapping %s and %s.", self.persons[hi].info.id, self.persons[lo].info.id)
        return True

    def reverse(self) -> bool:
        self.persons.reverse()
        return True

    def sort_by_id(self) -> bool:
        self.persons.sort(key=lambda p: p.info.id)
        return True

    def sort_by_name(self) -> bool:
        self.persons.sort(key=lambda p: p.info.name)
        return True

    def sort_by_age(self) -> bool:
        self.persons.sort(key=lambda p: p.info.age)
        return True

    def sort_by_address(self) -> bool:
        self.persons.sort(key=lambda p: p.info.address)
        return True

    def toggle_keyed(self) -> bool:
        self.keyed = not self.keyed
        return True

    def ids_text(self) -> str:
        """Space-separated ids, or a placeholder once the list gets long."""
        if len(self.persons) < _MAX_LISTED_IDS:
            return " ".join(str(p.info.id) for p in self.persons)
        return "<too many>"

    def render(self) -> str:
        body = "".join(p.render(self.keyed) for p in self.persons)
        return (
            f'<div><p class="h5">Number of persons: {len(self.persons)}</p>'
            f'<p class="h5">Ids: {self.ids_text().replace("<", "&lt;").replace(">", "&gt;")}</p>'
            f'<hr/><div class="persons">{body}</div></div>'
        )