"""Randomly generated people for the keyed list demo."""

from __future__ import annotations

import html
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from demokit.randomness import chance, range_exclusive

_FIRST_NAMES = (
    "Alice", "Bruno", "Clara", "Dmitri", "Elena", "Farid", "Grace", "Hiro",
    "Ines", "Jonas", "Keiko", "Liam", "Maya", "Nils", "Olga", "Pablo",
)
_LAST_NAMES = (
    "Anders", "Baker", "Castillo", "Dubois", "Evans", "Fischer", "Garcia",
    "Hansen", "Ito", "Jensen", "Kowalski", "Lopez", "Moreau", "Novak",
)
_STREETS = (
    "Maple", "Oak", "Cedar", "Pine", "Elm", "Willow", "Birch", "Lake",
    "Hill", "River", "Sunset", "Park",
)
_CITIES = (
    "Springfield", "Riverton", "Lakeside", "Fairview", "Greenville",
    "Ashford", "Brookhaven", "Milltown",
)
_STATES = ("AL", "CA", "CO", "FL", "GA", "IL", "MA", "NY", "OH", "OR", "TX", "WA")


@dataclass(frozen=True)
class PersonInfo:
    id: int
    name: str
    address: str
    age: int

    @classmethod
    def random(cls, person_id: int, rng: Optional[random.Random] = None) -> "PersonInfo":
        rng = rng if rng is not None else random.Random()
        number = range_exclusive(1, 300, rng)
        state = rng.choice(_STATES)
        city = rng.choice(_CITIES)
        street = rng.choice(_STREETS)
        address = f"{number} {street} St., {city}, {state}"
        name = f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"
        age = range_exclusive(7, 77, rng)
        return cls(id=person_id, name=name, address=address, age=age)

    def render(self) -> str:
        title = html.escape(f"{self.id} - {self.name}")
        age = html.escape(f"Age: {self.age}")
        address = html.escape(f"Address: {self.address}")
        return (
            '<div class="card w-50 card_style"><div class="card-body">'
            f'<h5 class="card-title">{title}</h5>'
            f'<p class="card-text">{age}</p>'
            f'<p class="card-text">{address}</p>'
            "</div></div>"
        )


class PersonKind(Enum):
    INLINE = "inline"
    COMPONENT = "component"


@dataclass(frozen=True)
class Person:
    kind: PersonKind
    info: PersonInfo

    @classmethod
    def random(
        cls, person_id: int, ratio: float, rng: Optional[random.Random] = None
    ) -> "Person":
        """A random person, rendered inline with probability ``ratio``."""
        rng = rng if rng is not None else random.Random()
        info = PersonInfo.random(person_id, rng)
        kind = PersonKind.INLINE if chance(ratio, rng) else PersonKind.COMPONENT
        return cls(kind=kind, info=info)

    def render(self, keyed: bool) -> str:
        key = f' data-key="{self.info.id}"' if keyed else ""
        css = "text-danger" if self.kind is PersonKind.INLINE else "text-info"
        return f'<div{key} class="{css}" id="{self.info.id}">{self.info.render()}</div>'