"""A card-matching memory game: the deck, the game state and its actions."""

from __future__ import annotations

import dataclasses
import random
import string
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from demokit.storage import JsonStorage

KEY_BEST_SCORE = "memory.game.best.score"
DEFAULT_BEST_SCORE = 9999
PAIR_COUNT = 8

_ID_ALPHABET = "_-" + string.digits + string.ascii_letters
_ID_LENGTH = 21


class CardName(Enum):
    EIGHT_BALL = "EightBall"
    KRONOS = "Kronos"
    BAKED_POTATO = "BakedPotato"
    DINOSAUR = "Dinosaur"
    ROCKET = "Rocket"
    SKINNY_UNICORN = "SkinnyUnicorn"
    THAT_GUY = "ThatGuy"
    ZEPPELIN = "Zeppelin"

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    READY = "Ready"
    PLAYING = "Playing"
    PASSED = "Passed"

    def __str__(self) -> str:
        return self.value


RAW_CARDS: Tuple[CardName, ...] = tuple(CardName) * 2

_IMAGES = {
    CardName.EIGHT_BALL: "public/8-ball.png",
    CardName.KRONOS: "public/kronos.png",
    CardName.BAKED_POTATO: "public/baked-potato.png",
    CardName.DINOSAUR: "public/dinosaur.png",
    CardName.ROCKET: "public/rocket.png",
    CardName.SKINNY_UNICORN: "public/skinny-unicorn.png",
    CardName.THAT_GUY: "public/that-guy.png",
    CardName.ZEPPELIN: "public/zeppelin.png",
}


def card_image(name: CardName) -> str:
    """Path of the front image for a card."""
    return _IMAGES[name]


@dataclass(frozen=True)
class RawCard:
    id: str
    name: CardName


@dataclass(frozen=True)
class Card:
    id: str
    name: CardName
    flipped: bool = False

    @property
    def raw(self) -> RawCard:
        return RawCard(id=self.id, name=self.name)


def _new_id(rng: random.Random) -> str:
    return "".join(rng.choice(_ID_ALPHABET) for _ in range(_ID_LENGTH))


def shuffle_cards(rng: Optional[random.Random] = None) -> List[Card]:
    """A freshly shuffled, face-down deck with a random id on each card."""
    rng = rng if rng is not None else random.Random()
    names = list(RAW_CARDS)
    rng.shuffle(names)
    return [Card(id=_new_id(rng), name=name) for name in names]


def _stored_best_score(storage: JsonStorage) -> int:
    value = storage.get(KEY_BEST_SCORE, DEFAULT_BEST_SCORE)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return DEFAULT_BEST_SCORE
    return value


def _flip_matching(cards: Iterable[Card], targets: Iterable[RawCard]) -> Tuple[Card, ...]:
    wanted = set(targets)
    return tuple(
        dataclasses.replace(c, flipped=not c.flipped) if c.raw in wanted else c
        for c in cards
    )


@dataclass(frozen=True)
class MemoryState:
    """An immutable game state; every action returns a new state."""

    unresolved_card_pairs: int
    best_score: int
    status: Status
    cards: Tuple[Card, ...]
    last_card: Optional[RawCard] = None
    rollback_cards: Optional[Tuple[RawCard, RawCard]] = None

    @classmethod
    def reset(
        cls, storage: JsonStorage, rng: Optional[random.Random] = None
    ) -> "MemoryState":
        """A new game with a shuffled deck and the stored best score."""
        return cls(
            unresolved_card_pairs=PAIR_COUNT,
            best_score=_stored_best_score(storage),
            status=Status.READY,
            cards=tuple(shuffle_cards(rng)),
        )

    def flip_card(self, card: RawCard) -> "MemoryState":
        """Turn over ``card``; the second card of a turn resolves a pair or marks a rollback."""
        cards = _flip_matching(self.cards, [card])
        last = self.last_card
        if last is None:
            status = Status.PLAYING if self.status is Status.READY else self.status
            return dataclasses.replace(
                self, status=status, cards=cards, last_card=card, rollback_cards=None
            )

        pairs = self.unresolved_card_pairs
        status = self.status
        rollback = self.rollback_cards
        if card.id != last.id and card.name == last.name:
            if pairs == 0:
                raise ValueError("no unresolved card pairs left")
            pairs -= 1
            if pairs == 0:
                status = Status.PASSED
        else:
            rollback = (last, card)
        return dataclasses.replace(
            self,
            unresolved_card_pairs=pairs,
            status=status,
            cards=cards,
            last_card=None,
            rollback_cards=rollback,
        )

    def rollback(self, cards: Tuple[RawCard, RawCard]) -> "MemoryState":
        """Turn a mismatched pair back over."""
        return dataclasses.replace(
            self, cards=_flip_matching(self.cards, cards), rollback_cards=None
        )

    def try_save_best_score(self, seconds: int, storage: JsonStorage) -> "MemoryState":
        """Store ``seconds`` as the best score if it beats the current one."""
        if self.best_score > seconds:
            storage.set(KEY_BEST_SCORE, seconds)
        return self