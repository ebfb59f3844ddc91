import random
from collections import Counter, defaultdict

import pytest

from demokit.memory import (
    KEY_BEST_SCORE,
    RAW_CARDS,
    CardName,
    MemoryState,
    Status,
    card_image,
    shuffle_cards,
)
from demokit.storage import JsonStorage


def _new_game(seed=1, storage=None):
    storage = storage if storage is not None else JsonStorage()
    return MemoryState.reset(storage, random.Random(seed))


def _pairs(state):
    groups = defaultdict(list)
    for card in state.cards:
        groups[card.name].append(card.raw)
    return list(groups.values())


def _flipped(state, raw):
    return next(c.flipped for c in state.cards if c.raw == raw)


def test_shuffle_cards_has_each_name_twice():
    cards = shuffle_cards(random.Random(3))
    assert len(cards) == 16
    assert Counter(c.name for c in cards) == Counter(RAW_CARDS)
    assert all(not c.flipped for c in cards)
    assert len({c.id for c in cards}) == len(cards)


def test_shuffle_varies_order_across_draws():
    rng = random.Random(7)
    orders = {tuple(c.name for c in shuffle_cards(rng)) for _ in range(10)}
    assert len(orders) > 1
    assert all(Counter(order) == Counter(RAW_CARDS) for order in orders)


def test_reset_defaults():
    state = _new_game()
    assert state.unresolved_card_pairs == 8
    assert state.best_score == 9999
    assert state.status is Status.READY
    assert state.last_card is None
    assert state.rollback_cards is None


def test_reset_reads_stored_best_score():
    storage = JsonStorage()
    storage.set(KEY_BEST_SCORE, 42)
    assert _new_game(storage=storage).best_score == 42


def test_reset_ignores_invalid_stored_score():
    storage = JsonStorage()
    storage.set(KEY_BEST_SCORE, "fast")
    assert _new_game(storage=storage).best_score == 9999


def test_first_flip_starts_game():
    state = _new_game()
    raw = state.cards[0].raw
    after = state.flip_card(raw)
    assert after.status is Status.PLAYING
    assert after.last_card == raw
    assert _flipped(after, raw) is True
    assert _flipped(state, raw) is False


def test_matching_pair_resolves():
    state = _new_game()
    a, b = _pairs(state)[0]
    after = state.flip_card(a).flip_card(b)
    assert after.unresolved_card_pairs == state.unresolved_card_pairs - 1
    assert after.last_card is None
    assert after.rollback_cards is None
    assert _flipped(after, a) and _flipped(after, b)
    assert after.status is Status.PLAYING


def test_mismatch_sets_rollback_and_rollback_restores():
    state = _new_game()
    pairs = _pairs(state)
    a = pairs[0][0]
    b = pairs[1][0]
    after = state.flip_card(a).flip_card(b)
    assert after.rollback_cards == (a, b)
    assert after.unresolved_card_pairs == state.unresolved_card_pairs
    restored = after.rollback(after.rollback_cards)
    assert restored.cards == state.cards
    assert restored.rollback_cards is None


def test_same_card_twice_is_a_mismatch():
    state = _new_game()
    a = state.cards[0].raw
    after = state.flip_card(a).flip_card(a)
    assert after.rollback_cards == (a, a)


def test_matching_every_pair_passes_game():
    state = _new_game(seed=5)
    for a, b in _pairs(state):
        state = state.flip_card(a).flip_card(b)
    assert state.unresolved_card_pairs == 0
    assert state.status is Status.PASSED
    assert all(c.flipped for c in state.cards)


def test_try_save_best_score_stores_better_score():
    storage = JsonStorage()
    state = _new_game(storage=storage)
    assert state.try_save_best_score(30, storage) is state
    assert storage.get(KEY_BEST_SCORE) == 30
    assert MemoryState.reset(storage).best_score == 30


def test_try_save_best_score_keeps_worse_score_out():
    storage = JsonStorage()
    storage.set(KEY_BEST_SCORE, 20)
    state = _new_game(storage=storage)
    state.try_save_best_score(50, storage)
    assert storage.get(KEY_BEST_SCORE) == 20


@pytest.mark.parametrize(
    "name,path",
    [
        (CardName.EIGHT_BALL, "public/8-ball.png"),
        (CardName.KRONOS, "public/kronos.png"),
        (CardName.ZEPPELIN, "public/zeppelin.png"),
    ],
)
def test_card_image(name, path):
    assert card_image(name) == path


def test_names_display_like_variants():
    assert str(CardName.EIGHT_BALL) == "EightBall"
    assert str(Status.PASSED) == "Passed"
    assert len({card_image(n) for n in CardName}) == len(CardName)