import pytest

from demokit.storage import JsonStorage
from demokit.todo import STORAGE_KEY, Entry, Filter, TodoState


def _state(*descriptions):
    state = TodoState()
    for d in descriptions:
        state = state.add(d)
    return state


def test_first_entry_gets_id_one():
    state = TodoState().add("milk")
    assert state.entries == (Entry(id=1, description="milk", completed=False),)


def test_ids_follow_last_entry():
    state = _state("a", "b", "c")
    ids = [e.id for e in state.entries]
    assert ids == sorted(ids)
    assert all(b == a + 1 for a, b in zip(ids, ids[1:]))


def test_add_does_not_mutate_original():
    original = _state("a")
    original.add("b")
    assert len(original.entries) == 1


def test_remove():
    state = _state("a", "b")
    first, second = state.entries
    assert state.remove(first.id).entries == (second,)


def test_remove_unknown_id_keeps_entries():
    state = _state("a")
    assert state.remove(12345).entries == state.entries


def test_toggle_flips_completion_twice():
    state = _state("a")
    entry_id = state.entries[0].id
    once = state.toggle(entry_id)
    assert once.entries[0].completed is True
    assert once.toggle(entry_id).entries == state.entries


def test_edit_changes_description():
    state = _state("a", "b")
    entry_id = state.entries[1].id
    edited = state.edit(entry_id, "changed")
    assert edited.entries[1].description == "changed"
    assert edited.entries[0] == state.entries[0]


def test_edit_with_empty_text_removes_entry():
    state = _state("a", "b")
    entry_id = state.entries[0].id
    assert [e.description for e in state.edit(entry_id, "").entries] == ["b"]


def test_toggle_all_respects_filter():
    state = _state("a", "b")
    state = state.toggle(state.entries[0].id).set_filter(Filter.ACTIVE)
    toggled = state.toggle_all()
    assert all(e.completed for e in toggled.entries)


def test_toggle_all_with_all_filter_flips_everything():
    state = _state("a", "b")
    state = state.toggle(state.entries[0].id)
    toggled = state.toggle_all()
    assert [e.completed for e in toggled.entries] == [
        not e.completed for e in state.entries
    ]


def test_clear_completed():
    state = _state("a", "b", "c")
    state = state.toggle(state.entries[1].id)
    cleared = state.clear_completed()
    assert [e.description for e in cleared.entries] == ["a", "c"]
    assert cleared.completed_count() == 0


def test_completed_count_and_visible():
    state = _state("a", "b", "c")
    state = state.toggle(state.entries[0].id)
    assert state.completed_count() == 1
    assert [e.description for e in state.set_filter(Filter.ACTIVE).visible()] == ["b", "c"]
    assert [e.description for e in state.set_filter(Filter.COMPLETED).visible()] == ["a"]
    assert len(state.visible()) == len(state.entries)


def test_all_completed():
    assert TodoState().all_completed() is True
    state = _state("a")
    assert state.all_completed() is False
    done = state.toggle(state.entries[0].id)
    assert done.all_completed() is True
    assert done.set_filter(Filter.ACTIVE).all_completed() is False


def test_filter_text_and_href():
    assert [str(f) for f in Filter] == ["All", "Active", "Completed"]
    assert Filter.ALL.as_href() == "#/"
    assert Filter.ACTIVE.as_href() == "#/active"
    assert Filter.COMPLETED.as_href() == "#/completed"


@pytest.mark.parametrize(
    "flt,completed,expected",
    [
        (Filter.ALL, True, True),
        (Filter.ALL, False, True),
        (Filter.ACTIVE, True, False),
        (Filter.ACTIVE, False, True),
        (Filter.COMPLETED, True, True),
        (Filter.COMPLETED, False, False),
    ],
)
def test_filter_fits(flt, completed, expected):
    assert flt.fits(Entry(id=1, description="x", completed=completed)) is expected


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "store.json"
    state = _state("a", "b")
    state = state.toggle(state.entries[1].id)
    state.save(JsonStorage(path))
    loaded = TodoState.load(JsonStorage(path))
    assert loaded.entries == state.entries
    assert loaded.filter is Filter.ALL


def test_load_empty_storage():
    assert TodoState.load(JsonStorage()).entries == ()


def test_load_malformed_data():
    storage = JsonStorage()
    storage.set(STORAGE_KEY, [{"id": "nope", "description": 3}])
    assert TodoState.load(storage).entries == ()