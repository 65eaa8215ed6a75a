import pytest

from rgsskit.arena import Arena, Arenas, Key
from rgsskit.data import Color, Rect


def test_insert_and_lookup():
    arena = Arena()
    key = arena.insert("first")
    assert arena[key] == "first"
    assert arena.get(key) == "first"
    assert key in arena
    assert len(arena) == 1


def test_remove_returns_value_once():
    arena = Arena()
    key = arena.insert(Color.WHITE)
    assert arena.remove(key) == Color.WHITE
    assert arena.remove(key) is None
    assert key not in arena
    assert len(arena) == 0


def test_stale_key_after_slot_reuse():
    arena = Arena()
    old = arena.insert("old")
    arena.remove(old)
    new = arena.insert("new")
    assert new.index == old.index
    assert new != old
    assert old not in arena
    assert arena.get(old) is None
    assert arena[new] == "new"


def test_getitem_missing_raises():
    arena = Arena()
    key = arena.insert(1)
    assert arena.remove(key) == 1
    with pytest.raises(KeyError):
        arena[key]
    assert len(arena) == 0


def test_setitem_replaces_value():
    arena = Arena()
    key = arena.insert(Rect(1, 2, 3, 4))
    arena[key] = Rect()
    assert arena[key] == Rect()


def test_setitem_missing_raises():
    arena = Arena()
    with pytest.raises(KeyError):
        arena[Key(0, 1)] = "x"
    assert len(arena) == 0


def test_get_missing_returns_none():
    arena = Arena()
    arena.insert("present")
    assert arena.get(Key(3, 1)) is None
    assert arena.get(Key(0, 3)) is None


def test_iteration_yields_live_keys_in_order():
    arena = Arena()
    keys = [arena.insert(value) for value in "abcd"]
    arena.remove(keys[1])
    assert list(arena) == [keys[0], keys[2], keys[3]]
    assert list(arena.values()) == ["a", "c", "d"]
    assert dict(arena.items()) == {keys[0]: "a", keys[2]: "c", keys[3]: "d"}


def test_non_key_is_not_contained():
    arena = Arena()
    arena.insert("a")
    assert 0 not in arena


def test_arenas_are_independent():
    arenas = Arenas()
    color_key = arenas.colors.insert(Color.BLACK)
    assert len(arenas.colors) == 1
    assert len(arenas.rects) == 0
    assert arenas.colors is not arenas.tones
    assert arenas.colors[color_key] == Color.BLACK