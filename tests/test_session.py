"""Tests for the original/clone session lifecycle."""

import pytest

from maplab import NoOriginalError, UnknownVariantError


def test_starts_empty(session):
    assert session.original is None
    assert session.clones == []


def test_build_forest(session):
    game_map = session.build("forest")

    assert session.original is game_map
    assert game_map.tiles == ["T", "w", "w", "w", "*", "W", "w", "w", "w", "T"]


def test_build_dungeon(session):
    session.build("dungeon")
    assert session.original.tiles == ["#", ".", ".", "S", ".", ".", "$", ".", ".", "#"]


def test_build_unknown_variant(session):
    with pytest.raises(UnknownVariantError):
        session.build("swamp")
    assert session.original is None


def test_clone_without_original(session):
    with pytest.raises(NoOriginalError):
        session.clone()
    assert session.clones == []
    assert session.original is None


def test_modify_without_original(session):
    with pytest.raises(NoOriginalError):
        session.modify_original()
    assert session.original is None


def test_clone_modify_scenario(session):
    session.build("forest")
    session.clone()
    session.modify_original()

    assert session.original.name == "DESTROYED MAP"
    assert session.original.tiles[5] == "X"
    assert session.clones[0].tiles[5] == "W"
    assert session.clones[0].name == "Forest (Clone)"


def test_clones_are_independent_of_each_other(session):
    session.build("dungeon")
    first = session.clone()
    second = session.clone()

    first.set_tile(1, "?")

    assert second.tiles[1] == "."
    assert session.original.tiles[1] == "."
    assert first.tiles is not second.tiles


def test_clone_after_modify_copies_modified_state(session):
    session.build("forest")
    session.modify_original()
    copy = session.clone()

    assert copy.name == "DESTROYED MAP (Clone)"
    assert copy.tiles[5] == "X"


def test_new_build_clears_history(session):
    session.build("forest")
    session.clone()
    session.clone()

    session.build("dungeon")

    assert session.clones == []
    assert session.original.name == "Dungeon"


def test_rebuilding_same_variant_clears_history(session):
    first = session.build("forest")
    session.clone()

    second = session.build("forest")

    assert session.clones == []
    assert second is not first


def test_recent_clones_numbers_newest(session):
    session.build("forest")
    for _ in range(5):
        session.clone()

    recent = session.recent_clones(3)

    assert [number for number, _ in recent] == [3, 4, 5]
    assert recent[-1][1] is session.clones[-1]


def test_recent_clones_with_short_history(session):
    session.build("forest")
    session.clone()

    assert [number for number, _ in session.recent_clones(3)] == [1]
    assert session.recent_clones(0) == ()
