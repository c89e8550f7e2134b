"""Tests for the persisted favorites set."""

import json

import pytest

from little_chef.services.catalog import RecipeCatalog
from little_chef.services.favorites_store import FavoritesStore
from little_chef.services.generation import GenerationOrchestrator
from little_chef.services.recipe_book import RecipeBook


def test_load_missing_slot_returns_empty(favorites_store):
    assert favorites_store.load() == frozenset()


@pytest.mark.parametrize("content", ["{not json", '{"ids": ["1"]}', '["1", 2]', '"1"', ""])
def test_load_malformed_slot_returns_empty(favorites_store, content):
    favorites_store.path.parent.mkdir(parents=True)
    favorites_store.path.write_text(content, encoding="utf-8")
    assert favorites_store.load() == frozenset()


@pytest.mark.parametrize("content", [b'["1", "\xff\xfe"]', b"\x80\x81"])
def test_load_undecodable_slot_returns_empty(favorites_store, content):
    favorites_store.path.parent.mkdir(parents=True)
    favorites_store.path.write_bytes(content)
    assert favorites_store.load() == frozenset()


def test_recipe_book_starts_with_undecodable_slot(favorites_store, fake_gemini):
    favorites_store.path.parent.mkdir(parents=True)
    favorites_store.path.write_bytes(b'["1", "\xff"]')
    catalog = RecipeCatalog()
    book = RecipeBook(
        catalog=catalog,
        favorites_store=favorites_store,
        orchestrator=GenerationOrchestrator(fake_gemini, catalog),
    )
    assert book.favorites == frozenset()


def test_persist_writes_json_array(favorites_store):
    assert favorites_store.persist(frozenset({"3", "1"})) is True
    assert json.loads(favorites_store.path.read_text(encoding="utf-8")) == ["1", "3"]
    assert favorites_store.load() == frozenset({"1", "3"})


def test_persist_overwrites_previous_contents(favorites_store):
    favorites_store.persist(frozenset({"1", "2"}))
    favorites_store.persist(frozenset())
    assert favorites_store.load() == frozenset()


def test_persist_failure_is_reported_not_raised(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    store = FavoritesStore(blocker, "favorites")
    assert store.persist(frozenset({"1"})) is False


@pytest.mark.parametrize("favorites", [frozenset(), frozenset({"1"}), frozenset({"1", "2", "x"})])
@pytest.mark.parametrize("recipe_id", ["1", "2", "new"])
def test_toggle_twice_restores_set(favorites, recipe_id):
    once = FavoritesStore.toggle(favorites, recipe_id)
    assert (recipe_id in once) != (recipe_id in favorites)
    assert FavoritesStore.toggle(once, recipe_id) == favorites


def test_toggle_does_not_mutate_input():
    favorites = frozenset({"1"})
    FavoritesStore.toggle(favorites, "2")
    assert favorites == frozenset({"1"})


def test_recipe_book_persists_after_each_toggle(recipe_book, favorites_store):
    recipe_book.toggle_favorite("1")
    recipe_book.toggle_favorite("2")
    assert favorites_store.load() == frozenset({"1", "2"})

    recipe_book.toggle_favorite("1")
    assert favorites_store.load() == frozenset({"2"})
    assert recipe_book.is_favorite("2")
    assert not recipe_book.is_favorite("1")
