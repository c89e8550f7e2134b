"""Tests for filtering, search and sorting."""

import random

import pytest

from conftest import make_recipe
from little_chef.models.query import ALL, QueryCriteria, SortOption
from little_chef.models.recipe import Category, Difficulty, Ingredient
from little_chef.services.catalog import initialize_catalog
from little_chef.services.query_engine import matches_search, normalize_search_query, query, sort_recipes

WORDS = ["cookie", "soup", "pasta", "Cake", "אורז", "בננה", "שוקולד", "egg"]


def _random_recipe(rng: random.Random, index: int):
    return make_recipe(
        str(index),
        title=f"{rng.choice(WORDS)} {rng.choice(WORDS)}",
        description=rng.choice(WORDS),
        category=rng.choice(list(Category)),
        difficulty=rng.choice(list(Difficulty)),
        timeMinutes=rng.randint(0, 60),
        ingredients=[Ingredient(item=rng.choice(WORDS), amount="1") for _ in range(rng.randint(0, 3))],
    )


def _random_criteria(rng: random.Random) -> QueryCriteria:
    return QueryCriteria(
        categoryFilter=rng.choice([ALL] + list(Category)),
        difficultyFilter=rng.choice([ALL] + list(Difficulty)),
        searchQuery=rng.choice(["", "  ", " COOK", "אורז ", "xyz", "e", "Cake"]),
        favoritesOnly=rng.random() < 0.3,
        sortBy=rng.choice(list(SortOption)),
    )


def _naive_passes(recipe, favorites, criteria) -> bool:
    q = criteria.searchQuery.strip().lower()
    texts = [recipe.title, recipe.description] + [i.item for i in recipe.ingredients]
    return (
        (criteria.categoryFilter == "All" or recipe.category.value == criteria.categoryFilter)
        and (criteria.difficultyFilter == "All" or recipe.difficulty.value == criteria.difficultyFilter)
        and (not criteria.favoritesOnly or recipe.id in favorites)
        and (q == "" or any(q in t.lower() for t in texts))
    )


@pytest.mark.parametrize("seed", range(5))
def test_filter_is_conjunction_of_active_predicates(seed):
    rng = random.Random(seed)
    catalog = tuple(_random_recipe(rng, i) for i in range(40))
    favorites = frozenset(str(i) for i in rng.sample(range(60), 15))

    for _ in range(50):
        criteria = _random_criteria(rng)
        result_ids = {r.id for r in query(catalog, favorites, criteria)}
        expected_ids = {r.id for r in catalog if _naive_passes(r, favorites, criteria)}
        assert result_ids == expected_ids


def test_search_trims_and_ignores_case():
    catalog = (make_recipe("1", "Chocolate Cookie"), make_recipe("2", "Tomato Soup"))
    result = query(catalog, frozenset(), QueryCriteria(searchQuery=" Cookie "))
    assert [r.id for r in result] == ["1"]

    result = query(catalog, frozenset(), QueryCriteria(searchQuery="COOKIE"))
    assert [r.id for r in result] == ["1"]


def test_search_matches_description_and_ingredient_names():
    by_description = make_recipe("1", "Plain", description="Full of cinnamon")
    by_ingredient = make_recipe("2", "Other", ingredients=[Ingredient(item="Cinnamon stick", amount="1")])
    by_amount_only = make_recipe("3", "Third", ingredients=[Ingredient(item="sugar", amount="cinnamon spoon")])

    result = query((by_description, by_ingredient, by_amount_only), frozenset(), QueryCriteria(searchQuery="cinnamon"))
    assert {r.id for r in result} == {"1", "2"}


def test_blank_search_matches_everything():
    recipe = make_recipe("1")
    assert matches_search(recipe, normalize_search_query("   "))


def test_favorites_only_tolerates_unknown_ids():
    catalog = (make_recipe("1"), make_recipe("2"))
    result = query(catalog, frozenset({"2", "gone"}), QueryCriteria(favoritesOnly=True))
    assert [r.id for r in result] == ["2"]


def test_sort_by_time_is_stable():
    catalog = (
        make_recipe("a", timeMinutes=30),
        make_recipe("b", timeMinutes=10),
        make_recipe("c", timeMinutes=30),
        make_recipe("d", timeMinutes=10),
    )
    result = sort_recipes(catalog, SortOption.TIME)
    assert [r.id for r in result] == ["b", "d", "a", "c"]


def test_sort_by_difficulty_uses_fixed_order():
    catalog = (
        make_recipe("hard", difficulty=Difficulty.CHALLENGING),
        make_recipe("easy", difficulty=Difficulty.EASY),
        make_recipe("medium", difficulty=Difficulty.MEDIUM),
    )
    result = sort_recipes(catalog, SortOption.DIFFICULTY)
    assert [r.difficulty for r in result] == [Difficulty.EASY, Difficulty.MEDIUM, Difficulty.CHALLENGING]


def test_sort_by_title_is_not_codepoint_order():
    catalog = (make_recipe("1", "Zebra cake"), make_recipe("2", "apple pie"), make_recipe("3", "Éclair"))
    result = sort_recipes(catalog, SortOption.TITLE)
    assert [r.title for r in result] == ["apple pie", "Éclair", "Zebra cake"]


def test_sort_by_title_orders_hebrew_alphabetically():
    catalog = (make_recipe("1", "מרק ירקות"), make_recipe("2", "אורז לבן"), make_recipe("3", "בננה קפואה"))
    result = sort_recipes(catalog, SortOption.TITLE)
    assert [r.id for r in result] == ["2", "3", "1"]


def test_query_does_not_modify_catalog():
    catalog = (make_recipe("b", "B"), make_recipe("a", "A"))
    query(catalog, frozenset(), QueryCriteria())
    assert [r.id for r in catalog] == ["b", "a"]


def test_reset_after_empty_result_restores_full_view():
    catalog = initialize_catalog()
    narrowed = QueryCriteria(
        categoryFilter=Category.FRYING,
        difficultyFilter=Difficulty.EASY,
        searchQuery="nothing matches this",
        favoritesOnly=True,
    )
    assert query(catalog, frozenset(), narrowed) == []

    result = query(catalog, frozenset(), QueryCriteria())
    assert len(result) == len(catalog)
    assert result == sort_recipes(catalog, SortOption.TITLE)
