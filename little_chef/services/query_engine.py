"""
Filter, search and sort over the recipe catalog.

Everything here is a pure function of (catalog, favorites, criteria). The
catalog is small enough that a linear scan per query is the whole story:
no indexes, no caching, no relevance scoring.
"""

from __future__ import annotations

from functools import lru_cache
from typing import AbstractSet, Iterable, List, Sequence

from pyuca import Collator

from little_chef.models.query import ALL, QueryCriteria, SortOption
from little_chef.models.recipe import Recipe


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Loading the DUCET table takes a moment; do it once, on first title sort.
    return Collator()


def normalize_search_query(query: str) -> str:
    return query.strip().casefold()


def matches_search(recipe: Recipe, normalized_query: str) -> bool:
    """Substring match on title, description or any ingredient name."""
    if not normalized_query:
        return True
    if normalized_query in recipe.title.casefold():
        return True
    if normalized_query in recipe.description.casefold():
        return True
    return any(normalized_query in ing.item.casefold() for ing in recipe.ingredients)


def matches_criteria(
    recipe: Recipe,
    favorites: AbstractSet[str],
    criteria: QueryCriteria,
) -> bool:
    if criteria.categoryFilter != ALL and recipe.category != criteria.categoryFilter:
        return False
    if criteria.difficultyFilter != ALL and recipe.difficulty != criteria.difficultyFilter:
        return False
    if criteria.favoritesOnly and recipe.id not in favorites:
        return False
    return matches_search(recipe, normalize_search_query(criteria.searchQuery))


def sort_recipes(recipes: Iterable[Recipe], sort_by: SortOption) -> List[Recipe]:
    """Stable sort; equal keys keep their incoming order."""
    if sort_by == SortOption.TITLE:
        collator = _collator()
        return sorted(recipes, key=lambda r: collator.sort_key(r.title))
    if sort_by == SortOption.TIME:
        return sorted(recipes, key=lambda r: r.timeMinutes)
    if sort_by == SortOption.DIFFICULTY:
        return sorted(recipes, key=lambda r: r.difficulty.rank)
    raise ValueError(f"Unknown sort option: {sort_by}")


def query(
    catalog: Sequence[Recipe],
    favorites: AbstractSet[str],
    criteria: QueryCriteria,
) -> List[Recipe]:
    """The ordered view of `catalog` for `criteria`."""
    filtered = [recipe for recipe in catalog if matches_criteria(recipe, favorites, criteria)]
    return sort_recipes(filtered, criteria.sortBy)
