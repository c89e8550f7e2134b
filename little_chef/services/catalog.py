"""Recipe catalog: seed data, newest-first insertion and id assignment."""

from __future__ import annotations

import logging
import threading
import time
from typing import Iterable, Optional, Sequence, Tuple

from little_chef.data.seed_recipes import SEED_RECIPES
from little_chef.models.recipe import Recipe
from little_chef.utils.exceptions import IdentifierConflictError

logger = logging.getLogger(__name__)

Catalog = Tuple[Recipe, ...]


def initialize_catalog(seed: Optional[Iterable[dict]] = None) -> Catalog:
    """Build the starting catalog from seed data, keeping authored order."""
    records = SEED_RECIPES if seed is None else seed
    catalog = tuple(Recipe(**record) for record in records)

    ids = [r.id for r in catalog]
    if len(set(ids)) != len(ids):
        raise IdentifierConflictError("Seed data contains duplicate recipe ids")

    return catalog


def insert_recipe(catalog: Sequence[Recipe], recipe: Recipe) -> Catalog:
    """Return a new catalog with `recipe` at the front."""
    if any(existing.id == recipe.id for existing in catalog):
        raise IdentifierConflictError(f"Recipe id already exists: {recipe.id}")
    return (recipe, *catalog)


def find_recipe(catalog: Sequence[Recipe], recipe_id: str) -> Optional[Recipe]:
    for recipe in catalog:
        if recipe.id == recipe_id:
            return recipe
    return None


class RecipeIdGenerator:
    """Epoch-millisecond ids, strictly increasing within the process."""

    def __init__(self, clock=time.time) -> None:
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            candidate = int(self._clock() * 1000)
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return str(candidate)


class RecipeCatalog:
    """Holds the current catalog snapshot. Each insert swaps in a new tuple."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None) -> None:
        self._recipes: Catalog = initialize_catalog() if recipes is None else tuple(recipes)

    @property
    def recipes(self) -> Catalog:
        return self._recipes

    def __len__(self) -> int:
        return len(self._recipes)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        return find_recipe(self._recipes, recipe_id)

    def insert(self, recipe: Recipe) -> Catalog:
        self._recipes = insert_recipe(self._recipes, recipe)
        logger.info(
            "Recipe added to catalog",
            extra={"recipe_id": recipe.id, "catalog_size": len(self._recipes)},
        )
        return self._recipes
