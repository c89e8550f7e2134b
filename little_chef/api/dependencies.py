"""Shared API dependencies."""

from functools import lru_cache

from little_chef.services.recipe_book import RecipeBook


@lru_cache(maxsize=1)
def get_recipe_book() -> RecipeBook:
    """Process-wide recipe book (catalog, favorites, generation)."""
    return RecipeBook.from_settings()
