"""Pydantic models."""

from little_chef.models.query import ALL, NavigationResult, QueryCriteria, SharePayload, SortOption
from little_chef.models.recipe import Category, Difficulty, Ingredient, Recipe, RecipeDraft

__all__ = [
    "ALL",
    "Category",
    "Difficulty",
    "Ingredient",
    "NavigationResult",
    "QueryCriteria",
    "Recipe",
    "RecipeDraft",
    "SharePayload",
    "SortOption",
]
