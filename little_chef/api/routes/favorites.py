"""Favorites endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from little_chef.api.dependencies import get_recipe_book
from little_chef.middleware.rate_limit import rate_limit_dependency
from little_chef.services.recipe_book import RecipeBook

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/favorites", tags=["favorites"])


class FavoritesResponse(BaseModel):
    favorites: List[str]


class ToggleFavoriteResponse(BaseModel):
    id: str
    isFavorite: bool
    favorites: List[str]


@router.get("", response_model=FavoritesResponse)
async def list_favorites(recipe_book: RecipeBook = Depends(get_recipe_book)) -> FavoritesResponse:
    """All favorited recipe ids, including ones no longer in the catalog."""
    return FavoritesResponse(favorites=sorted(recipe_book.favorites))


@router.post("/{recipe_id}/toggle", response_model=ToggleFavoriteResponse)
async def toggle_favorite(
    request: Request,
    recipe_id: str,
    _: None = Depends(rate_limit_dependency),
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> ToggleFavoriteResponse:
    """Add the recipe to favorites, or remove it if already there."""
    favorites = recipe_book.toggle_favorite(recipe_id)
    logger.info(
        "Route /favorites/{recipe_id}/toggle called",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "recipe_id": recipe_id,
            "is_favorite": recipe_id in favorites,
        },
    )
    return ToggleFavoriteResponse(
        id=recipe_id,
        isFavorite=recipe_id in favorites,
        favorites=sorted(favorites),
    )
