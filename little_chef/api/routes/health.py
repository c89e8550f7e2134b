"""Health check endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from little_chef.api.dependencies import get_recipe_book
from little_chef.config import settings
from little_chef.services.recipe_book import RecipeBook

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check() -> Dict[str, str]:
    """Liveness probe."""
    return {"status": "healthy"}


@router.get("/ready")
async def readiness_check(recipe_book: RecipeBook = Depends(get_recipe_book)) -> Dict[str, Any]:
    """
    Readiness probe.

    Returns:
        Catalog size and whether Gemini generation is configured
    """
    return {
        "status": "ready",
        "dependencies": {
            "catalogSize": len(recipe_book.recipes),
            "generationEnabled": settings.generation_enabled,
        },
    }
