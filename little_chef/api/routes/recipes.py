"""Recipe catalog, navigation and generation endpoints."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from little_chef.api.dependencies import get_recipe_book
from little_chef.config import settings
from little_chef.middleware.rate_limit import limiter, rate_limit_dependency
from little_chef.models.query import ALL, NavigationResult, QueryCriteria, SharePayload, SortOption
from little_chef.models.recipe import Category, Difficulty, Recipe
from little_chef.services.recipe_book import RecipeBook
from little_chef.services.sharing import build_share_payload
from little_chef.utils.validators import MAX_PROMPT_LENGTH

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/recipes", tags=["recipes"])


class RecipeListResponse(BaseModel):
    count: int
    recipes: List[Recipe]


class RecipeOptionsResponse(BaseModel):
    categories: List[str]
    difficulties: List[str]
    sortOptions: List[str]
    fallbackImageUrl: str


class GenerationStatusResponse(BaseModel):
    isGenerating: bool


class GenerateRequest(BaseModel):
    """Request model for recipe generation."""

    prompt: str = Field(..., max_length=MAX_PROMPT_LENGTH, description="What to cook")
    category: Category = Category.BAKING


def get_query_criteria(
    category: str = Query(ALL, description="Category value or 'All'"),
    difficulty: str = Query(ALL, description="Difficulty value or 'All'"),
    q: str = Query("", description="Search in title, description and ingredient names"),
    favoritesOnly: bool = Query(False),
    sortBy: SortOption = Query(SortOption.TITLE),
) -> QueryCriteria:
    """Build query criteria from query-string parameters."""
    try:
        return QueryCriteria(
            categoryFilter=category,
            difficultyFilter=difficulty,
            searchQuery=q,
            favoritesOnly=favoritesOnly,
            sortBy=sortBy,
        )
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors()) from e


@router.get("", response_model=RecipeListResponse)
async def list_recipes(
    criteria: QueryCriteria = Depends(get_query_criteria),
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> RecipeListResponse:
    """
    Filtered and sorted view of the catalog.

    - **category** / **difficulty**: exact match, or `All`
    - **q**: case-insensitive substring search
    - **favoritesOnly**: restrict to favorited recipes
    - **sortBy**: `title`, `time` or `difficulty`
    """
    view = recipe_book.view(criteria)
    return RecipeListResponse(count=len(view), recipes=view)


@router.get("/options", response_model=RecipeOptionsResponse)
async def recipe_options() -> RecipeOptionsResponse:
    """Values the client needs to render filters and image fallbacks."""
    return RecipeOptionsResponse(
        categories=[ALL] + [c.value for c in Category],
        difficulties=[ALL] + [d.value for d in Difficulty],
        sortOptions=[s.value for s in SortOption],
        fallbackImageUrl=settings.fallback_image_url,
    )


@router.get("/generation", response_model=GenerationStatusResponse)
async def generation_status(recipe_book: RecipeBook = Depends(get_recipe_book)) -> GenerationStatusResponse:
    """Whether a generation is currently running."""
    return GenerationStatusResponse(isGenerating=recipe_book.is_generating)


@router.post("/generate", response_model=Recipe, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.generate_rate_limit)
async def generate_recipe(
    request: Request,
    generate_request: GenerateRequest,
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> Recipe:
    """
    Generate a new recipe with Gemini and add it to the top of the catalog.

    - **prompt**: what the kid wants to make
    - **category**: baking, cooking or frying
    """
    logger.info(
        "Route /recipes/generate called",
        extra={
            "request_id": getattr(request.state, "request_id", None),
            "route": "/recipes/generate",
            "params": {
                "prompt": generate_request.prompt[:200],
                "category": generate_request.category.value,
            },
        },
    )
    return await recipe_book.generate(generate_request.prompt, generate_request.category)


@router.get("/{recipe_id}", response_model=Recipe)
async def get_recipe(
    recipe_id: str,
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> Recipe:
    """Single recipe by id."""
    return recipe_book.get(recipe_id)


@router.get("/{recipe_id}/navigation", response_model=NavigationResult)
async def recipe_navigation(
    recipe_id: str,
    criteria: QueryCriteria = Depends(get_query_criteria),
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> NavigationResult:
    """
    Previous and next recipe around `recipe_id` in the view for the given criteria.

    Both are null when the recipe is not part of that view.
    """
    return recipe_book.navigation(criteria, recipe_id)


@router.get("/{recipe_id}/share", response_model=SharePayload)
async def share_recipe(
    recipe_id: str,
    _: None = Depends(rate_limit_dependency),
    recipe_book: RecipeBook = Depends(get_recipe_book),
) -> SharePayload:
    """Share title and message for the recipe."""
    return build_share_payload(recipe_book.get(recipe_id))
