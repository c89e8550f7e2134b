"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("GEMINI_API_KEY", "")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from little_chef.api.dependencies import get_recipe_book
from little_chef.main import app
from little_chef.middleware.rate_limit import limiter
from little_chef.models.recipe import Category, Difficulty, Ingredient, Recipe, RecipeDraft
from little_chef.services.catalog import RecipeCatalog
from little_chef.services.favorites_store import FavoritesStore
from little_chef.services.generation import GenerationOrchestrator
from little_chef.services.recipe_book import RecipeBook
from little_chef.utils.exceptions import GenerationError


def make_recipe(
    id: str,
    title: str = "Chocolate Cookie",
    *,
    description: str = "Sweet and crunchy",
    category: Category = Category.BAKING,
    difficulty: Difficulty = Difficulty.EASY,
    timeMinutes: int = 20,
    ingredients=None,
    imageUrl: str = "https://example.com/image.jpg",
) -> Recipe:
    return Recipe(
        id=id,
        title=title,
        description=description,
        category=category,
        difficulty=difficulty,
        timeMinutes=timeMinutes,
        ingredients=ingredients if ingredients is not None else [Ingredient(item="flour", amount="1 cup")],
        instructions=["Mix", "Bake"],
        imageUrl=imageUrl,
    )


def make_draft(title: str = "עוגת גזר", category: Category = Category.BAKING) -> RecipeDraft:
    return RecipeDraft(
        title=title,
        description="עוגה רכה ומתוקה",
        category=category,
        difficulty=Difficulty.EASY,
        timeMinutes=45,
        ingredients=[Ingredient(item="גזר", amount="2"), Ingredient(item="קמח", amount="כוס")],
        instructions=["מגררים גזר", "מערבבים", "אופים"],
    )


class FakeGeminiService:
    """Stands in for GeminiService; records calls and can be told to fail."""

    def __init__(self) -> None:
        self.draft = make_draft()
        self.image = "data:image/png;base64,aW1hZ2U="
        self.text_error = None
        self.image_error = None
        self.calls = []

    async def generate_recipe_draft(self, prompt, category):
        self.calls.append(("text", prompt, category))
        if self.text_error is not None:
            raise self.text_error
        return self.draft

    async def generate_recipe_image(self, title, description, ingredients):
        self.calls.append(("image", title, description, [i.item for i in ingredients]))
        if self.image_error is not None:
            raise self.image_error
        return self.image


@pytest.fixture
def fake_gemini():
    return FakeGeminiService()


@pytest.fixture
def favorites_store(tmp_path):
    return FavoritesStore(tmp_path / "storage", "little-chef-favorites-v1")


@pytest.fixture
def recipe_book(fake_gemini, favorites_store):
    catalog = RecipeCatalog()
    return RecipeBook(
        catalog=catalog,
        favorites_store=favorites_store,
        orchestrator=GenerationOrchestrator(fake_gemini, catalog),
    )


@pytest.fixture
def client(recipe_book):
    """Create test client bound to an isolated recipe book."""
    app.dependency_overrides[get_recipe_book] = lambda: recipe_book
    limiter.enabled = False
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        limiter.enabled = True


@pytest.fixture
def failing_text(fake_gemini):
    fake_gemini.text_error = GenerationError("model unavailable")
    return fake_gemini
