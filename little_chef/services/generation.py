"""Drives Gemini to produce a new recipe and adds it to the catalog."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

from little_chef.models.recipe import Category, Recipe
from little_chef.services.catalog import RecipeCatalog, RecipeIdGenerator
from little_chef.services.gemini_service import GeminiService
from little_chef.utils.exceptions import GenerationInProgressError
from little_chef.utils.gemini_helpers import placeholder_image_url

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """
    Runs one generation at a time: recipe text, then image, then insert.

    Text failures propagate as GenerationError and leave the catalog as it
    was. Image failures fall back to a placeholder derived from the title.
    """

    def __init__(
        self,
        gemini_service: GeminiService,
        catalog: RecipeCatalog,
        id_generator: Optional[Callable[[], str]] = None,
    ) -> None:
        self.gemini_service = gemini_service
        self.catalog = catalog
        self.id_generator = id_generator or RecipeIdGenerator()
        self._generating = False

    @property
    def is_generating(self) -> bool:
        return self._generating

    @contextmanager
    def _generating_scope(self) -> Iterator[None]:
        if self._generating:
            raise GenerationInProgressError("A recipe is already being generated")
        self._generating = True
        try:
            yield
        finally:
            self._generating = False

    async def generate(self, prompt: str, category: Category) -> Recipe:
        """Generate, illustrate and insert a recipe. `prompt` must be non-empty."""
        with self._generating_scope():
            draft = await self.gemini_service.generate_recipe_draft(prompt, category)

            image_url: Optional[str] = None
            try:
                image_url = await self.gemini_service.generate_recipe_image(
                    draft.title, draft.description, draft.ingredients
                )
            except Exception as e:
                logger.warning("Image generation failed, using placeholder: %s", e, exc_info=True)

            if not image_url:
                image_url = placeholder_image_url(draft.title)

            recipe = Recipe.from_draft(draft, id=self.id_generator(), image_url=image_url)
            self.catalog.insert(recipe)

        logger.info(
            "Generated recipe",
            extra={"recipe_id": recipe.id, "category": category.value, "title": recipe.title},
        )
        return recipe
