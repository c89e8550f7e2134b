"""The single owner of catalog, favorites and generation state."""

from __future__ import annotations

import logging
from typing import List, Optional

from little_chef.config import Settings, settings as default_settings
from little_chef.models.query import NavigationResult, QueryCriteria
from little_chef.models.recipe import Category, Recipe
from little_chef.services import navigation, query_engine
from little_chef.services.catalog import Catalog, RecipeCatalog
from little_chef.services.favorites_store import Favorites, FavoritesStore
from little_chef.services.gemini_service import GeminiService
from little_chef.services.generation import GenerationOrchestrator
from little_chef.utils.exceptions import RecipeNotFoundError
from little_chef.utils.validators import validate_prompt

logger = logging.getLogger(__name__)


class RecipeBook:
    """
    Catalog, favorites and generation behind explicit state transitions.

    Catalog and favorites are immutable snapshots that get replaced, never
    edited, so a query always sees one consistent state.
    """

    def __init__(
        self,
        *,
        catalog: RecipeCatalog,
        favorites_store: FavoritesStore,
        orchestrator: GenerationOrchestrator,
    ) -> None:
        self.catalog = catalog
        self.favorites_store = favorites_store
        self.orchestrator = orchestrator
        self._favorites: Favorites = favorites_store.load()

    @classmethod
    def from_settings(
        cls,
        config: Optional[Settings] = None,
        *,
        gemini_service: Optional[GeminiService] = None,
    ) -> "RecipeBook":
        config = config or default_settings
        catalog = RecipeCatalog()
        return cls(
            catalog=catalog,
            favorites_store=FavoritesStore(config.storage_dir, config.favorites_key),
            orchestrator=GenerationOrchestrator(gemini_service or GeminiService(config), catalog),
        )

    @property
    def recipes(self) -> Catalog:
        return self.catalog.recipes

    @property
    def favorites(self) -> Favorites:
        return self._favorites

    @property
    def is_generating(self) -> bool:
        return self.orchestrator.is_generating

    def view(self, criteria: Optional[QueryCriteria] = None) -> List[Recipe]:
        return query_engine.query(self.recipes, self._favorites, criteria or QueryCriteria())

    def get(self, recipe_id: str) -> Recipe:
        recipe = self.catalog.get(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(f"Recipe not found: {recipe_id}")
        return recipe

    def navigation(self, criteria: QueryCriteria, recipe_id: str) -> NavigationResult:
        """Neighbours of `recipe_id` in the view as it stands right now."""
        return navigation.resolve(self.view(criteria), recipe_id)

    def is_favorite(self, recipe_id: str) -> bool:
        return recipe_id in self._favorites

    def toggle_favorite(self, recipe_id: str) -> Favorites:
        self._favorites = FavoritesStore.toggle(self._favorites, recipe_id)
        if not self.favorites_store.persist(self._favorites):
            logger.warning(
                "Favorites kept in memory only",
                extra={"recipe_id": recipe_id, "favorites_count": len(self._favorites)},
            )
        return self._favorites

    async def generate(self, prompt: str, category: Category) -> Recipe:
        return await self.orchestrator.generate(validate_prompt(prompt), category)
