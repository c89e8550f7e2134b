"""Query criteria and derived view models."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from little_chef.models.recipe import Category, Difficulty, Recipe

ALL = "All"


class SortOption(str, Enum):
    """Ordering applied to a filtered view."""

    TITLE = "title"
    TIME = "time"
    DIFFICULTY = "difficulty"


class QueryCriteria(BaseModel):
    """Filter, search and sort settings. `QueryCriteria()` is the reset state."""

    model_config = ConfigDict(frozen=True)

    categoryFilter: Union[Category, Literal["All"]] = ALL
    difficultyFilter: Union[Difficulty, Literal["All"]] = ALL
    searchQuery: str = ""
    favoritesOnly: bool = False
    sortBy: SortOption = SortOption.TITLE


class NavigationResult(BaseModel):
    """Neighbours of the open recipe within the current view."""

    previous: Optional[Recipe] = None
    next: Optional[Recipe] = None


class SharePayload(BaseModel):
    """Text handed to the client's share sheet or clipboard."""

    title: str
    text: str = Field(..., description="Share message in Hebrew")
