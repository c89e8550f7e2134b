"""Recipe Pydantic models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Kind of cooking a recipe involves."""

    BAKING = "אפייה"
    COOKING = "בישול"
    FRYING = "טיגון"


class Difficulty(str, Enum):
    """How hard a recipe is. Ordered: EASY < MEDIUM < CHALLENGING."""

    EASY = "קל"
    MEDIUM = "בינוני"
    CHALLENGING = "מאתגר"

    @property
    def rank(self) -> int:
        return _DIFFICULTY_RANK[self]


_DIFFICULTY_RANK = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.CHALLENGING: 3,
}


class Ingredient(BaseModel):
    """Single ingredient line."""

    model_config = ConfigDict(frozen=True)

    item: str = Field(..., description="Ingredient name")
    amount: str = Field(..., description="Free-text quantity (e.g., '2 כוסות')")


class RecipeDraft(BaseModel):
    """Recipe fields as produced by the text generation model."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Fun title of the recipe in Hebrew")
    description: str = Field(..., description="Short, appetizing description in Hebrew")
    category: Category
    difficulty: Difficulty
    timeMinutes: int = Field(..., ge=0, description="Preparation time in minutes")
    ingredients: List[Ingredient]
    instructions: List[str] = Field(..., description="Step by step instructions")


class Recipe(RecipeDraft):
    """A recipe in the catalog. Immutable once created."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "1",
                "title": "עוגיות שוקולד צ'יפס",
                "description": "עוגיות רכות ומתוקות עם המון שוקולד.",
                "category": "אפייה",
                "difficulty": "קל",
                "timeMinutes": 30,
                "ingredients": [
                    {"item": "קמח", "amount": "2 כוסות"},
                    {"item": "שוקולד צ'יפס", "amount": "1 כוס"},
                ],
                "instructions": ["מחממים תנור ל-180 מעלות.", "מערבבים את כל החומרים."],
                "imageUrl": "https://picsum.photos/seed/cookies/800/600",
                "isGenerated": False,
            }
        },
    )

    id: str = Field(..., min_length=1, description="Unique recipe ID")
    imageUrl: str = Field(..., description="Image URL or data URI")
    isGenerated: bool = Field(False, description="True for AI-generated recipes")

    @classmethod
    def from_draft(cls, draft: RecipeDraft, *, id: str, image_url: str) -> "Recipe":
        """Complete a generated draft into a catalog recipe."""
        return cls(
            **draft.model_dump(),
            id=id,
            imageUrl=image_url,
            isGenerated=True,
        )
