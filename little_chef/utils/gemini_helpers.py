"""Shared Gemini API helper utilities."""

import base64
import copy
from functools import lru_cache
from typing import Any, Dict
from urllib.parse import quote

from little_chef.models.recipe import Category

# Schema keys Gemini rejects or that only carry Pydantic metadata.
_DROPPED_KEYS = frozenset(
    {"additionalProperties", "title", "description", "examples", "example", "$defs", "default"}
)


def clean_schema_for_gemini(schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Clean Pydantic JSON schema for Gemini responseSchema format.
    - Resolves $ref references to their definitions (Gemini doesn't support $ref)
    - Removes Pydantic metadata fields and 'additionalProperties'
    - Handles anyOf for Optional fields (extracts the non-null type)
    Property names are kept even when they collide with metadata keys.
    """
    defs = schema.get("$defs", {})

    def resolve_ref(ref: str) -> Dict[str, Any]:
        if ref.startswith("#/$defs/"):
            return defs.get(ref[len("#/$defs/"):], {})
        return {}

    def clean(s: Any) -> Any:
        if not isinstance(s, dict):
            return s

        if "$ref" in s:
            return clean(resolve_ref(s["$ref"]))

        result: Dict[str, Any] = {}
        for key, value in s.items():
            if key in _DROPPED_KEYS:
                continue
            if key == "properties" and isinstance(value, dict):
                result[key] = {name: clean(prop) for name, prop in value.items()}
            elif isinstance(value, dict):
                result[key] = clean(value)
            elif isinstance(value, list):
                result[key] = [clean(item) for item in value]
            else:
                result[key] = value

        if "anyOf" in result:
            any_of = result.pop("anyOf")
            for option in any_of:
                if isinstance(option, dict) and option.get("type") != "null":
                    result.update(option)
                    break

        return result

    return clean(schema)


@lru_cache(maxsize=1)
def _clean_draft_schema() -> Dict[str, Any]:
    from little_chef.models.recipe import RecipeDraft
    return clean_schema_for_gemini(RecipeDraft.model_json_schema())


def recipe_draft_schema(category: Category) -> Dict[str, Any]:
    """RecipeDraft response schema with the category enum narrowed to `category`."""
    schema = copy.deepcopy(_clean_draft_schema())
    schema["properties"]["category"] = {"type": "string", "enum": [category.value]}
    return schema


def placeholder_image_url(title: str) -> str:
    """Deterministic stand-in image for a recipe title."""
    return f"https://picsum.photos/seed/{quote(title, safe='')}/800/600"


def to_data_uri(data: bytes, mime_type: str = "image/png") -> str:
    return f"data:{mime_type};base64,{base64.b64encode(data).decode('ascii')}"
