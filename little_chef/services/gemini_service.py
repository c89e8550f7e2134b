"""
Gemini client for recipe and image generation.

Key design:
- Recipe text is requested as JSON against the RecipeDraft schema, with the
  category enum narrowed to the category the user picked.
- Strict JSON guard + repair retries if Gemini returns invalid JSON / wrong schema.
- Image generation returns None when the model answers without an image;
  deciding on a fallback is the caller's job.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from little_chef.config import Settings, settings as default_settings
from little_chef.models.recipe import Category, Ingredient, RecipeDraft
from little_chef.utils.exceptions import GenerationError
from little_chef.utils.gemini_helpers import recipe_draft_schema, to_data_uri

logger = logging.getLogger(__name__)


SYSTEM_INSTRUCTION = """
You are a fun and encouraging cooking assistant for kids called "Little Chef".
Create a recipe based on the user's request.
The recipe should be safe for kids (with adult supervision mentioned if needed).
Language: Hebrew.
Keep descriptions exciting and simple.
""".strip()


class GeminiService:
    """Service for interacting with Gemini API."""

    def __init__(self, config: Optional[Settings] = None) -> None:
        self.settings = config or default_settings
        self._client: Optional[genai.Client] = None

    @property
    def client(self) -> genai.Client:
        """Get or create Gemini client (lazy initialization)."""
        if self._client is None:
            if not self.settings.generation_enabled:
                raise GenerationError("Gemini API key is missing")
            self._client = genai.Client(api_key=self.settings.gemini_api_key)
        return self._client

    # ---------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------

    async def generate_recipe_draft(self, prompt: str, category: Category) -> RecipeDraft:
        """Ask the text model for a kid-friendly recipe in `category`."""
        contents = self._build_recipe_prompt(prompt, category)
        schema = recipe_draft_schema(category)

        try:
            logger.info("Generating recipe draft (category=%s)", category.value)
            data = await self._generate_json_with_retries(
                model=self.settings.gemini_text_model,
                contents=contents,
                schema=schema,
                temperature=self.settings.gemini_temperature,
                max_retries=self.settings.gemini_max_retries,
                category=category,
            )
            return RecipeDraft(**data)

        except GenerationError:
            raise
        except ValidationError as e:
            logger.error("Recipe draft validation failed: %s", str(e), exc_info=True)
            raise GenerationError(f"Generated recipe does not match schema: {str(e)}") from e
        except Exception as e:
            logger.error("Recipe generation failed: %s", str(e), exc_info=True)
            raise GenerationError(f"Failed to generate recipe: {str(e)}") from e

    async def generate_recipe_image(
        self,
        title: str,
        description: str,
        ingredients: List[Ingredient],
    ) -> Optional[str]:
        """
        Ask the image model for a photo of the dish.

        Returns a data URI, or None if the response carried no image.
        Raises GenerationError if the call itself fails.
        """
        prompt = self._build_image_prompt(title, description, ingredients)

        def _sync_call() -> Any:
            return self.client.models.generate_content(
                model=self.settings.gemini_image_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    image_config=types.ImageConfig(aspect_ratio=self.settings.image_aspect_ratio),
                ),
            )

        try:
            logger.info("Generating recipe image for title=%s", title)
            resp = await asyncio.to_thread(_sync_call)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Failed to generate image: {str(e)}") from e

        for part in self._response_parts(resp):
            inline = getattr(part, "inline_data", None)
            if inline is not None and getattr(inline, "data", None):
                return to_data_uri(inline.data, inline.mime_type or "image/png")

        logger.info("Image model returned no image for title=%s", title)
        return None

    # ---------------------------------------------------------------------
    # Prompts
    # ---------------------------------------------------------------------

    def _build_recipe_prompt(self, prompt: str, category: Category) -> str:
        return f"Create a {category.value} recipe for: {prompt}"

    def _build_image_prompt(self, title: str, description: str, ingredients: List[Ingredient]) -> str:
        ingredients_list = ", ".join(i.item for i in ingredients)
        return f"""
A professional, high-quality, vibrant food photography shot of a dish called "{title}".
Description: {description}.
Key ingredients to visualize: {ingredients_list}.
Style: Bright, colorful, appetizing, overhead or 45-degree angle, shallow depth of field, suitable for a children's cooking app.
The image must strictly represent the food described.
""".strip()

    def _build_repair_prompt(self, *, original_prompt: str, error_message: str, bad_output: str) -> str:
        return f"""
{original_prompt}

The previous answer was not valid JSON for the requested schema.

Error:
{error_message}

Previous answer (to fix):
{bad_output}

Return only the corrected JSON object, with no Markdown and no text before or after it.
Do not change the meaning of the recipe, only fix structure, fields and types.
""".strip()

    # ---------------------------------------------------------------------
    # Core Gemini call + JSON guard + repair retries
    # ---------------------------------------------------------------------

    async def _generate_json_with_retries(
        self,
        *,
        model: str,
        contents: str,
        schema: Dict[str, Any],
        temperature: float,
        category: Category,
        max_retries: int = 1,
    ) -> Dict[str, Any]:
        """
        Calls Gemini and enforces:
        - Return must contain a valid JSON object
        - The object must validate as a RecipeDraft in the requested category
        - If it fails, we ask Gemini to repair and retry.
        """
        last_text: Optional[str] = None
        last_err: Optional[str] = None
        request = contents

        for attempt in range(max_retries + 1):
            try:
                response_text = await self._call_gemini(
                    model=model,
                    contents=request,
                    schema=schema,
                    temperature=temperature,
                )
                last_text = response_text

                data = json.loads(self._extract_json_from_text(response_text))
                if not isinstance(data, dict):
                    raise GenerationError("Gemini returned JSON that is not an object")

                draft = RecipeDraft(**data)
                if draft.category != category:
                    raise GenerationError(
                        f"Gemini returned category {draft.category.value!r}, expected {category.value!r}"
                    )
                return data

            except (json.JSONDecodeError, ValidationError, GenerationError) as e:
                last_err = str(e)
                logger.warning(
                    "Gemini JSON attempt %d/%d failed: %s",
                    attempt + 1,
                    max_retries + 1,
                    last_err,
                )
                if last_text is None or attempt >= max_retries:
                    break

                request = self._build_repair_prompt(
                    original_prompt=contents,
                    error_message=last_err,
                    bad_output=last_text,
                )

        raise GenerationError(f"Gemini could not produce a valid recipe. Last error: {last_err}")

    async def _call_gemini(
        self,
        *,
        model: str,
        contents: str,
        schema: Dict[str, Any],
        temperature: float,
    ) -> str:
        """Single Gemini call requesting JSON via response_schema."""
        def _sync_call() -> Any:
            return self.client.models.generate_content(
                model=model,
                contents=contents,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    response_mime_type="application/json",
                    response_schema=schema,
                    temperature=temperature,
                ),
            )

        try:
            resp = await asyncio.to_thread(_sync_call)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Gemini request failed: {str(e)}") from e

        text = getattr(resp, "text", None)
        if not text:
            raise GenerationError("Failed to generate recipe text")
        logger.debug("Gemini raw response:\n%s", text)
        return text.strip()

    # ---------------------------------------------------------------------
    # Parsing
    # ---------------------------------------------------------------------

    @staticmethod
    def _response_parts(resp: Any) -> List[Any]:
        candidates = getattr(resp, "candidates", None) or []
        if not candidates:
            return []
        content = getattr(candidates[0], "content", None)
        return list(getattr(content, "parts", None) or [])

    def _extract_json_from_text(self, text: str) -> str:
        """Extract JSON object from text (handles accidental wrappers)."""
        t = text.strip()

        t = re.sub(r"^```json\s*", "", t, flags=re.IGNORECASE | re.MULTILINE)
        t = re.sub(r"^```\s*", "", t, flags=re.MULTILINE)
        t = re.sub(r"\s*```$", "", t, flags=re.MULTILINE).strip()

        if t.startswith("{") and t.endswith("}"):
            return t

        first = t.find("{")
        last = t.rfind("}")
        if first != -1 and last != -1 and last > first:
            return t[first:last + 1]

        return t
