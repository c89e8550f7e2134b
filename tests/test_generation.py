"""Tests for the generation orchestrator."""

import asyncio

import pytest

from little_chef.models.recipe import Category
from little_chef.utils.exceptions import (
    GenerationError,
    GenerationInProgressError,
    ValidationError,
)
from little_chef.utils.gemini_helpers import placeholder_image_url


def test_generate_inserts_recipe_at_front(recipe_book, fake_gemini):
    recipe = asyncio.run(recipe_book.generate("עוגה עם גזר", Category.BAKING))

    assert recipe.isGenerated is True
    assert recipe.imageUrl == fake_gemini.image
    assert recipe.title == fake_gemini.draft.title
    assert recipe_book.recipes[0] == recipe
    assert recipe_book.get(recipe.id) == recipe
    assert not recipe_book.is_generating


def test_generate_calls_text_then_image(recipe_book, fake_gemini):
    asyncio.run(recipe_book.generate("  עוגה  ", Category.BAKING))

    assert [c[0] for c in fake_gemini.calls] == ["text", "image"]
    assert fake_gemini.calls[0][1:] == ("עוגה", Category.BAKING)
    assert fake_gemini.calls[1][3] == ["גזר", "קמח"]


def test_image_failure_falls_back_to_placeholder(recipe_book, fake_gemini):
    fake_gemini.image_error = GenerationError("quota exceeded")

    recipe = asyncio.run(recipe_book.generate("עוגה", Category.BAKING))

    assert recipe.isGenerated is True
    assert recipe.imageUrl == placeholder_image_url(recipe.title)
    assert recipe.imageUrl.startswith("https://picsum.photos/seed/")


def test_missing_image_falls_back_to_placeholder(recipe_book, fake_gemini):
    fake_gemini.image = None

    recipe = asyncio.run(recipe_book.generate("עוגה", Category.BAKING))

    assert recipe.imageUrl == placeholder_image_url(recipe.title)


def test_text_failure_propagates_and_leaves_catalog(recipe_book, failing_text):
    before = recipe_book.recipes

    with pytest.raises(GenerationError):
        asyncio.run(recipe_book.generate("עוגה", Category.BAKING))

    assert recipe_book.recipes == before
    assert not recipe_book.is_generating
    assert [c[0] for c in failing_text.calls] == ["text"]


def test_empty_prompt_is_rejected_before_calling_gemini(recipe_book, fake_gemini):
    with pytest.raises(ValidationError):
        asyncio.run(recipe_book.generate("   ", Category.COOKING))
    assert fake_gemini.calls == []


def test_generated_ids_are_unique(recipe_book):
    async def generate_two():
        first = await recipe_book.generate("א", Category.BAKING)
        second = await recipe_book.generate("ב", Category.BAKING)
        return first, second

    first, second = asyncio.run(generate_two())
    assert first.id != second.id
    assert [r.id for r in recipe_book.recipes[:2]] == [second.id, first.id]


def test_generating_flag_is_set_during_generation_and_blocks_second_request(recipe_book, fake_gemini):
    release = asyncio.Event()
    original = fake_gemini.generate_recipe_draft

    async def slow_draft(prompt, category):
        await release.wait()
        return await original(prompt, category)

    fake_gemini.generate_recipe_draft = slow_draft

    async def scenario():
        task = asyncio.create_task(recipe_book.generate("עוגה", Category.BAKING))
        await asyncio.sleep(0)
        assert recipe_book.is_generating

        with pytest.raises(GenerationInProgressError):
            await recipe_book.generate("עוד עוגה", Category.BAKING)
        assert recipe_book.is_generating

        release.set()
        return await task

    recipe = asyncio.run(scenario())
    assert recipe.isGenerated
    assert not recipe_book.is_generating
