"""Share text for the client's share sheet."""

from little_chef.models.query import SharePayload
from little_chef.models.recipe import Recipe

SHARE_INTRO = "תראו איזה מתכון מגניב מצאתי בשף קטן"


def build_share_payload(recipe: Recipe) -> SharePayload:
    return SharePayload(
        title=recipe.title,
        text=f"{SHARE_INTRO}: {recipe.title}\n\n{recipe.description}",
    )
