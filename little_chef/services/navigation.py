"""Previous/next resolution for browsing recipes one at a time."""

from typing import Sequence

from little_chef.models.query import NavigationResult
from little_chef.models.recipe import Recipe


def resolve(view: Sequence[Recipe], current_id: str) -> NavigationResult:
    """
    Find the neighbours of `current_id` in `view`.

    A recipe that is not in the view (for example one filtered out after it
    was opened) has no neighbours; navigation is simply disabled.
    """
    index = next((i for i, r in enumerate(view) if r.id == current_id), -1)
    if index < 0:
        return NavigationResult()

    return NavigationResult(
        previous=view[index - 1] if index > 0 else None,
        next=view[index + 1] if index < len(view) - 1 else None,
    )
