"""Input validation utilities."""

from little_chef.utils.exceptions import ValidationError

MAX_PROMPT_LENGTH = 500


def validate_prompt(prompt: str) -> str:
    """
    Validate a recipe generation prompt.

    Args:
        prompt: What the user wants to cook

    Returns:
        The trimmed prompt

    Raises:
        ValidationError: If the prompt is empty or too long
    """
    if not isinstance(prompt, str):
        raise ValidationError("Prompt must be a string")

    prompt = prompt.strip()
    if not prompt:
        raise ValidationError("Prompt cannot be empty")

    if len(prompt) > MAX_PROMPT_LENGTH:
        raise ValidationError(f"Prompt cannot exceed {MAX_PROMPT_LENGTH} characters")

    return prompt
