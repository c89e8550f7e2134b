"""Custom exception classes."""


class LittleChefException(Exception):
    """Base exception for Little Chef application."""

    pass


class ValidationError(LittleChefException):
    """Raised when input validation fails."""

    pass


class RecipeNotFoundError(LittleChefException):
    """Raised when a recipe id is not in the catalog."""

    pass


class IdentifierConflictError(LittleChefException):
    """Raised when an inserted recipe reuses an existing id."""

    pass


class GenerationError(LittleChefException):
    """Raised when Gemini fails to produce a valid recipe or image."""

    pass


class GenerationInProgressError(LittleChefException):
    """Raised when a generation is requested while another is running."""

    pass
