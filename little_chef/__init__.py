"""Little Chef: recipe catalog, search and AI recipe generation for kids."""

__version__ = "1.0.0"
