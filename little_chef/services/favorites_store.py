"""Persistent favorites set."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import FrozenSet, Iterable

logger = logging.getLogger(__name__)

Favorites = FrozenSet[str]


class FavoritesStore:
    """
    Keeps the favorited recipe ids in a single JSON slot on disk.

    The slot holds a JSON array of id strings and is fully rewritten on
    every persist. Read and write problems are logged and never raised:
    a broken slot loads as an empty set, and a failed write leaves the
    caller's in-memory set authoritative for the session.
    """

    def __init__(self, storage_dir: str | os.PathLike, key: str) -> None:
        self.path = Path(storage_dir) / f"{key}.json"

    def load(self) -> Favorites:
        """Read persisted favorites; missing or malformed data yields an empty set."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No favorites stored at %s", self.path)
            return frozenset()
        except OSError as e:
            logger.warning("Failed to read favorites from %s: %s", self.path, e)
            return frozenset()
        except UnicodeDecodeError as e:
            logger.warning("Discarding undecodable favorites at %s: %s", self.path, e)
            return frozenset()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Discarding malformed favorites at %s: %s", self.path, e)
            return frozenset()

        if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
            logger.warning("Discarding favorites at %s: expected a list of ids", self.path)
            return frozenset()

        return frozenset(data)

    @staticmethod
    def toggle(favorites: Iterable[str], recipe_id: str) -> Favorites:
        """Return a new set with `recipe_id` removed if present, added otherwise."""
        current = frozenset(favorites)
        if recipe_id in current:
            return current - {recipe_id}
        return current | {recipe_id}

    def persist(self, favorites: Iterable[str]) -> bool:
        """Overwrite the slot with `favorites`. Returns False if the write failed."""
        payload = json.dumps(sorted(favorites), ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
            return True
        except OSError as e:
            logger.error("Failed to persist favorites to %s: %s", self.path, e, exc_info=True)
            return False
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
