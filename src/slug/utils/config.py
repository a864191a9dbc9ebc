"""Custom substitution map persistence."""

import json
import logging
from pathlib import Path

from slug.errors import MapFileError

logger = logging.getLogger(__name__)


class MapFileManager:
    """Loads and saves custom substitution maps as JSON objects."""

    MAP_PATH = Path.home() / ".config" / "slug" / "charmap.json"

    def __init__(self, map_path: Path | None = None):
        """Initialize MapFileManager with optional custom path."""
        self.map_path = Path(map_path) if map_path is not None else self.MAP_PATH

    def load(self) -> dict[str, str]:
        """Load the map from file, returning an empty map if not found.

        Raises:
            MapFileError: If the file is not a JSON object of strings.
        """
        if not self.map_path.exists():
            return {}

        try:
            with open(self.map_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MapFileError(f"Invalid map file {self.map_path}: {e}") from e

        if not isinstance(data, dict):
            raise MapFileError(f"Map file {self.map_path} must contain a JSON object")

        for key, value in data.items():
            if not key or not isinstance(value, str):
                raise MapFileError(
                    f"Map file {self.map_path} has an invalid entry for {key!r}"
                )

        logger.debug("Loaded %d substitutions from %s", len(data), self.map_path)
        return data

    def save(self, mapping: dict[str, str]) -> None:
        """Save the map to file."""
        self.map_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.map_path, "w", encoding="utf-8") as f:
            json.dump(dict(mapping), f, indent=2, ensure_ascii=False)

        logger.debug("Saved %d substitutions to %s", len(mapping), self.map_path)
