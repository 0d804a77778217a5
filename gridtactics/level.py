"""
Level loading for JSON-defined battle boards.

This module provides LevelLoader for converting JSON level files into Level
objects. A level defines everything a movement check needs:
- Board dimension (square grid)
- The player's stats, modifiers and position
- Enemy stats, types and positions
- Static obstacles

Level file structure:
```json
{
  "name": "corner",
  "description": "Destination boxed in by an enemy and a rock",
  "dimension": 4,
  "player": {"position": [4, 3], "movement": 3, "movement_mod": 1},
  "enemies": [{"enemy_type": "spider", "position": [3, 2], "movement": 2}],
  "obstacles": [[2, 3]],
  "metadata": {}
}
```

Positions are ``[row, col]`` pairs or ``{"row": r, "col": c}`` objects.

Usage:
    loader = LevelLoader()
    level = loader.load("corner")
    grid = level.to_grid()
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import Config
from .schemas import Level


class LevelLoader:
    """Load and validate levels from JSON files.

    Directory structure:
    - Default: Config.LEVELS_DIR (the bundled gridtactics/levels unless
      GRIDTACTICS_LEVELS_DIR is set)
    - Override via constructor: LevelLoader(Path("/custom/levels"))
    - Level files: {level_name}.json (e.g., "corner.json")

    Validation:
    - Required fields: name, dimension, player
    - Field types, non-negative stats and on-board enemies/obstacles are
      enforced by the Level model (pydantic.ValidationError)
    """

    REQUIRED_FIELDS = ("name", "dimension", "player")

    def __init__(self, levels_dir: Optional[Path] = None):
        """Initialize level loader.

        Args:
            levels_dir: Directory containing level files.
                        Defaults to Config.LEVELS_DIR
        """
        self.levels_dir = Path(levels_dir) if levels_dir is not None else Config.LEVELS_DIR

    def load(self, level_name: str) -> Level:
        """Load a level by name from its JSON file.

        Args:
            level_name: Name of level (without .json extension)

        Returns:
            Validated Level

        Raises:
            FileNotFoundError: If the level file doesn't exist in levels_dir
            ValueError: If required fields are missing
            json.JSONDecodeError: If the file contains invalid JSON
            pydantic.ValidationError: If field values are invalid
        """
        level_path = self.levels_dir / f"{level_name}.json"

        if not level_path.exists():
            raise FileNotFoundError(f"Level '{level_name}' not found at {level_path}")

        data = json.loads(level_path.read_text(encoding="utf-8"))
        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Level:
        """Validate raw level data and build a Level."""
        self._validate_level(data)
        return Level.model_validate(data)

    def _validate_level(self, data: Any) -> None:
        if not isinstance(data, dict):
            raise ValueError("Level file must contain a JSON object")

        missing = [name for name in self.REQUIRED_FIELDS if name not in data]
        if missing:
            raise ValueError(f"Level missing required fields: {missing}")

        player = data["player"]
        if not isinstance(player, dict) or "position" not in player:
            raise ValueError("Level player block must include a 'position'")

    def list_levels(self) -> List[str]:
        """List all available level names (files starting with '_' are skipped)."""
        if not self.levels_dir.exists():
            return []

        return sorted(
            f.stem for f in self.levels_dir.glob("*.json")
            if not f.name.startswith("_")
        )

    def get_level_info(self, level_name: str) -> Dict[str, Any]:
        """Get level metadata without validating the whole level.

        Raises:
            FileNotFoundError: If the level file doesn't exist in levels_dir
            ValueError: If the file is not a JSON object with the required fields
        """
        level_path = self.levels_dir / f"{level_name}.json"

        if not level_path.exists():
            raise FileNotFoundError(f"Level '{level_name}' not found at {level_path}")

        data = json.loads(level_path.read_text(encoding="utf-8"))
        self._validate_level(data)

        return {
            "name": data.get("name", level_name),
            "description": data.get("description", "No description"),
            "dimension": data.get("dimension"),
            "num_enemies": _count_entries(data.get("enemies")),
            "num_obstacles": _count_entries(data.get("obstacles")),
        }


def _count_entries(value: Any) -> int:
    # null or a malformed block counts as empty; load() reports the real error.
    return len(value) if isinstance(value, list) else 0


def load_level(level_name: str) -> Level:
    """Convenience function to load a level from the default directory."""
    loader = LevelLoader()
    return loader.load(level_name)
