"""
Gridtactics Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Level files shipped inside the package
    PACKAGE_LEVELS_DIR: Path = Path(__file__).parent / "levels"

    # Directory searched by LevelLoader when no explicit directory is given
    LEVELS_DIR: Path = Path(os.getenv("GRIDTACTICS_LEVELS_DIR", str(PACKAGE_LEVELS_DIR)))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.LOG_LEVEL.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR"}:
            raise ValueError(
                f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR (got '{cls.LOG_LEVEL}')"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Gridtactics Configuration:",
            f"  Levels Directory: {cls.LEVELS_DIR}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
