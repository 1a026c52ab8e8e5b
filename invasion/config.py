"""
Invasion Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # World files
    WORLD_IN: Path = Path(os.getenv("INVASION_WORLD_IN", "world.txt"))
    WORLD_OUT: Path = Path(os.getenv("INVASION_WORLD_OUT", "world_after_invasion.txt"))

    # Randomness; unset means a fresh unseeded generator per run
    SEED: str | None = os.getenv("INVASION_SEED")

    # Console output
    NO_COLOR: bool = bool(os.getenv("INVASION_NO_COLOR"))

    @classmethod
    def seed(cls) -> int | None:
        """Return the configured seed as an integer, or None if unset."""
        if cls.SEED is None or not cls.SEED.strip():
            return None
        try:
            return int(cls.SEED)
        except ValueError:
            raise ValueError(
                f"INVASION_SEED must be an integer, got '{cls.SEED}'"
            ) from None

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Invasion Configuration:",
            f"  World In: {cls.WORLD_IN}",
            f"  World Out: {cls.WORLD_OUT}",
            f"  Seed: {cls.SEED or 'random'}",
            f"  Colors: {'off' if cls.NO_COLOR else 'on'}",
        ]
        return "\n".join(lines)
