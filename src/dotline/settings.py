"""Session settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameSettings:
    """All user-configurable settings."""

    # Board
    grid_width: int = 4
    grid_height: int = 4

    # Turn timer
    idle_timeout_ms: int = 10_000

    # General
    language: str = "English"

    def __post_init__(self) -> None:
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid size must be positive, got {self.grid_width}x{self.grid_height}"
            )
        if self.idle_timeout_ms <= 0:
            raise ValueError(f"Idle timeout must be positive, got {self.idle_timeout_ms}")
