"""
Display and pacing settings.

Every constant the window and frame loop use lives on ``LifeConfig``; the
defaults give a 50x50 grid of 10 px cells in a 520x520 window advancing
twice a second.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class LifeConfig:
    """Settings for one run of the windowed simulation."""

    width: int = 50
    height: int = 50
    wrap_edges: bool = False
    initial_population: float = 0.5

    cell_size: int = 10
    margin: int = 10
    title: str = "Conway's Game of Life"

    # Milliseconds between generations, and between redraw checks
    generation_interval_ms: int = 500
    frame_interval_ms: int = 16

    alive_color: str = "#3399ff"
    dead_color: str = "#4d4d4d"
    background_color: str = "#1a334d"

    @property
    def canvas_width(self) -> int:
        """Canvas width in pixels, margins included."""
        return self.width * self.cell_size + 2 * self.margin

    @property
    def canvas_height(self) -> int:
        """Canvas height in pixels, margins included."""
        return self.height * self.cell_size + 2 * self.margin

    def validate(self) -> None:
        """
        Check the settings are usable.

        Raises:
            ValueError: On non-positive sizes or intervals, a negative margin,
                or an initial population outside [0, 1].
        """
        errors = []
        if self.width <= 0 or self.height <= 0:
            errors.append(f"grid size must be positive, got {self.width}x{self.height}")
        if self.cell_size <= 0:
            errors.append(f"cell_size must be positive, got {self.cell_size}")
        if self.margin < 0:
            errors.append(f"margin must not be negative, got {self.margin}")
        if self.generation_interval_ms <= 0:
            errors.append(f"generation_interval_ms must be positive, got {self.generation_interval_ms}")
        if self.frame_interval_ms <= 0:
            errors.append(f"frame_interval_ms must be positive, got {self.frame_interval_ms}")
        if not 0.0 <= self.initial_population <= 1.0:
            errors.append(f"initial_population must be between 0 and 1, got {self.initial_population}")

        if errors:
            raise ValueError("Invalid configuration: " + "; ".join(errors))
