"""Game configuration: board geometry, scoring and pacing."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    """Validated configuration for a single game.

    Board dimensions are given in pixels, as a canvas would be sized, and
    converted to grid cells through ``cell_size``. Tick intervals are in
    milliseconds; the interval shrinks from ``initial_tick_ms`` towards
    ``target_tick_ms`` by ``tick_step_ms`` per speed advance.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Geometry
    cell_size: int = Field(default=20, ge=1)
    canvas_width: int = Field(default=400, ge=1)
    canvas_height: int = Field(default=400, ge=1)
    start_x: int | None = Field(default=None, ge=0)
    start_y: int | None = Field(default=None, ge=0)

    # Scoring
    score_increment: int = Field(default=10, ge=1)

    # Pacing
    initial_tick_ms: int = Field(default=300, ge=1)
    target_tick_ms: int = Field(default=150, ge=1)
    tick_step_ms: int = Field(default=3, ge=0)

    seed: int | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> GameConfig:
        if self.target_tick_ms > self.initial_tick_ms:
            raise ValueError("target_tick_ms must not exceed initial_tick_ms.")
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("Canvas must hold at least one cell per axis.")
        if self.grid_width * self.grid_height < 2:
            raise ValueError("Board must hold at least two cells.")
        if not (0 <= self.start[0] < self.grid_width
                and 0 <= self.start[1] < self.grid_height):
            raise ValueError("Start cell lies outside the board.")
        return self

    @property
    def grid_width(self) -> int:
        return self.canvas_width // self.cell_size

    @property
    def grid_height(self) -> int:
        return self.canvas_height // self.cell_size

    @property
    def start(self) -> tuple[int, int]:
        """Starting head cell, defaulting to the board centre."""
        x = self.start_x if self.start_x is not None else self.grid_width // 2
        y = self.start_y if self.start_y is not None else self.grid_height // 2
        return x, y

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(self.model_dump_json(indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.model_validate_json(Path(path).read_text())
