"""Strict pydantic models for Paper Soccer settings.

A ``GameConfig`` describes the pitch, the two players and how the automated
opponent behaves. Configs can be built in code, taken from the defaults or
loaded from a JSON file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from soccer_constants import (
    BOARD_COLS,
    BOARD_ROWS,
    CLICK_TOLERANCE,
    CPU_ITERATION_CAP,
    CPU_PLAYER,
    GOAL_COLUMNS,
    PLAYER_COLORS,
    PLAYER_NAMES,
    RESET_DELAY_SECONDS,
)


class BoardConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    cols: int = Field(default=BOARD_COLS, ge=3)
    rows: int = Field(default=BOARD_ROWS, ge=3)
    goal_columns: List[int] = Field(default_factory=lambda: list(GOAL_COLUMNS), min_length=1)

    @field_validator("goal_columns")
    @classmethod
    def goal_columns_must_be_contiguous(cls, value: List[int]) -> List[int]:
        for prev, cur in zip(value, value[1:]):
            if cur != prev + 1:
                raise ValueError("goal_columns must be contiguous and ascending")
        return value

    @model_validator(mode="after")
    def goal_fits_inside_rail(self) -> "BoardConfig":
        if self.goal_columns[0] <= 0 or self.goal_columns[-1] >= self.cols - 1:
            raise ValueError("goal_columns must lie strictly between the side rails")
        return self

    @property
    def center(self) -> Tuple[int, int]:
        return (self.cols // 2, self.rows // 2)

    @property
    def goal_center_x(self) -> int:
        return self.goal_columns[len(self.goal_columns) // 2]


class PlayerConfig(BaseModel):
    name: str = Field(min_length=1, max_length=32)
    color: Optional[str] = Field(default=None, min_length=1)


class GameConfig(BaseModel):
    board: BoardConfig = Field(default_factory=BoardConfig)
    players: List[PlayerConfig] = Field(min_length=2, max_length=2)
    starting_player: int = Field(default=0, ge=0, le=1)
    cpu_enabled: bool = True
    cpu_player: int = Field(default=CPU_PLAYER, ge=0, le=1)
    cpu_iteration_cap: int = Field(default=CPU_ITERATION_CAP, ge=1)
    reset_delay: float = Field(default=RESET_DELAY_SECONDS, ge=0)
    click_tolerance: float = Field(default=CLICK_TOLERANCE, gt=0)

    @model_validator(mode="after")
    def players_have_distinct_colors(self) -> "GameConfig":
        # Segments are attributed to players by colour.
        self.players = [
            p if p.color else p.model_copy(update={"color": PLAYER_COLORS[seat]})
            for seat, p in enumerate(self.players)
        ]
        colors = [p.color.lower() for p in self.players]
        if len(set(colors)) != len(colors):
            raise ValueError(f"players must have distinct colors, got {colors}")
        return self


def default_game_config(cpu_enabled: bool = True) -> GameConfig:
    players = [PlayerConfig(name=n, color=c) for n, c in zip(PLAYER_NAMES, PLAYER_COLORS)]
    return GameConfig(players=players, cpu_enabled=cpu_enabled)


def load_game_config(path: Union[str, Path]) -> GameConfig:
    """Read a JSON config file and validate it into a ``GameConfig``.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    pydantic.ValidationError
        If the payload does not describe a valid game.
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8-sig") as f:
        payload = json.load(f)
    return GameConfig.model_validate(payload)
