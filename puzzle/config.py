"""Validated configuration models describing a puzzle to solve."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hexchain import Board, Cube, Strategy


class PlacementModel(BaseModel):
    """A single pre-filled cell given in cube coordinates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: int
    z: int
    value: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_cube(self) -> "PlacementModel":
        # Cube raises InvalidCoordinate, a ValueError, which pydantic reports.
        Cube(self.x, self.y, self.z)
        return self

    @property
    def coordinate(self) -> Cube:
        return Cube(self.x, self.y, self.z)


class PuzzleConfig(BaseModel):
    """Top-level configuration payload describing a puzzle."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(default="Hex Chain Puzzle")
    description: str | None = Field(default=None)
    max_radius: int = Field(default=4)
    placements: list[PlacementModel] = Field(default_factory=list)
    strategy: Strategy | None = Field(default=None)

    @field_validator("strategy", mode="before")
    @classmethod
    def _normalise_strategy(cls, value: object) -> object:
        if isinstance(value, str):
            return value.lower()
        return value

    @model_validator(mode="after")
    def _unique_cells(self) -> "PuzzleConfig":
        seen: set[Cube] = set()
        for placement in self.placements:
            coord = placement.coordinate
            if coord in seen:
                raise ValueError(f"cell {coord} is listed more than once")
            seen.add(coord)
        return self

    def initial_placements(self) -> dict[Cube, int]:
        """Return the placements keyed by coordinate."""

        return {placement.coordinate: placement.value for placement in self.placements}

    def build_board(self) -> Board:
        """Instantiate a fresh :class:`~hexchain.board.Board` for this puzzle."""

        return Board(self.max_radius, self.initial_placements())

    @classmethod
    def from_mapping(
        cls, max_radius: int, placements: dict[tuple[int, int, int], int], **extra: Any
    ) -> "PuzzleConfig":
        return cls(
            max_radius=max_radius,
            placements=[
                PlacementModel(x=x, y=y, z=z, value=value)
                for (x, y, z), value in placements.items()
            ],
            **extra,
        )


def load_puzzle_config(path: str | Path) -> PuzzleConfig:
    """Read and validate a puzzle definition from a JSON file."""

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return PuzzleConfig.model_validate(data)


__all__ = ["PlacementModel", "PuzzleConfig", "load_puzzle_config"]
