"""Calculation configuration models and the closed catalog keys.

Both configs normalise multi-select UI values at the boundary:
``scope`` becomes an ordered tuple of :class:`Stage`, list-valued brick
and cement selections collapse to their first entry.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator

from zimestimate.config import (
    DEFAULT_BRICK_TYPE,
    DEFAULT_CEMENT_TYPE,
    DEFAULT_FOUNDATION_DEPTH_M,
    DEFAULT_SCOPE,
    DEFAULT_WALL_HEIGHT_M,
)
from zimestimate.models.geometry import DetailedRoom


class Stage(str, Enum):
    """Construction stage identifiers.  FULL_HOUSE means every stage."""

    FULL_HOUSE = "full_house"
    SUBSTRUCTURE = "substructure"
    SUPERSTRUCTURE = "superstructure"
    ROOFING = "roofing"
    FINISHING = "finishing"
    EXTERIOR = "exterior"


class BrickType(str, Enum):
    COMMON = "common"
    FARM = "farm"
    SEMI_COMMON = "semi_common"
    BLOCKS_6INCH = "blocks_6inch"
    BLOCKS_8INCH = "blocks_8inch"
    FACE_BRICK = "face_brick"


class CementType(str, Enum):
    CEMENT_325 = "cement_325"
    CEMENT_425 = "cement_425"


_CEMENT_ALIASES = {
    "325": CementType.CEMENT_325,
    "425": CementType.CEMENT_425,
}


def normalize_scope(value: Any) -> tuple[Stage, ...]:
    """Turn a single stage or a list of stages into an ordered tuple.

    Duplicates are dropped, first occurrence wins.
    """
    if isinstance(value, (str, Stage)):
        values = [value]
    elif isinstance(value, Iterable):
        values = list(value)
    else:
        raise ValueError(f"scope must be a stage or a list of stages, got {value!r}")
    stages: list[Stage] = []
    for v in values:
        stage = Stage(v)
        if stage not in stages:
            stages.append(stage)
    return tuple(stages)


def _first(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


class _BaseConfig(BaseModel):
    scope: tuple[Stage, ...] = Field(default=(Stage(DEFAULT_SCOPE),), min_length=1)
    brick_type: BrickType = BrickType(DEFAULT_BRICK_TYPE)
    cement_type: CementType = CementType(DEFAULT_CEMENT_TYPE)
    wall_height: float = Field(default=DEFAULT_WALL_HEIGHT_M, gt=0.0)
    include_labor: bool = True

    @field_validator("scope", mode="before")
    @classmethod
    def _coerce_scope(cls, value: Any) -> tuple[Stage, ...]:
        return normalize_scope(value)

    @field_validator("brick_type", mode="before")
    @classmethod
    def _coerce_brick(cls, value: Any) -> Any:
        return _first(value)

    @field_validator("cement_type", mode="before")
    @classmethod
    def _coerce_cement(cls, value: Any) -> Any:
        value = _first(value)
        if isinstance(value, str):
            return _CEMENT_ALIASES.get(value, value)
        return value

    def has_stage(self, stage: Stage) -> bool:
        """True if *stage* was requested directly or via full_house."""
        return stage in self.scope or Stage.FULL_HOUSE in self.scope


class VisionConfig(_BaseConfig):
    """Configuration for detected-geometry (floor-plan takeoff) estimates."""

    foundation_depth: float = DEFAULT_FOUNDATION_DEPTH_M


class ManualBuilderConfig(_BaseConfig):
    """Configuration for the manual builder (floor area + room count)."""

    floor_area: float = Field(default=0.0, ge=0.0)
    """Floor area in m2.  0 means derive from *rooms*."""

    room_count: int = Field(default=1, ge=0)
    rooms: list[DetailedRoom] = Field(default_factory=list)
