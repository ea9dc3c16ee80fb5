"""Geometry adapter — both input paths reduce to one BuildingGeometry.

Detected path: floor area is the sum of room areas; external and internal
wall lengths are the summed segment lengths divided by 4.  Each rectangular
room contributes its perimeter as four segments, so the division is a blunt
de-duplication, not a true perimeter.  Non-rectangular layouts and shared
walls skew it; it is kept as-is because every downstream quantity depends
on it.

Manual path: perimeter is estimated from floor area with an assumed 1.4:1
footprint, internal walls as 4m per room division.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from zimestimate.models.config import ManualBuilderConfig
from zimestimate.models.geometry import DetailedRoom, DetectedRoom, DetectedWall, WallType

ASPECT_RATIO = 1.4
INTERNAL_WALL_M_PER_DIVISION = 4.0
SEGMENTS_PER_ROOM = 4


@dataclass(frozen=True)
class BuildingGeometry:
    """Canonical geometry consumed by the stage calculators."""

    floor_area: float
    perimeter: float
    """External wall length, metres."""

    internal_wall_length: float = 0.0
    rooms: tuple[DetailedRoom, ...] = ()
    """Detailed rooms; non-empty selects room-proportional walls."""

    window_count: int | None = None

    @property
    def total_wall_length(self) -> float:
        return self.perimeter + self.internal_wall_length

    @property
    def room_proportional(self) -> bool:
        return bool(self.rooms)


def _wall_length(walls: list[DetectedWall], wall_type: WallType) -> float:
    return sum(w.length for w in walls if w.type == wall_type) / SEGMENTS_PER_ROOM


def from_detected(
    rooms: list[DetectedRoom],
    walls: list[DetectedWall],
    window_count: int | None = None,
) -> BuildingGeometry:
    """Geometry from detected rooms and typed wall segments."""
    return BuildingGeometry(
        floor_area=sum(r.area for r in rooms),
        perimeter=_wall_length(walls, WallType.EXTERNAL),
        internal_wall_length=_wall_length(walls, WallType.INTERNAL),
        window_count=window_count,
    )


def estimate_dimensions(floor_area: float, room_count: int) -> tuple[float, float]:
    """(perimeter, internal wall length) for a floor area and room count."""
    length = math.sqrt(floor_area * ASPECT_RATIO)
    width = floor_area / length if length else 0.0
    perimeter = 2 * (length + width)
    internal = max(0.0, (room_count - 1) * INTERNAL_WALL_M_PER_DIVISION)
    return perimeter, internal


def from_manual(config: ManualBuilderConfig) -> BuildingGeometry:
    """Geometry from the manual builder's floor area and room count."""
    floor_area = config.floor_area or sum(r.area for r in config.rooms)
    perimeter, internal = estimate_dimensions(floor_area, config.room_count)
    return BuildingGeometry(
        floor_area=floor_area,
        perimeter=perimeter,
        internal_wall_length=internal,
        rooms=tuple(config.rooms),
        window_count=sum(r.windows for r in config.rooms) if config.rooms else None,
    )
