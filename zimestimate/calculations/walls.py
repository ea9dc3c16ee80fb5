"""Brick and mortar quantities shared by the wall-bearing stages."""

from __future__ import annotations

import math
from typing import NamedTuple

from zimestimate.calculations.line_items import round_up
from zimestimate.calculations.rates import (
    BRICK_INFO,
    CEMENT_INFO,
    MORTAR_M3_PER_1000_BRICKS,
    SAND_M3_PER_M3_MORTAR,
    WASTAGE_FACTOR,
    BrickInfo,
)
from zimestimate.models.config import BrickType, CementType


class WallBricks(NamedTuple):
    bricks: int
    note: str


class MortarQuantities(NamedTuple):
    cement: int
    """50kg bags."""
    sand: float
    """Cubes, to one decimal."""


def bricks_for_wall(wall_length: float, wall_height: float, info: BrickInfo) -> WallBricks:
    wall_area = wall_length * wall_height
    bricks = math.ceil(wall_area * info.bricks_per_sqm * WASTAGE_FACTOR)
    return WallBricks(bricks, f"{wall_area:.1f}m² wall @ {info.bricks_per_sqm:g}/m²")


def calculate_wall_bricks(
    wall_length: float,
    wall_height: float,
    brick_type: BrickType | str,
) -> WallBricks:
    """Bricks for a wall, wastage included.

    Raises KeyError for a brick type outside the catalog.
    """
    try:
        info = BRICK_INFO[BrickType(brick_type)]
    except ValueError:
        raise KeyError(brick_type) from None
    return bricks_for_wall(wall_length, wall_height, info)


def calculate_mortar(total_bricks: float, cement_type: CementType | str) -> MortarQuantities:
    """Cement bags and sand cubes for laying *total_bricks*."""
    try:
        info = CEMENT_INFO[CementType(cement_type)]
    except ValueError:
        raise KeyError(cement_type) from None
    mortar_m3 = (total_bricks / 1000) * MORTAR_M3_PER_1000_BRICKS
    cement = math.ceil(mortar_m3 * info.bags_per_m3_mortar * WASTAGE_FACTOR)
    sand = round_up(mortar_m3 * SAND_M3_PER_M3_MORTAR, 1)
    return MortarQuantities(cement, sand)
