"""Superstructure: walls above DPC, mortar, ring beam steel and brickforce.

Two wall algorithms:

* aggregate — one brick type for the whole building.  External walls
  stand ``wall_height - 1m`` (substructure covers the first metre),
  internal walls the full height.  Mortar is computed once over the
  combined brick count.
* room-proportional — rooms grouped by wall material; each group gets a
  share of the total wall length equal to its share of floor area and
  is bricked with its own material.

Ring beam rebar, stirrups and brickforce are computed once from the
total wall length in both cases.
"""

from __future__ import annotations

import logging

from zimestimate.calculations.geometry import BuildingGeometry
from zimestimate.calculations.line_items import LineItemBuilder
from zimestimate.calculations.rates import (
    BRICK_INFO,
    BRICKFORCE_ROLL_M,
    CEMENT_INFO,
    REBAR_LENGTH_M,
    REBAR_Y12_PER_LM_RINGBEAM,
    STIRRUPS_PER_LM,
    SUBSTRUCTURE_WALL_HEIGHT_M,
    brick_info_by_material_id,
)
from zimestimate.calculations.walls import bricks_for_wall, calculate_mortar
from zimestimate.models.boq import GeneratedBOQItem
from zimestimate.models.config import BrickType, CementType
from zimestimate.models.geometry import DetailedRoom

logger = logging.getLogger(__name__)

CATEGORY = "superstructure"


def calculate_superstructure(
    geometry: BuildingGeometry,
    wall_height: float,
    brick_type: BrickType,
    cement_type: CementType,
    builder: LineItemBuilder | None = None,
) -> list[GeneratedBOQItem]:
    builder = builder or LineItemBuilder()
    if geometry.room_proportional:
        items = _walls_by_room_material(geometry, wall_height, cement_type, builder)
    else:
        items = _walls_aggregate(
            geometry.perimeter,
            geometry.internal_wall_length,
            wall_height,
            brick_type,
            cement_type,
            builder,
        )
    items.extend(_ring_beam_and_reinforcement(geometry.total_wall_length, builder))
    return items


def _walls_aggregate(
    external_length: float,
    internal_length: float,
    wall_height: float,
    brick_type: BrickType,
    cement_type: CementType,
    builder: LineItemBuilder,
) -> list[GeneratedBOQItem]:
    brick = BRICK_INFO[brick_type]
    cement = CEMENT_INFO[cement_type]
    items: list[GeneratedBOQItem] = []

    super_height = max(0.0, wall_height - SUBSTRUCTURE_WALL_HEIGHT_M)
    external = bricks_for_wall(external_length, super_height, brick)
    items.append(builder.build(
        brick.material_id, brick.name, CATEGORY, external.bricks, "each",
        f"External walls: {external_length:.1f}m x {super_height:g}m",
    ))
    total_bricks = external.bricks

    # Single-room structures have no internal walls and get no line for them.
    if internal_length > 0:
        internal = bricks_for_wall(internal_length, wall_height, brick)
        items.append(builder.build(
            brick.material_id, brick.name, CATEGORY, internal.bricks, "each",
            f"Internal walls: {internal_length:.1f}m x {wall_height:g}m",
        ))
        total_bricks += internal.bricks

    mortar = calculate_mortar(total_bricks, cement_type)
    items.append(builder.build(
        cement.material_id, cement.name, CATEGORY, mortar.cement, "per 50kg bag",
        "Superstructure mortar",
    ))
    items.append(builder.build(
        "sand-bricks", "Bricklaying Sand", CATEGORY, mortar.sand, "per cube",
        "Superstructure mortar sand", decimals=1,
    ))
    return items


def group_rooms_by_material(rooms: tuple[DetailedRoom, ...] | list[DetailedRoom]) -> dict[str, float]:
    """material_id -> summed floor area, in first-seen order."""
    groups: dict[str, float] = {}
    for room in rooms:
        material = room.material_id or "brick-common"
        groups[material] = groups.get(material, 0.0) + room.area
    return groups


def _walls_by_room_material(
    geometry: BuildingGeometry,
    wall_height: float,
    cement_type: CementType,
    builder: LineItemBuilder,
) -> list[GeneratedBOQItem]:
    cement = CEMENT_INFO[cement_type]
    items: list[GeneratedBOQItem] = []

    total_floor_area = geometry.floor_area or sum(r.area for r in geometry.rooms)
    super_height = max(SUBSTRUCTURE_WALL_HEIGHT_M, wall_height - SUBSTRUCTURE_WALL_HEIGHT_M)

    for material_id, group_area in group_rooms_by_material(geometry.rooms).items():
        ratio = group_area / total_floor_area if total_floor_area else 0.0
        group_wall_length = geometry.total_wall_length * ratio
        brick = brick_info_by_material_id(material_id)
        if brick.material_id != material_id:
            logger.debug("Unknown wall material %s, using %s", material_id, brick.material_id)

        walls = bricks_for_wall(group_wall_length, super_height, brick)
        items.append(builder.build(
            brick.material_id, brick.name, CATEGORY, walls.bricks, "each",
            f"Walls ({ratio * 100:.0f}% of plan): {group_wall_length * super_height:.1f}m²",
        ))
        mortar = calculate_mortar(walls.bricks, cement_type)
        items.append(builder.build(
            cement.material_id, cement.name, CATEGORY, mortar.cement, "per 50kg bag",
            f"Mortar for {brick.name}",
        ))
        items.append(builder.build(
            "sand-bricks", "Bricklaying Sand", CATEGORY, mortar.sand, "per cube",
            f"Mortar sand for {brick.name}", decimals=1,
        ))
    return items


def _ring_beam_and_reinforcement(
    total_wall_length: float,
    builder: LineItemBuilder,
) -> list[GeneratedBOQItem]:
    return [
        builder.build(
            "rebar-12", "Rebar Y12", CATEGORY,
            total_wall_length * REBAR_Y12_PER_LM_RINGBEAM / REBAR_LENGTH_M, "per 6m length",
            f"Ring beam: {total_wall_length:.1f}m @ {REBAR_Y12_PER_LM_RINGBEAM} bars",
        ),
        builder.build(
            "rebar-10", "Rebar Y10", CATEGORY,
            total_wall_length * STIRRUPS_PER_LM / REBAR_LENGTH_M, "per 6m length",
            "Ring beam stirrups @ 250mm spacing",
        ),
        builder.build(
            "brickforce", "Brickforce", CATEGORY,
            total_wall_length / BRICKFORCE_ROLL_M, "per roll",
            "Wall reinforcement every 3rd course",
        ),
    ]
