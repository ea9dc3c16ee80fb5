"""Substructure: site fill, membrane, strip footing, walls to DPC and slab mesh."""

from __future__ import annotations

from zimestimate.calculations.line_items import LineItemBuilder
from zimestimate.calculations.rates import (
    BRICK_INFO,
    CEMENT_BAGS_PER_M3_CONCRETE,
    CEMENT_INFO,
    CONCRETE_M3_PER_LM_FOUNDATION,
    DPM_ROLL_SQM,
    DPM_SQM_FACTOR,
    HARDCORE_M3_PER_SQM,
    MESH_SHEETS_PER_SQM,
    SAND_M3_PER_M3_CONCRETE,
    STONE_M3_PER_M3_CONCRETE,
    SUBSTRUCTURE_WALL_HEIGHT_M,
)
from zimestimate.calculations.walls import bricks_for_wall, calculate_mortar
from zimestimate.models.boq import GeneratedBOQItem
from zimestimate.models.config import BrickType, CementType

CATEGORY = "substructure"


def calculate_substructure(
    floor_area: float,
    perimeter: float,
    brick_type: BrickType,
    cement_type: CementType,
    builder: LineItemBuilder | None = None,
) -> list[GeneratedBOQItem]:
    """Nine items, always emitted even at zero quantity."""
    builder = builder or LineItemBuilder()
    brick = BRICK_INFO[brick_type]
    cement = CEMENT_INFO[cement_type]
    items: list[GeneratedBOQItem] = []

    items.append(builder.build(
        "hardcore", "Hardcore (Filling)", CATEGORY,
        floor_area * HARDCORE_M3_PER_SQM, "per cube",
        f"{floor_area:g}m² floor @ 150mm thick",
    ))
    items.append(builder.build(
        "dpm", "DPM 500 Gauge", CATEGORY,
        floor_area * DPM_SQM_FACTOR / DPM_ROLL_SQM, "per roll",
        f"{floor_area:g}m² coverage with overlaps",
    ))

    concrete_m3 = perimeter * CONCRETE_M3_PER_LM_FOUNDATION
    items.append(builder.build(
        cement.material_id, cement.name, CATEGORY,
        concrete_m3 * CEMENT_BAGS_PER_M3_CONCRETE, "per 50kg bag",
        f"Foundation concrete: {perimeter:.1f}m perimeter",
    ))
    items.append(builder.build(
        "sand-river", "River Sand", CATEGORY,
        concrete_m3 * SAND_M3_PER_M3_CONCRETE, "per cube",
        "Foundation concrete mix", decimals=1,
    ))
    items.append(builder.build(
        "stone-19mm", "Crushed Stone 19mm", CATEGORY,
        concrete_m3 * STONE_M3_PER_M3_CONCRETE, "per cube",
        "Foundation concrete mix",
    ))

    walls = bricks_for_wall(perimeter, SUBSTRUCTURE_WALL_HEIGHT_M, brick)
    items.append(builder.build(
        brick.material_id, brick.name, CATEGORY, walls.bricks, "each",
        f"Substructure walls: {walls.note}",
    ))
    mortar = calculate_mortar(walls.bricks, cement_type)
    items.append(builder.build(
        cement.material_id, cement.name, CATEGORY, mortar.cement, "per 50kg bag",
        f"Substructure mortar for {walls.bricks} bricks",
    ))
    items.append(builder.build(
        "sand-bricks", "Bricklaying Sand", CATEGORY, mortar.sand, "per cube",
        "Substructure mortar sand", decimals=1,
    ))

    items.append(builder.build(
        "mesh-ref193", "Welded Mesh Ref 193", CATEGORY,
        floor_area * MESH_SHEETS_PER_SQM, "per sheet",
        f"Floor slab: {floor_area:g}m²",
    ))
    return items
