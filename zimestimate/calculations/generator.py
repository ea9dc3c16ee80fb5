"""BOQ generator — runs the stage calculators selected by scope.

Usage::

    from zimestimate.calculations import generate_boq, generate_boq_from_basics

    items = generate_boq(rooms, walls, VisionConfig(scope="substructure"))
    items = generate_boq_from_basics(ManualBuilderConfig(floor_area=150, room_count=6))

Stages run in a fixed order: substructure, superstructure, roofing,
finishing, then labor when requested.  Each call gets its own id
sequence, so calls are independent of each other.
"""

from __future__ import annotations

import logging
from typing import Any

from zimestimate.calculations.finishing import calculate_finishing
from zimestimate.calculations.geometry import BuildingGeometry, from_detected, from_manual
from zimestimate.calculations.labor import calculate_labor
from zimestimate.calculations.line_items import ItemIdSequence, LineItemBuilder
from zimestimate.calculations.roofing import calculate_roofing
from zimestimate.calculations.substructure import calculate_substructure
from zimestimate.calculations.superstructure import calculate_superstructure
from zimestimate.models.boq import GeneratedBOQItem
from zimestimate.models.config import ManualBuilderConfig, Stage, VisionConfig
from zimestimate.models.geometry import DetectedRoom, DetectedWall
from zimestimate.pricing.provider import PriceLookup

logger = logging.getLogger(__name__)


def generate_boq(
    rooms: list[DetectedRoom] | list[dict[str, Any]],
    walls: list[DetectedWall] | list[dict[str, Any]],
    config: VisionConfig | dict[str, Any],
    *,
    provider: PriceLookup | None = None,
    window_count: int | None = None,
) -> list[GeneratedBOQItem]:
    """BOQ from detected rooms and wall segments."""
    cfg = config if isinstance(config, VisionConfig) else VisionConfig.model_validate(config)
    geometry = from_detected(
        [DetectedRoom.model_validate(r) for r in rooms],
        [DetectedWall.model_validate(w) for w in walls],
        window_count=window_count,
    )
    return generate_for_geometry(geometry, cfg, provider=provider)


def generate_boq_from_basics(
    config: ManualBuilderConfig | dict[str, Any],
    *,
    provider: PriceLookup | None = None,
) -> list[GeneratedBOQItem]:
    """BOQ from the manual builder's floor area, room count and rooms."""
    cfg = config if isinstance(config, ManualBuilderConfig) else ManualBuilderConfig.model_validate(config)
    return generate_for_geometry(from_manual(cfg), cfg, provider=provider)


def generate_for_geometry(
    geometry: BuildingGeometry,
    config: VisionConfig | ManualBuilderConfig,
    *,
    provider: PriceLookup | None = None,
) -> list[GeneratedBOQItem]:
    """Run every requested stage against canonical geometry."""
    builder = LineItemBuilder(provider, ItemIdSequence())
    items: list[GeneratedBOQItem] = []

    if config.has_stage(Stage.SUBSTRUCTURE):
        items.extend(calculate_substructure(
            geometry.floor_area, geometry.perimeter,
            config.brick_type, config.cement_type, builder,
        ))
    if config.has_stage(Stage.SUPERSTRUCTURE):
        items.extend(calculate_superstructure(
            geometry, config.wall_height,
            config.brick_type, config.cement_type, builder,
        ))
    if config.has_stage(Stage.ROOFING):
        items.extend(calculate_roofing(geometry.floor_area, builder))
    if config.has_stage(Stage.FINISHING):
        items.extend(calculate_finishing(geometry.floor_area, geometry.window_count, builder))
    if config.include_labor:
        items.extend(calculate_labor(geometry.floor_area, config.scope, builder))

    logger.info(
        "Generated %d BOQ items for %.1fm2 (%s)",
        len(items),
        geometry.floor_area,
        ", ".join(s.value for s in config.scope),
    )
    return items
