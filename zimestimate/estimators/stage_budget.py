"""Stage reach — how far through construction a budget gets you.

Runs a labor-free full-house estimate from basics, prices each stage and
walks the stages in build order against the budget.  Stages without any
priced lines are filled in from typical cost weights.
"""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, Field

from zimestimate.calculations.generator import generate_boq_from_basics
from zimestimate.config import DEFAULT_BRICK_TYPE, DEFAULT_CEMENT_TYPE, DEFAULT_WALL_HEIGHT_M
from zimestimate.models.config import BrickType, CementType, ManualBuilderConfig, Stage
from zimestimate.pricing.provider import PriceLookup

logger = logging.getLogger(__name__)

STAGE_ORDER: list[tuple[Stage, str]] = [
    (Stage.SUBSTRUCTURE, "Site Preparation & Foundation"),
    (Stage.SUPERSTRUCTURE, "Structural Walls & Frame"),
    (Stage.ROOFING, "Roofing"),
    (Stage.FINISHING, "Interior & Finishing"),
    (Stage.EXTERIOR, "External Work"),
]

# Typical share of total cost, used for stages with no priced lines
STAGE_WEIGHT_FALLBACK: dict[Stage, float] = {
    Stage.SUBSTRUCTURE: 0.22,
    Stage.SUPERSTRUCTURE: 0.30,
    Stage.ROOFING: 0.20,
    Stage.FINISHING: 0.20,
    Stage.EXTERIOR: 0.08,
}

EXTERIOR_SHARE_MIN = 0.08
EXTERIOR_USD_PER_SQM_MIN = 18.0
FALLBACK_USD_PER_SQM = 250.0
DEFAULT_FLOOR_AREA_M2 = 120.0
SQM_PER_ROOM = 28.0


class StageReachRow(BaseModel):
    id: Stage
    label: str
    stage_cost_usd: float
    cumulative_cost_usd: float
    affordable: bool
    coverage_percent: float


class StageReachResult(BaseModel):
    estimated_total_usd: float
    budget_usd: float
    coverage_percent: float
    reachable_stage_id: Stage | None = None
    reachable_stage_label: str = "No stage completed"
    rows: list[StageReachRow] = Field(default_factory=list)


def _positive(value: float | None, fallback: float) -> float:
    if value is None or not math.isfinite(value) or value <= 0:
        return fallback
    return value


def estimate_stage_reach(
    budget_usd: float,
    floor_area_m2: float,
    *,
    room_count: int | None = None,
    wall_height_m: float | None = None,
    brick_type: BrickType | str = DEFAULT_BRICK_TYPE,
    cement_type: CementType | str = DEFAULT_CEMENT_TYPE,
    provider: PriceLookup | None = None,
) -> StageReachResult:
    """Cost each stage and report which ones *budget_usd* covers."""
    budget = _positive(budget_usd, 0.0)
    area = _positive(floor_area_m2, DEFAULT_FLOOR_AREA_M2)
    rooms = int(_positive(room_count if room_count is not None else round(area / SQM_PER_ROOM), 4))
    height = _positive(wall_height_m, DEFAULT_WALL_HEIGHT_M)

    items = generate_boq_from_basics(
        ManualBuilderConfig(
            floor_area=area,
            room_count=rooms,
            wall_height=height,
            brick_type=brick_type,
            cement_type=cement_type,
            scope=Stage.FULL_HOUSE,
            include_labor=False,
        ),
        provider=provider,
    )

    by_category: dict[str, float] = {}
    for item in items:
        by_category[item.category] = by_category.get(item.category, 0.0) + item.total_usd
    stage_costs = {stage: by_category.get(stage.value, 0.0) for stage, _ in STAGE_ORDER}

    computed_total = sum(stage_costs.values())
    missing = [stage for stage, _ in STAGE_ORDER if stage_costs[stage] <= 0]
    missing_weight = sum(STAGE_WEIGHT_FALLBACK[s] for s in missing)

    if computed_total > 0 and 0 < missing_weight < 1:
        implied_total = computed_total / (1 - missing_weight)
        for stage in missing:
            stage_costs[stage] = implied_total * STAGE_WEIGHT_FALLBACK[stage]

    if stage_costs[Stage.EXTERIOR] <= 0:
        stage_costs[Stage.EXTERIOR] = max(
            computed_total * EXTERIOR_SHARE_MIN, area * EXTERIOR_USD_PER_SQM_MIN
        )

    estimated_total = _positive(sum(stage_costs.values()), area * FALLBACK_USD_PER_SQM)
    coverage = min(100.0, budget / estimated_total * 100)

    rows: list[StageReachRow] = []
    cumulative = 0.0
    reachable: Stage | None = None
    reachable_label = "No stage completed"
    for stage, label in STAGE_ORDER:
        cost = stage_costs[stage]
        start = cumulative
        cumulative += cost
        affordable = budget >= cumulative
        if affordable:
            reachable, reachable_label = stage, label
        stage_coverage = min(100.0, max(0.0, (budget - start) / cost * 100)) if cost > 0 else 0.0
        rows.append(StageReachRow(
            id=stage,
            label=label,
            stage_cost_usd=cost,
            cumulative_cost_usd=cumulative,
            affordable=affordable,
            coverage_percent=stage_coverage,
        ))

    logger.debug("Stage reach for $%.0f over %.0fm2: %s", budget, area, reachable)
    return StageReachResult(
        estimated_total_usd=estimated_total,
        budget_usd=budget,
        coverage_percent=coverage,
        reachable_stage_id=reachable,
        reachable_stage_label=reachable_label,
        rows=rows,
    )
