"""Labor — builder, assistant and foreman days plus the food allowance."""

from __future__ import annotations

import math
from typing import Any

from zimestimate.calculations.line_items import LineItemBuilder
from zimestimate.calculations.rates import (
    ASSISTANTS_PER_BUILDER,
    BUILDER_DAYS_PER_FOREMAN_DAY,
    labor_rate_for,
)
from zimestimate.models.boq import GeneratedBOQItem
from zimestimate.models.config import normalize_scope

CATEGORY = "labor"


def calculate_labor(
    floor_area: float,
    scope: Any,
    builder: LineItemBuilder | None = None,
) -> list[GeneratedBOQItem]:
    """Labor lines for *scope* (a stage, list of stages or tuple).

    The foreman line is dropped when it rounds to zero days.  It is the
    only conditional item in the engine; everything else is emitted even
    at zero quantity.
    """
    builder = builder or LineItemBuilder()
    rate = labor_rate_for(normalize_scope(scope))

    builder_days = math.ceil(floor_area * rate)
    assistant_days = math.ceil(builder_days * ASSISTANTS_PER_BUILDER)
    foreman_days = math.ceil(builder_days / BUILDER_DAYS_PER_FOREMAN_DAY)

    items = [
        builder.build(
            "labor-builder", "Builder (Daily Rate)", CATEGORY, builder_days, "per day",
            f"{floor_area:g}m² @ {rate:g} days/m²",
        ),
        builder.build(
            "labor-assistant", "General Hand (Daily Rate)", CATEGORY, assistant_days, "per day",
            f"{ASSISTANTS_PER_BUILDER:g} assistants per builder",
        ),
    ]
    if foreman_days > 0:
        items.append(builder.build(
            "labor-foreman", "Foreman (Daily Rate)", CATEGORY, foreman_days, "per day",
            "Site supervision",
        ))

    food_days = builder_days + assistant_days + foreman_days
    items.append(builder.build(
        "service-food", "Builder's Food Allowance", CATEGORY, food_days, "per day",
        f"{food_days} person-days",
    ))
    return items
