"""Finishing — brick window sills."""

from __future__ import annotations

import math

from zimestimate.calculations.line_items import LineItemBuilder
from zimestimate.calculations.rates import SILL_M_PER_WINDOW, SQM_PER_WINDOW
from zimestimate.models.boq import GeneratedBOQItem

CATEGORY = "finishing"


def estimate_window_count(floor_area: float) -> int:
    """One window per 15m2 of floor when the count is unknown."""
    return math.ceil(floor_area / SQM_PER_WINDOW)


def calculate_finishing(
    floor_area: float,
    window_count: int | None = None,
    builder: LineItemBuilder | None = None,
) -> list[GeneratedBOQItem]:
    builder = builder or LineItemBuilder()
    if window_count is None:
        window_count = estimate_window_count(floor_area)
    return [
        builder.build(
            "window-sill-brick", "Window Sill (Brick)", CATEGORY,
            window_count * SILL_M_PER_WINDOW, "per meter",
            f"{window_count} windows @ {SILL_M_PER_WINDOW:g}m",
        ),
    ]
