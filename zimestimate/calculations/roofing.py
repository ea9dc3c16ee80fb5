"""Roofing — a pure function of floor area."""

from __future__ import annotations

import math

from zimestimate.calculations.line_items import LineItemBuilder
from zimestimate.calculations.rates import (
    BRANDERING_SQM_PER_LENGTH,
    IBR_SHEETS_PER_SQM,
    RAFTER_SQM_PER_LENGTH,
    ROOF_PITCH_FACTOR,
    ROOF_SCREWS_PER_BOX,
    ROOF_SCREWS_PER_SHEET,
    TIMBER_LENGTH_M,
    WASTAGE_FACTOR,
)
from zimestimate.models.boq import GeneratedBOQItem

CATEGORY = "roofing"


def calculate_roofing(
    floor_area: float,
    builder: LineItemBuilder | None = None,
) -> list[GeneratedBOQItem]:
    """Sheets, screws, rafters, brandering and fascia for a pitched IBR roof.

    Fascia assumes a square footprint.
    """
    builder = builder or LineItemBuilder()
    roof_area = floor_area * ROOF_PITCH_FACTOR

    sheets = math.ceil(roof_area * IBR_SHEETS_PER_SQM * WASTAGE_FACTOR)
    return [
        builder.build(
            "ibr-05-3m", "IBR Sheets 0.5mm x 3m", CATEGORY, sheets, "per sheet",
            f"Roof area: {roof_area:.1f}m²",
        ),
        builder.build(
            "screws-roof", "Roof Screws 65mm", CATEGORY,
            sheets * ROOF_SCREWS_PER_SHEET / ROOF_SCREWS_PER_BOX, "per 100",
            f"{sheets} sheets @ {ROOF_SCREWS_PER_SHEET} screws each",
        ),
        builder.build(
            "timber-50x76", "Timber 50x76mm", CATEGORY,
            roof_area / RAFTER_SQM_PER_LENGTH, "per 6m length",
            "Roof rafters @ 600mm spacing",
        ),
        builder.build(
            "timber-38x38", "Timber 38x38mm", CATEGORY,
            roof_area / BRANDERING_SQM_PER_LENGTH, "per 6m length",
            "Brandering @ 400mm spacing",
        ),
        builder.build(
            "fascia-pvc", "Fascia Board 228mm", CATEGORY,
            math.sqrt(roof_area) * 4 / TIMBER_LENGTH_M, "per 6m length",
            "Perimeter fascia",
        ),
    ]
