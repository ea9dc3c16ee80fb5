"""Quantity-takeoff engine: building geometry in, costed BOQ lines out."""

from zimestimate.calculations.finishing import calculate_finishing
from zimestimate.calculations.generator import (
    generate_boq,
    generate_boq_from_basics,
    generate_for_geometry,
)
from zimestimate.calculations.geometry import BuildingGeometry, estimate_dimensions
from zimestimate.calculations.labor import calculate_labor
from zimestimate.calculations.line_items import ItemIdSequence, LineItemBuilder
from zimestimate.calculations.roofing import calculate_roofing
from zimestimate.calculations.substructure import calculate_substructure
from zimestimate.calculations.superstructure import calculate_superstructure
from zimestimate.calculations.totals import calculate_totals
from zimestimate.calculations.walls import calculate_mortar, calculate_wall_bricks

__all__ = [
    "BuildingGeometry",
    "ItemIdSequence",
    "LineItemBuilder",
    "calculate_finishing",
    "calculate_labor",
    "calculate_mortar",
    "calculate_roofing",
    "calculate_substructure",
    "calculate_superstructure",
    "calculate_totals",
    "calculate_wall_bricks",
    "estimate_dimensions",
    "generate_boq",
    "generate_boq_from_basics",
    "generate_for_geometry",
]
