"""ZimEstimate — construction quantity takeoff and BOQ estimation."""

__version__ = "1.0.0"

from zimestimate.calculations import (
    calculate_totals,
    generate_boq,
    generate_boq_from_basics,
)
from zimestimate.engine import EstimationEngine
from zimestimate.estimators import estimate_stage_reach
from zimestimate.models import (
    BOQTotals,
    BrickType,
    CementType,
    DetailedRoom,
    DetectedRoom,
    DetectedWall,
    GeneratedBOQItem,
    ManualBuilderConfig,
    Stage,
    VisionConfig,
)
from zimestimate.pricing import LocalProvider, PriceLookup, StaticProvider
from zimestimate.report import BOQReport
from zimestimate.settings import ConfigManager

__all__ = [
    "__version__",
    "BOQReport",
    "BOQTotals",
    "BrickType",
    "CementType",
    "ConfigManager",
    "DetailedRoom",
    "DetectedRoom",
    "DetectedWall",
    "EstimationEngine",
    "GeneratedBOQItem",
    "LocalProvider",
    "ManualBuilderConfig",
    "PriceLookup",
    "Stage",
    "StaticProvider",
    "VisionConfig",
    "calculate_totals",
    "estimate_stage_reach",
    "generate_boq",
    "generate_boq_from_basics",
]
