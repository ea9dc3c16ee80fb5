"""Data models for BOQ inputs, configuration and line items."""

from zimestimate.models.boq import BOQTotals, CategoryTotal, GeneratedBOQItem
from zimestimate.models.config import (
    BrickType,
    CementType,
    ManualBuilderConfig,
    Stage,
    VisionConfig,
    normalize_scope,
)
from zimestimate.models.geometry import DetailedRoom, DetectedRoom, DetectedWall, WallType

__all__ = [
    "BOQTotals",
    "BrickType",
    "CategoryTotal",
    "CementType",
    "DetailedRoom",
    "DetectedRoom",
    "DetectedWall",
    "GeneratedBOQItem",
    "ManualBuilderConfig",
    "Stage",
    "VisionConfig",
    "WallType",
    "normalize_scope",
]
