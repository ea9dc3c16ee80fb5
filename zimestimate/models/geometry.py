"""Geometry inputs — rooms and walls that feed the stage calculators.

Two shapes arrive from the UI layer:
  Detected: rooms with an area plus a flat list of typed wall segments.
  Detailed: rooms drawn in the room builder with length/width and counts.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class WallType(str, Enum):
    """Whether a wall segment sits on the building envelope."""

    EXTERNAL = "external"
    INTERNAL = "internal"


class DetectedRoom(BaseModel):
    """A room detected on a floor plan (or drawn on the canvas)."""

    id: str = ""
    name: str = ""
    area: float = Field(default=0.0, ge=0.0)
    """Floor area in m2."""

    length: float | None = Field(default=None, ge=0.0)
    width: float | None = Field(default=None, ge=0.0)

    @model_validator(mode="after")
    def _derive_area(self) -> DetectedRoom:
        if not self.area and self.length and self.width:
            self.area = self.length * self.width
        return self


class DetectedWall(BaseModel):
    """A single wall segment.  Rectangular rooms contribute four each."""

    id: str = ""
    length: float = Field(default=0.0, ge=0.0)
    """Segment length in metres."""

    type: WallType = WallType.EXTERNAL
    height: float | None = None
    thickness: float | None = None


class DetailedRoom(BaseModel):
    """A room from the manual builder with explicit dimensions."""

    id: str = ""
    label: str = ""
    length: float = Field(gt=0.0)
    width: float = Field(gt=0.0)
    doors: int = Field(default=0, ge=0)
    windows: int = Field(default=0, ge=0)
    material_id: str = "brick-common"
    """Wall material for this room (a brick/block material id)."""

    parent_id: str | None = None
    """Attached sub-room reference.  Not used by the calculators."""

    @property
    def area(self) -> float:
        return self.length * self.width
