"""Unit-rate tables — engineering constants behind every takeoff formula.

Read-only at runtime.  Catalog tables are keyed by the closed
:class:`BrickType` / :class:`CementType` enumerations.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from zimestimate.models.config import BrickType, CementType, Stage

# Breakage / offcut buffer on bricks, mortar cement and IBR sheets
WASTAGE_FACTOR = 1.05

# Mortar
MORTAR_M3_PER_1000_BRICKS = 0.5
SAND_M3_PER_M3_MORTAR = 1.2

# Substructure
SUBSTRUCTURE_WALL_HEIGHT_M = 1.0
HARDCORE_M3_PER_SQM = 0.15
DPM_SQM_FACTOR = 1.1  # lap allowance
DPM_ROLL_SQM = 50.0
CONCRETE_M3_PER_LM_FOUNDATION = 0.18  # 600 x 300mm strip
CEMENT_BAGS_PER_M3_CONCRETE = 7.0
SAND_M3_PER_M3_CONCRETE = 0.5
STONE_M3_PER_M3_CONCRETE = 0.8
MESH_SHEETS_PER_SQM = 0.07

# Superstructure
REBAR_Y12_PER_LM_RINGBEAM = 4
STIRRUPS_PER_LM = 4
REBAR_LENGTH_M = 6.0
BRICKFORCE_ROLL_M = 15.0

# Roofing
ROOF_PITCH_FACTOR = 1.15
IBR_SHEETS_PER_SQM = 0.49
ROOF_SCREWS_PER_SHEET = 8
ROOF_SCREWS_PER_BOX = 100
RAFTER_SQM_PER_LENGTH = 6.0
BRANDERING_SQM_PER_LENGTH = 4.0
TIMBER_LENGTH_M = 6.0

# Finishing
SILL_M_PER_WINDOW = 1.5
SQM_PER_WINDOW = 15.0

# Labor
ASSISTANTS_PER_BUILDER = 1.5
BUILDER_DAYS_PER_FOREMAN_DAY = 10

LABOR_DAYS_PER_SQM: Mapping[Stage, float] = MappingProxyType({
    Stage.FULL_HOUSE: 1.2,
    Stage.SUBSTRUCTURE: 0.3,
    Stage.SUPERSTRUCTURE: 0.5,
    Stage.ROOFING: 0.2,
    Stage.FINISHING: 0.2,
    Stage.EXTERIOR: 0.15,
})


@dataclass(frozen=True)
class BrickInfo:
    material_id: str
    name: str
    bricks_per_sqm: float
    description: str = ""


@dataclass(frozen=True)
class CementInfo:
    material_id: str
    name: str
    bags_per_m3_mortar: float
    description: str = ""


BRICK_INFO: Mapping[BrickType, BrickInfo] = MappingProxyType({
    BrickType.COMMON: BrickInfo(
        "brick-common", "Red Common Brick", 50,
        "Standard fired clay bricks, most popular in Zimbabwe",
    ),
    BrickType.FARM: BrickInfo(
        "farm-brick", "Farm Brick", 55,
        "Locally made bricks, budget-friendly option",
    ),
    BrickType.SEMI_COMMON: BrickInfo(
        "brick-semi", "Semi-Common Brick", 50,
        "Higher quality fired bricks for exposed work",
    ),
    BrickType.BLOCKS_6INCH: BrickInfo(
        "block-6inch", '6" Cement Block', 12,
        "150mm hollow concrete blocks",
    ),
    BrickType.BLOCKS_8INCH: BrickInfo(
        "block-8inch", '8" Cement Block', 10,
        "200mm hollow blocks for external walls",
    ),
    BrickType.FACE_BRICK: BrickInfo(
        "brick-face-red", "Face Brick", 48,
        "Decorative face bricks, no plastering needed",
    ),
})

CEMENT_INFO: Mapping[CementType, CementInfo] = MappingProxyType({
    CementType.CEMENT_325: CementInfo(
        "cement-325", "Standard Cement 32.5N", 8,
        "Standard strength for general building",
    ),
    CementType.CEMENT_425: CementInfo(
        "cement-425", "Rapid Cement 42.5R", 7,
        "High strength, faster setting",
    ),
})


def brick_info_by_material_id(material_id: str) -> BrickInfo:
    """Catalog entry for a wall material id.

    Unknown ids fall back to the common brick.
    """
    for info in BRICK_INFO.values():
        if info.material_id == material_id:
            return info
    return BRICK_INFO[BrickType.COMMON]


def labor_rate_for(scope: tuple[Stage, ...]) -> float:
    """Builder-days per m2 for a requested scope.

    full_house wins outright; otherwise the first requested stage picks
    the rate.
    """
    if Stage.FULL_HOUSE in scope:
        return LABOR_DAYS_PER_SQM[Stage.FULL_HOUSE]
    if not scope:
        return 0.0
    return LABOR_DAYS_PER_SQM[scope[0]]
