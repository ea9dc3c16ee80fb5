"""EstimationEngine — main entry point for BOQ estimation.

Usage::

    from zimestimate import EstimationEngine

    engine = EstimationEngine()
    report = engine.estimate_from_takeoff(rooms, walls, config)
    report = engine.estimate_from_basics(manual_config)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from zimestimate.calculations.geometry import from_detected, from_manual
from zimestimate.calculations.generator import generate_for_geometry
from zimestimate.models.config import ManualBuilderConfig, VisionConfig
from zimestimate.models.geometry import DetectedRoom, DetectedWall
from zimestimate.pricing.provider import LocalProvider, PriceLookup, StaticProvider
from zimestimate.report import BOQReport
from zimestimate.settings import ConfigManager

logger = logging.getLogger(__name__)


class EstimationEngine:
    """BOQ estimation bound to one price source.

    Parameters
    ----------
    provider:
        Price lookup.  Defaults to LocalProvider (embedded seed data).
    """

    def __init__(self, provider: PriceLookup | None = None) -> None:
        self.provider = provider or LocalProvider()

    @classmethod
    def from_config(cls, project_path: str | Path = ".") -> EstimationEngine:
        """Build an engine from merged project settings.

        Applies ZIMEST_LOG_LEVEL to the package logger and loads
        ZIMEST_PRICE_FILE when set.
        """
        manager = ConfigManager()
        config = manager.load_config(project_path)

        level = logging.getLevelName(config.get("ZIMEST_LOG_LEVEL", "INFO").upper())
        if isinstance(level, int):
            logging.getLogger("zimestimate").setLevel(level)

        price_file = config.get("ZIMEST_PRICE_FILE", "")
        if price_file:
            path = Path(price_file)
            if not path.is_absolute():
                path = Path(project_path) / path
            provider: PriceLookup = StaticProvider.from_json(path, manager.get_exchange_rate(config))
        else:
            provider = LocalProvider()
        return cls(provider)

    def estimate_from_takeoff(
        self,
        rooms: list[DetectedRoom] | list[dict[str, Any]],
        walls: list[DetectedWall] | list[dict[str, Any]],
        config: VisionConfig | dict[str, Any],
        *,
        window_count: int | None = None,
        project_name: str = "",
    ) -> BOQReport:
        """Estimate from detected rooms and wall segments."""
        cfg = config if isinstance(config, VisionConfig) else VisionConfig.model_validate(config)
        geometry = from_detected(
            [DetectedRoom.model_validate(r) for r in rooms],
            [DetectedWall.model_validate(w) for w in walls],
            window_count=window_count,
        )
        items = generate_for_geometry(geometry, cfg, provider=self.provider)
        return BOQReport(items, project_name, geometry.floor_area, [s.value for s in cfg.scope])

    def estimate_from_basics(
        self,
        config: ManualBuilderConfig | dict[str, Any],
        *,
        project_name: str = "",
    ) -> BOQReport:
        """Estimate from floor area, room count and optional detailed rooms."""
        cfg = config if isinstance(config, ManualBuilderConfig) else ManualBuilderConfig.model_validate(config)
        geometry = from_manual(cfg)
        items = generate_for_geometry(geometry, cfg, provider=self.provider)
        return BOQReport(items, project_name, geometry.floor_area, [s.value for s in cfg.scope])
