"""PriceLookup interface and its providers.

The calculators only ever call :meth:`PriceLookup.get_best_price`.  Remote
price sources must be resolved up front (see :class:`StaticProvider`); the
engine performs no I/O of its own.
"""

from __future__ import annotations

import abc
import json
import logging
from pathlib import Path
from typing import Any

from zimestimate.config import DEFAULT_EXCHANGE_RATE_ZWG
from zimestimate.pricing.seed_data import MATERIALS, SEED_PRICES, SOURCE, SUPPLIERS

logger = logging.getLogger(__name__)


class MaterialPrice:
    """A supplier's unit price for one material in USD and ZWG."""

    def __init__(
        self,
        material_id: str,
        price_usd: float,
        price_zwg: float,
        supplier_id: str = "",
        last_updated: str = "",
        in_stock: bool = True,
        source: str = "",
        material_name: str = "",
        unit: str = "",
        supplier_name: str = "",
    ) -> None:
        self.material_id = material_id
        self.price_usd = price_usd
        self.price_zwg = price_zwg
        self.supplier_id = supplier_id
        self.last_updated = last_updated
        self.in_stock = in_stock
        self.source = source
        self.material_name = material_name
        self.unit = unit
        self.supplier_name = supplier_name

    def to_dict(self) -> dict[str, Any]:
        return {
            "material_id": self.material_id,
            "price_usd": self.price_usd,
            "price_zwg": self.price_zwg,
            "supplier_id": self.supplier_id,
            "last_updated": self.last_updated,
            "in_stock": self.in_stock,
            "source": self.source,
            "material_name": self.material_name,
            "unit": self.unit,
            "supplier_name": self.supplier_name,
        }


class PriceLookup(abc.ABC):
    """Abstract price source."""

    @abc.abstractmethod
    def get_best_price(self, material_id: str) -> MaterialPrice | None:
        """Return the best current price for *material_id*, or None."""

    def is_available(self) -> bool:
        return True


def _cheapest_in_stock(records: list[MaterialPrice], material_id: str) -> MaterialPrice | None:
    candidates = [p for p in records if p.material_id == material_id and p.in_stock]
    if not candidates:
        return None
    return min(candidates, key=lambda p: p.price_usd)


class LocalProvider(PriceLookup):
    """Prices from the embedded seed data.  Always available.

    Records carry the catalog name and unit and the supplier's name.
    """

    def __init__(self) -> None:
        self._records = [
            MaterialPrice(
                mid, usd, zwg, sup, updated, stock, SOURCE,
                material_name=MATERIALS[mid]["name"],
                unit=MATERIALS[mid]["unit"],
                supplier_name=SUPPLIERS[sup]["name"],
            )
            for mid, sup, usd, zwg, updated, stock in SEED_PRICES
        ]

    def get_best_price(self, material_id: str) -> MaterialPrice | None:
        """Cheapest in-stock supplier price, None if nobody stocks it."""
        return _cheapest_in_stock(self._records, material_id)


class StaticProvider(PriceLookup):
    """Prices resolved before invocation and held in memory.

    Parameters
    ----------
    prices:
        Either ``material_id -> (usd, zwg)`` pairs or MaterialPrice records.
    """

    def __init__(
        self,
        prices: dict[str, tuple[float, float]] | list[MaterialPrice] | None = None,
    ) -> None:
        self._records: list[MaterialPrice] = []
        if isinstance(prices, dict):
            for mid, (usd, zwg) in prices.items():
                self._records.append(MaterialPrice(mid, float(usd), float(zwg)))
        elif prices:
            self._records.extend(prices)

    def get_best_price(self, material_id: str) -> MaterialPrice | None:
        return _cheapest_in_stock(self._records, material_id)

    @classmethod
    def from_json(
        cls,
        path: str | Path,
        exchange_rate: float = DEFAULT_EXCHANGE_RATE_ZWG,
    ) -> StaticProvider:
        """Load a JSON list of price records.

        Each record needs ``material_id`` and ``price_usd``.  A missing
        ``price_zwg`` is derived from *exchange_rate*.  Malformed records
        are skipped.
        """
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        records: list[MaterialPrice] = []
        for entry in raw if isinstance(raw, list) else []:
            if not isinstance(entry, dict) or "material_id" not in entry:
                continue
            try:
                usd = float(entry["price_usd"])
                zwg = float(entry.get("price_zwg", usd * exchange_rate))
            except (KeyError, TypeError, ValueError):
                logger.debug("Skipping malformed price record %r", entry)
                continue
            records.append(
                MaterialPrice(
                    material_id=str(entry["material_id"]),
                    price_usd=usd,
                    price_zwg=zwg,
                    supplier_id=str(entry.get("supplier_id", "")),
                    last_updated=str(entry.get("last_updated", "")),
                    in_stock=bool(entry.get("in_stock", True)),
                    source=str(path),
                )
            )
        logger.info("Loaded %d price records from %s", len(records), path)
        return cls(records)
