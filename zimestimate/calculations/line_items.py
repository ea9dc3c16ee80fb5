"""Line-item assembly: price lookup, rounding and totals for one BOQ line."""

from __future__ import annotations

import logging
import math
import time

from zimestimate.config import ITEM_ID_PREFIX
from zimestimate.models.boq import GeneratedBOQItem
from zimestimate.pricing.provider import LocalProvider, PriceLookup

logger = logging.getLogger(__name__)


class ItemIdSequence:
    """Per-run item id counter.

    One instance per generation call, so concurrent runs never share
    state.  Ids look like ``boq_<run stamp>_<n>`` with n starting at 1.
    """

    def __init__(self, prefix: str = ITEM_ID_PREFIX) -> None:
        self.prefix = prefix
        self.stamp = int(time.time() * 1000)
        self.count = 0

    def next_id(self) -> str:
        self.count += 1
        return f"{self.prefix}_{self.stamp}_{self.count}"


def round_up(value: float, decimals: int = 0) -> float:
    """Ceil *value* to the given number of decimal places."""
    if decimals <= 0:
        return math.ceil(value)
    factor = 10 ** decimals
    # Re-rounding an already rounded value must not bump it a step.
    return math.ceil(round(value * factor, 9)) / factor


class LineItemBuilder:
    """Builds costed line items against a price source.

    Parameters
    ----------
    provider:
        Price lookup.  Defaults to LocalProvider (embedded seed data).
    ids:
        Id sequence for this run.  A fresh one is created if omitted.
    """

    def __init__(
        self,
        provider: PriceLookup | None = None,
        ids: ItemIdSequence | None = None,
    ) -> None:
        self.provider = provider or LocalProvider()
        self.ids = ids or ItemIdSequence()

    def unit_prices(self, material_id: str) -> tuple[float, float]:
        """(usd, zwg) for *material_id*; (0, 0) when no price is known."""
        price = self.provider.get_best_price(material_id)
        if price is None:
            logger.debug("No price for %s, using 0", material_id)
            return 0.0, 0.0
        return price.price_usd, price.price_zwg

    def build(
        self,
        material_id: str,
        material_name: str,
        category: str,
        raw_quantity: float,
        unit: str,
        note: str = "",
        decimals: int = 0,
    ) -> GeneratedBOQItem:
        """Round *raw_quantity* up and price it.

        Quantities are whole units except where *decimals* asks for
        tenths (sand volumes).
        """
        quantity = round_up(raw_quantity, decimals)
        usd, zwg = self.unit_prices(material_id)
        return GeneratedBOQItem(
            id=self.ids.next_id(),
            material_id=material_id,
            material_name=material_name,
            category=category,
            quantity=quantity,
            unit=unit,
            unit_price_usd=usd,
            unit_price_zwg=zwg,
            total_usd=quantity * usd,
            total_zwg=quantity * zwg,
            calculation_note=note,
            is_edited=False,
        )
