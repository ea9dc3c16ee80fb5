"""Totals aggregation over a list of line items."""

from __future__ import annotations

from typing import Iterable

from zimestimate.models.boq import BOQTotals, CategoryTotal, GeneratedBOQItem


def calculate_totals(items: Iterable[GeneratedBOQItem]) -> BOQTotals:
    """Sum stored item totals, overall and per category.

    Uses each item's stored totals as-is, so user edits show up without
    recomputation.
    """
    totals = BOQTotals()
    for item in items:
        totals.total_usd += item.total_usd
        totals.total_zwg += item.total_zwg
        totals.item_count += 1
        category = totals.by_category.setdefault(item.category, CategoryTotal())
        category.usd += item.total_usd
        category.zwg += item.total_zwg
        category.count += 1
    return totals
