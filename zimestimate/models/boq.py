"""Line items and totals — the output side of the engine."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GeneratedBOQItem(BaseModel):
    """A single costed BOQ line.

    Totals are always ``quantity * unit price`` for both currencies.
    Items are frozen; a user override goes through :meth:`with_quantity`.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    material_id: str
    material_name: str
    category: str
    """Stage name ('substructure', 'roofing', ...) or 'labor'."""

    quantity: float
    unit: str
    unit_price_usd: float = 0.0
    unit_price_zwg: float = 0.0
    total_usd: float = 0.0
    total_zwg: float = 0.0
    calculation_note: str = ""
    is_edited: bool = False

    def with_quantity(self, quantity: float) -> GeneratedBOQItem:
        """Return a user-edited copy with both totals recomputed."""
        return self.model_copy(
            update={
                "quantity": quantity,
                "total_usd": quantity * self.unit_price_usd,
                "total_zwg": quantity * self.unit_price_zwg,
                "is_edited": True,
            }
        )


class CategoryTotal(BaseModel):
    usd: float = 0.0
    zwg: float = 0.0
    count: int = 0


class BOQTotals(BaseModel):
    """Grand totals and per-category subtotals for a list of items."""

    total_usd: float = 0.0
    total_zwg: float = 0.0
    item_count: int = 0
    by_category: dict[str, CategoryTotal] = Field(default_factory=dict)
