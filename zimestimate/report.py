"""BOQReport — generated items plus their totals, with Markdown and JSON output."""

from __future__ import annotations

import json
from typing import Any

from zimestimate.calculations.totals import calculate_totals
from zimestimate.models.boq import BOQTotals, GeneratedBOQItem


class BOQReport:
    """A generated bill of quantities.

    Totals are derived from the current items on every access.
    """

    def __init__(
        self,
        items: list[GeneratedBOQItem] | None = None,
        project_name: str = "",
        floor_area: float = 0.0,
        scope: list[str] | None = None,
    ) -> None:
        self.items = list(items or [])
        self.project_name = project_name
        self.floor_area = floor_area
        self.scope = scope or []

    @property
    def totals(self) -> BOQTotals:
        return calculate_totals(self.items)

    def items_for(self, category: str) -> list[GeneratedBOQItem]:
        return [item for item in self.items if item.category == category]

    def replace_quantity(self, item_id: str, quantity: float) -> GeneratedBOQItem:
        """Apply a user override to one item.  Raises KeyError if unknown."""
        for i, item in enumerate(self.items):
            if item.id == item_id:
                self.items[i] = item.with_quantity(quantity)
                return self.items[i]
        raise KeyError(item_id)

    def to_markdown(self) -> str:
        """Generate a BOQ summary in Markdown."""
        totals = self.totals
        lines: list[str] = []

        lines.append(f"# Bill of Quantities — {self.project_name or 'Untitled'}")
        lines.append("")
        lines.append(f"**Floor Area:** {self.floor_area:g} m²")
        lines.append(f"**Scope:** {', '.join(self.scope) or 'n/a'}")
        lines.append("")

        for category, subtotal in totals.by_category.items():
            lines.append(f"## {category.title()}")
            lines.append("")
            lines.append("| Material | Qty | Unit | Unit Price (USD) | Total (USD) |")
            lines.append("|----------|-----|------|------------------|-------------|")
            for item in self.items_for(category):
                lines.append(
                    f"| {item.material_name} | {item.quantity:g} | {item.unit} "
                    f"| ${item.unit_price_usd:,.2f} | ${item.total_usd:,.2f} |"
                )
            lines.append(f"| **Subtotal** | | | | **${subtotal.usd:,.2f}** |")
            lines.append("")

        lines.append("## Totals")
        lines.append("")
        lines.append(f"- **Items:** {totals.item_count}")
        lines.append(f"- **Total (USD):** ${totals.total_usd:,.2f}")
        lines.append(f"- **Total (ZWG):** ZWG {totals.total_zwg:,.2f}")
        lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        return {
            "project_name": self.project_name,
            "floor_area": self.floor_area,
            "scope": self.scope,
            "items": [item.model_dump() for item in self.items],
            "totals": self.totals.model_dump(),
        }
