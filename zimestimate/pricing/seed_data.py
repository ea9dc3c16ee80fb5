"""Embedded material catalog, suppliers and sample prices.

Zimbabwe market sample data, January 2026.  Prices are per catalog unit
in USD and ZWG.  Production deployments point ``ZIMEST_PRICE_FILE`` at a
fresher export instead.
"""

from __future__ import annotations

from typing import Any

SOURCE = "ZimEstimate sample prices 2026-01"

# material_id -> {name, category, unit}
MATERIALS: dict[str, dict[str, str]] = {
    # Bricks & blocks
    "brick-common": {"name": "Common Cement Brick", "category": "bricks", "unit": "each"},
    "farm-brick": {"name": "Farm Brick", "category": "bricks", "unit": "each"},
    "brick-semi": {"name": "Semi-Common Brick", "category": "bricks", "unit": "each"},
    "brick-face-red": {"name": "Face Brick (Red)", "category": "bricks", "unit": "per 1000"},
    "block-6inch": {"name": "Hollow Block 6\"", "category": "bricks", "unit": "each"},
    "block-8inch": {"name": "Hollow Block 8\"", "category": "bricks", "unit": "each"},
    # Cement
    "cement-325": {"name": "Standard Cement 32.5N", "category": "cement", "unit": "per 50kg bag"},
    "cement-425": {"name": "Rapid Cement 42.5R", "category": "cement", "unit": "per 50kg bag"},
    # Sand & aggregates
    "sand-river": {"name": "River Sand (Concrete)", "category": "sand", "unit": "per cube"},
    "sand-pit": {"name": "Pit Sand (Plastering)", "category": "sand", "unit": "per cube"},
    "sand-bricks": {"name": "Brick Sand", "category": "sand", "unit": "per cube"},
    "stone-19mm": {"name": "Crushed Stone 19mm", "category": "aggregates", "unit": "per cube"},
    "hardcore": {"name": "Hardcore (Filling)", "category": "aggregates", "unit": "per cube"},
    # Steel
    "rebar-10": {"name": "Rebar Y10 (6m)", "category": "steel", "unit": "per length"},
    "rebar-12": {"name": "Rebar Y12 (6m)", "category": "steel", "unit": "per length"},
    "mesh-ref193": {"name": "Mesh Ref 193", "category": "steel", "unit": "per sheet"},
    "brickforce": {"name": "Brickforce", "category": "steel", "unit": "per roll"},
    # Roofing & timber
    "ibr-04-3m": {"name": "IBR Sheet 0.4mm (3m)", "category": "roofing", "unit": "per sheet"},
    "ibr-05-3m": {"name": "IBR Sheet 0.5mm (3m)", "category": "roofing", "unit": "per sheet"},
    "fascia-pvc": {"name": "PVC Fascia Board", "category": "roofing", "unit": "per 6m length"},
    "timber-50x76": {"name": "Timber 50x76mm (Rafters)", "category": "timber", "unit": "per 6m length"},
    "timber-38x38": {"name": "Timber 38x38mm (Brandering)", "category": "timber", "unit": "per 6m length"},
    "screws-roof": {"name": "Roof Screws", "category": "hardware", "unit": "per 100"},
    # Waterproofing & finishes
    "dpm": {"name": "DPM (Damp Proof Membrane)", "category": "finishes", "unit": "per roll"},
    "dpc": {"name": "DPC (Damp Proof Course)", "category": "finishes", "unit": "per roll"},
    "window-sill-brick": {"name": "Window Sill (Brick)", "category": "finishes", "unit": "per meter"},
    "paint-pva": {"name": "PVA Paint (White)", "category": "finishes", "unit": "per 20L"},
    "tiles-floor-ceramic": {"name": "Floor Tiles (Ceramic)", "category": "finishes", "unit": "per m2"},
    # Labor & services
    "labor-builder": {"name": "Builder (Daily Rate)", "category": "labor", "unit": "per day"},
    "labor-assistant": {"name": "General Hand (Daily Rate)", "category": "labor", "unit": "per day"},
    "labor-foreman": {"name": "Foreman (Daily Rate)", "category": "labor", "unit": "per day"},
    "service-food": {"name": "Builder's Food Allowance", "category": "labor", "unit": "per day"},
    "service-transport": {"name": "Transport/Logistics", "category": "labor", "unit": "per trip"},
}

# supplier_id -> {name, location, trusted}
SUPPLIERS: dict[str, dict[str, Any]] = {
    "sup-1": {"name": "Halsteds Hardware", "location": "Harare CBD", "trusted": True},
    "sup-2": {"name": "Baines Building Supplies", "location": "Graniteside, Harare", "trusted": True},
    "sup-3": {"name": "PPC Zimbabwe", "location": "Colleen Bawn", "trusted": True},
    "sup-4": {"name": "Radar Holdings", "location": "Msasa, Harare", "trusted": True},
    "sup-5": {"name": "ZimSteel", "location": "Kwekwe", "trusted": True},
    "sup-6": {"name": "Mukuru Hardware", "location": "Borrowdale, Harare", "trusted": False},
}

# (material_id, supplier_id, price_usd, price_zwg, last_updated, in_stock)
SEED_PRICES: list[tuple[str, str, float, float, str, bool]] = [
    ("brick-common", "sup-2", 0.075, 2.25, "2026-01-30", True),
    ("brick-face-red", "sup-2", 180.0, 5400.0, "2026-01-30", True),
    ("cement-325", "sup-3", 10.0, 300.0, "2026-01-31", True),
    ("cement-325", "sup-2", 10.50, 315.0, "2026-01-30", True),
    ("cement-425", "sup-3", 12.0, 360.0, "2026-01-31", True),
    ("sand-river", "sup-2", 45.0, 1350.0, "2026-01-29", True),
    ("sand-pit", "sup-2", 35.0, 1050.0, "2026-01-29", True),
    ("stone-19mm", "sup-2", 55.0, 1650.0, "2026-01-28", True),
    ("rebar-12", "sup-4", 8.0, 240.0, "2026-01-30", True),
    ("rebar-12", "sup-5", 7.80, 234.0, "2026-01-31", True),
    ("ibr-04-3m", "sup-4", 18.0, 540.0, "2026-01-30", True),
    ("ibr-05-3m", "sup-4", 22.0, 660.0, "2026-01-30", True),
    ("paint-pva", "sup-1", 35.0, 1050.0, "2026-01-28", True),
    ("tiles-floor-ceramic", "sup-1", 12.0, 360.0, "2026-01-27", True),
    ("hardcore", "sup-2", 25.0, 750.0, "2026-01-31", True),
    ("brickforce", "sup-4", 3.50, 105.0, "2026-01-31", True),
    ("dpc", "sup-1", 5.0, 150.0, "2026-01-31", True),
    ("dpm", "sup-1", 15.0, 450.0, "2026-01-31", True),
    ("labor-builder", "sup-6", 25.0, 750.0, "2026-01-31", True),
    ("labor-assistant", "sup-6", 10.0, 300.0, "2026-01-31", True),
    ("labor-foreman", "sup-6", 40.0, 1200.0, "2026-01-31", True),
    ("service-food", "sup-6", 5.0, 150.0, "2026-01-31", True),
    ("service-transport", "sup-6", 50.0, 1500.0, "2026-01-31", True),
]
