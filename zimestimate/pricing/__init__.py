"""Material price lookup — the engine's only external collaborator."""

from zimestimate.pricing.provider import LocalProvider, MaterialPrice, PriceLookup, StaticProvider

__all__ = ["LocalProvider", "MaterialPrice", "PriceLookup", "StaticProvider"]
