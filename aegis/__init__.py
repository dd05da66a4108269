"""Game data model for a real-time strategy game: resources, coefficients and weapons."""

__version__ = "0.1.0"

__all__ = [
    "bullets",
    "coefficient",
    "firearm",
    "missiles",
    "resources",
    "shells",
    "store",
    "torpedo",
    "weapon_info",
]