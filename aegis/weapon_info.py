"""Damage tables and descriptive information shared by every weapon kind."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

# Speed in meters per second. A negative speed means the damage is applied instantly.
Speed = float

WeaponID = str


def _as_float(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"field {key!r} must be a number, got {type(value).__name__}")
    return float(value)


def _as_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


@dataclass(order=True)
class Damages:
    """The damage a weapon deals to each kind of target."""

    building: float = 0.0
    infantry: float = 0.0
    vehicle: float = 0.0
    armored_vehicle: float = 0.0
    tank: float = 0.0
    helicopter: float = 0.0
    plane: float = 0.0
    ship: float = 0.0
    submarine: float = 0.0
    missile: float = 0.0
    satellite: float = 0.0

    def to_dict(self) -> dict[str, float]:
        """Return the damages as a plain mapping of target kind to damage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Damages:
        """Build damages from a mapping; missing targets default to 0.0."""
        values = {
            f.name: _as_float(f.name, data[f.name])
            for f in fields(cls)
            if f.name in data
        }
        return cls(**values)


@dataclass(order=True)
class WeaponInformations:
    """Descriptive characteristics of a weapon.

    ``caliber`` is in millimeters, ``speed`` in meters per second and
    ``range`` in kilometers. ``country_reference`` tells which country may
    use the weapon.
    """

    name: str = ""
    caliber: float = 0.0
    speed: Speed = 0.0
    range: float = 0.0
    country_reference: str = ""

    _REQUIRED = ("name", "country_reference")
    _OPTIONAL = ("caliber", "speed", "range")

    def to_dict(self) -> dict[str, Any]:
        """Return the information as a plain mapping."""
        return {
            "name": self.name,
            "caliber": self.caliber,
            "speed": self.speed,
            "range": self.range,
            "country_reference": self.country_reference,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> WeaponInformations:
        """Build information from a mapping.

        ``name`` and ``country_reference`` are required; the numeric fields
        default to 0.0 when absent.
        """
        missing = [key for key in cls._REQUIRED if key not in data]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")
        values: dict[str, Any] = {key: _as_str(key, data[key]) for key in cls._REQUIRED}
        values.update(
            {key: _as_float(key, data[key]) for key in cls._OPTIONAL if key in data}
        )
        return cls(**values)