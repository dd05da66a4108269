"""Missiles with their guidance, trajectory and warhead."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from aegis.weapon_info import Damages, Speed, WeaponInformations

# Default speed of a missile in meters per second.
DEFAULT_SPEED: Speed = 0.0

# The number of warheads carried by a missile.
WarheadCount = int


class ProjectileType(IntEnum):
    """The trajectory a missile follows. Unknown codes raise ValueError."""

    # Low-altitude cruise trajectory; can change course after launch and follow a target.
    CRUISE = 0
    # Parabolic trajectory up to 100 km altitude; cannot change course after launch.
    BALLISTIC = 1


class MissileGuidanceType(IntEnum):
    """How a missile is guided to its target. Unknown codes raise ValueError."""

    LASER = 0
    RADAR = 1
    HEAT = 2
    GPS = 3
    RADIO = 4


class WarheadType(IntEnum):
    """The role of a missile's warhead. Unknown codes raise ValueError."""

    CRUISE = 0
    ANTI_SHIP = 1
    ANTI_AIRCRAFT = 2
    # Anti-ballistic missile.
    ABM = 3
    # Short-range ballistic missile.
    SRBM = 4
    # Medium-range ballistic missile.
    MRBM = 5
    # Intercontinental ballistic missile.
    ICBM = 6
    # Electromagnetic pulse; only useful with a nuclear charge.
    EMP = 7


class WarheadCharge(IntEnum):
    """The explosive charge in a warhead. Unknown codes raise ValueError."""

    STANDARD = 0
    # Releases a cloud of toxic gas.
    CHEMICAL = 1
    NUCLEAR = 2
    # Releases a cloud carrying a deadly virus or bacteria.
    BIOLOGICAL = 3


@dataclass
class Missile:
    """A missile, either one in flight or a description of a model.

    A new missile is not hypersonic and carries one standard cruise warhead.
    """

    guidance: MissileGuidanceType
    projectile: ProjectileType
    hypersonic: bool = False
    warhead: WarheadType = WarheadType.CRUISE
    warhead_charge: WarheadCharge = WarheadCharge.STANDARD
    warhead_count: WarheadCount = 1
    informations: WeaponInformations = field(default_factory=WeaponInformations)
    damages: Damages = field(default_factory=Damages)

    @property
    def speed(self) -> Speed:
        """The missile's speed in meters per second, kept in its information."""
        return self.informations.speed

    @speed.setter
    def speed(self, value: Speed) -> None:
        self.informations.speed = value