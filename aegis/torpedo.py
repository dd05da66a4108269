"""Torpedoes with their guidance and propulsion."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from aegis.weapon_info import Damages, WeaponInformations


class PropulsionType(IntEnum):
    """How loud a torpedo's propulsion is. Unknown codes raise ValueError."""

    STANDARD = 0
    SNEAKY = 1
    FUCKING_SILENT = 2


class GuidanceType(IntEnum):
    """How a torpedo finds its target. Unknown codes raise ValueError."""

    # No sonar, straight trajectory.
    SIMPLE = 0
    # Activates after a delay, searches and aims at anything pinged by sonar.
    SONAR = 1
    # Like sonar, with a guiding cable.
    GUIDED = 2
    # Carried by a missile first, then released as a torpedo.
    AIR_SEA = 3


@dataclass
class Torpedo:
    """A torpedo with its guidance, propulsion, information and damages."""

    guidance: GuidanceType
    propulsion: PropulsionType
    informations: WeaponInformations = field(default_factory=WeaponInformations)
    damages: Damages = field(default_factory=Damages)