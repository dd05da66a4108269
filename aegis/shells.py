"""Shells fired by tanks, cannons, howitzers and mortars."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from aegis.weapon_info import Damages, WeaponInformations


class ShellType(IntEnum):
    """The kinds of shell. ``ShellType(n)`` raises ValueError for an unknown code."""

    # Penetrates armor and explodes inside; effective against tanks and armored vehicles.
    ARMOR_PIERCING = 0
    # Explodes on impact; effective against infantry, light vehicles and buildings.
    HIGH_EXPLOSIVE = 1
    # Explodes on impact and scatters shrapnel; effective against infantry.
    FRAGMENTATION = 2
    # Concentrates the blast on a small area to get through armor.
    HIGH_EXPLOSIVE_ANTI_TANK = 3
    # A sabot accelerates the penetrator, then is discarded.
    ARMOR_PIERCING_DISCARDING_SABOT = 4
    # A fin-stabilized dart in a discarding sabot, for maximum penetration.
    ARMOR_PIERCING_FIN_STABILIZED_DISCARDING_SABOT = 5
    # A first charge defeats reactive armor, a second one the main armor.
    TANDEM_CHARGE = 6
    # Bursts in the air and scatters shrapnel; effective against infantry.
    MORTAR = 7


@dataclass
class Shell:
    """A shell of a given type with its information and damages."""

    shell_type: ShellType
    informations: WeaponInformations = field(default_factory=WeaponInformations)
    damages: Damages = field(default_factory=Damages)