"""Bullets fired by firearms."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from aegis.weapon_info import Damages, WeaponInformations


class BulletType(IntEnum):
    """The kinds of bullet. ``BulletType(n)`` raises ValueError for an unknown code."""

    # Full metal jacket: better penetration, less barrel fouling.
    ORDINARY = 0
    # Hollow point: deforms and expands on impact.
    EXPANSIBLE = 1
    # Reinforced to go through light armor.
    ARMOR_PIERCING = 2
    # Breaks up to limit over-penetration.
    FRANGIBLE = 3
    # Leaves a visible trail for position reporting and trajectory correction.
    TRACING = 4
    # Piercing point with an incendiary charge; can start fires.
    ARMOR_PIERCING_INCENDIARY = 5
    # Small penetrator in a sabot that detaches after the shot.
    SABOTED_LIGHT_ARMOR_PENETRATOR = 6
    # Breaks into fragments on impact.
    FRAGMENTATION = 7


@dataclass
class Bullet:
    """A bullet of a given type with its information and damages."""

    bullet_type: BulletType
    informations: WeaponInformations = field(default_factory=WeaponInformations)
    damages: Damages = field(default_factory=Damages)