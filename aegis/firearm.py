"""Firearms and the bullets they accept."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from aegis.weapon_info import Damages, WeaponID, WeaponInformations


class FireArmType(IntEnum):
    """The kinds of firearm."""

    # Hand-held, short range, usually one-handed.
    GUN = 0
    # Long barrel, shouldered.
    RIFLE = 1
    # Fires bursts.
    SUB_MACHINE_GUN = 2
    # Selective fire, semi-automatic or automatic.
    ASSAULT = 3
    # Continuous automatic fire.
    MACHINE_GUN = 4
    # Accurate at long distances.
    PRECISION_RIFLE = 5


@dataclass
class FireArm:
    """A firearm with its default bullet and the bullets it is allowed to fire."""

    fire_arm_type: FireArmType
    default_bullet: WeaponID
    allowed_bullets: list[WeaponID] = field(default_factory=list)
    informations: WeaponInformations = field(default_factory=WeaponInformations)
    damages: Damages = field(default_factory=Damages)

    def add_allowed_bullet(self, weapon_id: WeaponID) -> None:
        """Allow a bullet for this firearm; an already allowed bullet is not added twice."""
        if weapon_id not in self.allowed_bullets:
            self.allowed_bullets.append(weapon_id)

    def remove_allowed_bullet(self, weapon_id: WeaponID) -> None:
        """Stop allowing a bullet; unknown ids are ignored."""
        self.allowed_bullets = [i for i in self.allowed_bullets if i != weapon_id]