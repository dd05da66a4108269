"""A registry of every weapon, keyed by weapon id."""

from __future__ import annotations

from dataclasses import dataclass, field

from aegis.bullets import Bullet
from aegis.firearm import FireArm
from aegis.missiles import Missile
from aegis.shells import Shell
from aegis.torpedo import Torpedo
from aegis.weapon_info import WeaponID


@dataclass
class WeaponStore:
    """Holds missiles, torpedoes, shells, firearms and bullets by id.

    Adding under an existing id replaces the previous weapon; removing an
    unknown id does nothing.
    """

    missiles: dict[WeaponID, Missile] = field(default_factory=dict)
    torpedoes: dict[WeaponID, Torpedo] = field(default_factory=dict)
    shells: dict[WeaponID, Shell] = field(default_factory=dict)
    firearms: dict[WeaponID, FireArm] = field(default_factory=dict)
    bullets: dict[WeaponID, Bullet] = field(default_factory=dict)

    def get_missile(self, weapon_id: WeaponID) -> Missile | None:
        """Return the missile with this id, or None."""
        return self.missiles.get(weapon_id)

    def add_missile(self, weapon_id: WeaponID, missile: Missile) -> None:
        """Store a missile under this id."""
        self.missiles[weapon_id] = missile

    def remove_missile(self, weapon_id: WeaponID) -> None:
        """Remove the missile with this id, if any."""
        self.missiles.pop(weapon_id, None)

    def get_torpedo(self, weapon_id: WeaponID) -> Torpedo | None:
        """Return the torpedo with this id, or None."""
        return self.torpedoes.get(weapon_id)

    def add_torpedo(self, weapon_id: WeaponID, torpedo: Torpedo) -> None:
        """Store a torpedo under this id."""
        self.torpedoes[weapon_id] = torpedo

    def remove_torpedo(self, weapon_id: WeaponID) -> None:
        """Remove the torpedo with this id, if any."""
        self.torpedoes.pop(weapon_id, None)

    def get_shell(self, weapon_id: WeaponID) -> Shell | None:
        """Return the shell with this id, or None."""
        return self.shells.get(weapon_id)

    def add_shell(self, weapon_id: WeaponID, shell: Shell) -> None:
        """Store a shell under this id."""
        self.shells[weapon_id] = shell

    def remove_shell(self, weapon_id: WeaponID) -> None:
        """Remove the shell with this id, if any."""
        self.shells.pop(weapon_id, None)

    def get_firearm(self, weapon_id: WeaponID) -> FireArm | None:
        """Return the firearm with this id, or None."""
        return self.firearms.get(weapon_id)

    def add_firearm(self, weapon_id: WeaponID, firearm: FireArm) -> None:
        """Store a firearm under this id."""
        self.firearms[weapon_id] = firearm

    def remove_firearm(self, weapon_id: WeaponID) -> None:
        """Remove the firearm with this id, if any."""
        self.firearms.pop(weapon_id, None)

    def get_bullet(self, weapon_id: WeaponID) -> Bullet | None:
        """Return the bullet with this id, or None."""
        return self.bullets.get(weapon_id)

    def add_bullet(self, weapon_id: WeaponID, bullet: Bullet) -> None:
        """Store a bullet under this id."""
        self.bullets[weapon_id] = bullet

    def remove_bullet(self, weapon_id: WeaponID) -> None:
        """Remove the bullet with this id, if any."""
        self.bullets.pop(weapon_id, None)