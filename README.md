# aegis

The game data model for a real-time strategy game. It holds a nation's
stocks of resources, the coefficients that change production rates, and
a catalogue of weapons that are kept by identifier.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Contents

- `aegis.coefficient`: `Coefficient`, a production or consumption
  multiplier with a `value` that defaults to 1.0. It has `add`, `sub`,
  `mul` and `div`. `sub` stops at 0.0, and `div` by 0.0 leaves the value
  unchanged. Coefficients compare and order by value.
- `aegis.resources`: resource stocks.
  - `Food`, `Money` and `WorkForce` hold an `amount` and have `add` and
    `remove`. `Money.is_negative()` tells whether the balance is below
    zero. Only `Money` may go negative.
  - `Ores` holds `uranium` and `rate_metals`. It has `add_uranium`,
    `add_rate_metals`, `remove_uranium` and `remove_rate_metals`.
  - `RefinedProduct` holds `alloys`, `chips` and `components`. It has
    the matching `add_*` and `remove_*` methods.
  - Every `remove` method returns `False` and changes nothing when the
    stock is too small. The stocks that cannot go negative raise
    `ValueError` when they are given a negative amount.
  - `ScientificResearch` is a collection of `Expert`s. Each expert has a
    `level` from 0 to 255, and a level outside that range raises
    `ValueError`. `len()` gives the number of experts, and `amount()`
    gives the sum of their levels.
- `aegis.weapon_info`: `Damages` holds the damage dealt to each kind of
  target, such as building, infantry, tank and ship. `WeaponInformations`
  holds the name, caliber, speed, range and country reference. Both have
  `to_dict()` and `from_dict()`.
  - In `Damages.from_dict`, a missing target defaults to 0.0.
  - `WeaponInformations.from_dict` requires `name` and
    `country_reference`, and raises `ValueError` if either is missing.
  - Both raise `TypeError` when a field has the wrong type.
- `aegis.bullets`: `Bullet` and `BulletType`.
- `aegis.firearm`: `FireArm` and `FireArmType`. A firearm has a default
  bullet and a list of allowed bullet ids. `add_allowed_bullet` never
  adds the same id twice, and `remove_allowed_bullet` ignores unknown
  ids.
- `aegis.torpedo`: `Torpedo`, `GuidanceType` and `PropulsionType`.
- `aegis.missiles`: `Missile`, `MissileGuidanceType`, `ProjectileType`,
  `WarheadType` and `WarheadCharge`.
  - A new missile is not hypersonic, and it carries one standard cruise
    warhead.
  - Its `speed` property reads and writes `informations.speed`.
- `aegis.shells`: `Shell` and `ShellType`.
- `aegis.store`: `WeaponStore` holds missiles, torpedoes, shells,
  firearms and bullets by id. Each kind has `get_*`, `add_*` and
  `remove_*` methods.
  - `get_*` returns `None` for an unknown id.
  - Adding under an existing id replaces the weapon that was there.
  - Removing an unknown id does nothing.

The type enumerations are `IntEnum`s, so calling one with an unknown
code raises `ValueError`. For example, `BulletType(9)` raises
`ValueError`.

## Example

```python
from aegis.resources import Food, Expert, ScientificResearch
from aegis.missiles import Missile, MissileGuidanceType, ProjectileType
from aegis.store import WeaponStore

food = Food()
food.add(10)
assert food.remove(5)
assert not food.remove(10)
assert str(food) == "Food(5)"

research = ScientificResearch()
research.add_expert(Expert(10))
research.add_expert(Expert(20))
assert len(research) == 2
assert research.amount() == 30

store = WeaponStore()
store.add_missile("exocet", Missile(MissileGuidanceType.RADAR, ProjectileType.CRUISE))
missile = store.get_missile("exocet")
missile.speed = 315.0
assert missile.informations.speed == 315.0
```

## What it does not do

This package is only a data model, used as a library. It has:

- no command-line program;
- no network server or game loop;
- no database or file storage.

Weapons and resources exist only in memory. The `to_dict()` and
`from_dict()` methods of `Damages` and `WeaponInformations` are the
only conversions to and from plain data.

## Running the tests

```
pytest
```