import pytest

from aegis.weapon_info import Damages, WeaponInformations

DAMAGE_FIELDS = [
    "building",
    "infantry",
    "vehicle",
    "armored_vehicle",
    "tank",
    "helicopter",
    "plane",
    "ship",
    "submarine",
    "missile",
    "satellite",
]


def _full_damages():
    return Damages(
        building=1.0,
        infantry=2.0,
        vehicle=3.0,
        armored_vehicle=4.0,
        tank=5.0,
        helicopter=6.0,
        plane=7.0,
        ship=8.0,
        submarine=9.0,
        missile=10.0,
        satellite=11.0,
    )


def test_damages_default_all_zero():
    assert all(value == 0.0 for value in Damages().to_dict().values())


def test_damages_to_dict_keys():
    assert list(Damages().to_dict()) == DAMAGE_FIELDS


def test_damages_round_trip():
    damages = _full_damages()
    assert Damages.from_dict(damages.to_dict()) == damages


def test_damages_from_dict_missing_fields_default():
    damages = Damages.from_dict({"tank": 5.0})
    assert damages.tank == 5.0
    assert damages.building == 0.0
    assert damages.satellite == 0.0


def test_damages_from_empty_dict_equals_default():
    assert Damages.from_dict({}) == Damages()


def test_damages_from_dict_ignores_unknown():
    assert Damages.from_dict({"unknown": 3.0, "ship": 8.0}) == Damages(ship=8.0)


def test_damages_from_dict_rejects_text():
    with pytest.raises(TypeError):
        Damages.from_dict({"plane": "high"})


def test_damages_ordering():
    assert Damages() < _full_damages()


def test_weapon_informations_default():
    info = WeaponInformations()
    assert info.name == ""
    assert info.caliber == 0.0
    assert info.speed == 0.0
    assert info.range == 0.0
    assert info.country_reference == ""


def test_weapon_informations_example():
    info = WeaponInformations(
        name="M4A1", caliber=5.56, speed=900.0, range=500.0, country_reference="fr"
    )
    assert info.to_dict() == {
        "name": "M4A1",
        "caliber": 5.56,
        "speed": 900.0,
        "range": 500.0,
        "country_reference": "fr",
    }


def test_weapon_informations_round_trip():
    info = WeaponInformations(
        name="Exocet", caliber=0.0, speed=315.0, range=180.0, country_reference="FR"
    )
    assert WeaponInformations.from_dict(info.to_dict()) == info


def test_weapon_informations_numeric_fields_default():
    info = WeaponInformations.from_dict({"name": "Exocet", "country_reference": "FR"})
    assert info == WeaponInformations(name="Exocet", country_reference="FR")


@pytest.mark.parametrize("missing", ["name", "country_reference"])
def test_weapon_informations_required_fields(missing):
    data = {"name": "Exocet", "country_reference": "FR", "speed": 315.0}
    del data[missing]
    with pytest.raises(ValueError, match=missing):
        WeaponInformations.from_dict(data)


def test_weapon_informations_rejects_bad_speed():
    with pytest.raises(TypeError):
        WeaponInformations.from_dict(
            {"name": "Exocet", "country_reference": "FR", "speed": "fast"}
        )


def test_weapon_informations_rejects_non_string_name():
    with pytest.raises(TypeError):
        WeaponInformations.from_dict({"name": 3, "country_reference": "FR"})


def test_weapon_informations_int_converted_to_float():
    info = WeaponInformations.from_dict(
        {"name": "Exocet", "country_reference": "FR", "range": 180}
    )
    assert info.range == 180.0
    assert isinstance(info.range, float)