import pytest

from aegis.shells import Shell, ShellType
from aegis.weapon_info import Damages, WeaponInformations


def test_shell_default():
    shell = Shell(ShellType.ARMOR_PIERCING)
    assert shell.shell_type == ShellType.ARMOR_PIERCING
    assert shell.informations.name == ""
    assert shell.informations.caliber == 0.0
    assert shell.informations.speed == 0.0
    assert shell.informations.range == 0.0


def test_get_shell_type():
    shell = Shell(ShellType.ARMOR_PIERCING)
    assert shell.shell_type == ShellType.ARMOR_PIERCING


def test_shell_set_shell_type():
    shell = Shell(ShellType.ARMOR_PIERCING)
    shell.shell_type = ShellType.HIGH_EXPLOSIVE
    assert shell.shell_type == ShellType.HIGH_EXPLOSIVE


def test_shell_get_informations():
    shell = Shell(ShellType.ARMOR_PIERCING)
    assert shell.informations == WeaponInformations()
    assert shell.informations.name == ""


def test_set_shell_informations():
    shell = Shell(ShellType.FRAGMENTATION)
    shell.informations.name = "Caesar 155mm"
    assert shell.informations.name == "Caesar 155mm"


def test_shell_get_damages():
    shell = Shell(ShellType.ARMOR_PIERCING)
    damages = shell.damages
    assert damages.building == 0.0
    assert damages.infantry == 0.0
    assert damages.vehicle == 0.0
    assert damages.armored_vehicle == 0.0
    assert damages.tank == 0.0
    assert damages.helicopter == 0.0
    assert damages.plane == 0.0
    assert damages.ship == 0.0
    assert damages.submarine == 0.0
    assert damages.missile == 0.0
    assert damages.satellite == 0.0


def test_set_damages():
    shell = Shell(ShellType.MORTAR)
    shell.damages = Damages(infantry=2.0, building=1.0)
    assert shell.damages.infantry == 2.0
    assert shell.damages.building == 1.0


def test_shells_do_not_share_defaults():
    first = Shell(ShellType.ARMOR_PIERCING)
    second = Shell(ShellType.ARMOR_PIERCING)
    first.informations.name = "Caesar 155mm"
    assert second.informations.name == ""


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, ShellType.ARMOR_PIERCING),
        (1, ShellType.HIGH_EXPLOSIVE),
        (2, ShellType.FRAGMENTATION),
        (3, ShellType.HIGH_EXPLOSIVE_ANTI_TANK),
        (4, ShellType.ARMOR_PIERCING_DISCARDING_SABOT),
        (5, ShellType.ARMOR_PIERCING_FIN_STABILIZED_DISCARDING_SABOT),
        (6, ShellType.TANDEM_CHARGE),
        (7, ShellType.MORTAR),
    ],
)
def test_shell_type_from_code(code, expected):
    assert ShellType(code) is expected


@pytest.mark.parametrize("code", [-1, 8, 100])
def test_shell_type_unknown_code(code):
    with pytest.raises(ValueError):
        ShellType(code)