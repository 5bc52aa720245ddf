import pytest

from reaperkeymap.modifiers import Modifiers

REGULAR = Modifiers.SHIFT | Modifiers.CONTROL | Modifiers.ALT | Modifiers.SUPER
ALL = REGULAR | Modifiers.SPECIAL_INPUT


def test_mods():
    m = Modifiers(int(Modifiers.SHIFT) | int(Modifiers.CONTROL))
    assert Modifiers.reaper_code(m) == 37
    assert Modifiers.from_reaper_code(37) == m

    regular = Modifiers(int(REGULAR))
    assert Modifiers.reaper_code(regular) == 61
    assert Modifiers.from_reaper_code(61) == regular

    everything = Modifiers(int(ALL))
    assert Modifiers.reaper_code(everything) == 255


def test_all_modifier_combinations():
    max_bits = int(REGULAR)
    checked = 0
    for bits in range(max_bits + 1):
        if bits & ~int(REGULAR):
            continue
        flags = Modifiers(bits)
        assert flags.reaper_code() == bits + 1
        assert int(Modifiers.from_reaper_code(bits + 1)) == bits
        checked += 1
    assert checked == 16
    assert Modifiers.SPECIAL_INPUT.reaper_code() == 255


@pytest.mark.parametrize(
    "flags, expected",
    [
        (Modifiers(0), 1),
        (Modifiers.SHIFT, 5),
        (Modifiers.CONTROL, 33),
        (Modifiers.ALT, 17),
        (Modifiers.SUPER, 9),
        (Modifiers.SHIFT | Modifiers.CONTROL, 37),
        (REGULAR, 61),
    ],
)
def test_specific_known_cases(flags, expected):
    assert flags.reaper_code() == expected


def test_case_255():
    special = Modifiers.from_reaper_code(255)
    assert special == Modifiers.SPECIAL_INPUT
    assert special.is_special_input()
    assert special.reaper_code() == 255
    truncated = Modifiers((254 & 0x7F) & int(REGULAR))
    assert truncated == REGULAR


def test_special_input_flag():
    assert Modifiers.SPECIAL_INPUT.is_special_input()
    normal = Modifiers.SHIFT | Modifiers.CONTROL
    assert not normal.is_special_input()
    assert normal.reaper_code() == 37


@pytest.mark.parametrize(
    "code, expected",
    [
        (1, Modifiers(0)),
        (33, Modifiers.CONTROL),
        (9, Modifiers.SUPER),
        (37, Modifiers.SHIFT | Modifiers.CONTROL),
    ],
)
def test_from_reaper_code(code, expected):
    assert Modifiers.from_reaper_code(code) == expected


@pytest.mark.parametrize("code", [0, 2, 3, 254, 256, -1])
def test_from_reaper_code_invalid(code):
    with pytest.raises(ValueError):
        Modifiers.from_reaper_code(code)