import pytest

from reaperkeymap.special_inputs import SpecialInput, SpecialInputKind


def si(kind, code=None):
    return SpecialInput(kind, code)


def test_mousewheel_parsing():
    assert SpecialInput.from_key_code(248) == si(SpecialInputKind.MOUSEWHEEL)
    assert SpecialInput.from_key_code(120) == si(SpecialInputKind.MOUSEWHEEL)
    assert SpecialInput.from_key_code(249) == si(SpecialInputKind.CTRL_MOUSEWHEEL)
    assert SpecialInput.from_key_code(250) == si(SpecialInputKind.ALT_MOUSEWHEEL)


def test_horizontal_wheel_parsing():
    assert SpecialInput.from_key_code(216) == si(SpecialInputKind.HORIZ_WHEEL)
    assert SpecialInput.from_key_code(218) == si(SpecialInputKind.ALT_HORIZ_WHEEL)
    assert SpecialInput.from_key_code(217) == si(SpecialInputKind.CTRL_HORIZ_WHEEL)


@pytest.mark.parametrize(
    "kind",
    [
        SpecialInputKind.MOUSEWHEEL,
        SpecialInputKind.ALT_HORIZ_WHEEL,
        SpecialInputKind.CTRL_MULTI_ZOOM,
        SpecialInputKind.MULTI_VERT,
    ],
)
def test_round_trip(kind):
    value = si(kind)
    assert SpecialInput.from_key_code(value.to_key_code()) == value


def test_every_fixed_kind_round_trips():
    fixed = [
        k
        for k in SpecialInputKind
        if k not in (SpecialInputKind.MEDIA_KEY, SpecialInputKind.UNKNOWN)
    ]
    for kind in fixed:
        assert SpecialInput.from_key_code(si(kind).to_key_code()).kind is kind


@pytest.mark.parametrize(
    "code, kind",
    [
        (88, SpecialInputKind.HORIZ_WHEEL),
        (90, SpecialInputKind.ALT_HORIZ_WHEEL),
        (72, SpecialInputKind.MULTI_ZOOM),
        (25, SpecialInputKind.CTRL_MULTI_ROTATE),
        (40, SpecialInputKind.MULTI_HORZ),
        (56, SpecialInputKind.MULTI_VERT),
        (125, SpecialInputKind.CTRL_SHIFT_MOUSEWHEEL),
        (252, SpecialInputKind.SHIFT_MOUSEWHEEL),
        (255, SpecialInputKind.CTRL_ALT_SHIFT_MOUSEWHEEL),
        (207, SpecialInputKind.CTRL_ALT_SHIFT_MULTI_ZOOM),
    ],
)
def test_alias_codes(code, kind):
    assert SpecialInput.from_key_code(code) == si(kind)


def test_canonical_codes():
    assert si(SpecialInputKind.MOUSEWHEEL).to_key_code() == 248
    assert si(SpecialInputKind.HORIZ_WHEEL).to_key_code() == 216
    assert si(SpecialInputKind.MULTI_ROTATE).to_key_code() == 152
    assert si(SpecialInputKind.MULTI_HORZ).to_key_code() == 168


@pytest.mark.parametrize("code", [232, 488, 744, 1000, 12520])
def test_media_keys(code):
    value = SpecialInput.from_key_code(code)
    assert value == si(SpecialInputKind.MEDIA_KEY, code)
    assert value.to_key_code() == code


@pytest.mark.parametrize("code", [0, 1, 233, 300, 487])
def test_unknown_codes(code):
    value = SpecialInput.from_key_code(code)
    assert value == si(SpecialInputKind.UNKNOWN, code)
    assert value.to_key_code() == code


def test_display_names():
    assert str(si(SpecialInputKind.MOUSEWHEEL)) == "Mousewheel"
    assert str(si(SpecialInputKind.CTRL_ALT_SHIFT_HORIZ_WHEEL)) == "Ctrl+Alt+Shift+HorizWheel"
    assert str(si(SpecialInputKind.MEDIA_KEY, 232)) == "MediaKey(232)"
    assert str(si(SpecialInputKind.UNKNOWN, 7)) == "Unknown(7)"


def test_out_of_range_key_code():
    with pytest.raises(ValueError):
        SpecialInput.from_key_code(-1)
    with pytest.raises(ValueError):
        SpecialInput.from_key_code(0x10000)


def test_code_validation():
    with pytest.raises(ValueError):
        SpecialInput(SpecialInputKind.MEDIA_KEY)
    with pytest.raises(ValueError):
        SpecialInput(SpecialInputKind.MOUSEWHEEL, 248)