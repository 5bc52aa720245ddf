import pytest

from reaperkeymap.sections import ReaperActionSection


@pytest.mark.parametrize(
    "raw, expected",
    [
        (0, ReaperActionSection.MAIN),
        (100, ReaperActionSection.MAIN_ALT_RECORDING),
        (1, ReaperActionSection.MAIN_ALT_1),
        (16, ReaperActionSection.MAIN_ALT_16),
        (32060, ReaperActionSection.MIDI_EDITOR),
        (32061, ReaperActionSection.MIDI_EVENT_LIST),
        (32062, ReaperActionSection.MIDI_INLINE),
        (32063, ReaperActionSection.MEDIA_EXPLORER),
    ],
)
def test_round_trip_known_sections(raw, expected):
    assert ReaperActionSection.from_code(raw) is expected
    assert ReaperActionSection(raw) is expected
    assert int(expected) == raw


@pytest.mark.parametrize("bad", [42, 9999, 32064, 2**32 - 1])
def test_invalid_section_codes(bad):
    with pytest.raises(ValueError):
        ReaperActionSection.from_code(bad)


def test_main_alt_range():
    alt_sections = {
        ReaperActionSection.from_code(n) for n in range(1, 17)
    }
    expected = {ReaperActionSection[f"MAIN_ALT_{n}"] for n in range(1, 17)}
    assert alt_sections == expected


@pytest.mark.parametrize(
    "section, name",
    [
        (ReaperActionSection.MAIN, "Main"),
        (ReaperActionSection.MAIN_ALT_RECORDING, "Main (alt recording)"),
        (ReaperActionSection.MAIN_ALT_4, "Main (alt-4)"),
        (ReaperActionSection.MAIN_ALT_16, "Main (alt-16)"),
        (ReaperActionSection.MIDI_EDITOR, "MIDI Editor"),
        (ReaperActionSection.MIDI_EVENT_LIST, "MIDI Event List"),
        (ReaperActionSection.MIDI_INLINE, "MIDI Inline Editor"),
        (ReaperActionSection.MEDIA_EXPLORER, "Media Explorer"),
    ],
)
def test_display_name(section, name):
    assert section.display_name() == name


def test_every_section_has_display_name():
    codes = [0, 100, *range(1, 17), 32060, 32061, 32062, 32063]
    names = [
        ReaperActionSection.display_name(ReaperActionSection.from_code(code))
        for code in codes
    ]
    assert len(set(names)) == len(codes)
    assert all(name and name != "Unknown" for name in names)