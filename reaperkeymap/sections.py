"""Keymap sections (action contexts) and their numeric codes."""

from __future__ import annotations

from enum import IntEnum


class ReaperActionSection(IntEnum):
    """The contexts a keymap entry can belong to."""

    MAIN = 0
    MAIN_ALT_RECORDING = 100
    MAIN_ALT_1 = 1
    MAIN_ALT_2 = 2
    MAIN_ALT_3 = 3
    MAIN_ALT_4 = 4
    MAIN_ALT_5 = 5
    MAIN_ALT_6 = 6
    MAIN_ALT_7 = 7
    MAIN_ALT_8 = 8
    MAIN_ALT_9 = 9
    MAIN_ALT_10 = 10
    MAIN_ALT_11 = 11
    MAIN_ALT_12 = 12
    MAIN_ALT_13 = 13
    MAIN_ALT_14 = 14
    MAIN_ALT_15 = 15
    MAIN_ALT_16 = 16
    MIDI_EDITOR = 32060
    MIDI_EVENT_LIST = 32061
    MIDI_INLINE = 32062
    MEDIA_EXPLORER = 32063

    @classmethod
    def from_code(cls, value: int) -> ReaperActionSection:
        """Return the section for a numeric code; raise ValueError if unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid section code {value}") from None

    def display_name(self) -> str:
        """Human-readable name used in generated comments."""
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES: dict[ReaperActionSection, str] = {
    ReaperActionSection.MAIN: "Main",
    ReaperActionSection.MAIN_ALT_RECORDING: "Main (alt recording)",
    ReaperActionSection.MIDI_EDITOR: "MIDI Editor",
    ReaperActionSection.MIDI_EVENT_LIST: "MIDI Event List",
    ReaperActionSection.MIDI_INLINE: "MIDI Inline Editor",
    ReaperActionSection.MEDIA_EXPLORER: "Media Explorer",
}
_DISPLAY_NAMES.update(
    {ReaperActionSection(n): f"Main (alt-{n})" for n in range(1, 17)}
)