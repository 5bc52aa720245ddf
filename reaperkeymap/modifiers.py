"""Modifier flags as stored in keymap ``KEY`` lines."""

from __future__ import annotations

from enum import IntFlag


class Modifiers(IntFlag):
    """Keyboard modifier flags.

    A keymap stores modifiers as ``1 + sum of flag bits``. The code 255 is
    reserved for special inputs such as mousewheels, multitouch gestures
    and media keys.
    """

    SHIFT = 0b0000_0100
    SUPER = 0b0000_1000
    ALT = 0b0001_0000
    CONTROL = 0b0010_0000
    SPECIAL_INPUT = 0b1000_0000

    def reaper_code(self) -> int:
        """Return the numeric modifier code used in keymap files."""
        if self.is_special_input():
            return 255
        return 1 + (int(self) & 0x7F)

    @classmethod
    def from_reaper_code(cls, code: int) -> Modifiers:
        """Build the flag set for a keymap modifier code.

        Raises ValueError when the code is outside 0..255 or holds bits
        that no flag defines.
        """
        if not 0 <= code <= 255:
            raise ValueError(f"modifier code out of range: {code}")
        if code == 255:
            return cls.SPECIAL_INPUT
        if code == 0:
            raise ValueError("modifier code 0 is not valid")
        bits = code - 1
        if bits & ~_ALL_BITS:
            raise ValueError(f"modifier code {code} has undefined bits")
        return cls(bits)

    def is_special_input(self) -> bool:
        """Tell whether this set marks a special (non-keyboard) input."""
        return bool(int(self) & int(Modifiers.SPECIAL_INPUT))


_ALL_BITS = sum(int(flag) for flag in Modifiers)