"""Special (non-keyboard) inputs bound with modifier code 255."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpecialInputKind(Enum):
    """Kinds of special input; each value is the name shown in comments."""

    MOUSEWHEEL = "Mousewheel"
    CTRL_MOUSEWHEEL = "Ctrl+Mousewheel"
    ALT_MOUSEWHEEL = "Alt+Mousewheel"
    CTRL_ALT_MOUSEWHEEL = "Ctrl+Alt+Mousewheel"
    SHIFT_MOUSEWHEEL = "Shift+Mousewheel"
    CTRL_SHIFT_MOUSEWHEEL = "Ctrl+Shift+Mousewheel"
    ALT_SHIFT_MOUSEWHEEL = "Alt+Shift+Mousewheel"
    CTRL_ALT_SHIFT_MOUSEWHEEL = "Ctrl+Alt+Shift+Mousewheel"

    HORIZ_WHEEL = "HorizWheel"
    ALT_HORIZ_WHEEL = "Alt+HorizWheel"
    CTRL_HORIZ_WHEEL = "Ctrl+HorizWheel"
    CTRL_ALT_HORIZ_WHEEL = "Ctrl+Alt+HorizWheel"
    SHIFT_HORIZ_WHEEL = "Shift+HorizWheel"
    CTRL_SHIFT_HORIZ_WHEEL = "Ctrl+Shift+HorizWheel"
    ALT_SHIFT_HORIZ_WHEEL = "Alt+Shift+HorizWheel"
    CTRL_ALT_SHIFT_HORIZ_WHEEL = "Ctrl+Alt+Shift+HorizWheel"

    MULTI_ZOOM = "MultiZoom"
    CTRL_MULTI_ZOOM = "Ctrl+MultiZoom"
    ALT_MULTI_ZOOM = "Alt+MultiZoom"
    CTRL_ALT_SHIFT_MULTI_ZOOM = "Ctrl+Alt+Shift+MultiZoom"

    MULTI_ROTATE = "MultiRotate"
    CTRL_MULTI_ROTATE = "Ctrl+MultiRotate"

    MULTI_HORZ = "MultiHorz"
    MULTI_VERT = "MultiVert"

    MEDIA_KEY = "MediaKey"
    UNKNOWN = "Unknown"


_CODED_KINDS = frozenset({SpecialInputKind.MEDIA_KEY, SpecialInputKind.UNKNOWN})

_MAX_KEY_CODE = 0xFFFF

# The code written back out for each fixed kind.
_CANONICAL_CODES: dict[SpecialInputKind, int] = {
    SpecialInputKind.MOUSEWHEEL: 248,
    SpecialInputKind.CTRL_MOUSEWHEEL: 249,
    SpecialInputKind.ALT_MOUSEWHEEL: 250,
    SpecialInputKind.CTRL_ALT_MOUSEWHEEL: 251,
    SpecialInputKind.SHIFT_MOUSEWHEEL: 252,
    SpecialInputKind.CTRL_SHIFT_MOUSEWHEEL: 253,
    SpecialInputKind.ALT_SHIFT_MOUSEWHEEL: 254,
    SpecialInputKind.CTRL_ALT_SHIFT_MOUSEWHEEL: 255,
    SpecialInputKind.HORIZ_WHEEL: 216,
    SpecialInputKind.CTRL_HORIZ_WHEEL: 217,
    SpecialInputKind.ALT_HORIZ_WHEEL: 218,
    SpecialInputKind.CTRL_ALT_HORIZ_WHEEL: 219,
    SpecialInputKind.SHIFT_HORIZ_WHEEL: 220,
    SpecialInputKind.CTRL_SHIFT_HORIZ_WHEEL: 221,
    SpecialInputKind.ALT_SHIFT_HORIZ_WHEEL: 222,
    SpecialInputKind.CTRL_ALT_SHIFT_HORIZ_WHEEL: 223,
    SpecialInputKind.MULTI_ZOOM: 200,
    SpecialInputKind.CTRL_MULTI_ZOOM: 201,
    SpecialInputKind.ALT_MULTI_ZOOM: 202,
    SpecialInputKind.CTRL_ALT_SHIFT_MULTI_ZOOM: 207,
    SpecialInputKind.MULTI_ROTATE: 152,
    SpecialInputKind.CTRL_MULTI_ROTATE: 153,
    SpecialInputKind.MULTI_HORZ: 168,
    SpecialInputKind.MULTI_VERT: 184,
}

# Every code that maps to a fixed kind, including the older low aliases.
_KINDS_BY_CODE: dict[int, SpecialInputKind] = {
    code: kind for kind, code in _CANONICAL_CODES.items()
}
_KINDS_BY_CODE.update(
    {
        120: SpecialInputKind.MOUSEWHEEL,
        121: SpecialInputKind.CTRL_MOUSEWHEEL,
        122: SpecialInputKind.ALT_MOUSEWHEEL,
        123: SpecialInputKind.CTRL_ALT_MOUSEWHEEL,
        125: SpecialInputKind.CTRL_SHIFT_MOUSEWHEEL,
        88: SpecialInputKind.HORIZ_WHEEL,
        90: SpecialInputKind.ALT_HORIZ_WHEEL,
        72: SpecialInputKind.MULTI_ZOOM,
        73: SpecialInputKind.CTRL_MULTI_ZOOM,
        74: SpecialInputKind.ALT_MULTI_ZOOM,
        24: SpecialInputKind.MULTI_ROTATE,
        25: SpecialInputKind.CTRL_MULTI_ROTATE,
        40: SpecialInputKind.MULTI_HORZ,
        56: SpecialInputKind.MULTI_VERT,
    }
)


@dataclass(frozen=True)
class SpecialInput:
    """A special input; ``code`` is set only for media keys and unknown inputs."""

    kind: SpecialInputKind
    code: int | None = None

    def __post_init__(self) -> None:
        if self.kind in _CODED_KINDS:
            if self.code is None:
                raise ValueError(f"{self.kind.value} needs a key code")
            if not 0 <= self.code <= _MAX_KEY_CODE:
                raise ValueError(f"key code out of range: {self.code}")
        elif self.code is not None:
            raise ValueError(f"{self.kind.value} takes no key code")

    @classmethod
    def from_key_code(cls, key_code: int) -> SpecialInput:
        """Interpret a key code that appears with modifier code 255."""
        if not 0 <= key_code <= _MAX_KEY_CODE:
            raise ValueError(f"key code out of range: {key_code}")
        kind = _KINDS_BY_CODE.get(key_code)
        if kind is not None:
            return cls(kind)
        if (key_code >= 232 and (key_code - 232) % 256 == 0) or key_code >= 488:
            return cls(SpecialInputKind.MEDIA_KEY, key_code)
        return cls(SpecialInputKind.UNKNOWN, key_code)

    def to_key_code(self) -> int:
        """Return the key code written to keymap files for this input."""
        if self.code is not None:
            return self.code
        return _CANONICAL_CODES[self.kind]

    def __str__(self) -> str:
        if self.code is not None:
            return f"{self.kind.value}({self.code})"
        return self.kind.value