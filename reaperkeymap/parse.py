"""Lightweight parsing of commented ``KEY`` lines in keymap files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

_MAX_U32 = 0xFFFF_FFFF

_KEY_LINE = re.compile(
    r"""
    KEY \s+
    (?P<device>[0-9]+) \s+
    (?P<key_code>[0-9]+) \s+
    (?P<command>[0-9]+) \s+
    (?P<flags>[0-9]+) \s*
    \# \s*
    (?P<context>[^:]+?) \s* : \s*
    (?P<shortcut>[^:]*?) \s* (?: : \s*
    (?P<override>OVERRIDE\ DEFAULT))?
    \s* : \s*
    (?P<desc>.+)
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class KeyBinding:
    """A ``KEY`` line together with the fields of its trailing comment."""

    device: int
    key_code: int
    command_id: int
    flags: int
    context: str
    shortcut: str
    override_default: bool
    description: str

    def to_line(self) -> str:
        """Serialize back into a single keymap line."""
        if self.override_default:
            comment = (
                f"{self.context} : {self.shortcut} : OVERRIDE DEFAULT : "
                f"{self.description}"
            )
        else:
            comment = f"{self.context} : {self.shortcut} : {self.description}"
        return (
            f"KEY {self.device} {self.key_code} {self.command_id} "
            f"{self.flags} # {comment}"
        )


def _u32(text: str) -> int | None:
    value = int(text)
    return value if value <= _MAX_U32 else None


def parse_line(line: str) -> KeyBinding | None:
    """Parse a commented ``KEY`` line; return None if it does not match."""
    match = _KEY_LINE.fullmatch(line)
    if match is None:
        return None
    numbers = [
        _u32(match[name]) for name in ("device", "key_code", "command", "flags")
    ]
    if any(n is None for n in numbers):
        return None
    device, key_code, command_id, flags = numbers
    return KeyBinding(
        device=device,
        key_code=key_code,
        command_id=command_id,
        flags=flags,
        context=match["context"].strip(),
        shortcut=match["shortcut"].strip(),
        override_default=match["override"] is not None,
        description=match["desc"].strip(),
    )


def _lines(content: str) -> Iterable[str]:
    for line in content.split("\n"):
        yield line.removesuffix("\r")


def parse_keymap_file(path: str | PathLike[str]) -> list[KeyBinding]:
    """Read a keymap file and parse every matching line."""
    with open(path, encoding="utf-8", newline="") as handle:
        content = handle.read()
    return [b for b in map(parse_line, _lines(content)) if b is not None]


def write_keymap_file(
    path: str | PathLike[str], bindings: Iterable[KeyBinding]
) -> None:
    """Write bindings to a file, one line each."""
    with open(path, "w", encoding="utf-8", newline="") as handle:
        for binding in bindings:
            handle.write(binding.to_line() + "\n")


def round_trip_compare(
    path: str | PathLike[str], output: str | PathLike[str]
) -> bool:
    """Parse ``path``, write it to ``output`` and compare the raw bytes."""
    write_keymap_file(output, parse_keymap_file(path))
    return Path(path).read_bytes() == Path(output).read_bytes()