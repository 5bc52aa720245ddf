"""A whole keymap: loading, saving, JSON conversion and key lookup."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

from reaperkeymap.entries import (
    KeyEntry,
    ParseError,
    ReaperEntry,
    entry_from_dict,
    entry_to_dict,
    parse_entry,
)
from reaperkeymap.keycodes import KeyCode
from reaperkeymap.modifiers import Modifiers
from reaperkeymap.sections import ReaperActionSection


@dataclass(frozen=True)
class ReaperActionInput:
    """A regular key pressed together with a set of modifiers."""

    key: KeyCode
    modifiers: Modifiers


def _read_lines(path: str | PathLike[str]) -> Iterator[str]:
    with open(path, encoding="utf-8", newline="") as handle:
        for line in handle:
            yield line.removesuffix("\n").removesuffix("\r")


@dataclass
class ReaperActionList:
    """An ordered collection of keymap entries."""

    entries: list[ReaperEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[ReaperEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> ReaperActionList:
        """Parse lines, skipping blank, comment-only and malformed ones."""
        entries = []
        for line in lines:
            try:
                entries.append(parse_entry(line))
            except ParseError:
                continue
        return cls(entries)

    @classmethod
    def load_from_file(cls, path: str | PathLike[str]) -> ReaperActionList:
        """Load all entries from a keymap file, skipping malformed lines."""
        return cls.from_lines(_read_lines(path))

    def save_to_file(self, path: str | PathLike[str]) -> None:
        """Write every entry to a keymap file, one line each."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            for entry in self.entries:
                handle.write(entry.to_line() + "\n")

    def keys(self) -> list[KeyEntry]:
        """Return the ``KEY`` entries in file order."""
        return [entry for entry in self.entries if isinstance(entry, KeyEntry)]

    def to_json(self) -> str:
        """Serialize the entries as an indented JSON array."""
        return json.dumps(
            [entry_to_dict(entry) for entry in self.entries],
            indent=2,
            ensure_ascii=False,
        )

    @classmethod
    def from_json(cls, text: str) -> ReaperActionList:
        """Rebuild a list from the JSON produced by to_json."""
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError("keymap JSON must be an array of entries")
        return cls([entry_from_dict(item) for item in data])


def lookup_command_id(
    action_list: ReaperActionList, action_input: ReaperActionInput
) -> str | None:
    """Return the command bound to a regular key combination, if any."""
    return next(
        (
            entry.command_id
            for entry in action_list.keys()
            if entry.modifiers == action_input.modifiers
            and isinstance(entry.key_input, KeyCode)
            and entry.key_input == action_input.key
        ),
        None,
    )


def make_test_action_list() -> ReaperActionList:
    """A small list with bindings for A, Control+A and Control+B."""
    return ReaperActionList(
        [
            KeyEntry(
                modifiers=Modifiers(0),
                key_input=KeyCode.A,
                command_id="40044",
                section=ReaperActionSection.MAIN,
            ),
            KeyEntry(
                modifiers=Modifiers.CONTROL,
                key_input=KeyCode.A,
                command_id="shifted command id",
                section=ReaperActionSection.MAIN,
            ),
            KeyEntry(
                modifiers=Modifiers.CONTROL,
                key_input=KeyCode.B,
                command_id="SWS_ACTION",
                section=ReaperActionSection.MAIN,
            ),
        ]
    )