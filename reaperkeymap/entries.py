"""Entries of a keymap file: ``KEY``, ``SCR`` and ``ACT`` lines."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import asdict, dataclass, field
from enum import IntEnum, IntFlag
from typing import Any, Union

from reaperkeymap.keycodes import KeyCode
from reaperkeymap.modifiers import Modifiers
from reaperkeymap.sections import ReaperActionSection
from reaperkeymap.special_inputs import SpecialInput, SpecialInputKind


class ParseError(ValueError):
    """A keymap line could not be parsed."""


class MissingFieldError(ParseError):
    """A required field of an entry is absent."""

    def __init__(self, tag: str, field_name: str) -> None:
        self.tag = tag
        self.field = field_name
        super().__init__(f"{tag} entry missing field {field_name}")


class InvalidNumberError(ParseError):
    """A numeric field is not a valid unsigned number of its width."""

    def __init__(self, tag: str, field_name: str, err: str) -> None:
        self.tag = tag
        self.field = field_name
        self.err = err
        super().__init__(f"{tag} entry invalid number in {field_name}: {err}")


class InvalidModifierCodeError(ParseError):
    """The modifier code does not describe a known flag set."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"invalid modifier code {code}")


class InvalidKeyCodeError(ParseError):
    """The key code is not a known virtual key."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"invalid key code {code}")


class InvalidSectionCodeError(ParseError):
    """The section code is not a known section."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"invalid section code {code}")


class InvalidTerminationError(ParseError):
    """The script termination behaviour is not a known value."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"invalid termination behavior {code}")


class InvalidTagError(ParseError):
    """The line starts with a tag other than KEY, SCR or ACT."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"invalid entry tag: {tag}")


class TerminationBehavior(IntEnum):
    """What happens when a running script is started again."""

    PROMPT = 4
    TERMINATE_EXISTING = 260
    ALWAYS_NEW_INSTANCE = 516


class ActionFlags(IntFlag):
    """Flags controlling custom actions."""

    CONSOLIDATE_UNDO = 0b0000_0001
    SHOW_IN_MENUS = 0b0000_0010
    ACTIVE_IF_ALL = 0b0001_0000
    ACTIVE_IF_ANY = 0b0010_0000


_ACTION_FLAG_BITS = sum(int(flag) for flag in ActionFlags)
_MODIFIER_BITS = sum(int(flag) for flag in Modifiers)

_BEHAVIOR_WORDS = ("OVERRIDE", "DISABLED", "DEFAULT")
_MIDI_RELATIVE_MARKERS = (
    "(MIDI CC relative/mousewheel)",
    "(MIDI relative/mousewheel)",
)


@dataclass(frozen=True)
class Comment:
    """The structured trailing comment of a ``KEY`` line.

    Format: ``# Section : KeyCombination : [BehaviorFlag] : [ActionDescription]``
    """

    section: str
    key_combination: str
    behavior_flag: str | None = None
    action_description: str | None = None
    parsed_action_name: str | None = None
    is_midi_relative: bool = False

    @classmethod
    def from_line(cls, line: str) -> Comment | None:
        """Parse a comment starting with ``#``; None if it has no structure."""
        line = line.strip()
        if not line.startswith("#"):
            return None
        parts = [part.strip() for part in line[1:].strip().split(":")]
        if len(parts) < 2:
            return None

        section, key_combination = parts[0], parts[1]

        behavior_flag = None
        if len(parts) > 2 and parts[2]:
            if any(word in parts[2] for word in _BEHAVIOR_WORDS):
                behavior_flag = parts[2]

        action_description = None
        if behavior_flag is not None and len(parts) > 3:
            remaining = parts[3:]
            if not all(part == "" for part in remaining):
                action_description = ": ".join(remaining)
        elif behavior_flag is None and len(parts) > 2 and parts[2]:
            action_description = ": ".join(parts[2:])

        parsed_action_name = None
        is_midi_relative = False
        if action_description is not None:
            is_midi_relative = any(
                marker in action_description for marker in _MIDI_RELATIVE_MARKERS
            )
            paren = action_description.find("(")
            parsed_action_name = (
                action_description[:paren].strip()
                if paren >= 0
                else action_description
            )

        return cls(
            section=section,
            key_combination=key_combination,
            behavior_flag=behavior_flag,
            action_description=action_description,
            parsed_action_name=parsed_action_name,
            is_midi_relative=is_midi_relative,
        )

    def to_line(self) -> str:
        """Render the comment as a ``# ...`` line fragment."""
        parts = [self.section, self.key_combination]
        if self.behavior_flag is not None:
            parts.append(self.behavior_flag)
        if self.action_description is not None:
            parts.append(self.action_description)
        return "# " + " : ".join(parts)

    @classmethod
    def from_key_entry(cls, entry: KeyEntry) -> Comment:
        """Build the default comment describing a key entry."""
        behavior = "DISABLED DEFAULT" if entry.command_id == "0" else "OVERRIDE DEFAULT"
        return cls(
            section=entry.section.display_name(),
            key_combination=entry.generate_key_description(),
            behavior_flag=behavior,
        )


KeyInput = Union[KeyCode, SpecialInput]

_MODIFIER_NAMES = (
    (Modifiers.SUPER, "Cmd"),
    (Modifiers.ALT, "Opt"),
    (Modifiers.SHIFT, "Shift"),
    (Modifiers.CONTROL, "Control"),
)


@dataclass
class KeyEntry:
    """A ``KEY`` entry: modifiers, key input, command ID and section."""

    modifiers: Modifiers
    key_input: KeyInput
    command_id: str
    section: ReaperActionSection
    comment: Comment | None = None

    def key_code(self) -> KeyCode | None:
        """The regular key, or None when the input is a special input."""
        return self.key_input if isinstance(self.key_input, KeyCode) else None

    def generate_comment(self) -> Comment:
        """Build a default comment for this entry."""
        return Comment.from_key_entry(self)

    def generate_key_description(self) -> str:
        """Describe the key combination, e.g. ``Cmd+Shift+M``."""
        parts = [name for flag, name in _MODIFIER_NAMES if flag in self.modifiers]
        if isinstance(self.key_input, KeyCode):
            key_desc = self.key_input.display_name()
        else:
            key_desc = str(self.key_input)
        if key_desc:
            parts.append(key_desc)
        return "+".join(parts)

    def to_line(self) -> str:
        """Serialize to a keymap line, always with a trailing comment."""
        if isinstance(self.key_input, KeyCode):
            key_value = int(self.key_input)
        else:
            key_value = self.key_input.to_key_code()
        base = (
            f"KEY {self.modifiers.reaper_code()} {key_value} "
            f"{self.command_id} {int(self.section)}"
        )
        comment = self.comment if self.comment is not None else self.generate_comment()
        return f"{base} {comment.to_line()}"


def _escape_field(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _has_whitespace(text: str) -> bool:
    return any(ch.isspace() for ch in text)


@dataclass
class ScriptEntry:
    """An ``SCR`` entry: a script registered as an action."""

    termination_behavior: TerminationBehavior
    section: ReaperActionSection
    command_id: str
    description: str
    path: str

    def to_line(self) -> str:
        """Serialize to a keymap line."""
        cmd = _escape_field(self.command_id)
        if _has_whitespace(cmd):
            cmd = f'"{cmd}"'
        path = f'"{self.path}"' if _has_whitespace(self.path) else self.path
        return (
            f"SCR {int(self.termination_behavior)} {int(self.section)} {cmd} "
            f'"{_escape_field(self.description)}" {path}'
        )


@dataclass
class ActionEntry:
    """An ``ACT`` entry: a custom action made of other actions."""

    action_flags: ActionFlags
    section: ReaperActionSection
    command_id: str
    description: str
    action_ids: list[str] = field(default_factory=list)

    def to_line(self) -> str:
        """Serialize to a keymap line."""
        line = (
            f"ACT {int(self.action_flags)} {int(self.section)} "
            f'"{_escape_field(self.command_id)}" "{_escape_field(self.description)}"'
        )
        ids = " ".join(self.action_ids)
        return f"{line} {ids}" if ids else line


ReaperEntry = Union[KeyEntry, ScriptEntry, ActionEntry]

_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_number(text: str, bits: int, tag: str, field_name: str) -> int:
    if not text:
        err = "cannot parse integer from empty string"
    elif not _UNSIGNED.fullmatch(text):
        err = "invalid digit found in string"
    else:
        value = int(text)
        if value < (1 << bits):
            return value
        err = "number too large to fit in target type"
    raise InvalidNumberError(tag, field_name, err)


def _next(tokens: Iterator[str], tag: str, field_name: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise MissingFieldError(tag, field_name) from None


def _section(code: int) -> ReaperActionSection:
    try:
        return ReaperActionSection.from_code(code)
    except ValueError:
        raise InvalidSectionCodeError(code) from None


def _parse_key(tokens: Iterator[str], comment_part: str | None) -> KeyEntry:
    mods = _parse_number(_next(tokens, "KEY", "modifiers"), 8, "KEY", "modifiers")
    try:
        modifiers = Modifiers.from_reaper_code(mods)
    except ValueError:
        raise InvalidModifierCodeError(mods) from None
    code = _parse_number(_next(tokens, "KEY", "key_code"), 16, "KEY", "key_code")
    key_input: KeyInput
    if modifiers.is_special_input():
        key_input = SpecialInput.from_key_code(code)
    else:
        try:
            key_input = KeyCode.from_code(code)
        except ValueError:
            raise InvalidKeyCodeError(code) from None
    command_id = _next(tokens, "KEY", "command_id")
    sec = _parse_number(_next(tokens, "KEY", "section"), 32, "KEY", "section")
    section = _section(sec)
    comment = Comment.from_line(comment_part) if comment_part is not None else None
    return KeyEntry(modifiers, key_input, command_id, section, comment)


def _parse_script(tokens: Iterator[str], before: str) -> ScriptEntry:
    term = _parse_number(
        _next(tokens, "SCR", "termination"), 32, "SCR", "termination"
    )
    try:
        termination = TerminationBehavior(term)
    except ValueError:
        raise InvalidTerminationError(term) from None
    section = _section(
        _parse_number(_next(tokens, "SCR", "section"), 32, "SCR", "section")
    )

    if '"' not in before:
        raise MissingFieldError("SCR", "description")
    quoted = before.split('"')
    if len(quoted) < 3:
        raise MissingFieldError("SCR", "description")

    if len(quoted[0].split()) == 3:
        # SCR term section "command_id" "description" path
        if len(quoted) < 5:
            raise MissingFieldError("SCR", "description")
        command_id = quoted[1]
        description = quoted[3]
        path = quoted[5] if len(quoted) > 5 else quoted[4].strip()
    else:
        # SCR term section command_id "description" path
        command_id = _next(tokens, "SCR", "command_id")
        description = quoted[1]
        path = quoted[3] if len(quoted) > 3 else quoted[2].strip()

    return ScriptEntry(termination, section, command_id, description, path)


def _parse_action(tokens: Iterator[str], before: str) -> ActionEntry:
    flags = _parse_number(_next(tokens, "ACT", "flags"), 32, "ACT", "flags")
    action_flags = ActionFlags(flags & _ACTION_FLAG_BITS)
    section = _section(
        _parse_number(_next(tokens, "ACT", "section"), 32, "ACT", "section")
    )
    quoted = before.split('"')
    if len(quoted) < 4:
        raise MissingFieldError("ACT", "command_id/description")
    ids = quoted[4].split() if len(quoted) > 4 else []
    return ActionEntry(action_flags, section, quoted[1], quoted[3], ids)


def parse_entry(line: str) -> ReaperEntry:
    """Parse one keymap line into an entry; raise ParseError if malformed."""
    before, sep, rest = line.partition("#")
    before = before.strip()
    comment_part = f"#{rest}" if sep else None

    tokens = iter(before.split())
    tag = _next(tokens, "<line>", "tag")
    if tag == "KEY":
        return _parse_key(tokens, comment_part)
    if tag == "SCR":
        return _parse_script(tokens, before)
    if tag == "ACT":
        return _parse_action(tokens, before)
    raise InvalidTagError(tag)


def _special_to_data(special: SpecialInput) -> Any:
    if special.code is not None:
        return {special.kind.value: special.code}
    return special.kind.value


def _special_from_data(data: Any) -> SpecialInput:
    if isinstance(data, str):
        return SpecialInput(SpecialInputKind(data))
    if isinstance(data, dict) and len(data) == 1:
        ((name, code),) = data.items()
        if not isinstance(code, int):
            raise ValueError(f"special input code must be an integer: {code!r}")
        return SpecialInput(SpecialInputKind(name), code)
    raise ValueError(f"malformed special input: {data!r}")


def _comment_from_data(data: Any) -> Comment | None:
    if data is None:
        return None
    return Comment(
        section=data["section"],
        key_combination=data["key_combination"],
        behavior_flag=data.get("behavior_flag"),
        action_description=data.get("action_description"),
        parsed_action_name=data.get("parsed_action_name"),
        is_midi_relative=bool(data.get("is_midi_relative", False)),
    )


def _str_field(data: dict[str, Any], name: str) -> str:
    value = data[name]
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string: {value!r}")
    return value


def _flags(value: Any, cls: type, allowed: int) -> Any:
    if not isinstance(value, int) or value < 0 or value & ~allowed:
        raise ValueError(f"invalid {cls.__name__} value: {value!r}")
    return cls(value)


def entry_to_dict(entry: ReaperEntry) -> dict[str, Any]:
    """Convert an entry to plain data suitable for JSON."""
    if isinstance(entry, KeyEntry):
        if isinstance(entry.key_input, KeyCode):
            key_input: dict[str, Any] = {"Regular": entry.key_input.name}
        else:
            key_input = {"Special": _special_to_data(entry.key_input)}
        return {
            "Key": {
                "modifiers": int(entry.modifiers),
                "key_input": key_input,
                "command_id": entry.command_id,
                "section": entry.section.name,
                "comment": asdict(entry.comment) if entry.comment else None,
            }
        }
    if isinstance(entry, ScriptEntry):
        return {
            "Script": {
                "termination_behavior": entry.termination_behavior.name,
                "section": entry.section.name,
                "command_id": entry.command_id,
                "description": entry.description,
                "path": entry.path,
            }
        }
    if isinstance(entry, ActionEntry):
        return {
            "Action": {
                "action_flags": int(entry.action_flags),
                "section": entry.section.name,
                "command_id": entry.command_id,
                "description": entry.description,
                "action_ids": list(entry.action_ids),
            }
        }
    raise TypeError(f"not a keymap entry: {entry!r}")


def entry_from_dict(data: dict[str, Any]) -> ReaperEntry:
    """Rebuild an entry from the data produced by entry_to_dict."""
    if not isinstance(data, dict) or len(data) != 1:
        raise ValueError(f"malformed entry: {data!r}")
    ((kind, body),) = data.items()
    try:
        if kind == "Key":
            key_data = body["key_input"]
            if not isinstance(key_data, dict) or len(key_data) != 1:
                raise ValueError(f"malformed key input: {key_data!r}")
            ((input_kind, value),) = key_data.items()
            key_input: KeyInput
            if input_kind == "Regular":
                key_input = KeyCode[value]
            elif input_kind == "Special":
                key_input = _special_from_data(value)
            else:
                raise ValueError(f"unknown key input type: {input_kind!r}")
            return KeyEntry(
                modifiers=_flags(body["modifiers"], Modifiers, _MODIFIER_BITS),
                key_input=key_input,
                command_id=_str_field(body, "command_id"),
                section=ReaperActionSection[body["section"]],
                comment=_comment_from_data(body.get("comment")),
            )
        if kind == "Script":
            return ScriptEntry(
                termination_behavior=TerminationBehavior[body["termination_behavior"]],
                section=ReaperActionSection[body["section"]],
                command_id=_str_field(body, "command_id"),
                description=_str_field(body, "description"),
                path=_str_field(body, "path"),
            )
        if kind == "Action":
            ids = body["action_ids"]
            if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
                raise ValueError(f"action_ids must be a list of strings: {ids!r}")
            return ActionEntry(
                action_flags=_flags(body["action_flags"], ActionFlags, _ACTION_FLAG_BITS),
                section=ReaperActionSection[body["section"]],
                command_id=_str_field(body, "command_id"),
                description=_str_field(body, "description"),
                action_ids=list(ids),
            )
    except (KeyError, TypeError, AttributeError) as exc:
        raise ValueError(f"malformed {kind} entry: {exc}") from exc
    raise ValueError(f"unknown entry kind: {kind!r}")