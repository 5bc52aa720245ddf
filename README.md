# reaperkeymap

A small library for reading, inspecting and writing REAPER keymap files
(`.reaperkeymap`). It understands the three kinds of entries such files hold:

- `KEY` – a shortcut: modifiers, a key (or a special input such as the
  mousewheel), a command ID and a section, with an optional `#` comment
- `SCR` – a script registration: termination behaviour, section, command ID,
  description and path
- `ACT` – a custom action: flags, section, command ID, description and the
  action IDs it runs

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Loading and querying a keymap

```python
from reaperkeymap.action_list import ReaperActionList, ReaperActionInput, lookup_command_id
from reaperkeymap.keycodes import KeyCode
from reaperkeymap.modifiers import Modifiers

keymap = ReaperActionList.load_from_file("my.reaperkeymap")
print(len(keymap), "entries,", len(keymap.keys()), "shortcuts")

shortcut = ReaperActionInput(key=KeyCode.A, modifiers=Modifiers.CONTROL)
print(lookup_command_id(keymap, shortcut))   # e.g. "40001", or None
```

Blank lines, comment-only lines and lines that cannot be parsed are skipped
while loading; `ReaperActionList.from_lines` does the same for any iterable of
strings. A `ReaperActionList` can be iterated over and holds its entries in
`entries`. `save_to_file` writes every entry back out, one per line; `KEY`
entries without a comment get one generated, such as
`# Main : Cmd+Shift+M : OVERRIDE DEFAULT` (or `DISABLED DEFAULT` when the
command ID is `0`).

`lookup_command_id` only matches regular keys; entries bound to special
inputs are never returned by it.

## Working with single lines

```python
from reaperkeymap.entries import parse_entry, ParseError

entry = parse_entry('ACT 0 0 "_Custom_Action" "My Custom Action" 40044 40045')
print(entry.command_id, entry.action_ids)     # _Custom_Action ['40044', '40045']
print(entry.to_line())

try:
    parse_entry("KEY abc 65 40044 0")
except ParseError as exc:
    print(exc)   # KEY entry invalid number in modifiers: invalid digit found in string
```

`parse_entry` returns a `KeyEntry`, `ScriptEntry` or `ActionEntry`. Every
failure is a subclass of `ParseError` (itself a `ValueError`):
`MissingFieldError`, `InvalidNumberError`, `InvalidModifierCodeError`,
`InvalidKeyCodeError`, `InvalidSectionCodeError`, `InvalidTerminationError`
and `InvalidTagError`.

`Comment.from_line` splits a `#` comment into section, key combination,
behaviour flag and action description, takes the action name before any
parenthesis, and marks actions that take MIDI relative/mousewheel input
(`is_midi_relative`). `Comment.to_line` renders it back.

## JSON

A whole keymap can be turned into JSON and back:

```python
text = keymap.to_json()
again = ReaperActionList.from_json(text)
assert again == keymap
```

Single entries convert with `entry_to_dict` and `entry_from_dict` from
`reaperkeymap.entries`.

## Building blocks

- `reaperkeymap.modifiers.Modifiers` – modifier flags and the REAPER
  modifier code (`1 +` the flag bits, or `255` for special inputs)
- `reaperkeymap.keycodes.KeyCode` – virtual-key codes with display names
- `reaperkeymap.sections.ReaperActionSection` – keymap sections such as
  `Main` or `MIDI Editor`
- `reaperkeymap.special_inputs.SpecialInput` and `SpecialInputKind` –
  mousewheel, multitouch and media-key inputs used with modifier code 255
- `reaperkeymap.entries.TerminationBehavior` and `ActionFlags` – the
  numeric fields of `SCR` and `ACT` entries
- `reaperkeymap.parse` – a simpler, regex-based reader and writer for
  commented `KEY` lines (`KeyBinding`, `parse_line`, `parse_keymap_file`,
  `write_keymap_file`, and `round_trip_compare(path, output)`, which rewrites
  `path` to `output` and reports whether the bytes are identical)

## What it does not do

This is a library only: it has no command-line tool. It does not find the
keymap that REAPER is currently using or create one in REAPER's resource
folder; you pass it the path of the file to read or write.