"""Read, edit and write REAPER keymap files and convert them to JSON."""

__version__ = "0.1.0"