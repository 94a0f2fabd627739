"""Application state for writing a shared poem, and a line-oriented front end."""

from __future__ import annotations

import argparse
import sys
from enum import Enum

from exquisite_verse.poem import DeobfuscationError, Poem

COPY_FEEDBACK_SECONDS = 1.0


class DisplayMode(Enum):
    """How the poem is shown and how imported text is read."""

    CLEARTEXT = "Cleartext"
    SEMI_OBFUSCATED = "Semi-Obfuscated"
    FULLY_OBFUSCATED = "Fully-Obfuscated"


class ImportError_(Exception):
    """Raised when the import text cannot be read in the selected mode."""


class ExquisiteVerse:
    """State of the poem editor: the poem, its display mode and the import buffer."""

    def __init__(self) -> None:
        self.poem = Poem()
        self.display_mode = DisplayMode.SEMI_OBFUSCATED
        self.import_mode = False
        self.import_text = ""
        self.copy_feedback_timer: float | None = None

    def rendered(self) -> str:
        """The poem as text in the current display mode."""
        if self.display_mode is DisplayMode.CLEARTEXT:
            return self.poem.as_cleartext()
        if self.display_mode is DisplayMode.SEMI_OBFUSCATED:
            return self.poem.as_semi_obfuscated()
        return self.poem.as_fully_obfuscated()

    def toggle_import(self) -> None:
        """Enter import mode with the current poem prefilled, or cancel it."""
        if self.import_mode:
            self.import_mode = False
            self.import_text = ""
        else:
            self.import_mode = True
            self.import_text = self.rendered()

    def try_import_poem(self) -> None:
        """Replace the poem with the import text; empty text changes nothing."""
        if not self.import_text:
            return
        if self.display_mode is DisplayMode.CLEARTEXT:
            self.poem = Poem(self.import_text)
            return
        try:
            if self.display_mode is DisplayMode.SEMI_OBFUSCATED:
                self.poem = Poem.from_semi_obfuscated(self.import_text)
            else:
                self.poem = Poem.from_fully_obfuscated(self.import_text)
        except DeobfuscationError as exc:
            kind = (
                "semi-obfuscated"
                if self.display_mode is DisplayMode.SEMI_OBFUSCATED
                else "fully-obfuscated"
            )
            raise ImportError_(f"Failed to import {kind} poem: {exc}") from exc

    def confirm_import(self) -> None:
        """Import and leave import mode; on failure stay in import mode and raise."""
        self.try_import_poem()
        self.import_mode = False
        self.import_text = ""

    def add_line(self, line: str) -> bool:
        """Append a non-empty line; report whether it was added."""
        if not line:
            return False
        self.poem.add_line(line)
        return True

    def clear_poem(self) -> None:
        self.poem = Poem()

    def tick(self, dt: float) -> None:
        """Let time pass for the copy feedback."""
        if self.copy_feedback_timer is None:
            return
        self.copy_feedback_timer -= dt
        if self.copy_feedback_timer <= 0.0:
            self.copy_feedback_timer = None

    def mark_copied(self) -> str:
        """Start the copy feedback and return the text to be copied."""
        self.copy_feedback_timer = COPY_FEEDBACK_SECONDS
        return self.rendered()

    @property
    def show_copied(self) -> bool:
        return self.copy_feedback_timer is not None


_MODE_NAMES = {
    "clear": DisplayMode.CLEARTEXT,
    "semi": DisplayMode.SEMI_OBFUSCATED,
    "full": DisplayMode.FULLY_OBFUSCATED,
}

_HELP = """\
Type a line to add it to the poem. Commands:
  :show               print the poem in the current mode
  :mode clear|semi|full
  :import             paste a poem, then :done to import or :cancel
  :clear              clear the poem
  :help               show this help
  :quit               leave"""


def _handle_import_line(app: ExquisiteVerse, line: str, out) -> None:
    if line == ":done":
        try:
            app.confirm_import()
        except ImportError_ as exc:
            print(f"Error: {exc}", file=out)
        else:
            print(app.rendered(), file=out)
    elif line == ":cancel":
        app.toggle_import()
    else:
        app.import_text += line + "\n"


def _handle_command(app: ExquisiteVerse, line: str, out) -> bool:
    """Run one command; return False when the session should end."""
    command, _, argument = line.partition(" ")
    argument = argument.strip()
    if command == ":quit":
        return False
    if command == ":show":
        print(app.rendered(), file=out)
    elif command == ":mode":
        mode = _MODE_NAMES.get(argument)
        if mode is None:
            print(f"Error: unknown mode {argument!r}", file=out)
        else:
            app.display_mode = mode
    elif command == ":import":
        app.toggle_import()
        current = app.import_text
        app.import_text = ""
        if current:
            print(current, file=out)
    elif command == ":clear":
        app.clear_poem()
    elif command == ":help":
        print(_HELP, file=out)
    else:
        print(f"Error: unknown command {command!r}", file=out)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="exquisite-verse",
        description="Write a poem together, one line at a time.",
    )
    parser.add_argument("--mode", choices=sorted(_MODE_NAMES), default="semi")
    args = parser.parse_args(argv)

    app = ExquisiteVerse()
    app.display_mode = _MODE_NAMES[args.mode]
    out = sys.stdout
    for raw in sys.stdin:
        line = raw.rstrip("\r\n")
        if app.import_mode:
            _handle_import_line(app, line, out)
        elif line.startswith(":"):
            if not _handle_command(app, line, out):
                break
        else:
            app.add_line(line)
    return 0