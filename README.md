# exquisite_verse

Play "exquisite corpse" with poems. Each player adds one line and then passes
the poem on. In the semi-obfuscated form every line except the newest is
hidden as base64, so the next player sees only the line just before theirs.

## Install

```
pip install .
```

## Command line

```
exquisite-verse [--mode {clear,full,semi}]
```

This starts an interactive session that reads standard input line by line.
`--mode` sets the starting display mode (default `semi`).

Any line that does not start with `:` is added to the poem (empty lines are
ignored). Lines starting with `:` are commands:

| Command                  | Effect                                                        |
|--------------------------|---------------------------------------------------------------|
| `:show`                  | print the poem in the current mode                            |
| `:mode clear\|semi\|full`| switch between cleartext, semi- and fully-obfuscated          |
| `:import`                | print the current poem, then collect pasted lines             |
| `:done`                  | (while importing) read the pasted lines in the current mode   |
| `:cancel`                | (while importing) leave import mode without changes           |
| `:clear`                 | empty the poem                                                |
| `:help`                  | list the commands                                             |
| `:quit`                  | end the session                                               |

While importing, every line is taken as part of the pasted poem until `:done`
or `:cancel`. On `:done` the poem is replaced and printed. If the pasted text
cannot be decoded, an `Error: ...` line is printed and the session stays in
import mode. If nothing was pasted, the poem is left as it was.

## Library use

```python
from exquisite_verse.poem import Poem, DeobfuscationError

poem = Poem("Roses are red\nViolets are blue")
poem.add_line("Sugar is sweet")

print(poem.as_cleartext())
print(poem.as_semi_obfuscated())   # all lines base64 except the last
print(poem.as_fully_obfuscated())  # every line base64
print(poem.line_as_base64(0))      # one line, base64

shared = poem.as_semi_obfuscated()
same = Poem.from_semi_obfuscated(shared)
assert same == poem
assert same.lines == ("Roses are red", "Violets are blue", "Sugar is sweet")
```

When text is parsed, blank lines (empty or only whitespace) are dropped.
`Poem.from_semi_obfuscated` decodes every line but the last, which is kept as
it is. `Poem.from_fully_obfuscated` decodes every line. Decoding raises
`DeobfuscationError`, a subclass of `ValueError`, if a line is not valid
base64 or does not decode to UTF-8 text. `line_as_base64` raises `IndexError`
for an index outside the poem. A `Poem` supports `len()`, iteration over its
lines and comparison with `==`.

`exquisite_verse.app.ExquisiteVerse` holds the state of a session: the poem,
the `display_mode` (one of `DisplayMode.CLEARTEXT`, `SEMI_OBFUSCATED`,
`FULLY_OBFUSCATED`), and the import buffer. Its methods are `rendered()`,
`add_line()`, `clear_poem()`, `toggle_import()`, `try_import_poem()` and
`confirm_import()`. The last two raise `ImportError_` when the import text
cannot be read. `mark_copied()` returns the rendered text and starts a
one-second feedback timer. `tick(dt)` counts that timer down, and
`show_copied` tells whether it is still running.

## What this package does not do

There is no graphical window and no web version. The session runs only as
text on standard input and output. Nothing is put on the system clipboard:
`mark_copied()` only hands back the text and sets the feedback timer.

## Tests

```
pip install ".[test]"
pytest
```