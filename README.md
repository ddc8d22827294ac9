# gridpad

A small terminal notepad. The text you type is kept in a grid of linked
character cells. Each line is a chain of cells between a start and an end
marker, and the lines are linked one above the other. The arrow keys move the
cursor through that grid. Letters and spaces are inserted at the cursor.
Backspace deletes the character at the cursor. Enter opens a new empty line
below the current one. Escape saves the text and quits.

The screen uses the standard `curses` module. A Python with `curses` is
needed to run the notepad, which in practice means a POSIX terminal. The grid
and storage modules work without it.

## Installing

```
pip install .
```

## Running

```
gridpad a
```

The argument is a name for the file. The first character of the name is
used, so `a` (or `abc`) gives `a.txt` in the current directory. If you leave
the argument out, you are asked to enter the name. The file is created if it
does not exist, and a line says whether it was created or opened.

Only the letters `A`–`Z`, `a`–`z` and the space are taken as text. When you
press Escape, every line of the grid is written to the file, each followed by
a newline, and `File saved successfully.` is printed.

## What it does not do

- The editor starts with an empty grid. It does not show what is already in
  the file. Saving with Escape replaces the file's contents with what was
  typed in the session.
- The "Search" and "Word Suggestion" areas on the screen are labels only.
  No search or word suggestion is carried out.
- Enter does not split a line at the cursor, and Backspace does not join
  lines.
- There is no undo, and no saving without quitting.

## Using it from Python

```python
from gridpad.grid import TextGrid
from gridpad.storage import TextFile, file_name_for

grid = TextGrid(100, 24)
for letter in "hello":
    grid.add_letter(letter)
grid.new_line()
grid.add_letter("x")

print(grid.lines())          # ['hello', 'x']

store = TextFile(file_name_for("n"))   # n.txt, created if missing
print(store.status)
store.save(grid)                       # writes "hello\nx\n"

again = TextGrid(100, 24)
store.load(again)
print(again.lines())         # ['hello', 'x', ''] - the last newline opens a row
```

`TextGrid` offers more than the example shows:

- `cells()` yields `(column, line, letter)` for every character.
- `move_cursor_left()`, `move_cursor_right()`, `move_cursor_up()` and
  `move_cursor_down()` move the cursor.
- `handle_backspace()` deletes the character at the cursor.
- `update_cols_and_rows()` renumbers every cell from zero.
- `cells_around_cursor(radius)` yields the cells near the cursor.

In `gridpad.app`:

- `Notepad(grid, text_file)` applies key presses given as `Key` values through
  `handle_key(key, char)`. It returns `True` when the text needs redrawing,
  and saves the file on `Key.ESCAPE`. This lets the editor be driven without a
  terminal.
- `boundary_segments(...)` yields the pieces of the screen frame.
- `echo_lines(lines)` echoes input lines until `exit`.

## Tests

```
pip install .[test]
pytest
```