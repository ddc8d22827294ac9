"""The interactive notepad: screen layout, key handling and the command."""

from __future__ import annotations

import argparse
import enum
import os
import sys
from typing import Iterable, Iterator, Optional

from gridpad.grid import TextGrid
from gridpad.storage import TextFile, file_name_for

CONSOLE_WIDTH = 125
CONSOLE_HEIGHT = 30
INPUT_WIDTH = int(CONSOLE_WIDTH * 0.8)
INPUT_HEIGHT = int(CONSOLE_HEIGHT * 0.8)
SUGGESTION_START_Y = INPUT_HEIGHT + 1
SEARCH_START_X = INPUT_WIDTH + 1


class Key(enum.Enum):
    """The keys the notepad reacts to."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ESCAPE = "escape"
    RETURN = "return"
    BACKSPACE = "backspace"
    CHARACTER = "character"


def _is_typeable(char: Optional[str]) -> bool:
    return char is not None and (
        ("A" <= char <= "Z") or ("a" <= char <= "z") or char == " "
    )


def boundary_segments(
    start_x: int, start_y: int, width: int, height: int, draw_upper: bool
) -> Iterator[tuple[int, int, str]]:
    """Yield (x, y, text) pieces that draw a box frame.

    The bottom edge is always a dashed line; the top edge is dashed only
    when ``draw_upper`` is true, otherwise it carries side bars like the
    rows in between.
    """
    for offset in range(height + 1):
        y = start_y + offset
        if (offset == 0 and draw_upper) or offset == height:
            yield start_x, y, "-" * width
        else:
            yield start_x, y, "|"
            yield start_x + width - 1, y, "|"


def echo_lines(lines: Iterable[str]) -> Iterator[str]:
    """Echo each entered line until the line ``exit`` is reached."""
    for line in lines:
        if line == "exit":
            break
        yield f"You entered: {line}"


class Notepad:
    """Applies key presses to a text grid and saves it on escape."""

    def __init__(self, grid: TextGrid, text_file: TextFile) -> None:
        self.grid = grid
        self.text_file = text_file
        self.x = 1
        self.y = 2
        self.saved = False
        self._running = True

    def running(self) -> bool:
        return self._running

    def handle_key(self, key: Key, char: Optional[str] = None) -> bool:
        """Apply one key press; return True when the text needs redrawing."""
        if key is Key.UP:
            self.y -= 1
            self.grid.move_cursor_up()
        elif key is Key.DOWN:
            self.y += 1
            self.grid.move_cursor_down()
        elif key is Key.RIGHT:
            self.x += 1
            self.grid.move_cursor_right()
        elif key is Key.LEFT:
            self.x -= 1
            self.grid.move_cursor_left()
        elif key is Key.ESCAPE:
            self.text_file.save(self.grid)
            self.saved = True
            self._running = False
        elif key is Key.RETURN:
            self.grid.new_line()
            self.y += 1
            self.x = 0
        elif key is Key.BACKSPACE:
            self.grid.handle_backspace()
            self.x -= 1
            return True
        elif key is Key.CHARACTER and _is_typeable(char):
            self.grid.add_letter(char)
            self.x += 1
            return True
        return False


def _put(screen, x: int, y: int, text: str) -> None:
    import curses

    try:
        screen.addstr(y, x, text)
    except curses.error:
        pass


def _draw(screen, notepad: Notepad) -> None:
    screen.erase()
    for x, y, text in boundary_segments(0, 0, INPUT_WIDTH, INPUT_HEIGHT, False):
        _put(screen, x, y, text)
    _put(screen, SEARCH_START_X, 0, "Search")
    _put(screen, 1, SUGGESTION_START_Y, "Word Suggestion")
    _put(screen, 1, 1, " Welcome to the Notepad.")
    for col, line, letter in notepad.grid.cells():
        _put(screen, col, line, letter)


def _place_cursor(screen, notepad: Notepad) -> None:
    import curses

    try:
        screen.move(notepad.grid.cursor_y, notepad.grid.cursor_x)
    except curses.error:
        pass
    screen.refresh()


def _translate(code: int) -> tuple[Optional[Key], Optional[str]]:
    import curses

    special = {
        curses.KEY_UP: Key.UP,
        curses.KEY_DOWN: Key.DOWN,
        curses.KEY_LEFT: Key.LEFT,
        curses.KEY_RIGHT: Key.RIGHT,
        curses.KEY_ENTER: Key.RETURN,
        curses.KEY_BACKSPACE: Key.BACKSPACE,
        27: Key.ESCAPE,
        10: Key.RETURN,
        13: Key.RETURN,
        8: Key.BACKSPACE,
        127: Key.BACKSPACE,
    }
    if code in special:
        return special[code], None
    if 0 <= code < 256:
        return Key.CHARACTER, chr(code)
    return None, None


def _run(screen, notepad: Notepad) -> None:
    screen.keypad(True)
    _draw(screen, notepad)
    _place_cursor(screen, notepad)
    while notepad.running():
        key, char = _translate(screen.getch())
        if key is None:
            continue
        if notepad.handle_key(key, char):
            _draw(screen, notepad)
        _place_cursor(screen, notepad)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the notepad on the file named by a single letter."""
    parser = argparse.ArgumentParser(prog="gridpad", description="A small grid notepad.")
    parser.add_argument("name", nargs="?", help="letter naming the file to edit")
    args = parser.parse_args(argv)

    name = args.name
    if name is None:
        print("Enter the name of the file.")
        try:
            name = input()
        except EOFError:
            return 1
    name = name.strip()
    if not name:
        parser.error("a file name is required")

    text_file = TextFile(file_name_for(name[0]))
    print(text_file.status)

    notepad = Notepad(TextGrid(INPUT_WIDTH, INPUT_HEIGHT), text_file)

    import curses

    os.environ.setdefault("ESCDELAY", "25")
    curses.wrapper(_run, notepad)
    if notepad.saved:
        print("File saved successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())