"""Saving a text grid to a plain text file and loading it back."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gridpad.grid import TextGrid

PathLike = Union[str, Path]


def file_name_for(letter: str) -> str:
    """Return the name of the text file that belongs to a one-letter name."""
    if len(letter) != 1:
        raise ValueError(f"expected a single character, got {letter!r}")
    return f"{letter}.txt"


class TextFile:
    """A text file on disk that is created when it does not yet exist."""

    def __init__(self, path: PathLike) -> None:
        self.path = Path(path)
        self.created = not self.path.exists()
        # Opening for append creates the file and leaves existing text alone.
        with self.path.open("a", encoding="utf-8"):
            pass

    @property
    def status(self) -> str:
        """A one-line description of how the file was opened."""
        verb = "created" if self.created else "opened"
        return f"File '{self.path}' {verb} successfully."

    def save(self, grid: TextGrid) -> None:
        """Write every row of the grid, each followed by a newline."""
        text = "".join(f"{line}\n" for line in grid.lines())
        self.path.write_text(text, encoding="utf-8", newline="\n")

    def load(self, grid: TextGrid) -> None:
        """Feed the file's characters into the grid, opening a row at each newline."""
        with self.path.open("r", encoding="utf-8", newline="") as handle:
            for char in handle.read():
                if char == "\n":
                    grid.new_line()
                else:
                    grid.add_letter(char)