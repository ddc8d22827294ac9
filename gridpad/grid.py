"""A two-dimensional linked grid of characters with a text cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

NUL = "\0"

DEFAULT_WIDTH = int(125 * 0.8)
DEFAULT_HEIGHT = int(30 * 0.8)

_START_COL = 1
_START_LINE = 2


@dataclass(eq=False)
class CharacterNode:
    """One cell of the grid, linked to its four neighbours.

    Nodes holding ``NUL`` are the dummies that open and close every row.
    """

    letter: str = NUL
    col: int = _START_COL
    line: int = _START_LINE
    left: Optional["CharacterNode"] = field(default=None, repr=False)
    right: Optional["CharacterNode"] = field(default=None, repr=False)
    up: Optional["CharacterNode"] = field(default=None, repr=False)
    down: Optional["CharacterNode"] = field(default=None, repr=False)

    @property
    def is_dummy(self) -> bool:
        return self.letter == NUL

    def rightwards(self) -> Iterator["CharacterNode"]:
        """Yield this node and every node to its right."""
        node: Optional[CharacterNode] = self
        while node is not None:
            yield node
            node = node.right

    def downwards(self) -> Iterator["CharacterNode"]:
        """Yield this node and every node below it."""
        node: Optional[CharacterNode] = self
        while node is not None:
            yield node
            node = node.down


def _new_row() -> tuple[CharacterNode, CharacterNode]:
    start, end = CharacterNode(), CharacterNode()
    start.right = end
    end.left = start
    return start, end


class TextGrid:
    """Text held as rows of linked character nodes, edited at a cursor."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.cursor_x = _START_COL
        self.cursor_y = _START_LINE
        start, _ = _new_row()
        self.head: Optional[CharacterNode] = start
        self.current_line: Optional[CharacterNode] = start
        self.current_col: Optional[CharacterNode] = start
        self.cursor_update(self.cursor_x, self.cursor_y)

    def is_empty(self) -> bool:
        return self.head is None

    def cursor_update(self, x: int, y: int) -> None:
        """Move the cursor, ignoring a coordinate that lies outside the area."""
        if 0 < x <= self.width:
            self.cursor_x = x
        if 0 < y <= self.height:
            self.cursor_y = y

    def add_letter(self, letter: str) -> None:
        """Insert a letter after the current node, wrapping at the right edge."""
        current = self.current_col
        if current.right is not None and current.right.col == self.width - 1:
            self.new_line()
            current = self.current_col

        node = CharacterNode(letter, self.cursor_x - 1, self.cursor_y)
        if current.right is not None:
            following = current.right
            current.right = node
            node.left = current
            node.right = following
            following.left = node
            for shifted in node.rightwards():
                shifted.col += 1
        self.current_col = node

        self.cursor_x += 1
        self.cursor_update(self.cursor_x, self.cursor_y)

    def new_line(self) -> None:
        """Open a new empty row below the current one and move to it."""
        start, _ = _new_row()
        if self.current_line is not None:
            self.current_line.down = start
            start.up = self.current_line
        self.current_line = start
        self.current_col = start
        self.cursor_x = 1
        self.cursor_y += 1

    def handle_backspace(self) -> Optional[tuple[int, int]]:
        """Delete the node at the cursor.

        Returns the (column, line) of the erased cell, or None when there is
        nothing to the left to delete.
        """
        current = self.current_col
        if current is None or current.left is None:
            return None
        erased = (current.col, current.line)
        self.delete_node()
        return erased

    def delete_node(self) -> None:
        """Unlink the current node and step to its left (or right) neighbour."""
        current = self.current_col
        if current is None:
            return
        if current.right is not None:
            for shifted in current.right.rightwards():
                shifted.col -= 1

        if current.left is not None:
            current.left.right = current.right
        if current.right is not None:
            current.right.left = current.left
        if current.up is not None:
            current.up.down = current.down
        if current.down is not None:
            current.down.up = current.up

        if current is self.head:
            self.head = current.right if current.right is not None else current.down

        self.current_col = current.left if current.left is not None else current.right
        self.cursor_x -= 1
        self.cursor_update(self.cursor_x, self.cursor_y)

    def _rows(self) -> Iterator[CharacterNode]:
        if self.head is not None:
            yield from self.head.downwards()

    def cells(self) -> Iterator[tuple[int, int, str]]:
        """Yield (column, line, letter) for every non-dummy node, row by row."""
        for row in self._rows():
            for node in row.rightwards():
                if not node.is_dummy:
                    yield node.col, node.line, node.letter

    def lines(self) -> list[str]:
        """Return the text of every row, dummies left out."""
        return [
            "".join(node.letter for node in row.rightwards() if not node.is_dummy)
            for row in self._rows()
        ]

    def move_cursor_left(self) -> None:
        if self.cursor_x > 1 and self.current_col.left is not None:
            self.current_col = self.current_col.left
            self.cursor_update(self.cursor_x - 1, self.cursor_y)

    def move_cursor_right(self) -> None:
        if self.cursor_x < self.width and self.current_col.right is not None:
            self.current_col = self.current_col.right
            self.cursor_update(self.cursor_x + 1, self.cursor_y)

    def move_cursor_up(self) -> None:
        if self.cursor_y > 1 and self.current_col.up is not None:
            self.current_col = self.current_col.up
            self.cursor_update(self.cursor_x, self.cursor_y - 1)

    def move_cursor_down(self) -> None:
        if self.cursor_y < self.height and self.current_col.down is not None:
            self.current_col = self.current_col.down
            self.cursor_update(self.cursor_x, self.cursor_y + 1)

    def update_cols_and_rows(self) -> None:
        """Renumber every node by its position, counting from zero."""
        for line_no, row in enumerate(self._rows()):
            for col_no, node in enumerate(row.rightwards()):
                node.line = line_no
                node.col = col_no

    def cells_around_cursor(self, radius: int = 1) -> Iterator[tuple[int, int, str]]:
        """Yield (screen column, line, letter) for nodes near the cursor."""
        start_x = max(self.cursor_x - radius, 1)
        end_x = min(self.cursor_x + radius, self.width)
        start_y = max(self.cursor_y - radius, 1)
        end_y = min(self.cursor_y + radius, self.height)

        row = self.head
        while row is not None and row.line < start_y:
            row = row.down

        while row is not None and row.line <= end_y:
            node: Optional[CharacterNode] = row
            while node is not None and node.col < start_x:
                node = node.right
            while node is not None and node.col <= end_x:
                yield node.col + 1, node.line, node.letter
                node = node.right
            row = row.down