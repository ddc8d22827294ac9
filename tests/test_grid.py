import pytest

from gridpad.grid import CharacterNode, TextGrid


def typed(text, **kwargs):
    grid = TextGrid(**kwargs)
    for ch in text:
        if ch == "\n":
            grid.new_line()
        else:
            grid.add_letter(ch)
    return grid


def test_default_dimensions_follow_console_size():
    grid = TextGrid()
    assert (grid.width, grid.height) == (int(125 * 0.8), int(30 * 0.8))


def test_fresh_grid_has_one_empty_row():
    grid = TextGrid()
    assert not grid.is_empty()
    assert grid.lines() == [""]
    assert list(grid.cells()) == []


def test_fresh_node_is_dummy():
    node = CharacterNode()
    assert node.is_dummy
    assert CharacterNode("x").is_dummy is False


def test_add_letters_builds_a_row():
    grid = typed("abc")
    assert grid.lines() == ["abc"]
    letters = [letter for _, _, letter in grid.cells()]
    assert letters == list("abc")


def test_add_letter_advances_cursor():
    grid = TextGrid()
    start = grid.cursor_x
    for ch in "hello":
        grid.add_letter(ch)
    assert grid.cursor_x == start + len("hello")


def test_cell_columns_are_consecutive_and_on_cursor_line():
    grid = TextGrid()
    line = grid.cursor_y
    for ch in "word":
        grid.add_letter(ch)
    cols = [col for col, _, _ in grid.cells()]
    assert cols == sorted(cols)
    assert all(b - a == 1 for a, b in zip(cols, cols[1:]))
    assert {ln for _, ln, _ in grid.cells()} == {line}


def test_new_line_splits_rows_and_resets_cursor():
    grid = typed("ab")
    y = grid.cursor_y
    grid.new_line()
    assert grid.cursor_x == 1
    assert grid.cursor_y == y + 1
    for ch in "cd":
        grid.add_letter(ch)
    assert grid.lines() == ["ab", "cd"]


def test_backspace_removes_last_letter():
    grid = typed("abc")
    x = grid.cursor_x
    last = list(grid.cells())[-1]
    erased = grid.handle_backspace()
    assert erased == (last[0], last[1])
    assert grid.lines() == ["ab"]
    assert grid.cursor_x == x - 1


def test_backspace_on_empty_row_does_nothing():
    grid = TextGrid()
    x, y = grid.cursor_x, grid.cursor_y
    assert grid.handle_backspace() is None
    assert grid.lines() == [""]
    assert (grid.cursor_x, grid.cursor_y) == (x, y)


def test_backspace_then_retype_round_trip():
    grid = typed("abc")
    before = list(grid.cells())
    grid.handle_backspace()
    grid.add_letter("c")
    assert list(grid.cells()) == before


def test_insert_in_middle_after_move_left():
    grid = typed("ac")
    grid.move_cursor_left()
    grid.add_letter("b")
    assert grid.lines() == ["abc"]
    cols = [col for col, _, _ in grid.cells()]
    assert len(set(cols)) == len(cols)
    assert cols == sorted(cols)


def test_move_left_stops_at_row_start():
    grid = typed("a")
    grid.move_cursor_left()
    x = grid.cursor_x
    node = grid.current_col
    grid.move_cursor_left()
    assert grid.cursor_x == x
    assert grid.current_col is node
    assert node.is_dummy


def test_move_right_stops_at_end_dummy():
    grid = typed("ab")
    x = grid.cursor_x
    grid.move_cursor_right()
    assert grid.cursor_x == x + 1
    assert grid.current_col.is_dummy
    grid.move_cursor_right()
    assert grid.cursor_x == x + 1


def test_move_up_and_down_between_row_starts():
    grid = typed("ab\n")
    y = grid.cursor_y
    grid.move_cursor_up()
    assert grid.cursor_y == y - 1
    assert grid.current_col is grid.head
    grid.move_cursor_down()
    assert grid.cursor_y == y
    assert grid.current_col is grid.current_line


def test_move_up_without_row_above_is_ignored():
    grid = TextGrid()
    y = grid.cursor_y
    grid.move_cursor_up()
    assert grid.cursor_y == y
    assert grid.current_col is grid.head


def test_row_wraps_at_right_edge():
    width = 5
    grid = TextGrid(width=width, height=10)
    text = "abcdefg"
    for ch in text:
        grid.add_letter(ch)
    rows = grid.lines()
    assert len(rows) > 1
    assert "".join(rows) == text
    assert all(len(row) < width for row in rows)


@pytest.mark.parametrize("x, y", [(0, 0), (-3, -1)])
def test_cursor_update_ignores_non_positive(x, y):
    grid = TextGrid(width=10, height=10)
    before = (grid.cursor_x, grid.cursor_y)
    grid.cursor_update(x, y)
    assert (grid.cursor_x, grid.cursor_y) == before


def test_cursor_update_ignores_beyond_area():
    grid = TextGrid(width=10, height=10)
    before = (grid.cursor_x, grid.cursor_y)
    grid.cursor_update(11, 11)
    assert (grid.cursor_x, grid.cursor_y) == before


def test_cursor_update_accepts_edges():
    grid = TextGrid(width=10, height=8)
    grid.cursor_update(10, 8)
    assert (grid.cursor_x, grid.cursor_y) == (10, 8)


def test_update_cols_and_rows_renumbers_from_zero():
    grid = typed("ab\ncd")
    grid.update_cols_and_rows()
    cells = list(grid.cells())
    assert {line for _, line, _ in cells} == {0, 1}
    first_row = [col for col, line, _ in cells if line == 0]
    assert first_row == [1, 2]
    assert grid.head.col == 0 and grid.head.line == 0


def test_delete_node_on_head_moves_head():
    grid = TextGrid()
    old_head = grid.head
    grid.delete_node()
    assert grid.head is not old_head
    assert grid.head is grid.current_col
    assert grid.lines() == [""]


def test_cells_around_cursor_stay_in_window():
    grid = typed("abcdef")
    radius = 1
    around = list(grid.cells_around_cursor(radius))
    assert around
    for screen_col, _, _ in around:
        assert grid.cursor_x - radius <= screen_col - 1 <= grid.cursor_x + radius
    letters = {letter for _, _, letter in around}
    assert "f" in letters
    assert "a" not in letters


def test_cells_around_cursor_wide_radius_covers_row():
    grid = typed("abc")
    letters = [letter for _, _, letter in grid.cells_around_cursor(50) if letter != "\0"]
    assert letters == list("abc")