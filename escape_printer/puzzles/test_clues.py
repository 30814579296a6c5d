import pytest

from escape_printer.puzzles import clues, content


def test_run_lengths():
    assert clues.run_lengths([0, 0, 0]) == [0]
    assert clues.run_lengths([1, 1, 0, 1]) == [2, 1]
    assert clues.run_lengths([1, 1, 1]) == [3]


def test_nonogram_clues_from_bitmap():
    bitmap = clues.parse_bitmap(["#.#", "###", "..."])
    clue_set = clues.nonogram_clues(bitmap)
    assert clue_set.rows == [[1, 1], [3], [0]]
    assert clue_set.cols == [[2], [1], [2]]


def test_ragged_bitmap_rejected():
    with pytest.raises(ValueError):
        clues.parse_bitmap(["##", "#"])


def test_sum_clues_for_first_kakuro_board():
    solved = content.KAKURO_BOARDS[0]["solved"]
    layout = [[v != 0 for v in row] for row in solved]
    by_cell = {(c.row, c.col): c for c in clues.sum_clues(layout, solved)}
    assert by_cell[(1, 0)].across == 3
    assert by_cell[(1, 0)].down is None
    assert by_cell[(0, 1)].down == 6
    assert by_cell[(0, 1)].across is None
    assert (0, 0) not in by_cell


def test_rotation_keeps_sudoku_valid():
    for shift in range(4):
        grid = clues.rotate_digits(content.MINI_SUDOKU_BASE, shift, 4)
        assert clues.is_valid_sudoku(grid, 2, 2)
        assert clues.is_valid_sudoku(clues.transpose(grid), 2, 2)


def test_rotation_keeps_kakuro_runs_distinct():
    for board in content.KAKURO_BOARDS:
        layout = [[v != 0 for v in row] for row in board["solved"]]
        for shift in range(9):
            rotated = clues.rotate_digits(board["solved"], shift, 9)
            assert clues.runs_are_distinct(layout, rotated)


def test_rotate_digit_wraps_and_keeps_blanks():
    assert clues.rotate_digit(9, 1, 9) == 1
    assert clues.rotate_digit(4, 3, 4) == 3
    assert clues.rotate_digit(0, 5, 9) == 0


def test_solution_counting():
    puzzle = [row[:] for row in content.MINI_SUDOKU_BASE]
    for r, c in [(0, 0), (0, 3), (3, 0), (3, 3)]:
        puzzle[r][c] = 0
    assert clues.count_solutions(puzzle, 2, 2) == 1
    assert clues.count_solutions([[0] * 4 for _ in range(4)], 2, 2) == 2


# Catalog sanity

def test_word_ladders_change_one_letter_per_rung():
    for ladder in content.WORD_LADDERS:
        assert len({len(w) for w in ladder}) == 1
        for a, b in zip(ladder, ladder[1:]):
            assert sum(x != y for x, y in zip(a, b)) == 1


def test_nonogram_shapes_are_rectangular():
    for name, art in content.NONOGRAM_SHAPES.items():
        bitmap = clues.parse_bitmap(art)
        assert any(any(row) for row in bitmap), name


def test_kakuro_boards_are_consistent():
    for board in content.KAKURO_BOARDS:
        solved = board["solved"]
        layout = [[v != 0 for v in row] for row in solved]
        assert not any(layout[0]) and not any(row[0] for row in layout)
        assert clues.runs_are_distinct(layout, solved)
        for r, c in board["key_cells"]:
            assert layout[r][c]


def test_cipher_tables_cover_alphabet():
    assert set(content.PIGPEN_CLASSES) == set(content.ALPHABET)
    assert set(content.ICON_CLASSES) == set(content.ALPHABET)
    assert set(content.BRAILLE) == set(content.ALPHABET)
    assert len(content.POLYBIUS_SQUARE) == 25 and "J" not in content.POLYBIUS_SQUARE


def test_anagram_pool_indices_in_range():
    for word, idx in content.ANAGRAM_POOL:
        assert 0 <= idx < len(word)
