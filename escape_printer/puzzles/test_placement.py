import random

import pytest

from escape_printer.puzzles.models import LetterGrid
from escape_printer.puzzles.placement import (
    FILLER_ALPHABET, fill_empty, place_word, place_words, reserve_answer_cells,
)


def test_answer_cells_are_distinct_and_ordered():
    grid = LetterGrid.empty(6, 6)
    positions = reserve_answer_cells(grid, "SECRET", random.Random(1))
    assert len(set(positions)) == 6
    assert [grid.cells[p] for p in positions] == list("SECRET")
    assert grid.answer_positions == positions


def test_answer_too_long_for_grid():
    with pytest.raises(ValueError):
        reserve_answer_cells(LetterGrid.empty(2, 2), "HELLO", random.Random(0))


def test_word_lies_on_a_straight_line():
    grid = LetterGrid.empty(8, 8)
    token = place_word(grid, "CODE", random.Random(4))
    assert token is not None
    xs = {p % 8 for p in token.positions}
    ys = {p // 8 for p in token.positions}
    assert len(xs) == 1 or len(ys) == 1
    assert "".join(grid.cells[p] for p in token.positions) == "CODE"


def test_shares_a_matching_letter():
    grid = LetterGrid.empty(4, 1)
    grid.cells[1] = "O"
    token = place_word(grid, "CODE", random.Random(0))
    assert token is not None
    assert grid.cells == list("CODE")


def test_conflicting_letter_blocks_placement():
    grid = LetterGrid.empty(4, 1)
    grid.cells[1] = "X"
    assert place_word(grid, "CODE", random.Random(0), max_attempts=20) is None
    assert grid.cells == ["", "X", "", ""]
    assert grid.placed == []


def test_words_that_never_fit_are_dropped():
    grid = LetterGrid.empty(3, 3)
    placed = place_words(grid, ["CAT", "ELEPHANT", "DOG"], random.Random(2))
    words = [t.word for t in placed]
    assert "ELEPHANT" not in words
    assert words == [t.word for t in grid.placed]


def test_fill_keeps_existing_letters():
    grid = LetterGrid.empty(5, 5)
    grid.cells[0] = "O"
    fill_empty(grid, random.Random(3))
    assert grid.cells[0] == "O"
    assert all(ch in FILLER_ALPHABET for ch in grid.cells[1:])
