# escape_printer/puzzles/placement.py
"""Collision-aware placement of answer letters and words onto a letter grid."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from .models import LetterGrid, PlacedToken

log = logging.getLogger(__name__)

# No 0/O or 1/I: these are ambiguous on thermal paper.
FILLER_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ"
DEFAULT_MAX_ATTEMPTS = 50


def reserve_answer_cells(grid: LetterGrid, answer: str, rng: random.Random) -> List[int]:
    """
    Seed each answer character into its own random empty cell, in answer order.
    Word boundaries are ignored; these are scattered letters.
    """
    free = [i for i, ch in enumerate(grid.cells) if ch == ""]
    if len(answer) > len(free):
        raise ValueError(f"Answer of {len(answer)} letters does not fit {len(free)} free cells")
    positions = rng.sample(free, len(answer))
    for pos, ch in zip(positions, answer):
        grid.cells[pos] = ch
    grid.answer_positions.extend(positions)
    return positions


def _try_place(grid: LetterGrid, word: str, horizontal: bool, x0: int, y0: int) -> Optional[List[int]]:
    positions = []
    for i, ch in enumerate(word):
        x = x0 + i if horizontal else x0
        y = y0 if horizontal else y0 + i
        pos = grid.index(x, y)
        if grid.cells[pos] not in ("", ch):
            return None
        positions.append(pos)
    return positions


def place_word(grid: LetterGrid, word: str, rng: random.Random,
               max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> Optional[PlacedToken]:
    """
    Try up to `max_attempts` random horizontal/vertical placements. A cell may be
    shared only when it already holds the same letter. Returns None when the
    budget runs out.
    """
    if not word:
        return None
    for _ in range(max_attempts):
        horizontal = rng.random() > 0.5
        span_x = grid.width - len(word) if horizontal else grid.width - 1
        span_y = grid.height - 1 if horizontal else grid.height - len(word)
        if span_x < 0 or span_y < 0:
            continue
        x0 = rng.randint(0, span_x)
        y0 = rng.randint(0, span_y)
        positions = _try_place(grid, word, horizontal, x0, y0)
        if positions is None:
            continue
        for pos, ch in zip(positions, word):
            grid.cells[pos] = ch
        token = PlacedToken(word=word, positions=positions)
        grid.placed.append(token)
        return token
    return None


def place_words(grid: LetterGrid, words: Sequence[str], rng: random.Random,
                max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> List[PlacedToken]:
    """Place each word in turn; words that never fit are dropped, not retried."""
    placed = []
    for word in words:
        token = place_word(grid, word, rng, max_attempts)
        if token is None:
            log.debug("word search: dropped %r after %d attempts", word, max_attempts)
            continue
        placed.append(token)
    return placed


def fill_empty(grid: LetterGrid, rng: random.Random, alphabet: str = FILLER_ALPHABET) -> None:
    for i, ch in enumerate(grid.cells):
        if ch == "":
            grid.cells[i] = rng.choice(alphabet)
