# escape_printer/puzzles/clues.py
"""
Clue codecs: display clues derived from a solved grid.

Clues are never stored next to a hand-written solution. They are always
recomputed from the canonical grid so the printed clue set and the answer
cannot drift apart.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models import ClueSet, SumClue

Grid = List[List[int]]


def run_lengths(line: Sequence[int]) -> List[int]:
    """Lengths of consecutive filled runs; an empty line yields [0]."""
    runs: List[int] = []
    count = 0
    for v in line:
        if v:
            count += 1
        elif count:
            runs.append(count)
            count = 0
    if count:
        runs.append(count)
    return runs or [0]


def nonogram_clues(bitmap: Sequence[Sequence[int]]) -> ClueSet:
    rows = [run_lengths(row) for row in bitmap]
    width = len(bitmap[0]) if bitmap else 0
    cols = [run_lengths([row[c] for row in bitmap]) for c in range(width)]
    return ClueSet(rows=rows, cols=cols)


def parse_bitmap(art: Sequence[str], filled: str = "#") -> Grid:
    """Turn a list of equal-width strings into a 0/1 grid."""
    widths = {len(r) for r in art}
    if len(widths) != 1:
        raise ValueError(f"Ragged bitmap rows: widths {sorted(widths)}")
    return [[1 if ch == filled else 0 for ch in row] for row in art]


# ───────────────────────── Sum grids (kakuro) ─────────────────────────

def _run_sum(solved: Grid, open_cells: Sequence[Sequence[bool]], r: int, c: int,
             dr: int, dc: int) -> Optional[int]:
    total, length = 0, 0
    r, c = r + dr, c + dc
    while r < len(open_cells) and c < len(open_cells[0]) and open_cells[r][c]:
        total += solved[r][c]
        length += 1
        r, c = r + dr, c + dc
    return total if length else None


def sum_clues(open_cells: Sequence[Sequence[bool]], solved: Grid) -> List[SumClue]:
    """
    For every blocked cell, sum the open run to its right (across) and below it
    (down). A clue is only emitted when at least one of the two runs exists.
    """
    clues: List[SumClue] = []
    for r, row in enumerate(open_cells):
        for c, is_open in enumerate(row):
            if is_open:
                continue
            across = _run_sum(solved, open_cells, r, c, 0, 1)
            down = _run_sum(solved, open_cells, r, c, 1, 0)
            if across is None and down is None:
                continue
            clues.append(SumClue(row=r, col=c, across=across, down=down))
    return clues


def runs(open_cells: Sequence[Sequence[bool]]) -> List[List[Tuple[int, int]]]:
    """All maximal horizontal and vertical runs of open cells."""
    out: List[List[Tuple[int, int]]] = []
    h = len(open_cells)
    w = len(open_cells[0]) if h else 0
    for r in range(h):
        cur: List[Tuple[int, int]] = []
        for c in range(w + 1):
            if c < w and open_cells[r][c]:
                cur.append((r, c))
            elif cur:
                out.append(cur)
                cur = []
    for c in range(w):
        cur = []
        for r in range(h + 1):
            if r < h and open_cells[r][c]:
                cur.append((r, c))
            elif cur:
                out.append(cur)
                cur = []
    return out


def runs_are_distinct(open_cells: Sequence[Sequence[bool]], solved: Grid) -> bool:
    for run in runs(open_cells):
        values = [solved[r][c] for r, c in run]
        if len(set(values)) != len(values) or not all(1 <= v <= 9 for v in values):
            return False
    return True


# ───────────────────────── Digit grids ─────────────────────────

def rotate_digit(value: int, shift: int, n: int) -> int:
    """(v + shift - 1) mod n + 1; zero stays zero (blank/blocked)."""
    if not value:
        return value
    return (value + shift - 1) % n + 1


def rotate_digits(grid: Grid, shift: int, n: int) -> Grid:
    return [[rotate_digit(v, shift, n) for v in row] for row in grid]


def transpose(grid: Sequence[Sequence]) -> List[list]:
    return [list(col) for col in zip(*grid)]


def is_valid_sudoku(grid: Grid, box_rows: int, box_cols: int) -> bool:
    """Each row, column and box holds 1..n exactly once."""
    n = len(grid)
    want = set(range(1, n + 1))
    if any(len(row) != n for row in grid):
        return False
    for i in range(n):
        if set(grid[i]) != want:
            return False
        if {grid[r][i] for r in range(n)} != want:
            return False
    for br in range(0, n, box_rows):
        for bc in range(0, n, box_cols):
            box = {grid[r][c] for r in range(br, br + box_rows) for c in range(bc, bc + box_cols)}
            if box != want:
                return False
    return True


def count_solutions(puzzle: Grid, box_rows: int, box_cols: int, limit: int = 2) -> int:
    """Backtracking count of completions (0 = blank), stopping at `limit`."""
    n = len(puzzle)
    work = [row[:] for row in puzzle]

    def allowed(r: int, c: int, v: int) -> bool:
        if v in work[r]:
            return False
        if any(work[i][c] == v for i in range(n)):
            return False
        br, bc = r - r % box_rows, c - c % box_cols
        return all(work[i][j] != v for i in range(br, br + box_rows) for j in range(bc, bc + box_cols))

    def solve() -> int:
        for r in range(n):
            for c in range(n):
                if work[r][c]:
                    continue
                found = 0
                for v in range(1, n + 1):
                    if allowed(r, c, v):
                        work[r][c] = v
                        found += solve()
                        work[r][c] = 0
                        if found >= limit:
                            return found
                return found
        return 1

    return min(solve(), limit)
