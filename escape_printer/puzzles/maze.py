# escape_printer/puzzles/maze.py
# -*- coding: utf-8 -*-
"""
Maze engine for the tall receipt maze.

Pipeline (one call, no shared state):
  carve  -> randomized backtracking with 2-cell steps (perfect maze)
  open   -> entrance above (1,1), exit below the first path cell of row H-2
  solve  -> BFS from (1,1) to that exact exit cell
  embed  -> answer characters interpolated along the solved path
  noise  -> filler glyphs on non-solution path cells only
"""

from __future__ import annotations

import logging
import random
from collections import deque
from typing import Dict, List, Optional, Set, Tuple

from .models import PATH, Coord, MazeGrid

log = logging.getLogger(__name__)

MAZE_WIDTH = 21
MAZE_HEIGHT = 45
NOISE_RATE = 0.12
NOISE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
ARROW = "↓"
START: Coord = (1, 1)

_CARVE_STEPS = [(0, -2), (0, 2), (-2, 0), (2, 0)]
_WALK_STEPS = [(0, -1), (0, 1), (-1, 0), (1, 0)]


def carve(width: int, height: int, rng: random.Random) -> MazeGrid:
    grid = MazeGrid.walled(width, height)

    def interior(x: int, y: int) -> bool:
        return 0 < x < width - 1 and 0 < y < height - 1

    sx, sy = START
    grid.cell(sx, sy).kind = PATH
    stack = [START]
    while stack:
        x, y = stack[-1]
        steps = _CARVE_STEPS[:]
        rng.shuffle(steps)
        for dx, dy in steps:
            nx, ny = x + dx, y + dy
            if interior(nx, ny) and grid.cell(nx, ny).kind != PATH:
                grid.cell(nx, ny).kind = PATH
                grid.cell(x + dx // 2, y + dy // 2).kind = PATH
                stack.append((nx, ny))
                break
        else:
            stack.pop()
    return grid


def open_border(grid: MazeGrid) -> Coord:
    """
    Open the entrance above START and the exit below the first path cell found
    in the second-to-last row. Returns the interior cell the exit hangs off,
    which is the target the solver must reach.
    """
    last_row = grid.height - 2
    exit_x = next((x for x in range(1, grid.width - 1, 2) if grid.is_path(x, last_row)), None)
    if exit_x is None:
        raise RuntimeError(f"No path cell in row {last_row}; carve produced no exit")

    sx, _ = START
    top = grid.cell(sx, 0)
    top.kind, top.marker = PATH, ARROW
    bottom = grid.cell(exit_x, grid.height - 1)
    bottom.kind, bottom.marker = PATH, ARROW

    grid.entrance = (sx, 0)
    grid.exit = (exit_x, grid.height - 1)
    return (exit_x, last_row)


def solve(grid: MazeGrid, start: Coord, target: Coord) -> List[Coord]:
    """
    Breadth-first search through path cells, stopping when both the target
    column and the target row are reached. Returns start..target inclusive.
    """
    tx, ty = target
    parents: Dict[Coord, Optional[Coord]] = {start: None}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        x, y = cur
        if x == tx and y == ty:
            path = []
            node: Optional[Coord] = cur
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path
        for dx, dy in _WALK_STEPS:
            nxt = (x + dx, y + dy)
            if nxt not in parents and grid.is_path(*nxt):
                parents[nxt] = cur
                queue.append(nxt)
    raise RuntimeError(f"Exit {target} is unreachable from {start}")


def answer_indices(path_length: int, answer_length: int) -> List[int]:
    """Evenly spaced path indices; a single character is pinned to index 0."""
    denom = max(answer_length - 1, 1)
    return [i * (path_length - 1) // denom for i in range(answer_length)]


def embed_answer(grid: MazeGrid, path: List[Coord], answer: str) -> str:
    """
    Write the answer along the path and return what was actually embedded.
    Answers longer than the path are clipped so no two characters share a cell.
    """
    if not answer or not path:
        return ""
    if len(answer) > len(path):
        log.warning("maze: answer of %d chars clipped to path length %d", len(answer), len(path))
        answer = answer[:len(path)]
    for ch, idx in zip(answer, answer_indices(len(path), len(answer))):
        cell = grid.cell(*path[idx])
        cell.glyph = ch
        cell.solution = True
    return answer


def add_noise(grid: MazeGrid, protected: Set[Coord], rng: random.Random,
              rate: float = NOISE_RATE, alphabet: str = NOISE_CHARS) -> int:
    """Scatter filler glyphs on open cells off the solution path."""
    placed = 0
    for cell in grid.cells:
        if cell.kind != PATH or cell.glyph or cell.marker:
            continue
        if (cell.x, cell.y) in protected:
            continue
        if rng.random() < rate:
            cell.glyph = rng.choice(alphabet)
            placed += 1
    return placed


def build_maze(answer: str, rng: Optional[random.Random] = None,
               width: int = MAZE_WIDTH, height: int = MAZE_HEIGHT,
               noise_rate: float = NOISE_RATE) -> Tuple[MazeGrid, str]:
    """
    Carve, solve and letter a maze in one go. Returns the finished grid and the
    answer string that reads along its solution path. An empty answer yields a
    plain maze with no glyphs at all.
    """
    rng = rng or random.Random()
    grid = carve(width, height, rng)
    target = open_border(grid)
    path = solve(grid, START, target)

    answer = "".join((answer or "").upper().split())
    if not answer:
        return grid, ""

    embedded = embed_answer(grid, path, answer)
    add_noise(grid, set(path), rng, rate=noise_rate)
    return grid, embedded


def read_path(grid: MazeGrid, path: List[Coord]) -> str:
    return "".join(grid.cell(x, y).glyph or "" for x, y in path)
