# escape_printer/puzzles/models.py
# -*- coding: utf-8 -*-
"""
Plain data shapes shared by the generators.

Every entity here is created fresh per generation call and only survives as
part of the JSON payload of a `PuzzleResult`.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional, Tuple

WALL = "wall"
PATH = "path"

Coord = Tuple[int, int]


@dataclass
class PuzzleResult:
    type: str
    answer: str
    data: Dict[str, Any]

    def to_json(self) -> Dict[str, Any]:
        return {"type": self.type, "answer": self.answer, "data": self.data}


# ───────────────────────── Maze ─────────────────────────

@dataclass
class Cell:
    x: int
    y: int
    kind: str = WALL
    glyph: Optional[str] = None
    marker: Optional[str] = None   # entrance/exit arrow, never part of the answer
    solution: bool = False         # True only where an answer character sits

    def to_json(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"x": self.x, "y": self.y, "type": self.kind, "char": self.glyph or ""}
        if self.marker:
            out["marker"] = self.marker
        if self.solution:
            out["is_solution"] = True
        return out


@dataclass
class MazeGrid:
    width: int
    height: int
    cells: List[Cell]
    entrance: Optional[Coord] = None
    exit: Optional[Coord] = None

    @classmethod
    def walled(cls, width: int, height: int) -> "MazeGrid":
        if width % 2 == 0 or height % 2 == 0:
            raise ValueError(f"Maze dimensions must be odd, got {width}x{height}")
        cells = [Cell(x, y) for y in range(height) for x in range(width)]
        return cls(width=width, height=height, cells=cells)

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell(self, x: int, y: int) -> Cell:
        return self.cells[self.index(x, y)]

    def is_path(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cell(x, y).kind == PATH

    def to_json(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "entrance": list(self.entrance) if self.entrance else None,
            "exit": list(self.exit) if self.exit else None,
            "cells": [c.to_json() for c in self.cells],
        }


# ───────────────────────── Letter grids ─────────────────────────

@dataclass
class PlacedToken:
    word: str
    positions: List[int]   # flat row-major indices, one per letter

    def to_json(self) -> Dict[str, Any]:
        return {"word": self.word, "positions": list(self.positions)}


@dataclass
class LetterGrid:
    width: int
    height: int
    cells: List[str] = field(default_factory=list)
    placed: List[PlacedToken] = field(default_factory=list)
    answer_positions: List[int] = field(default_factory=list)

    @classmethod
    def empty(cls, width: int, height: int) -> "LetterGrid":
        return cls(width=width, height=height, cells=[""] * (width * height))

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def rows(self) -> List[List[str]]:
        return [self.cells[y * self.width:(y + 1) * self.width] for y in range(self.height)]


# ───────────────────────── Clues ─────────────────────────

@dataclass
class ClueSet:
    rows: List[List[int]]
    cols: List[List[int]]

    def to_json(self) -> Dict[str, Any]:
        return {"rows": self.rows, "cols": self.cols}


@dataclass
class SumClue:
    row: int
    col: int
    across: Optional[int] = None
    down: Optional[int] = None

    def to_json(self) -> Dict[str, Any]:
        return {"row": self.row, "col": self.col, "across": self.across, "down": self.down}


# ───────────────────────── Per-type configuration ─────────────────────────

@dataclass(frozen=True)
class PuzzleConfig:
    """Base for the per-type config records. Only known keys are picked up."""

    seed: Optional[int] = None

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "PuzzleConfig":
        raw = raw or {}
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in raw.items() if k in known and v is not None and v != ""}
        return cls(**kwargs)

    def rng(self) -> random.Random:
        return random.Random(self.seed) if self.seed is not None else random.Random()


@dataclass(frozen=True)
class AnswerConfig(PuzzleConfig):
    answer: str = "SECRET"


@dataclass(frozen=True)
class TextCipherConfig(PuzzleConfig):
    text: str = "SECRET"


@dataclass(frozen=True)
class CatalogConfig(PuzzleConfig):
    answer: Optional[str] = None


@dataclass(frozen=True)
class MazeConfig(AnswerConfig):
    pass


@dataclass(frozen=True)
class WordSearchConfig(AnswerConfig):
    grid_size: int = 10
    word_count: int = 4
    max_attempts: int = 50


@dataclass(frozen=True)
class CipherConfig(TextCipherConfig):
    variant: str = "CAESAR"
    shift: int = 3


@dataclass(frozen=True)
class TactileConfig(TextCipherConfig):
    variant: str = "BRAILLE"


@dataclass(frozen=True)
class ScytaleConfig(TextCipherConfig):
    columns: int = 3


@dataclass(frozen=True)
class FoldingConfig(PuzzleConfig):
    code: str = "1234"


@dataclass(frozen=True)
class SoundWaveConfig(AnswerConfig):
    frequency: int = 440
    pattern: str = "loop"


@dataclass(frozen=True)
class TextConfig(AnswerConfig):
    text: str = "NO DATA"


@dataclass(frozen=True)
class NumberSequenceConfig(PuzzleConfig):
    visible: int = 5


@dataclass(frozen=True)
class MiniSudokuConfig(PuzzleConfig):
    extra_blanks: int = 0


@dataclass(frozen=True)
class SpotDiffConfig(PuzzleConfig):
    diff_count: int = 4
