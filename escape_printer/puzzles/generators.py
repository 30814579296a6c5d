# escape_printer/puzzles/generators.py
# -*- coding: utf-8 -*-
"""
One builder per puzzle type.

Every builder has the shape `gen_x(rng, cfg) -> (data, answer)`: it builds the
payload and returns the answer that payload actually encodes. Answers come in
three flavours:
  supplied - caller text, possibly canonicalized (POLYBIUS drops J, ANAGRAM
             reads back the letters it really extracted)
  catalog  - picked together with its content from a fixed pool
  computed - read back from a freshly built structure
"""

from __future__ import annotations

import math
import random
import re
from typing import Any, Callable, Dict, List, Optional, Tuple

from . import clues, content, maze, placement
from .models import (
    AnswerConfig, CatalogConfig, CipherConfig, FoldingConfig, LetterGrid, MazeConfig,
    MiniSudokuConfig, NumberSequenceConfig, PuzzleConfig, ScytaleConfig, SoundWaveConfig,
    SpotDiffConfig, TactileConfig, TextCipherConfig, TextConfig, WordSearchConfig,
)

Built = Tuple[Dict[str, Any], str]

MAX_GRID_SIZE = 30
MAX_PLACEMENT_ATTEMPTS = 500
MAX_VISIBLE_TERMS = 12


def _upper(s: Any) -> str:
    return str(s or "").upper()


def _pick(rng: random.Random, pool: List[Any], key: Callable[[Any], str], wanted: Optional[str]) -> Any:
    """Pool entry whose key matches `wanted`, else a random one."""
    if wanted:
        for item in pool:
            if key(item) == _upper(wanted):
                return item
    return rng.choice(pool)


# ───────────────────────── Supplied answers ─────────────────────────

def gen_maze_vertical(rng: random.Random, cfg: MazeConfig) -> Built:
    grid, embedded = maze.build_maze(_upper(cfg.answer), rng)
    return {"maze": grid.to_json()}, embedded


def gen_word_search(rng: random.Random, cfg: WordSearchConfig) -> Built:
    answer = re.sub(r"\s+", "", _upper(cfg.answer))
    # Large enough for the answer letters, never past the printable width
    size = max(int(cfg.grid_size), math.isqrt(max(len(answer) - 1, 0)) + 1)
    size = max(2, min(size, MAX_GRID_SIZE))
    grid = LetterGrid.empty(size, size)
    placement.reserve_answer_cells(grid, answer, rng)

    candidates = content.WORD_BANK[:]
    rng.shuffle(candidates)
    count = max(0, int(cfg.word_count))
    attempts = max(1, min(int(cfg.max_attempts), MAX_PLACEMENT_ATTEMPTS))
    placed = placement.place_words(grid, candidates[:count], rng, attempts)
    placement.fill_empty(grid, rng)

    data = {
        "grid": grid.rows(),
        "grid_size": size,
        "words": [t.word for t in placed],
        "placements": [t.to_json() for t in placed],
        "answer_positions": list(grid.answer_positions),
    }
    return data, answer


def caesar(text: str, shift: int) -> str:
    A = content.ALPHABET
    return "".join(A[(A.index(ch) + shift) % 26] if ch in A else ch for ch in text)


def _symbolize(text: str, table: Dict[str, str], kind: str) -> List[Dict[str, str]]:
    out = []
    for ch in text:
        if ch in table:
            out.append({"type": kind, "class": table[ch], "char": ch})
        else:
            out.append({"type": "text", "char": ch})
    return out


def gen_cipher(rng: random.Random, cfg: CipherConfig) -> Built:
    text = _upper(cfg.text)
    variant = _upper(cfg.variant)
    data: Dict[str, Any] = {"variant": variant, "text": text}

    if variant == "PIGPEN":
        data["symbols"] = _symbolize(text, content.PIGPEN_CLASSES, "pigpen")
        data["partial_key"] = "LOOK FOR THE PATTERNS"
        data["visual_key"] = True
    elif variant == "ICON":
        data["symbols"] = _symbolize(text, content.ICON_CLASSES, "icon")
        data["partial_key"] = "A=ANCHOR, B=BIKE..."
    else:
        shift = int(cfg.shift) % 26
        data["variant"] = "CAESAR"
        data["ciphertext"] = caesar(text, shift)
        data["partial_key"] = f"SHIFT +{shift}"
    return data, text


def polybius_pairs(word: str) -> List[str]:
    out = []
    for ch in word:
        i = content.POLYBIUS_SQUARE.index(ch)
        out.append(f"{i // 5 + 1}-{i % 5 + 1}")
    return out


def gen_polybius(rng: random.Random, cfg: TextCipherConfig) -> Built:
    answer = re.sub(r"[^A-Z]", "", _upper(cfg.text).replace("J", "I"))
    data = {
        "pairs": polybius_pairs(answer),
        "square": [list(content.POLYBIUS_SQUARE[r * 5:r * 5 + 5]) for r in range(5)],
        "instruction": "ROW-COLUMN. I AND J SHARE A CELL.",
    }
    return data, answer


def gen_mirror(rng: random.Random, cfg: TextCipherConfig) -> Built:
    text = _upper(cfg.text)
    return {"text": text[::-1], "mirrored": True, "instruction": "HOLD IT UP TO THE LIGHT"}, text


def gen_tactile(rng: random.Random, cfg: TactileConfig) -> Built:
    variant = _upper(cfg.variant)
    text = _upper(cfg.text)
    if variant == "MORSE":
        kept = [ch for ch in text if ch in content.MORSE]
        data = {"variant": "MORSE", "codes": [content.MORSE[ch] for ch in kept]}
    else:
        kept = [ch for ch in text if ch in content.BRAILLE]
        data = {"variant": "BRAILLE", "cells": [list(content.BRAILLE[ch]) for ch in kept]}
    return data, "".join(kept)


def gen_scytale(rng: random.Random, cfg: ScytaleConfig) -> Built:
    answer = re.sub(r"\s+", "", _upper(cfg.text))
    cols = max(2, int(cfg.columns))
    rows = max(1, math.ceil(len(answer) / cols))
    padded = answer.ljust(rows * cols, "X")
    strip = "".join(padded[r * cols + c] for c in range(cols) for r in range(rows))
    return {"strip": strip, "columns": cols, "rows": rows}, answer


def _scramble(rng: random.Random, word: str) -> str:
    letters = list(word)
    for _ in range(10):
        rng.shuffle(letters)
        if "".join(letters) != word:
            break
    return "".join(letters)


def gen_anagram(rng: random.Random, cfg: AnswerConfig) -> Built:
    target = _upper(cfg.answer)
    words: List[Dict[str, Any]] = []
    used = set()

    for ch in target[:5]:
        found = next((w for w, _ in content.ANAGRAM_POOL if ch in w and w not in used), None)
        if not found:
            continue
        idx = found.index(ch)
        used.add(found)
        words.append({"original": found, "scrambled": _scramble(rng, found),
                      "extract_index": idx, "display_position": idx + 1, "extract_char": ch})

    spare = [(w, i) for w, i in content.ANAGRAM_POOL if w not in used]
    rng.shuffle(spare)
    while len(words) < 4 and spare:
        w, idx = spare.pop()
        used.add(w)
        words.append({"original": w, "scrambled": _scramble(rng, w),
                      "extract_index": idx, "display_position": idx + 1, "extract_char": w[idx]})

    answer = "".join(w["extract_char"] for w in words)
    return {"words": words}, answer


def gen_micro_text(rng: random.Random, cfg: AnswerConfig) -> Built:
    answer = _upper(cfg.answer)
    hidden = rng.randrange(len(content.MICRO_TEXT_LINES))
    blocks = [{"text": line, "has_hidden": i == hidden, "hidden_code": answer if i == hidden else None}
              for i, line in enumerate(content.MICRO_TEXT_LINES)]
    data = {
        "blocks": blocks,
        "hidden_line_index": hidden,
        "instruction": f"LOOK VERY CLOSELY AT LINE {hidden + 1}",
    }
    return data, answer


def gen_folding(rng: random.Random, cfg: FoldingConfig) -> Built:
    code = _upper(cfg.code)
    return {"code": code}, code


def gen_sound_wave(rng: random.Random, cfg: SoundWaveConfig) -> Built:
    bars = []
    for i in range(40):
        base = math.sin(i * 0.5) * 0.5 + 0.5
        noise = (rng.random() - 0.5) * 0.4
        bars.append(int(max(0.1, min(1.0, base + noise)) * 100))
    data = {"bars": bars, "frequency": int(cfg.frequency), "pattern": cfg.pattern}
    return data, _upper(cfg.answer)


def gen_text(rng: random.Random, cfg: TextConfig) -> Built:
    return {"content": cfg.text}, _upper(cfg.answer)


# ───────────────────────── Catalog answers ─────────────────────────

def gen_ascii(rng: random.Random, cfg: CatalogConfig) -> Built:
    name = _pick(rng, sorted(content.ASCII_ART), lambda n: n, cfg.answer)
    return {"art": content.ASCII_ART[name]}, name


def gen_riddle(rng: random.Random, cfg: CatalogConfig) -> Built:
    riddle = _pick(rng, content.RIDDLES, lambda r: r["answer"], cfg.answer)
    return {"text": riddle["text"]}, riddle["answer"]


def gen_rebus(rng: random.Random, cfg: CatalogConfig) -> Built:
    rebus = _pick(rng, content.REBUSES, lambda r: r["answer"], cfg.answer)
    return {"lines": list(rebus["lines"]), "style": rebus["style"], "hint": rebus["hint"]}, rebus["answer"]


def gen_word_ladder(rng: random.Random, cfg: PuzzleConfig) -> Built:
    ladder = rng.choice(content.WORD_LADDERS)
    key = len(ladder) // 2
    rungs = [w if i in (0, len(ladder) - 1) else None for i, w in enumerate(ladder)]
    data = {
        "rungs": rungs,
        "length": len(ladder[0]),
        "key_rung": key,
        "instruction": f"CHANGE ONE LETTER PER STEP. RUNG {key + 1} IS THE CODE.",
    }
    return data, ladder[key]


def gen_nonogram(rng: random.Random, cfg: CatalogConfig) -> Built:
    name = _pick(rng, sorted(content.NONOGRAM_SHAPES), lambda n: n, cfg.answer)
    bitmap = clues.parse_bitmap(content.NONOGRAM_SHAPES[name])
    if rng.random() < 0.5:
        bitmap = [row[::-1] for row in bitmap]
    clue_set = clues.nonogram_clues(bitmap)
    data = {
        "width": len(bitmap[0]),
        "height": len(bitmap),
        "clues": clue_set.to_json(),
        "solution": bitmap,
    }
    return data, name


# ───────────────────────── Computed answers ─────────────────────────

def gen_symbol_math(rng: random.Random, cfg: PuzzleConfig) -> Built:
    a, b, c = rng.sample(content.MATH_SYMBOLS, 3)
    values = {s: rng.randint(2, 6) for s in (a, b, c)}
    equations = [
        {"left": f"{a} + {a}", "right": values[a] * 2},
        {"left": f"{a} + {b}", "right": values[a] + values[b]},
        {"left": f"{b} + {c}", "right": values[b] + values[c]},
    ]
    return {"equations": equations, "ask_symbol": c}, str(values[c])


def _sequence_rules() -> Dict[str, Tuple[str, Callable[[int, List[int]], int]]]:
    return {
        "double": ("Doubling", lambda i, seq: 2 * 2 ** i),
        "add3": ("Add 3", lambda i, seq: 1 + 3 * i),
        "square": ("Squares", lambda i, seq: (i + 1) ** 2),
        "fib": ("Fibonacci", lambda i, seq: i + 1 if i < 2 else seq[i - 1] + seq[i - 2]),
        "add5": ("Add 5", lambda i, seq: 2 + 5 * i),
        "triple": ("Tripling", lambda i, seq: 3 ** i),
    }


SEQUENCE_RULES = _sequence_rules()


def sequence_terms(rule: str, count: int) -> List[int]:
    _, term = SEQUENCE_RULES[rule]
    seq: List[int] = []
    for i in range(count):
        seq.append(term(i, seq))
    return seq


def gen_number_sequence(rng: random.Random, cfg: NumberSequenceConfig) -> Built:
    visible = max(3, min(int(cfg.visible), MAX_VISIBLE_TERMS))
    rule = rng.choice(sorted(SEQUENCE_RULES))
    seq = sequence_terms(rule, visible + 1)
    return {"visible": seq[:visible], "hint": SEQUENCE_RULES[rule][0], "rule": rule}, str(seq[visible])


def shuffled_mini_sudoku(rng: random.Random) -> List[List[int]]:
    """Base grid with band/stack swaps, optional transpose and digit rotation."""
    grid = [row[:] for row in content.MINI_SUDOKU_BASE]
    for band in (0, 2):
        if rng.random() < 0.5:
            grid[band], grid[band + 1] = grid[band + 1], grid[band]
    if rng.random() < 0.5:
        grid[0:2], grid[2:4] = grid[2:4], grid[0:2]
    for stack in (0, 2):
        if rng.random() < 0.5:
            for row in grid:
                row[stack], row[stack + 1] = row[stack + 1], row[stack]
    if rng.random() < 0.5:
        grid = clues.transpose(grid)
    grid = clues.rotate_digits(grid, rng.randrange(4), 4)
    if not clues.is_valid_sudoku(grid, 2, 2):
        raise RuntimeError("mini sudoku transform broke the grid")
    return grid


CORNERS = [(0, 0), (0, 3), (3, 0), (3, 3)]


def gen_mini_sudoku(rng: random.Random, cfg: MiniSudokuConfig) -> Built:
    solved = shuffled_mini_sudoku(rng)
    puzzle = [row[:] for row in solved]
    for r, c in CORNERS:
        puzzle[r][c] = 0

    extra = max(0, int(cfg.extra_blanks))
    cells = [(r, c) for r in range(4) for c in range(4) if (r, c) not in CORNERS]
    rng.shuffle(cells)
    for r, c in cells:
        if extra <= 0:
            break
        puzzle[r][c] = 0
        if clues.count_solutions(puzzle, 2, 2) != 1:
            puzzle[r][c] = solved[r][c]
            continue
        extra -= 1

    answer = sum(solved[r][c] for r, c in CORNERS)
    data = {"puzzle": puzzle, "solved": solved, "instruction": "SUM OF CORNER VALUES"}
    return data, str(answer)


def gen_kakuro(rng: random.Random, cfg: PuzzleConfig) -> Built:
    board = rng.choice(content.KAKURO_BOARDS)
    solved = [row[:] for row in board["solved"]]
    keys = [tuple(k) for k in board["key_cells"]]
    if rng.random() < 0.5:
        solved = clues.transpose(solved)
        keys = [(c, r) for r, c in keys]
    solved = clues.rotate_digits(solved, rng.randrange(9), 9)

    layout = [[v != 0 for v in row] for row in solved]
    if not clues.runs_are_distinct(layout, solved):
        raise RuntimeError("kakuro board has a repeated digit in a run")

    data = {
        "layout": layout,
        "clues": [c.to_json() for c in clues.sum_clues(layout, solved)],
        "solved": solved,
        "key_cells": [list(k) for k in keys],
        "instruction": "FILL 1-9, NO REPEATS IN A RUN. READ THE MARKED CELLS.",
    }
    return data, "".join(str(solved[r][c]) for r, c in keys)


def gen_spot_diff(rng: random.Random, cfg: SpotDiffConfig) -> Built:
    chars = content.SPOT_DIFF_CHARS
    line_len, line_count = 20, 6
    diff_count = max(1, min(int(cfg.diff_count), line_len * line_count))

    base = ["".join(rng.choice(chars) for _ in range(line_len)) for _ in range(line_count)]
    modified = [list(line) for line in base]

    spots = rng.sample([(r, c) for r in range(line_count) for c in range(line_len)], diff_count)
    diffs = []
    for r, c in sorted(spots):
        new = rng.choice([ch for ch in chars if ch != base[r][c]])
        modified[r][c] = new
        diffs.append({"line": r, "col": c, "original": base[r][c], "modified": new})

    data = {
        "block_a": base,
        "block_b": ["".join(line) for line in modified],
        "diff_count": diff_count,
        "instruction": f"FIND {diff_count} DIFFERENCES. TYPE THE NEW CHARACTERS.",
    }
    return data, "".join(d["modified"] for d in diffs)
