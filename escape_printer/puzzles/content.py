# escape_printer/puzzles/content.py
# -*- coding: utf-8 -*-
"""
Static pools the generators draw from: words, riddles, art, cipher tables and
the validated solved grids used by the number puzzles.
"""

from __future__ import annotations

import string
from typing import Any, Dict, List

ALPHABET = string.ascii_uppercase

# ───────────────────────── Word search / anagram ─────────────────────────

WORD_BANK = ["CODE", "HACK", "DATA", "SCAN", "BYTE", "FILE", "LOCK", "PASS"]

# (word, letter index circled by default)
ANAGRAM_POOL = [
    ("PLANET", 0), ("ROCKET", 0), ("ESCAPE", 0), ("SECOND", 0),
    ("CASTLE", 0), ("DANGER", 3), ("HIDDEN", 0), ("WINTER", 0),
    ("BRONZE", 0), ("MASTER", 0), ("FLIGHT", 0), ("ANCHOR", 0),
]

# ───────────────────────── Catalog puzzles ─────────────────────────

ASCII_ART: Dict[str, str] = {
    "KEY": r"""
   .---.
  /     \
  |  O  |
  \     /
   '---'
     |
     |
     |
   .-'-.
   '---'
""",
    "LOCK": r"""
   .---.
  /  _  \
 |  _  |
 | | | |
 |_| |_|
 |     |
 |  O  |
 |_____|
""",
    "BOMB": r"""
      .--.
     /    \
    |  ()  |
     \    /
      '--'
       ||
      _||_
     /____\
""",
    "GHOST": r"""
   .-.
  ( " )
   / \
  (   )
  /   \
 (_/ \_)
""",
}

RIDDLES = [
    {"text": "The more of me there is, the less you see. What am I?", "answer": "DARKNESS"},
    {"text": "I have keys but no locks. I have space but no room. "
             "You can enter but can't go inside. What am I?", "answer": "KEYBOARD"},
    {"text": "I speak without a mouth and hear without ears. I have no body, "
             "but I come alive with the wind. What am I?", "answer": "ECHO"},
    {"text": "I have cities, but no houses. I have mountains, but no trees. "
             "I have water, but no fish. What am I?", "answer": "MAP"},
    {"text": "The more you take, the more you leave behind. What am I?", "answer": "FOOTSTEPS"},
    {"text": "I can be cracked, made, told, and played. What am I?", "answer": "JOKE"},
    {"text": "I have hands but cannot clap. What am I?", "answer": "CLOCK"},
    {"text": "I go up but never come down. What am I?", "answer": "AGE"},
]

# Adjacent rungs differ in exactly one letter.
WORD_LADDERS = [
    ["COLD", "CORD", "CARD", "WARD", "WARM"],
    ["HEAD", "HEAL", "TEAL", "TELL", "TALL", "TAIL"],
    ["LOCK", "LOOK", "BOOK", "BOOT", "BOLT"],
    ["DARK", "BARK", "BARE", "CARE", "CAVE"],
    ["CODE", "CODS", "CONS", "COPS", "CAPS", "GAPS"],
]

# `style` tells the renderer how to lay out `lines`.
REBUSES = [
    {"lines": ["MAN", "BOARD"], "style": "stacked", "answer": "OVERBOARD",
     "hint": "One word sits above the other."},
    {"lines": ["STAND", "I"], "style": "stacked", "answer": "UNDERSTAND",
     "hint": "Mind what is beneath."},
    {"lines": ["T", "O", "U", "C", "H"], "style": "vertical", "answer": "TOUCHDOWN",
     "hint": "Read it top to bottom."},
    {"lines": ["YOU JUST ME"], "style": "inline", "answer": "BETWEEN",
     "hint": "Just ... you and me."},
    {"lines": ["WEAR", "LONG"], "style": "stacked", "answer": "UNDERWEAR",
     "hint": "Long johns."},
    {"lines": ["GETTING IT ALL"], "style": "inline", "answer": "TOGETHER",
     "hint": "All of it, in one place."},
]

# Nonogram shapes; '#' is a filled cell. Rows must share a width.
NONOGRAM_SHAPES: Dict[str, List[str]] = {
    "KEY": [
        ".###......",
        "#...#.....",
        "#...######",
        "#...#.#.#.",
        ".###......",
    ],
    "HEART": [
        ".##.##.",
        "#######",
        "#######",
        ".#####.",
        "..###..",
        "...#...",
    ],
    "ARROW": [
        "...#...",
        "..###..",
        ".#####.",
        "#######",
        "..###..",
        "..###..",
        "..###..",
    ],
    "SKULL": [
        ".#####.",
        "#######",
        "#..#..#",
        "#######",
        ".##.##.",
        ".#.#.#.",
    ],
    "BELL": [
        "...#...",
        "..###..",
        ".#####.",
        ".#####.",
        ".#####.",
        "#######",
        "...#...",
    ],
}

# ───────────────────────── Ciphers ─────────────────────────

PIGPEN_CLASSES: Dict[str, str] = {
    "A": "pp-border-rb", "B": "pp-border-lr pp-border-b", "C": "pp-border-lb",
    "D": "pp-border-tb pp-border-r", "E": "pp-border-all", "F": "pp-border-tb pp-border-l",
    "G": "pp-border-rt", "H": "pp-border-lr pp-border-t", "I": "pp-border-lt",
}
# J-R repeat the grid with a dot, W-Z repeat the X with a dot.
for _plain, _dotted in zip("ABCDEFGHI", "JKLMNOPQR"):
    PIGPEN_CLASSES[_dotted] = PIGPEN_CLASSES[_plain] + " pigpen-dot"
PIGPEN_CLASSES.update({
    "S": "pp-rotate pp-border-rb", "T": "pp-rotate pp-border-lb",
    "U": "pp-rotate pp-border-rt", "V": "pp-rotate pp-border-lt",
})
for _plain, _dotted in zip("STUV", "WXYZ"):
    PIGPEN_CLASSES[_dotted] = PIGPEN_CLASSES[_plain] + " pigpen-dot"

ICON_CLASSES: Dict[str, str] = {
    "A": "fa-solid fa-anchor", "B": "fa-solid fa-bicycle", "C": "fa-solid fa-cloud",
    "D": "fa-solid fa-diamond", "E": "fa-solid fa-eye", "F": "fa-solid fa-feather",
    "G": "fa-solid fa-ghost", "H": "fa-solid fa-heart", "I": "fa-solid fa-ice-cream",
    "J": "fa-solid fa-jet-fighter", "K": "fa-solid fa-key", "L": "fa-solid fa-leaf",
    "M": "fa-solid fa-moon", "N": "fa-solid fa-music", "O": "fa-solid fa-otter",
    "P": "fa-solid fa-paw", "Q": "fa-solid fa-question", "R": "fa-solid fa-rocket",
    "S": "fa-solid fa-star", "T": "fa-solid fa-tree", "U": "fa-solid fa-umbrella",
    "V": "fa-solid fa-volcano", "W": "fa-solid fa-water", "X": "fa-solid fa-xmarks-lines",
    "Y": "fa-solid fa-yin-yang", "Z": "fa-solid fa-bolt",
}

# 5x5 Polybius square, I/J share a cell.
POLYBIUS_SQUARE = "ABCDEFGHIKLMNOPQRSTUVWXYZ"

# Raised dots per Braille cell, numbered 1-6.
BRAILLE: Dict[str, tuple] = {
    "A": (1,), "B": (1, 2), "C": (1, 4), "D": (1, 4, 5), "E": (1, 5),
    "F": (1, 2, 4), "G": (1, 2, 4, 5), "H": (1, 2, 5), "I": (2, 4), "J": (2, 4, 5),
    "K": (1, 3), "L": (1, 2, 3), "M": (1, 3, 4), "N": (1, 3, 4, 5), "O": (1, 3, 5),
    "P": (1, 2, 3, 4), "Q": (1, 2, 3, 4, 5), "R": (1, 2, 3, 5), "S": (2, 3, 4),
    "T": (2, 3, 4, 5), "U": (1, 3, 6), "V": (1, 2, 3, 6), "W": (2, 4, 5, 6),
    "X": (1, 3, 4, 6), "Y": (1, 3, 4, 5, 6), "Z": (1, 3, 5, 6),
}

MORSE: Dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".", "F": "..-.",
    "G": "--.", "H": "....", "I": "..", "J": ".---", "K": "-.-", "L": ".-..",
    "M": "--", "N": "-.", "O": "---", "P": ".--.", "Q": "--.-", "R": ".-.",
    "S": "...", "T": "-", "U": "..-", "V": "...-", "W": ".--", "X": "-..-",
    "Y": "-.--", "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--", "4": "....-",
    "5": ".....", "6": "-....", "7": "--...", "8": "---..", "9": "----.",
}

# ───────────────────────── Filler text ─────────────────────────

MICRO_TEXT_LINES = [
    "PROCESSING DATA STREAM... ANALYZING SECURITY PROTOCOLS...",
    "SCANNING NETWORK TRAFFIC FOR ANOMALIES...",
    "FIREWALL STATUS: ACTIVE. ENCRYPTION: ENABLED.",
    "MONITORING SYSTEM LOGS FOR UNAUTHORIZED ACCESS...",
    "DATABASE INTEGRITY CHECK: PASSED.",
    "RUNNING DIAGNOSTIC SUBROUTINES...",
    "MEMORY ALLOCATION: OPTIMAL. CPU USAGE: NORMAL.",
]

SPOT_DIFF_CHARS = "ABCDEFGHJKLMNPQRSTUVWXYZ0123456789"

MATH_SYMBOLS = ["🍎", "🍌", "🍇", "⭐", "🔷", "🌙"]

# ───────────────────────── Solved grids ─────────────────────────

# Valid 4x4 sudoku with 2x2 boxes.
MINI_SUDOKU_BASE = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]

# 0 marks a blocked cell. Row 0 and column 0 are the clue border.
KAKURO_BOARDS: List[Dict[str, Any]] = [
    {
        "solved": [
            [0, 0, 0, 0, 0],
            [0, 1, 2, 0, 0],
            [0, 3, 1, 4, 2],
            [0, 2, 4, 1, 3],
            [0, 0, 3, 2, 0],
        ],
        "key_cells": [(1, 1), (2, 4), (3, 1), (4, 3)],
    },
    {
        "solved": [
            [0, 0, 0, 0, 0],
            [0, 9, 7, 0, 0],
            [0, 8, 9, 7, 0],
            [0, 0, 8, 9, 7],
            [0, 0, 0, 8, 9],
        ],
        "key_cells": [(1, 1), (2, 3), (3, 4), (4, 4)],
    },
]
