from __future__ import annotations

from typing import Any, Callable, Dict, List, Type

from . import generators as g
from .models import (
    AnswerConfig, CatalogConfig, CipherConfig, FoldingConfig, MazeConfig, MiniSudokuConfig,
    NumberSequenceConfig, PuzzleConfig, ScytaleConfig, SoundWaveConfig, SpotDiffConfig,
    TactileConfig, TextCipherConfig, TextConfig, WordSearchConfig,
)

PuzzleEntry = Dict[str, Any]

SUPPLIED = "supplied"
CATALOG = "catalog"
COMPUTED = "computed"


def _entry(ptype: str, title: str, mode: str, config_cls: Type[PuzzleConfig],
           builder: Callable[..., Any]) -> PuzzleEntry:
    return {"type": ptype, "title": title, "answer_mode": mode, "config": config_cls, "builder": builder}


def get_puzzle_registry() -> List[PuzzleEntry]:
    """Return every puzzle type the engine can build, in display order."""
    return [
        _entry("MAZE_VERTICAL", "Receipt Maze", SUPPLIED, MazeConfig, g.gen_maze_vertical),
        _entry("WORD_SEARCH", "Word Search", SUPPLIED, WordSearchConfig, g.gen_word_search),
        _entry("CIPHER", "Substitution Cipher", SUPPLIED, CipherConfig, g.gen_cipher),
        _entry("POLYBIUS", "Polybius Square", SUPPLIED, TextCipherConfig, g.gen_polybius),
        _entry("MIRROR", "Mirror Writing", SUPPLIED, TextCipherConfig, g.gen_mirror),
        _entry("TACTILE", "Braille / Morse", SUPPLIED, TactileConfig, g.gen_tactile),
        _entry("SCYTALE", "Scytale Strip", SUPPLIED, ScytaleConfig, g.gen_scytale),
        _entry("ANAGRAM", "Anagram Extraction", SUPPLIED, AnswerConfig, g.gen_anagram),
        _entry("MICRO_TEXT", "Micro Text", SUPPLIED, AnswerConfig, g.gen_micro_text),
        _entry("FOLDING", "Fold the Receipt", SUPPLIED, FoldingConfig, g.gen_folding),
        _entry("SOUND_WAVE", "Sound Wave", SUPPLIED, SoundWaveConfig, g.gen_sound_wave),
        _entry("TEXT", "Plain Text", SUPPLIED, TextConfig, g.gen_text),
        _entry("ASCII", "ASCII Silhouette", CATALOG, CatalogConfig, g.gen_ascii),
        _entry("RIDDLE", "Riddle", CATALOG, CatalogConfig, g.gen_riddle),
        _entry("WORD_LADDER", "Word Ladder", CATALOG, PuzzleConfig, g.gen_word_ladder),
        _entry("REBUS", "Rebus", CATALOG, CatalogConfig, g.gen_rebus),
        _entry("NONOGRAM", "Nonogram", CATALOG, CatalogConfig, g.gen_nonogram),
        _entry("SYMBOL_MATH", "Symbol Math", COMPUTED, PuzzleConfig, g.gen_symbol_math),
        _entry("NUMBER_SEQUENCE", "Number Sequence", COMPUTED, NumberSequenceConfig, g.gen_number_sequence),
        _entry("MINI_SUDOKU", "Mini Sudoku", COMPUTED, MiniSudokuConfig, g.gen_mini_sudoku),
        _entry("KAKURO", "Kakuro", COMPUTED, PuzzleConfig, g.gen_kakuro),
        _entry("SPOT_DIFF", "Spot the Difference", COMPUTED, SpotDiffConfig, g.gen_spot_diff),
    ]


def describe(entry: PuzzleEntry) -> Dict[str, str]:
    """JSON-safe view of an entry (no classes or callables)."""
    return {"type": entry["type"], "title": entry["title"], "answer_mode": entry["answer_mode"]}
