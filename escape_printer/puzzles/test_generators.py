import random

import pytest

from escape_printer.puzzles import clues, content
from escape_printer.puzzles import generators as g
from escape_printer.puzzles.models import (
    AnswerConfig, CatalogConfig, CipherConfig, MiniSudokuConfig, NumberSequenceConfig,
    PuzzleConfig, ScytaleConfig, SpotDiffConfig, TactileConfig, TextCipherConfig, WordSearchConfig,
)

SEEDS = range(30)


def test_word_search_holds_answer_and_words():
    data, answer = g.gen_word_search(random.Random(3), WordSearchConfig(answer="Code it"))
    assert answer == "CODEIT"
    flat = [ch for row in data["grid"] for ch in row]
    assert len(flat) == 100 and all(flat)
    assert "".join(flat[p] for p in data["answer_positions"]) == "CODEIT"
    for placement in data["placements"]:
        assert "".join(flat[p] for p in placement["positions"]) == placement["word"]
    assert data["words"] == [p["word"] for p in data["placements"]]


def test_caesar_and_unknown_variant():
    data, answer = g.gen_cipher(random.Random(0), CipherConfig(text="abc xyz", shift=3))
    assert answer == "ABC XYZ"
    assert data["ciphertext"] == "DEF ABC"

    data, _ = g.gen_cipher(random.Random(0), CipherConfig(text="HI", variant="ROT13"))
    assert data["variant"] == "CAESAR"


def test_pigpen_keeps_non_letters_as_text():
    data, answer = g.gen_cipher(random.Random(0), CipherConfig(text="A-B", variant="pigpen"))
    assert answer == "A-B"
    assert [s["type"] for s in data["symbols"]] == ["pigpen", "text", "pigpen"]


def test_polybius_folds_j_into_i():
    data, answer = g.gen_polybius(random.Random(0), TextCipherConfig(text="Jab 1"))
    assert answer == "IAB"
    assert data["pairs"] == ["2-4", "1-1", "1-2"]


def test_tactile_drops_unencodable_characters():
    data, answer = g.gen_tactile(random.Random(0), TactileConfig(text="A B!", variant="BRAILLE"))
    assert answer == "AB"
    assert data["cells"] == [[1], [1, 2]]

    data, answer = g.gen_tactile(random.Random(0), TactileConfig(text="SOS 1", variant="MORSE"))
    assert answer == "SOS1"
    assert data["codes"] == ["...", "---", "...", ".----"]


def test_scytale_reads_column_wise():
    data, answer = g.gen_scytale(random.Random(0), ScytaleConfig(text="ATTACK", columns=3))
    assert answer == "ATTACK"
    assert data["rows"] == 2
    assert data["strip"] == "AATCTK"


def test_anagram_answer_is_extracted_letters():
    for seed in SEEDS:
        data, answer = g.gen_anagram(random.Random(seed), AnswerConfig(answer="TEST"))
        assert len(data["words"]) >= 4
        assert answer == "".join(w["original"][w["extract_index"]] for w in data["words"])
        for w in data["words"]:
            assert sorted(w["scrambled"]) == sorted(w["original"])
            assert w["scrambled"] != w["original"]


def test_catalog_answer_selects_entry():
    data, answer = g.gen_ascii(random.Random(0), CatalogConfig(answer="lock"))
    assert answer == "LOCK"
    assert data["art"] == content.ASCII_ART["LOCK"]

    _, answer = g.gen_riddle(random.Random(0), CatalogConfig(answer="ECHO"))
    assert answer == "ECHO"


def test_word_ladder_hides_key_rung():
    for seed in SEEDS:
        data, answer = g.gen_word_ladder(random.Random(seed), PuzzleConfig())
        ladder = next(lad for lad in content.WORD_LADDERS if lad[0] == data["rungs"][0])
        assert data["rungs"][data["key_rung"]] is None
        assert answer == ladder[data["key_rung"]]
        assert data["rungs"][-1] == ladder[-1]


def test_nonogram_clues_match_solution():
    for seed in SEEDS:
        data, answer = g.gen_nonogram(random.Random(seed), CatalogConfig())
        assert answer in content.NONOGRAM_SHAPES
        assert data["clues"] == clues.nonogram_clues(data["solution"]).to_json()


def test_symbol_math_answer_solves_equations():
    for seed in SEEDS:
        data, answer = g.gen_symbol_math(random.Random(seed), PuzzleConfig())
        e1, e2, e3 = (e["right"] for e in data["equations"])
        a = e1 // 2
        b = e2 - a
        assert str(e3 - b) == answer


@pytest.mark.parametrize("rule,expected", [
    ("double", [2, 4, 8, 16, 32, 64]),
    ("add3", [1, 4, 7, 10, 13, 16]),
    ("square", [1, 4, 9, 16, 25, 36]),
    ("fib", [1, 2, 3, 5, 8, 13]),
    ("add5", [2, 7, 12, 17, 22, 27]),
    ("triple", [1, 3, 9, 27, 81, 243]),
])
def test_sequence_rules(rule, expected):
    assert g.sequence_terms(rule, 6) == expected


def test_number_sequence_answer_is_next_term():
    data, answer = g.gen_number_sequence(random.Random(4), NumberSequenceConfig(visible=5))
    terms = g.sequence_terms(data["rule"], 6)
    assert data["visible"] == terms[:5]
    assert answer == str(terms[5])


def test_mini_sudoku_blanks_exactly_the_corners():
    for seed in SEEDS:
        data, answer = g.gen_mini_sudoku(random.Random(seed), MiniSudokuConfig())
        solved, puzzle = data["solved"], data["puzzle"]
        assert clues.is_valid_sudoku(solved, 2, 2)
        blanks = {(r, c) for r in range(4) for c in range(4) if puzzle[r][c] == 0}
        assert blanks == set(g.CORNERS)
        assert answer == str(sum(solved[r][c] for r, c in g.CORNERS))


def test_mini_sudoku_extra_blanks_stay_unique():
    data, _ = g.gen_mini_sudoku(random.Random(9), MiniSudokuConfig(extra_blanks=6))
    blanks = sum(v == 0 for row in data["puzzle"] for v in row)
    assert 4 <= blanks <= 10
    assert clues.count_solutions(data["puzzle"], 2, 2) == 1


def test_kakuro_clues_follow_the_transformed_grid():
    for seed in SEEDS:
        data, answer = g.gen_kakuro(random.Random(seed), PuzzleConfig())
        solved, layout = data["solved"], data["layout"]
        assert clues.runs_are_distinct(layout, solved)
        assert data["clues"] == [c.to_json() for c in clues.sum_clues(layout, solved)]
        assert answer == "".join(str(solved[r][c]) for r, c in data["key_cells"])
        assert all(layout[r][c] for r, c in data["key_cells"])


def test_spot_diff_answer_lists_changes_in_reading_order():
    data, answer = g.gen_spot_diff(random.Random(7), SpotDiffConfig(diff_count=5))
    changed = [
        b for line_a, line_b in zip(data["block_a"], data["block_b"])
        for a, b in zip(line_a, line_b) if a != b
    ]
    assert len(changed) == 5
    assert answer == "".join(changed)


def test_number_sequence_visible_terms_are_capped():
    for seed in SEEDS:
        data, answer = g.gen_number_sequence(random.Random(seed), NumberSequenceConfig(visible=12000))
        assert len(data["visible"]) == g.MAX_VISIBLE_TERMS
        assert answer == str(g.sequence_terms(data["rule"], g.MAX_VISIBLE_TERMS + 1)[-1])


def test_word_search_grid_size_is_capped():
    data, _ = g.gen_word_search(random.Random(0), WordSearchConfig(answer="KEY", grid_size=5000))
    assert data["grid_size"] == g.MAX_GRID_SIZE
    assert len(data["grid"]) == g.MAX_GRID_SIZE


def test_word_search_grid_grows_to_fit_answer():
    data, answer = g.gen_word_search(random.Random(0), WordSearchConfig(answer="ABCDEFGHIJ", grid_size=1))
    assert data["grid_size"] == 4
    flat = [ch for row in data["grid"] for ch in row]
    assert "".join(flat[p] for p in data["answer_positions"]) == answer


def test_word_search_negative_counts_place_nothing():
    data, answer = g.gen_word_search(
        random.Random(1), WordSearchConfig(answer="KEY", word_count=-1, max_attempts=-5))
    assert data["words"] == []
    assert answer == "KEY"
