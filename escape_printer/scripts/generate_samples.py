# escape_printer/scripts/generate_samples.py
"""
Dump one sample of every puzzle type as JSON, for eyeballing payloads and for
feeding the receipt renderer by hand.

    python -m escape_printer.scripts.generate_samples --out samples --seed 7
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from escape_printer.puzzles import generate, generate_barcode
from escape_printer.puzzles.core import known_types

log = logging.getLogger(__name__)

# Named variants on top of one default sample per registered type
SAMPLE_CONFIGS: List[Dict[str, Any]] = [
    {"type": "MAZE_VERTICAL", "config": {"answer": "EXIT"}},
    {"type": "FOLDING", "config": {"code": "FOLD"}},
    {"type": "CIPHER", "config": {"text": "SECRET", "variant": "PIGPEN"}, "name": "CIPHER_PIGPEN"},
    {"type": "CIPHER", "config": {"text": "ICONS", "variant": "ICON"}, "name": "CIPHER_ICON"},
    {"type": "TACTILE", "config": {"text": "SOS", "variant": "MORSE"}, "name": "TACTILE_MORSE"},
    {"type": "ASCII", "config": {"answer": "KEY"}},
    {"type": "WORD_SEARCH", "config": {"answer": "CODE"}},
    {"type": "ANAGRAM", "config": {"answer": "TEST"}},
    {"type": "MICRO_TEXT", "config": {"answer": "HIDDEN"}},
]


def build_samples(seed: Optional[int] = None, with_barcode: bool = False) -> Dict[str, Dict[str, Any]]:
    plan = list(SAMPLE_CONFIGS)
    covered = {p["type"] for p in plan}
    plan += [{"type": t, "config": {}} for t in known_types() if t not in covered]

    out: Dict[str, Dict[str, Any]] = {}
    for i, item in enumerate(plan):
        name = item.get("name") or item["type"]
        config = dict(item["config"])
        if seed is not None:
            config["seed"] = seed + i
        result = generate(item["type"], config).to_json()
        if with_barcode:
            result["barcode"] = generate_barcode(result["answer"])
        out[name] = result
    return out


def main():
    parser = argparse.ArgumentParser(description="Write a JSON sample of every puzzle type.")
    parser.add_argument("--out", type=str, default=None, help="Directory for <TYPE>.json files (stdout if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Base seed for reproducible samples")
    parser.add_argument("--barcode", action="store_true", help="Attach a Code 128 data URI of each answer")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    samples = build_samples(seed=args.seed, with_barcode=args.barcode)

    if not args.out:
        print(json.dumps(samples, indent=2, ensure_ascii=False))
        return

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    for name, result in samples.items():
        (out_dir / f"{name}.json").write_text(json.dumps(result, indent=2, ensure_ascii=False), encoding="utf-8")
        log.info("wrote %s (answer=%s)", name, result["answer"])

if __name__ == "__main__":
    main()
