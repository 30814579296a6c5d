# escape_printer/puzzles/core.py
# -*- coding: utf-8 -*-
"""
Generation dispatcher.

`generate(type, config)` looks the type up in a registry built once at import
time, parses the raw config into that type's frozen config record, runs the
builder and wraps its `(data, answer)` pair into a `PuzzleResult`. Unknown
types never raise; they fall back to the plain TEXT generator.
"""

from __future__ import annotations

import logging
import random
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .barcodes import generate_barcode  # noqa: F401  (re-exported)
from .models import PuzzleResult
from .registry import get_puzzle_registry

log = logging.getLogger(__name__)

FALLBACK_TYPE = "TEXT"

GENERATORS = MappingProxyType({e["type"]: MappingProxyType(e) for e in get_puzzle_registry()})


def known_types():
    return list(GENERATORS)


def generate(ptype: Any, config: Optional[Mapping[str, Any]] = None,
             rng: Optional[random.Random] = None) -> PuzzleResult:
    """
    Build one puzzle. `rng` wins over `config["seed"]`; with neither, a fresh
    unseeded generator is used.
    """
    key = str(ptype or "").upper()
    entry = GENERATORS.get(key)
    if entry is None:
        log.info("unknown puzzle type %r, falling back to %s", ptype, FALLBACK_TYPE)
        key, entry = FALLBACK_TYPE, GENERATORS[FALLBACK_TYPE]

    cfg = entry["config"].from_mapping(config)
    data, answer = entry["builder"](rng or cfg.rng(), cfg)
    return PuzzleResult(type=key, answer=str(answer), data=data)
