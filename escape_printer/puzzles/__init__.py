# escape_printer/puzzles/__init__.py
# -*- coding: utf-8 -*-
"""
Puzzle Engine - Blueprint Factory

This module exposes `create_puzzles_bp()` which:
- Creates the Flask blueprint for the puzzle engine.
- Attaches route handlers from routes.py.

It also re-exports the two engine calls the game loop uses directly:
    from escape_printer.puzzles import generate, generate_barcode
    result = generate("MAZE_VERTICAL", {"answer": "EXIT"})

Usage (in your app factory):
    from escape_printer.puzzles import create_puzzles_bp
    app.register_blueprint(create_puzzles_bp(), url_prefix="/puzzles")
"""

from __future__ import annotations
from flask import Blueprint

from .core import generate, generate_barcode

__all__ = ["create_puzzles_bp", "generate", "generate_barcode"]


def create_puzzles_bp() -> Blueprint:
    """Create and return the blueprint for the puzzle engine."""
    bp = Blueprint("puzzles", __name__)

    # Attach routes
    from .routes import init_routes
    init_routes(bp)

    return bp
