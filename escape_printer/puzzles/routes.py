# -*- coding: utf-8 -*-
"""
Puzzle Engine - Routes (Blueprint endpoints)

All endpoints answer with the same envelope:
    {"ok": bool, "error": {"code", "message"} | null, "data": ..., "request_id": str}
"""

from __future__ import annotations

from typing import Any, Dict
from uuid import uuid4

from flask import Blueprint, current_app, jsonify, request

from .core import GENERATORS, generate, generate_barcode
from .registry import describe


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------

def _build_response(ok: bool, *, data: Any, error: Dict[str, Any] | None, request_id: str):
    return jsonify({"ok": ok, "error": error, "data": data, "request_id": request_id})


def _error_response(code: str, message: str, request_id: str, status: int = 400):
    return _build_response(False, data=None, error={"code": code, "message": message}, request_id=request_id), status


def _json_object(request_id: str):
    """Return (payload, None) or (None, error_response)."""
    if not request.is_json:
        return None, _error_response("INVALID_REQUEST", "Request body must be JSON.", request_id)
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None, _error_response("INVALID_REQUEST", "Payload must be a JSON object.", request_id)
    return payload, None


# ---------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------

def init_routes(bp: Blueprint):
    """Attach all route handlers to the provided blueprint."""
    if getattr(bp, "_puzzles_inited", False):
        return bp
    bp._puzzles_inited = True

    @bp.route("/api/types", methods=["GET"])
    def api_types():
        request_id = str(uuid4())
        data = [describe(entry) for entry in GENERATORS.values()]
        return _build_response(True, data=data, error=None, request_id=request_id), 200

    @bp.route("/api/generate", methods=["POST"])
    def api_generate():
        request_id = str(uuid4())
        payload, err = _json_object(request_id)
        if err is not None:
            return err

        ptype = payload.get("type")
        config = payload.get("config") or {}
        if not ptype or not isinstance(ptype, str):
            return _error_response("INVALID_REQUEST", '"type" is required and must be a string.', request_id)
        if not isinstance(config, dict):
            return _error_response("INVALID_REQUEST", '"config" must be an object.', request_id)

        try:
            result = generate(ptype, config)
        except (TypeError, ValueError) as e:
            return _error_response("INVALID_REQUEST", f"Bad config for {ptype}: {e}", request_id)
        except Exception as e:
            current_app.logger.exception("[puzzles] generate %s failed: %s", ptype, e)
            return _error_response("GENERATION_FAILED", f"Generator {ptype} failed.", request_id, status=500)

        return _build_response(True, data=result.to_json(), error=None, request_id=request_id), 200

    @bp.route("/api/barcode", methods=["POST"])
    def api_barcode():
        request_id = str(uuid4())
        payload, err = _json_object(request_id)
        if err is not None:
            return err

        text = payload.get("text")
        if text is not None and not isinstance(text, (str, int)):
            return _error_response("INVALID_REQUEST", '"text" must be a string.', request_id)

        image = generate_barcode(
            str(text or ""),
            module_height=current_app.config.get("BARCODE_MODULE_HEIGHT", 10.0),
            font_size=current_app.config.get("BARCODE_FONT_SIZE", 10),
        )
        if image is None:
            current_app.logger.warning("[puzzles] barcode omitted for %r", text)
        return _build_response(True, data={"image": image}, error=None, request_id=request_id), 200

    return bp
