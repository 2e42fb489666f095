from __future__ import annotations

from flask import jsonify, request


def ok(data=None, status: int = 200, **meta):
    payload = {"success": True, "data": data}
    if meta:
        payload.update(meta)
    return jsonify(payload), status


def fail(message: str = "Solicitud inválida", status: int = 400, code: str | None = None):
    err = {"message": message}
    if code:
        err["code"] = code
    return jsonify({"success": False, "error": err}), status


def json_body() -> dict:
    """Request JSON (or form data) as a plain dict; never raises on bad bodies."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict() if request.form else {}
