"""Small request/response helpers shared by the JSON controllers."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from flask import current_app, jsonify, request

from ..core.exceptions import ValidationError
from .serialization import to_primitive


def json_body() -> dict:
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def pick(payload: dict, keys: Iterable[str]) -> dict:
    """Keep only the known keys that are present in the payload."""
    return {k: payload[k] for k in keys if k in payload}


def current_user_id() -> str:
    # No authentication: every request acts as the configured user.
    return str(current_app.config["CURRENT_USER_ID"])


def ok(value: Any, status: int = 200):
    return jsonify(to_primitive(value)), status


def not_found(what: str):
    return jsonify({"message": f"{what} not found"}), 404


def no_content():
    return "", 204


def query_int(name: str, default: int) -> int:
    raw: Optional[str] = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer") from None
