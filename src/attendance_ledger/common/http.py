from __future__ import annotations

from flask import request
from werkzeug.exceptions import BadRequest

from ..core.exceptions import ValidationError

_MISSING = object()


def json_body() -> dict:
    """Parsed JSON object of the current request."""
    data = request.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be JSON")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def require_field(data: dict, field_name: str):
    value = data.get(field_name, _MISSING)
    if value is _MISSING:
        raise ValidationError(f"{field_name} is required")
    return value
