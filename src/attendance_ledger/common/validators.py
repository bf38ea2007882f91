from __future__ import annotations

from ..core.constants import U64_MAX
from ..core.exceptions import ValidationError


def require_u64(value: object, field_name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an unsigned 64-bit integer")
    if value < 0 or value > U64_MAX:
        raise ValidationError(f"{field_name} is out of range")
    return value


def require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError(f"{field_name} must be valid UTF-8 text") from None
    return value
