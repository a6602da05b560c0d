# citywheels/utils/payload.py
from __future__ import annotations

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

from ..errors import MissingFieldsError


def is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    # 0, False, None, пустые списки тоже считаем "не передано"
    return not value


def require_fields(payload: dict, fields: Iterable[str]) -> None:
    missing = {f: is_blank(payload.get(f)) for f in fields}
    if any(missing.values()):
        raise MissingFieldsError(missing)


def clean_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value).strip() or None


def as_int(value: Any, field: str) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        raise ValueError(f"Field {field} must be an integer")


def as_decimal(value: Any, field: str) -> Decimal | None:
    if value in (None, ""):
        return None
    try:
        return Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Field {field} must be a number")


def as_date(value: Any, field: str) -> dt.date | None:
    raw = (str(value).strip() if value is not None else "")
    if not raw:
        return None
    try:
        # "2024-05-01" или "2024-05-01T10:00:00"
        return dt.date.fromisoformat(raw[:10])
    except ValueError:
        raise ValueError(f"Field {field} must be an ISO date (YYYY-MM-DD)")
