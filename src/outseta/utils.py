from __future__ import annotations

import json
import os
from datetime import date, datetime, timezone
from typing import Any


def debug(message: str, *args: Any) -> None:
    try:
        debug_env = os.getenv("DEBUG", "")
        if "outseta" in debug_env:
            print(f"outseta: {message}", *args)
    except Exception:
        pass


def format_datetime(value: datetime) -> str:
    """Format a datetime the way the Outseta API (and JavaScript) expects.

    Aware values are converted to UTC, naive values are assumed to be UTC:
    ``2021-12-29T08:00:00.000Z``.
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def _json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_datetime(value)
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_json(data: Any) -> str:
    return json.dumps(data, default=_json_default)


__all__ = ["debug", "format_datetime", "dump_json"]
