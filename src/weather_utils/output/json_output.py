from __future__ import annotations

import json
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel


def _serialize(obj: Any) -> Any:
    """Convert *obj* into plain JSON types.

    Pydantic models are dumped in JSON mode with ``exclude_none=True`` so
    enum tags become their string values.  Dicts, lists and tuples are
    walked recursively.
    """
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {str(k): _serialize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_serialize(item) for item in obj]
    return obj


def _now() -> str:
    return datetime.now(UTC).isoformat()


def format_json_response(*, data: Any, command: str) -> str:
    """Return the success envelope ``{"ok": true, "command", "data", "timestamp"}``."""
    envelope: dict[str, Any] = {
        "ok": True,
        "command": command,
        "data": _serialize(data),
        "timestamp": _now(),
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False)


def format_json_error(*, code: str, message: str, command: str, **extra: Any) -> str:
    """Return the error envelope.

    ``{"ok": false, "command", "error": {"code", "message", ...extra}, "timestamp"}``
    """
    envelope: dict[str, Any] = {
        "ok": False,
        "command": command,
        "error": {"code": code, "message": message, **_serialize(extra)},
        "timestamp": _now(),
    }
    return json.dumps(envelope, indent=2, ensure_ascii=False)
