"""Parse trace event helper utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class ParseEventKind(str, Enum):
    """Enumerated parser trace event kinds."""

    ENTER = "enter"
    LEAVE = "leave"
    PUSH_OPERAND = "push_operand"
    PUSH_OPERATOR = "push_operator"
    APPLY = "apply"
    REDUCE = "reduce"


def _utc_iso_z_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def new_event(
    kind: ParseEventKind | str,
    message: str,
    *,
    data: dict | None = None,
) -> dict:
    """Create a new trace event dict with id and UTC timestamp."""

    return {
        "event_id": uuid4().hex,
        "ts": _utc_iso_z_now(),
        "kind": ParseEventKind(kind).value,
        "message": message,
        "data": data,
    }
