# frontend/dev_observability.py
# Session-scoped event timeline for the Projects page (shown in the DEV debug panel)

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

# Timeline is capped to keep session state small
MAX_EVENTS = 100


def now_iso() -> str:
    """Return current timestamp in ISO format."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def summarize_value(value: Any) -> Any:
    """
    Reduce a session value to something readable in the debug panel.

    - Project lists become their length and ids
    - Objects with a `mode` (form state) become the mode name plus target id
    - Pydantic models become their id
    - Anything else is returned as-is
    """
    if isinstance(value, list):
        ids = [getattr(item, "id", None) for item in value]
        if any(i is not None for i in ids):
            return {"count": len(value), "ids": ids}
        return value

    mode = getattr(value, "mode", None)
    if mode is not None:
        project = getattr(value, "project", None)
        return {
            "mode": getattr(mode, "value", str(mode)),
            "project_id": getattr(project, "id", None),
        }

    if hasattr(value, "model_dump") and hasattr(value, "id"):
        return {"id": value.id}

    return value


def track_event(session_state: dict, event_name: str, details: Optional[Dict[str, Any]] = None) -> None:
    """
    Append an event to the session event timeline.

    Args:
        session_state: Streamlit session_state (or a plain dict in tests)
        event_name: Short name, e.g. "project_deleted", "form_opened"
        details: Optional context, summarized before storing
    """
    if "_dev_events" not in session_state:
        session_state["_dev_events"] = []

    event: Dict[str, Any] = {
        "ts": now_iso(),
        "name": event_name,
    }
    if details:
        event["details"] = {k: summarize_value(v) for k, v in details.items()}

    session_state["_dev_events"].append(event)

    if len(session_state["_dev_events"]) > MAX_EVENTS:
        session_state["_dev_events"] = session_state["_dev_events"][-MAX_EVENTS:]


def get_recent_events(session_state: dict, limit: int = 30) -> List[Dict[str, Any]]:
    """Most recent events first."""
    events = session_state.get("_dev_events", [])
    return list(reversed(events[-limit:]))


def clear_debug_history(session_state: dict) -> None:
    """Drop the timeline without touching page state."""
    if "_dev_events" in session_state:
        session_state["_dev_events"] = []


def snapshot_state(session_state: dict, keys_of_interest: List[str]) -> Dict[str, Any]:
    """Summarized snapshot of the given session keys."""
    snapshot: Dict[str, Any] = {}
    for key in keys_of_interest:
        if key in session_state:
            snapshot[key] = {"exists": True, "value": summarize_value(session_state[key])}
        else:
            snapshot[key] = {"exists": False}
    return snapshot


def export_snapshot_json(session_state: dict, keys_of_interest: List[str]) -> str:
    """Diagnostic snapshot plus recent events as formatted JSON."""
    export = {
        "timestamp": now_iso(),
        "state": snapshot_state(session_state, keys_of_interest),
        "recent_events": get_recent_events(session_state, limit=50),
    }
    return json.dumps(export, indent=2, default=str)
