import traceback
import time
from typing import Any, Dict, List


def add_traceback(obj, step: str, info: str, *, with_stack: bool = False) -> None:
    """
    Append a trace event to `obj.traceback_info`.

    Parameters
    ----------
    obj        : any object that owns a `traceback_info` list.
    step, info : short label and free-form description.
    with_stack : include trimmed call-stack (default False).
    """
    if not hasattr(obj, "traceback_info"):
        raise AttributeError(f"{obj!r} has no attribute 'traceback_info'")

    event: Dict[str, Any] = {
        "step":       step,
        "info":       info,
        "owner":      type(obj).__name__,
        "timestamp":  time.time(),
    }
    if with_stack:
        # omit the last frame (this helper)
        event["stack"] = traceback.format_stack()[:-1]

    obj.traceback_info.append(event)


def format_trace(obj, *, last: int = 5) -> str:
    """Render the last `last` events of `obj.traceback_info`, one per line."""
    events: List[Dict[str, Any]] = obj.traceback_info[-last:] if last else []
    return "\n".join(f"  {e['step']}: {e['info']}" for e in events)
