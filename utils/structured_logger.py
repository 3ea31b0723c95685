# utils/structured_logger.py

import json
from collections import Counter
from datetime import datetime, timezone
import threading
import shutil

from core.paths import STRUCT_LOG_DIR, STRUCT_LOG_FILE, STRUCT_LOG_ARCHIVE

LOG_DIR = STRUCT_LOG_DIR
LOG_FILE = STRUCT_LOG_FILE
ROTATED_DIR = STRUCT_LOG_ARCHIVE
MAX_BYTES = 5 * 1024 * 1024  # 5 MB before rotation
MAX_VALUE_CHARS = 200

# Reader event vocabulary -> outcome recorded with it
STEP_OUTCOMES = {
    "prompt_rejected": "retry",
    "value_accepted": "ok",
    "stream_exhausted": "error",
    "invalid_argument": "error",
    "reader_closed": "ok",
}

_lock = threading.Lock()


def _rotate_if_needed():
    try:
        if LOG_FILE.exists() and LOG_FILE.stat().st_size >= MAX_BYTES:
            ROTATED_DIR.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
            archived = ROTATED_DIR / f"reader_events_{timestamp}.ndjson"
            shutil.move(str(LOG_FILE), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def _clip(value):
    # user input is kept as typed, but long lines are cut
    if isinstance(value, str) and len(value) > MAX_VALUE_CHARS:
        return value[:MAX_VALUE_CHARS] + "…"
    return value


def log_event(reader_id: str, step: str, value=None, message: str | None = None, extra: dict | None = None) -> bool:
    """
    Appends one reader event as a single JSON line. Returns False when the log
    could not be written; a broken log never interrupts an ask call.
    """
    if step not in STEP_OUTCOMES:
        raise ValueError(f"Unknown reader event '{step}'")
    entry = {
        "reader_id": reader_id,
        "step": step,
        "outcome": STEP_OUTCOMES[step],
        "value": _clip(value),
        "message": message,
        "extra": extra or {},
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    with _lock:
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            _rotate_if_needed()
            with open(LOG_FILE, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            return False
    return True


def read_events(reader_id: str = None, step: str = None, limit: int = 100):
    """
    Reads the last `limit` events, optionally filtered by reader_id and step.
    """
    if not LOG_FILE.exists():
        return []

    results = []
    with open(LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if reader_id is not None and obj.get("reader_id") != reader_id:
                continue
            if step is not None and obj.get("step") != step:
                continue
            results.append(obj)
    return results if limit is None else results[-limit:]


def rejection_counts(reader_id: str) -> Counter:
    """How often each constraint rejected input for one reader, e.g. {"not_int": 2}."""
    events = read_events(reader_id=reader_id, step="prompt_rejected", limit=None)
    return Counter(e["extra"].get("reason", "unknown") for e in events)
