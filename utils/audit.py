# utils/audit.py
import logging
import uuid
from datetime import datetime, timezone

from constants import LOG_LIMIT

logger = logging.getLogger(__name__)

LOG_PREFIX = "log:"


def now_iso():
    return datetime.now(timezone.utc).isoformat()


def parse_iso(value):
    """ISO-8601 string to an aware datetime; a trailing `Z` and naive values mean UTC."""
    if isinstance(value, str) and value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)


def log_action(store, officer_id, acao, detalhes=None):
    """Append one immutable audit entry under `log:<id>`."""
    entry = {
        "id": str(uuid.uuid4()),
        "policialId": officer_id,
        "acao": acao,
        "timestamp": now_iso(),
        "detalhes": detalhes,
    }
    store.set(f"{LOG_PREFIX}{entry['id']}", entry)
    logger.info("Action logged: %s by %s (%s)", acao, officer_id, detalhes or "-")
    return entry


def _timestamp_of(entry):
    try:
        return parse_iso(entry["timestamp"])
    except (KeyError, TypeError, ValueError):
        return datetime.min.replace(tzinfo=timezone.utc)


def recent_logs(store, limit=LOG_LIMIT):
    logs = [e for e in store.get_by_prefix(LOG_PREFIX) if isinstance(e, dict) and e.get("id") and e.get("acao")]
    logs.sort(key=_timestamp_of, reverse=True)
    return logs[:limit]
