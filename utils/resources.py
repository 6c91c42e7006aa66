# utils/resources.py
import uuid
from datetime import datetime, timezone

from utils.audit import parse_iso
from utils.errors import NotFound


def touch(previous=None):
    """Current UTC timestamp, never earlier than `previous`."""
    now = datetime.now(timezone.utc)
    if previous:
        try:
            prev = parse_iso(previous)
        except (TypeError, ValueError):
            prev = None
        if prev is not None and prev > now:
            return previous
    return now.isoformat()


class Resource:
    """List/create/read/update/delete for one entity stored as `<prefix>:<id>`.

    `defining_fields` tells records apart from other values sharing the
    prefix (index keys such as `boletim:numero:*`). `unique` maps a record
    field to the UniqueIndex enforcing it.
    """

    def __init__(self, store, prefix, defining_fields, not_found_message,
                 unique=None, created_field="criadoEm", updated_field="atualizadoEm"):
        self.store = store
        self.prefix = prefix
        self.defining_fields = defining_fields
        self.not_found_message = not_found_message
        self.unique = unique or {}
        self.created_field = created_field
        self.updated_field = updated_field

    def key(self, record_id):
        return f"{self.prefix}:{record_id}"

    def is_record(self, value):
        return isinstance(value, dict) and bool(value.get("id")) and all(
            value.get(f) for f in self.defining_fields
        )

    def list(self):
        return [v for v in self.store.get_by_prefix(f"{self.prefix}:") if self.is_record(v)]

    def create(self, data, record_id=None, stamp_updated=False):
        record_id = record_id or str(uuid.uuid4())
        now = touch()
        record = {"id": record_id, **data, self.created_field: now}
        if stamp_updated:
            record[self.updated_field] = now

        # claim unique values before the primary record so a conflict leaves nothing behind
        for field, index in self.unique.items():
            index.claim(record[field], record_id)
        self.store.set(self.key(record_id), record)
        return record

    def get(self, record_id):
        record = self.store.get(self.key(record_id))
        if not self.is_record(record):
            raise NotFound(self.not_found_message)
        return record

    def update(self, record_id, changes):
        existing = self.get(record_id)
        for field, index in self.unique.items():
            if field in changes:
                index.move(existing.get(field), changes[field], record_id)

        updated = {
            **existing,
            **changes,
            "id": record_id,
            self.updated_field: touch(existing.get(self.updated_field)),
        }
        self.store.set(self.key(record_id), updated)
        return updated

    def delete(self, record_id):
        existing = self.get(record_id)
        self.store.delete(self.key(record_id))
        for field, index in self.unique.items():
            if existing.get(field) is not None:
                index.release(existing[field], record_id)
        return existing
