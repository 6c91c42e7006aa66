# utils/kv_store.py
import copy
import logging

from sqlalchemy.orm.attributes import flag_modified

from models import db, KVEntry
from utils.errors import Conflict

logger = logging.getLogger(__name__)


class KVStore:
    """Generic string-keyed store on top of the kv_store table.

    No transactions and no concurrency control: every set() commits on its
    own and the last writer of a key wins. Storage errors are not caught here.
    """

    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def get(self, key):
        entry = self.session.get(KVEntry, key)
        if entry is None:
            return None
        return copy.deepcopy(entry.value)

    def set(self, key, value):
        entry = self.session.get(KVEntry, key)
        if entry is None:
            self.session.add(KVEntry(key=key, value=value))
        else:
            entry.value = value
            flag_modified(entry, "value")
        self.session.commit()

    def delete(self, key):
        entry = self.session.get(KVEntry, key)
        if entry is not None:
            self.session.delete(entry)
            self.session.commit()

    def get_by_prefix(self, prefix):
        entries = self.session.query(KVEntry).filter(KVEntry.key.startswith(prefix, autoescape=True)).all()
        # LIKE is case-insensitive on SQLite
        return [copy.deepcopy(e.value) for e in entries if e.key.startswith(prefix)]


class UniqueIndex:
    """`<namespace>:<value> -> owner id` keys kept next to the primary records.

    Writes are not atomic with the primary record; a crash in between can
    leave a dangling entry, which claim() treats as taken.
    """

    def __init__(self, store, namespace, conflict_message="Valor já existe"):
        self.store = store
        self.namespace = namespace
        self.conflict_message = conflict_message

    def key(self, value):
        return f"{self.namespace}:{value}"

    def lookup(self, value):
        return self.store.get(self.key(value))

    def claim(self, value, owner_id):
        current = self.lookup(value)
        if current is not None and current != owner_id:
            raise Conflict(self.conflict_message)
        self.store.set(self.key(value), owner_id)

    def release(self, value, owner_id):
        # only the owner may drop its entry
        if self.lookup(value) == owner_id:
            self.store.delete(self.key(value))

    def move(self, old_value, new_value, owner_id):
        if old_value == new_value:
            return
        self.claim(new_value, owner_id)
        if old_value is not None:
            self.release(old_value, owner_id)
        logger.debug("index %s moved %s -> %s for %s", self.namespace, old_value, new_value, owner_id)
