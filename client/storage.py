# client/storage.py
import json
import logging
import os

logger = logging.getLogger(__name__)


class Storage:
    """String key/value storage surviving restarts, like a browser's localStorage.

    Values are strings; callers serialize. With `path=None` nothing is
    written to disk.
    """

    def __init__(self, path=None):
        self.path = path
        self._items = self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read client storage %s: %s", self.path, e)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)} if isinstance(data, dict) else {}

    def _flush(self):
        if not self.path:
            return
        os.makedirs(os.path.dirname(os.path.abspath(self.path)), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._items, f, ensure_ascii=False, indent=2)

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = value
        self._flush()

    def remove_item(self, key):
        if self._items.pop(key, None) is not None:
            self._flush()
