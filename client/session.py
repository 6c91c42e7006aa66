# client/session.py
import json
import logging

logger = logging.getLogger(__name__)

USER_KEY = "bo_user"
TOKEN_KEY = "bo_token"


class SessionContext:
    """Who is logged in on this client.

    Built once at start-up and passed to whoever needs it. Restores the
    previous officer/token from storage; unreadable data is wiped.
    No expiry or revocation checks.
    """

    def __init__(self, storage):
        self.storage = storage
        self.officer = None
        self.token = None
        self._restore()

    def _restore(self):
        saved_user = self.storage.get_item(USER_KEY)
        saved_token = self.storage.get_item(TOKEN_KEY)
        if not (saved_user and saved_token):
            return
        try:
            officer = json.loads(saved_user)
            if not isinstance(officer, dict):
                raise ValueError("officer snapshot is not an object")
        except ValueError as e:
            logger.error("Erro ao carregar sessão salva: %s", e)
            self.storage.remove_item(USER_KEY)
            self.storage.remove_item(TOKEN_KEY)
            return
        self.officer = officer
        self.token = saved_token

    @property
    def is_authenticated(self):
        return self.officer is not None and self.token is not None

    def establish(self, officer, token):
        officer = {k: v for k, v in officer.items() if k != "senha"}
        self.officer = officer
        self.token = token
        self.storage.set_item(USER_KEY, json.dumps(officer, ensure_ascii=False))
        self.storage.set_item(TOKEN_KEY, token)

    def invalidate(self):
        self.officer = None
        self.token = None
        self.storage.remove_item(USER_KEY)
        self.storage.remove_item(TOKEN_KEY)
