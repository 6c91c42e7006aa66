# client/auth.py
"""
Login resolution on the client.

Strategies are tried in order; each answers SUCCESS (session data found),
FAILURE (stop, credentials definitely rejected) or NEXT (no opinion, try
the next one). The default chain is remote API, local exact password,
local alternate passwords.
"""
import enum
import logging
import random
import string
import time
from dataclasses import dataclass
from typing import Optional

import requests

from client import ANON_KEY

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "pn2024"
LEGACY_PASSWORD = "123456"


class Outcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"
    NEXT = "next"


@dataclass
class AuthResult:
    outcome: Outcome
    officer: Optional[dict] = None
    token: Optional[str] = None

    @classmethod
    def next(cls):
        return cls(Outcome.NEXT)


def mint_local_token(now=None, rng=random):
    """Opaque `pn-session-<ms>-<9 base36 chars>`; nothing on the server checks it."""
    ms = int((now if now is not None else time.time()) * 1000)
    suffix = "".join(rng.choices(string.digits + string.ascii_lowercase, k=9))
    return f"pn-session-{ms}-{suffix}"


def strip_password(officer):
    return {k: v for k, v in officer.items() if k != "senha"}


class RemoteLogin:
    def __init__(self, base_url, http=None, anon_key=ANON_KEY, timeout=10, authoritative=False):
        self.base_url = base_url.rstrip("/")
        self.http = http or requests.Session()
        self.anon_key = anon_key
        self.timeout = timeout
        self.authoritative = authoritative

    def __call__(self, matricula, senha):
        try:
            resp = self.http.post(
                f"{self.base_url}/auth/login",
                json={"matricula": matricula, "password": senha},
                headers={"Authorization": f"Bearer {self.anon_key}"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.info("API não disponível, usando autenticação local... (%s)", e)
            return AuthResult.next()

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if not isinstance(data, dict):
            data = {}
        if resp.ok and data.get("access_token") and isinstance(data.get("policial"), dict):
            return AuthResult(Outcome.SUCCESS, strip_password(data["policial"]), data["access_token"])
        if resp.ok:
            logger.warning("Remote login answered %s without a usable session, ignoring it", resp.status_code)
            return AuthResult.next()

        if self.authoritative and resp.status_code in (401, 404):
            return AuthResult(Outcome.FAILURE)
        logger.info("Remote login answered %s, trying local credentials", resp.status_code)
        return AuthResult.next()


class LocalExactMatch:
    def __init__(self, credentials, mint=mint_local_token):
        self.credentials = credentials
        self.mint = mint

    def accepts(self, officer, senha):
        return officer.get("senha") == senha

    def __call__(self, matricula, senha):
        officer = self.credentials.find(matricula, lambda p: self.accepts(p, senha))
        if officer is None:
            return AuthResult.next()
        return AuthResult(Outcome.SUCCESS, strip_password(officer), self.mint())


class LocalAlternateMatch(LocalExactMatch):
    """Compatibility passwords: the default one, the badge in lower case, the legacy numeric one."""

    def accepts(self, officer, senha):
        return senha in (DEFAULT_PASSWORD, str(officer.get("matricula", "")).lower(), LEGACY_PASSWORD)


class AuthResolver:
    def __init__(self, session, strategies):
        self.session = session
        self.strategies = list(strategies)

    def login(self, matricula, senha):
        """True when some strategy accepted the credentials; never says why it failed."""
        if not matricula or not senha:
            return False
        for strategy in self.strategies:
            result = strategy(matricula, senha)
            if result.outcome is Outcome.SUCCESS:
                self.session.establish(result.officer, result.token)
                logger.info("Login de %s via %s", result.officer.get("matricula"), type(strategy).__name__)
                return True
            if result.outcome is Outcome.FAILURE:
                break
        return False

    def logout(self):
        self.session.invalidate()


def default_resolver(session, credentials, base_url, http=None, anon_key=ANON_KEY, authoritative=False):
    return AuthResolver(session, [
        RemoteLogin(base_url, http=http, anon_key=anon_key, authoritative=authoritative),
        LocalExactMatch(credentials),
        LocalAlternateMatch(credentials),
    ])
