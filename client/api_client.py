# client/api_client.py
import logging
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from client import ANON_KEY
from client.demo_data import MOCK_RESPONSES

logger = logging.getLogger(__name__)

DEMO_ERROR = "Sistema em modo demonstração - algumas funcionalidades podem estar limitadas"
DEMO_MESSAGES = {
    "POST": "Criado com sucesso (modo demo)",
    "PUT": "Atualizado com sucesso (modo demo)",
    "DELETE": "Deletado com sucesso (modo demo)",
}


@dataclass
class ApiResponse:
    data: Optional[Any] = None
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


class ApiClient:
    """Request wrapper used by every screen.

    Adds the bearer token from the session. When the backend cannot be
    reached it answers from the demo responses instead of failing, so an
    outage looks like (mostly empty) data.
    """

    def __init__(self, base_url, session, http=None, anon_key=ANON_KEY,
                 demo_mode=False, delay=0.5, sleep=time.sleep, timeout=10):
        self.base_url = base_url.rstrip("/")
        self.session = session
        self.http = http or requests.Session()
        self.anon_key = anon_key
        self.demo_mode = demo_mode
        self.delay = delay
        self.sleep = sleep
        self.timeout = timeout

    def _headers(self):
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.session.token or self.anon_key}",
        }

    def _demo(self, method, endpoint):
        if self.delay:
            self.sleep(self.delay)
        if endpoint in MOCK_RESPONSES:
            return ApiResponse(data=MOCK_RESPONSES[endpoint])
        if method in DEMO_MESSAGES:
            return ApiResponse(data={"message": DEMO_MESSAGES[method]})
        return ApiResponse(error=DEMO_ERROR)

    def request(self, method, endpoint, body=None):
        method = method.upper()
        if self.demo_mode:
            return self._demo(method, endpoint)

        try:
            resp = self.http.request(
                method, f"{self.base_url}{endpoint}", json=body, headers=self._headers(), timeout=self.timeout,
            )
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Network Error - falling back to demo mode: %s", e)
            if endpoint in MOCK_RESPONSES:
                return ApiResponse(data=MOCK_RESPONSES[endpoint])
            return ApiResponse(error=DEMO_ERROR)

        if not resp.ok:
            logger.error("API Error [%s]: %s", resp.status_code, data)
            message = data.get("error") if isinstance(data, dict) else None
            return ApiResponse(error=message or f"Erro {resp.status_code}")
        return ApiResponse(data=data)

    def get(self, endpoint):
        return self.request("GET", endpoint)

    def post(self, endpoint, body):
        return self.request("POST", endpoint, body)

    def put(self, endpoint, body):
        return self.request("PUT", endpoint, body)

    def delete(self, endpoint):
        return self.request("DELETE", endpoint)
