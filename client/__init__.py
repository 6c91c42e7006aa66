"""Client side of B.O. Digital: session, login fallback chain and request wrapper."""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

API_URL = os.getenv("BO_API_URL", "http://127.0.0.1:5000/api")
ANON_KEY = os.getenv("BO_ANON_KEY", "demo-anon-key")
STORAGE_PATH = os.getenv("BO_STORAGE_PATH", os.path.expanduser("~/.bo_digital/storage.json"))
DEMO_MODE = os.getenv("BO_DEMO_MODE", "0") == "1"


@dataclass
class ClientContext:
    storage: object
    session: object
    credentials: object
    auth: object
    api: object


def connect(base_url=None, storage_path=None, anon_key=None, demo_mode=None, http=None):
    """Build the client once at start-up; arguments left as None come from the environment."""
    from client.api_client import ApiClient
    from client.auth import default_resolver
    from client.credentials import CredentialStore
    from client.session import SessionContext
    from client.storage import Storage

    base_url = base_url or API_URL
    anon_key = anon_key or ANON_KEY
    storage = Storage(storage_path or STORAGE_PATH)
    session = SessionContext(storage)
    credentials = CredentialStore(storage)
    return ClientContext(
        storage=storage,
        session=session,
        credentials=credentials,
        auth=default_resolver(session, credentials, base_url, http=http, anon_key=anon_key),
        api=ApiClient(base_url, session, http=http, anon_key=anon_key,
                      demo_mode=DEMO_MODE if demo_mode is None else demo_mode),
    )
