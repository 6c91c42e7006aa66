# utils/auth.py
# Server-side identity provider: password hashes live under credencial:<id>,
# never inside the policial record.
from werkzeug.security import generate_password_hash, check_password_hash

from utils.errors import ValidationError
from utils.kv_store import UniqueIndex

CREDENTIAL_PREFIX = "credencial:"


def email_index(store):
    return UniqueIndex(store, "credencial:email", "email já registado")


def create_credentials(store, officer_id, email, password):
    index = email_index(store)
    if index.lookup(email.lower()) is not None:
        # surfaced like the old provider error, as a 400
        raise ValidationError("Erro ao criar usuário: email já registado")
    index.claim(email.lower(), officer_id)
    store.set(f"{CREDENTIAL_PREFIX}{officer_id}", {
        "email": email,
        "password": generate_password_hash(password, method='pbkdf2:sha256'),
    })


def check_credentials(store, officer_id, password):
    cred = store.get(f"{CREDENTIAL_PREFIX}{officer_id}")
    if not cred or not cred.get("password"):
        return False
    return check_password_hash(cred["password"], password)
