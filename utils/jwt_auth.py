# utils/jwt_auth.py
from functools import wraps

from flask_jwt_extended import (
    JWTManager, create_access_token, get_jwt_identity, verify_jwt_in_request,
)

from utils.errors import error_response

jwt = JWTManager()


@jwt.unauthorized_loader
def _missing_token(reason):
    return error_response("Token de acesso não fornecido", 401)


@jwt.invalid_token_loader
def _invalid_token(reason):
    return error_response("Token de acesso inválido", 401)


@jwt.expired_token_loader
def _expired_token(jwt_header, jwt_payload):
    return error_response("Token de acesso inválido", 401)


@jwt.revoked_token_loader
def _revoked_token(jwt_header, jwt_payload):
    return error_response("Token de acesso inválido", 401)


@jwt.needs_fresh_token_loader
def _stale_token(jwt_header, jwt_payload):
    return error_response("Token de acesso inválido", 401)


@jwt.token_verification_failed_loader
def _claims_rejected(jwt_header, jwt_payload):
    return error_response("Token de acesso inválido", 401)


@jwt.user_lookup_error_loader
def _unknown_user(jwt_header, jwt_payload):
    return error_response("Token de acesso inválido", 401)


def issue_token(policial):
    return create_access_token(
        identity=policial["id"],
        additional_claims={"matricula": policial["matricula"], "posto": policial["posto"]},
    )


def current_officer_id():
    return get_jwt_identity()


def auth_required(fn):
    """
    Use: @auth_required on any route that needs `Authorization: Bearer <token>`.
    Token failures are answered by the loaders above.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        verify_jwt_in_request()
        return fn(*args, **kwargs)
    return wrapper
