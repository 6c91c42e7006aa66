# utils/errors.py
import logging
from functools import wraps

from flask import jsonify

from models import db

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status = 500

    def __init__(self, message, status=None):
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status


class ValidationError(ApiError):
    status = 400


class AuthError(ApiError):
    status = 401


class NotFound(ApiError):
    status = 404


class Conflict(ApiError):
    status = 409


def error_response(message, status):
    return jsonify({"error": message}), status


def handle_errors(default_message):
    """
    Use: @handle_errors("Erro ao buscar boletins")
    Known errors keep their status; anything else becomes a 500 with
    `default_message` and the real cause only in the server log.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except ApiError as e:
                return error_response(e.message, e.status)
            except Exception:
                db.session.rollback()
                logger.exception("%s failed", fn.__name__)
                return error_response(default_message, 500)
        return wrapper
    return decorator
