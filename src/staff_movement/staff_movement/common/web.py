from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_ERROR_STATUS = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (StoreError, 502),
)


def fail(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def current_role() -> Role:
    return Role(session.get("role", Role.STAFF.value))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "staff_id" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "staff_id" not in session:
            return fail("Please log in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("Administrator access required", 403)
        return view(*args, **kwargs)

    return wrapper


def json_errors(view):
    """Map domain errors to JSON responses; anything else is a logged 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except Exception as e:
            for exc_type, status in _ERROR_STATUS:
                if isinstance(e, exc_type):
                    return fail(str(e), status)
            logger.exception("Unhandled error in %s", view.__name__)
            return fail("Internal server error", 500)

    return wrapper
