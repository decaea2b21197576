# -*- coding: utf-8 -*-
"""Role gate for API views (bearer token → Account)."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import request
from flask_jwt_extended import get_jwt_identity, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from ..errors import ForbiddenError, UnauthorizedError
from ..extensions import db
from ..models import Account
from ..roles import Role

logger = logging.getLogger(__name__)


def _load_caller() -> Account:
    try:
        verify_jwt_in_request()
        identity = get_jwt_identity()
        account_id = int(identity)
    except (JWTExtendedException, PyJWTError, TypeError, ValueError):
        raise UnauthorizedError()

    account = db.session.get(Account, account_id)
    if account is None or not account.is_active:
        raise UnauthorizedError()
    return account


def authorize(*roles: Role, message: Optional[str] = None):
    """Require a valid bearer token and, if ``roles`` are given, one of them.

    The resolved Account is stored as ``request.account`` for the view.
    Missing or invalid token → 401; role outside ``roles`` → 403 with
    ``message``.
    """
    allowed = {Role(r).value for r in roles}

    def decorator(view):
        @wraps(view)
        def decorated_function(*args, **kwargs):
            account = _load_caller()
            if allowed and account.role not in allowed:
                logger.warning(
                    "account %s (%s) refused on %s %s", account.id, account.role, request.method, request.path
                )
                raise ForbiddenError(message)
            request.account = account  # type: ignore[attr-defined]
            return view(*args, **kwargs)

        return decorated_function

    return decorator
