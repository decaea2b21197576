"""
Blueprint for the employee requests API.

Requests are created by staff (for themselves) or administrators (for
any employee) and carry a list of line items. Reading is limited to the
owner unless the caller is an administrator; update and delete are
administrator-only.

Registered in ``hr_requests/__init__.py`` under ``/api/requests``.
"""

from flask import Blueprint

bp = Blueprint('requests', __name__)

from . import routes  # noqa: F401,E402
