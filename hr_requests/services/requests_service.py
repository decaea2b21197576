"""Service layer for employee requests.

Every function takes the calling ``Account`` first. Role gates for the
admin-only operations sit on the routes (``@authorize``); ownership rules
that depend on the data (a staff member may only see their own
employee's requests) are checked here.

Writes that touch both a request and its items run inside one
:func:`~hr_requests.extensions.transaction` scope, so a failure leaves
neither half behind.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import joinedload, selectinload

from ..errors import ForbiddenError, NotFoundError
from ..extensions import db, transaction
from ..models import Account, Employee, Request, RequestItem
from ..schemas import RequestCreateSchema, RequestItemSchema, RequestUpdateSchema

logger = logging.getLogger(__name__)

REQUEST_NOT_FOUND = 'Request not found'


def _with_items_and_employee():
    return (
        selectinload(Request.items),
        joinedload(Request.employee).joinedload(Employee.account),
    )


def _own_employee(caller: Account) -> Optional[Employee]:
    """Employee linked to the caller's account, or None."""
    return Employee.query.filter_by(account_id=caller.id).first()


def _build_items(items: List[RequestItemSchema]) -> List[RequestItem]:
    return [RequestItem(**item.model_dump()) for item in items]


def _parse_employee_id(value: Any) -> Optional[int]:
    """Integer id from a JSON number or digit string; None for anything else."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None


def _get_or_404(request_id: int, *options) -> Request:
    query = Request.query
    if options:
        query = query.options(*options)
    req = query.filter(Request.id == request_id).first()
    if req is None:
        raise NotFoundError(REQUEST_NOT_FOUND)
    return req


def create_request(caller: Account, payload: RequestCreateSchema) -> Request:
    """Create a request, bound to an employee, with its items.

    Administrators may name the employee via ``employeeId``; for
    everyone else (and for administrators who omit it) the request goes
    to the caller's own employee. A supplied ``employeeId`` from a
    non-admin is ignored.
    """
    if caller.is_admin and payload.employee_id:
        employee_id = _parse_employee_id(payload.employee_id)
        employee = db.session.get(Employee, employee_id) if employee_id is not None else None
        if employee is None:
            raise NotFoundError('Employee not found with provided ID')
    else:
        employee = _own_employee(caller)
        if employee is None:
            raise NotFoundError('Employee not found for this account')

    with transaction() as session:
        req = Request(**payload.record_fields(), employee_id=employee.id)
        if payload.items:
            req.items = _build_items(payload.items)
        session.add(req)

    logger.info(
        "request %s created by account %s for employee %s (%d items)",
        req.id, caller.id, employee.id, len(payload.items or []),
    )
    return req


def list_requests(caller: Account) -> List[Dict[str, Any]]:
    """All requests with their items and employee (and account)."""
    rows = Request.query.options(*_with_items_and_employee()).all()
    return [r.to_dict(include_items=True, include_employee=True) for r in rows]


def get_request(caller: Account, request_id: int) -> Dict[str, Any]:
    """One request with items and employee; staff only see their own."""
    req = _get_or_404(request_id, *_with_items_and_employee())

    if not caller.is_admin:
        employee = _own_employee(caller)
        if employee is None or req.employee_id != employee.id:
            raise ForbiddenError('Forbidden: Not your request')

    return req.to_dict(include_items=True, include_employee=True)


def list_requests_for_employee(caller: Account, employee_id: int) -> List[Dict[str, Any]]:
    """Requests of one employee with their items."""
    if not caller.is_admin:
        employee = _own_employee(caller)
        if employee is None or employee.id != employee_id:
            raise ForbiddenError('Forbidden: Not your requests')

    rows = (
        Request.query.options(selectinload(Request.items))
        .filter(Request.employee_id == employee_id)
        .all()
    )
    return [r.to_dict(include_items=True) for r in rows]


def update_request(caller: Account, request_id: int, payload: RequestUpdateSchema) -> Request:
    """Apply a partial update; ``items`` replaces the whole item set."""
    req = _get_or_404(request_id)

    fields = payload.record_fields()
    if 'employee_id' in fields and db.session.get(Employee, fields['employee_id']) is None:
        raise NotFoundError('Employee not found with provided ID')

    with transaction():
        for key, value in fields.items():
            setattr(req, key, value)
        if payload.replaces_items:
            # delete-orphan cascade removes the previous rows on flush
            req.items = _build_items(payload.items)

    logger.info(
        "request %s updated by account %s (fields=%s, items replaced=%s)",
        req.id, caller.id, sorted(fields), payload.replaces_items,
    )
    return req


def delete_request(caller: Account, request_id: int) -> Dict[str, Any]:
    """Delete a request together with its items."""
    req = _get_or_404(request_id)
    with transaction() as session:
        session.delete(req)
    logger.info("request %s deleted by account %s", request_id, caller.id)
    return {'message': 'Request deleted'}
