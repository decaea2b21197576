"""Routes for the employee requests API.

Each route declares who may call it with ``@authorize``; the logic lives
in :mod:`hr_requests.services.requests_service`.
"""

from __future__ import annotations

from typing import Type, TypeVar

from flask import Response, jsonify, request
from pydantic import BaseModel, ValidationError

from ..auth import authorize
from ..errors import BadRequestError
from ..roles import Role
from ..schemas import RequestCreateSchema, RequestUpdateSchema
from ..services.requests_service import (
    create_request,
    delete_request,
    get_request,
    list_requests,
    list_requests_for_employee,
    update_request,
)
from . import bp

SchemaT = TypeVar('SchemaT', bound=BaseModel)


def _parse_body(schema: Type[SchemaT]) -> SchemaT:
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise BadRequestError('Request body must be a JSON object')
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError('Validation failed', details=e.errors(include_url=False, include_context=False))


@bp.post('')
@authorize(Role.ADMIN, Role.USER, message='Only Admin or User can create requests')
def api_requests_create() -> Response:
    """Create a request (and its items) for the caller or, for admins, any employee."""
    payload = _parse_body(RequestCreateSchema)
    req = create_request(request.account, payload)
    return jsonify(req.to_dict()), 201


@bp.get('')
@authorize(Role.ADMIN)
def api_requests_list() -> Response:
    """All requests with items and employee (admin only)."""
    return jsonify(list_requests(request.account)), 200


@bp.get('/<int:request_id>')
@authorize()
def api_requests_get(request_id: int) -> Response:
    return jsonify(get_request(request.account, request_id)), 200


@bp.get('/employee/<int:employee_id>')
@authorize()
def api_requests_by_employee(employee_id: int) -> Response:
    """Requests of one employee; staff may only ask for their own."""
    return jsonify(list_requests_for_employee(request.account, employee_id)), 200


@bp.put('/<int:request_id>')
@authorize(Role.ADMIN)
def api_requests_update(request_id: int) -> Response:
    """Partial update (admin only). ``items`` replaces the whole item set."""
    payload = _parse_body(RequestUpdateSchema)
    req = update_request(request.account, request_id, payload)
    return jsonify(req.to_dict()), 200


@bp.delete('/<int:request_id>')
@authorize(Role.ADMIN)
def api_requests_delete(request_id: int) -> Response:
    return jsonify(delete_request(request.account, request_id)), 200
