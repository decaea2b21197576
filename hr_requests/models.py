"""
Database models.

Account is the identity record (role lives here), Employee links an
Account to request ownership, Request is the main resource and owns its
RequestItem line items. ``to_dict()`` produces the JSON shape returned by
the API: camelCase foreign keys and capitalised keys for joined records.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from .extensions import db
from .roles import Role


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _iso(value) -> str | None:
    return value.isoformat() if value else None


class Account(db.Model):
    """Identity record. Only the role matters to this service."""

    __tablename__ = 'accounts'

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    role = db.Column(db.String(16), nullable=False, default=Role.USER.value)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'email': self.email,
            'role': self.role,
            'isActive': self.is_active,
            'createdAt': _iso(self.created_at),
        }

    def __repr__(self) -> str:
        return f"<Account {self.email} ({self.role})>"


class Employee(db.Model):
    """Employee record; one per Account is expected but not enforced."""

    __tablename__ = 'employees'
    __table_args__ = (
        db.Index('ix_employees_account_id', 'account_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    account_id = db.Column(db.Integer, db.ForeignKey('accounts.id'), nullable=False)
    employee_code = db.Column(db.String(32), nullable=True)
    position = db.Column(db.String(128), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    account = db.relationship('Account', lazy='joined')

    def to_dict(self, include_account: bool = False) -> Dict[str, Any]:
        data = {
            'id': self.id,
            'accountId': self.account_id,
            'employeeCode': self.employee_code,
            'position': self.position,
            'createdAt': _iso(self.created_at),
        }
        if include_account:
            data['Account'] = self.account.to_dict() if self.account else None
        return data


class Request(db.Model):
    """Employee request with its line items."""

    __tablename__ = 'requests'
    __table_args__ = (
        db.Index('ix_requests_employee_id', 'employee_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey('employees.id'), nullable=False)
    type = db.Column(db.String(64), nullable=False)
    status = db.Column(db.String(32), nullable=False, default='Pending')
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    employee = db.relationship('Employee', lazy='select')
    # Items belong to the request: replacing the list or deleting the
    # request removes the old rows.
    items = db.relationship(
        'RequestItem',
        back_populates='request',
        cascade='all, delete-orphan',
        order_by='RequestItem.id',
        lazy='select',
    )

    def to_dict(self, include_items: bool = False, include_employee: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'id': self.id,
            'employeeId': self.employee_id,
            'type': self.type,
            'status': self.status,
            'description': self.description,
            'createdAt': _iso(self.created_at),
            'updatedAt': _iso(self.updated_at),
        }
        if include_items:
            data['RequestItems'] = [item.to_dict() for item in self.items]
        if include_employee:
            data['Employee'] = self.employee.to_dict(include_account=True) if self.employee else None
        return data


class RequestItem(db.Model):
    """Line item of a request."""

    __tablename__ = 'request_items'
    __table_args__ = (
        db.Index('ix_request_items_request_id', 'request_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    request_id = db.Column(db.Integer, db.ForeignKey('requests.id'), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    quantity = db.Column(db.Integer, nullable=False, default=1)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)

    request = db.relationship('Request', back_populates='items')

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'requestId': self.request_id,
            'name': self.name,
            'quantity': self.quantity,
            'createdAt': _iso(self.created_at),
        }
