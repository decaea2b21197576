"""Pydantic v2 contracts for request create/update payloads."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PayloadSchema(BaseModel):
    """Base schema for client payloads: strips strings, drops unknown keys.

    Clients may send extra request-specific fields; only the stored
    columns are kept.
    """

    model_config = ConfigDict(extra='ignore', str_strip_whitespace=True, populate_by_name=True)


class RequestItemSchema(PayloadSchema):
    """One line item of a request."""

    name: str = Field(min_length=1, max_length=255)
    quantity: int = Field(default=1, ge=1, le=100000)


class RequestCreateSchema(PayloadSchema):
    """Contract for request creation.

    ``employeeId`` is left untyped: it only matters for administrators
    and is resolved in the service once the caller's role is known.
    Everyone else is bound to the employee linked to their own account,
    whatever value they send.
    """

    type: str = Field(min_length=1, max_length=64)
    status: Optional[str] = Field(default=None, min_length=1, max_length=32)
    description: Optional[str] = Field(default=None, max_length=5000)
    employee_id: Optional[Any] = Field(default=None, alias='employeeId')
    items: Optional[List[RequestItemSchema]] = None

    def record_fields(self) -> Dict[str, Any]:
        """Columns of the Request row itself (no items, no employee)."""
        return self.model_dump(exclude={'items', 'employee_id'}, exclude_none=True)


class RequestUpdateSchema(PayloadSchema):
    """Partial update contract. Only keys present in the body are applied.

    ``items``, when present, replaces the whole item set.
    """

    # No Optional on type/status: an explicit null fails validation,
    # an omitted key keeps the stored value.
    type: str = Field(default=None, min_length=1, max_length=64)
    status: str = Field(default=None, min_length=1, max_length=32)
    description: Optional[str] = Field(default=None, max_length=5000)
    employee_id: int = Field(default=None, alias='employeeId', ge=1)
    items: List[RequestItemSchema] = Field(default=None)

    def record_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude={'items'}, exclude_unset=True)

    @property
    def replaces_items(self) -> bool:
        return 'items' in self.model_fields_set
