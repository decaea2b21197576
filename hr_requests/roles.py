"""Account roles."""

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "Admin"
    USER = "User"
