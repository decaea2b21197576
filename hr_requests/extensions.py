"""
Flask extension objects.

They are created unbound here and attached to the application in
create_app() (see hr_requests/__init__.py). Keeping them in a separate
module avoids circular imports and makes testing easier.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from flask import Flask
from flask_jwt_extended import JWTManager
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import Session

db = SQLAlchemy()
jwt = JWTManager()


@contextmanager
def transaction() -> Iterator[Session]:
    """Run a block of writes as one unit: commit on exit, rollback on error."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise


def init_extensions(app: Flask) -> None:
    """Init all Flask extensions in one place."""
    db.init_app(app)
    jwt.init_app(app)
