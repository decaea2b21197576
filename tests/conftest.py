import itertools

import pytest
from flask_jwt_extended import create_access_token

from hr_requests import create_app
from hr_requests.config import TestingConfig
from hr_requests.extensions import db
from hr_requests.models import Account, Employee
from hr_requests.roles import Role

_seq = itertools.count(1)


@pytest.fixture()
def app():
    # Каждый тест получает свою in-memory базу
    a = create_app(TestingConfig)
    yield a
    with a.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session
        db.session.rollback()


@pytest.fixture()
def make_account(db_session):
    def _make(role=Role.USER, email=None, is_active=True):
        acc = Account(email=email or f"user{next(_seq)}@example.com", role=Role(role).value, is_active=is_active)
        db_session.add(acc)
        db_session.commit()
        return acc

    return _make


@pytest.fixture()
def make_employee(db_session, make_account):
    def _make(account=None, role=Role.USER, **kw):
        if account is None:
            account = make_account(role=role)
        emp = Employee(account_id=account.id, **kw)
        db_session.add(emp)
        db_session.commit()
        return emp

    return _make


@pytest.fixture()
def auth_headers(db_session):
    def _headers(account):
        token = create_access_token(identity=str(account.id), additional_claims={"role": account.role})
        return {"Authorization": f"Bearer {token}"}

    return _headers
