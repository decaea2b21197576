from datetime import timedelta

import pytest
from flask import jsonify, request
from flask_jwt_extended import create_access_token

from hr_requests.auth import authorize
from hr_requests.roles import Role


@pytest.fixture()
def guarded_app(app):
    @app.get("/_t/any")
    @authorize()
    def _any():
        return jsonify(id=request.account.id, role=request.account.role)

    @app.get("/_t/admin")
    @authorize(Role.ADMIN, message="Admins only")
    def _admin():
        return jsonify(ok=True)

    return app


def test_missing_token_is_401(guarded_app):
    rv = guarded_app.test_client().get("/_t/any")
    assert rv.status_code == 401


def test_garbage_token_is_401(guarded_app):
    rv = guarded_app.test_client().get("/_t/any", headers={"Authorization": "Bearer not-a-token"})
    assert rv.status_code == 401


def test_expired_token_is_401(guarded_app, make_account):
    acc = make_account()
    token = create_access_token(identity=str(acc.id), expires_delta=timedelta(seconds=-10))
    rv = guarded_app.test_client().get("/_t/any", headers={"Authorization": f"Bearer {token}"})
    assert rv.status_code == 401


def test_unknown_or_inactive_account_is_401(guarded_app, make_account, auth_headers):
    inactive = make_account(is_active=False)
    client = guarded_app.test_client()
    assert client.get("/_t/any", headers=auth_headers(inactive)).status_code == 401

    token = create_access_token(identity="9999")
    assert client.get("/_t/any", headers={"Authorization": f"Bearer {token}"}).status_code == 401


def test_caller_exposed_on_request(guarded_app, make_account, auth_headers):
    acc = make_account()
    acc_id = acc.id
    rv = guarded_app.test_client().get("/_t/any", headers=auth_headers(acc))
    assert rv.status_code == 200
    assert rv.get_json() == {"id": acc_id, "role": "User"}


def test_role_gate(guarded_app, make_account, auth_headers):
    client = guarded_app.test_client()

    rv = client.get("/_t/admin", headers=auth_headers(make_account(role=Role.USER)))
    assert rv.status_code == 403
    assert rv.get_json() == {"message": "Admins only"}

    rv = client.get("/_t/admin", headers=auth_headers(make_account(role=Role.ADMIN)))
    assert rv.status_code == 200
