"""
POST /api/v1/store: authenticated full read of the users table.
"""
import logging

from storefront import models
from storefront.services import user_service
from tests.helpers.auth import create_test_token, get_auth_headers

URL = "/api/v1/store"


def _reads_and_writes(statements):
    reads = [s for s in statements if s.lstrip().upper().startswith("SELECT")]
    writes = [s for s in statements if s.lstrip().split()[0].upper() in ("INSERT", "UPDATE", "DELETE")]
    return reads, writes


def test_missing_identity_is_unauthorized_and_queries_nothing(client, statements):
    response = client.post(URL, json={})
    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized"}
    assert statements == []


def test_invalid_token_is_unauthorized(client, statements):
    response = client.post(URL, json={}, headers=get_auth_headers("not-a-jwt"))
    assert response.status_code == 401
    assert statements == []


def test_token_without_subject_is_unauthorized(client):
    from jose import jwt
    from storefront.core.config import settings

    token = jwt.encode({"role": "admin"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    response = client.post(URL, json={}, headers=get_auth_headers(token))
    assert response.status_code == 401


def test_returns_all_users(client, db_session, auth_headers):
    db_session.add_all([
        models.User(full_name="First", phone="1"),
        models.User(full_name="Second", phone="2"),
    ])
    db_session.commit()

    response = client.post(URL, json={}, headers=auth_headers)
    assert response.status_code == 200
    assert [(u["full_name"], u["phone"]) for u in response.json()] == [("First", "1"), ("Second", "2")]


def test_reads_users_exactly_once_and_never_writes(client, auth_headers, statements):
    # A new-user shaped body is accepted but must not be inserted
    response = client.post(URL, json={"full_name": "Mallory", "phone": "0"}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == []

    reads, writes = _reads_and_writes(statements)
    assert len(reads) == 1
    assert "FROM users" in reads[0]
    assert writes == []


def test_query_failure_is_logged_not_leaked(client, auth_headers, monkeypatch, caplog):
    def explode(db, **kwargs):
        raise RuntimeError("connection to db-7.internal refused")

    monkeypatch.setattr(user_service, "get_all", explode)
    caplog.set_level(logging.ERROR, logger="api.store")

    response = client.post(URL, json={}, headers=auth_headers)
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert "db-7.internal" not in response.text
    assert "connection to db-7.internal refused" in caplog.text


def test_unparseable_body_is_internal_error(client, auth_headers, statements):
    headers = {**auth_headers, "Content-Type": "application/json"}
    response = client.post(URL, content=b"{not json", headers=headers)
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal Server Error"}
    assert statements == []


def test_identity_subject_is_free_form(client):
    response = client.post(URL, json={}, headers=get_auth_headers(create_test_token("user_2abcXYZ")))
    assert response.status_code == 200
