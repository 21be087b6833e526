import pytest

from activity_service.domain.entities import Role, User
from activity_service.infrastructure.security import TokenCodec, get_token_codec
from activity_service.interfaces.http.authz import extract_token

PROTECTED = [
    ("get", "/activities"),
    ("post", "/activities"),
    ("put", "/activities/1"),
    ("post", "/activities/1/join"),
]

@pytest.mark.parametrize("method,path", PROTECTED)
def test_no_token(client, method, path):
    """Missing Authorization header is 401"""
    response = getattr(client, method)(path)
    assert response.status_code == 401
    assert "token" in response.json()["message"]

@pytest.mark.parametrize("header", ["Bearer", "Bearer ", "token-without-scheme"])
def test_header_without_token(client, header):
    """A header with nothing after the scheme counts as missing"""
    response = client.get("/activities", headers={"Authorization": header})
    assert response.status_code == 401

@pytest.mark.parametrize("method,path", PROTECTED)
def test_invalid_token(client, method, path):
    response = getattr(client, method)(path, headers={"Authorization": "Bearer invalid_token"})
    assert response.status_code == 403
    assert "invalid token" in response.json()["message"]

def test_expired_token(client):
    """Expired tokens are rejected with 403"""
    settings_codec = get_token_codec()
    expired = TokenCodec(settings_codec.secret_key, settings_codec.algorithm, minutes=-5).issue(
        User(id=1, username="admin", password="pw", role=Role.ADMIN)
    )
    response = client.get("/activities", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 403

def test_any_role_can_list(client, admin_headers, student_headers):
    assert client.get("/activities", headers=admin_headers).status_code == 200
    assert client.get("/activities", headers=student_headers).status_code == 200

def test_student_cannot_create(client, student_headers):
    """Role mismatch is 403 and names the required role"""
    response = client.post(
        "/activities",
        json={"title": "Seminar", "description": "AI", "date": "2024-12-01"},
        headers=student_headers
    )
    assert response.status_code == 403
    assert "admin" in response.json()["message"]

def test_admin_cannot_join(client, admin_headers):
    response = client.post("/activities/1/join", headers=admin_headers)
    assert response.status_code == 403
    assert "student" in response.json()["message"]

def test_foreign_scheme_token_is_verified(client):
    """Whatever follows the scheme is checked as a token, so junk is 403"""
    response = client.get("/activities", headers={"Authorization": "Basic abc"})
    assert response.status_code == 403
    assert "invalid token" in response.json()["message"]

def test_scheme_name_is_not_checked(client, student_headers):
    """A valid token is accepted after any scheme word"""
    token = student_headers["Authorization"].split(" ")[1]
    response = client.get("/activities", headers={"Authorization": f"Token {token}"})
    assert response.status_code == 200

@pytest.mark.parametrize("header,expected", [
    (None, ""),
    ("Bearer", ""),
    ("Bearer ", ""),
    ("Bearer abc", "abc"),
    ("Basic abc", "abc"),
    ("Bearer  abc", ""),
])
def test_extract_token(header, expected):
    assert extract_token(header) == expected
