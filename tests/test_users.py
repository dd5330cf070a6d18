"""User signup, login and logout tests."""

from realty.models.user import User, UserToken


def token_count(db, user_id) -> int:
    return db.query(UserToken).filter(UserToken.user_id == user_id).count()


def test_signup_returns_token_and_user(client, db):
    """Test signup returns the user and a token in the x-auth header."""
    response = client.post("/users", json={"email": "a@a.com", "password": "123abc!"})

    assert response.status_code == 200
    token = response.headers.get("x-auth")
    assert token
    body = response.json()
    assert body["email"] == "a@a.com"
    assert "id" in body
    assert "password" not in body
    assert "passwordHash" not in body
    assert "password_hash" not in body
    assert "tokens" not in body

    me = client.get("/users/me", headers={"x-auth": token})
    assert me.status_code == 200
    assert me.json()["email"] == "a@a.com"

    user = db.query(User).filter(User.email == "a@a.com").first()
    assert user is not None
    assert user.password_hash != "123abc!"
    assert [t.token for t in user.tokens] == [token]


def test_signup_normalizes_email(client, db):
    """Test emails are trimmed and lowercased before storage."""
    response = client.post("/users", json={"email": "  Mixed@Example.COM ", "password": "secret1"})
    assert response.status_code == 200
    assert response.json()["email"] == "mixed@example.com"


def test_signup_duplicate_email(client, seed):
    """Test signup with an existing email fails, ignoring case."""
    response = client.post(
        "/users", json={"email": seed.users[0].email.upper(), "password": "123456"}
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already registered"
    assert "x-auth" not in response.headers


def test_signup_validation_errors(client, db):
    """Test short passwords and malformed emails are rejected with 400."""
    short = client.post("/users", json={"email": "te@te.com", "password": "123"})
    assert short.status_code == 400

    bad_email = client.post("/users", json={"email": "not-an-email", "password": "123456"})
    assert bad_email.status_code == 400

    missing = client.post("/users", json={"email": "te@te.com"})
    assert missing.status_code == 400

    assert db.query(User).count() == 0


def test_get_me(client, auth_headers):
    """Test getting current user info."""
    response = client.get("/users/me", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"id": str(auth_headers.user_id), "email": auth_headers.email}


def test_get_me_unauthenticated(client, seed):
    """Test /users/me without a usable token is a 401 with an empty body."""
    missing = client.get("/users/me")
    assert missing.status_code == 401
    assert missing.content == b""

    garbage = client.get("/users/me", headers={"x-auth": "not-a-token"})
    assert garbage.status_code == 401
    assert garbage.content == b""


def test_login(client, db, seed):
    """Test login returns a new token and appends it to the collection."""
    user = seed.users[1]
    before = token_count(db, user.id)

    response = client.post(
        "/users/login", json={"email": user.email, "password": seed.passwords[1]}
    )

    assert response.status_code == 200
    token = response.headers.get("x-auth")
    assert token
    assert token != seed.tokens[1]
    assert response.json()["email"] == user.email
    assert token_count(db, user.id) == before + 1

    tokens = [t.token for t in db.query(UserToken).filter(UserToken.user_id == user.id)]
    assert token in tokens
    assert seed.tokens[1] in tokens


def test_login_wrong_password(client, db, seed):
    """Test login with a wrong password leaves the token collection alone."""
    user = seed.users[1]
    before = token_count(db, user.id)

    response = client.post("/users/login", json={"email": user.email, "password": "wrongpass"})

    assert response.status_code == 400
    assert "x-auth" not in response.headers
    assert token_count(db, user.id) == before


def test_login_unknown_email(client, seed):
    """Test login with an unknown email."""
    response = client.post("/users/login", json={"email": "nobody@example.com", "password": "x"})
    assert response.status_code == 400
    assert "x-auth" not in response.headers


def test_logout_revokes_token(client, db, auth_headers):
    """Test logout removes the presented token so it stops working."""
    response = client.delete("/users/me/token", headers=auth_headers)
    assert response.status_code == 200
    assert response.content == b""

    assert token_count(db, auth_headers.user_id) == 0
    assert client.get("/users/me", headers=auth_headers).status_code == 401


def test_logout_twice_with_same_token(client, db, auth_headers):
    """Test a repeated logout with the revoked token is rejected by the auth gate."""
    assert client.delete("/users/me/token", headers=auth_headers).status_code == 200

    response = client.delete("/users/me/token", headers=auth_headers)

    assert response.status_code == 401
    assert response.content == b""
    assert token_count(db, auth_headers.user_id) == 0


def test_logout_keeps_other_tokens(client, db, seed):
    """Test logging out one session leaves the user's other sessions valid."""
    user = seed.users[0]
    login = client.post("/users/login", json={"email": user.email, "password": seed.passwords[0]})
    second_token = login.headers["x-auth"]

    response = client.delete("/users/me/token", headers={"x-auth": seed.tokens[0]})
    assert response.status_code == 200

    assert client.get("/users/me", headers={"x-auth": seed.tokens[0]}).status_code == 401
    assert client.get("/users/me", headers={"x-auth": second_token}).status_code == 200


def test_logout_requires_auth(client, seed):
    """Test logout without a token is rejected."""
    response = client.delete("/users/me/token")
    assert response.status_code == 401
