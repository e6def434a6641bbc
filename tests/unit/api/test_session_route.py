from tests.unit.fakes.identity import id_token_for


def test_create_session_sets_http_only_cookie(client, identity):
    response = client.post("/api/auth/session", json={"idToken": id_token_for("U")})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    set_cookie = response.headers["set-cookie"].lower()
    assert set_cookie.startswith("session=session:u")
    assert "httponly" in set_cookie
    assert "samesite=strict" in set_cookie
    assert "max-age=1209600" in set_cookie
    assert "path=/" in set_cookie
    # not production
    assert "secure" not in set_cookie
    assert client.cookies.get("session") == "session:U"


def test_create_session_without_token_is_bad_request(client):
    response = client.post("/api/auth/session", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "ID token is required"}


def test_create_session_with_rejected_token_is_unauthorized(client):
    response = client.post("/api/auth/session", json={"idToken": "forged"})

    assert response.status_code == 401
    assert response.json()["error"].startswith("Failed to create session:")
    assert "set-cookie" not in response.headers


def test_delete_session_always_succeeds(client):
    response = client.delete("/api/auth/session")

    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_delete_session_clears_existing_cookie(client):
    client.post("/api/auth/session", json={"idToken": id_token_for("U")})

    response = client.delete("/api/auth/session")

    assert response.json() == {"success": True}
    assert "max-age=0" in response.headers["set-cookie"].lower()
    assert client.cookies.get("session") is None


def test_create_session_with_malformed_json_is_unauthorized(client):
    response = client.post(
        "/api/auth/session",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 401
    assert set(response.json()) == {"error"}
    assert response.json()["error"].startswith("Failed to create session:")
    assert "set-cookie" not in response.headers


def test_create_session_with_non_string_token_is_unauthorized(client):
    response = client.post("/api/auth/session", json={"idToken": 123})

    assert response.status_code == 401
    assert set(response.json()) == {"error"}
    assert response.json()["error"].startswith("Failed to create session:")
