from .constants import ADMIN_EMAIL, PASSWORD, USER_EMAIL

ADMIN = {"email": ADMIN_EMAIL, "password": PASSWORD}
VIEWER = {"email": USER_EMAIL, "password": PASSWORD}


def _login(client, credentials) -> dict:
    response = client.post("/api/v1/users/login", json=credentials)
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _admin_headers(client) -> dict:
    client.post("/api/v1/users/admins", json=ADMIN)
    return _login(client, ADMIN)


def _viewer_headers(client) -> dict:
    client.post("/api/v1/users/", json=VIEWER)
    return _login(client, VIEWER)


def test_register_and_list_users(client):
    response = client.get("/api/v1/users/")
    assert response.status_code == 200
    assert response.json() == {"ok": False, "message": "No registered users yet.", "error": "Empty", "data": []}

    response = client.post("/api/v1/users/", json=VIEWER)
    assert response.status_code == 201
    assert response.json()["message"] == "User registration successful."

    body = client.get("/api/v1/users/").json()
    assert body["ok"] is True
    assert body["data"] == [{"email": VIEWER["email"], "is_admin": False, "logged_in": False}]


def test_registration_errors(client):
    client.post("/api/v1/users/", json=VIEWER)

    duplicate = client.post("/api/v1/users/", json=VIEWER)
    assert duplicate.status_code == 409
    assert duplicate.json()["detail"]["error"] == "DuplicateEmail"

    bad_domain = client.post("/api/v1/users/", json={"email": "x@yahoo.com", "password": "pw"})
    assert bad_domain.status_code == 422
    assert bad_domain.json()["detail"]["error"] == "InvalidEmailFormat"

    bad_admin = client.post("/api/v1/users/admins", json={"email": "x@gmail.com", "password": "pw"})
    assert bad_admin.status_code == 422
    assert bad_admin.json()["detail"]["error"] == "InvalidAdminEmailFormat"


def test_login(client):
    client.post("/api/v1/users/admins", json=ADMIN)

    response = client.post("/api/v1/users/login", json=ADMIN)
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful. Welcome, Admin."
    assert body["token_type"] == "bearer"
    assert body["user"] == {"email": ADMIN["email"], "is_admin": True, "logged_in": True}

    wrong = client.post("/api/v1/users/login", json={**ADMIN, "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.json()["detail"]["error"] == "InvalidCredentials"


def test_movie_lifecycle(client):
    admin = _admin_headers(client)
    viewer = _viewer_headers(client)

    assert client.get("/api/v1/movies/").json()["error"] == "Empty"

    created = client.post("/api/v1/movies/", json={"title": "Inception", "price": 5, "rating": 9}, headers=admin)
    assert created.status_code == 201
    assert created.json()["data"] == {"title": "Inception", "price": 5, "rating": 9, "purchased": False}

    rented = client.post("/api/v1/movies/Inception/rent", json={"days": 3}, headers=viewer)
    assert rented.status_code == 200
    assert rented.json()["data"] == {"title": "Inception", "days": 3, "total_cost": 15}

    bought = client.post("/api/v1/movies/Inception/buy", headers=viewer)
    assert bought.json()["data"] == {"title": "Inception", "price": 5}
    again = client.post("/api/v1/movies/Inception/buy", headers=viewer)
    assert again.status_code == 409
    assert again.json()["detail"]["error"] == "AlreadyPurchased"

    edited = client.put("/api/v1/movies/Inception", json={"price": 7, "rating": 8}, headers=admin)
    assert edited.json()["data"] == {"title": "Inception", "price": 7, "rating": 8, "purchased": True}
    assert client.get("/api/v1/movies/Inception").json()["data"]["price"] == 7

    removed = client.delete("/api/v1/movies/Inception", headers=admin)
    assert removed.status_code == 200
    assert client.get("/api/v1/movies/Inception").status_code == 404
    assert client.get("/api/v1/movies/").json()["data"] == []


def test_movie_mutations_need_a_logged_in_admin(client):
    viewer = _viewer_headers(client)
    movie = {"title": "Inception", "price": 5, "rating": 42}

    anonymous = client.post("/api/v1/movies/", json=movie)
    assert anonymous.status_code == 403
    assert anonymous.json()["detail"] == {
        "error": "NotAuthorized",
        "message": "Please login as an admin to add a movie.",
    }

    as_viewer = client.post("/api/v1/movies/", json=movie, headers=viewer)
    assert as_viewer.status_code == 403

    forged = client.post("/api/v1/movies/", json=movie, headers={"Authorization": "Bearer not.a.token"})
    assert forged.status_code == 403


def test_rating_and_missing_movie_errors(client):
    admin = _admin_headers(client)

    bad_rating = client.post("/api/v1/movies/", json={"title": "Inception", "price": 5, "rating": 0}, headers=admin)
    assert bad_rating.status_code == 422
    assert bad_rating.json()["detail"]["error"] == "InvalidRating"

    missing = client.post("/api/v1/movies/Tenet/rent", json={"days": 1}, headers=admin)
    assert missing.status_code == 404
    assert missing.json()["detail"]["message"] == 'Movie "Tenet" not found in the list.'


def test_rent_requires_login(client):
    response = client.post("/api/v1/movies/Inception/rent", json={"days": 1})

    assert response.status_code == 403
    assert response.json()["detail"]["message"] == "Please login to rent a movie."


def test_titles_must_be_usable_as_path_segments(client):
    admin = _admin_headers(client)

    for title in ("AC/DC Live", "", "/"):
        response = client.post("/api/v1/movies/", json={"title": title, "price": 5, "rating": 9}, headers=admin)
        assert response.status_code == 422
    assert client.get("/api/v1/movies/").json()["error"] == "Empty"

    created = client.post("/api/v1/movies/", json={"title": "AC-DC Live", "price": 5, "rating": 9}, headers=admin)
    assert created.status_code == 201
    assert client.get("/api/v1/movies/AC-DC Live").json()["data"]["title"] == "AC-DC Live"
    assert client.delete("/api/v1/movies/AC-DC Live", headers=admin).status_code == 200


def test_non_integer_rating_is_a_type_error_for_any_caller(client):
    movie = {"title": "Inception", "price": 5, "rating": 11.5}

    response = client.post("/api/v1/movies/", json=movie)

    # Type validation runs before the handler, so this is pydantic's 422
    # rather than the service's NotAuthorized.
    assert response.status_code == 422
    assert isinstance(response.json()["detail"], list)
