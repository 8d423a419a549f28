import uuid

from fastapi.testclient import TestClient

from app import models
from tests.helpers import make_recipe_data, user_headers


def _rate(client, recipe_id, value, headers=None):
    return client.post("/ratings/", json={"recipe_id": str(recipe_id), "rating": value}, headers=headers or {})


def test_rating_again_replaces_value(client: TestClient, db, users, approved_recipe):
    first = _rate(client, approved_recipe.id, 3)
    assert first.status_code == 201, first.text
    second = _rate(client, approved_recipe.id, 5)
    assert second.status_code == 200
    assert second.json()["id"] == first.json()["id"]

    summary = client.get(f"/ratings/recipe/{approved_recipe.id}").json()
    assert summary == {
        "recipe_id": str(approved_recipe.id),
        "average_rating": 5.0,
        "rating_count": 1,
    }
    assert db.query(models.Rating).count() == 1


def test_average_over_users(client: TestClient, users, approved_recipe):
    _rate(client, approved_recipe.id, 2)
    _rate(client, approved_recipe.id, 5, headers=user_headers(users["other"]))
    summary = client.get(f"/ratings/recipe/{approved_recipe.id}").json()
    assert summary["average_rating"] == 3.5
    assert summary["rating_count"] == 2


def test_unrated_recipe_summary(client: TestClient, approved_recipe):
    summary = client.get(f"/ratings/recipe/{approved_recipe.id}").json()
    assert summary["average_rating"] == 0
    assert summary["rating_count"] == 0


def test_rating_out_of_range(client: TestClient, db, users, approved_recipe):
    for value in (0, 6):
        assert _rate(client, approved_recipe.id, value).status_code == 400
    assert db.query(models.Rating).count() == 0


def test_rating_unknown_recipe(client: TestClient, users):
    assert _rate(client, uuid.uuid4(), 4).status_code == 404


def test_user_rating(client: TestClient, users, approved_recipe):
    url = f"/ratings/user/recipe/{approved_recipe.id}"
    assert client.get(url).json()["has_rated"] is False

    _rate(client, approved_recipe.id, 4)
    data = client.get(url).json()
    assert data["has_rated"] is True
    assert data["rating"] == 4
    assert data["user_id"] == str(users["default"].id)

    other = client.get(url, headers=user_headers(users["other"])).json()
    assert other["has_rated"] is False
    assert other["rating"] is None


def test_my_ratings(client: TestClient, users, approved_recipe):
    _rate(client, approved_recipe.id, 4)
    ratings = client.get("/ratings/").json()
    assert [rating["rating"] for rating in ratings] == [4]
    assert client.get("/ratings/", headers=user_headers(users["other"])).json() == []


def test_pending_recipe_cannot_be_rated(client: TestClient, db, users):
    submitted = client.post("/recipes/", json=make_recipe_data(name="Friarielli")).json()

    assert _rate(client, submitted["id"], 4).status_code == 404
    assert db.query(models.Rating).count() == 0
