import uuid

from fastapi.testclient import TestClient

from app import models
from tests.helpers import make_recipe_data, user_headers


def test_add_and_list_favorites(client: TestClient, users, approved_recipe):
    response = client.post("/favorites/", json={"recipe_id": str(approved_recipe.id)})
    assert response.status_code == 201, response.text
    favorite = response.json()
    assert favorite["user_id"] == str(users["default"].id)

    favorites = client.get("/favorites/").json()
    assert len(favorites) == 1
    assert favorites[0]["id"] == str(approved_recipe.id)
    assert favorites[0]["favorite_id"] == favorite["id"]
    assert favorites[0]["name"] == "Pizza Margherita"


def test_adding_twice_conflicts(client: TestClient, db, users, approved_recipe):
    payload = {"recipe_id": str(approved_recipe.id)}
    assert client.post("/favorites/", json=payload).status_code == 201

    response = client.post("/favorites/", json=payload)
    assert response.status_code == 409
    assert response.json() == {"detail": "Recipe already in favorites"}
    assert db.query(models.Favorite).count() == 1


def test_favorites_are_per_user(client: TestClient, users, approved_recipe):
    client.post("/favorites/", json={"recipe_id": str(approved_recipe.id)})
    response = client.post(
        "/favorites/",
        json={"recipe_id": str(approved_recipe.id)},
        headers=user_headers(users["other"]),
    )
    assert response.status_code == 201
    assert len(client.get("/favorites/", headers=user_headers(users["other"])).json()) == 1


def test_favorite_unknown_recipe(client: TestClient, users):
    response = client.post("/favorites/", json={"recipe_id": str(uuid.uuid4())})
    assert response.status_code == 404


def test_remove_favorite(client: TestClient, users, approved_recipe):
    favorite_id = client.post("/favorites/", json={"recipe_id": str(approved_recipe.id)}).json()["id"]

    response = client.delete(f"/favorites/{favorite_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Recipe removed from favorites"}
    assert client.get("/favorites/").json() == []
    assert client.delete(f"/favorites/{favorite_id}").status_code == 404


def test_cannot_remove_someone_elses_favorite(client: TestClient, users, approved_recipe):
    favorite_id = client.post("/favorites/", json={"recipe_id": str(approved_recipe.id)}).json()["id"]
    response = client.delete(f"/favorites/{favorite_id}", headers=user_headers(users["other"]))
    assert response.status_code == 404
    assert len(client.get("/favorites/").json()) == 1


def test_pending_recipe_cannot_be_favorited(client: TestClient, db, users):
    submitted = client.post("/recipes/", json=make_recipe_data(name="Friarielli")).json()

    response = client.post("/favorites/", json={"recipe_id": submitted["id"]})
    assert response.status_code == 404
    assert db.query(models.Favorite).count() == 0
