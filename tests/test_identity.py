import uuid

from fastapi.testclient import TestClient

from app import crud
from tests.helpers import user_headers


def test_no_users_configured(client: TestClient, db):
    response = client.get("/favorites/")
    assert response.status_code == 401


def test_unknown_user_id(client: TestClient, users):
    response = client.get("/favorites/", headers={"X-User-Id": str(uuid.uuid4())})
    assert response.status_code == 401


def test_malformed_user_id(client: TestClient, users):
    response = client.get("/favorites/", headers={"X-User-Id": "42"})
    assert response.status_code == 400


def test_inactive_user(client: TestClient, db, users):
    user = users["other"]
    user.is_active = False
    db.commit()
    response = client.get("/favorites/", headers=user_headers(user))
    assert response.status_code == 400
    assert response.json() == {"detail": "Inactive user"}


def test_admin_can_act_as_admin_explicitly(client: TestClient, users):
    response = client.get("/recipes/admin/moderation-queue", headers=user_headers(users["admin"]))
    assert response.status_code == 200


def test_missing_default_admin(client: TestClient, db):
    crud.create_user(db, "default_user")
    response = client.get("/recipes/admin/moderation-queue")
    assert response.status_code == 401
