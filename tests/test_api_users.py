from datetime import date

from app.core.enums import Role
from app.models.leave_request import LeaveRequest as LeaveRequestModel
from app.models.user import User as UserModel


def user_body(username="jdoe", **overrides):
    body = {
        "username": username,
        "email": f"{username}@example.com",
        "firstName": "John",
        "lastName": "Doe",
        "department": "engineering",
    }
    body.update(overrides)
    return body


def test_unauthenticated_requests_are_rejected(client, identity):
    identity.clear()

    response = client.get("/api/users")

    assert response.status_code == 401


def test_identity_without_employee_is_forbidden(client, identity):
    identity["email"] = "stranger@example.com"

    response = client.get("/api/users")

    assert response.status_code == 403
    assert response.json()["success"] is False


def test_employee_cannot_create_users(client, admin, make_user, act_as):
    act_as(make_user(Role.EMPLOYEE))

    response = client.post("/api/users", json=user_body())

    assert response.status_code == 403


def test_create_and_get_user(client, admin):
    created = client.post("/api/users", json=user_body())

    assert created.status_code == 201
    data = created.json()["data"]
    assert data["username"] == "jdoe"
    assert data["firstName"] == "John"
    assert data["role"] == "employee"
    assert data["isActive"] is True

    fetched = client.get(f"/api/users/{data['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["data"]["email"] == "jdoe@example.com"


def test_duplicate_username_returns_conflict(client, admin, db):
    assert client.post("/api/users", json=user_body()).status_code == 201

    response = client.post("/api/users", json=user_body(email="other@example.com"))

    assert response.status_code == 409
    assert response.json()["success"] is False
    assert db.query(UserModel).filter(UserModel.username == "jdoe").count() == 1


def test_malformed_user_is_a_validation_error(client, admin):
    response = client.post("/api/users", json={"username": "x", "email": "not-an-email"})

    assert response.status_code == 422


def test_update_user(client, admin, make_user):
    user = make_user()

    response = client.put(f"/api/users/{user.id}", json={"position": "Team Lead", "role": "manager"})

    assert response.status_code == 200
    assert response.json()["data"]["position"] == "Team Lead"
    assert response.json()["data"]["role"] == "manager"


def test_get_missing_user(client, admin):
    assert client.get("/api/users/999").status_code == 404


def test_search_users(client, admin, make_user):
    make_user(first_name="Grace", last_name="Hopper", department="engineering")
    make_user(first_name="Alan", last_name="Turing", department="hr")

    response = client.get("/api/users/search", params={"q": "grace"})

    assert response.status_code == 200
    assert [u["firstName"] for u in response.json()["data"]] == ["Grace"]

    by_department = client.get("/api/users/search", params={"department": "hr"})
    assert [u["firstName"] for u in by_department.json()["data"]] == ["Alan"]


def test_soft_delete_then_permanent_delete(client, admin, make_user, db):
    user_id = make_user().id

    soft = client.delete(f"/api/users/{user_id}")
    assert soft.status_code == 200
    assert soft.json()["data"]["isActive"] is False
    assert user_id not in [u["id"] for u in client.get("/api/users").json()["data"]]

    hard = client.delete(f"/api/users/{user_id}/permanent")
    assert hard.status_code == 204

    db.expire_all()
    assert db.get(UserModel, user_id) is None
    assert client.delete(f"/api/users/{user_id}/permanent").status_code == 404


def test_permanent_delete_with_leave_history_conflicts(client, admin, make_user, db):
    user = make_user()
    db.add(LeaveRequestModel(
        user_id=user.id,
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 2),
        type="sick",
        status="pending"
    ))
    db.commit()

    response = client.delete(f"/api/users/{user.id}/permanent")

    assert response.status_code == 409


def test_bulk_create_users(client, admin):
    body = [
        user_body("alice"),
        user_body("admin", email="someone@example.com"),
        user_body("bob"),
        {"username": "broken"},
    ]

    response = client.post("/api/users/bulk", json=body)

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["processed"] == 4
    assert payload["successful"] == 2
    assert payload["failed"] == 2
    assert [u["username"] for u in payload["results"]] == ["alice", "bob"]
    assert [e["username"] for e in payload["errors"]] == ["admin", "broken"]


def test_bulk_create_empty(client, admin):
    response = client.post("/api/users/bulk", json=[])

    assert response.status_code == 200
    payload = response.json()
    assert (payload["processed"], payload["successful"], payload["failed"]) == (0, 0, 0)
    assert payload["results"] == []
    assert payload["errors"] == []
