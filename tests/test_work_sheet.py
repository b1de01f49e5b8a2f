import pytest
from bson.objectid import ObjectId


@pytest.fixture
def employee(add_user, login):
    add_user("sam@example.com", userInfo={"email": "sam@example.com", "name": "Sam Carter"})
    login("sam@example.com")
    return "sam@example.com"


def add_entry(client, date, work="Sales", hours=4):
    response = client.post("/work-sheet", json={"work": work, "hours": hours, "date": date})
    assert response.status_code == 201
    return response.json()


def test_create_entry_is_owned_by_session(client, db, employee):
    body = add_entry(client, "2024-05-14")

    assert body["email"] == "sam@example.com"
    assert body["name"] == "Sam Carter"
    assert body["date"] == "2024-05-14"
    assert body["monthAndYear"] == "2024-05"
    stored = db["work_sheet"].find_one({"_id": ObjectId(body["_id"])})
    assert stored["work"] == "Sales"
    assert stored["hours"] == 4


def test_create_does_not_deduplicate(client, db, employee):
    add_entry(client, "2024-05-14")
    add_entry(client, "2024-05-14")
    assert db["work_sheet"].count_documents({"email": "sam@example.com"}) == 2


def test_create_rejects_invalid_hours(client, employee):
    response = client.post("/work-sheet", json={"work": "Sales", "hours": 30, "date": "2024-05-14"})
    assert response.status_code == 422


def test_list_by_email_newest_first(client, employee):
    for date in ("2024-05-02", "2024-05-20", "2024-05-11"):
        add_entry(client, date)

    response = client.get("/work-sheet/sam@example.com")

    assert response.status_code == 200
    assert [e["date"] for e in response.json()] == ["2024-05-20", "2024-05-11", "2024-05-02"]


def test_employee_cannot_read_another_sheet(client, add_user, employee):
    add_user("kim@example.com")
    assert client.get("/work-sheet/kim@example.com").status_code == 403


def test_update_entry(client, db, employee):
    entry = add_entry(client, "2024-05-14")

    response = client.patch(
        f"/work-sheet/update/{entry['_id']}",
        json={"work": "Support", "hours": 6, "date": "2024-06-01"},
    )

    assert response.status_code == 200
    stored = db["work_sheet"].find_one({"_id": ObjectId(entry["_id"])})
    assert (stored["work"], stored["hours"], stored["date"]) == ("Support", 6, "2024-06-01")
    assert stored["monthAndYear"] == "2024-06"
    assert stored["email"] == "sam@example.com"


def test_update_and_delete_require_ownership(client, db, add_user, login, employee):
    entry = add_entry(client, "2024-05-14")
    add_user("kim@example.com")
    login("kim@example.com")

    update = client.patch(
        f"/work-sheet/update/{entry['_id']}",
        json={"work": "Support", "hours": 6, "date": "2024-06-01"},
    )
    delete = client.delete(f"/work-sheet/{entry['_id']}")

    assert update.status_code == 404
    assert delete.status_code == 404
    assert db["work_sheet"].find_one({"_id": ObjectId(entry["_id"])})["work"] == "Sales"


def test_delete_entry(client, db, employee):
    entry = add_entry(client, "2024-05-14")

    response = client.delete(f"/work-sheet/{entry['_id']}")

    assert response.status_code == 200
    assert response.json() == {"deletedCount": 1}
    assert db["work_sheet"].count_documents({}) == 0
    assert client.delete(f"/work-sheet/{entry['_id']}").status_code == 404


def test_hr_lists_every_entry(client, db, add_user, login):
    db["work_sheet"].insert_many([
        {"email": "a@example.com", "name": "A", "work": "Sales", "hours": 3, "date": "2024-05-01", "monthAndYear": "2024-05"},
        {"email": "b@example.com", "name": "B", "work": "Content", "hours": 5, "date": "2024-05-02", "monthAndYear": "2024-05"},
    ])
    add_user("hr@example.com", role="hr")
    login("hr@example.com")

    response = client.get("/work-sheet")

    assert response.status_code == 200
    assert len(response.json()) == 2


def test_create_accepts_matching_period(client, employee):
    response = client.post(
        "/work-sheet",
        json={"work": "Sales", "hours": 4, "date": "2024-05-14", "monthAndYear": "2024-05"},
    )
    assert response.status_code == 201
    assert response.json()["monthAndYear"] == "2024-05"


def test_create_rejects_period_that_disagrees_with_date(client, db, employee):
    response = client.post(
        "/work-sheet",
        json={"work": "Sales", "hours": 4, "date": "2024-05-14", "monthAndYear": "2024-07"},
    )

    assert response.status_code == 422
    assert db["work_sheet"].count_documents({}) == 0
