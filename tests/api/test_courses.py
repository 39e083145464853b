import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock

from bson import ObjectId
from pymongo.errors import PyMongoError
from pymongo.results import InsertOneResult

from backend.api.deps.dependencies import get_course_service
from backend.core.exceptions import CourseOperationError
from backend.models.course import DEFAULT_INSTRUCTOR


def _parse(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _create(client, name="Biology 101", subjects=None, when=None):
    body = {"course_name": name, "subjects": subjects if subjects is not None else ["Science"]}
    if when is not None:
        body["datetime"] = when
    response = client.post("/course", json=body)
    assert response.status_code == 200
    return response.json()["result"]["insertedId"]


def test_create_course_returns_insert_outcome(client, fake_db):
    response = client.post(
        "/course",
        json={"course_name": "Biology 101", "subjects": ["Science", "Math"]},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["acknowledged"] is True
    assert ObjectId.is_valid(result["insertedId"])
    assert len(fake_db.collection("course").documents) == 1


def test_create_course_without_name_is_rejected(client, fake_db):
    response = client.post("/course", json={"subjects": ["Math"]})

    assert response.status_code == 400
    assert response.json() == {"error": "A coursename must be provided"}
    assert fake_db.collection("course").documents == []


def test_create_course_with_empty_name_is_rejected(client, fake_db):
    response = client.post("/course", json={"course_name": "", "subjects": ["Math"]})

    assert response.status_code == 400
    assert fake_db.collection("course").documents == []


def test_create_course_without_subjects_is_rejected(client, fake_db):
    response = client.post("/course", json={"course_name": "Algebra"})

    assert response.status_code == 400
    assert response.json() == {"error": "subjects must be provided and must be an array"}
    assert fake_db.collection("course").documents == []


def test_create_course_with_non_array_subjects_is_rejected(client, fake_db):
    response = client.post("/course", json={"course_name": "Algebra", "subjects": "Math"})

    assert response.status_code == 400
    assert response.json() == {"error": "subjects must be provided and must be an array"}
    assert fake_db.collection("course").documents == []


@pytest.mark.parametrize("subjects", [{"name": "Math"}, 3, None])
def test_create_course_with_other_non_array_subjects_is_rejected(client, fake_db, subjects):
    response = client.post("/course", json={"course_name": "Algebra", "subjects": subjects})

    assert response.status_code == 400
    assert response.json() == {"error": "subjects must be provided and must be an array"}
    assert fake_db.collection("course").documents == []


def test_create_then_get_round_trip(client):
    course_id = _create(client, "Organic Chemistry", ["Chemistry", "Lab"], "2024-05-01T09:30:00Z")

    response = client.get(f"/course/{course_id}")

    assert response.status_code == 200
    data = response.json()
    assert data["_id"] == course_id
    assert data["coursename"] == "Organic Chemistry"
    assert data["subjects"] == ["Chemistry", "Lab"]
    assert _parse(data["datetime"]) == datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)


def test_create_then_get_keeps_utc_offset(client):
    course_id = _create(client, "Geology", ["Earth"], "2024-05-01T09:30:00+05:00")

    data = client.get(f"/course/{course_id}").json()

    parsed = _parse(data["datetime"])
    assert parsed.utcoffset() is not None
    assert parsed == datetime(2024, 5, 1, 4, 30, tzinfo=timezone.utc)


def test_create_defaults_datetime_to_now(client):
    before = datetime.now(timezone.utc)
    course_id = _create(client)

    data = client.get(f"/course/{course_id}").json()

    assert _parse(data["datetime"]) >= before.replace(microsecond=0)


def test_get_missing_course_returns_404(client):
    response = client.get(f"/course/{ObjectId()}")

    assert response.status_code == 404
    assert response.json() == {"message": "course not found"}


def test_get_malformed_id_returns_500(client):
    response = client.get("/course/not-an-object-id")

    assert response.status_code == 500
    body = response.json()
    assert body["message"] == "Error fetching course"
    assert body["error"]


def test_list_courses_wraps_results(client):
    _create(client, "Biology 101")
    _create(client, "History", ["Humanities"])

    response = client.get("/course")

    assert response.status_code == 200
    names = [c["coursename"] for c in response.json()["course"]]
    assert names == ["Biology 101", "History"]


def test_list_courses_filters_by_name_case_insensitively(client):
    _create(client, "Marine BIOLOGY")
    _create(client, "Microbiology Lab")
    _create(client, "Physics")

    response = client.get("/course", params={"coursename": "bio"})

    names = sorted(c["coursename"] for c in response.json()["course"])
    assert names == ["Marine BIOLOGY", "Microbiology Lab"]


def test_list_courses_filters_by_exact_subject(client):
    _create(client, "Calculus", ["Math"])
    _create(client, "Statistics", ["Mathematics"])
    _create(client, "Physics", ["Science", "Math"])

    response = client.get("/course", params={"subjects": "Math"})

    names = sorted(c["coursename"] for c in response.json()["course"])
    assert names == ["Calculus", "Physics"]


def test_list_courses_treats_name_filter_literally(client):
    _create(client, "C++ Basics")
    _create(client, "C Basics")

    response = client.get("/course", params={"coursename": "c++"})

    assert [c["coursename"] for c in response.json()["course"]] == ["C++ Basics"]


def test_list_courses_returns_documents_with_legacy_shapes(client, fake_db):
    fake_db.collection("course").documents.append(
        {
            "_id": ObjectId(),
            "coursename": "Legacy Course",
            "subjects": "History",
            "datetime": "last spring",
            "instructor": "Dr. Jones",
        }
    )
    _create(client, "Modern Course")

    response = client.get("/course")

    assert response.status_code == 200
    courses = response.json()["course"]
    assert [c["coursename"] for c in courses] == ["Legacy Course", "Modern Course"]
    assert courses[0]["instructor"] == "Dr. Jones"
    assert courses[0]["datetime"] == "last spring"


def test_list_courses_failure_returns_500(app, client):
    service = AsyncMock()
    service.list_courses.side_effect = CourseOperationError(
        "Error listing courses", details={"error": "connection reset"}
    )
    app.dependency_overrides[get_course_service] = lambda: service

    response = client.get("/course")

    assert response.status_code == 500
    assert response.json()["error"] == "connection reset"


def test_patch_always_writes_default_instructor(client):
    course_id = _create(client)

    response = client.patch(
        f"/course/{course_id}",
        json={"instructor": {"name": "Ada Lovelace", "department": "Math"}},
    )

    assert response.status_code == 202
    assert response.json() == {"result": "accepted"}
    instructor = client.get(f"/course/{course_id}").json()["instructor"]
    assert instructor == DEFAULT_INSTRUCTOR


def test_patch_without_instructor_is_rejected(client):
    course_id = _create(client)

    response = client.patch(f"/course/{course_id}", json={})

    assert response.status_code == 400
    assert response.json() == {"error": "bad input"}
    assert client.get(f"/course/{course_id}").json().get("instructor") is None


@pytest.mark.parametrize("instructor", [True, ["Ada"], 5, "Ada Lovelace"])
def test_patch_accepts_any_non_empty_instructor(client, instructor):
    course_id = _create(client)

    response = client.patch(f"/course/{course_id}", json={"instructor": instructor})

    assert response.status_code == 202
    assert response.json() == {"result": "accepted"}
    assert client.get(f"/course/{course_id}").json()["instructor"] == DEFAULT_INSTRUCTOR


@pytest.mark.parametrize("instructor", [None, "", [], {}, 0, False])
def test_patch_with_empty_instructor_is_rejected(client, instructor):
    course_id = _create(client)

    response = client.patch(f"/course/{course_id}", json={"instructor": instructor})

    assert response.status_code == 400
    assert response.json() == {"error": "bad input"}


def test_patch_missing_course_is_still_accepted(client):
    response = client.patch(f"/course/{ObjectId()}", json={"instructor": "anyone"})

    assert response.status_code == 202


def test_put_replaces_course_fields(client):
    course_id = _create(client, "Old Name", ["Old"])

    response = client.put(
        f"/course/{course_id}",
        json={"coursename": "New Name", "subjects": ["New"], "datetime": "2025-01-02T03:04:05Z"},
    )

    assert response.status_code == 200
    result = response.json()["result"]
    assert result["matchedCount"] == 1
    assert result["modifiedCount"] == 1
    data = client.get(f"/course/{course_id}").json()
    assert data["coursename"] == "New Name"
    assert data["subjects"] == ["New"]
    assert _parse(data["datetime"]) == datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_put_with_invalid_data_is_rejected(client):
    course_id = _create(client, "Keep Me", ["Keep"])

    response = client.put(f"/course/{course_id}", json={"coursename": "No subjects"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data provided"}
    assert client.get(f"/course/{course_id}").json()["coursename"] == "Keep Me"


@pytest.mark.parametrize("subjects", ["Math", {"name": "Math"}, 7])
def test_put_with_non_array_subjects_is_rejected(client, subjects):
    course_id = _create(client, "Keep Me", ["Keep"])

    response = client.put(
        f"/course/{course_id}", json={"coursename": "Renamed", "subjects": subjects}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid data provided"}
    assert client.get(f"/course/{course_id}").json()["coursename"] == "Keep Me"


def test_put_failure_returns_generic_error(client):
    response = client.put(
        "/course/bad-id",
        json={"coursename": "Name", "subjects": ["Math"]},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_delete_removes_course(client, fake_db):
    course_id = _create(client)

    response = client.delete(f"/course/{course_id}")

    assert response.status_code == 200
    assert response.json() == {"message": "Deleted"}
    assert fake_db.collection("course").documents == []


def test_delete_is_idempotent(client):
    missing_id = str(ObjectId())

    first = client.delete(f"/course/{missing_id}")
    second = client.delete(f"/course/{missing_id}")

    assert first.status_code == second.status_code == 200
    assert second.json() == {"message": "Deleted"}


def test_create_uses_injected_service(app, client):
    inserted_id = ObjectId()
    service = AsyncMock()
    service.create_course.return_value = InsertOneResult(inserted_id, True)
    app.dependency_overrides[get_course_service] = lambda: service

    response = client.post("/course", json={"course_name": "Art", "subjects": []})

    assert response.status_code == 200
    assert response.json()["result"]["insertedId"] == str(inserted_id)
    service.create_course.assert_called_once_with(name="Art", subjects=[], scheduled_at=None)


def test_unexpected_service_error_returns_generic_500(app, client):
    service = AsyncMock()
    service.delete_course.side_effect = PyMongoError("boom")
    app.dependency_overrides[get_course_service] = lambda: service

    response = client.delete(f"/course/{ObjectId()}")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
