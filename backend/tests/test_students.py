from __future__ import annotations

from factories import auth_headers, make_school, make_student, make_user
from studylink.database import SessionLocal
from studylink.models import Student, User


def _profile(school_id: int, **overrides) -> dict:
    payload = {
        "firstname": "Ada",
        "lastname": "Lovelace",
        "student_email": "ada@ecole-test.fr",
        "school_id": school_id,
        "status": "ACTIVE",
        "skills": "Python, SQL",
        "description": "Second year student looking for a data apprenticeship",
    }
    payload.update(overrides)
    return payload


def test_create_profile_completes_user(client):
    school = make_school()
    user = make_user(email="ada@test.com", firstname="", lastname="")

    r = client.post("/api/students/profile", json=_profile(school.id), headers=auth_headers(user.id))
    assert r.status_code == 201
    student = r.json()
    assert student["skills"] == ["Python", "SQL"]
    assert student["previous_companies"] == []
    assert student["availability"] is True
    assert student["user"]["firstname"] == "Ada"

    with SessionLocal() as db:
        stored = db.get(User, user.id)
        assert stored.type == "student"
        assert stored.profile_completed is True


def test_create_profile_errors(client):
    school = make_school()
    existing = make_student(email="grace@test.com", school_id=school.id)
    with SessionLocal() as db:
        db.get(Student, existing.id).student_email = "taken@ecole-test.fr"
        db.commit()
    user = make_user(email="ada@test.com")

    assert client.post("/api/students/profile", json=_profile(school.id)).status_code == 401

    r = client.post(
        "/api/students/profile",
        json=_profile(school.id, student_email="taken@ecole-test.fr"),
        headers=auth_headers(user.id),
    )
    assert r.status_code == 400
    assert [detail["field"] for detail in r.json()["details"]] == ["student_email"]

    r = client.post(
        "/api/students/profile",
        json=_profile(school.id, firstname="A", description="short"),
        headers=auth_headers(user.id),
    )
    assert r.status_code == 400
    assert [detail["field"] for detail in r.json()["details"]] == ["firstname", "description"]

    r = client.post(
        "/api/students/profile",
        json=_profile(school.id, student_email="grace@ecole-test.fr"),
        headers=auth_headers(existing.user_id),
    )
    assert r.status_code == 400
    assert r.json()["details"][0]["field"] == "user_id"


def test_update_profile(client):
    student = make_student(email="ada@test.com")

    r = client.put(
        "/api/students/profile",
        json={"lastname": "King", "skills": ["Python", "Rust"], "availability": False},
        headers=auth_headers(student.user_id),
    )
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["lastname"] == "King"
    assert body["skills"] == ["Python", "Rust"]
    assert body["availability"] is False
    assert body["description"] == "Motivated student looking for an apprenticeship"

    r = client.put("/api/students/profile", json={"description": "tiny"}, headers=auth_headers(student.user_id))
    assert r.status_code == 400

    user = make_user(email="nobody@test.com")
    assert client.put("/api/students/profile", json={}, headers=auth_headers(user.id)).status_code == 404


def test_admin_student_crud(client):
    school = make_school()
    user = make_user(email="ada@test.com")

    r = client.post("/api/students", json={"user_id": user.id, "school_id": school.id})
    assert r.status_code == 400
    fields = {detail["field"] for detail in r.json()["details"]}
    assert fields == {"status", "skills", "description", "previous_companies", "availability"}

    r = client.post(
        "/api/students",
        json={
            "user_id": user.id,
            "school_id": school.id,
            "status": "ACTIVE",
            "skills": ["Python"],
            "description": "Looking for an apprenticeship",
            "previous_companies": "Acme, Globex",
            "availability": True,
        },
    )
    assert r.status_code == 201
    student_id = r.json()["id"]
    assert r.json()["previous_companies"] == ["Acme", "Globex"]

    r = client.put(f"/api/students/{student_id}", json={"status": "GRADUATED"})
    assert r.json()["status"] == "GRADUATED"

    assert client.delete(f"/api/students/{student_id}").status_code == 200
    assert client.get(f"/api/students/{student_id}").status_code == 404
    with SessionLocal() as db:
        assert db.get(User, user.id) is not None


def test_list_students_filters(client):
    school = make_school()
    make_student(email="ada@test.com", school_id=school.id, firstname="Ada", skills=["Python", "SQL"])
    make_student(email="grace@test.com", school_id=school.id, firstname="Grace", skills=["COBOL"], availability=False)
    make_student(email="alan@test.com", school_id=school.id, firstname="Alan", skills=["Python"])

    def names(**params):
        r = client.get("/api/students", params=params)
        assert r.status_code == 200
        return sorted(item["user"]["firstname"] for item in r.json()["items"])

    assert names() == ["Ada", "Alan", "Grace"]
    assert names(skills="Python") == ["Ada", "Alan"]
    assert names(skills="Python,SQL") == ["Ada"]
    assert names(availability=False) == ["Grace"]
    assert names(search="grace@") == ["Grace"]
    assert names(school_id=school.id, status="ACTIVE") == ["Ada", "Alan", "Grace"]


def test_student_skill_filter_does_not_match_prefixes(client):
    school = make_school()
    make_student(email="ada@test.com", school_id=school.id, firstname="Ada", skills=["Java"])
    make_student(email="grace@test.com", school_id=school.id, firstname="Grace", skills=["JavaScript", "CSS"])

    r = client.get("/api/students", params={"skills": "Java"})
    assert [item["user"]["firstname"] for item in r.json()["items"]] == ["Ada"]
