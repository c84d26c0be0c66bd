from __future__ import annotations

from factories import make_school, make_student
from studylink.database import SessionLocal
from studylink.models import Experience


INTERNSHIP = {
    "position": "Intern",
    "company": "Globex",
    "type": "Stage",
    "start_date": "2022-06-01T00:00:00",
}


def _experience(**overrides) -> dict:
    payload = {
        "position": "Data Analyst",
        "company": "Acme",
        "type": "Alternance",
        "start_date": "2023-09-01T00:00:00",
        "end_date": "2024-08-31T00:00:00",
    }
    payload.update(overrides)
    return payload


def test_add_and_list_experiences_newest_first(client):
    student = make_student()
    url = f"/api/students/{student.id}/experiences"

    r = client.post(url, json=_experience())
    assert r.status_code == 201
    assert r.json()["student_id"] == student.id
    client.post(url, json=INTERNSHIP)

    r = client.get(url)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 2
    assert [item["position"] for item in body["items"]] == ["Data Analyst", "Intern"]

    r = client.get(url, params={"order": "asc", "limit": 1})
    assert r.json()["items"][0]["position"] == "Intern"
    assert r.json()["total_pages"] == 2


def test_experience_filters(client):
    student = make_student()
    url = f"/api/students/{student.id}/experiences"
    client.post(url, json=_experience())
    client.post(url, json=INTERNSHIP)

    assert [i["company"] for i in client.get(url, params={"type": "Stage"}).json()["items"]] == ["Globex"]
    assert [i["company"] for i in client.get(url, params={"company": "acm"}).json()["items"]] == ["Acme"]
    assert [i["position"] for i in client.get(url, params={"search": "intern"}).json()["items"]] == ["Intern"]
    r = client.get(url, params={"start_date_after": "2023-01-01T00:00:00"})
    assert [i["position"] for i in r.json()["items"]] == ["Data Analyst"]
    r = client.get(url, params={"start_date_before": "2023-01-01T00:00:00"})
    assert [i["position"] for i in r.json()["items"]] == ["Intern"]


def test_experiences_belong_to_their_student(client):
    school = make_school()
    ada = make_student(email="ada@test.com", school_id=school.id)
    grace = make_student(email="grace@test.com", school_id=school.id)
    created = client.post(f"/api/students/{ada.id}/experiences", json=_experience()).json()

    assert client.get(f"/api/students/{grace.id}/experiences").json()["total"] == 0
    assert client.get(f"/api/students/{grace.id}/experiences/{created['id']}").status_code == 404
    assert client.get("/api/students/999/experiences").status_code == 404
    assert client.post("/api/students/999/experiences", json=_experience()).status_code == 404


def test_invalid_experience_is_rejected(client):
    student = make_student()
    url = f"/api/students/{student.id}/experiences"

    r = client.post(url, json=_experience(type="Freelance"))
    assert r.status_code == 400
    assert r.json()["details"] == [{"field": "type", "message": "Invalid experience type: Freelance"}]

    r = client.post(url, json=_experience(position=" ", end_date="2020-01-01T00:00:00"))
    assert [detail["field"] for detail in r.json()["details"]] == ["position", "end_date"]


def test_update_and_delete_experience(client):
    student = make_student()
    url = f"/api/students/{student.id}/experiences"
    created = client.post(url, json=_experience()).json()

    r = client.put(f"{url}/{created['id']}", json={"position": "Data Engineer", "type": "CDI"})
    assert r.status_code == 200
    assert r.json()["position"] == "Data Engineer"
    assert r.json()["company"] == "Acme"

    r = client.put(f"{url}/{created['id']}", json={"end_date": "2023-01-01T00:00:00"})
    assert r.status_code == 400
    assert r.json()["details"][0]["field"] == "end_date"
    assert client.put(f"{url}/{created['id']}", json={}).status_code == 400

    assert client.delete(f"{url}/{created['id']}").status_code == 200
    assert client.get(f"{url}/{created['id']}").status_code == 404


def test_deleting_student_removes_experiences(client):
    student = make_student()
    client.post(f"/api/students/{student.id}/experiences", json=_experience())

    assert client.delete(f"/api/students/{student.id}").status_code == 200
    with SessionLocal() as db:
        assert db.query(Experience).count() == 0
