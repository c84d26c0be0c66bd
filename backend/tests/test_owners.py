from __future__ import annotations

from factories import make_company, make_school, make_user
from studylink.database import SessionLocal
from studylink.models import SchoolOwner, User


def test_company_owner_crud(client):
    company = make_company(name="Acme")
    other = make_company(name="Globex")
    user = make_user(email="boss@acme.test", firstname="Grace", lastname="Hopper")

    r = client.post("/api/company-owners", json={"user_id": user.id, "company_id": company.id})
    assert r.status_code == 201
    owner = r.json()
    assert owner["user"]["email"] == "boss@acme.test"
    assert owner["company"]["name"] == "Acme"
    with SessionLocal() as db:
        assert db.get(User, user.id).type == "company_owner"

    r = client.put(f"/api/company-owners/{owner['id']}", json={"company_id": other.id})
    assert r.status_code == 200
    assert r.json()["company"]["name"] == "Globex"
    # keeping the same user is not a second ownership
    assert client.put(f"/api/company-owners/{owner['id']}", json={"user_id": user.id}).status_code == 200

    assert client.delete(f"/api/company-owners/{owner['id']}").status_code == 200
    assert client.get(f"/api/company-owners/{owner['id']}").status_code == 404


def test_company_owner_validation(client):
    company = make_company(owner_emails=("boss@acme.test",))
    newcomer = make_user(email="new@acme.test")

    r = client.post("/api/company-owners", json={"user_id": 999, "company_id": 999})
    assert r.status_code == 400
    assert [detail["field"] for detail in r.json()["details"]] == ["user_id", "company_id"]

    existing = client.get("/api/company-owners").json()["items"][0]
    r = client.post("/api/company-owners", json={"user_id": existing["user_id"], "company_id": company.id})
    assert r.json()["details"] == [{"field": "user_id", "message": "This user already owns a company"}]

    r = client.put(f"/api/company-owners/{existing['id']}", json={"company_id": 999})
    assert r.status_code == 400
    assert client.put("/api/company-owners/999", json={"user_id": newcomer.id}).status_code == 404


def test_company_owner_listing_filters(client):
    acme = make_company(name="Acme", owner_emails=("boss@acme.test",))
    make_company(name="Globex", owner_emails=("ceo@globex.test",))

    r = client.get("/api/company-owners", params={"company_id": acme.id})
    assert [item["user"]["email"] for item in r.json()["items"]] == ["boss@acme.test"]
    r = client.get("/api/company-owners", params={"search": "globex"})
    assert [item["company"]["name"] for item in r.json()["items"]] == ["Globex"]
    assert client.get("/api/company-owners").json()["total"] == 2


def test_school_owner_crud(client):
    school = make_school(name="Ecole Test")
    user = make_user(email="director@ecole-test.fr", firstname="Marie", lastname="Curie")

    r = client.post("/api/school-owners", json={"user_id": user.id, "school_id": school.id})
    assert r.status_code == 201
    owner = r.json()
    assert owner["school"]["domain"]["domain"] == "ecole-test.fr"
    assert owner["user"]["firstname"] == "Marie"

    r = client.post("/api/school-owners", json={"user_id": user.id, "school_id": school.id})
    assert r.status_code == 400
    assert r.json()["details"] == [{"field": "user_id", "message": "This user already owns a school"}]

    r = client.get("/api/school-owners", params={"search": "curie"})
    assert r.json()["total"] == 1
    assert client.get("/api/school-owners", params={"school_id": 999}).json()["total"] == 0

    assert client.delete(f"/api/school-owners/{owner['id']}").status_code == 200
    with SessionLocal() as db:
        assert db.query(SchoolOwner).count() == 0
        assert db.get(User, user.id) is not None


def test_school_owner_requires_existing_school(client):
    user = make_user(email="director@ecole-test.fr")

    r = client.post("/api/school-owners", json={"user_id": user.id})
    assert r.status_code == 400
    assert r.json()["details"] == [{"field": "school_id", "message": "School id is required"}]
    r = client.post("/api/school-owners", json={"user_id": user.id, "school_id": 999})
    assert r.json()["details"][0]["message"] == "The specified school does not exist"
    assert client.get("/api/school-owners/999").status_code == 404
