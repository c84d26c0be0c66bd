from __future__ import annotations

from factories import make_company, make_job


def _seed_jobs(count: int) -> None:
    company = make_company()
    for index in range(count):
        make_job(company_id=company.id, name=f"Job {index:02d}")


def test_second_page_of_twenty_five(client):
    _seed_jobs(25)

    r = client.get("/api/jobs", params={"page": 2, "limit": 10})
    assert r.status_code == 200
    body = r.json()
    assert len(body["items"]) == 10
    assert body["total"] == 25
    assert body["page"] == 2
    assert body["limit"] == 10
    assert body["total_pages"] == 3

    last = client.get("/api/jobs", params={"page": 3, "limit": 10}).json()
    assert len(last["items"]) == 5

    seen = {item["id"] for page in (1, 2, 3) for item in client.get("/api/jobs", params={"page": page}).json()["items"]}
    assert len(seen) == 25


def test_limit_is_capped(client):
    _seed_jobs(3)

    body = client.get("/api/jobs", params={"limit": 500}).json()
    assert body["limit"] == 100
    assert body["total_pages"] == 1


def test_empty_listing_has_no_pages(client):
    body = client.get("/api/jobs").json()
    assert body == {"items": [], "total": 0, "page": 1, "limit": 10, "total_pages": 0}


def test_invalid_page_is_a_bad_request(client):
    r = client.get("/api/jobs", params={"page": 0})
    assert r.status_code == 400
    assert r.json()["details"][0]["field"] == "page"
