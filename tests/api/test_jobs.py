"""Job routes — preferences, jobs, employees, ownership and cascade delete.

Invariants:
    - Users only ever see their own jobs (404 missing, 403 foreign)
    - Deleting a job removes its employees and their mutuals
    - A job with outreach messages cannot be deleted (409)
"""

from tests.api.helpers import create_employee, create_job, create_mutual


async def test_jobs_require_session(client):
    assert (await client.get("/api/jobs")).status_code == 401


async def test_save_preferences_replaces_lists(alice):
    res = await alice.post(
        "/api/job-preferences",
        json={"jobTitles": ["Backend Engineer", "  "], "locations": ["Remote"]},
    )
    assert res.status_code == 200
    assert res.json() == {
        "titles": ["Backend Engineer"], "locations": ["Remote"], "industries": [],
    }

    res = await alice.post("/api/job-preferences", json={"titles": ["SRE"]})
    assert res.json()["titles"] == ["SRE"]
    assert res.json()["locations"] == []


async def test_create_and_get_job(alice):
    job = await create_job(alice)
    assert job["company"] == "Acme"
    assert job["jobUrl"] == "https://jobs.example/acme/1"
    assert job["isNew"] is True
    assert job["postedDate"]

    res = await alice.get(f"/api/jobs/{job['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == job["id"]


async def test_list_jobs_is_newest_first_and_limited(alice):
    await create_job(alice, title="Old", postedDate="2026-01-01T00:00:00Z")
    await create_job(alice, title="New", postedDate="2026-02-01T00:00:00Z")
    res = await alice.get("/api/jobs")
    assert [j["title"] for j in res.json()] == ["New", "Old"]

    res = await alice.get("/api/jobs", params={"limit": 1})
    assert len(res.json()) == 1


async def test_jobs_are_isolated_between_users(alice, bob):
    job = await create_job(alice)
    assert (await bob.get("/api/jobs")).json() == []

    res = await bob.get(f"/api/jobs/{job['id']}")
    assert res.status_code == 403
    assert res.json()["error"]["code"] == "FORBIDDEN"


async def test_missing_job_is_404(alice):
    res = await alice.get("/api/jobs/999")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["resource_type"] == "Job"


async def test_create_job_validates_body(alice):
    res = await alice.post("/api/jobs", json={"title": "No company"})
    assert res.status_code == 400


async def test_employees_belong_to_job(alice, bob):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    assert employee["jobId"] == job["id"]
    assert employee["linkedInUrl"] == "https://li/sam"

    res = await alice.get(f"/api/jobs/{job['id']}/employees")
    assert [e["id"] for e in res.json()] == [employee["id"]]

    assert (await bob.get(f"/api/jobs/{job['id']}/employees")).status_code == 403
    res = await bob.post(f"/api/jobs/{job['id']}/employees", json={"name": "X"})
    assert res.status_code == 403


async def test_delete_job_cascades_to_employees_and_mutuals(alice):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    mutual = await create_mutual(alice, employee["id"])

    res = await alice.delete(f"/api/jobs/{job['id']}")
    assert res.status_code == 204

    assert (await alice.get(f"/api/jobs/{job['id']}")).status_code == 404
    assert (await alice.get(f"/api/mutuals/{mutual['id']}")).status_code == 404
    assert (await alice.get("/api/mutuals")).json() == []


async def test_delete_job_with_outreach_is_refused(alice, outreach_chain):
    job_id = outreach_chain["job"]["id"]
    res = await alice.post(
        "/api/messages", json={"mutualId": outreach_chain["mutual"]["id"]},
    )
    assert res.status_code == 201

    res = await alice.delete(f"/api/jobs/{job_id}")
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "JOB_HAS_OUTREACH"
    assert (await alice.get(f"/api/jobs/{job_id}")).status_code == 200


async def test_delete_foreign_job_is_403(alice, bob):
    job = await create_job(alice)
    assert (await bob.delete(f"/api/jobs/{job['id']}")).status_code == 403
    assert (await alice.get(f"/api/jobs/{job['id']}")).status_code == 200


async def test_job_id_beyond_key_range_is_404(alice):
    huge = 99999999999999999999
    assert (await alice.get(f"/api/jobs/{huge}")).status_code == 404
    assert (await alice.delete(f"/api/jobs/{huge}")).status_code == 404
    assert (await alice.get(f"/api/jobs/{huge}/employees")).status_code == 404
    res = await alice.post(f"/api/jobs/{huge}/employees", json={"name": "Sam"})
    assert res.status_code == 404
