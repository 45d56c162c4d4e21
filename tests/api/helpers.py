"""Request helpers shared by the API tests."""

from httpx import AsyncClient


async def register(client: AsyncClient, username: str = "alex@example.com",
                   password: str = "secret123") -> dict:
    res = await client.post(
        "/api/auth/register", json={"username": username, "password": password},
    )
    assert res.status_code == 201, res.text
    return res.json()


async def create_job(client: AsyncClient, **overrides) -> dict:
    body = {
        "title": "Backend Engineer",
        "company": "Acme",
        "location": "Remote",
        "jobUrl": "https://jobs.example/acme/1",
    }
    body.update(overrides)
    res = await client.post("/api/jobs", json=body)
    assert res.status_code == 201, res.text
    return res.json()


async def create_employee(client: AsyncClient, job_id: int, **overrides) -> dict:
    body = {"name": "Sam Lee", "title": "Eng Manager", "linkedInUrl": "https://li/sam"}
    body.update(overrides)
    res = await client.post(f"/api/jobs/{job_id}/employees", json=body)
    assert res.status_code == 201, res.text
    return res.json()


async def create_mutual(client: AsyncClient, employee_id: int, **overrides) -> dict:
    body = {"employeeId": employee_id, "name": "Dana Friend", "ratedStrength": 0}
    body.update(overrides)
    res = await client.post("/api/mutuals", json=body)
    assert res.status_code == 201, res.text
    return res.json()
