"""Health probes — liveness always up, readiness checks the database."""


async def test_liveness(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"
