"""Mutual connection routes — both URL aliases, filters, ratings, ownership."""

from tests.api.helpers import create_employee, create_job, create_mutual


async def test_create_mutual_under_either_prefix(alice):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])

    first = await create_mutual(alice, employee["id"], ratedStrength=4)
    res = await alice.post(
        "/api/mutual-connections",
        json={"employeeId": employee["id"], "name": "Kim", "linkedInUrl": "https://li/kim"},
    )
    assert res.status_code == 201
    second = res.json()

    assert first["ratedStrength"] == 4
    assert second["ratedStrength"] == 0
    assert second["linkedInUrl"] == "https://li/kim"

    listed = await alice.get("/api/mutual-connections")
    assert {m["id"] for m in listed.json()} == {first["id"], second["id"]}


async def test_list_filters_by_employee_and_limit(alice):
    job = await create_job(alice)
    sam = await create_employee(alice, job["id"])
    pat = await create_employee(alice, job["id"], name="Pat")
    await create_mutual(alice, sam["id"], name="A")
    await create_mutual(alice, pat["id"], name="B")
    await create_mutual(alice, pat["id"], name="C")

    res = await alice.get("/api/mutuals", params={"employeeId": pat["id"]})
    assert sorted(m["name"] for m in res.json()) == ["B", "C"]

    res = await alice.get("/api/mutuals", params={"limit": 2})
    assert len(res.json()) == 2


async def test_rated_strength_out_of_range_is_rejected(alice):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    res = await alice.post(
        "/api/mutuals",
        json={"employeeId": employee["id"], "name": "X", "ratedStrength": 6},
    )
    assert res.status_code == 400

    mutual = await create_mutual(alice, employee["id"])
    res = await alice.patch(f"/api/mutuals/{mutual['id']}", json={"ratedStrength": -1})
    assert res.status_code == 400


async def test_patch_updates_rating_only(alice):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    mutual = await create_mutual(alice, employee["id"], title="PM")

    res = await alice.patch(f"/api/mutuals/{mutual['id']}", json={"ratedStrength": 5})
    assert res.status_code == 200
    assert res.json()["ratedStrength"] == 5
    assert res.json()["title"] == "PM"

    res = await alice.get(f"/api/mutual-connections/{mutual['id']}")
    assert res.json()["ratedStrength"] == 5


async def test_patch_with_null_name_is_rejected(alice):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    mutual = await create_mutual(alice, employee["id"])
    res = await alice.patch(f"/api/mutuals/{mutual['id']}", json={"name": None})
    assert res.status_code == 400


async def test_foreign_mutual_is_forbidden_and_unchanged(alice, bob):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    mutual = await create_mutual(alice, employee["id"], ratedStrength=2)

    assert (await bob.get(f"/api/mutuals/{mutual['id']}")).status_code == 403
    res = await bob.patch(f"/api/mutuals/{mutual['id']}", json={"ratedStrength": 5})
    assert res.status_code == 403

    res = await alice.get(f"/api/mutuals/{mutual['id']}")
    assert res.json()["ratedStrength"] == 2
    assert (await bob.get("/api/mutuals")).json() == []


async def test_cannot_attach_mutual_to_foreign_employee(alice, bob):
    job = await create_job(alice)
    employee = await create_employee(alice, job["id"])
    res = await bob.post("/api/mutuals", json={"employeeId": employee["id"], "name": "X"})
    assert res.status_code == 403


async def test_unknown_employee_is_404(alice):
    res = await alice.post("/api/mutuals", json={"employeeId": 4242, "name": "X"})
    assert res.status_code == 404


async def test_mutual_id_beyond_key_range_is_404(alice):
    huge = 99999999999999999999
    assert (await alice.get(f"/api/mutual-connections/{huge}")).status_code == 404
    res = await alice.patch(f"/api/mutuals/{huge}", json={"ratedStrength": 4})
    assert res.status_code == 404
    res = await alice.post("/api/mutuals", json={"employeeId": huge, "name": "X"})
    assert res.status_code == 404
    assert (await alice.get(f"/api/mutuals?employeeId={huge}")).status_code == 400
