from datetime import date, timedelta

from httpx import AsyncClient

D = date(2026, 4, 1)


async def _create_area(client: AsyncClient, auth: dict) -> tuple[int, int]:
    res = await client.post("/api/v1/gardens", json={
        "name": "Home Garden",
        "areas": [{"name": "Perimeter Bed", "area_type": "outdoor", "length_ft": 80, "width_ft": 2}],
    }, headers=auth)
    garden = res.json()
    return garden["id"], garden["areas"][0]["id"]


async def _plant(client: AsyncClient, auth: dict, plant_id: str = "tomato", **extra):
    garden_id, area_id = await _create_area(client, auth)
    payload = {
        "garden_id": garden_id,
        "area_id": area_id,
        "plant_id": plant_id,
        "quantity": 2,
        "date_planted": D.isoformat(),
        "location_notes": "the perimeter bed",
    }
    payload.update(extra)
    return await client.post("/api/v1/plantings", json=payload, headers=auth)


async def test_create_planting_generates_tasks(client: AsyncClient, auth: dict):
    # Tomato: high watering needs, 80 days to maturity
    res = await _plant(client, auth)
    assert res.status_code == 201
    data = res.json()

    planting = data["planting"]
    assert planting["status"] == "active"
    assert planting["quantity"] == 2
    assert planting["date_planted"] == D.isoformat()

    tasks = {t["task_type"]: t for t in data["tasks"]}
    assert set(tasks) == {"water", "harvest", "pestCheck"}
    assert tasks["water"]["due_date"] == (D + timedelta(days=2)).isoformat()
    assert tasks["water"]["recurring_days"] == 2
    assert tasks["harvest"]["due_date"] == (D + timedelta(days=80)).isoformat()
    assert tasks["harvest"]["recurring"] is False
    assert tasks["pestCheck"]["due_date"] == (D + timedelta(days=7)).isoformat()
    assert tasks["pestCheck"]["recurring_days"] == 14
    for t in data["tasks"]:
        assert t["planting_id"] == planting["id"]
        assert t["garden_id"] == planting["garden_id"]
        assert t["related_area_id"] == planting["area_id"]
        assert t["related_plant_name"] == "Tomato"
        assert t["status"] == "pending"
        assert t["notification_sent"] is False
    assert tasks["water"]["details"] == "Water your Tomato in the perimeter bed"


async def test_create_planting_defaults_to_today(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, date_planted=None)
    assert res.status_code == 201
    assert res.json()["planting"]["date_planted"] == D.isoformat()


async def test_create_planting_low_water_plant(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, plant_id="rosemary")
    water = next(t for t in res.json()["tasks"] if t["task_type"] == "water")
    assert water["recurring_days"] == 5


async def test_create_planting_rejects_zero_quantity(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, quantity=0)
    assert res.status_code == 422
    assert "Quantity" in res.json()["detail"]


async def test_create_planting_rejects_unknown_plant(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, plant_id="triffid")
    assert res.status_code == 422
    assert "triffid" in res.json()["detail"]


async def test_create_planting_rejects_unparseable_date(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, date_planted="the day after tomorrow")
    assert res.status_code == 422
    assert "date" in res.json()["detail"]


async def test_create_planting_in_area_of_other_garden(client: AsyncClient, auth: dict):
    garden_a, _ = await _create_area(client, auth)
    _, area_b = await _create_area(client, auth)
    res = await client.post("/api/v1/plantings", json={
        "garden_id": garden_a, "area_id": area_b, "plant_id": "kale", "quantity": 1,
    }, headers=auth)
    assert res.status_code == 404


async def test_create_planting_in_someone_elses_garden(
    client: AsyncClient, auth: dict, other_auth: dict
):
    garden_id, area_id = await _create_area(client, other_auth)
    res = await client.post("/api/v1/plantings", json={
        "garden_id": garden_id, "area_id": area_id, "plant_id": "kale", "quantity": 1,
    }, headers=auth)
    assert res.status_code == 404


async def test_update_planting_permitted_fields(client: AsyncClient, auth: dict):
    planting = (await _plant(client, auth)).json()["planting"]
    res = await client.patch(f"/api/v1/plantings/{planting['id']}", json={
        "quantity": 6, "location_notes": "north corner", "status": "removed",
    }, headers=auth)
    assert res.status_code == 200
    data = res.json()
    assert data["quantity"] == 6
    assert data["location_notes"] == "north corner"
    assert data["status"] == "removed"
    assert data["date_planted"] == D.isoformat()


async def test_update_planting_ignores_other_fields(client: AsyncClient, auth: dict):
    planting = (await _plant(client, auth)).json()["planting"]
    res = await client.patch(f"/api/v1/plantings/{planting['id']}", json={
        "plant_id": "kale", "quantity": 3,
    }, headers=auth)
    assert res.status_code == 200
    assert res.json()["plant_id"] == "tomato"
    assert res.json()["quantity"] == 3


async def test_update_planting_rejects_zero_quantity(client: AsyncClient, auth: dict):
    planting = (await _plant(client, auth)).json()["planting"]
    res = await client.patch(f"/api/v1/plantings/{planting['id']}", json={"quantity": 0}, headers=auth)
    assert res.status_code == 422


async def test_update_unknown_planting(client: AsyncClient, auth: dict):
    res = await client.patch("/api/v1/plantings/999", json={"quantity": 2}, headers=auth)
    assert res.status_code == 404


async def test_update_planting_of_other_user(client: AsyncClient, auth: dict, other_auth: dict):
    planting = (await _plant(client, auth)).json()["planting"]
    res = await client.patch(
        f"/api/v1/plantings/{planting['id']}", json={"quantity": 9}, headers=other_auth
    )
    assert res.status_code == 404


async def test_delete_planting_cascades_to_its_tasks_only(client: AsyncClient, auth: dict):
    doomed = (await _plant(client, auth)).json()
    kept = (await _plant(client, auth, plant_id="kale")).json()

    res = await client.delete(f"/api/v1/plantings/{doomed['planting']['id']}", headers=auth)
    assert res.status_code == 200
    assert sorted(res.json()["deleted_task_ids"]) == sorted(t["id"] for t in doomed["tasks"])

    res = await client.get("/api/v1/tasks", headers=auth)
    remaining = {t["id"] for t in res.json()}
    assert remaining == {t["id"] for t in kept["tasks"]}

    res = await client.get(f"/api/v1/plantings/{doomed['planting']['id']}", headers=auth)
    assert res.status_code == 404


async def test_delete_unknown_planting(client: AsyncClient, auth: dict):
    res = await client.delete("/api/v1/plantings/12345", headers=auth)
    assert res.status_code == 404


async def test_list_plantings_and_planting_tasks(client: AsyncClient, auth: dict, other_auth: dict):
    first = (await _plant(client, auth)).json()
    await _plant(client, auth, plant_id="basil")
    await _plant(client, other_auth, plant_id="pea")

    res = await client.get("/api/v1/plantings", headers=auth)
    assert [p["plant_id"] for p in res.json()] == ["tomato", "basil"]

    res = await client.get(
        "/api/v1/plantings", params={"garden_id": first["planting"]["garden_id"]}, headers=auth
    )
    assert [p["plant_id"] for p in res.json()] == ["tomato"]

    res = await client.get(f"/api/v1/plantings/{first['planting']['id']}/tasks", headers=auth)
    assert res.status_code == 200
    assert len(res.json()) == 3


async def test_plantings_require_auth(client: AsyncClient):
    res = await client.get("/api/v1/plantings")
    assert res.status_code == 401


async def test_create_planting_rejects_date_at_end_of_calendar(client: AsyncClient, auth: dict):
    res = await _plant(client, auth, date_planted="9999-12-30")
    assert res.status_code == 422
    assert "out of range" in res.json()["detail"]

    res = await client.get("/api/v1/plantings", headers=auth)
    assert res.json() == []
