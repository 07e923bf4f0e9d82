from httpx import AsyncClient


async def test_health(client: AsyncClient):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


# ── Plants ────────────────────────────────────────────────────────────────────


async def test_list_plants_sorted_by_name(client: AsyncClient):
    res = await client.get("/api/v1/plants")
    assert res.status_code == 200
    names = [p["name"] for p in res.json()]
    assert len(names) == 10
    assert names == sorted(names)


async def test_filter_plants(client: AsyncClient):
    res = await client.get("/api/v1/plants", params={"watering": "low"})
    assert [p["id"] for p in res.json()] == ["rosemary"]

    res = await client.get("/api/v1/plants", params={"month": 6})
    assert [p["id"] for p in res.json()] == ["basil"]

    res = await client.get("/api/v1/plants", params={"greenhouse": "false"})
    assert res.json() == []


async def test_filter_plants_rejects_bad_month(client: AsyncClient):
    res = await client.get("/api/v1/plants", params={"month": 13})
    assert res.status_code == 422


async def test_get_plant(client: AsyncClient):
    res = await client.get("/api/v1/plants/tomato")
    assert res.status_code == 200
    data = res.json()
    assert data["name"] == "Tomato"
    assert data["watering_needs"] == "high"
    assert data["days_to_maturity"] == 80
    assert data["planting_months"] == [3, 4, 5]


async def test_get_unknown_plant(client: AsyncClient):
    res = await client.get("/api/v1/plants/triffid")
    assert res.status_code == 404


# ── Climate ───────────────────────────────────────────────────────────────────


async def test_climate_summary(client: AsyncClient):
    res = await client.get("/api/v1/climate")
    assert res.status_code == 200
    data = res.json()
    assert data["location"] == "Winston, Oregon"
    assert data["usda_zone"] == "8b/9a"
    assert [m["month"] for m in data["months"]] == list(range(1, 13))


async def test_climate_month(client: AsyncClient):
    res = await client.get("/api/v1/climate/months/7")
    assert res.status_code == 200
    assert res.json()["name"] == "July"

    res = await client.get("/api/v1/climate/months/13")
    assert res.status_code == 422
