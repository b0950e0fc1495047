from carhire.app import build_app


async def test_preflight(client):
    response = await client.options("/api/v1/vehicles", headers={
        "Origin": "http://example.com",
        "Access-Control-Request-Method": "POST",
    })
    assert response.status == 200
    assert response.headers["Access-Control-Allow-Origin"] == "http://example.com"


async def test_cors_headers_on_views(client, random_vehicle):
    response = await client.get(f"/api/v1/vehicles/{random_vehicle.id}", headers={"Origin": "http://example.com"})
    assert response.headers["Access-Control-Allow-Origin"] == "http://example.com"


def test_registering_views_does_not_warn(storage, recwarn):
    build_app(storage=storage)
    assert not [warning for warning in recwarn if "webview" in str(warning.message)]
