"""
Tests for health.py and the root endpoints.
"""

from jobtracker.health import check_database


async def test_check_database_connected(engine):
    health = await check_database(engine)

    assert health.status == "connected"
    assert health.latency_ms is not None
    assert health.error is None


async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert "Ready" in response.json()["message"]
