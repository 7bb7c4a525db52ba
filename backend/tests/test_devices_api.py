from __future__ import annotations

import pytest


@pytest.fixture
def device(client):
    response = client.post("/devices", json={"name": "Cane sensor", "type": 1, "serial_number": "SN-001"})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_and_list(client, device):
    assert device["name"] == "Cane sensor"
    assert device["serial_number"] == "SN-001"

    response = client.get("/devices")

    assert response.status_code == 200
    assert [d["id"] for d in response.json()] == [device["id"]]


def test_create_rejects_blank_name(client):
    response = client.post("/devices", json={"name": "   ", "type": 1, "serial_number": "SN-9"})

    assert response.status_code == 422


def test_duplicate_serial_number(client, device):
    response = client.post("/devices", json={"name": "Other", "type": 2, "serial_number": "SN-001"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Error creating device"


def test_show_missing(client):
    response = client.get("/devices/999")

    assert response.status_code == 404
    assert response.json()["detail"] == "Device not found"


def test_update_device(client, device):
    response = client.put(f"/devices/{device['id']}", json={"name": "Glasses"})

    assert response.status_code == 200
    assert response.json()["name"] == "Glasses"
    assert response.json()["serial_number"] == "SN-001"


def test_update_missing_device(client):
    assert client.put("/devices/999", json={"name": "x"}).status_code == 404


def test_delete_returns_deleted_device(client, device):
    response = client.delete(f"/devices/{device['id']}")

    assert response.status_code == 200
    assert response.json()["id"] == device["id"]
    assert client.get(f"/devices/{device['id']}").status_code == 404
    assert client.delete(f"/devices/{device['id']}").status_code == 404
