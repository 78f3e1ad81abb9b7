"""
CookHub Backend — Chef, User & Master Class Endpoint Tests
"""

import pytest


class TestChefs:
    @pytest.mark.asyncio
    async def test_list_seeded_chefs(self, test_client):
        chefs = (await test_client.get("/api/chefs")).json()

        assert [c["name"] for c in chefs] == ["Гордон Рамзи", "Юлия Высоцкая", "Джейми Оливер"]
        assert chefs[0]["rating"] == pytest.approx(4.9)

    @pytest.mark.asyncio
    async def test_create_chef(self, test_client):
        response = await test_client.post(
            "/api/chefs",
            json={"name": "Massimo Bottura", "speciality": "Итальянская кухня", "rating": 5.0},
        )

        assert response.status_code == 200
        chef = response.json()
        assert chef["id"] == 4
        assert chef["speciality"] == "Итальянская кухня"


class TestUsers:
    @pytest.mark.asyncio
    async def test_create_and_list(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"username": "baker", "email": "baker@example.com", "preferences": "выпечка"},
        )

        assert response.status_code == 200
        assert response.json()["id"] == 3

        users = (await test_client.get("/api/users")).json()
        assert [u["username"] for u in users] == ["foodlover", "homecook", "baker"]

    @pytest.mark.asyncio
    async def test_duplicate_username_is_server_error(self, test_client):
        response = await test_client.post(
            "/api/users",
            json={"username": "foodlover", "email": "other@example.com"},
        )

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "UNIQUE" not in body["message"]


class TestMasterClasses:
    @pytest.mark.asyncio
    async def test_list_is_ordered_by_datetime(self, test_client, future_class):
        await test_client.post("/api/masterclasses", json=future_class("Late", 1, "2099-01-01 10:00"))
        await test_client.post("/api/masterclasses", json=future_class("Early", 2, "2000-01-01 10:00"))

        classes = (await test_client.get("/api/masterclasses")).json()
        times = [c["datetime"] for c in classes]

        assert times == sorted(times)
        assert classes[0]["title"] == "Early"
        assert classes[-1]["title"] == "Late"
        assert classes[0]["chef_name"] == "Юлия Высоцкая"

    @pytest.mark.asyncio
    async def test_create_exposes_datetime_field(self, test_client, future_class):
        response = await test_client.post(
            "/api/masterclasses",
            json=future_class("Sushi", 3, "2099-05-05 12:00", max_students=4),
        )

        assert response.status_code == 200
        created = response.json()
        assert created["datetime"] == "2099-05-05 12:00"
        assert created["max_students"] == 4
        assert "scheduled_at" not in created
