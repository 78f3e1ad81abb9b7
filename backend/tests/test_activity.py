"""
CookHub Backend — Subscription & Enrollment Tests
===================================================

What we test:
    ✅ Subscribing the same (user, chef) pair twice leaves one row
    ✅ Enrolling below capacity succeeds and adds exactly one history row
    ✅ Enrolling into a full class → 409 and nothing is written
    ✅ Unknown master class → 404 (or 409 with the literal setting)
    ✅ Concurrent enrollments cannot overshoot capacity
    ✅ History and subscription listings, user_id required
"""

import asyncio

import pytest

from cookhub.exceptions import CapacityExceededError, NotFoundError
from cookhub.schemas.activity import EnrollmentRequest
from cookhub.services.activity_service import ActivityService


async def _enrollments(client) -> int:
    return (await client.get("/api/stats")).json()["total_enrollments"]


class TestSubscribe:
    @pytest.mark.asyncio
    async def test_subscribe_twice_keeps_one_row(self, test_client):
        for _ in range(2):
            response = await test_client.post("/api/subscribe", json={"user_id": 1, "chef_id": 2})
            assert response.status_code == 200
            assert response.json() == {"status": "subscribed"}

        subs = (await test_client.get("/api/user-subscriptions", params={"user_id": 1})).json()
        assert len(subs) == 1
        assert subs[0]["chef_name"] == "Юлия Высоцкая"
        assert subs[0]["speciality"] == "Русская кухня"
        assert subs[0]["chef_rating"] == pytest.approx(4.7)

    @pytest.mark.asyncio
    async def test_subscribe_body_without_content_type(self, test_client):
        response = await test_client.post("/api/subscribe", content=b'{"user_id": 2, "chef_id": 3}')

        assert response.status_code == 200
        subs = (await test_client.get("/api/user-subscriptions", params={"user_id": 2})).json()
        assert [s["chef_id"] for s in subs] == [3]

    @pytest.mark.asyncio
    async def test_user_subscriptions_requires_user_id(self, test_client):
        response = await test_client.get("/api/user-subscriptions")
        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_no_subscriptions_is_empty_list(self, test_client):
        response = await test_client.get("/api/user-subscriptions", params={"user_id": 2})

        assert response.status_code == 200
        assert response.json() == []


class TestEnroll:
    @pytest.mark.asyncio
    async def test_enroll_below_capacity_adds_one_row(self, test_client):
        before = await _enrollments(test_client)

        response = await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": 1})

        assert response.status_code == 200
        assert response.json() == {"status": "enrolled"}
        assert await _enrollments(test_client) == before + 1

    @pytest.mark.asyncio
    async def test_full_class_is_409_and_writes_nothing(self, test_client, future_class):
        created = await test_client.post(
            "/api/masterclasses",
            json=future_class("Tiny", 1, "2099-01-01 10:00", max_students=1),
        )
        class_id = created.json()["id"]

        first = await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": class_id})
        assert first.status_code == 200
        before = await _enrollments(test_client)

        second = await test_client.post("/api/enroll", json={"user_id": 2, "master_class_id": class_id})

        assert second.status_code == 409
        body = second.json()
        assert body["error"] == "capacity_exceeded"
        assert body["message"] == "No available spots"
        assert body["details"]["capacity"] == 1
        assert await _enrollments(test_client) == before

    @pytest.mark.asyncio
    async def test_unknown_class_is_404(self, test_client):
        response = await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": 999})

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"
        assert response.json()["request_id"]

    @pytest.mark.asyncio
    async def test_unknown_class_literal_mode_is_capacity_error(self, store):
        service = ActivityService(unknown_class_as_not_found=False)

        with pytest.raises(CapacityExceededError):
            await service.enroll(store, EnrollmentRequest(user_id=1, master_class_id=999))

    @pytest.mark.asyncio
    async def test_unknown_class_default_mode_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            await ActivityService().enroll(store, EnrollmentRequest(user_id=1, master_class_id=999))

    @pytest.mark.asyncio
    async def test_concurrent_enrollments_respect_capacity(self, test_client, future_class):
        created = await test_client.post(
            "/api/masterclasses",
            json=future_class("Popular", 2, "2099-02-02 10:00", max_students=3),
        )
        class_id = created.json()["id"]

        responses = await asyncio.gather(*[
            test_client.post("/api/enroll", json={"user_id": uid, "master_class_id": class_id})
            for uid in range(100, 110)
        ])

        statuses = sorted(r.status_code for r in responses)
        assert statuses.count(200) == 3
        assert statuses.count(409) == 7


class TestHistory:
    @pytest.mark.asyncio
    async def test_history_joins_class_and_chef(self, test_client):
        await test_client.post("/api/enroll", json={"user_id": 2, "master_class_id": 3})

        history = (await test_client.get("/api/user-history", params={"user_id": 2})).json()

        assert len(history) == 1
        entry = history[0]
        assert entry["master_class_id"] == 3
        assert entry["class_title"] == "Итальянская паста"
        assert entry["chef_name"] == "Джейми Оливер"
        assert entry["attended_at"]

    @pytest.mark.asyncio
    async def test_history_newest_first(self, test_client):
        await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": 1})
        await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": 2})

        history = (await test_client.get("/api/user-history", params={"user_id": 1})).json()
        assert [h["master_class_id"] for h in history] == [2, 1]

    @pytest.mark.asyncio
    async def test_history_requires_user_id(self, test_client):
        response = await test_client.get("/api/user-history", params={"user_id": ""})
        assert response.status_code == 400
