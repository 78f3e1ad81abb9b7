"""
CookHub Backend — Stats Tests
"""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from cookhub.services.stats_service import StatsService


class TestStats:
    @pytest.mark.asyncio
    async def test_seeded_counts(self, test_client):
        stats = (await test_client.get("/api/stats")).json()

        assert stats == {
            "total_recipes": 4,
            "total_chefs": 3,
            "total_users": 2,
            "total_master_classes": 3,
            "total_enrollments": 0,
        }

    @pytest.mark.asyncio
    async def test_counts_follow_creates(self, test_client):
        await test_client.post("/api/recipes", json={"title": "Soup", "chef_id": 1})
        await test_client.post("/api/users", json={"username": "u3", "email": "u3@example.com"})
        await test_client.post("/api/enroll", json={"user_id": 1, "master_class_id": 1})

        stats = (await test_client.get("/api/stats")).json()

        assert stats["total_recipes"] == 5
        assert stats["total_users"] == 3
        assert stats["total_enrollments"] == 1

    @pytest.mark.asyncio
    async def test_failed_count_reports_zero(self, store):
        service = StatsService()
        real_count = service._count

        async def flaky(store_, model):
            if model.__tablename__ == "recipes":
                raise OperationalError("SELECT", {}, Exception("disk I/O error"))
            return await real_count(store_, model)

        with patch.object(service, "_count", side_effect=flaky):
            stats = await service.get_stats(store)

        assert stats.total_recipes == 0
        assert stats.total_chefs == 3
