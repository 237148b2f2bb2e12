"""
Target listing and health route tests.
"""

import pytest


class TestTargets:
    @pytest.mark.asyncio
    async def test_list_targets(self, async_client):
        resp = await async_client.get("/api/targets")
        assert resp.status_code == 200
        assert resp.json() == [
            {"name": "flutter", "filename": "main.dart", "aliases": ["dart", "mobile"]},
            {"name": "react", "filename": "page.tsx", "aliases": ["web", "nextjs", "tsx"]},
        ]


class TestHealth:
    @pytest.mark.asyncio
    async def test_health_reports_open_sessions(self, async_client):
        await async_client.post("/api/sessions")
        resp = await async_client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "sessions": 1}
