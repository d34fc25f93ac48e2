"""健康检查测试

测试内容：
1. GET /health 返回 200 + ok
2. GET /ready 正常时返回 200 + checks 结构
3. GET /ready SQLite 不可用时返回 503
"""

from httpx import ASGITransport, AsyncClient


class TestHealthCheck:
    async def test_health_returns_200(self, client: AsyncClient):
        """GET /health 永远返回 200"""
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    async def test_ready_returns_200(self, client: AsyncClient, create_task):
        await create_task()

        resp = await client.get("/ready")
        assert resp.status_code == 200
        data = resp.json()
        assert data["status"] == "ready"
        assert data["checks"]["sqlite"] == "ok"
        assert data["checks"]["task_count"] == 1

    async def test_ready_sqlite_failure(self, app, task_store):
        """关闭数据库连接后 /ready 返回 503，且不暴露异常细节"""
        await task_store.close()

        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            resp = await ac.get("/ready")
            assert resp.status_code == 503
            data = resp.json()
            assert data["status"] == "not_ready"
            assert data["checks"]["sqlite"] == "unavailable"
