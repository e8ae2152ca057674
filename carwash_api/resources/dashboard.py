"""Dashboard metrics and live queue"""

from typing import Any, Dict

from .base import Resource

SUMMARY_PERIODS = ("today", "week", "month")


class DashboardApi(Resource):

    async def metrics(self) -> Dict[str, Any]:
        return await self.client.get("/dashboard/metrics")

    async def alerts(self) -> Dict[str, Any]:
        return await self.client.get("/dashboard/alerts")

    async def queue(self) -> Dict[str, Any]:
        return await self.client.get("/dashboard/queue")

    async def bays(self) -> Dict[str, Any]:
        return await self.client.get("/dashboard/bays")

    async def summary(self, period: str = "today") -> Dict[str, Any]:
        if period not in SUMMARY_PERIODS:
            raise ValueError(f"period must be one of {', '.join(SUMMARY_PERIODS)}")
        return await self.client.get("/dashboard/summary", {"period": period})
