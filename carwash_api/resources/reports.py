"""Sales, operational and financial reports"""

from typing import Any, Dict, Optional

from .base import Resource, segment

GROUPINGS = ("day", "week", "month")


class ReportsApi(Resource):

    async def sales(self, start_date: str, end_date: str, group_by: Optional[str] = None) -> Dict[str, Any]:
        if group_by is not None and group_by not in GROUPINGS:
            raise ValueError(f"group_by must be one of {', '.join(GROUPINGS)}")
        return await self.client.get(
            "/reports/sales", {"start_date": start_date, "end_date": end_date, "group_by": group_by}
        )

    async def operational(self, start_date: str, end_date: str) -> Dict[str, Any]:
        return await self.client.get("/reports/operational", {"start_date": start_date, "end_date": end_date})

    async def customers(self, start_date: str, end_date: str, limit: Optional[int] = None) -> Dict[str, Any]:
        return await self.client.get(
            "/reports/customers", {"start_date": start_date, "end_date": end_date, "limit": limit}
        )

    async def financial(self, start_date: str, end_date: str) -> Dict[str, Any]:
        return await self.client.get("/reports/financial", {"start_date": start_date, "end_date": end_date})

    async def inventory(self) -> Dict[str, Any]:
        return await self.client.get("/reports/inventory")

    async def export(self, report_type: str, params: Optional[Dict[str, str]] = None) -> bytes:
        """Download a report file (CSV/PDF as produced by the backend)"""
        return await self.client.request_raw("GET", f"/reports/export/{segment(report_type)}", query=params)
