"""Wash bays"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class BaysApi(Resource):

    async def list(self, status: Optional[str] = None, bay_type: Optional[str] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/bays", self.page_params(status=status, bay_type=bay_type, **params))

    async def get(self, bay_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/bays/{segment(bay_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/bays", data)

    async def update(self, bay_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/bays/{segment(bay_id)}", data)

    async def delete(self, bay_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/bays/{segment(bay_id)}")

    async def update_status(self, bay_id: str, status: str) -> Dict[str, Any]:
        return await self.client.put(f"/bays/{segment(bay_id)}/status", {"status": status})

    async def available(self) -> Dict[str, Any]:
        return await self.client.get("/bays/available")

    async def utilization(self, start_date: Optional[str] = None, end_date: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get("/bays/utilization", {"start_date": start_date, "end_date": end_date})
