"""Wash services and their per-vehicle-type pricing"""

from typing import Any, Dict, List, Optional

from .base import Resource, segment


class ServicesApi(Resource):

    async def list(
        self, category: Optional[str] = None, is_addon: Optional[bool] = None, **params: Any
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/services", self.page_params(category=category, is_addon=is_addon, **params)
        )

    async def get(self, service_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/services/{segment(service_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/services", data)

    async def update(self, service_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/services/{segment(service_id)}", data)

    async def delete(self, service_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/services/{segment(service_id)}")

    async def pricing(self, service_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/services/{segment(service_id)}/pricing")

    async def update_pricing(self, service_id: str, prices: List[Dict[str, Any]]) -> Dict[str, Any]:
        return await self.client.put(f"/services/{segment(service_id)}/pricing", {"prices": prices})
