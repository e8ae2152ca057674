"""Vehicle records"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class VehiclesApi(Resource):

    async def list(self, vehicle_type: Optional[str] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/vehicles", self.page_params(vehicle_type=vehicle_type, **params))

    async def get(self, vehicle_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/vehicles/{segment(vehicle_id)}")

    async def get_by_registration(self, registration: str) -> Dict[str, Any]:
        return await self.client.get(f"/vehicles/registration/{segment(registration)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/vehicles", data)

    async def update(self, vehicle_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/vehicles/{segment(vehicle_id)}", data)

    async def delete(self, vehicle_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/vehicles/{segment(vehicle_id)}")

    async def history(self, vehicle_id: str, **params: Any) -> Dict[str, Any]:
        return await self.client.get(f"/vehicles/{segment(vehicle_id)}/history", self.page_params(**params))
