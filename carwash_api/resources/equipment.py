"""Bay equipment and its maintenance log"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class EquipmentApi(Resource):

    async def list(self, status: Optional[str] = None, bay_id: Optional[str] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/bays/equipment", self.page_params(status=status, bay_id=bay_id, **params))

    async def get(self, equipment_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/bays/equipment/{segment(equipment_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/bays/equipment", data)

    async def update(self, equipment_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/bays/equipment/{segment(equipment_id)}", data)

    async def delete(self, equipment_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/bays/equipment/{segment(equipment_id)}")

    async def log_maintenance(
        self, equipment_id: str, notes: str, next_maintenance: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.client.post(
            f"/bays/equipment/{segment(equipment_id)}/maintenance",
            {"notes": notes, "next_maintenance": next_maintenance},
        )
