"""System settings, branches and promotions

All three live under the backend's /settings routes.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from .base import Resource, segment


class SettingsApi(Resource):

    async def list(self, category: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.get("/settings", {"category": category})

    async def get(self, key: str) -> Dict[str, Any]:
        return await self.client.get(f"/settings/{segment(key)}")

    async def update(self, key: str, value: str) -> Dict[str, Any]:
        return await self.client.put(f"/settings/{segment(key)}", {"value": value})

    async def update_bulk(self, settings: Iterable[Mapping[str, str]]) -> Dict[str, Any]:
        """Update several settings at once; each item has ``key`` and ``value``"""
        items = [{"key": item["key"], "value": item["value"]} for item in settings]
        return await self.client.put("/settings/bulk", {"settings": items})


class BranchesApi(Resource):

    async def list(self) -> Dict[str, Any]:
        return await self.client.get("/settings/branches")

    async def get(self, branch_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/settings/branches/{segment(branch_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/settings/branches", data)

    async def update(self, branch_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/settings/branches/{segment(branch_id)}", data)

    async def delete(self, branch_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/settings/branches/{segment(branch_id)}")


class PromotionsApi(Resource):

    async def list(self, is_active: Optional[bool] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/settings/promotions", self.page_params(is_active=is_active, **params))

    async def get(self, promotion_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/settings/promotions/{segment(promotion_id)}")

    async def get_by_code(self, code: str) -> Dict[str, Any]:
        return await self.client.get(f"/settings/promotions/code/{segment(code)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/settings/promotions", data)

    async def update(self, promotion_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/settings/promotions/{segment(promotion_id)}", data)

    async def delete(self, promotion_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/settings/promotions/{segment(promotion_id)}")
