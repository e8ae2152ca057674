"""Staff accounts managed by administrators"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class UsersApi(Resource):

    async def list(self, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/auth/users", self.page_params(**params))

    async def get(self, user_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/auth/users/{segment(user_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Register a new staff member; ``data`` must include a password"""
        if not data.get("password"):
            raise ValueError("A password is required to create a user")
        return await self.client.post("/auth/register", data)

    async def update(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/auth/users/{segment(user_id)}", data)

    async def delete(self, user_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/auth/users/{segment(user_id)}")

    async def performance(
        self, user_id: str, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> Dict[str, Any]:
        """Jobs completed, average time and rating of one staff member"""
        return await self.client.get(
            f"/auth/users/{segment(user_id)}/performance",
            {"start_date": start_date, "end_date": end_date},
        )
