"""Customer records and loyalty points"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class CustomersApi(Resource):

    async def list(self, customer_type: Optional[str] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/customers", self.page_params(customer_type=customer_type, **params))

    async def get(self, customer_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/customers/{segment(customer_id)}")

    async def get_by_phone(self, phone: str) -> Dict[str, Any]:
        return await self.client.get(f"/customers/phone/{segment(phone)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/customers", data)

    async def update(self, customer_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/customers/{segment(customer_id)}", data)

    async def delete(self, customer_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/customers/{segment(customer_id)}")

    async def history(self, customer_id: str, **params: Any) -> Dict[str, Any]:
        return await self.client.get(f"/customers/{segment(customer_id)}/history", self.page_params(**params))

    async def add_loyalty_points(
        self, customer_id: str, points: int, description: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self.client.post(
            f"/customers/{segment(customer_id)}/loyalty",
            {"points": points, "description": description},
        )

    async def redeem_loyalty_points(self, customer_id: str, points: int) -> Dict[str, Any]:
        return await self.client.post(f"/customers/{segment(customer_id)}/redeem", {"points": points})

    async def search(self, query: str) -> Dict[str, Any]:
        return await self.client.get("/customers/search/autocomplete", {"q": query})
