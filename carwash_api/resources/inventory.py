"""Inventory items, stock movements and suppliers"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class InventoryApi(Resource):

    async def list(self, category: Optional[str] = None, low_stock: Optional[bool] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/inventory", self.page_params(category=category, low_stock=low_stock, **params))

    async def get(self, item_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/inventory/{segment(item_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/inventory", data)

    async def update(self, item_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/inventory/{segment(item_id)}", data)

    async def delete(self, item_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/inventory/{segment(item_id)}")

    async def _transaction(self, item_id: str, transaction_type: str, quantity: float, **fields: Any) -> Dict[str, Any]:
        """Record a stock movement; all three kinds share one endpoint"""
        body = {"item_id": item_id, "transaction_type": transaction_type, "quantity": quantity}
        body.update({key: value for key, value in fields.items() if value is not None})
        return await self.client.post("/inventory/transaction", body)

    async def add_stock(
        self,
        item_id: str,
        quantity: float,
        unit_cost: Optional[float] = None,
        reference: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._transaction(
            item_id, "stock_in", quantity, unit_cost=unit_cost, reference=reference, notes=notes
        )

    async def remove_stock(
        self, item_id: str, quantity: float, notes: Optional[str] = None, job_id: Optional[str] = None
    ) -> Dict[str, Any]:
        return await self._transaction(item_id, "stock_out", quantity, notes=notes, job_id=job_id)

    async def adjust_stock(self, item_id: str, quantity: float, notes: Optional[str] = None) -> Dict[str, Any]:
        return await self._transaction(item_id, "adjustment", quantity, notes=notes)

    async def transactions(self, item_id: str, **params: Any) -> Dict[str, Any]:
        return await self.client.get(f"/inventory/{segment(item_id)}/transactions", self.page_params(**params))

    async def low_stock(self) -> Dict[str, Any]:
        return await self.client.get("/inventory/low-stock")


class SuppliersApi(Resource):

    async def list(self, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/inventory/suppliers", self.page_params(**params))

    async def get(self, supplier_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/inventory/suppliers/{segment(supplier_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/inventory/suppliers", data)

    async def update(self, supplier_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/inventory/suppliers/{segment(supplier_id)}", data)

    async def delete(self, supplier_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/inventory/suppliers/{segment(supplier_id)}")
