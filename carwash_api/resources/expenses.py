"""Branch expenses and their approval"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class ExpensesApi(Resource):

    async def list(
        self,
        category: Optional[str] = None,
        status: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/expenses",
            self.page_params(category=category, status=status, start_date=start_date, end_date=end_date, **params),
        )

    async def get(self, expense_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/expenses/{segment(expense_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/expenses", data)

    async def update(self, expense_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/expenses/{segment(expense_id)}", data)

    async def delete(self, expense_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/expenses/{segment(expense_id)}")

    async def approve(self, expense_id: str) -> Dict[str, Any]:
        return await self.client.patch(f"/expenses/{segment(expense_id)}/approve")

    async def reject(self, expense_id: str, reason: str) -> Dict[str, Any]:
        return await self.client.patch(f"/expenses/{segment(expense_id)}/reject", {"reason": reason})


class CashSessionsApi(Resource):
    """Cashier till sessions, opened and closed with a counted balance"""

    async def list(self, status: Optional[str] = None, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/expenses/cash-sessions", self.page_params(status=status, **params))

    async def current(self) -> Dict[str, Any]:
        """The caller's open session; ``data`` is None when there is none"""
        return await self.client.get("/expenses/cash-sessions/current")

    async def get(self, session_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/expenses/cash-sessions/{segment(session_id)}")

    async def open(self, opening_balance: float) -> Dict[str, Any]:
        return await self.client.post("/expenses/cash-sessions/open", {"opening_balance": opening_balance})

    async def close(self, closing_balance: float, notes: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.post(
            "/expenses/cash-sessions/close", {"closing_balance": closing_balance, "notes": notes}
        )
