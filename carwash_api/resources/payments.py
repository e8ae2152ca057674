"""Payments, refunds and M-Pesa STK push"""

from typing import Any, Dict, Optional

from utils.formatting import is_valid_kenyan_phone, normalize_phone_number
from .base import Resource, segment


class PaymentsApi(Resource):

    async def list(
        self,
        payment_method: Optional[str] = None,
        payment_status: Optional[str] = None,
        date: Optional[str] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/payments",
            self.page_params(payment_method=payment_method, payment_status=payment_status, date=date, **params),
        )

    async def get(self, payment_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/payments/{segment(payment_id)}")

    async def create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/payments", data)

    async def initiate_mpesa(self, job_id: str, phone: str, amount: float) -> Dict[str, Any]:
        """Start an M-Pesa STK push to the customer's phone"""
        if not is_valid_kenyan_phone(phone):
            raise ValueError(f"Not a valid Kenyan phone number: {phone}")
        return await self.client.post(
            "/payments/mpesa/stk-push",
            {"job_id": job_id, "phone": normalize_phone_number(phone), "amount": amount},
        )

    async def mpesa_status(self, checkout_request_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/payments/mpesa/status/{segment(checkout_request_id)}")

    async def refund(self, payment_id: str, amount: float, reason: str) -> Dict[str, Any]:
        return await self.client.post(f"/payments/{segment(payment_id)}/refund", {"amount": amount, "reason": reason})

    async def for_job(self, job_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/payments/job/{segment(job_id)}")
