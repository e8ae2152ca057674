"""Wash subscription plans and customer subscriptions"""

from typing import Any, Dict, Optional

from .base import Resource, segment


class SubscriptionsApi(Resource):

    async def plans(self, **params: Any) -> Dict[str, Any]:
        return await self.client.get("/subscriptions/plans", self.page_params(**params))

    async def get_plan(self, plan_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/subscriptions/plans/{segment(plan_id)}")

    async def create_plan(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/subscriptions/plans", data)

    async def update_plan(self, plan_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.put(f"/subscriptions/plans/{segment(plan_id)}", data)

    async def delete_plan(self, plan_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/subscriptions/plans/{segment(plan_id)}")

    async def list(
        self, status: Optional[str] = None, customer_id: Optional[str] = None, **params: Any
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/subscriptions", self.page_params(status=status, customer_id=customer_id, **params)
        )

    async def get(self, subscription_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/subscriptions/{segment(subscription_id)}")

    async def create(self, customer_id: str, plan_id: str, vehicle_id: str, payment_method: str) -> Dict[str, Any]:
        return await self.client.post(
            "/subscriptions",
            {
                "customer_id": customer_id,
                "plan_id": plan_id,
                "vehicle_id": vehicle_id,
                "payment_method": payment_method,
            },
        )

    async def cancel(self, subscription_id: str, reason: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.patch(f"/subscriptions/{segment(subscription_id)}/cancel", {"reason": reason})

    async def record_usage(self, subscription_id: str, job_id: str) -> Dict[str, Any]:
        """Count one wash against the subscription"""
        return await self.client.post(f"/subscriptions/{segment(subscription_id)}/usage", {"job_id": job_id})

    async def check_validity(self, vehicle_id: str) -> Dict[str, Any]:
        """Whether the vehicle has an active subscription with washes left"""
        return await self.client.get(f"/subscriptions/check/{segment(vehicle_id)}")
