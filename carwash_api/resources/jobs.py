"""Wash jobs: check-in, status changes, services and discounts"""

from typing import Any, Dict, Optional

from .base import Resource, segment

# Statuses of jobs still on the premises
ACTIVE_STATUSES = ("checked_in", "in_queue", "washing", "detailing")
DISCOUNT_TYPES = ("percentage", "fixed")


class JobsApi(Resource):

    async def list(
        self,
        status: Optional[str] = None,
        payment_status: Optional[str] = None,
        bay_id: Optional[str] = None,
        assigned_staff_id: Optional[str] = None,
        date: Optional[str] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/jobs",
            self.page_params(
                status=status,
                payment_status=payment_status,
                bay_id=bay_id,
                assigned_staff_id=assigned_staff_id,
                date=date,
                **params,
            ),
        )

    async def get(self, job_id: str) -> Dict[str, Any]:
        return await self.client.get(f"/jobs/{segment(job_id)}")

    async def get_by_number(self, job_number: str) -> Dict[str, Any]:
        return await self.client.get(f"/jobs/number/{segment(job_number)}")

    async def check_in(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return await self.client.post("/jobs/check-in", data)

    async def update_status(self, job_id: str, status: str, notes: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.put(f"/jobs/{segment(job_id)}/status", {"status": status, "notes": notes})

    async def assign_bay(self, job_id: str, bay_id: str) -> Dict[str, Any]:
        return await self.client.put(f"/jobs/{segment(job_id)}/assign-bay", {"bay_id": bay_id})

    async def assign_staff(self, job_id: str, staff_id: str) -> Dict[str, Any]:
        return await self.client.put(f"/jobs/{segment(job_id)}/assign-staff", {"staff_id": staff_id})

    async def add_service(self, job_id: str, service_id: str, quantity: int = 1) -> Dict[str, Any]:
        return await self.client.post(
            f"/jobs/{segment(job_id)}/services",
            {"service_id": service_id, "quantity": quantity or 1},
        )

    async def remove_service(self, job_id: str, job_service_id: str) -> Dict[str, Any]:
        return await self.client.delete(f"/jobs/{segment(job_id)}/services/{segment(job_service_id)}")

    async def apply_discount(self, job_id: str, discount_type: str, discount_value: float) -> Dict[str, Any]:
        if discount_type not in DISCOUNT_TYPES:
            raise ValueError(f"discount_type must be one of {', '.join(DISCOUNT_TYPES)}")
        return await self.client.post(
            f"/jobs/{segment(job_id)}/discount",
            {"discount_type": discount_type, "discount_value": discount_value},
        )

    async def cancel(self, job_id: str, reason: Optional[str] = None) -> Dict[str, Any]:
        return await self.update_status(job_id, "cancelled", reason)

    async def queue(self) -> Dict[str, Any]:
        return await self.client.get("/dashboard/queue")

    async def active(self) -> Dict[str, Any]:
        return await self.client.get("/jobs", {"status": ",".join(ACTIVE_STATUSES)})
