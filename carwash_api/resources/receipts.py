"""Job receipts for display and printing"""

from typing import Any, Dict

from .base import Resource, segment

RECEIPT_FORMATS = ("text", "html", "json")


class ReceiptsApi(Resource):

    async def generate(self, job_id: str, receipt_format: str = "html") -> Dict[str, Any]:
        """Render the receipt of a job; ``data`` holds the text/HTML or the receipt fields"""
        if receipt_format not in RECEIPT_FORMATS:
            raise ValueError(f"format must be one of {', '.join(RECEIPT_FORMATS)}")
        return await self.client.get(f"/receipts/{segment(job_id)}", {"format": receipt_format})

    async def print(self, job_id: str) -> Dict[str, Any]:
        """Send the receipt to the branch's receipt printer"""
        return await self.client.post(f"/receipts/{segment(job_id)}/print")
