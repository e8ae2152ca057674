"""Audit trail of user actions"""

from typing import Any, Dict, Optional

from .base import Resource


class ActivityLogsApi(Resource):

    async def list(
        self,
        user_id: Optional[str] = None,
        entity_type: Optional[str] = None,
        action: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        **params: Any,
    ) -> Dict[str, Any]:
        return await self.client.get(
            "/activity-logs",
            self.page_params(
                user_id=user_id,
                entity_type=entity_type,
                action=action,
                start_date=start_date,
                end_date=end_date,
                **params,
            ),
        )
