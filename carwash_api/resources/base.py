"""
Base class shared by the endpoint wrappers.
"""
from typing import Any, Dict, Optional
from urllib.parse import quote

from carwash_api.client import ApiClient


def segment(value: Any) -> str:
    """Quote a value for use as a single path segment"""
    return quote(str(value), safe="")


class Resource:
    """Thin wrapper over one area of the REST API

    Methods return the decoded envelope and let ApiError propagate.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    @staticmethod
    def page_params(
        page: Optional[int] = None,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        **filters: Any,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "page": page,
            "limit": limit,
            "search": search,
            "sort_by": sort_by,
            "sort_order": sort_order,
        }
        params.update(filters)
        return params
