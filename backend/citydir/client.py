"""
HTTP client for the public read side of the directory API.

Used by site renderers and scripts that only need to read the directory.
Failures never propagate: list calls fall back to an empty list and
single-item calls to None, so a page can still render without them.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


class DirectoryClient:
    """
    Synchronous client for the directory REST API.

    ``transport`` lets callers plug in any httpx transport, for example
    ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a path below the API prefix and decode the JSON body."""
        response = self._client.get(f"{API_PREFIX}{path}", params=params)
        response.raise_for_status()
        return response.json()

    def _get_list(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        try:
            result = self._get(path, params=params)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Directory request GET {path} failed: {e}")
            return []

        if not isinstance(result, list):
            logger.warning(f"Directory request GET {path} returned {type(result).__name__}, expected list")
            return []
        return result

    def _get_one(self, path: str) -> Optional[Dict[str, Any]]:
        try:
            return self._get(path)
        except httpx.HTTPStatusError as e:
            if e.response.status_code != 404:
                logger.warning(f"Directory request GET {path} failed: {e}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Directory request GET {path} failed: {e}")
            return None

    # ===========================================
    # Taxonomy
    # ===========================================

    def list_categories(self) -> List[Dict[str, Any]]:
        return self._get_list("/categories")

    def list_sections(self, **filters) -> List[Dict[str, Any]]:
        return self._get_list("/sections", params=_query(filters))

    def get_section_by_slug(self, slug: str) -> Optional[Dict[str, Any]]:
        """Section with its member businesses, attractions and events."""
        return self._get_one(f"/sections/slug/{slug}")

    # ===========================================
    # Listings
    # ===========================================

    def list_businesses(self, **filters) -> List[Dict[str, Any]]:
        """
        Fetch businesses, optionally filtered.

        Args:
            **filters: any of search, category_id, type_id, section_id,
                brand_id, featured, highlight, premium

        Returns:
            List of business payloads, each with ``is_open_now``
        """
        return self._get_list("/businesses", params=_query(filters))

    def get_business(self, business_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one(f"/businesses/{business_id}")

    def list_attractions(self, **filters) -> List[Dict[str, Any]]:
        return self._get_list("/attractions", params=_query(filters))

    def list_events(self, **filters) -> List[Dict[str, Any]]:
        return self._get_list("/events", params=_query(filters))


def _query(filters: Dict[str, Any]) -> Dict[str, str]:
    params = {}
    for key, value in filters.items():
        if value is None:
            continue
        params[key] = str(value).lower() if isinstance(value, bool) else str(value)
    return params
