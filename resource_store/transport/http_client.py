"""
HTTP transport for RESTful resources.
"""

from typing import Any, Dict, Hashable, List, Mapping, Optional
import httpx

from ..config import StoreSettings, get_settings
from ..errors import EntityNotFoundError, TransportError
from ..logging import get_logger
from .base import Entity, entity_endpoint


class HttpTransport:
    """Client performing list/fetch/create/update/delete against one endpoint."""

    def __init__(self, endpoint: str, settings: Optional[StoreSettings] = None):
        self.settings = settings or get_settings()
        self.endpoint = self._absolute(endpoint)
        self.timeout = self.settings.request_timeout
        self.logger = get_logger("resource_store.http_transport")

    def _absolute(self, endpoint: str) -> str:
        if endpoint.startswith(("http://", "https://")) or not self.settings.api_base_url:
            return endpoint
        return f"{self.settings.api_base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.settings.auth_token:
            headers["Authorization"] = f"Bearer {self.settings.auth_token}"
        return headers

    async def list(self, params: Optional[Mapping[str, Any]] = None) -> List[Entity]:
        """Fetch the collection, optionally filtered by query parameters.

        Parameters are merged onto the endpoint's own query string, so
        ``templates?category_id=13`` keeps its filter.
        """
        url = self.endpoint
        if params:
            url = str(httpx.URL(self.endpoint).copy_merge_params(dict(params)))
        data = await self._request("GET", url)
        if not isinstance(data, list):
            raise TransportError(
                self.endpoint,
                "Expected a JSON array from list endpoint",
                details={"payload_type": type(data).__name__}
            )
        return data

    async def fetch_one(self, id: Hashable) -> Entity:
        """Fetch a single entity."""
        return await self._request("GET", entity_endpoint(self.endpoint, id), entity_id=id)

    async def create(self, payload: Mapping[str, Any]) -> Entity:
        """Create an entity; the server assigns its id."""
        return await self._request("POST", self.endpoint, json=dict(payload))

    async def update(self, id: Hashable, payload: Mapping[str, Any]) -> Entity:
        """Replace an entity."""
        return await self._request("PUT", entity_endpoint(self.endpoint, id), json=dict(payload), entity_id=id)

    async def delete(self, id: Hashable) -> None:
        """Delete an entity."""
        await self._request("DELETE", entity_endpoint(self.endpoint, id), entity_id=id, expect_body=False)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Dict[str, Any]] = None,
        entity_id: Optional[Hashable] = None,
        expect_body: bool = True,
    ) -> Any:
        """Execute one request and decode its JSON body."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                if method == "GET":
                    response = await client.get(url, headers=self._headers())
                elif method == "POST":
                    response = await client.post(url, json=json, headers=self._headers())
                elif method == "PUT":
                    response = await client.put(url, json=json, headers=self._headers())
                else:
                    response = await client.delete(url, headers=self._headers())
        except httpx.HTTPError as exc:
            self.logger.error("Resource request failed", method=method, url=url, error=str(exc))
            raise TransportError(
                self.endpoint,
                str(exc) or type(exc).__name__,
                details={"method": method, "url": url}
            ) from exc

        if response.status_code == 404 and entity_id is not None:
            self.logger.info("Resource entity not found", method=method, url=url)
            raise EntityNotFoundError(self.endpoint, entity_id, details={"method": method, "url": url})

        if not 200 <= response.status_code < 300:
            self.logger.error(
                "Resource request returned error status",
                method=method,
                url=url,
                status_code=response.status_code,
                response=response.text
            )
            raise TransportError(
                self.endpoint,
                f"Unexpected status {response.status_code}",
                details={"method": method, "url": url, "status_code": response.status_code, "body": response.text}
            )

        if not expect_body or response.status_code == 204:
            return None

        try:
            data = response.json()
        except ValueError as exc:
            self.logger.error("Resource response is not JSON", method=method, url=url)
            raise TransportError(
                self.endpoint,
                "Response body is not valid JSON",
                details={"method": method, "url": url, "status_code": response.status_code}
            ) from exc

        self.logger.debug("Resource request succeeded", method=method, url=url, status_code=response.status_code)
        return data
