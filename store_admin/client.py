"""
Async client for the admin API, as used by back-office forms.

``StoreAdminClient`` wraps ``httpx.AsyncClient`` and turns non-2xx answers
into ``ApiRequestError`` carrying the plain-text message from the server.

``ResourceForm`` models one form on screen: it holds a ``loading`` flag for
the single request it may have in flight and refuses a second submission
until the first one has finished.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

RESOURCES = ("billboards", "categories", "sizes", "colors", "products")


class ApiRequestError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class SubmissionInProgress(Exception):
    """A form tried to send a request while its previous one is still running."""


class StoreAdminClient:
    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.AsyncClient(
            base_url=base_url, headers=headers, transport=transport, timeout=timeout
        )

    async def __aenter__(self) -> "StoreAdminClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        response = await self._client.request(method, path, json=json)
        if response.status_code >= 400:
            logger.debug("%s %s -> %s %s", method, path, response.status_code, response.text)
            raise ApiRequestError(response.status_code, response.text)
        return response.json()

    @staticmethod
    def _path(store_id: str, resource: str, record_id: Optional[str] = None) -> str:
        if resource not in RESOURCES:
            raise ValueError(f"Unknown resource: {resource}")
        path = f"/api/{store_id}/{resource}"
        return f"{path}/{record_id}" if record_id else path

    async def list(self, store_id: str, resource: str) -> List[Dict[str, Any]]:
        return await self._request("GET", self._path(store_id, resource))

    async def get(self, store_id: str, resource: str, record_id: str) -> Optional[Dict[str, Any]]:
        return await self._request("GET", self._path(store_id, resource, record_id))

    async def create(self, store_id: str, resource: str, values: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self._path(store_id, resource), json=values)

    async def update(
        self, store_id: str, resource: str, record_id: str, values: Dict[str, Any]
    ) -> Dict[str, Any]:
        return await self._request("PATCH", self._path(store_id, resource, record_id), json=values)

    async def delete(self, store_id: str, resource: str, record_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", self._path(store_id, resource, record_id))


class ResourceForm:
    """Create/edit form for one resource record.

    With ``record_id`` set the form edits that record, otherwise submitting
    creates a new one and the form switches to editing it.
    """

    def __init__(
        self,
        client: StoreAdminClient,
        store_id: str,
        resource: str,
        record_id: Optional[str] = None,
    ):
        self.client = client
        self.store_id = store_id
        self.resource = resource
        self.record_id = record_id
        self.loading = False

    def _begin(self) -> None:
        if self.loading:
            raise SubmissionInProgress(f"{self.resource} form is already submitting")
        self.loading = True

    async def submit(self, values: Dict[str, Any]) -> Dict[str, Any]:
        self._begin()
        try:
            if self.record_id:
                return await self.client.update(self.store_id, self.resource, self.record_id, values)
            record = await self.client.create(self.store_id, self.resource, values)
            self.record_id = record["id"]
            return record
        finally:
            self.loading = False

    async def delete(self) -> Dict[str, Any]:
        """Delete the edited record; a 409 carries the "remove dependents first" hint."""
        if not self.record_id:
            raise ValueError("Nothing to delete: the form has no record")
        self._begin()
        try:
            record = await self.client.delete(self.store_id, self.resource, self.record_id)
            self.record_id = None
            return record
        finally:
            self.loading = False
