"""
Datastore client — thin wrapper over the Supabase REST (PostgREST) interface.
Builds authenticated requests against /rest/v1/<table> and returns a
DatastoreResult instead of raising, so route handlers decide how to map failures.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

REST_PATH = "/rest/v1"


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    anon_key: str
    service_role_key: str
    timeout: float = 30.0


class DatastoreErrorKind(str, Enum):
    HTTP = "http"
    NETWORK = "network"


@dataclass
class DatastoreError:
    kind: DatastoreErrorKind
    message: str
    status_code: Optional[int] = None
    details: Any = None


@dataclass
class DatastoreResult:
    data: Any = None
    error: Optional[DatastoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _equality_params(filter: Optional[dict[str, Any]]) -> list[tuple[str, str]]:
    """PostgREST equality predicates: {"status": "active"} -> status=eq.active"""
    if not filter:
        return []
    return [(key, f"eq.{value}") for key, value in filter.items()]


def _error_from_response(response: httpx.Response) -> DatastoreError:
    try:
        details = response.json()
    except ValueError:
        details = {"message": "Unknown error"}
    message = details.get("message") if isinstance(details, dict) else None
    return DatastoreError(
        kind=DatastoreErrorKind.HTTP,
        message=message or f"HTTP {response.status_code}",
        status_code=response.status_code,
        details=details,
    )


class SupabaseREST:
    """
    Table-oriented REST client. One instance per config; every call is a
    live request with its own httpx.AsyncClient. No retries, no pagination.
    """

    def __init__(self, config: SupabaseConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self._transport = transport

    def table_url(self, table: str) -> str:
        return f"{self.config.url}{REST_PATH}/{table}"

    def headers(self, use_service_role: bool = False, extra: Optional[dict[str, str]] = None) -> dict[str, str]:
        api_key = self.config.service_role_key if use_service_role else self.config.anon_key
        h = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        if extra:
            h.update(extra)
        return h

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.config.timeout, transport=self._transport)

    async def request(
        self,
        table: str,
        method: str,
        body: Any = None,
        select: Optional[str] = None,
        filter: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
        use_service_role: bool = False,
    ) -> DatastoreResult:
        """Send one request. Never raises for HTTP or network failures."""
        method = method.upper()
        params: list[tuple[str, str]] = []
        if select and method == "GET":
            params.append(("select", select))
        # PATCH/DELETE without a predicate would touch every row
        if method in ("GET", "PATCH", "DELETE"):
            params.extend(_equality_params(filter))

        logger.debug(f"Datastore {method} {table} params={params}")
        try:
            async with self._client() as client:
                response = await client.request(
                    method,
                    self.table_url(table),
                    params=params or None,
                    json=body,
                    headers=self.headers(use_service_role, headers),
                )
        except httpx.HTTPError as e:
            logger.error(f"Datastore {method} {table} failed: {e}")
            return DatastoreResult(
                error=DatastoreError(kind=DatastoreErrorKind.NETWORK, message=str(e) or type(e).__name__),
            )

        if not response.is_success:
            error = _error_from_response(response)
            logger.error(f"Datastore {method} {table} returned {response.status_code}: {error.message}")
            return DatastoreResult(error=error)

        if method == "DELETE" or not response.content:
            return DatastoreResult(data=None)
        try:
            return DatastoreResult(data=response.json())
        except ValueError as e:
            return DatastoreResult(
                error=DatastoreError(
                    kind=DatastoreErrorKind.HTTP,
                    message=f"Invalid JSON in response: {e}",
                    status_code=response.status_code,
                ),
            )

    # ── Convenience Methods ──────────────────────────────────────────

    async def select(self, table: str, columns: str = "*", filter: Optional[dict[str, Any]] = None) -> DatastoreResult:
        return await self.request(table, "GET", select=columns, filter=filter)

    async def insert(self, table: str, record: dict[str, Any]) -> DatastoreResult:
        return await self.request(table, "POST", body=record)

    async def update(self, table: str, record: dict[str, Any], filter: dict[str, Any]) -> DatastoreResult:
        return await self.request(table, "PATCH", body=record, filter=filter)

    async def delete(self, table: str, filter: dict[str, Any]) -> DatastoreResult:
        return await self.request(table, "DELETE", filter=filter)

    async def check_connection(self) -> bool:
        """Test datastore connectivity against the REST root."""
        if not self.config.url:
            return False
        try:
            async with self._client() as client:
                response = await client.get(f"{self.config.url}{REST_PATH}/", headers=self.headers())
            return response.is_success
        except httpx.HTTPError as e:
            logger.error(f"Datastore connection failed: {e}")
            return False
