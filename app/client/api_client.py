"""
API client for the dashboard backend

Every call goes through ApiClient.request, which gives callers one contract:
- the parsed JSON body (validated into response_model when given) on success
- None for 204 No Content
- ApiError for any non-2xx response, carrying the server's message
- network failures are logged and re-raised unchanged
There is no retry or timeout policy here; callers own retries.
"""
import logging
from typing import Any, Dict, List, Optional, Type, TypeVar
from uuid import UUID

import httpx
from pydantic import TypeAdapter

from app import config
from app.features.analytics.domain import MonthlyAnalytics
from app.features.tasks.domain import Task, TaskCreate, TaskStatus, TaskUpdate

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class ApiError(Exception):
    """Raised when the API answers with a non-2xx status"""

    def __init__(self, message: str, status_code: int, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def join_url(base_url: str, endpoint: str) -> str:
    """Join base URL and endpoint with exactly one slash between them"""
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    fallback = f"API Error: {response.status_code} {response.reason_phrase}"
    try:
        body = response.json()
    except ValueError:
        return fallback, None

    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str) and message:
            return message, body
    return fallback, body


class ApiClient:
    """
    Async client for the dashboard API.

    The underlying httpx client is opened on first use and released by
    aclose(), so use the client as an async context manager or call
    aclose() when done.

    Usage:
        async with ApiClient() as api:
            tasks = await api.list_tasks()
    """

    def __init__(
        self,
        base_url: str = config.API_BASE_URL,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_url = base_url
        self._headers = httpx.Headers(DEFAULT_HEADERS)
        self._headers.update(headers or {})
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(transport=self._transport)
        return self._client

    @property
    def is_open(self) -> bool:
        return self._client is not None and not self._client.is_closed

    async def __aenter__(self) -> "ApiClient":
        self._get_client()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def build_url(self, endpoint: str) -> str:
        return join_url(self.base_url, endpoint)

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        json: Any = None,
        params: Optional[Dict[str, Any]] = None,
        response_model: Optional[Type[T]] = None,
    ) -> Optional[T]:
        """
        Send a request and unwrap the response.

        Args:
            endpoint: Path relative to the base URL (e.g. '/exercises/tasks')
            method: HTTP method
            headers: Extra headers; override the JSON defaults
            json: JSON-serializable request body
            params: Query parameters
            response_model: Type to validate the JSON body into

        Returns:
            Parsed body, or None for 204 No Content

        Raises:
            ApiError: Non-2xx response
            httpx.HTTPError: Network-level failure
        """
        url = self.build_url(endpoint)
        merged_headers = httpx.Headers(self._headers)
        merged_headers.update(headers or {})

        try:
            response = await self._get_client().request(
                method,
                url,
                headers=merged_headers,
                json=json,
                params=params,
            )
        except httpx.HTTPError as e:
            logger.error(f"Fetch API Error: {method} {url}: {e}")
            raise

        if not response.is_success:
            message, body = _error_message(response)
            logger.warning(f"Fetch API Error: {method} {url} -> {response.status_code}: {message}")
            raise ApiError(message, response.status_code, body)

        if response.status_code == 204:
            return None

        data = response.json()
        if response_model is None:
            return data
        return TypeAdapter(response_model).validate_python(data)

    # Typed endpoint helpers

    async def list_tasks(self, status: Optional[TaskStatus] = None) -> List[Task]:
        params = {"status": status.value} if status else None
        return await self.request("/exercises/tasks", params=params, response_model=List[Task])

    async def get_task(self, task_id: UUID | str) -> Task:
        return await self.request(f"/exercises/tasks/{task_id}", response_model=Task)

    async def create_task(self, data: TaskCreate) -> Task:
        return await self.request(
            "/exercises/tasks",
            method="POST",
            json=data.model_dump(mode="json", by_alias=True, exclude_none=True),
            response_model=Task,
        )

    async def update_task(self, task_id: UUID | str, data: TaskUpdate) -> Task:
        return await self.request(
            f"/exercises/tasks/{task_id}",
            method="PUT",
            json=data.model_dump(mode="json", by_alias=True, exclude_unset=True),
            response_model=Task,
        )

    async def delete_task(self, task_id: UUID | str) -> None:
        await self.request(f"/exercises/tasks/{task_id}", method="DELETE")

    async def get_monthly_analytics(self) -> List[MonthlyAnalytics]:
        return await self.request("/analytics/monthly", response_model=List[MonthlyAnalytics])

    async def health(self) -> Dict[str, Any]:
        return await self.request("/health")
