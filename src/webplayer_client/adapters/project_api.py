"""Project-scoped REST API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ApiError(Exception):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, result: object) -> None:
        super().__init__(f"API request failed with status {status_code}")
        self.status_code = status_code
        self.result = result


@dataclass(frozen=True)
class ApiResponse:
    """Response for a successful call that carried no JSON body."""

    status_code: int
    result: object

    def to_payload(self) -> dict[str, object]:
        """Return the response in its wire shape."""
        return {"statusCode": self.status_code, "result": self.result}


class ProjectApi(Protocol):
    """Interface for authenticated requests against a single project."""

    project_id: str

    async def fetch(
        self,
        endpoint: str,
        method: str = "GET",
        json: dict[str, object] | None = None,
    ) -> object:
        """Send a request to a project endpoint and return the decoded body."""


@dataclass
class HttpxProjectApi(ProjectApi):
    """HTTPX-backed project API client."""

    api_base_url: str
    api_token: str
    project_id: str
    http_client: httpx.AsyncClient
    timeout: float = 15

    @classmethod
    def create(
        cls,
        api_base_url: str,
        api_token: str,
        project_id: str,
        timeout: float = 15,
    ) -> "HttpxProjectApi":
        """Create a project API client with a managed httpx session."""
        return cls(
            api_base_url=api_base_url.rstrip("/"),
            api_token=api_token,
            project_id=project_id,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def fetch(
        self,
        endpoint: str,
        method: str = "GET",
        json: dict[str, object] | None = None,
    ) -> object:
        """Send a request and return the JSON body, raising on failure."""
        url = f"{self.api_base_url}/projects/{self.project_id}{endpoint}"
        response = await self.http_client.request(
            method,
            url,
            headers={"Authorization": f"Bearer {self.api_token}"},
            json=json,
            timeout=self.timeout,
        )
        if response.is_error:
            raise ApiError(response.status_code, _decode_body(response))
        if not response.content:
            return ApiResponse(status_code=response.status_code, result={})
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def _decode_body(response: httpx.Response) -> object:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return {}
