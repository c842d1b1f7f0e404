"""HTTP client for the comment board API.

Keeps one httpx.AsyncClient (and its cookie jar, so the identity cookie set
by the server is sent back). Non-2xx responses raise BoardClientError with
whatever message the server sent.
"""

from typing import Any

import httpx

from app.settings import get_settings


class BoardClientError(Exception):
    """Raised when the API answers with an error status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class BoardClient:
    """Async client for /posts endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or get_settings().api_base_url
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=15.0,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "BoardClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        client = await self._get_client()
        response = await client.request(method, path, json=json)
        if response.is_error:
            raise BoardClientError(response.status_code, _error_message(response))
        return response.json()

    async def list_posts(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/posts")

    async def get_post(self, post_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/posts/{post_id}")

    async def create_comment(
        self,
        post_id: str,
        message: str,
        parent_id: str | None = None,
    ) -> dict[str, Any]:
        return await self._request(
            "POST",
            f"/posts/{post_id}/comments",
            json={"message": message, "parentId": parent_id},
        )

    async def update_comment(self, post_id: str, comment_id: str, message: str) -> dict[str, Any]:
        return await self._request(
            "PUT",
            f"/posts/{post_id}/comments/{comment_id}",
            json={"message": message},
        )

    async def delete_comment(self, post_id: str, comment_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/posts/{post_id}/comments/{comment_id}")

    async def toggle_comment_like(self, post_id: str, comment_id: str) -> dict[str, Any]:
        return await self._request("POST", f"/posts/{post_id}/comments/{comment_id}/toggleLike")


def _error_message(response: httpx.Response) -> str:
    """Pull the server's message out of an error response."""
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if payload.get("detail"):
            return str(payload["detail"])
        if payload.get("message"):
            return str(payload["message"])
    return str(payload)
