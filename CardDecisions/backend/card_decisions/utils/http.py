from typing import Any

import httpx


class UpstreamError(Exception):
    """The validation service could not be reached or answered unusably."""

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


def _body_preview(response: httpx.Response, limit: int = 1000) -> str:
    return response.text[:limit]


def request_json(
    client: httpx.Client,
    method: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Send one request and return its JSON object body, or raise UpstreamError."""
    try:
        response = client.request(method, url, params=params, headers=headers)
    except httpx.HTTPError as exc:
        raise UpstreamError(
            f"{method} {url} failed before a response arrived",
            details={"url": url, "exception": str(exc)},
        ) from exc

    details = {"url": str(response.url), "status_code": response.status_code}
    if response.is_error:
        raise UpstreamError(
            f"Validation service answered HTTP {response.status_code}",
            details={**details, "body": _body_preview(response)},
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise UpstreamError(
            "Validation service body is not JSON",
            details={**details, "body": _body_preview(response)},
        ) from exc

    if not isinstance(payload, dict):
        raise UpstreamError(
            "Validation service body is not a JSON object",
            details={**details, "body": _body_preview(response)},
        )
    return payload
