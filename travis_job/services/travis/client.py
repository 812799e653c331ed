"""
Travis CI API v3 client for build requests on a single repository.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from travis_job.core.exceptions import DecodeError, NotFoundError, TransportError
from travis_job.core.logging import get_logger
from .schemas import BuildRecord, trigger_payload

logger = get_logger(__name__)

API_VERSION = "3"


class TravisClient:
    """HTTP client for Travis API operations on one repository."""

    def __init__(
        self,
        token: str,
        owner: str,
        repo: str,
        tld: str,
        *,
        timeout: float = 5.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._owner = owner
        self._repo = repo
        self._tld = tld
        self._headers = {
            "Content-Type": "application/json",
            "Travis-API-Version": API_VERSION,
            "Authorization": f"token {token}",
        }
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    @property
    def base_url(self) -> str:
        return f"https://api.travis-ci.{self._tld}"

    @property
    def repo_slug(self) -> str:
        """Owner and repository encoded as a single path segment."""
        return quote(f"{self._owner}/{self._repo}", safe="")

    def build_url(self, build_id: str) -> str:
        """Human-facing page for a build."""
        return f"https://travis-ci.{self._tld}/{self._owner}/{self._repo}/builds/{build_id}"

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> TravisClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        url = f"{self.base_url}{path}"

        try:
            response = await self._client.request(method, url, headers=self._headers, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.debug("Travis API error %s: %s", exc.response.status_code, exc.response.text)
            raise TransportError(f"Travis API error: {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Travis API request failed: {exc!r}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise DecodeError("Travis API returned invalid JSON") from exc

        if not isinstance(data, dict):
            raise DecodeError("Travis API returned unexpected payload")

        return data

    async def trigger_build(self, branch: str) -> str:
        """
        Submit a build request for a branch.

        Args:
            branch: Branch to build

        Returns:
            Request ID assigned by Travis

        Raises:
            TransportError: If the request fails
            DecodeError: If the response has no request ID
        """
        data = await self._request(
            "POST",
            f"/repo/{self.repo_slug}/requests",
            json=trigger_payload(branch),
        )

        request = data.get("request")
        request_id = request.get("id") if isinstance(request, dict) else None
        if request_id is None or not str(request_id).strip():
            raise DecodeError("Travis API response is missing request id")
        return str(request_id)

    async def get_build_status(self, request_id: str) -> BuildRecord:
        """
        Fetch the build created for a request.

        Only one build is expected per request; if Travis returns several,
        the first one wins.

        Raises:
            TransportError: If the request fails
            DecodeError: If the response has no builds list
            NotFoundError: If Travis has not created a build for the request
        """
        if not request_id:
            raise ValueError("request_id must not be empty")

        data = await self._request("GET", f"/repo/{self.repo_slug}/request/{request_id}")

        builds = data.get("builds")
        if not isinstance(builds, list):
            raise DecodeError("Travis API response is missing builds")
        if not builds:
            raise NotFoundError("no builds found")
        return BuildRecord.from_dict(builds[0])
