"""HTTP client for the Docker Hub tag listing API."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

_DOCKERHUB_API = "https://registry.hub.docker.com/v2/repositories"


class RegistryError(Exception):
    """Raised when a registry API call fails.

    Attributes:
        status: HTTP status code, or ``None`` if no response was received.
        url: The URL that was requested.
    """

    def __init__(self, message: str, *, status: int | None = None, url: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class HubClient:
    """Client for the paginated ``/v2/repositories/.../tags`` endpoint.

    Args:
        base_url: Root of the repositories API.
        timeout: HTTP request timeout in seconds. ``None`` waits forever.
    """

    def __init__(
        self,
        base_url: str = _DOCKERHUB_API,
        *,
        timeout: float | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def tags_url(self, organization: str, image: str, page: int) -> str:
        """Return the tag listing URL for one page."""
        return f"{self.base_url}/{organization}/{image}/tags?page={page}"

    def fetch_tag_page(self, organization: str, image: str, page: int) -> str:
        """Fetch one page of the tag listing.

        Args:
            organization: Image namespace (e.g. ``library``).
            image: Image name (e.g. ``nginx``).
            page: 1-based page number.

        Returns:
            The raw response body.

        Raises:
            RegistryError: If the request fails or the status is not 200.
        """
        url = self.tags_url(organization, image, page)
        logger.info("Requesting: %s", url)

        try:
            resp = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RegistryError(f"Request to {url} failed: {exc}", url=url) from exc

        body = resp.text
        logger.info("   Response status: %d", resp.status_code)
        logger.info("   Response length: %d", len(body))

        if resp.status_code != 200:
            raise RegistryError(
                f"Non-success status code received: {resp.status_code}",
                status=resp.status_code,
                url=url,
            )

        return body
