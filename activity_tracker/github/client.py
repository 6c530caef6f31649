"""GitHub REST client for reading and writing a single repository file.

Covers the three calls the profile job needs: who am I, read a file with its
blob sha, and write a file guarded by that sha. The contents API rejects a
write whose sha is not the file's current one (409), which surfaces here as
StaleRevisionError. Nothing is retried.
"""

from __future__ import annotations

import base64
from typing import Any
from urllib.parse import quote

import requests

from activity_tracker.config import GITHUB_ACCEPT, GITHUB_API_URL, HTTP_TIMEOUT_SECONDS, USER_AGENT
from activity_tracker.observability.logging import get_logger
from activity_tracker.observability.telemetry import counter, log_event
from activity_tracker.storage.models import RemoteFile

logger = get_logger(__name__)


class RemoteStoreError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class StaleRevisionError(RemoteStoreError):
    """The expected revision no longer matches the stored file."""


class GitHubContentsClient:
    """
    Thin wrapper over the GitHub users and contents endpoints.

    Args:
        token: Personal access token or Actions GITHUB_TOKEN
        api_url: API root (GitHub Enterprise installs differ)
        session: Optional requests session (tests inject a mock)
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_API_URL,
        session: requests.Session | None = None,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Accept": GITHUB_ACCEPT,
                "User-Agent": USER_AGENT,
            }
        )

    def _contents_url(self, owner: str, repo: str, path: str) -> str:
        return f"{self.api_url}/repos/{quote(owner)}/{quote(repo)}/contents/{quote(path)}"

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        counter(f"github.{method.lower()}")
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error("GitHub %s %s failed: %s", method, url, e)
            log_event("github.request.error", method=method, url=url, error=type(e).__name__)
            raise RemoteStoreError(f"{method} {url} failed: {e}") from e

    def resolve_identity(self) -> str:
        """
        Return the login of the token's owner.

        Raises:
            RemoteStoreError: On any non-200 response or transport failure
        """
        response = self._request("GET", f"{self.api_url}/user")
        if response.status_code != 200:
            raise RemoteStoreError(
                f"Failed to get username: {response.status_code} - {response.text}",
                response.status_code,
            )
        login = response.json()["login"]
        logger.info("Authenticated username: %s", login)
        return login

    def read_file(self, owner: str, repo: str, path: str) -> RemoteFile | None:
        """
        Read a file and its current blob sha.

        Returns:
            The decoded file, or None if it does not exist (404)

        Raises:
            RemoteStoreError: On any other non-200 response or transport failure
        """
        response = self._request("GET", self._contents_url(owner, repo, path))
        if response.status_code == 404:
            logger.info("%s/%s:%s does not exist yet", owner, repo, path)
            return None
        if response.status_code != 200:
            raise RemoteStoreError(
                f"Failed to get content: {response.status_code}", response.status_code
            )

        payload = response.json()
        encoded = payload.get("content") or ""
        content = base64.b64decode(encoded).decode("utf-8") if encoded else ""
        return RemoteFile(path=payload.get("path", path), sha=payload["sha"], content=content)

    def write_file(
        self,
        owner: str,
        repo: str,
        path: str,
        message: str,
        content: str,
        expected_revision: str | None,
    ) -> str:
        """
        Create or replace a file.

        Args:
            expected_revision: Blob sha from read_file, or None to create

        Returns:
            The sha of the newly written blob

        Raises:
            StaleRevisionError: If expected_revision is no longer current (409),
                or the file appeared although expected_revision is None (422)
            RemoteStoreError: On any other non-2xx response or transport failure
        """
        body: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
        }
        if expected_revision is not None:
            body["sha"] = expected_revision

        response = self._request("PUT", self._contents_url(owner, repo, path), json=body)
        stale = response.status_code == 409 or (
            response.status_code == 422 and expected_revision is None
        )
        if stale:
            log_event("github.write.conflict", owner=owner, repo=repo, path=path)
            raise StaleRevisionError(
                f"Failed to update content: stale revision for {owner}/{repo}:{path}",
                response.status_code,
            )
        if response.status_code not in (200, 201):
            raise RemoteStoreError(
                f"Failed to update content: {response.status_code} - {response.text}",
                response.status_code,
            )

        sha = response.json()["content"]["sha"]
        log_event("github.write.ok", owner=owner, repo=repo, path=path)
        return sha
