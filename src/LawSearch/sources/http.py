"""Shared HTTP plumbing for catalog and text clients.

Wraps a ``requests.Session`` with retry/backoff on timeouts, connection
errors and transient status codes.
"""

from __future__ import annotations

import random
import time

import requests

from LawSearch.utils.log import log

DEFAULT_TIMEOUT = 30.0
MAX_ATTEMPTS = 3
BASE_PAUSE = 0.8
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

USER_AGENT = "lawsearch/0.1"


class RetryingHttpClient:
    """Low-level GET client with bounded retries.

    Subclasses add the payload handling (JSON catalogs, plain text).
    """

    accept = "*/*"

    def __init__(self, *, timeout: float = DEFAULT_TIMEOUT, max_attempts: int = MAX_ATTEMPTS) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            timeout: Per-request timeout in seconds.
            max_attempts: Attempts per URL, including the first one.
        """
        self._session = requests.Session()
        self._timeout = timeout
        self._max_attempts = max(1, max_attempts)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> RetryingHttpClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _get(self, url: str) -> requests.Response:
        """Issue GET with retries and raise for non-2xx responses.

        Args:
            url: Absolute URL.

        Returns:
            Successful response.

        Raises:
            requests.RequestException: Last error once attempts are exhausted,
                or immediately for non-retryable HTTP errors.
        """
        headers = {"User-Agent": USER_AGENT, "Accept": self.accept, "Cache-Control": "no-store"}
        last_error: Exception | None = None
        for attempt in range(1, self._max_attempts + 1):
            try:
                response = self._session.get(url, headers=headers, timeout=self._timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(f"HTTP {response.status_code}", response=response)
                response.raise_for_status()
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if isinstance(error, requests.HTTPError):
                    status_code = getattr(error.response, "status_code", None)
                    if status_code not in RETRYABLE_STATUS:
                        raise
                if attempt < self._max_attempts:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug("GET retry attempt=%d/%d delay=%.2fs url=%s error=%s",
                              attempt, self._max_attempts, delay, url, error)
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
