"""Shared HTTP transport for the pricing and maps lookups."""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

import httpx

from ..config import settings
from ..exceptions import LookupFailure, ServiceConfigurationError

logger = logging.getLogger(__name__)


class LookupTransport:
    """GET-with-retry against one lookup service.

    Timeouts, network errors and 5xx responses are retried with exponential
    backoff (``backoff_seconds * 2 ** (attempt - 1)``) up to ``max_retries`` times.
    4xx responses and undecodable bodies fail immediately. Every failure surfaces
    as ``error_cls``, a ``LookupFailure`` subclass.
    """

    def __init__(
        self,
        base_url: str | None,
        *,
        error_cls: type[LookupFailure] = LookupFailure,
        timeout: float | None = None,
        connect_timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ServiceConfigurationError(f"{error_cls.service} base URL is not configured.")
        self.base_url = base_url.rstrip("/")
        self.error_cls = error_cls
        self.timeout = timeout if timeout is not None else settings.lookup_timeout_seconds
        self.connect_timeout = (
            connect_timeout if connect_timeout is not None else settings.lookup_connect_timeout_seconds
        )
        self.max_retries = max_retries if max_retries is not None else settings.lookup_max_retries
        self.backoff_seconds = backoff_seconds if backoff_seconds is not None else settings.lookup_backoff_seconds
        self._transport = transport

    @property
    def service(self) -> str:
        return self.error_cls.service

    def _get_client(self) -> httpx.Client:
        # One client per call: list() enriches cars from several worker threads.
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=self.connect_timeout),
            transport=self._transport,
        )

    def _wait(self, attempt: int, reason: str, url: str) -> None:
        wait_time = self.backoff_seconds * (2 ** (attempt - 1))
        logger.debug(
            f"{self.service} lookup {reason}, retrying in {wait_time:.1f}s "
            f"(attempt {attempt}/{self.max_retries}): {url}"
        )
        if wait_time:
            time.sleep(wait_time)

    def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    return response.json()
                except httpx.HTTPStatusError as exc:
                    status_code = exc.response.status_code
                    if status_code < 500:
                        raise self.error_cls(
                            f"{self.service} service returned HTTP {status_code} for {url}", url=url
                        ) from exc
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"{self.service} lookup failed after {self.max_retries} retries: HTTP {status_code}")
                        raise self.error_cls(
                            f"{self.service} service returned HTTP {status_code} for {url}", url=url
                        ) from exc
                    self._wait(attempt, f"HTTP {status_code}", url)
                except httpx.TimeoutException as exc:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"{self.service} lookup timed out after {self.max_retries} retries: {exc}")
                        raise self.error_cls(f"{self.service} service timed out: {url}", url=url) from exc
                    self._wait(attempt, "timeout", url)
                except httpx.TransportError as exc:
                    attempt += 1
                    if attempt > self.max_retries:
                        logger.warning(f"{self.service} lookup network error after {self.max_retries} retries: {exc}")
                        raise self.error_cls(
                            f"Failed to connect to {self.service} service at {self.base_url}: {exc}", url=url
                        ) from exc
                    self._wait(attempt, "network error", url)
                except ValueError as exc:
                    raise self.error_cls(f"{self.service} service returned a non-JSON body for {url}", url=url) from exc
        finally:
            client.close()

    def check_health(self, path: str, params: Mapping[str, Any] | None = None) -> bool:
        """Single attempt, no retries. Any HTTP response below 500 counts as reachable."""
        client = self._get_client()
        try:
            response = client.get(f"{self.base_url}{path}", params=params)
            return response.status_code < 500
        except httpx.HTTPError:
            return False
        finally:
            client.close()
