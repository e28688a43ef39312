"""Shared HTTP transport used by the repository resolvers.

Requests run on a small bounded worker pool and the caller blocks on the
result, so from the outside every call is synchronous. Network failures and
undecodable bodies surface as ``TransportError``; callers decide whether that
is fatal.
"""
from __future__ import annotations

import json
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Optional, Tuple

import requests

from fxdeps.common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer
from fxdeps.constants import Constants
from fxdeps.errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class HttpTransport:
    """Blocking JSON-over-HTTP client backed by a bounded thread pool."""

    def __init__(
        self,
        max_workers: Optional[int] = None,
        connect_timeout: Optional[float] = None,
        read_timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._max_workers = max_workers or Constants.HTTP_MAX_WORKERS
        self._timeout = (
            connect_timeout if connect_timeout is not None else Constants.CONNECT_TIMEOUT,
            read_timeout if read_timeout is not None else Constants.REQUEST_TIMEOUT,
        )
        self._session = session or requests.Session()
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def timeout(self) -> Tuple[float, float]:
        """(connect, read) timeout pair passed to requests."""
        return self._timeout

    def _pool(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers, thread_name_prefix="fxdeps-http"
            )
        return self._executor

    def get(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """Perform a GET request and wait for it on the worker pool."""
        safe_target = safe_url(url)
        merged_headers = dict(DEFAULT_HEADERS)
        if headers:
            merged_headers.update(headers)

        with Timer() as t:
            if is_debug_enabled(logger):
                logger.debug(
                    "HTTP request",
                    extra=extra_context(
                        event="http_request",
                        component="http_client",
                        action="GET",
                        target=safe_target,
                    ),
                )
            future = self._pool().submit(
                self._session.get,
                url,
                params=params,
                headers=merged_headers,
                timeout=self._timeout,
                allow_redirects=True,
            )
            try:
                response = future.result()
            except requests.Timeout as exc:
                raise TransportError(
                    f"request to {safe_target} timed out after {self._timeout} seconds"
                ) from exc
            except requests.RequestException as exc:  # includes ConnectionError
                raise TransportError(f"connection error for {safe_target}: {exc}") from exc

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    status_code=response.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target,
                ),
            )
        return response

    def get_json(
        self,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Tuple[int, Optional[Any]]:
        """Perform a GET request and decode a JSON body.

        Returns:
            Tuple of (status_code, parsed_json). The body is only decoded for
            2xx responses; other statuses return ``None`` as the payload.

        Raises:
            TransportError: On network failure or a 2xx body that is not JSON.
        """
        response = self.get(url, params=params, headers=headers)
        if not 200 <= response.status_code < 300:
            return response.status_code, None
        try:
            return response.status_code, json.loads(response.text)
        except (TypeError, ValueError) as exc:
            raise TransportError(
                f"malformed JSON from {safe_url(url)}: {exc}", response.status_code
            ) from exc

    def close(self) -> None:
        """Shut down the worker pool and the underlying session."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
        self._session.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
