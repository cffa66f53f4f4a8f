"""HTTP transport.

Requests are POSTed by an :class:`httpx.Client` from a small pool of worker
threads, so that :meth:`HTTPTransport.send` never blocks the caller; the
outcome of each request is delivered via its :class:`PendingRequest`.
"""

from __future__ import annotations

import atexit
import concurrent.futures
import logging
import threading
from typing import Dict, Optional

import httpx

from .. import __version__
from .base import (
    Transport,
    TransportConnectionError,
    TransportError,
    TransportResponseError,
    TransportStatusError,
    TransportTimeout,
)
from .session import PendingRequest


logger = logging.getLogger(__name__)


class HTTPTransport(Transport):
    """POST XML-RPC request bodies, hand back raw response bodies."""

    timeout = 30.0
    workers = 4
    headers = {
        "Content-Type": "text/xml",
        "User-Agent": f"xrpc/{__version__}",
    }

    def __init__(
        self,
        timeout: Optional[float] = None,
        workers: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.Client] = None,
    ):
        if timeout is not None:
            self.timeout = timeout
        if workers is not None:
            self.workers = int(workers)

        merged = dict(type(self).headers)
        if headers:
            merged.update(headers)
        self.headers = merged

        if client is None:
            client = httpx.Client(timeout=self.timeout)

        self.client = client
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=self.workers,
            thread_name_prefix="xrpc.http",
        )

    def send(self, pending: PendingRequest) -> PendingRequest:
        self._executor.submit(self._post, pending)
        return pending

    def close(self) -> None:
        self._executor.shutdown(wait=True)
        self.client.close()

    def _post(self, pending: PendingRequest) -> None:
        try:
            body = self.post(pending.url, pending.body)
        except TransportError as error:
            pending._fail(error)
        except Exception as ex:
            # Anything unmapped still has to complete the request.
            error = TransportError(f"POST {pending.url}: {type(ex).__name__}: {ex}")
            error.__cause__ = ex
            pending._fail(error)
        else:
            pending._complete(body)

    def post(self, url: str, body: str) -> str:
        """Synchronously POST *body* to *url* and return the response text.

        Every failure is raised as a :class:`TransportError` subclass.
        """

        logger.debug("POST %s (%d bytes)", url, len(body))

        try:
            response = self.client.post(
                url,
                content=body.encode("utf-8"),
                headers=self.headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as ex:
            raise TransportTimeout(f"POST {url}: no response in {self.timeout:.2f} sec") from ex
        except httpx.TransportError as ex:
            raise TransportConnectionError(f"POST {url}: {ex}") from ex
        except (httpx.HTTPError, httpx.InvalidURL) as ex:
            raise TransportError(f"POST {url}: {ex}") from ex

        logger.debug("POST %s -> %d", url, response.status_code)

        if not response.is_success:
            raise TransportStatusError(
                f"POST {url}: HTTP {response.status_code} {response.reason_phrase}",
                status=response.status_code,
                body=response.text,
            )

        content_type = response.headers.get("Content-Type")
        if content_type and "xml" not in content_type.lower():
            raise TransportResponseError(f"POST {url}: expected XML, got {content_type!r}")

        return response.text


_default: Optional[HTTPTransport] = None
_default_lock = threading.Lock()


def default() -> HTTPTransport:
    """Return the shared :class:`HTTPTransport`, creating it if needed."""

    global _default

    with _default_lock:
        if _default is None:
            _default = HTTPTransport()
        return _default


def _shutdown() -> None:
    global _default

    with _default_lock:
        if _default is not None:
            _default.close()
            _default = None


atexit.register(_shutdown)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
