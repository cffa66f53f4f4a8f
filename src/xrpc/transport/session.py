"""Transport-agnostic request bookkeeping."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from .base import TransportError


logger = logging.getLogger(__name__)

Callback = Callable[[Any], None]


class PendingRequest:
    """One outstanding request, and the callbacks awaiting its outcome.

    The transport calls exactly one of :meth:`_complete` or :meth:`_fail`,
    once. Callers that would rather block than be called back can use
    :meth:`wait`.
    """

    def __init__(
        self,
        url: str,
        body: str,
        on_success: Optional[Callback] = None,
        on_error: Optional[Callback] = None,
    ):
        self.url = url
        self.body = body
        self.on_success = on_success
        self.on_error = on_error

        self.response: Optional[str] = None
        self.error: Optional[TransportError] = None
        self.rep_event = threading.Event()

    def __repr__(self):
        if not self.rep_event.is_set():
            state = "pending"
        elif self.error is not None:
            state = "error: " + repr(self.error)
        else:
            state = "complete"

        return f"session.PendingRequest: POST {self.url} ({state})"

    def poll(self) -> bool:
        """Return True if the request is complete, otherwise False."""
        return self.rep_event.is_set()

    def wait(self, timeout: Optional[float] = 60) -> Optional[str]:
        """Block until the request has been handled.

        The response body is returned; it is None if the request failed
        or is still pending after *timeout* seconds.
        """
        self.rep_event.wait(timeout)
        return self.response

    def _complete(self, response: str) -> None:
        self.response = response
        self._invoke(self.on_success, response)
        self.rep_event.set()

    def _fail(self, error: TransportError) -> None:
        self.error = error
        logger.warning("POST %s failed: %s", self.url, error)
        self._invoke(self.on_error, error)
        self.rep_event.set()

    def _invoke(self, callback: Optional[Callback], argument: Any) -> None:
        if callback is None:
            return

        # The callback runs on a transport thread; anything it raises has
        # nowhere useful to go.
        try:
            callback(argument)
        except Exception:
            logger.exception("callback %r raised for POST %s", callback, self.url)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
