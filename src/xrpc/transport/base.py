"""Transport interface.

This is the (small) contract that transport implementations should follow.
It lives outside :mod:`xrpc.protocol` so the protocol remains
transport-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..errors import XRPCError


# Transport agnostic exceptions

class TransportError(XRPCError):
    """Base class for every failure reported to an error callback."""


class TransportTimeout(TransportError):
    """The HTTP connect or read did not finish within the timeout."""


class TransportConnectionError(TransportError):
    """The endpoint could not be reached, or dropped the connection."""


class TransportStatusError(TransportError):
    """The server answered with a non-2xx status."""

    def __init__(self, message: str, status: int, body: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.body = body


class TransportResponseError(TransportError):
    """The server answered, but not with an XML document."""


class Transport(ABC):
    """Minimal contract for a wire-level transport."""

    @abstractmethod
    def send(self, pending):
        """Start delivering a :class:`PendingRequest`; return it.

        The outcome is reported later, through the pending request's
        callbacks, on whatever thread the transport uses.
        """

    @abstractmethod
    def close(self) -> None:
        """Release any connections or worker threads."""
