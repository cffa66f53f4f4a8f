"""Transport layer implementations."""

from .base import (
    Transport,
    TransportError,
    TransportTimeout,
    TransportConnectionError,
    TransportStatusError,
    TransportResponseError,
)
from .session import PendingRequest
from . import http
from .http import HTTPTransport, default
