""" Python implementation of the client side of XML-RPC. This includes the
    value marshaller and request composer, which turn Python values into a
    ``methodCall`` document, and a callback-driven client that sends the
    request over HTTP.
"""

__version__ = '0.1.0'

# Utility components.

from . import errors
from .errors import XRPCError, UsageError

# Submodules used by multiple other components.

from . import protocol
from . import transport

compose = protocol.request.compose
marshal = protocol.marshal.marshal

# Primary public-facing interfaces.

from .client import Client

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
