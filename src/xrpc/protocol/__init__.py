from . import document
from . import values
from . import marshal
from . import request


"""
xrpc Protocol Layer
===================

This package defines how an XML-RPC request is encoded. It MUST NOT depend
on any transport implementation; it produces text, and nothing more.

---------------------------------------------------------------------

Layer Architecture Overview
---------------------------

Client (client.py)
    │
    ▼
Request Composer (request.py)
    - MethodCall envelope
    - compose()
    Validates top-level arguments, adds the XML declaration

    │
    ▼
Value Marshaller (marshal.py)
    Recursive mapping of one value to one XML element
    - scalars: int, double, boolean, string, dateTime.iso8601
    - containers: params/param, struct/member, array/data

    │
    ▼
Value Model (values.py)
    Tagged variants, and wrap() to classify native Python values

    │
    ▼
Document Builder (document.py)
    create_element(), append_child(), serialize() over lxml.etree

---------------------------------------------------------------------

Below the Protocol Layer (for context)
--------------------------------------

Transport Layer
    Moves bytes
    - HTTP POST (httpx)
    - outcome delivered to callbacks

---------------------------------------------------------------------
"""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
