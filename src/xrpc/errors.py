"""Exceptions shared across the package.

Transport failures have their own hierarchy in :mod:`xrpc.transport.base`,
rooted at :class:`XRPCError` as well.
"""


class XRPCError(Exception):
    """Base class for all xrpc errors."""


class UsageError(XRPCError, ValueError):
    """The caller asked for something that cannot be encoded or sent."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
