""" The user-facing XML-RPC client. A :class:`Client` knows one endpoint and
    a default pair of callbacks; each :func:`Client.call` composes a request,
    hands it to the transport, and returns immediately.
"""

import logging

from . import protocol
from . import transport as transportmodule


logger = logging.getLogger(__name__)


class Client:
    """ The :class:`Client` issues XML-RPC requests to the endpoint at *url*.
        The *on_success* callback receives the raw response body, unparsed;
        the *on_error* callback receives a
        :class:`xrpc.transport.TransportError` describing the failure. Either
        callback may be overridden for an individual call.

        The *transport* defaults to a shared
        :class:`xrpc.transport.HTTPTransport`; anything implementing the
        :class:`xrpc.transport.Transport` contract may be substituted.

        :ivar debug: If True, log every request body at DEBUG level.
    """

    debug = False

    def __init__(self, url, on_success=None, on_error=None, transport=None):

        self.transport = transport
        self.init(url, on_success, on_error)


    def __repr__(self):
        return 'client.Client: ' + repr(self.url)


    def init(self, url, on_success=None, on_error=None):
        """ (Re)initialize the endpoint and the default callbacks. Returns
            the client, so that it can be chained.
        """

        if not url:
            raise ValueError('the XML-RPC endpoint url must be specified')

        self.url = url
        self.on_success = on_success
        self.on_error = on_error

        return self


    def request(self, method, params=(), on_success=None, on_error=None):
        """ Compose a request for *method* with the ordered *params*, and
            start sending it. The returned
            :class:`xrpc.transport.PendingRequest` can be used to
            :func:`wait` for the outcome; the callbacks are invoked either
            way.

            Composition happens before anything is sent: arguments that
            cannot be encoded raise :class:`xrpc.errors.UsageError` here,
            in the caller's thread.
        """

        if on_success is None:
            on_success = self.on_success
        if on_error is None:
            on_error = self.on_error

        body = protocol.request.compose(method, params)

        if self.debug:
            logger.debug('Request XML %s', body)

        transport = self.transport
        if transport is None:
            transport = transportmodule.default()

        pending = transportmodule.PendingRequest(self.url, body, on_success, on_error)
        return transport.send(pending)


    def call(self, method, params=(), on_success=None, on_error=None):
        """ Same as :func:`request`, but return the client instead of the
            pending request, so that calls can be chained.
        """

        self.request(method, params, on_success, on_error)
        return self

    fetch = call


# end of class Client


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
