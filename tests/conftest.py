import pytest
import xrpc


class RecordingTransport(xrpc.transport.Transport):
    """ Keep every PendingRequest instead of sending it; the test decides
        when, and how, each one completes.
    """

    def __init__(self):
        self.sent = list()
        self.closed = False

    def send(self, pending):
        self.sent.append(pending)
        return pending

    def close(self):
        self.closed = True


@pytest.fixture
def document():
    return xrpc.protocol.document.Document('root')


@pytest.fixture
def transport():
    return RecordingTransport()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
