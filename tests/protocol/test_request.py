import fractions
import pytest
import xmlrpc.client
import xrpc


def test_compose():

    expected = '<?xml version="1.0"?>' \
        '<methodCall><methodName>add</methodName><params>' \
        '<param><value><int>1</int></value></param>' \
        '<param><value><int>2</int></value></param>' \
        '</params></methodCall>'

    assert xrpc.compose('add', [1, 2]) == expected


def test_no_params():
    body = xrpc.compose('ping')
    assert body == '<?xml version="1.0"?><methodCall><methodName>ping</methodName><params/></methodCall>'


def test_params_are_never_a_struct_or_array():
    body = xrpc.compose('echo', ({'a': 1},))
    assert '<params><param><value><struct>' in body
    assert '<array>' not in body


def test_absent_params_dropped():
    assert xrpc.compose('add', [None, 1, None]) == xrpc.compose('add', [1])


def test_unsupported_param():

    with pytest.raises(xrpc.UsageError):
        xrpc.compose('add', [1, len])

    # A UsageError is also a ValueError.
    with pytest.raises(ValueError):
        xrpc.compose('add', [lambda: None])


def test_bad_arguments():

    with pytest.raises(TypeError):
        xrpc.compose(None, [])

    with pytest.raises(ValueError):
        xrpc.compose('', [])

    with pytest.raises(TypeError):
        xrpc.compose('add', {'a': 1})

    with pytest.raises(TypeError):
        xrpc.compose('add', 1)


def test_method_call():

    call = xrpc.protocol.request.MethodCall('add', [1, 2])
    body = call.serialize()

    assert str(call) == body
    assert bytes(call) == body.encode('utf-8')
    assert call.serialize() is body

    assert call.document() is not call.document()


def test_method_name_escaped():
    body = xrpc.compose('a&b', [])
    assert '<methodName>a&amp;b</methodName>' in body


def test_round_trip():
    """ A conforming XML-RPC decoder recovers the original values.
    """

    body = xrpc.compose('calc', ['add', {'x': 1, 'y': 2.5}])
    params, method = xmlrpc.client.loads(body)

    assert method == 'calc'
    assert params == ('add', {'x': 1, 'y': 2.5})

    assert isinstance(params[1]['x'], int)
    assert isinstance(params[1]['y'], float)



def test_fraction_decodes():
    body = xrpc.compose('f', [fractions.Fraction(1, 3)])
    params, method = xmlrpc.client.loads(body)

    assert params[0] == pytest.approx(1 / 3)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
