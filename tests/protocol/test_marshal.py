import datetime
import pytest
import xrpc

from lxml import etree


def marshal(value, tag=None):
    document = xrpc.protocol.document.Document('root')
    element = xrpc.marshal(document, value, tag)
    if element is None:
        return None
    return etree.tostring(element, encoding='unicode')


def test_numbers():

    for number in (0, 1, -1, 44, 2**40):
        assert marshal(number) == '<int>%d</int>' % (number)

    for number in (0.5, -35.5, 1e-3):
        assert marshal(number) == '<double>%r</double>' % (number)


def test_whole_float_is_int():
    assert marshal(12.0) == '<int>12</int>'


def test_scalars():
    assert marshal(True) == '<boolean>true</boolean>'
    assert marshal(False) == '<boolean>false</boolean>'
    assert marshal('hi') == '<string>hi</string>'
    assert marshal('<&>') == '<string>&lt;&amp;&gt;</string>'


def test_date():
    stamp = datetime.datetime(2024, 3, 5, 7, 8, 9)
    assert marshal(stamp) == '<dateTime.iso8601>2024-03-5 7:8:9</dateTime.iso8601>'


def test_struct():
    expected = '<struct>' \
        '<member><name>a</name><value><int>1</int></value></member>' \
        '<member><name>b</name><value><string>x</string></value></member>' \
        '</struct>'

    assert marshal({'a': 1, 'b': 'x'}) == expected


def test_array_has_one_data_per_element():
    expected = '<array>' \
        '<data><value><int>1</int></value></data>' \
        '<data><value><int>2</int></value></data>' \
        '</array>'

    assert marshal([1, 2]) == expected


def test_empty_collections():
    assert marshal([]) == '<array/>'
    assert marshal({}) == '<struct/>'


def test_absent_members_dropped():

    result = marshal({'a': None, 'b': 1})
    assert result == '<struct><member><name>b</name><value><int>1</int></value></member></struct>'

    result = marshal([None, 'x', None])
    assert result == '<array><data><value><string>x</string></value></data></array>'


def test_unsupported_members_dropped():

    def function():
        pass

    result = marshal({'f': function, 'g': len, 'a': 1})
    assert result == '<struct><member><name>a</name><value><int>1</int></value></member></struct>'

    result = marshal([function, 2])
    assert result == '<array><data><value><int>2</int></value></data></array>'


def test_unsupported_value():
    assert marshal(len) is None
    assert marshal(None) is None


def test_nested():
    value = {'list': [1, {'deep': 2.5}], 'flag': True}

    expected = '<struct>' \
        '<member><name>list</name><value><array>' \
            '<data><value><int>1</int></value></data>' \
            '<data><value><struct>' \
                '<member><name>deep</name><value><double>2.5</double></value></member>' \
            '</struct></value></data>' \
        '</array></value></member>' \
        '<member><name>flag</name><value><boolean>true</boolean></value></member>' \
        '</struct>'

    assert marshal(value) == expected


def test_forced_params_tag():
    result = marshal(['a', None, 3], 'params')
    expected = '<params>' \
        '<param><value><string>a</string></value></param>' \
        '<param><value><int>3</int></value></param>' \
        '</params>'

    assert result == expected


def test_unknown_container_tag():
    with pytest.raises(ValueError):
        marshal([1], 'list')


def test_repeatable():
    value = {'a': [1, 2], 'b': datetime.datetime(2000, 1, 1)}
    assert marshal(value) == marshal(value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
