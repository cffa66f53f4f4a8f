""" The recursive value marshaller. A value is classified by shape, and
    the corresponding XML-RPC element is built using a
    :class:`xrpc.protocol.document.Document` as the element factory.
"""

from . import values


# Each container kind wraps its members in a fixed element.

member_tags = {
    'params': 'param',
    'struct': 'member',
    'array': 'data',
}


def marshal(document, value, tag=None):
    """ Return the XML element representing *value*, created via
        *document*. For collections, *tag* overrides the container element
        name; the request composer forces it to 'params' for the top-level
        argument list. If *value* cannot be represented at all, None is
        returned; callers embedding such a value in a container skip it,
        the same way they skip an absent value.
    """

    value = values.wrap(value)

    if isinstance(value, values.Scalar):
        return document.create_element(value.tag, value.text())

    if isinstance(value, (values.Array, values.Struct)):
        return _container(document, value, tag)

    # Null and Unsupported have no representation of their own.
    return None



def _container(document, value, tag):

    if tag is None:
        tag = value.tag

    try:
        member_tag = member_tags[tag]
    except KeyError:
        raise ValueError('unknown container tag: ' + repr(tag))

    parent = document.create_element(tag)

    for key, item in value.members():
        if isinstance(item, values.Null):
            continue

        sub_element = marshal(document, item)
        if sub_element is None:
            continue

        member = document.create_element(member_tag)

        if tag == 'struct':
            member.append(document.create_element('name', key))

        member.append(document.create_element('value', sub_element))
        parent.append(member)

    return parent


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
