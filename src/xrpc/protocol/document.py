""" A minimal XML document builder. The marshaller only ever needs to create
    elements, attach them to a root, and render the finished tree as text;
    this module provides exactly that, on top of :mod:`lxml.etree`.
"""

from lxml import etree


class Document:
    """ The :class:`Document` owns a single *root* element, and is the
        factory for every other element in the tree. Elements are plain
        :mod:`lxml.etree` elements; text leaves are stored the lxml way,
        in the ``text`` of the parent or the ``tail`` of the preceding
        sibling.
    """

    def __init__(self, root):

        self.root = etree.Element(root)


    def __repr__(self):
        return 'document.Document: ' + self.serialize()


    def create_element(self, tag, content=None):
        """ Create a new element with the name *tag*. The optional *content*
            is either a single item or a list/tuple of items; each item is
            appended in order, either as a child element (if it is one) or
            as a text leaf containing ``str(item)``.
        """

        element = etree.Element(tag)

        if content is None:
            return element

        if not isinstance(content, (list, tuple)):
            content = (content,)

        for item in content:
            if etree.iselement(item):
                element.append(item)
            else:
                _append_text(element, str(item))

        return element


    def append_child(self, element):
        """ Attach *element* as the last child of the document root.
        """

        self.root.append(element)


    def serialize(self, prefix=None):
        """ Render the entire document as a string. The *prefix*, typically
            an XML declaration, is prepended verbatim; the writer itself
            does not emit a declaration.
        """

        body = etree.tostring(self.root, encoding='unicode')

        if prefix:
            return prefix + body
        else:
            return body


# end of class Document



def _append_text(element, text):
    """ Add a text leaf after whatever *element* currently contains.
    """

    if len(element) == 0:
        element.text = (element.text or '') + text
    else:
        last = element[-1]
        last.tail = (last.tail or '') + text


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
