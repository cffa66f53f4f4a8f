""" The XML-RPC request envelope: a method name and its ordered arguments,
    rendered as a complete ``methodCall`` document.
"""

from .. import errors
from . import values
from .document import Document
from .marshal import marshal


DECLARATION = '<?xml version="1.0"?>'


class MethodCall:
    """ The :class:`MethodCall` encapsulates one request: the *method* name
        and the *params* sequence of arguments. The arguments are checked
        when the instance is created, so that a request that cannot be
        encoded is rejected before anything is put on the wire; the XML
        itself is generated on first use and cached.

        :ivar method: The remote procedure name.
        :ivar params: The arguments, as supplied by the caller.
    """

    def __init__(self, method, params=()):

        if not isinstance(method, str):
            raise TypeError('method name must be a string, not ' + type(method).__name__)

        if method == '':
            raise ValueError('method name must not be empty')

        if not isinstance(params, (list, tuple)):
            raise TypeError('params must be a list or tuple, not ' + type(params).__name__)

        # Absent arguments are dropped like any other absent member, but an
        # argument with no XML-RPC representation would leave a hole in the
        # parameter list. Refuse it outright.

        for index, param in enumerate(params):
            if isinstance(values.wrap(param), values.Unsupported):
                error = "parameter %d of '%s' cannot be encoded: %s"
                error = error % (index, method, type(param).__name__)
                raise errors.UsageError(error)

        self.method = method
        self.params = params
        self.body = None


    def __repr__(self):
        return 'request.MethodCall: ' + self.serialize()


    def __str__(self):
        return self.serialize()


    def __bytes__(self):
        return self.serialize().encode('utf-8')


    def document(self):
        """ Build and return a fresh :class:`Document` for this request.
        """

        document = Document('methodCall')
        document.append_child(document.create_element('methodName', self.method))
        document.append_child(marshal(document, self.params, 'params'))

        return document


    def serialize(self):
        """ Return the full request body as a string, including the leading
            XML declaration.
        """

        body = self.body

        if body is None:
            body = self.document().serialize(DECLARATION)
            self.body = body

        return body


# end of class MethodCall



def compose(method, params=()):
    """ Return the complete XML-RPC request body for calling *method* with
        the ordered *params*.
    """

    return MethodCall(method, params).serialize()


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
