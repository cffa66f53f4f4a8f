"""Typed representation of the values that can be marshalled.

Native Python values are classified once, at the caller boundary, by
:func:`wrap`; the marshaller then dispatches on the resulting variant
and never has to inspect a native type itself.
"""

from __future__ import annotations

import collections.abc
import datetime
import decimal
import numbers
import types
from typing import Any, List, Optional, Tuple


class Value:
    """Base class for every variant. *tag* is the XML-RPC element name."""

    tag: Optional[str] = None

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other):
        return type(self) is type(other) and self.value == other.value

    __hash__ = None


class Null(Value):
    """An absent value. Containers drop these instead of emitting them."""


class Unsupported(Value):
    """Anything with no XML-RPC representation (callables, sets, bytes...)."""


class Scalar(Value):

    def text(self) -> str:
        return str(self.value)


class Integer(Scalar):
    tag = "int"

    def text(self) -> str:
        # Whole-valued floats land here too; render 3.0 as '3'.
        return str(int(self.value))


class Double(Scalar):
    tag = "double"

    def text(self) -> str:
        if isinstance(self.value, decimal.Decimal):
            return str(self.value)
        # Fractions and other reals have no numeric str() of their own.
        return repr(float(self.value))


class Boolean(Scalar):
    tag = "boolean"

    def text(self) -> str:
        return "true" if self.value else "false"


class String(Scalar):
    tag = "string"


class DateTime(Scalar):
    tag = "dateTime.iso8601"

    def text(self) -> str:
        return format_date(self.value)


class Array(Value):
    """Ordered members; ``value`` is a list of :class:`Value`."""

    tag = "array"

    def __init__(self, value: List[Value]):
        super().__init__(value)

    def members(self):
        return enumerate(self.value)


class Struct(Value):
    """Keyed members; ``value`` is a list of (key, :class:`Value`) pairs."""

    tag = "struct"

    def __init__(self, value: List[Tuple[str, Value]]):
        super().__init__(value)

    def members(self):
        return iter(self.value)


def is_integral(value: Any) -> bool:
    """Return True if *value* has no fractional part.

    This is a value test, not a type test: ``3.0`` is integral. Non-finite
    floats are not.
    """

    try:
        return value % 1 == 0
    except (TypeError, ValueError, decimal.InvalidOperation):
        return False


def format_date(date: datetime.datetime) -> str:
    """Render *date* as ``YYYY-MM-DD HH:MM:SS``.

    Only the month is zero-padded; day, hour, minute and second are not
    (``2024-03-5 7:8:9``). Timezone information is not emitted.
    """

    return "%d-%02d-%d %d:%d:%d" % (
        date.year,
        date.month,
        date.day,
        date.hour,
        date.minute,
        date.second,
    )


_opaque = (type, types.ModuleType, types.FunctionType, types.BuiltinFunctionType, types.MethodType)


def wrap(value: Any) -> Value:
    """Classify a native Python *value* into a :class:`Value` variant.

    Collections are wrapped recursively; the input itself is only read.
    A :class:`Value` instance is returned unchanged.
    """

    if isinstance(value, Value):
        return value

    if value is None:
        return Null()

    # bool is a subclass of int; it must be caught before the numeric test.
    if isinstance(value, bool):
        return Boolean(value)

    if isinstance(value, (numbers.Real, decimal.Decimal)):
        if is_integral(value):
            return Integer(value)
        return Double(value)

    if isinstance(value, str):
        return String(value)

    if isinstance(value, datetime.datetime):
        return DateTime(value)

    if isinstance(value, datetime.date):
        return DateTime(datetime.datetime.combine(value, datetime.time()))

    if isinstance(value, (bytes, bytearray, memoryview)):
        return Unsupported(value)

    if isinstance(value, collections.abc.Mapping):
        return Struct([(str(key), wrap(item)) for key, item in value.items()])

    if isinstance(value, collections.abc.Sequence):
        return Array([wrap(item) for item in value])

    if isinstance(value, _opaque) or callable(value):
        return Unsupported(value)

    # A plain object instance: only its own attributes participate, never
    # anything defined on its class.
    try:
        fields = vars(value)
    except TypeError:
        return Unsupported(value)

    return Struct([(str(key), wrap(item)) for key, item in fields.items()])


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
