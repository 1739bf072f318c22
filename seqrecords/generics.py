"""Generic operations shared by every record variant.

Each operation is a single-dispatch function. Record variants register their own
implementations next to their class definitions. The default implementation of
each operation is the builtin behavior its name shadows, so values that are not
records behave exactly as they would without this module.
"""

from functools import singledispatch
from typing import Any

from seqrecords.settings import RecordSettings


@singledispatch
def length(value: Any) -> int:
    """Return the number of symbols in a record.

    Any other value is passed to the builtin :func:`len`.
    """
    return len(value)


@singledispatch
def reverse(value: Any, settings: RecordSettings | None = None) -> Any:
    """Return a reversed copy of a record with an annotated name.

    Any other value is passed to the builtin :func:`reversed`.

    :param value: the record to reverse
    :param settings: the settings providing the name annotation
    :return: a new record of the same variant
    """
    return reversed(value)


@singledispatch
def render(value: Any) -> str:
    """Return a human-readable, multi-line summary of a record.

    Any other value is passed to the builtin :class:`str`.
    """
    return str(value)


@singledispatch
def index(value: Any, start: int, stop: int) -> Any:
    """Return a record holding the symbols in the half-open range ``[start, stop)``.

    Positions are 0-based. Any other value is sliced as ``value[start:stop]``.

    :param value: the record to select from
    :param start: the first position to include
    :param stop: the position after the last one to include
    :return: a new record of the same variant
    """
    return value[start:stop]
