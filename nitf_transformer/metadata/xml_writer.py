"""
The shared primitives for writing the indented metadata XML lines. Every
rendering function appends complete, newline terminated lines to a list of
strings owned by the caller.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import re
from datetime import date, datetime
from typing import List
from xml.sax.saxutils import escape

from nitf_transformer.errors import MissingFieldError

INDENT = '  '
_ATTRIBUTE_ENTITIES = {'"': '&quot;', "'": '&apos;', '\n': '&#10;', '\r': '&#13;', '\t': '&#9;'}
# characters which may not appear in an XML 1.0 document, even as character references
_ILLEGAL_CHARACTERS = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\ufffe\uffff]')
_REPLACEMENT_CHARACTER = '\ufffd'


def indent(level):
    # type: (int) -> str
    """
    The leading whitespace for the given indent level.
    """

    return INDENT*level


def escape_text(value):
    # type: (str) -> str
    """
    Escape a value for use as element content. Characters which are not permitted
    in XML are replaced by U+FFFD.
    """

    return escape(_ILLEGAL_CHARACTERS.sub(_REPLACEMENT_CHARACTER, value))


def escape_attribute(value):
    # type: (str) -> str
    """
    Escape a value for use inside a double or single quoted attribute.
    Tab, newline and carriage return are written as character references, so they
    survive attribute value normalization.
    """

    return escape(_ILLEGAL_CHARACTERS.sub(_REPLACEMENT_CHARACTER, value), _ATTRIBUTE_ENTITIES)


def format_value(value):
    """
    Stringify a scalar field value. Integers use `str`, and dates and date times
    use the ISO 8601 format.

    Parameters
    ----------
    value : str|int|float|datetime|date

    Returns
    -------
    str
    """

    if isinstance(value, str):
        return value
    elif isinstance(value, bool):
        raise TypeError('Got unexpected boolean field value')
    elif isinstance(value, (int, float)):
        return str(value)
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError('Got unhandled field value type {}'.format(type(value)))


def add_labeled_element(lines, label, value, level, owner=None):
    """
    Append the element `<label>value</label>`, with escaped content, at the given
    indent level.

    Parameters
    ----------
    lines : List[str]
    label : str
    value : str|int|float|datetime|date
    level : int
    owner : None|str
        The name of the owning block, only used in error reporting.

    Returns
    -------
    None

    Raises
    ------
    MissingFieldError
        If `value` is `None`.
    """

    if value is None:
        raise MissingFieldError(label, owner)
    lines.append('{0:s}<{1:s}>{2:s}</{1:s}>\n'.format(indent(level), label, escape_text(format_value(value))))


def add_optional_element(lines, label, value, level):
    """
    Append the labeled element, unless `value` is `None`.

    Parameters
    ----------
    lines : List[str]
    label : str
    value : None|str|int|float|datetime|date
    level : int

    Returns
    -------
    None
    """

    if value is not None:
        add_labeled_element(lines, label, value, level)


def open_element(lines, tag, level):
    # type: (List[str], str, int) -> None
    lines.append('{}<{}>\n'.format(indent(level), tag))


def close_element(lines, tag, level):
    # type: (List[str], str, int) -> None
    lines.append('{}</{}>\n'.format(indent(level), tag))
