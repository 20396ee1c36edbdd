"""
The text segment definitions.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from datetime import datetime
from typing import Optional, Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _DateTimeDescriptor, _ElementDescriptor, _ElementListDescriptor
from .security import SecurityTags
from .tre import TreNode


class TextSegment(StructureElement):
    """
    The text segment header.
    """

    _ordering = (
        'identifier', 'attachment_level', 'text_date_time', 'text_title',
        'security', 'text_format', 'tres')
    identifier = _StringDescriptor(
        'identifier', True, default_value='',
        docstring='Text identifier.')  # type: str
    attachment_level = _IntegerDescriptor(
        'attachment_level', True, default_value=0,
        docstring='Text attachment level.')  # type: int
    text_date_time = _DateTimeDescriptor(
        'text_date_time', False,
        docstring='Text date and time.')  # type: Optional[datetime]
    text_title = _StringDescriptor(
        'text_title', True, default_value='',
        docstring='Text title.')  # type: str
    security = _ElementDescriptor(
        'security', True, SecurityTags,
        docstring='The text security metadata.')  # type: SecurityTags
    text_format = _StringDescriptor(
        'text_format', True, default_value='',
        docstring='Text format, e.g. `STA`, `UT1`, `U8S`, or `MTF`.')  # type: str
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The text segment TREs.')  # type: Tuple[TreNode, ...]
