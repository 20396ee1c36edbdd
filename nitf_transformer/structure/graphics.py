"""
The graphic segment definitions (NITF 2.1).
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _ElementDescriptor, _ElementListDescriptor
from .security import SecurityTags
from .tre import TreNode


class GraphicSegment(StructureElement):
    """
    The graphic segment header.
    """

    _ordering = (
        'identifier', 'name', 'security', 'display_level', 'attachment_level',
        'location_row', 'location_column', 'bounding_box1_row', 'bounding_box1_column',
        'colour', 'bounding_box2_row', 'bounding_box2_column', 'tres')
    identifier = _StringDescriptor(
        'identifier', True, default_value='',
        docstring='Graphic identifier.')  # type: str
    name = _StringDescriptor(
        'name', True, default_value='',
        docstring='Graphic name.')  # type: str
    security = _ElementDescriptor(
        'security', True, SecurityTags,
        docstring='The graphic security metadata.')  # type: SecurityTags
    display_level = _IntegerDescriptor(
        'display_level', True, default_value=1,
        docstring='Graphic display level.')  # type: int
    attachment_level = _IntegerDescriptor(
        'attachment_level', True, default_value=0,
        docstring='Graphic attachment level.')  # type: int
    location_row = _IntegerDescriptor(
        'location_row', True, default_value=0,
        docstring='Graphic location row.')  # type: int
    location_column = _IntegerDescriptor(
        'location_column', True, default_value=0,
        docstring='Graphic location column.')  # type: int
    bounding_box1_row = _IntegerDescriptor(
        'bounding_box1_row', True, default_value=0,
        docstring='First graphic bound location row.')  # type: int
    bounding_box1_column = _IntegerDescriptor(
        'bounding_box1_column', True, default_value=0,
        docstring='First graphic bound location column.')  # type: int
    colour = _StringDescriptor(
        'colour', True, default_value='C',
        docstring='Graphic colour, `C` for colour or `M` for monochrome.')  # type: str
    bounding_box2_row = _IntegerDescriptor(
        'bounding_box2_row', True, default_value=0,
        docstring='Second graphic bound location row.')  # type: int
    bounding_box2_column = _IntegerDescriptor(
        'bounding_box2_column', True, default_value=0,
        docstring='Second graphic bound location column.')  # type: int
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The graphic segment TREs.')  # type: Tuple[TreNode, ...]
