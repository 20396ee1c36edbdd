"""
The label segment definitions (NITF 2.0).
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _ElementDescriptor, _ElementListDescriptor
from .security import SecurityTags
from .tre import TreNode


class LabelSegment(StructureElement):
    _ordering = (
        'identifier', 'security', 'location_row', 'location_column',
        'cell_width', 'cell_height', 'display_level', 'attachment_level',
        'text_colour', 'background_colour', 'tres')
    identifier = _StringDescriptor(
        'identifier', True, default_value='',
        docstring='Label identifier.')  # type: str
    security = _ElementDescriptor(
        'security', True, SecurityTags,
        docstring='The label security metadata.')  # type: SecurityTags
    location_row = _IntegerDescriptor(
        'location_row', True, default_value=0,
        docstring='Label location row.')  # type: int
    location_column = _IntegerDescriptor(
        'location_column', True, default_value=0,
        docstring='Label location column.')  # type: int
    cell_width = _IntegerDescriptor(
        'cell_width', True, default_value=0,
        docstring='Label cell width.')  # type: int
    cell_height = _IntegerDescriptor(
        'cell_height', True, default_value=0,
        docstring='Label cell height.')  # type: int
    display_level = _IntegerDescriptor(
        'display_level', True, default_value=1,
        docstring='Label display level.')  # type: int
    attachment_level = _IntegerDescriptor(
        'attachment_level', True, default_value=0,
        docstring='Label attachment level.')  # type: int
    text_colour = _StringDescriptor(
        'text_colour', True, default_value='',
        docstring='Label text colour.')  # type: str
    background_colour = _StringDescriptor(
        'background_colour', True, default_value='',
        docstring='Label background colour.')  # type: str
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The label segment TREs.')  # type: Tuple[TreNode, ...]
