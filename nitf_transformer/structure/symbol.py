"""
The symbol segment definitions (NITF 2.0).
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _ElementDescriptor, _ElementListDescriptor
from .security import SecurityTags
from .tre import TreNode


class SymbolSegment(StructureElement):
    """
    The symbol segment header.
    """

    _ordering = (
        'identifier', 'name', 'security', 'symbol_type',
        'number_of_lines_per_symbol', 'number_of_pixels_per_line', 'line_width',
        'number_of_bits_per_pixel', 'display_level', 'attachment_level',
        'location_row', 'location_column', 'second_location_row', 'second_location_column',
        'colour', 'symbol_number', 'symbol_rotation', 'tres')
    identifier = _StringDescriptor(
        'identifier', True, default_value='',
        docstring='Symbol identifier.')  # type: str
    name = _StringDescriptor(
        'name', True, default_value='',
        docstring='Symbol name.')  # type: str
    security = _ElementDescriptor(
        'security', True, SecurityTags,
        docstring='The symbol security metadata.')  # type: SecurityTags
    symbol_type = _StringDescriptor(
        'symbol_type', True, default_value='',
        docstring='Symbol type, one of `B` (bit-mapped), `C` (CGM) or `O` (object).')  # type: str
    number_of_lines_per_symbol = _IntegerDescriptor(
        'number_of_lines_per_symbol', True, default_value=0,
        docstring='Number of lines per symbol.')  # type: int
    number_of_pixels_per_line = _IntegerDescriptor(
        'number_of_pixels_per_line', True, default_value=0,
        docstring='Number of pixels per line.')  # type: int
    line_width = _IntegerDescriptor(
        'line_width', True, default_value=0,
        docstring='Line width.')  # type: int
    number_of_bits_per_pixel = _IntegerDescriptor(
        'number_of_bits_per_pixel', True, default_value=0,
        docstring='Number of bits per pixel.')  # type: int
    display_level = _IntegerDescriptor(
        'display_level', True, default_value=1,
        docstring='Symbol display level.')  # type: int
    attachment_level = _IntegerDescriptor(
        'attachment_level', True, default_value=0,
        docstring='Symbol attachment level.')  # type: int
    location_row = _IntegerDescriptor(
        'location_row', True, default_value=0,
        docstring='Symbol location row.')  # type: int
    location_column = _IntegerDescriptor(
        'location_column', True, default_value=0,
        docstring='Symbol location column.')  # type: int
    second_location_row = _IntegerDescriptor(
        'second_location_row', True, default_value=0,
        docstring='Second symbol location row.')  # type: int
    second_location_column = _IntegerDescriptor(
        'second_location_column', True, default_value=0,
        docstring='Second symbol location column.')  # type: int
    colour = _StringDescriptor(
        'colour', True, default_value='',
        docstring='Symbol colour.')  # type: str
    symbol_number = _StringDescriptor(
        'symbol_number', True, default_value='',
        docstring='Symbol number.')  # type: str
    symbol_rotation = _IntegerDescriptor(
        'symbol_rotation', True, default_value=0,
        docstring='Symbol rotation in degrees.')  # type: int
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The symbol segment TREs.')  # type: Tuple[TreNode, ...]
