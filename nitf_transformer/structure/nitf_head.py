"""
The main NITF file header definitions, and the overall parsed structure.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from datetime import datetime
from typing import Optional, Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _DateTimeDescriptor, _ElementDescriptor, _ElementListDescriptor
from .security import FileSecurityTags
from .tre import TreNode
from .image import ImageSegment
from .graphics import GraphicSegment
from .symbol import SymbolSegment
from .label import LabelSegment
from .text import TextSegment


class FileHeader(StructureElement):
    """
    The main NITF file header.
    """

    _ordering = (
        'file_type', 'complexity_level', 'standard_type', 'originating_station_id',
        'file_date_time', 'file_title', 'security', 'file_background_colour',
        'originators_name', 'originators_phone_number', 'file_length', 'tres')
    file_type = _StringDescriptor(
        'file_type', True,
        docstring='File profile name and version, e.g. `NITF02.10`.')  # type: str
    complexity_level = _IntegerDescriptor(
        'complexity_level', True,
        docstring='Complexity level.')  # type: int
    standard_type = _StringDescriptor(
        'standard_type', True, default_value='BF01',
        docstring='Standard type.')  # type: str
    originating_station_id = _StringDescriptor(
        'originating_station_id', True, default_value='',
        docstring='Originating station identifier.')  # type: str
    file_date_time = _DateTimeDescriptor(
        'file_date_time', False,
        docstring='File date and time (UTC). This is `None` if the parser could '
                  'not interpret the value.')  # type: Optional[datetime]
    file_title = _StringDescriptor(
        'file_title', True, default_value='',
        docstring='File title.')  # type: str
    security = _ElementDescriptor(
        'security', True, FileSecurityTags,
        docstring='The file security metadata.')  # type: FileSecurityTags
    file_background_colour = _StringDescriptor(
        'file_background_colour', False,
        docstring='File background colour, NITF 2.1 only.')  # type: Optional[str]
    originators_name = _StringDescriptor(
        'originators_name', True, default_value='',
        docstring='Originator name.')  # type: str
    originators_phone_number = _StringDescriptor(
        'originators_phone_number', True, default_value='',
        docstring='Originator phone number.')  # type: str
    file_length = _IntegerDescriptor(
        'file_length', False,
        docstring='File length in bytes.')  # type: Optional[int]
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The file header TREs.')  # type: Tuple[TreNode, ...]


class NITFStructure(StructureElement):
    """
    The parsed NITF structure - the file header and each segment collection,
    in the order the parser enumerates them.
    """

    _ordering = (
        'header', 'image_segments', 'graphic_segments', 'symbol_segments',
        'label_segments', 'text_segments')
    header = _ElementDescriptor(
        'header', True, FileHeader,
        docstring='The file header.')  # type: FileHeader
    image_segments = _ElementListDescriptor(
        'image_segments', ImageSegment,
        docstring='The image segments.')  # type: Tuple[ImageSegment, ...]
    graphic_segments = _ElementListDescriptor(
        'graphic_segments', GraphicSegment,
        docstring='The graphic segments.')  # type: Tuple[GraphicSegment, ...]
    symbol_segments = _ElementListDescriptor(
        'symbol_segments', SymbolSegment,
        docstring='The symbol segments.')  # type: Tuple[SymbolSegment, ...]
    label_segments = _ElementListDescriptor(
        'label_segments', LabelSegment,
        docstring='The label segments.')  # type: Tuple[LabelSegment, ...]
    text_segments = _ElementListDescriptor(
        'text_segments', TextSegment,
        docstring='The text segments.')  # type: Tuple[TextSegment, ...]
