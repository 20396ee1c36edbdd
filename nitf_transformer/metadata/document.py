"""
Assembly of the complete NITF metadata XML document.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from typing import List, Tuple

from nitf_transformer.structure import NITFStructure
from nitf_transformer.structure.base import StructureElement
from .xml_writer import add_labeled_element, add_optional_element, open_element, close_element
from .security import render_security
from .tre import serialize_tre

logger = logging.getLogger(__name__)

# (element label, structure attribute) pairs. The security block and the TREs
# carry no label, and are written in their listed position.

_FILE_FIELDS = (
    ('fileType', 'file_type'),
    ('complexityLevel', 'complexity_level'),
    ('originatingStationId', 'originating_station_id'),
    ('fileDateTime', 'file_date_time'),
    ('fileTitle', 'file_title'),
    (None, 'security'),
    ('fileBackgroundColour', 'file_background_colour'),
    ('originatorsName', 'originators_name'),
    ('originatorsPhoneNumber', 'originators_phone_number'),
    (None, 'tres'))

_IMAGE_FIELDS = (
    ('imageIdentifier1', 'identifier'),
    ('imageDateTime', 'image_date_time'),
    ('targetIdentifier', 'target_id'),
    ('imageIdentifier2', 'image_identifier2'),
    (None, 'security'),
    ('imageSource', 'image_source'),
    ('numberOfSignificantRowsInImage', 'number_of_rows'),
    ('numberOfSignificantColumnsInImage', 'number_of_columns'),
    ('pixelValueType', 'pixel_value_type'),
    ('imageRepresentation', 'image_representation'),
    ('imageCategory', 'image_category'),
    ('actualBitsPerPixelPerBand', 'actual_bits_per_pixel_per_band'),
    ('pixelJustification', 'pixel_justification'),
    ('imageCoordinatesRepresentation', 'image_coordinates_representation'),
    ('imageComment', 'image_comments'),
    ('imageCompression', 'image_compression'),
    ('compressionRateCode', 'compression_rate_code'),
    ('numberOfBands', 'number_of_bands'),
    ('numberOfMultiSpectralBands', 'number_of_multispectral_bands'),
    ('imageMode', 'image_mode'),
    ('numberOfBlocksPerRow', 'number_of_blocks_per_row'),
    ('numberOfBlocksPerColumn', 'number_of_blocks_per_column'),
    ('numberOfPixelsPerBlockHorizontal', 'number_of_pixels_per_block_horizontal'),
    ('numberOfPixelsPerBlockVertical', 'number_of_pixels_per_block_vertical'),
    ('numberOfBitsPerPixelPerBand', 'number_of_bits_per_pixel_per_band'),
    ('imageDisplayLevel', 'image_display_level'),
    ('imageAttachmentLevel', 'image_attachment_level'),
    ('imageLocationRow', 'image_location_row'),
    ('imageLocationColumn', 'image_location_column'),
    ('imageMagnification', 'image_magnification'),
    (None, 'tres'))

_GRAPHIC_FIELDS = (
    ('graphicIdentifier', 'identifier'),
    ('graphicName', 'name'),
    (None, 'security'),
    ('graphicDisplayLevel', 'display_level'),
    ('graphicAttachmentLevel', 'attachment_level'),
    ('graphicLocationRow', 'location_row'),
    ('graphicLocationColumn', 'location_column'),
    ('graphicBoundLocation1Row', 'bounding_box1_row'),
    ('graphicBoundLocation1Column', 'bounding_box1_column'),
    ('graphicColour', 'colour'),
    ('graphicBoundLocation2Row', 'bounding_box2_row'),
    ('graphicBoundLocation2Column', 'bounding_box2_column'),
    (None, 'tres'))

_SYMBOL_FIELDS = (
    ('symbolIdentifier', 'identifier'),
    ('symbolName', 'name'),
    (None, 'security'),
    ('symbolType', 'symbol_type'),
    ('numberOfLinesPerSymbol', 'number_of_lines_per_symbol'),
    ('numberOfPixelsPerLine', 'number_of_pixels_per_line'),
    ('lineWidth', 'line_width'),
    ('numberOfBitsPerPixel', 'number_of_bits_per_pixel'),
    ('symbolDisplayLevel', 'display_level'),
    ('symbolAttachmentLevel', 'attachment_level'),
    ('symbolLocationRow', 'location_row'),
    ('symbolLocationColumn', 'location_column'),
    ('symbolSecondLocationRow', 'second_location_row'),
    ('symbolSecondLocationColumn', 'second_location_column'),
    ('symbolColour', 'colour'),
    ('symbolNumber', 'symbol_number'),
    ('symbolRotation', 'symbol_rotation'),
    (None, 'tres'))

_LABEL_FIELDS = (
    ('labelIdentifier', 'identifier'),
    (None, 'security'),
    ('labelLocationRow', 'location_row'),
    ('labelLocationColumn', 'location_column'),
    ('labelCellWidth', 'cell_width'),
    ('labelCellHeight', 'cell_height'),
    ('labelDisplayLevel', 'display_level'),
    ('labelAttachmentLevel', 'attachment_level'),
    ('labelTextColour', 'text_colour'),
    ('labelBackgroundColour', 'background_colour'),
    (None, 'tres'))

_TEXT_FIELDS = (
    ('textIdentifier', 'identifier'),
    ('textAttachmentLevel', 'attachment_level'),
    ('textDateTime', 'text_date_time'),
    ('textTitle', 'text_title'),
    (None, 'security'),
    ('textFormat', 'text_format'),
    (None, 'tres'))


def render_block(lines, tag, element, fields, level=1):
    """
    Append the block for a single header or segment. A required field which is
    not populated raises a `MissingFieldError`, while an unpopulated optional field
    is skipped.

    Parameters
    ----------
    lines : List[str]
    tag : str
        The block element name.
    element : StructureElement
    fields : Tuple[Tuple[None|str, str], ...]
        The (element label, attribute name) pairs, in output order.
    level : int
        The indent level of the block element.

    Returns
    -------
    None
    """

    owner = element.__class__.__name__
    open_element(lines, tag, level)
    for label, attribute in fields:
        value = getattr(element, attribute)
        if attribute == 'security':
            render_security(lines, value, level=level + 1)
        elif attribute == 'tres':
            for tre in value:
                serialize_tre(lines, tre, level=level + 1)
        elif isinstance(value, tuple):
            for entry in value:
                add_labeled_element(lines, label, entry, level + 1, owner=owner)
        elif getattr(element.__class__, attribute).required:
            add_labeled_element(lines, label, value, level + 1, owner=owner)
        else:
            add_optional_element(lines, label, value, level + 1)
    close_element(lines, tag, level)


def build_metadata_lines(structure):
    """
    Gets the lines of the metadata document, each newline terminated, with the
    exception of the final closing `</metadata>`.

    Parameters
    ----------
    structure : NITFStructure

    Returns
    -------
    List[str]
    """

    lines = ['<metadata>\n', ]
    render_block(lines, 'file', structure.header, _FILE_FIELDS)
    for segments, tag, fields in [
            (structure.image_segments, 'image', _IMAGE_FIELDS),
            (structure.graphic_segments, 'graphic', _GRAPHIC_FIELDS),
            (structure.symbol_segments, 'symbol', _SYMBOL_FIELDS),
            (structure.label_segments, 'label', _LABEL_FIELDS),
            (structure.text_segments, 'text', _TEXT_FIELDS)]:
        for segment in segments:
            render_block(lines, tag, segment, fields)
    lines.append('</metadata>')
    logger.debug('Assembled metadata document of {} lines'.format(len(lines)))
    return lines


def build_metadata_document(structure):
    # type: (NITFStructure) -> str
    """
    Gets the metadata XML document for the NITF structure.

    Parameters
    ----------
    structure : NITFStructure

    Returns
    -------
    str
    """

    return ''.join(build_metadata_lines(structure))
