"""
Adapter from the sarpy NITF header parsing into the NITF structure model.

The sarpy `NITFDetails` object parses the file header and every segment
subheader, for both NITF 2.1 and NITF 2.0. This module copies the relevant
fields into the read-only structure model, normalizing the differences between
the two versions.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from datetime import datetime
from typing import Union, List, Optional, BinaryIO

import numpy

from sarpy.io.general.nitf import NITFDetails, extract_image_corners

from nitf_transformer.structure import NITFStructure, FileHeader, ImageSegment, \
    GraphicSegment, SymbolSegment, LabelSegment, TextSegment, SecurityTags, FileSecurityTags, \
    TreNode, TreEntry, ImageCoordinates, CLASSIFICATION_NAMES, GEOGRAPHIC_REPRESENTATIONS, \
    UTM_NORTH, NONE
from nitf_transformer.structure.base import DATE_TIME_FORMAT

logger = logging.getLogger(__name__)

_NITF20_DATE_TIME_FORMAT = '%d%H%M%SZ%b%y'

# NITF 2.0 ICORDS values with a different meaning in NITF 2.1. The 2.0 geocentric
# value C has no 2.1 counterpart, and is kept as is.
_NITF20_REPRESENTATIONS = {'N': NONE, 'U': UTM_NORTH}


##########
# basic field conversions

def _string(value):
    # type: (Union[None, str, bytes]) -> Optional[str]
    """
    Decode and strip the value, where a blank value becomes `None`.
    """

    if value is None:
        return None
    if isinstance(value, bytes):
        value = value.decode('utf-8', errors='replace')
    value = value.strip()
    return None if value == '' else value


def _integer(value):
    # type: (Union[None, int, str, bytes]) -> Optional[int]
    if isinstance(value, int):
        return value
    value = _string(value)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning('Failed parsing integer value {!r}'.format(value))
        return None


def _date_time(value):
    """
    Parse a NITF date time string, in either the NITF 2.1 `CCYYMMDDhhmmss` format
    or the NITF 2.0 `DDhhmmssZMONYY` format.

    Parameters
    ----------
    value : None|str|bytes

    Returns
    -------
    None|datetime
    """

    value = _string(value)
    if value is None:
        return None
    for the_format in [DATE_TIME_FORMAT, _NITF20_DATE_TIME_FORMAT]:
        try:
            return datetime.strptime(value, the_format)
        except ValueError:
            continue
    logger.warning('Failed parsing date time value {!r}'.format(value))
    return None


def _colour(value):
    # type: (Union[None, bytes]) -> Optional[str]
    """
    Render a three byte colour value as `[0xRR,0xGG,0xBB]`.
    """

    if value is None:
        return None
    if isinstance(value, str):
        value = value.encode('latin-1')
    return '[{}]'.format(','.join('0x{0:02x}'.format(entry) for entry in value))


def _location(value):
    """
    Split a NITF `RRRRRCCCCC` location value into the row and column.

    Parameters
    ----------
    value : None|int|str|bytes

    Returns
    -------
    (int, int)
    """

    if value is None:
        return 0, 0
    if isinstance(value, int):
        value = '{0:010d}'.format(value)
    elif isinstance(value, bytes):
        value = value.decode('utf-8')
    value = value.strip()
    if len(value) != 10:
        logger.warning('Got malformed location value {!r}'.format(value))
        return 0, 0
    return int(value[:5]), int(value[5:])


##########
# security and tres

def _security_kwargs(tags):
    """
    Gets the security keyword arguments from the sarpy security tags, for
    either NITF version.

    Parameters
    ----------
    tags : sarpy.io.general.nitf_elements.security.NITFSecurityTags|sarpy.io.general.nitf_elements.security.NITFSecurityTags0

    Returns
    -------
    dict
    """

    code = _string(tags.CLAS)
    classification = CLASSIFICATION_NAMES.get(code, code)
    if classification is None:
        logger.warning('Security classification is not populated, assuming unclassified')
        classification = CLASSIFICATION_NAMES['U']
    downgrade = _string(getattr(tags, 'DWNG', None))
    return {
        'classification': classification,
        'classification_system': _string(getattr(tags, 'CLSY', None)),
        'codewords': _string(tags.CODE),
        'control_and_handling': _string(tags.CTLH),
        'release_instructions': _string(tags.REL),
        'declassification_type': _string(getattr(tags, 'DCTP', None)),
        'declassification_date': _string(getattr(tags, 'DCDT', None)),
        'declassification_exemption': _string(getattr(tags, 'DCXM', None)),
        'downgrade': _string(getattr(tags, 'DG', None)),
        'downgrade_date': _string(getattr(tags, 'DGDT', None)),
        'downgrade_date_or_special_case': downgrade,
        'downgrade_event': _string(getattr(tags, 'DEVT', None)),
        'classification_text': _string(getattr(tags, 'CLTX', None)),
        'classification_authority_type': _string(getattr(tags, 'CATP', None)),
        'classification_authority': _string(getattr(tags, 'CAUT', None)),
        'classification_reason': _string(getattr(tags, 'CRSN', None)),
        'security_source_date': _string(getattr(tags, 'SRDT', None)),
        'security_control_number': _string(tags.CTLN)}


def _security(tags):
    return SecurityTags(**_security_kwargs(tags))


def _tre_node(tre):
    """
    Convert a single sarpy TRE into the TRE tree.

    Parameters
    ----------
    tre : sarpy.io.general.nitf_elements.base.TRE

    Returns
    -------
    TreNode
    """

    tag = tre.TAG.decode('utf-8') if isinstance(tre.TAG, bytes) else tre.TAG
    data = tre.DATA
    if isinstance(data, bytes):
        logger.warning(
            'TRE {} is not parsed,\n\t'
            'its content is recorded as a single hex encoded DATA field'.format(tag.strip()))
        return TreNode(tag, entries=[TreEntry('DATA', value=data.hex()), ])
    return TreNode.from_dict(tag, data.to_dict())


def _tres(header):
    """
    Gets the TRE trees from the user defined and extended header data of the
    given sarpy header.

    Parameters
    ----------
    header

    Returns
    -------
    List[TreNode]
    """

    out = []
    for attribute in ['UserHeader', 'ExtendedHeader']:
        container = getattr(header, attribute, None)
        if container is None:
            continue
        tre_list = container.data
        if tre_list is None:
            continue
        if isinstance(tre_list, bytes):
            logger.warning(
                '{} of {} holds unparsed bytes,\n\t'
                'no TREs will be extracted'.format(attribute, header.__class__.__name__))
            continue
        out.extend(_tre_node(tre) for tre in tre_list.tres)
    return out


##########
# the headers

def _file_header(header, version):
    """
    Convert the sarpy main header.

    Parameters
    ----------
    header : sarpy.io.general.nitf_elements.nitf_head.NITFHeader|sarpy.io.general.nitf_elements.nitf_head.NITFHeader0
    version : str

    Returns
    -------
    FileHeader
    """

    security_kwargs = _security_kwargs(header.Security)
    security_kwargs['file_copy_number'] = _integer(header.FSCOP)
    security_kwargs['file_number_of_copies'] = _integer(header.FSCPYS)
    return FileHeader(
        file_type='{}{}'.format(header.FHDR, header.FVER),
        complexity_level=header.CLEVEL,
        standard_type=header.STYPE,
        originating_station_id=header.OSTAID,
        file_date_time=_date_time(header.FDT),
        file_title=header.FTITLE,
        security=FileSecurityTags(**security_kwargs),
        file_background_colour=_colour(getattr(header, 'FBKGC', None)) if version == '02.10' else None,
        originators_name=header.ONAME,
        originators_phone_number=header.OPHONE,
        file_length=_integer(header.FL),
        tres=_tres(header))


def _image_coordinates(header, representation, index):
    """
    Gets the image corner coordinates, for geographic and decimal degree
    representations.

    Parameters
    ----------
    header : sarpy.io.general.nitf_elements.image.ImageSegmentHeader|sarpy.io.general.nitf_elements.image.ImageSegmentHeader0
    representation : str
        The NITF 2.1 image coordinates representation.
    index : int

    Returns
    -------
    None|ImageCoordinates
    """

    if representation not in GEOGRAPHIC_REPRESENTATIONS:
        return None
    try:
        corners = extract_image_corners(header)
    except ValueError:
        logger.warning(
            'Failed parsing the corner coordinates {!r}\n\t'
            'for image segment {}'.format(header.IGEOLO, index))
        return None
    if corners is None:
        return None
    # corners are (latitude, longitude), in IGEOLO order
    corners = numpy.asarray(corners, dtype='float64')
    names = ['upper_left', 'upper_right', 'lower_right', 'lower_left']
    return ImageCoordinates(**{
        name: {'latitude': float(corner[0]), 'longitude': float(corner[1])}
        for name, corner in zip(names, corners)})


def _image_representation(header, version):
    """
    Gets the image coordinates representation, in its NITF 2.1 meaning.

    Parameters
    ----------
    header : sarpy.io.general.nitf_elements.image.ImageSegmentHeader|sarpy.io.general.nitf_elements.image.ImageSegmentHeader0
    version : str

    Returns
    -------
    str
    """

    representation = _string(header.ICORDS)
    if representation is None:
        return NONE
    if version == '02.00':
        return _NITF20_REPRESENTATIONS.get(representation, representation)
    return representation


def _image_segment(header, index, version):
    """
    Convert a sarpy image subheader.

    Parameters
    ----------
    header : sarpy.io.general.nitf_elements.image.ImageSegmentHeader|sarpy.io.general.nitf_elements.image.ImageSegmentHeader0
    index : int

    Returns
    -------
    ImageSegment
    """

    representation = _image_representation(header, version)
    if hasattr(header, 'IID1'):
        identifier, identifier2 = header.IID1, header.IID2
    else:
        identifier, identifier2 = header.IID, header.ITITLE
    number_of_bands = len(header.Bands)
    row, column = _location(header.ILOC)
    return ImageSegment(
        identifier=identifier,
        image_date_time=_date_time(header.IDATIM),
        target_id=header.TGTID,
        image_identifier2=identifier2,
        security=_security(header.Security),
        image_source=header.ISORCE,
        number_of_rows=header.NROWS,
        number_of_columns=header.NCOLS,
        pixel_value_type=header.PVTYPE,
        image_representation=header.IREP,
        image_category=header.ICAT,
        actual_bits_per_pixel_per_band=header.ABPP,
        pixel_justification=header.PJUST,
        image_coordinates_representation=representation,
        image_coordinates=_image_coordinates(header, representation, index),
        image_comments=[entry.COMMENT for entry in header.Comments],
        image_compression=header.IC,
        compression_rate_code=_string(header.COMRAT),
        number_of_bands=number_of_bands,
        number_of_multispectral_bands=number_of_bands if number_of_bands > 9 else None,
        image_mode=header.IMODE,
        number_of_blocks_per_row=header.NBPR,
        number_of_blocks_per_column=header.NBPC,
        number_of_pixels_per_block_horizontal=header.NPPBH,
        number_of_pixels_per_block_vertical=header.NPPBV,
        number_of_bits_per_pixel_per_band=header.NBPP,
        image_display_level=header.IDLVL,
        image_attachment_level=header.IALVL,
        image_location_row=row,
        image_location_column=column,
        image_magnification=header.IMAG,
        tres=_tres(header))


def _graphic_segment(header):
    # type: (...) -> GraphicSegment
    row, column = _location(header.SLOC)
    bound1_row, bound1_column = _location(header.SBND1)
    bound2_row, bound2_column = _location(header.SBND2)
    return GraphicSegment(
        identifier=header.SID,
        name=header.SNAME,
        security=_security(header.Security),
        display_level=header.SDLVL,
        attachment_level=header.SALVL,
        location_row=row,
        location_column=column,
        bounding_box1_row=bound1_row,
        bounding_box1_column=bound1_column,
        colour=header.SCOLOR,
        bounding_box2_row=bound2_row,
        bounding_box2_column=bound2_column,
        tres=_tres(header))


def _symbol_segment(header):
    # type: (...) -> SymbolSegment
    row, column = _location(header.SLOC)
    row2, column2 = _location(header.SLOC2)
    return SymbolSegment(
        identifier=header.SID,
        name=header.SNAME,
        security=_security(header.Security),
        symbol_type=header.STYPE,
        number_of_lines_per_symbol=header.NLIPS,
        number_of_pixels_per_line=header.NPIXPL,
        line_width=header.NWDTH,
        number_of_bits_per_pixel=header.NBPP,
        display_level=header.SDLVL,
        attachment_level=header.SALVL,
        location_row=row,
        location_column=column,
        second_location_row=row2,
        second_location_column=column2,
        colour=header.SCOLOR,
        symbol_number=header.SNUM,
        symbol_rotation=header.SROT,
        tres=_tres(header))


def _label_segment(header):
    # type: (...) -> LabelSegment
    row, column = _location(header.LLOC)
    return LabelSegment(
        identifier=header.LID,
        security=_security(header.Security),
        location_row=row,
        location_column=column,
        cell_width=_integer(header.LCW),
        cell_height=_integer(header.LCH),
        display_level=header.LDLVL,
        attachment_level=header.LALVL,
        text_colour=_colour(header.LTC),
        background_colour=_colour(header.LBC),
        tres=_tres(header))


def _text_segment(header):
    # type: (...) -> TextSegment
    return TextSegment(
        identifier=header.TEXTID,
        attachment_level=getattr(header, 'TXTALVL', None),
        text_date_time=_date_time(header.TXTDT),
        text_title=header.TXTITL,
        security=_security(header.Security),
        text_format=header.TXTFMT,
        tres=_tres(header))


def _segment_count(offsets):
    # type: (Optional[numpy.ndarray]) -> int
    return 0 if offsets is None else int(offsets.size)


def structure_from_details(details):
    """
    Construct the NITF structure from the sarpy NITF details object.

    Parameters
    ----------
    details : NITFDetails

    Returns
    -------
    NITFStructure
    """

    version = details.nitf_version
    img_headers = details.img_headers
    if img_headers is None:
        img_headers = []

    graphic_segments = [
        _graphic_segment(details.parse_graphics_subheader(i))
        for i in range(_segment_count(getattr(details, 'graphics_subheader_offsets', None)))]
    symbol_segments = [
        _symbol_segment(details.parse_symbol_subheader(i))
        for i in range(_segment_count(getattr(details, 'symbol_subheader_offsets', None)))]
    label_segments = [
        _label_segment(details.parse_label_subheader(i))
        for i in range(_segment_count(getattr(details, 'label_subheader_offsets', None)))]
    text_segments = [
        _text_segment(details.parse_text_subheader(i))
        for i in range(_segment_count(getattr(details, 'text_subheader_offsets', None)))]

    logger.debug(
        'NITF version {} with {} image, {} graphic, {} symbol,\n\t'
        '{} label and {} text segments'.format(
            version, len(img_headers), len(graphic_segments), len(symbol_segments),
            len(label_segments), len(text_segments)))
    return NITFStructure(
        header=_file_header(details.nitf_header, version),
        image_segments=[_image_segment(entry, i, version) for i, entry in enumerate(img_headers)],
        graphic_segments=graphic_segments,
        symbol_segments=symbol_segments,
        label_segments=label_segments,
        text_segments=text_segments)


def read_nitf_structure(file_object):
    # type: (Union[str, BinaryIO]) -> NITFStructure
    """
    Parse the NITF file, and construct the NITF structure.

    Parameters
    ----------
    file_object : str|BinaryIO
        The path to, or file-like object containing, a NITF 2.1 or 2.0 file.

    Returns
    -------
    NITFStructure
    """

    return structure_from_details(NITFDetails(file_object))
