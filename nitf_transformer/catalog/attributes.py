"""
Projection of the NITF structure into the flat, typed catalog attributes.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from datetime import datetime, timezone
from typing import Optional

from nitf_transformer.structure import NITFStructure, ImageSegment, SecurityTags
from . import metacard as mc

logger = logging.getLogger(__name__)

SECURITY_DATE_FORMAT = '%Y%m%d'


def _parse_security_date(value):
    # type: (Optional[str]) -> Optional[datetime]
    if value is None or value.strip() == '':
        return None
    try:
        return datetime.strptime(value.strip(), SECURITY_DATE_FORMAT)
    except ValueError:
        logger.warning(
            'Failed parsing security source date {!r},\n\t'
            'classificationDate will not be populated'.format(value))
        return None


def _project_image(metacard, segment):
    # type: (mc.Metacard, ImageSegment) -> None
    metacard.set_attribute(mc.IMAGE_ID, segment.identifier)
    metacard.set_attribute(mc.ISOURCE, segment.image_source)
    metacard.set_attribute(mc.NUMBER_OF_ROWS, segment.number_of_rows)
    metacard.set_attribute(mc.NUMBER_OF_COLUMNS, segment.number_of_columns)
    metacard.set_attribute(mc.NUMBER_OF_BANDS, segment.number_of_bands)
    metacard.set_attribute(mc.NUMBER_OF_MULTISPECTRAL_BANDS, segment.number_of_multispectral_bands)
    metacard.set_attribute(mc.REPRESENTATION, segment.image_representation)
    metacard.set_attribute(mc.CATEGORY, segment.image_category)
    metacard.set_attribute(mc.BITS_PER_PIXEL_PER_BAND, segment.number_of_bits_per_pixel_per_band)
    metacard.set_attribute(mc.IMAGE_MODE, segment.image_mode)
    metacard.set_attribute(mc.COMPRESSION, segment.image_compression)
    metacard.set_attribute(mc.RATE_CODE, segment.compression_rate_code)
    metacard.set_attribute(mc.TARGET_ID, segment.target_id)
    if len(segment.image_comments) > 0:
        metacard.set_attribute(mc.COMMENT, '\n'.join(segment.image_comments))


def _project_security(metacard, security):
    # type: (mc.Metacard, SecurityTags) -> None
    metacard.set_attribute(mc.CLASSIFICATION, security.classification)
    metacard.set_attribute(mc.CODE_WORDS, security.codewords)
    metacard.set_attribute(mc.CONTROL_CODE, security.control_and_handling)
    metacard.set_attribute(mc.RELEASE_INSTRUCTION, security.release_instructions)
    metacard.set_attribute(mc.CONTROL_NUMBER, security.security_control_number)
    metacard.set_attribute(mc.CLASSIFICATION_SYSTEM, security.classification_system)
    metacard.set_attribute(mc.CLASSIFICATION_AUTHORITY, security.classification_authority)
    metacard.set_attribute(mc.CLASSIFICATION_AUTHORITY_TYPE, security.classification_authority_type)
    metacard.set_attribute(mc.CLASSIFICATION_TEXT, security.classification_text)
    metacard.set_attribute(mc.CLASSIFICATION_REASON, security.classification_reason)
    metacard.set_attribute(mc.CLASSIFICATION_DATE, _parse_security_date(security.security_source_date))
    metacard.set_attribute(mc.DECLASSIFICATION_TYPE, security.declassification_type)
    metacard.set_attribute(mc.DECLASSIFICATION_DATE, security.declassification_date)


def project_attributes(structure, processing_time=None, metacard=None):
    """
    Project the NITF structure into the typed catalog attributes. Only the first
    image segment is projected, and the file level security is used. If the file
    date and time is not populated, then the processing time is used for the
    created, modified and effective dates.

    Parameters
    ----------
    structure : NITFStructure
    processing_time : None|datetime
        Defaults to the current time in UTC.
    metacard : None|nitf_transformer.catalog.metacard.Metacard
        The metacard to populate. A new metacard of type `NITF_METACARD` is
        constructed, if not provided.

    Returns
    -------
    nitf_transformer.catalog.metacard.Metacard
    """

    if metacard is None:
        metacard = mc.Metacard(mc.NITF_METACARD)
    header = structure.header

    metacard.set_attribute(mc.NITF_VERSION, header.file_type)
    metacard.set_attribute(mc.FILE_DATE_TIME, header.file_date_time)
    if header.file_date_time is not None:
        the_date = header.file_date_time
    else:
        the_date = datetime.now(timezone.utc) if processing_time is None else processing_time
        logger.info(
            'File date and time is not populated,\n\t'
            'using processing time {} for the metacard dates'.format(the_date.isoformat()))
    metacard.created = the_date
    metacard.modified = the_date
    metacard.effective = the_date

    metacard.title = header.file_title
    metacard.set_attribute(mc.FILE_TITLE, header.file_title)
    metacard.set_attribute(mc.COMPLEXITY_LEVEL, '{0:02d}'.format(header.complexity_level))
    metacard.set_attribute(mc.ORIGINATOR_NAME, header.originators_name)
    metacard.set_attribute(mc.ORIGINATING_STATION_ID, header.originating_station_id)
    metacard.set_attribute(mc.FILE_SIZE, header.file_length)

    if len(structure.image_segments) > 0:
        if len(structure.image_segments) > 1:
            logger.debug(
                'Projecting only the first of {} image segments'.format(len(structure.image_segments)))
        _project_image(metacard, structure.image_segments[0])
    _project_security(metacard, header.security)
    return metacard
