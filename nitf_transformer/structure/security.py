"""
The security metadata definitions, shared by the file header and every segment.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import Optional

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor


CLASSIFICATION_NAMES = {
    'U': 'UNCLASSIFIED',
    'R': 'RESTRICTED',
    'C': 'CONFIDENTIAL',
    'S': 'SECRET',
    'T': 'TOP_SECRET'}
"""
The NITF security classification codes, and the names used in the rendered metadata.
"""


class SecurityTags(StructureElement):
    """
    The security metadata block. The classification is required, and the
    codewords are always present (defaulting to the empty string), while every
    other field is optional and is `None` when absent from the source.
    """

    _ordering = (
        'classification', 'classification_system', 'codewords',
        'control_and_handling', 'release_instructions',
        'declassification_type', 'declassification_date', 'declassification_exemption',
        'downgrade', 'downgrade_date', 'downgrade_date_or_special_case', 'downgrade_event',
        'classification_text', 'classification_authority_type', 'classification_authority',
        'classification_reason', 'security_source_date', 'security_control_number')
    classification = _StringDescriptor(
        'classification', True,
        docstring='Security classification, e.g. `UNCLASSIFIED`.')  # type: str
    classification_system = _StringDescriptor(
        'classification_system', False,
        docstring='Security classification system.')  # type: Optional[str]
    codewords = _StringDescriptor(
        'codewords', True, default_value='',
        docstring='Security codewords.')  # type: str
    control_and_handling = _StringDescriptor(
        'control_and_handling', False,
        docstring='Security control and handling.')  # type: Optional[str]
    release_instructions = _StringDescriptor(
        'release_instructions', False,
        docstring='Security release instructions.')  # type: Optional[str]
    declassification_type = _StringDescriptor(
        'declassification_type', False,
        docstring='Security declassification type.')  # type: Optional[str]
    declassification_date = _StringDescriptor(
        'declassification_date', False,
        docstring='Security declassification date, in the `CCYYMMDD` format.')  # type: Optional[str]
    declassification_exemption = _StringDescriptor(
        'declassification_exemption', False,
        docstring='Security declassification exemption.')  # type: Optional[str]
    downgrade = _StringDescriptor(
        'downgrade', False,
        docstring='Security downgrade.')  # type: Optional[str]
    downgrade_date = _StringDescriptor(
        'downgrade_date', False,
        docstring='Security downgrade date, in the `CCYYMMDD` format.')  # type: Optional[str]
    downgrade_date_or_special_case = _StringDescriptor(
        'downgrade_date_or_special_case', False,
        docstring='Downgrade date or special case. NITF 2.0 only.')  # type: Optional[str]
    downgrade_event = _StringDescriptor(
        'downgrade_event', False,
        docstring='Downgrading event. NITF 2.0 only.')  # type: Optional[str]
    classification_text = _StringDescriptor(
        'classification_text', False,
        docstring='Classification text.')  # type: Optional[str]
    classification_authority_type = _StringDescriptor(
        'classification_authority_type', False,
        docstring='Classification authority type.')  # type: Optional[str]
    classification_authority = _StringDescriptor(
        'classification_authority', False,
        docstring='Classification authority.')  # type: Optional[str]
    classification_reason = _StringDescriptor(
        'classification_reason', False,
        docstring='Classification reason.')  # type: Optional[str]
    security_source_date = _StringDescriptor(
        'security_source_date', False,
        docstring='Security source date, in the `CCYYMMDD` format.')  # type: Optional[str]
    security_control_number = _StringDescriptor(
        'security_control_number', False,
        docstring='Security control number.')  # type: Optional[str]


class FileSecurityTags(SecurityTags):
    """
    The file level security metadata block, which additionally carries the file
    copy number and number of copies.
    """

    _ordering = SecurityTags._ordering + ('file_copy_number', 'file_number_of_copies')
    file_copy_number = _IntegerDescriptor(
        'file_copy_number', False,
        docstring='File copy number.')  # type: Optional[int]
    file_number_of_copies = _IntegerDescriptor(
        'file_number_of_copies', False,
        docstring='File number of copies.')  # type: Optional[int]
