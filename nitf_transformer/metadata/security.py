"""
Rendering of the security metadata block.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import List

from nitf_transformer.structure import SecurityTags, FileSecurityTags
from .xml_writer import add_labeled_element, add_optional_element

_OPTIONAL_FIELDS = (
    ('securityControlAndHandling', 'control_and_handling'),
    ('securityReleaseInstructions', 'release_instructions'),
    ('securityDeclassificationType', 'declassification_type'),
    ('securityDeclassificationDate', 'declassification_date'),
    ('securityDeclassificationExemption', 'declassification_exemption'),
    ('securityDowngrade', 'downgrade'),
    ('securityDowngradeDate', 'downgrade_date'),
    ('securityDowngradeDateOrSpecialCase', 'downgrade_date_or_special_case'),
    ('securityDowngradeEvent', 'downgrade_event'),
    ('securityClassificationText', 'classification_text'),
    ('securityClassificationAuthorityType', 'classification_authority_type'),
    ('securityClassificationAuthority', 'classification_authority'),
    ('securityClassificationReason', 'classification_reason'),
    ('securitySourceDate', 'security_source_date'),
    ('securityControlNumber', 'security_control_number'))

_FILE_OPTIONAL_FIELDS = (
    ('securityFileCopyNumber', 'file_copy_number'),
    ('securityFileNumberOfCopies', 'file_number_of_copies'))


def render_security(lines, security, level=2):
    """
    Append the security elements. The classification and codewords are always
    written, with the codewords possibly empty. Every other element is only written
    when populated.

    Parameters
    ----------
    lines : List[str]
    security : SecurityTags|FileSecurityTags
    level : int

    Returns
    -------
    None
    """

    add_labeled_element(lines, 'securityClassification', security.classification, level)
    add_optional_element(lines, 'securityClassificationSystem', security.classification_system, level)
    add_labeled_element(lines, 'securityCodewords', security.codewords, level)
    for label, attribute in _OPTIONAL_FIELDS:
        add_optional_element(lines, label, getattr(security, attribute), level)
    if isinstance(security, FileSecurityTags):
        for label, attribute in _FILE_OPTIONAL_FIELDS:
            add_optional_element(lines, label, getattr(security, attribute), level)
