"""
A minimal catalog metacard model - a typed attribute record describing one
ingested item, keyed by a fixed attribute vocabulary.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from collections import OrderedDict
from datetime import datetime
from typing import List, Tuple, Dict, Optional, Any


#########
# Attribute types

class AttributeType(object):
    """
    A catalog attribute value type.
    """

    __slots__ = ('_name', '_value_types', '_bounds')

    def __init__(self, name, value_types, bounds=None):
        """

        Parameters
        ----------
        name : str
        value_types : Tuple[type, ...]
            The permitted python types for values.
        bounds : None|Tuple[int, int]
            The inclusive bounds for integer valued types.
        """

        self._name = name
        self._value_types = value_types
        self._bounds = bounds

    @property
    def name(self):
        # type: () -> str
        return self._name

    def is_valid(self, value):
        """
        Is the value of a permitted type (and within bounds)?

        Parameters
        ----------
        value : Any

        Returns
        -------
        bool
        """

        if isinstance(value, bool) or not isinstance(value, self._value_types):
            return False
        if self._bounds is not None:
            return self._bounds[0] <= value <= self._bounds[1]
        return True

    def __repr__(self):
        return 'AttributeType({!r})'.format(self._name)


STRING = AttributeType('STRING', (str, ))
INTEGER = AttributeType('INTEGER', (int, ), bounds=(-2**31, 2**31 - 1))
LONG = AttributeType('LONG', (int, ), bounds=(-2**63, 2**63 - 1))
DATE = AttributeType('DATE', (datetime, ))
GEOMETRY = AttributeType('GEOMETRY', (str, ))
XML = AttributeType('XML', (str, ))


class AttributeDescriptor(object):
    """
    The description of a single named catalog attribute.
    """

    __slots__ = ('_name', '_attribute_type', '_indexed', '_stored', '_tokenized', '_multivalued')

    def __init__(self, name, attribute_type, indexed=True, stored=True, tokenized=False, multivalued=False):
        """

        Parameters
        ----------
        name : str
        attribute_type : AttributeType
        indexed : bool
        stored : bool
        tokenized : bool
        multivalued : bool
        """

        if not isinstance(attribute_type, AttributeType):
            raise TypeError(
                'attribute_type for attribute {} must be an AttributeType, '
                'got {}'.format(name, type(attribute_type)))
        self._name = name
        self._attribute_type = attribute_type
        self._indexed = bool(indexed)
        self._stored = bool(stored)
        self._tokenized = bool(tokenized)
        self._multivalued = bool(multivalued)

    @property
    def name(self):
        # type: () -> str
        return self._name

    @property
    def attribute_type(self):
        # type: () -> AttributeType
        return self._attribute_type

    @property
    def indexed(self):
        # type: () -> bool
        return self._indexed

    @property
    def stored(self):
        # type: () -> bool
        return self._stored

    @property
    def tokenized(self):
        # type: () -> bool
        return self._tokenized

    @property
    def multivalued(self):
        # type: () -> bool
        return self._multivalued

    def __repr__(self):
        return 'AttributeDescriptor({!r}, {})'.format(self._name, self._attribute_type.name)


class MetacardType(object):
    """
    A named, ordered collection of attribute descriptors.
    """

    __slots__ = ('_name', '_descriptors')

    def __init__(self, name, descriptors):
        """

        Parameters
        ----------
        name : str
        descriptors : List[AttributeDescriptor]|Tuple[AttributeDescriptor, ...]
        """

        self._name = name
        self._descriptors = OrderedDict()  # type: Dict[str, AttributeDescriptor]
        for entry in descriptors:
            if entry.name in self._descriptors:
                raise ValueError(
                    'Metacard type {} has duplicate attribute {}'.format(name, entry.name))
            self._descriptors[entry.name] = entry

    @property
    def name(self):
        # type: () -> str
        return self._name

    @property
    def descriptors(self):
        # type: () -> Tuple[AttributeDescriptor, ...]
        """
        Tuple[AttributeDescriptor, ...]: The attribute descriptors, in order.
        """

        return tuple(self._descriptors.values())

    def get_descriptor(self, name):
        """
        Gets the descriptor for the named attribute.

        Parameters
        ----------
        name : str

        Returns
        -------
        AttributeDescriptor

        Raises
        ------
        KeyError
        """

        try:
            return self._descriptors[name]
        except KeyError:
            raise KeyError('Metacard type {} has no attribute {}'.format(self._name, name))

    def __contains__(self, name):
        return name in self._descriptors

    def __len__(self):
        return len(self._descriptors)


#########
# the basic metacard attribute names

ID = 'id'
TITLE = 'title'
CREATED = 'created'
MODIFIED = 'modified'
EFFECTIVE = 'effective'
EXPIRATION = 'expiration'
GEOGRAPHY = 'location'
METADATA = 'metadata'
CONTENT_TYPE = 'metadata-content-type'
RESOURCE_URI = 'resource-uri'
RESOURCE_SIZE = 'resource-size'

BASIC_DESCRIPTORS = (
    AttributeDescriptor(ID, STRING),
    AttributeDescriptor(TITLE, STRING, tokenized=True),
    AttributeDescriptor(CREATED, DATE),
    AttributeDescriptor(MODIFIED, DATE),
    AttributeDescriptor(EFFECTIVE, DATE),
    AttributeDescriptor(EXPIRATION, DATE),
    AttributeDescriptor(GEOGRAPHY, GEOMETRY),
    AttributeDescriptor(METADATA, XML, tokenized=True),
    AttributeDescriptor(CONTENT_TYPE, STRING),
    AttributeDescriptor(RESOURCE_URI, STRING),
    AttributeDescriptor(RESOURCE_SIZE, STRING, indexed=False))

BASIC_METACARD = MetacardType('ddf.metacard', BASIC_DESCRIPTORS)


#########
# the nitf metacard attribute names

NITF_VERSION = 'version'
FILE_DATE_TIME = 'fileDateTime'
FILE_TITLE = 'fileTitle'
FILE_SIZE = 'fileSize'
COMPLEXITY_LEVEL = 'complexityLevel'
ORIGINATOR_NAME = 'originatorName'
ORIGINATING_STATION_ID = 'originatingStationId'
IMAGE_ID = 'imageId'
ISOURCE = 'isource'
NUMBER_OF_ROWS = 'numberOfRows'
NUMBER_OF_COLUMNS = 'numberOfColumns'
NUMBER_OF_BANDS = 'numberOfBands'
NUMBER_OF_MULTISPECTRAL_BANDS = 'numberOfMultispectralBands'
REPRESENTATION = 'representation'
CATEGORY = 'category'
BITS_PER_PIXEL_PER_BAND = 'bitsPerPixelPerBand'
IMAGE_MODE = 'imageMode'
COMPRESSION = 'compression'
RATE_CODE = 'rateCode'
TARGET_ID = 'targetId'
COMMENT = 'comment'
CLASSIFICATION = 'classification'
CODE_WORDS = 'codeWords'
CONTROL_CODE = 'controlCode'
RELEASE_INSTRUCTION = 'releaseInstruction'
CONTROL_NUMBER = 'controlNumber'
CLASSIFICATION_SYSTEM = 'system'
CLASSIFICATION_AUTHORITY = 'authority'
CLASSIFICATION_AUTHORITY_TYPE = 'authorityType'
CLASSIFICATION_TEXT = 'text'
CLASSIFICATION_REASON = 'reason'
CLASSIFICATION_DATE = 'classificationDate'
DECLASSIFICATION_TYPE = 'declassificationType'
DECLASSIFICATION_DATE = 'declassificationDate'


def _nitf_descriptor(name, attribute_type):
    # type: (str, AttributeType) -> AttributeDescriptor
    return AttributeDescriptor(
        name, attribute_type, indexed=True, stored=True, tokenized=False, multivalued=True)


NITF_DESCRIPTORS = tuple(
    _nitf_descriptor(name, attribute_type) for name, attribute_type in [
        (NITF_VERSION, STRING),
        (FILE_DATE_TIME, DATE),
        (FILE_TITLE, STRING),
        (FILE_SIZE, LONG),
        (COMPLEXITY_LEVEL, STRING),
        (ORIGINATOR_NAME, STRING),
        (ORIGINATING_STATION_ID, STRING),
        (IMAGE_ID, STRING),
        (ISOURCE, STRING),
        (NUMBER_OF_ROWS, LONG),
        (NUMBER_OF_COLUMNS, LONG),
        (NUMBER_OF_BANDS, INTEGER),
        (NUMBER_OF_MULTISPECTRAL_BANDS, INTEGER),
        (REPRESENTATION, STRING),
        (CATEGORY, STRING),
        (BITS_PER_PIXEL_PER_BAND, INTEGER),
        (IMAGE_MODE, STRING),
        (COMPRESSION, STRING),
        (RATE_CODE, STRING),
        (TARGET_ID, STRING),
        (COMMENT, STRING),
        (CLASSIFICATION, STRING),
        (CODE_WORDS, STRING),
        (CONTROL_CODE, STRING),
        (RELEASE_INSTRUCTION, STRING),
        (CONTROL_NUMBER, STRING),
        (CLASSIFICATION_SYSTEM, STRING),
        (CLASSIFICATION_AUTHORITY, STRING),
        (CLASSIFICATION_AUTHORITY_TYPE, STRING),
        (CLASSIFICATION_TEXT, STRING),
        (CLASSIFICATION_REASON, STRING),
        (CLASSIFICATION_DATE, DATE),
        (DECLASSIFICATION_TYPE, STRING),
        (DECLASSIFICATION_DATE, STRING)])

NITF_METACARD = MetacardType('nitf', BASIC_DESCRIPTORS + NITF_DESCRIPTORS)


class Metacard(object):
    """
    A catalog record, holding typed values for the attributes of its metacard type.
    """

    __slots__ = ('_metacard_type', '_attributes')

    def __init__(self, metacard_type=BASIC_METACARD):
        """

        Parameters
        ----------
        metacard_type : MetacardType
        """

        if not isinstance(metacard_type, MetacardType):
            raise TypeError('metacard_type must be a MetacardType, got {}'.format(type(metacard_type)))
        self._metacard_type = metacard_type
        self._attributes = OrderedDict()  # type: Dict[str, Any]

    @property
    def metacard_type(self):
        # type: () -> MetacardType
        return self._metacard_type

    @property
    def attributes(self):
        # type: () -> Dict[str, Any]
        """
        OrderedDict: A copy of the populated attributes, in the order set.
        """

        return OrderedDict(self._attributes)

    def set_attribute(self, name, value):
        """
        Sets the attribute value. Setting `None` removes the attribute.

        Parameters
        ----------
        name : str
        value : None|str|int|datetime

        Returns
        -------
        None

        Raises
        ------
        KeyError
            If the metacard type does not define the attribute.
        TypeError
            If the value does not match the attribute type.
        """

        descriptor = self._metacard_type.get_descriptor(name)
        if value is None:
            self._attributes.pop(name, None)
            return

        if not descriptor.attribute_type.is_valid(value):
            raise TypeError(
                'Attribute {} of type {} got incompatible value {!r}'.format(
                    name, descriptor.attribute_type.name, value))
        self._attributes[name] = value

    def get_attribute(self, name, default=None):
        """
        Gets the attribute value.

        Parameters
        ----------
        name : str
        default : None|Any
            Returned when the attribute is defined, but not populated.

        Returns
        -------
        Any

        Raises
        ------
        KeyError
            If the metacard type does not define the attribute.
        """

        self._metacard_type.get_descriptor(name)
        return self._attributes.get(name, default)

    def __contains__(self, name):
        return name in self._attributes

    @property
    def id(self):
        # type: () -> Optional[str]
        return self.get_attribute(ID)

    @id.setter
    def id(self, value):
        self.set_attribute(ID, value)

    @property
    def title(self):
        # type: () -> Optional[str]
        return self.get_attribute(TITLE)

    @title.setter
    def title(self, value):
        self.set_attribute(TITLE, value)

    @property
    def location(self):
        # type: () -> Optional[str]
        """
        None|str: The well known text footprint.
        """

        return self.get_attribute(GEOGRAPHY)

    @location.setter
    def location(self, value):
        self.set_attribute(GEOGRAPHY, value)

    @property
    def metadata(self):
        # type: () -> Optional[str]
        """
        None|str: The XML metadata document.
        """

        return self.get_attribute(METADATA)

    @metadata.setter
    def metadata(self, value):
        self.set_attribute(METADATA, value)

    @property
    def content_type(self):
        # type: () -> Optional[str]
        return self.get_attribute(CONTENT_TYPE)

    @content_type.setter
    def content_type(self, value):
        self.set_attribute(CONTENT_TYPE, value)

    @property
    def created(self):
        # type: () -> Optional[datetime]
        return self.get_attribute(CREATED)

    @created.setter
    def created(self, value):
        self.set_attribute(CREATED, value)

    @property
    def modified(self):
        # type: () -> Optional[datetime]
        return self.get_attribute(MODIFIED)

    @modified.setter
    def modified(self, value):
        self.set_attribute(MODIFIED, value)

    @property
    def effective(self):
        # type: () -> Optional[datetime]
        return self.get_attribute(EFFECTIVE)

    @effective.setter
    def effective(self, value):
        self.set_attribute(EFFECTIVE, value)

    def __repr__(self):
        return 'Metacard(type={!r}, attributes={})'.format(self._metacard_type.name, dict(self._attributes))
