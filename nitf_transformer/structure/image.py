"""
The image segment definitions.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from datetime import datetime
from typing import Optional, Tuple

from .base import StructureElement, _StringDescriptor, _IntegerDescriptor, \
    _FloatDescriptor, _DateTimeDescriptor, _ElementDescriptor, _ElementListDescriptor, \
    _StringListDescriptor
from .security import SecurityTags
from .tre import TreNode


#########
# image coordinates representation (ICORDS) values

GEOGRAPHIC = 'G'
DECIMAL_DEGREES = 'D'
UTM_NORTH = 'N'
UTM_SOUTH = 'S'
MGRS = 'U'
NONE = ''

GEOGRAPHIC_REPRESENTATIONS = (GEOGRAPHIC, DECIMAL_DEGREES)
"""
The image coordinates representations which directly give geographic degrees.
"""


class ImageCoordinatePair(StructureElement):
    """
    A single corner coordinate, in WGS84 geographic degrees.
    """

    _ordering = ('longitude', 'latitude')
    longitude = _FloatDescriptor(
        'longitude', True, docstring='The longitude in degrees.')  # type: float
    latitude = _FloatDescriptor(
        'latitude', True, docstring='The latitude in degrees.')  # type: float


class ImageCoordinates(StructureElement):
    """
    The four image corner coordinates, in the order the NITF `IGEOLO` field
    lists them.
    """

    _ordering = ('upper_left', 'upper_right', 'lower_right', 'lower_left')
    upper_left = _ElementDescriptor(
        'upper_left', True, ImageCoordinatePair,
        docstring='The first row, first column corner.')  # type: ImageCoordinatePair
    upper_right = _ElementDescriptor(
        'upper_right', True, ImageCoordinatePair,
        docstring='The first row, last column corner.')  # type: ImageCoordinatePair
    lower_right = _ElementDescriptor(
        'lower_right', True, ImageCoordinatePair,
        docstring='The last row, last column corner.')  # type: ImageCoordinatePair
    lower_left = _ElementDescriptor(
        'lower_left', True, ImageCoordinatePair,
        docstring='The last row, first column corner.')  # type: ImageCoordinatePair


class ImageSegment(StructureElement):
    """
    The image segment header.
    """

    _ordering = (
        'identifier', 'image_date_time', 'target_id', 'image_identifier2', 'security',
        'image_source', 'number_of_rows', 'number_of_columns', 'pixel_value_type',
        'image_representation', 'image_category', 'actual_bits_per_pixel_per_band',
        'pixel_justification', 'image_coordinates_representation', 'image_coordinates',
        'image_comments', 'image_compression', 'compression_rate_code',
        'number_of_bands', 'number_of_multispectral_bands', 'image_mode',
        'number_of_blocks_per_row', 'number_of_blocks_per_column',
        'number_of_pixels_per_block_horizontal', 'number_of_pixels_per_block_vertical',
        'number_of_bits_per_pixel_per_band', 'image_display_level', 'image_attachment_level',
        'image_location_row', 'image_location_column', 'image_magnification', 'tres')
    identifier = _StringDescriptor(
        'identifier', True, default_value='',
        docstring='Image identifier 1.')  # type: str
    image_date_time = _DateTimeDescriptor(
        'image_date_time', False,
        docstring='Image date and time.')  # type: Optional[datetime]
    target_id = _StringDescriptor(
        'target_id', True, default_value='',
        docstring='Target identifier.')  # type: str
    image_identifier2 = _StringDescriptor(
        'image_identifier2', True, default_value='',
        docstring='Image identifier 2, or the image title for NITF 2.0.')  # type: str
    security = _ElementDescriptor(
        'security', True, SecurityTags,
        docstring='The image security metadata.')  # type: SecurityTags
    image_source = _StringDescriptor(
        'image_source', True, default_value='',
        docstring='Image source.')  # type: str
    number_of_rows = _IntegerDescriptor(
        'number_of_rows', True,
        docstring='Number of significant rows in the image.')  # type: int
    number_of_columns = _IntegerDescriptor(
        'number_of_columns', True,
        docstring='Number of significant columns in the image.')  # type: int
    pixel_value_type = _StringDescriptor(
        'pixel_value_type', True, default_value='INT',
        docstring='Pixel value type.')  # type: str
    image_representation = _StringDescriptor(
        'image_representation', True, default_value='MONO',
        docstring='Image representation.')  # type: str
    image_category = _StringDescriptor(
        'image_category', True, default_value='VIS',
        docstring='Image category.')  # type: str
    actual_bits_per_pixel_per_band = _IntegerDescriptor(
        'actual_bits_per_pixel_per_band', True, default_value=8,
        docstring='Actual bits per pixel per band.')  # type: int
    pixel_justification = _StringDescriptor(
        'pixel_justification', True, default_value='R',
        docstring='Pixel justification.')  # type: str
    image_coordinates_representation = _StringDescriptor(
        'image_coordinates_representation', True, default_value=NONE,
        docstring='Image coordinates representation (the NITF `ICORDS` code). The empty '
                  'string means that no coordinates are provided.')  # type: str
    image_coordinates = _ElementDescriptor(
        'image_coordinates', False, ImageCoordinates,
        docstring='The image corner coordinates.')  # type: Optional[ImageCoordinates]
    image_comments = _StringListDescriptor(
        'image_comments',
        docstring='The image comments.')  # type: Tuple[str, ...]
    image_compression = _StringDescriptor(
        'image_compression', True, default_value='NC',
        docstring='Image compression.')  # type: str
    compression_rate_code = _StringDescriptor(
        'compression_rate_code', False,
        docstring='Compression rate code, only present for compressed images.')  # type: Optional[str]
    number_of_bands = _IntegerDescriptor(
        'number_of_bands', True, default_value=1,
        docstring='Number of bands.')  # type: int
    number_of_multispectral_bands = _IntegerDescriptor(
        'number_of_multispectral_bands', False,
        docstring='Number of multispectral bands, only present for more than nine bands.')  # type: Optional[int]
    image_mode = _StringDescriptor(
        'image_mode', True, default_value='B',
        docstring='Image mode.')  # type: str
    number_of_blocks_per_row = _IntegerDescriptor(
        'number_of_blocks_per_row', True, default_value=1,
        docstring='Number of blocks per row.')  # type: int
    number_of_blocks_per_column = _IntegerDescriptor(
        'number_of_blocks_per_column', True, default_value=1,
        docstring='Number of blocks per column.')  # type: int
    number_of_pixels_per_block_horizontal = _IntegerDescriptor(
        'number_of_pixels_per_block_horizontal', True, default_value=0,
        docstring='Number of pixels per block horizontal.')  # type: int
    number_of_pixels_per_block_vertical = _IntegerDescriptor(
        'number_of_pixels_per_block_vertical', True, default_value=0,
        docstring='Number of pixels per block vertical.')  # type: int
    number_of_bits_per_pixel_per_band = _IntegerDescriptor(
        'number_of_bits_per_pixel_per_band', True, default_value=8,
        docstring='Number of bits per pixel per band.')  # type: int
    image_display_level = _IntegerDescriptor(
        'image_display_level', True, default_value=1,
        docstring='Image display level.')  # type: int
    image_attachment_level = _IntegerDescriptor(
        'image_attachment_level', True, default_value=0,
        docstring='Image attachment level.')  # type: int
    image_location_row = _IntegerDescriptor(
        'image_location_row', True, default_value=0,
        docstring='Image location row.')  # type: int
    image_location_column = _IntegerDescriptor(
        'image_location_column', True, default_value=0,
        docstring='Image location column.')  # type: int
    image_magnification = _StringDescriptor(
        'image_magnification', True, default_value='1.0',
        docstring='Image magnification.')  # type: str
    tres = _ElementListDescriptor(
        'tres', TreNode,
        docstring='The image segment TREs.')  # type: Tuple[TreNode, ...]
