"""
The read-only NITF structure model, as handed over by the parsing collaborator.
"""

__classification__ = "UNCLASSIFIED"

from .security import SecurityTags, FileSecurityTags, CLASSIFICATION_NAMES
from .tre import TreNode, TreEntry, TreGroup
from .image import ImageCoordinatePair, ImageCoordinates, ImageSegment, \
    GEOGRAPHIC, DECIMAL_DEGREES, UTM_NORTH, UTM_SOUTH, MGRS, NONE, GEOGRAPHIC_REPRESENTATIONS
from .graphics import GraphicSegment
from .symbol import SymbolSegment
from .label import LabelSegment
from .text import TextSegment
from .nitf_head import FileHeader, NITFStructure
