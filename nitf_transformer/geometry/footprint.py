"""
Methods for building the geographic footprint of a NITF file from the corner
coordinates of its image segments.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from typing import Union

from nitf_transformer.structure import NITFStructure, ImageSegment, ImageCoordinates, \
    GEOGRAPHIC_REPRESENTATIONS, NONE
from .geometry_elements import Polygon, MultiPolygon

logger = logging.getLogger(__name__)

MULTIPOLYGON_POLICY = 'multipolygon'
"""
Multiple image footprints are reported as a `MULTIPOLYGON`.
"""

ENVELOPE_POLICY = 'envelope'
"""
Multiple image footprints are reported as the `POLYGON` bounding envelope of
their union.
"""

FOOTPRINT_POLICIES = (MULTIPOLYGON_POLICY, ENVELOPE_POLICY)


def validate_policy(policy):
    """
    Validate the footprint policy value.

    Parameters
    ----------
    policy : str

    Returns
    -------
    str

    Raises
    ------
    ValueError
    """

    if policy not in FOOTPRINT_POLICIES:
        raise ValueError(
            'Got unexpected footprint policy {!r}, '
            'expected one of {}'.format(policy, FOOTPRINT_POLICIES))
    return policy


def build_polygon(image_coordinates):
    """
    Build the closed footprint ring for the given image corners. The ring runs
    upper left, upper right, lower right, lower left and back to upper left, as
    (longitude, latitude) pairs. Degenerate rings are passed through unchanged.

    Parameters
    ----------
    image_coordinates : ImageCoordinates

    Returns
    -------
    Polygon
    """

    corners = [
        image_coordinates.upper_left, image_coordinates.upper_right,
        image_coordinates.lower_right, image_coordinates.lower_left,
        image_coordinates.upper_left]
    return Polygon(coordinates=[[[entry.longitude, entry.latitude] for entry in corners], ])


def _is_eligible(segment, index):
    # type: (ImageSegment, int) -> bool
    representation = segment.image_coordinates_representation
    if representation in GEOGRAPHIC_REPRESENTATIONS:
        if segment.image_coordinates is None:
            logger.warning(
                'Image segment {} has coordinates representation {}\n\t'
                'but no image coordinates, skipping'.format(index, representation))
            return False
        return True
    elif representation == NONE:
        return False

    logger.info(
        'Image segment {} has unsupported image coordinates representation {!r}.\n\t'
        'It does not contribute to the footprint'.format(index, representation))
    return False


def get_footprint(structure, policy=MULTIPOLYGON_POLICY):
    """
    Gets the footprint geometry for the NITF structure. A single image segment
    yields its polygon, while two or more yield the polygons of every eligible
    segment, in segment order. Segments with coordinates representation other than
    geographic or decimal degrees do not contribute.

    Parameters
    ----------
    structure : NITFStructure
    policy : str
        One of `MULTIPOLYGON_POLICY` or `ENVELOPE_POLICY`, determining the result
        in the case of two or more image segments.

    Returns
    -------
    None|Polygon|MultiPolygon
    """

    validate_policy(policy)
    segments = structure.image_segments
    if len(segments) == 0:
        return None
    elif len(segments) == 1:
        if _is_eligible(segments[0], 0):
            return build_polygon(segments[0].image_coordinates)
        return None

    multi_polygon = MultiPolygon()
    for i, segment in enumerate(segments):
        if _is_eligible(segment, i):
            multi_polygon.add_polygon(build_polygon(segment.image_coordinates))
    if len(multi_polygon) == 0:
        return None
    if policy == ENVELOPE_POLICY:
        return multi_polygon.get_envelope()
    return multi_polygon


def get_location_wkt(structure, policy=MULTIPOLYGON_POLICY):
    # type: (NITFStructure, str) -> Union[None, str]
    """
    Gets the well known text representation of the footprint.

    Parameters
    ----------
    structure : NITFStructure
    policy : str

    Returns
    -------
    None|str
    """

    footprint = get_footprint(structure, policy=policy)
    if footprint is None:
        return None
    return footprint.to_wkt()
