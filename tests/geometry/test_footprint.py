import logging

import pytest

from nitf_transformer.geometry.footprint import build_polygon, get_footprint, get_location_wkt, \
    validate_policy, MULTIPOLYGON_POLICY, ENVELOPE_POLICY
from nitf_transformer.geometry.geometry_elements import Polygon, MultiPolygon

from tests import make_corners, make_image_segment, make_structure


@pytest.fixture
def second_segment():
    return make_image_segment(
        representation='D', corners=make_corners((39, -77.5), (39, -77), (38.25, -77), (38.25, -77.5)))


def test_build_polygon_order():
    corners = make_corners((10, 20), (10, 21), (9, 21), (9, 20))
    polygon = build_polygon(corners)
    ring = polygon.outer_ring.coordinates
    assert ring.shape == (5, 2)
    assert ring.tolist() == [[20, 10], [21, 10], [21, 9], [20, 9], [20, 10]]
    assert ring[0].tolist() == ring[4].tolist()


def test_build_polygon_degenerate():
    corners = make_corners((5, 5), (5, 5), (5, 5), (5, 5))
    ring = build_polygon(corners).outer_ring.coordinates
    assert ring.shape == (5, 2)


def test_single_segment_scenario():
    structure = make_structure(image_segments=[make_image_segment('G'), ])
    assert get_location_wkt(structure) == 'POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))'


def test_no_segments():
    structure = make_structure()
    assert get_footprint(structure) is None
    assert get_location_wkt(structure) is None


def test_single_segment_without_coordinates(caplog):
    structure = make_structure(image_segments=[make_image_segment(''), ])
    with caplog.at_level(logging.INFO, logger='nitf_transformer.geometry.footprint'):
        assert get_location_wkt(structure) is None
    assert 'unsupported' not in caplog.text


def test_single_segment_unsupported(caplog):
    structure = make_structure(image_segments=[make_image_segment('U'), ])
    with caplog.at_level(logging.INFO, logger='nitf_transformer.geometry.footprint'):
        assert get_location_wkt(structure) is None
    assert 'unsupported' in caplog.text


def test_multiple_segments(second_segment):
    structure = make_structure(image_segments=[make_image_segment('G'), second_segment])
    footprint = get_footprint(structure)
    assert isinstance(footprint, MultiPolygon)
    assert [polygon.outer_ring.coordinates[0].tolist() for polygon in footprint.polygons] == \
        [[0, 0], [-77.5, 39]]
    assert get_location_wkt(structure) == \
        'MULTIPOLYGON (((0 0, 0 1, 1 1, 1 0, 0 0)), ' \
        '((-77.5 39, -77 39, -77 38.25, -77.5 38.25, -77.5 39)))'


def test_multiple_segments_skip_ineligible(second_segment, caplog):
    segments = [make_image_segment('N'), make_image_segment(''), second_segment]
    structure = make_structure(image_segments=segments)
    with caplog.at_level(logging.INFO, logger='nitf_transformer.geometry.footprint'):
        footprint = get_footprint(structure)
    assert isinstance(footprint, MultiPolygon)
    assert len(footprint) == 1
    assert get_location_wkt(structure).startswith('MULTIPOLYGON (((-77.5 39')
    assert 'segment 0' in caplog.text


def test_multiple_segments_none_eligible():
    structure = make_structure(image_segments=[make_image_segment('S'), make_image_segment('')])
    assert get_location_wkt(structure) is None
    assert get_location_wkt(structure, policy=ENVELOPE_POLICY) is None


def test_envelope_policy(second_segment):
    structure = make_structure(image_segments=[make_image_segment('G'), second_segment])
    footprint = get_footprint(structure, policy=ENVELOPE_POLICY)
    assert isinstance(footprint, Polygon)
    assert get_location_wkt(structure, policy=ENVELOPE_POLICY) == \
        'POLYGON ((-77.5 0, 1 0, 1 39, -77.5 39, -77.5 0))'


def test_envelope_policy_single_segment():
    structure = make_structure(image_segments=[make_image_segment('G'), ])
    assert get_location_wkt(structure, policy=ENVELOPE_POLICY) == 'POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))'


def test_invalid_policy():
    assert validate_policy(MULTIPOLYGON_POLICY) == 'multipolygon'
    with pytest.raises(ValueError):
        validate_policy('convex_hull')
    with pytest.raises(ValueError):
        get_location_wkt(make_structure(), policy='convex_hull')


def test_geographic_without_corners(caplog):
    segment = make_image_segment('G', corners=None)
    # the default corners are supplied by the builder, so clear them explicitly
    segment.image_coordinates = None
    structure = make_structure(image_segments=[segment, ])
    with caplog.at_level(logging.WARNING, logger='nitf_transformer.geometry.footprint'):
        assert get_location_wkt(structure) is None
    assert 'no image coordinates' in caplog.text
