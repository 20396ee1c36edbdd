import numpy as np
import pytest

from nitf_transformer.geometry import geometry_elements
from nitf_transformer.geometry.geometry_elements import _wkt_number


@pytest.fixture(scope='module')
def test_elements():
    square = [[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]]
    other = [[-77.5, 38.25], [-77.0, 38.25], [-77.0, 39.0], [-77.5, 39.0], [-77.5, 38.25]]
    return {
        'square': square,
        'square_json': {'type': 'Polygon', 'coordinates': [square, ]},
        'other': other,
        'multi_json': {'type': 'MultiPolygon', 'coordinates': [[square, ], [other, ]]}}


def test_wkt_number():
    assert _wkt_number(0.0) == '0'
    assert _wkt_number(-0.0) == '0'
    assert _wkt_number(1) == '1'
    assert _wkt_number(-77.5) == '-77.5'
    assert _wkt_number(0.1) == '0.1'
    assert _wkt_number(12.345678901234) == '12.345678901234'
    assert _wkt_number(1e20) == '100000000000000000000'


def test_ring_closure():
    ring = geometry_elements.LinearRing([[0, 0], [1, 0], [1, 1], [0, 1]])
    assert len(ring) == 5
    assert np.all(ring.coordinates[0] == ring.coordinates[-1])

    closed = geometry_elements.LinearRing([[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]])
    assert len(closed) == 5


def test_ring_keeps_repeated_points():
    # a degenerate ring passes through unchanged
    ring = geometry_elements.LinearRing([[2, 3], [2, 3], [2, 3], [2, 3], [2, 3]])
    assert len(ring) == 5
    assert ring.get_area() == 0


def test_ring_validation():
    with pytest.raises(ValueError):
        geometry_elements.LinearRing([0, 1, 2])
    with pytest.raises(ValueError):
        geometry_elements.LinearRing([[0, ], [1, ], [2, ]])


def test_polygon(test_elements):
    polygon = geometry_elements.Polygon(coordinates=[test_elements['square'], ])
    assert polygon.type == 'Polygon'
    assert polygon.get_bbox() == [0, 0, 1, 1]
    assert polygon.to_wkt() == 'POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))'
    assert polygon.to_dict() == test_elements['square_json']
    assert polygon.outer_ring.get_area() == 1

    from_json = geometry_elements.Geometry.from_dict(test_elements['square_json'])
    assert isinstance(from_json, geometry_elements.Polygon)
    assert from_json.get_coordinate_list() == [test_elements['square'], ]

    assert geometry_elements.Polygon().to_wkt() == 'POLYGON EMPTY'


def test_polygon_inner_ring(test_elements):
    polygon = geometry_elements.Polygon(
        coordinates=[test_elements['square'], [[0.25, 0.25], [0.5, 0.25], [0.5, 0.5]]])
    assert len(polygon.inner_rings) == 1
    assert polygon.to_wkt() == \
        'POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0), (0.25 0.25, 0.5 0.25, 0.5 0.5, 0.25 0.25))'

    with pytest.raises(ValueError):
        geometry_elements.Polygon().add_inner_ring(test_elements['square'])


def test_multipolygon(test_elements):
    multi = geometry_elements.MultiPolygon(coordinates=[[test_elements['square'], ], [test_elements['other'], ]])
    assert len(multi) == 2
    assert multi.to_wkt() == \
        'MULTIPOLYGON (((0 0, 1 0, 1 1, 0 1, 0 0)), ' \
        '((-77.5 38.25, -77 38.25, -77 39, -77.5 39, -77.5 38.25)))'
    assert multi.get_bbox() == [-77.5, 0, 1, 39]
    assert multi.to_dict() == test_elements['multi_json']

    envelope = multi.get_envelope()
    assert envelope.to_wkt() == 'POLYGON ((-77.5 0, 1 0, 1 39, -77.5 39, -77.5 0))'

    from_json = geometry_elements.Geometry.from_dict(test_elements['multi_json'])
    assert isinstance(from_json, geometry_elements.MultiPolygon)
    assert len(from_json.polygons) == 2


def test_empty_multipolygon():
    multi = geometry_elements.MultiPolygon()
    assert multi.get_bbox() is None
    assert multi.get_envelope() is None
    assert multi.to_wkt() == 'MULTIPOLYGON EMPTY'
    assert multi.get_coordinate_list() is None


def test_from_dict_errors(test_elements):
    with pytest.raises(ValueError):
        geometry_elements.Geometry.from_dict({'coordinates': []})
    with pytest.raises(ValueError):
        geometry_elements.Geometry.from_dict({'type': 'Point', 'coordinates': [0, 0]})
    with pytest.raises(ValueError):
        geometry_elements.Polygon.from_dict(test_elements['multi_json'])
