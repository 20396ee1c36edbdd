"""
This module provides the basic polygonal geometry elements used for image
footprints, serializable to geojson style dictionaries and to well known text.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from collections import OrderedDict
from typing import Union, List, Tuple, Dict
import json
import logging

import numpy


logger = logging.getLogger(__name__)


##########
# utility functions

def _wkt_number(value):
    """
    Format a single ordinate for well known text. Integral values are written
    without a fractional part, and everything else uses the shortest representation
    which round trips.

    Parameters
    ----------
    value : float

    Returns
    -------
    str
    """

    value = float(value)
    if numpy.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def _wkt_coordinate_string(coordinates):
    """
    Format a coordinate array as the comma separated well known text point list.

    Parameters
    ----------
    coordinates : numpy.ndarray

    Returns
    -------
    str
    """

    return ', '.join(' '.join(_wkt_number(entry) for entry in point) for point in coordinates)


def _validate_coordinate_array(coordinates):
    # type: (Union[numpy.ndarray, List, Tuple]) -> numpy.ndarray
    if not isinstance(coordinates, numpy.ndarray):
        coordinates = numpy.array(coordinates, dtype=numpy.float64)
    if coordinates.ndim != 2:
        raise ValueError(
            'coordinates must be a two-dimensional array. '
            'Got shape {}'.format(coordinates.shape))
    if not (2 <= coordinates.shape[1] <= 4):
        raise ValueError(
            'The second dimension of coordinates must have between 2 and 4 entries. '
            'Got shape {}'.format(coordinates.shape))
    return coordinates


###############
# Geojson base object

class Jsonable(object):
    """
    Abstract class for json serializability.
    """
    _type = 'Jsonable'

    @property
    def type(self):
        """
        The type identifier.

        Returns
        -------
        str
        """

        return self._type

    @classmethod
    def from_dict(cls, the_json):
        """
        Deserialize from json.

        Parameters
        ----------
        the_json : Dict

        Returns
        -------

        """

        raise NotImplementedError

    def to_dict(self, parent_dict=None):
        """
        Serialize to json.

        Parameters
        ----------
        parent_dict : None|Dict

        Returns
        -------
        Dict
        """

        raise NotImplementedError

    def __str__(self):
        return '{}(**{})'.format(self.__class__.__name__, json.dumps(self.to_dict(), indent=1))

    def __repr__(self):
        return '{}(**{})'.format(self.__class__.__name__, self.to_dict())


#######
# Geometry object definitions

class Geometry(Jsonable):
    """
    Abstract Geometry base class.
    """
    _type = 'Geometry'

    @classmethod
    def from_dict(cls, geometry):
        # type: (Dict) -> Geometry
        typ = geometry.get('type', None)
        if typ is None:
            raise ValueError('Poorly formed json for Geometry {}'.format(geometry))
        elif typ == 'Polygon':
            return Polygon.from_dict(geometry)
        elif typ == 'MultiPolygon':
            return MultiPolygon.from_dict(geometry)
        else:
            raise ValueError('Unhandled type {} for Geometry from json {}'.format(typ, geometry))

    def to_dict(self, parent_dict=None):
        if parent_dict is None:
            parent_dict = OrderedDict()
        parent_dict['type'] = self.type
        parent_dict['coordinates'] = self.get_coordinate_list()
        return parent_dict

    def get_coordinate_list(self):
        """
        The geojson style coordinate list.

        Returns
        -------
        None|List
        """

        raise NotImplementedError

    def get_bbox(self):
        """
        Get the bounding box list.

        Returns
        -------
        None|List
            Of the form [min coord 0, min coord 1, ..., max coord 0, max coord 1, ...]
        """

        raise NotImplementedError

    def to_wkt(self):
        """
        Serialize to well known text.

        Returns
        -------
        str
        """

        raise NotImplementedError


class LinearRing(object):
    """
    A closed ring of coordinates, in (longitude, latitude) order. This is only used
    as a Polygon constituent. The coordinates are kept exactly as given, with the
    first point appended only when the ring is not already closed. Repeated points
    are never compressed, and the orientation is never altered.
    """

    __slots__ = ('_coordinates', )

    def __init__(self, coordinates):
        """

        Parameters
        ----------
        coordinates : numpy.ndarray|List[List[float]]|LinearRing
        """

        if isinstance(coordinates, LinearRing):
            coordinates = coordinates.coordinates.copy()
        coordinates = _validate_coordinate_array(coordinates)
        if coordinates.shape[0] < 3:
            logger.info(
                'A linear ring should consist of at least 3 points.\n\t'
                'Got shape {}'.format(coordinates.shape))
        if coordinates.shape[0] > 0 and numpy.any(coordinates[0, :] != coordinates[-1, :]):
            coordinates = numpy.vstack((coordinates, coordinates[0, :]))
        self._coordinates = coordinates

    @property
    def coordinates(self):
        # type: () -> numpy.ndarray
        """
        numpy.ndarray: The coordinate array, of shape `(N, 2)` and with the first
        and last points identical.
        """

        return self._coordinates

    def __len__(self):
        return self._coordinates.shape[0]

    def get_coordinate_list(self):
        return self._coordinates.tolist()

    def get_bbox(self):
        if self._coordinates.shape[0] == 0:
            return None
        min_list = numpy.min(self._coordinates, axis=0).tolist()
        min_list.extend(numpy.max(self._coordinates, axis=0).tolist())
        return min_list

    def get_area(self):
        """
        Gets the signed area of the ring. A positive value represents a ring with
        positive (counter-clockwise) orientation, while a negative value represents
        a ring with negative orientation.

        Returns
        -------
        float
        """

        return float(
            0.5*numpy.sum(self._coordinates[:-1, 0]*self._coordinates[1:, 1] -
                          self._coordinates[1:, 0]*self._coordinates[:-1, 1]))

    def to_wkt_fragment(self):
        """
        The parenthesized well known text point list for the ring.

        Returns
        -------
        str
        """

        return '({})'.format(_wkt_coordinate_string(self._coordinates))


class Polygon(Geometry):
    """
    A polygon object consisting of an outer LinearRing, and some collection of
    interior LinearRings representing holes or voids.
    """

    __slots__ = ('_outer_ring', '_inner_rings')
    _type = 'Polygon'

    def __init__(self, coordinates=None):
        """

        Parameters
        ----------
        coordinates : None|List[numpy.ndarray]|List[List[List[float]]]|List[LinearRing]|Polygon
            The first element is the outer ring, any remaining will be inner rings.
        """

        self._outer_ring = None  # type: Union[None, LinearRing]
        self._inner_rings = []  # type: List[LinearRing]
        if isinstance(coordinates, Polygon):
            coordinates = coordinates.get_coordinate_list()
        if coordinates is None:
            return
        if not isinstance(coordinates, (list, tuple)):
            raise TypeError('coordinates must be a list of linear ring coordinate arrays.')
        if len(coordinates) < 1:
            return
        self._outer_ring = LinearRing(coordinates[0])
        for entry in coordinates[1:]:
            self.add_inner_ring(entry)

    @property
    def outer_ring(self):
        """
        None|LinearRing: The outer ring.
        """

        return self._outer_ring

    @property
    def inner_rings(self):
        """
        List[LinearRing]: The inner rings.
        """

        return self._inner_rings

    def add_inner_ring(self, coordinates):
        """
        Add an inner ring to the Polygon.

        Parameters
        ----------
        coordinates : LinearRing|numpy.ndarray|list

        Returns
        -------
        None
        """

        if self._outer_ring is None:
            raise ValueError('A Polygon cannot have an inner ring with no outer ring defined.')
        self._inner_rings.append(LinearRing(coordinates))

    @classmethod
    def from_dict(cls, geometry):
        # type: (Dict) -> Polygon
        if not geometry.get('type', None) == cls._type:
            raise ValueError('Poorly formed json {}'.format(geometry))
        return cls(coordinates=geometry['coordinates'])

    def get_coordinate_list(self):
        if self._outer_ring is None:
            return None
        out = [self._outer_ring.get_coordinate_list(), ]
        for entry in self._inner_rings:
            out.append(entry.get_coordinate_list())
        return out

    def get_bbox(self):
        if self._outer_ring is None:
            return None
        return self._outer_ring.get_bbox()

    def to_wkt_fragment(self):
        """
        The parenthesized ring list for the polygon.

        Returns
        -------
        str
        """

        rings = [self._outer_ring.to_wkt_fragment(), ]
        rings.extend(entry.to_wkt_fragment() for entry in self._inner_rings)
        return '({})'.format(', '.join(rings))

    def to_wkt(self):
        if self._outer_ring is None:
            return 'POLYGON EMPTY'
        return 'POLYGON {}'.format(self.to_wkt_fragment())


class MultiPolygon(Geometry):
    """
    A collection of polygon objects, kept in insertion order.
    """

    __slots__ = ('_polygons', )
    _type = 'MultiPolygon'

    def __init__(self, coordinates=None):
        """

        Parameters
        ----------
        coordinates : None|List[List[List[List[float]]]]|List[Polygon]|MultiPolygon
        """

        self._polygons = []  # type: List[Polygon]
        if isinstance(coordinates, MultiPolygon):
            coordinates = coordinates.get_coordinate_list()
        if coordinates is None:
            return
        if not isinstance(coordinates, (list, tuple)):
            raise TypeError('coordinates must be a list of polygon coordinate lists.')
        for entry in coordinates:
            self.add_polygon(entry)

    @property
    def polygons(self):
        """
        List[Polygon]: The polygon collection.
        """

        return self._polygons

    def __len__(self):
        return len(self._polygons)

    def add_polygon(self, polygon):
        """
        Append a polygon to the collection.

        Parameters
        ----------
        polygon : Polygon|List

        Returns
        -------
        None
        """

        if not isinstance(polygon, Polygon):
            polygon = Polygon(coordinates=polygon)
        self._polygons.append(polygon)

    @classmethod
    def from_dict(cls, geometry):
        # type: (Dict) -> MultiPolygon
        if not geometry.get('type', None) == cls._type:
            raise ValueError('Poorly formed json {}'.format(geometry))
        return cls(coordinates=geometry['coordinates'])

    def get_coordinate_list(self):
        if len(self._polygons) == 0:
            return None
        return [polygon.get_coordinate_list() for polygon in self._polygons]

    def get_bbox(self):
        boxes = [polygon.get_bbox() for polygon in self._polygons]
        boxes = numpy.array([entry for entry in boxes if entry is not None], dtype=numpy.float64)
        if boxes.size == 0:
            return None
        half = int(boxes.shape[1]/2)
        min_list = numpy.min(boxes[:, :half], axis=0).tolist()
        min_list.extend(numpy.max(boxes[:, half:], axis=0).tolist())
        return min_list

    def get_envelope(self):
        """
        Gets the bounding envelope of the collection, as a single rectangular polygon
        with ring `(minx miny, maxx miny, maxx maxy, minx maxy, minx miny)`.

        Returns
        -------
        None|Polygon
        """

        bbox = self.get_bbox()
        if bbox is None:
            return None
        min_x, min_y, max_x, max_y = bbox[0], bbox[1], bbox[2], bbox[3]
        return Polygon(
            coordinates=[[[min_x, min_y], [max_x, min_y], [max_x, max_y], [min_x, max_y], [min_x, min_y]], ])

    def to_wkt(self):
        if len(self._polygons) == 0:
            return 'MULTIPOLYGON EMPTY'
        return 'MULTIPOLYGON ({})'.format(
            ', '.join(polygon.to_wkt_fragment() for polygon in self._polygons))
