"""
Shared builders for the in-memory NITF structures used throughout the tests.
"""

from datetime import datetime

from nitf_transformer.structure import NITFStructure, FileHeader, ImageSegment, \
    ImageCoordinates, SecurityTags, FileSecurityTags, TreNode, TreEntry, TreGroup


def make_file_header(**kwargs):
    """
    Construct a populated file header, where any field may be overridden.

    Returns
    -------
    FileHeader
    """

    fields = {
        'file_type': 'NITF02.10',
        'complexity_level': 3,
        'originating_station_id': 'STATION',
        'file_date_time': datetime(2020, 1, 2, 3, 4, 5),
        'file_title': 'TEST',
        'security': FileSecurityTags(classification='UNCLASSIFIED'),
        'originators_name': 'Originator',
        'originators_phone_number': '555-0100'}
    fields.update(kwargs)
    return FileHeader(**fields)


def make_corners(*lat_lon_pairs):
    """
    Construct image coordinates from four (latitude, longitude) pairs, given in
    the order upper left, upper right, lower right, lower left.

    Returns
    -------
    ImageCoordinates
    """

    names = ['upper_left', 'upper_right', 'lower_right', 'lower_left']
    return ImageCoordinates(**{
        name: {'latitude': lat, 'longitude': lon} for name, (lat, lon) in zip(names, lat_lon_pairs)})


def make_image_segment(representation='G', corners=None, **kwargs):
    """
    Construct a populated image segment.

    Parameters
    ----------
    representation : str
        The image coordinates representation.
    corners : None|ImageCoordinates
        Defaults to the unit square, for geographic representations.

    Returns
    -------
    ImageSegment
    """

    if corners is None and representation in ['G', 'D']:
        corners = make_corners((0, 0), (1, 0), (1, 1), (0, 1))
    fields = {
        'identifier': 'IMAGE1',
        'security': SecurityTags(classification='UNCLASSIFIED'),
        'image_source': 'SENSOR',
        'number_of_rows': 1024,
        'number_of_columns': 2048,
        'image_coordinates_representation': representation,
        'image_coordinates': corners}
    fields.update(kwargs)
    return ImageSegment(**fields)


def make_structure(image_segments=(), **kwargs):
    """
    Construct a NITF structure with a populated file header.

    Returns
    -------
    NITFStructure
    """

    header = kwargs.pop('header', None)
    if header is None:
        header = make_file_header()
    return NITFStructure(header=header, image_segments=list(image_segments), **kwargs)


def make_nested_tre(name, depth):
    """
    Construct a TRE whose single entry nests `depth` levels of repeated groups,
    with a leaf field at the bottom.

    Returns
    -------
    TreNode
    """

    entry = TreEntry('LEAF', value='value')
    for i in range(depth):
        entry = TreEntry('LEVEL{}'.format(depth - 1 - i), groups=[TreGroup([entry, ])])
    return TreNode(name, entries=[entry, ])
