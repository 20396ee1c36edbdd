"""
A utility for dumping the catalog footprint, the metadata XML document and the
catalog attributes derived from a NITF file.

From the command-line

>>> python -m nitf_transformer.utils.nitf_metadata <path to nitf file>

For a basic help on the command-line, check

>>> python -m nitf_transformer.utils.nitf_metadata --help

"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import argparse
import functools
import os
import sys
from io import StringIO

from nitf_transformer.transformer import NITFInputTransformer
from nitf_transformer.geometry.footprint import FOOTPRINT_POLICIES, MULTIPOLYGON_POLICY
from nitf_transformer.catalog.metacard import GEOGRAPHY, METADATA

SHOW_CHOICES = ('location', 'metadata', 'attributes', 'all')


def _format_attribute(value):
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return str(value).replace('\n', '\\n')


def print_metacard(metacard, dest=sys.stdout, show='all'):
    """
    Write the metacard contents to the destination.

    Parameters
    ----------
    metacard : nitf_transformer.catalog.metacard.Metacard
    dest : TextIO
    show : str
        One of `'location'`, `'metadata'`, `'attributes'` or `'all'`.

    Returns
    -------
    None
    """

    print_func = functools.partial(print, file=dest)
    if show in ['location', 'all']:
        location = metacard.location
        print_func('location: {}'.format('<none>' if location is None else location))
    if show in ['metadata', 'all']:
        print_func(metacard.metadata)
    if show in ['attributes', 'all']:
        for name, value in metacard.attributes.items():
            if name in [GEOGRAPHY, METADATA]:
                continue
            print_func('{} = {}'.format(name, _format_attribute(value)))


def dump_nitf_metadata(file_name, dest, footprint_policy=MULTIPOLYGON_POLICY, show='all', over_write=True):
    """
    Utility to transform a NITF file, and dump the results to a configurable
    destination.

    Parameters
    ----------
    file_name : str|BinaryIO
        The path to or file-like object containing a NITF 2.1 or 2.0 file.
    dest : str
        'stdout', 'string', or the path to an output file.
    footprint_policy : str
        One of `'multipolygon'` or `'envelope'`.
    show : str
        One of `'location'`, `'metadata'`, `'attributes'` or `'all'`.
    over_write : bool
        If `True`, then overwrite the destination file, otherwise append to the
        file.

    Returns
    -------
    None|str
        There is only a return value if `dest=='string'`.
    """

    if show not in SHOW_CHOICES:
        raise ValueError('Got unexpected show value {!r}, expected one of {}'.format(show, SHOW_CHOICES))
    transformer = NITFInputTransformer(footprint_policy=footprint_policy)
    metacard_id = os.path.basename(file_name) if isinstance(file_name, str) else None
    metacard = transformer.transform_file(file_name, metacard_id=metacard_id)

    if dest == 'stdout':
        print_metacard(metacard, dest=sys.stdout, show=show)
        return
    if dest == 'string':
        out = StringIO()
        print_metacard(metacard, dest=out, show=show)
        value = out.getvalue()
        out.close()  # free the buffer
        return value

    with open(dest, 'w' if (over_write or not os.path.exists(dest)) else 'a') as the_file:
        print_metacard(metacard, dest=the_file, show=show)


def main(args=None):
    parser = argparse.ArgumentParser(
        description='Utility to dump the catalog metadata derived from a NITF 2.1 or 2.0 file.',
        formatter_class=argparse.RawTextHelpFormatter)
    parser.add_argument(
        'input_file',
        help='The path to a nitf file.')
    parser.add_argument(
        '-o', '--output', default='stdout',
        help="'stdout', or the path for an output file.\n"
             "* 'stdout' will print the information to standard out.\n"
             "* Otherwise, the output will be written to the given path,\n"
             "  which will be overwritten, if it exists.")
    parser.add_argument(
        '--footprint', default=MULTIPOLYGON_POLICY, choices=FOOTPRINT_POLICIES,
        help="How the footprint of two or more image segments is reported.\n"
             "* 'multipolygon' reports every image footprint in a MULTIPOLYGON.\n"
             "* 'envelope' reports the bounding envelope as a POLYGON.")
    parser.add_argument(
        '--show', default='all', choices=SHOW_CHOICES,
        help='Which parts of the derived metadata to write.')
    parsed = parser.parse_args(args)
    dump_nitf_metadata(parsed.input_file, parsed.output, footprint_policy=parsed.footprint, show=parsed.show)


if __name__ == '__main__':
    main()
