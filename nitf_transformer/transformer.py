"""
The NITF input transformer, which turns a NITF file into a catalog metacard
carrying its footprint, its metadata XML document, and its flat attributes.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging

from sarpy.io.general.base import SarpyIOError

from nitf_transformer.errors import CatalogTransformerError
from nitf_transformer.structure import NITFStructure
from nitf_transformer.geometry.footprint import get_location_wkt, validate_policy, \
    MULTIPOLYGON_POLICY
from nitf_transformer.metadata.document import build_metadata_document
from nitf_transformer.catalog.metacard import Metacard, NITF_METACARD
from nitf_transformer.catalog.attributes import project_attributes
from nitf_transformer.io.sarpy_nitf import read_nitf_structure

logger = logging.getLogger(__name__)


class NITFInputTransformer(object):
    """
    Transforms NITF files into catalog metacards.
    """

    ID = 'nitf'
    MIME_TYPE = 'image/nitf'

    def __init__(self, footprint_policy=MULTIPOLYGON_POLICY):
        """

        Parameters
        ----------
        footprint_policy : str
            How the footprint of two or more image segments is reported, one
            of `'multipolygon'` or `'envelope'`.
        """

        self._footprint_policy = validate_policy(footprint_policy)

    @property
    def footprint_policy(self):
        # type: () -> str
        return self._footprint_policy

    def transform(self, structure, metacard_id=None, processing_time=None):
        """
        Transform the parsed NITF structure into a metacard.

        Parameters
        ----------
        structure : NITFStructure
        metacard_id : None|str
        processing_time : None|datetime.datetime
            Used for the metacard dates, if the file date and time is not populated.

        Returns
        -------
        Metacard

        Raises
        ------
        CatalogTransformerError
            If `structure` is `None`.
        """

        logger.info('{} transform(structure, metacard_id={!r})'.format(self.__class__.__name__, metacard_id))
        if structure is None:
            raise CatalogTransformerError('Cannot transform null input.')

        metacard = project_attributes(
            structure, processing_time=processing_time, metacard=Metacard(NITF_METACARD))
        metacard.location = get_location_wkt(structure, policy=self._footprint_policy)
        metacard.metadata = build_metadata_document(structure)
        metacard.id = metacard_id
        metacard.content_type = self.MIME_TYPE
        return metacard

    def transform_file(self, file_object, metacard_id=None, processing_time=None):
        """
        Parse the NITF file, and transform it into a metacard.

        Parameters
        ----------
        file_object : str|BinaryIO
            The path to, or file-like object containing, a NITF 2.1 or 2.0 file.
        metacard_id : None|str
        processing_time : None|datetime.datetime

        Returns
        -------
        Metacard

        Raises
        ------
        CatalogTransformerError
            If `file_object` is `None`, or the file cannot be parsed.
        """

        if file_object is None:
            raise CatalogTransformerError('Cannot transform null input.')

        try:
            structure = read_nitf_structure(file_object)
        except (SarpyIOError, OSError, ValueError) as e:
            logger.warning('Failed parsing NITF file {}'.format(file_object))
            raise CatalogTransformerError('Failed parsing NITF input: {}'.format(e)) from e
        return self.transform(structure, metacard_id=metacard_id, processing_time=processing_time)

    def __str__(self):
        return 'InputTransformer {{Impl={}.{}, id={}, mime-type={}}}'.format(
            self.__class__.__module__, self.__class__.__name__, self.ID, self.MIME_TYPE)
