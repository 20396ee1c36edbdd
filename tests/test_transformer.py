import unittest
from datetime import datetime

from sarpy.io.general.base import SarpyIOError

from nitf_transformer import transformer as transformer_module
from nitf_transformer.transformer import NITFInputTransformer
from nitf_transformer.errors import CatalogTransformerError
from nitf_transformer.catalog import metacard as mc

from tests import make_image_segment, make_structure


class TestNITFInputTransformer(unittest.TestCase):
    def setUp(self):
        self._read_nitf_structure = transformer_module.read_nitf_structure

    def tearDown(self):
        transformer_module.read_nitf_structure = self._read_nitf_structure

    def test_null_input(self):
        transformer = NITFInputTransformer()
        with self.assertRaises(CatalogTransformerError) as context:
            transformer.transform(None)
        self.assertEqual(str(context.exception), 'Cannot transform null input.')
        with self.assertRaises(CatalogTransformerError):
            transformer.transform_file(None)

    def test_string_form(self):
        self.assertEqual(
            str(NITFInputTransformer()),
            'InputTransformer {Impl=nitf_transformer.transformer.NITFInputTransformer, '
            'id=nitf, mime-type=image/nitf}')

    def test_invalid_policy(self):
        with self.assertRaises(ValueError):
            NITFInputTransformer(footprint_policy='hull')

    def test_transform(self):
        structure = make_structure(image_segments=[make_image_segment(), ])
        metacard = NITFInputTransformer().transform(structure, metacard_id='abc123')
        self.assertEqual(metacard.id, 'abc123')
        self.assertEqual(metacard.content_type, 'image/nitf')
        self.assertEqual(metacard.location, 'POLYGON ((0 0, 0 1, 1 1, 1 0, 0 0))')
        self.assertTrue(metacard.metadata.startswith('<metadata>\n'))
        self.assertTrue(metacard.metadata.endswith('</metadata>'))
        self.assertEqual(metacard.title, 'TEST')
        self.assertEqual(metacard.get_attribute(mc.IMAGE_ID), 'IMAGE1')
        self.assertIs(metacard.metacard_type, mc.NITF_METACARD)

    def test_transform_without_images(self):
        structure = make_structure()
        metacard = NITFInputTransformer().transform(structure)
        self.assertIsNone(metacard.location)
        self.assertIsNone(metacard.id)
        self.assertIn('<fileTitle>TEST</fileTitle>', metacard.metadata)

    def test_envelope_policy(self):
        segments = [
            make_image_segment(),
            make_image_segment(identifier='IMAGE2', corners=None, representation='D')]
        metacard = NITFInputTransformer(footprint_policy='envelope').transform(make_structure(image_segments=segments))
        self.assertEqual(metacard.location, 'POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))')

    def test_multipolygon_policy(self):
        segments = [make_image_segment(), make_image_segment(identifier='IMAGE2')]
        metacard = NITFInputTransformer().transform(make_structure(image_segments=segments))
        self.assertTrue(metacard.location.startswith('MULTIPOLYGON ((('))

    def test_transform_file(self):
        structure = make_structure()
        transformer_module.read_nitf_structure = lambda file_object: structure
        metacard = NITFInputTransformer().transform_file(
            'some.ntf', metacard_id='some', processing_time=datetime(2022, 1, 1))
        self.assertEqual(metacard.id, 'some')
        self.assertEqual(metacard.title, 'TEST')

    def test_transform_file_parse_failure(self):
        def fail(file_object):
            raise SarpyIOError('not a nitf file')

        transformer_module.read_nitf_structure = fail
        with self.assertRaises(CatalogTransformerError) as context:
            NITFInputTransformer().transform_file('bad.ntf')
        self.assertIsInstance(context.exception.__cause__, SarpyIOError)
        self.assertIn('not a nitf file', str(context.exception))

    def test_transform_missing_file(self):
        def fail(file_object):
            raise FileNotFoundError(file_object)

        transformer_module.read_nitf_structure = fail
        with self.assertRaises(CatalogTransformerError):
            NITFInputTransformer().transform_file('missing.ntf')
