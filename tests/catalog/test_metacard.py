import unittest
from datetime import datetime

from nitf_transformer.catalog import metacard as mc


class TestAttributeType(unittest.TestCase):
    def test_integer_bounds(self):
        self.assertTrue(mc.INTEGER.is_valid(2**31 - 1))
        self.assertFalse(mc.INTEGER.is_valid(2**31))
        self.assertTrue(mc.LONG.is_valid(2**31))
        self.assertFalse(mc.LONG.is_valid(2**63))

    def test_rejects_boolean(self):
        self.assertFalse(mc.INTEGER.is_valid(True))

    def test_string(self):
        self.assertTrue(mc.STRING.is_valid('value'))
        self.assertFalse(mc.STRING.is_valid(1))


class TestMetacardType(unittest.TestCase):
    def test_nitf_contains_basic(self):
        for descriptor in mc.BASIC_DESCRIPTORS:
            self.assertIn(descriptor.name, mc.NITF_METACARD)
        self.assertEqual(len(mc.NITF_METACARD), len(mc.BASIC_DESCRIPTORS) + len(mc.NITF_DESCRIPTORS))

    def test_nitf_descriptors_multivalued(self):
        for descriptor in mc.NITF_DESCRIPTORS:
            self.assertTrue(descriptor.multivalued)
            self.assertTrue(descriptor.indexed)
            self.assertTrue(descriptor.stored)
            self.assertFalse(descriptor.tokenized)

    def test_declared_types(self):
        self.assertIs(mc.NITF_METACARD.get_descriptor(mc.COMPLEXITY_LEVEL).attribute_type, mc.STRING)
        self.assertIs(mc.NITF_METACARD.get_descriptor(mc.FILE_SIZE).attribute_type, mc.LONG)
        self.assertIs(mc.NITF_METACARD.get_descriptor(mc.CLASSIFICATION_DATE).attribute_type, mc.DATE)
        self.assertIs(mc.NITF_METACARD.get_descriptor(mc.GEOGRAPHY).attribute_type, mc.GEOMETRY)

    def test_unknown_descriptor(self):
        with self.assertRaises(KeyError):
            mc.NITF_METACARD.get_descriptor('noSuchAttribute')

    def test_duplicate_descriptor(self):
        with self.assertRaises(ValueError):
            mc.MetacardType('dupes', [mc.AttributeDescriptor('a', mc.STRING), mc.AttributeDescriptor('a', mc.LONG)])


class TestMetacard(unittest.TestCase):
    def test_set_and_get(self):
        metacard = mc.Metacard(mc.NITF_METACARD)
        metacard.set_attribute(mc.FILE_TITLE, 'title')
        metacard.id = 'abc'
        self.assertEqual(metacard.get_attribute(mc.FILE_TITLE), 'title')
        self.assertEqual(metacard.id, 'abc')
        self.assertEqual(list(metacard.attributes.keys()), [mc.FILE_TITLE, mc.ID])

    def test_none_removes(self):
        metacard = mc.Metacard(mc.NITF_METACARD)
        metacard.title = 'title'
        metacard.title = None
        self.assertNotIn(mc.TITLE, metacard)
        self.assertIsNone(metacard.title)
        self.assertEqual(metacard.get_attribute(mc.TITLE, 'fallback'), 'fallback')

    def test_unknown_attribute(self):
        metacard = mc.Metacard()
        with self.assertRaises(KeyError):
            metacard.set_attribute(mc.FILE_TITLE, 'title')
        with self.assertRaises(KeyError):
            metacard.get_attribute(mc.FILE_TITLE)

    def test_wrong_type(self):
        metacard = mc.Metacard(mc.NITF_METACARD)
        with self.assertRaises(TypeError):
            metacard.set_attribute(mc.NUMBER_OF_ROWS, '1024')
        with self.assertRaises(TypeError):
            metacard.created = '2020-01-01'
        with self.assertRaises(TypeError):
            metacard.set_attribute(mc.NUMBER_OF_BANDS, 2**40)

    def test_dates(self):
        metacard = mc.Metacard()
        the_date = datetime(2021, 5, 6)
        metacard.created = the_date
        metacard.modified = the_date
        metacard.effective = the_date
        self.assertEqual(metacard.created, the_date)
        self.assertEqual(metacard.modified, the_date)
        self.assertEqual(metacard.effective, the_date)

    def test_attributes_is_copy(self):
        metacard = mc.Metacard()
        metacard.title = 'title'
        attributes = metacard.attributes
        attributes['title'] = 'changed'
        self.assertEqual(metacard.title, 'title')

    def test_bad_type(self):
        with self.assertRaises(TypeError):
            mc.Metacard('nitf')
