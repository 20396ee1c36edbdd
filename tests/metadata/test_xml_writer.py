import unittest
from datetime import datetime, timezone

from nitf_transformer.errors import MissingFieldError
from nitf_transformer.metadata.xml_writer import escape_attribute, escape_text, format_value, \
    add_labeled_element, add_optional_element, indent


class TestXmlWriter(unittest.TestCase):
    def test_escaping(self):
        self.assertEqual(escape_text('a < b & c > d'), 'a &lt; b &amp; c &gt; d')
        self.assertEqual(escape_text('"quoted"'), '"quoted"')
        self.assertEqual(escape_attribute('say "hi" & \'bye\''), 'say &quot;hi&quot; &amp; &apos;bye&apos;')

    def test_illegal_characters(self):
        self.assertEqual(escape_text('A\x00B\x1fC\tD\nE'), 'A\ufffdB\ufffdC\tD\nE')
        self.assertEqual(escape_attribute('A\x01B'), 'A\ufffdB')

    def test_attribute_whitespace(self):
        self.assertEqual(escape_attribute('a\tb\nc\rd'), 'a&#9;b&#10;c&#13;d')

    def test_format_value(self):
        self.assertEqual(format_value('text'), 'text')
        self.assertEqual(format_value(42), '42')
        self.assertEqual(format_value(datetime(2020, 1, 2, 3, 4, 5)), '2020-01-02T03:04:05')
        self.assertEqual(
            format_value(datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)), '2020-01-02T03:04:05+00:00')
        with self.assertRaises(TypeError):
            format_value(True)
        with self.assertRaises(TypeError):
            format_value([1, 2])

    def test_labeled_element(self):
        lines = []
        add_labeled_element(lines, 'fileTitle', 'A & B', 2)
        add_labeled_element(lines, 'complexityLevel', 3, 1)
        self.assertEqual(lines, ['    <fileTitle>A &amp; B</fileTitle>\n', '  <complexityLevel>3</complexityLevel>\n'])

    def test_labeled_element_none(self):
        lines = []
        with self.assertRaises(MissingFieldError) as context:
            add_labeled_element(lines, 'fileTitle', None, 2, owner='FileHeader')
        self.assertEqual(context.exception.field_name, 'fileTitle')
        self.assertEqual(lines, [])

    def test_optional_element(self):
        lines = []
        add_optional_element(lines, 'fileBackgroundColour', None, 2)
        self.assertEqual(lines, [])
        add_optional_element(lines, 'fileBackgroundColour', '', 2)
        self.assertEqual(lines, ['    <fileBackgroundColour></fileBackgroundColour>\n'])

    def test_indent(self):
        self.assertEqual(indent(0), '')
        self.assertEqual(indent(3), '      ')
