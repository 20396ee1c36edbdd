import sys
from xml.etree import ElementTree

from nitf_transformer.structure import TreNode, TreEntry, TreGroup
from nitf_transformer.metadata.tre import serialize_tre, tre_to_xml

from tests import make_nested_tre


def test_single_field():
    node = TreNode('ACFTB ', entries=[TreEntry('alt', value='1000'), ])
    assert tre_to_xml(node) == \
        '  <tre name="ACFTB">\n' \
        '    <field name="alt" value="1000" />\n' \
        '  </tre>\n'


def test_repeated_groups():
    groups = [
        TreGroup([TreEntry('X', value='1'), TreEntry('Y', value='2')]),
        TreGroup([TreEntry('X', value='3'), TreEntry('Y', value='4')])]
    node = TreNode('POINTS', entries=[TreEntry('COUNT', value='2'), TreEntry('POINT', groups=groups)])
    lines = []
    serialize_tre(lines, node, level=0)
    assert lines == [
        '<tre name="POINTS">\n',
        '  <field name="COUNT" value="2" />\n',
        '  <repeated name="POINT" number="2">\n',
        '    <group index="0">\n',
        '      <field name="X" value="1" />\n',
        '      <field name="Y" value="2" />\n',
        '    </group>\n',
        '    <group index="1">\n',
        '      <field name="X" value="3" />\n',
        '      <field name="Y" value="4" />\n',
        '    </group>\n',
        '  </repeated>\n',
        '</tre>\n']


def test_value_and_groups():
    entry = TreEntry('BOTH', value='v', groups=[TreGroup([TreEntry('INNER', value='i')]), ])
    text = tre_to_xml(TreNode('TEST', entries=[entry, ]))
    assert '<field name="BOTH" value="v" />' in text
    assert '<repeated name="BOTH" number="1">' in text
    assert text.index('<field name="BOTH"') < text.index('<repeated name="BOTH"')


def test_empty_group():
    text = tre_to_xml(TreNode('TEST', entries=[TreEntry('EMPTY', groups=[TreGroup(), ])]), level=1)
    assert text == \
        '  <tre name="TEST">\n' \
        '    <repeated name="EMPTY" number="1">\n' \
        '      <group index="0">\n' \
        '      </group>\n' \
        '    </repeated>\n' \
        '  </tre>\n'


def test_attribute_escaping():
    node = TreNode('A"B', entries=[TreEntry('name<', value='x & "y"'), ])
    text = tre_to_xml(node)
    assert '<tre name="A&quot;B">' in text
    assert '<field name="name&lt;" value="x &amp; &quot;y&quot;" />' in text


def test_control_characters_parse():
    node = TreNode('RAWTRE', entries=[TreEntry('DATA', value=b'AB\x00\x01\x1fC'), ])
    element = ElementTree.fromstring(tre_to_xml(node).strip())
    assert element.find('field').get('value') == 'AB\ufffd\ufffd\ufffdC'


def test_attribute_whitespace_round_trip():
    node = TreNode('TEXTA', entries=[TreEntry('TEXT', value='line one\nline\ttwo\r'), ])
    element = ElementTree.fromstring(tre_to_xml(node).strip())
    assert element.find('field').get('value') == 'line one\nline\ttwo\r'


def test_deep_nesting():
    depth = sys.getrecursionlimit() + 100
    text = tre_to_xml(make_nested_tre('DEEP', depth))
    assert text.count('<group index="0">') == depth
    assert text.count('</group>') == depth
    assert text.count('<repeated ') == text.count('</repeated>') == depth
    assert text.count('<field name="LEAF" value="value" />') == 1
    # the leaf sits two levels deeper for every repeated level
    leaf_line = [line for line in text.splitlines() if 'LEAF' in line][0]
    assert len(leaf_line) - len(leaf_line.lstrip(' ')) == 2*(2 + 2*depth)
    assert text.endswith('  </tre>\n')


def test_no_entries():
    assert tre_to_xml(TreNode('EMPTY'), level=2) == '    <tre name="EMPTY">\n    </tre>\n'
