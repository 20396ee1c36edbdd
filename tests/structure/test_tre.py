from collections import OrderedDict

import pytest

from nitf_transformer.structure import TreNode, TreEntry, TreGroup


def test_entry_value_and_groups():
    group = TreGroup([TreEntry('inner', value=5), ])
    entry = TreEntry('outer', value=b'bytes', groups=[group, ])
    assert entry.value == 'bytes'
    assert entry.groups == (group, )
    assert group[0].value == '5'
    assert len(group) == 1

    with pytest.raises(TypeError):
        TreEntry('bad', groups=['not a group', ])
    with pytest.raises(TypeError):
        TreGroup(['not an entry', ])
    with pytest.raises(TypeError):
        TreEntry(1)


def test_node_keeps_padded_name():
    node = TreNode('ACFTB ', entries=[TreEntry('alt', value='1000'), ])
    assert node.name == 'ACFTB '
    assert node.entries[0].name == 'alt'
    assert node.to_dict()['entries'] == [OrderedDict([('name', 'alt'), ('value', '1000')]), ]


def test_from_dict():
    the_dict = OrderedDict([
        ('COUNT', 2),
        ('UNSET', None),
        ('POINTs', [OrderedDict([('X', 1), ('Y', 2)]), OrderedDict([('X', 3), ('Y', 4)])]),
        ('VALUES', ['a', 'b', 'c']),
        ('NESTED', OrderedDict([('INNER', 'z')]))])
    node = TreNode.from_dict('TEST', the_dict)

    names = [entry.name for entry in node.entries]
    assert names == ['COUNT', 'POINTs', 'VALUES', 'NESTED']

    count, points, values, nested = node.entries
    assert count.value == '2'
    assert count.groups == ()

    assert points.value is None
    assert len(points.groups) == 2
    assert [entry.name for entry in points.groups[1].entries] == ['X', 'Y']
    assert points.groups[1].entries[0].value == '3'

    assert len(values.groups) == 3
    assert values.groups[2].entries[0].name == 'VALUES'
    assert values.groups[2].entries[0].value == 'c'

    assert len(nested.groups) == 1
    assert nested.groups[0].entries[0].value == 'z'


def test_unhandled_scalar():
    with pytest.raises(TypeError):
        TreEntry('bad', value=object())
