"""
Serialization of tagged record extension trees into the metadata XML.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

from typing import List

from nitf_transformer.structure import TreNode
from .xml_writer import indent, escape_attribute

# work item kinds for the traversal stack
_ENTRY = 0
_LINE = 1


def serialize_tre(lines, tre, level=1):
    """
    Append the XML for the given TRE. The entries are written one indent level
    deeper than the `tre` element, and every repeated group nests two levels
    deeper than its owning entry. Trees of any depth are handled, since the
    traversal maintains its own stack.

    Parameters
    ----------
    lines : List[str]
    tre : TreNode
    level : int
        The indent level of the `tre` element.

    Returns
    -------
    None
    """

    lines.append('{}<tre name="{}">\n'.format(indent(level), escape_attribute(tre.name.strip())))
    stack = [(_LINE, '</tre>', level), ]
    stack.extend((_ENTRY, entry, level + 1) for entry in reversed(tre.entries))
    while len(stack) > 0:
        kind, item, the_level = stack.pop()
        if kind == _LINE:
            lines.append('{}{}\n'.format(indent(the_level), item))
            continue

        if item.value is not None:
            lines.append('{}<field name="{}" value="{}" />\n'.format(
                indent(the_level), escape_attribute(item.name), escape_attribute(item.value)))
        if len(item.groups) > 0:
            lines.append('{}<repeated name="{}" number="{}">\n'.format(
                indent(the_level), escape_attribute(item.name), len(item.groups)))
            stack.append((_LINE, '</repeated>', the_level))
            for index in range(len(item.groups) - 1, -1, -1):
                group = item.groups[index]
                stack.append((_LINE, '</group>', the_level + 1))
                stack.extend((_ENTRY, entry, the_level + 2) for entry in reversed(group.entries))
                stack.append((_LINE, '<group index="{}">'.format(index), the_level + 1))


def tre_to_xml(tre, level=1):
    # type: (TreNode, int) -> str
    """
    Gets the XML string for a single TRE.
    """

    lines = []
    serialize_tre(lines, tre, level=level)
    return ''.join(lines)
