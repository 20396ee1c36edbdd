"""
Module containing the tagged record extension (TRE) tree definitions - really
intended as read only objects.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from collections import OrderedDict
from typing import Union, List, Tuple, Optional

logger = logging.getLogger(__name__)


def _scalar_string(value):
    """
    Render a scalar TRE value as a string.

    Parameters
    ----------
    value : str|int|float|bytes

    Returns
    -------
    str
    """

    if isinstance(value, str):
        return value
    elif isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    elif isinstance(value, (int, float)):
        return str(value)
    else:
        raise TypeError('Got unhandled TRE scalar type {}'.format(type(value)))


class TreEntry(object):
    """
    A single TRE entry. This has a name, and a scalar value and/or a collection
    of repeated groups.
    """

    __slots__ = ('_name', '_value', '_groups')

    def __init__(self, name, value=None, groups=None):
        """

        Parameters
        ----------
        name : str
        value : None|str|int|float|bytes
        groups : None|List[TreGroup]|Tuple[TreGroup, ...]
        """

        if not isinstance(name, str):
            raise TypeError('TRE entry name must be a string, got type {}'.format(type(name)))
        self._name = name
        self._value = None if value is None else _scalar_string(value)
        if groups is None:
            groups = ()
        for i, group in enumerate(groups):
            if not isinstance(group, TreGroup):
                raise TypeError(
                    'Group {} of TRE entry {} must be of type TreGroup. '
                    'Got {}'.format(i, name, type(group)))
        self._groups = tuple(groups)

    @property
    def name(self):
        # type: () -> str
        """
        str: The entry name.
        """

        return self._name

    @property
    def value(self):
        # type: () -> Optional[str]
        """
        None|str: The scalar value, if this entry carries one.
        """

        return self._value

    @property
    def groups(self):
        # type: () -> Tuple[TreGroup, ...]
        """
        Tuple[TreGroup, ...]: The repeated groups, possibly empty.
        """

        return self._groups

    def to_dict(self):
        out = OrderedDict([('name', self._name)])
        if self._value is not None:
            out['value'] = self._value
        if len(self._groups) > 0:
            out['groups'] = [group.to_dict() for group in self._groups]
        return out

    def __repr__(self):
        return '{}(**{})'.format(self.__class__.__name__, dict(self.to_dict()))


class TreGroup(object):
    """
    One iteration of a repeated TRE construct, containing its own ordered entries.
    """

    __slots__ = ('_entries', )

    def __init__(self, entries=None):
        """

        Parameters
        ----------
        entries : None|List[TreEntry]|Tuple[TreEntry, ...]
        """

        if entries is None:
            entries = ()
        for i, entry in enumerate(entries):
            if not isinstance(entry, TreEntry):
                raise TypeError('Entry {} must be of type TreEntry. Got {}'.format(i, type(entry)))
        self._entries = tuple(entries)

    @property
    def entries(self):
        # type: () -> Tuple[TreEntry, ...]
        """
        Tuple[TreEntry, ...]: The ordered entries.
        """

        return self._entries

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, item):  # type: (Union[int, slice]) -> Union[TreEntry, Tuple[TreEntry, ...]]
        return self._entries[item]

    def to_dict(self):
        return [entry.to_dict() for entry in self._entries]

    def __repr__(self):
        return '{}(entries={})'.format(self.__class__.__name__, self.to_dict())


class TreNode(TreGroup):
    """
    A named tagged record extension, the root of a TRE tree.
    """

    __slots__ = ('_name', )

    def __init__(self, name, entries=None):
        """

        Parameters
        ----------
        name : str
            The TRE tag. This is kept as given, trailing padding included.
        entries : None|List[TreEntry]|Tuple[TreEntry, ...]
        """

        if not isinstance(name, str):
            raise TypeError('TRE name must be a string, got type {}'.format(type(name)))
        self._name = name
        super(TreNode, self).__init__(entries=entries)

    @property
    def name(self):
        # type: () -> str
        """
        str: The TRE tag.
        """

        return self._name

    @classmethod
    def from_dict(cls, name, the_dict):
        """
        Construct the TRE tree from a (nested) dictionary, as produced by the
        `to_dict()` method of parsed TRE elements. Scalar values become fields,
        lists become repeated groups (one group per list item), and nested
        dictionaries become a repeated construct with a single group.

        Parameters
        ----------
        name : str
        the_dict : dict

        Returns
        -------
        TreNode
        """

        return cls(name, entries=_entries_from_dict(the_dict))

    def to_dict(self):
        return OrderedDict([('name', self._name), ('entries', super(TreNode, self).to_dict())])

    def __repr__(self):
        return '{}(name={!r}, entries={})'.format(self.__class__.__name__, self._name, TreGroup.to_dict(self))


def _group_from_value(name, value):
    # type: (str, object) -> TreGroup
    if isinstance(value, dict):
        return TreGroup(_entries_from_dict(value))
    return TreGroup([TreEntry(name, value=value), ])


def _entries_from_dict(the_dict):
    # type: (dict) -> List[TreEntry]
    entries = []
    for fld, value in the_dict.items():
        if value is None:
            logger.debug('Skipping unpopulated TRE field {}'.format(fld))
            continue
        if isinstance(value, dict):
            entries.append(TreEntry(fld, groups=[_group_from_value(fld, value), ]))
        elif isinstance(value, (list, tuple)):
            entries.append(TreEntry(fld, groups=[_group_from_value(fld, entry) for entry in value]))
        else:
            entries.append(TreEntry(fld, value=value))
    return entries
