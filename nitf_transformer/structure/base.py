"""
Base structure model functionality definition. These are the reusable
descriptors used to declare the fields of the read-only NITF structure model
handed over by the parsing collaborator.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"

import logging
from collections import OrderedDict
from datetime import date, datetime
from weakref import WeakKeyDictionary

from nitf_transformer.errors import MissingFieldError

logger = logging.getLogger(__name__)

DATE_TIME_FORMAT = '%Y%m%d%H%M%S'
"""
The NITF `CCYYMMDDhhmmss` date and time format.
"""


# Basic input interpreters

def _parse_str(val, name, instance):
    """
    Parse the string input.

    Parameters
    ----------
    val : str|bytes|int|float
    name : str
    instance : object

    Returns
    -------
    str
    """

    if isinstance(val, bytes):
        val = val.decode('utf-8', errors='replace')
    elif isinstance(val, bool):
        raise TypeError(
            'Attribute {} of class {} requires a string value, '
            'got a boolean'.format(name, instance.__class__.__name__))
    elif not isinstance(val, str):
        val = str(val)
    return val.rstrip()


def _parse_int(val, name, instance):
    """
    Parse the integer input.

    Parameters
    ----------
    val : int|str|bytes
    name : str
    instance : object

    Returns
    -------
    int
    """

    if isinstance(val, bool):
        raise TypeError(
            'Attribute {} of class {} requires an integer value, '
            'got a boolean'.format(name, instance.__class__.__name__))
    try:
        return int(val)
    except ValueError:
        raise ValueError(
            'Attribute {} of class {} requires an integer value, '
            'got {!r}'.format(name, instance.__class__.__name__, val))


def _parse_datetime(val, name, instance):
    """
    Parse the date time input.

    Parameters
    ----------
    val : datetime|date|str|bytes
    name : str
    instance : object

    Returns
    -------
    datetime
    """

    if isinstance(val, datetime):
        return val
    elif isinstance(val, date):
        return datetime(val.year, val.month, val.day)
    elif isinstance(val, bytes):
        val = val.decode('utf-8')

    if isinstance(val, str):
        try:
            return datetime.strptime(val.strip(), DATE_TIME_FORMAT)
        except ValueError:
            raise ValueError(
                'Attribute {} of class {} got date time string {!r}, which does '
                'not match the format {}'.format(name, instance.__class__.__name__, val, DATE_TIME_FORMAT))
    raise TypeError(
        'Attribute {} of class {} requires a datetime, '
        'got type {}'.format(name, instance.__class__.__name__, type(val)))


# Structure descriptors

class _BasicDescriptor(object):
    """A descriptor object for reusable properties. Note that is is required that the calling instance is hashable."""
    _typ_string = None

    def __init__(self, name, required, docstring=''):
        self.data = WeakKeyDictionary()  # our instance reference dictionary
        self.name = name
        self.required = required

        self.__doc__ = docstring
        self._format_docstring()

    def _format_docstring(self):
        docstring = self.__doc__
        if docstring is None:
            docstring = ''
        if (self._typ_string is not None) and (not docstring.startswith(self._typ_string)):
            docstring = '{} {}'.format(self._typ_string, docstring)

        suff = self._docstring_suffix()
        if suff is not None:
            docstring = '{} {}'.format(docstring, suff)

        if not self.required:
            docstring = '{} {}'.format(docstring, ' **Optional.**')
        self.__doc__ = docstring

    def _docstring_suffix(self):
        return None

    def _get_default(self, instance):
        return None

    def __get__(self, instance, owner):
        """The getter.

        Parameters
        ----------
        instance : object
            the calling class instance
        owner : object
            the type of the class - that is, the actual object to which this descriptor is assigned

        Returns
        -------
        object
            the return value
        """

        if instance is None:
            # this has been access on the class, so return the class
            return self

        fetched = self.data.get(instance, None)
        if fetched is not None or not self.required:
            return fetched
        raise MissingFieldError(self.name, instance.__class__.__name__)

    def __set__(self, instance, value):
        """The setter method.

        Parameters
        ----------
        instance : object
            the calling class instance
        value
            the value to use in setting - the type depends of the specific extension of this base class

        Returns
        -------
        bool
            This returns True if this the setting value was None (and has been handled), and False otherwise.
        """

        if value is None:
            default_value = self._get_default(instance)
            if default_value is not None:
                self.data[instance] = default_value
                return True
            elif self.required:
                raise MissingFieldError(self.name, instance.__class__.__name__)
            self.data[instance] = None
            return True
        return False


class _StringDescriptor(_BasicDescriptor):
    """A descriptor for string type"""
    _typ_string = 'str:'

    def __init__(self, name, required, default_value=None, docstring=None):
        self._default_value = default_value
        super(_StringDescriptor, self).__init__(name, required, docstring=docstring)

    def _get_default(self, instance):
        return self._default_value

    def _docstring_suffix(self):
        if self._default_value is not None and len(self._default_value) > 0:
            return ' Default value is :code:`{}`.'.format(self._default_value)

    def __set__(self, instance, value):
        if super(_StringDescriptor, self).__set__(instance, value):
            return
        self.data[instance] = _parse_str(value, self.name, instance)


class _IntegerDescriptor(_BasicDescriptor):
    """A descriptor for integer type"""
    _typ_string = 'int:'

    def __init__(self, name, required, default_value=None, docstring=None):
        self._default_value = default_value
        super(_IntegerDescriptor, self).__init__(name, required, docstring=docstring)

    def _get_default(self, instance):
        return self._default_value

    def _docstring_suffix(self):
        if self._default_value is not None:
            return ' Default value is :code:`{}`.'.format(self._default_value)

    def __set__(self, instance, value):
        if super(_IntegerDescriptor, self).__set__(instance, value):
            return
        self.data[instance] = _parse_int(value, self.name, instance)


class _FloatDescriptor(_BasicDescriptor):
    """A descriptor for float type"""
    _typ_string = 'float:'

    def __set__(self, instance, value):
        if super(_FloatDescriptor, self).__set__(instance, value):
            return
        if isinstance(value, bool):
            raise TypeError(
                'Attribute {} of class {} requires a float value, '
                'got a boolean'.format(self.name, instance.__class__.__name__))
        self.data[instance] = float(value)


class _DateTimeDescriptor(_BasicDescriptor):
    """A descriptor for date time type, parsed from the NITF `CCYYMMDDhhmmss` format if necessary"""
    _typ_string = 'datetime:'

    def __set__(self, instance, value):
        if super(_DateTimeDescriptor, self).__set__(instance, value):
            return
        self.data[instance] = _parse_datetime(value, self.name, instance)


class _ElementDescriptor(_BasicDescriptor):
    """A descriptor for properties of a specified type assumed to be an extension of StructureElement"""

    def __init__(self, name, required, the_type, default_args=None, docstring=None):
        self.the_type = the_type
        self._typ_string = the_type.__name__ + ':'
        self._default_args = default_args
        super(_ElementDescriptor, self).__init__(name, required, docstring=docstring)

    def _get_default(self, instance):
        if self._default_args is not None:
            return self.the_type(**self._default_args)
        return None

    def __set__(self, instance, value):
        if super(_ElementDescriptor, self).__set__(instance, value):
            return

        if isinstance(value, self.the_type):
            self.data[instance] = value
        elif isinstance(value, dict):
            self.data[instance] = self.the_type(**value)
        else:
            raise TypeError(
                'Attribute {} of class {} requires an input of type dict or {}. '
                'Got {}'.format(self.name, instance.__class__.__name__, self.the_type.__name__, type(value)))


class _ElementListDescriptor(_BasicDescriptor):
    """A descriptor for an ordered collection of a specified type. This is stored as a tuple, and is never `None`."""

    def __init__(self, name, child_type, docstring=None):
        self.child_type = child_type
        self._typ_string = 'Tuple[{}]:'.format(child_type.__name__)
        super(_ElementListDescriptor, self).__init__(name, False, docstring=docstring)

    def _get_default(self, instance):
        return ()

    def __set__(self, instance, value):
        if super(_ElementListDescriptor, self).__set__(instance, value):
            return

        if not isinstance(value, (list, tuple)):
            raise TypeError(
                'Attribute {} of class {} requires a list or tuple, '
                'got type {}'.format(self.name, instance.__class__.__name__, type(value)))
        entries = []
        for i, entry in enumerate(value):
            if isinstance(entry, self.child_type):
                entries.append(entry)
            elif isinstance(entry, dict):
                entries.append(self.child_type(**entry))
            else:
                raise TypeError(
                    'Entry {} of attribute {} of class {} must be of type {}. '
                    'Got {}'.format(i, self.name, instance.__class__.__name__, self.child_type.__name__, type(entry)))
        self.data[instance] = tuple(entries)


class _StringListDescriptor(_BasicDescriptor):
    """A descriptor for an ordered collection of strings. This is stored as a tuple, and is never `None`."""
    _typ_string = 'Tuple[str]:'

    def __init__(self, name, docstring=None):
        super(_StringListDescriptor, self).__init__(name, False, docstring=docstring)

    def _get_default(self, instance):
        return ()

    def __set__(self, instance, value):
        if super(_StringListDescriptor, self).__set__(instance, value):
            return

        if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
            raise TypeError(
                'Attribute {} of class {} requires a list or tuple of strings, '
                'got type {}'.format(self.name, instance.__class__.__name__, type(value)))
        self.data[instance] = tuple(_parse_str(entry, self.name, instance) for entry in value)


# Concrete structure element type

class StructureElement(object):
    """
    Base class for the read-only structure model elements. Extensions declare
    their fields as class level descriptors, and list the field names in
    `_ordering`.
    """

    _ordering = ()

    def __init__(self, **kwargs):
        unexpected = [key for key in kwargs if key not in self._ordering]
        if len(unexpected) > 0:
            raise TypeError(
                'Class {} got unexpected field(s) {}'.format(self.__class__.__name__, unexpected))

        for fld in self._ordering:
            try:
                setattr(self, fld, kwargs.get(fld, None))
            except Exception:
                logger.error('Failed setting attribute {} for class {}'.format(fld, self.__class__.__name__))
                raise

    def to_dict(self):
        """
        Create a dictionary representation of the element.

        Returns
        -------
        OrderedDict
        """

        out = OrderedDict()
        for fld in self._ordering:
            value = getattr(self, fld)
            if isinstance(value, StructureElement):
                out[fld] = value.to_dict()
            elif isinstance(value, tuple):
                out[fld] = [entry.to_dict() if hasattr(entry, 'to_dict') else entry for entry in value]
            else:
                out[fld] = value
        return out

    def __repr__(self):
        return '{}(**{})'.format(self.__class__.__name__, dict(self.to_dict()))
