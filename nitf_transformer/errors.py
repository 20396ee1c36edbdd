"""
The exception hierarchy for the NITF transformation package.
"""

__classification__ = "UNCLASSIFIED"
__author__ = "NITF Transformer Contributors"


class NITFTransformError(Exception):
    """A custom base exception class for the nitf_transformer package."""


class MissingFieldError(NITFTransformError, ValueError):
    """
    A required field was not populated. This is raised both while constructing
    the structure model and while rendering, so a `None` value is never
    stringified into an output document.
    """

    def __init__(self, field_name, owner=None):
        """

        Parameters
        ----------
        field_name : str
            The name of the unpopulated field or element.
        owner : None|str
            The name of the class or block owning the field.
        """

        self.field_name = field_name
        self.owner = owner
        if owner is None:
            msg = 'Required field {} is not populated.'.format(field_name)
        else:
            msg = 'Required field {} of {} is not populated.'.format(field_name, owner)
        super(MissingFieldError, self).__init__(msg)


class CatalogTransformerError(NITFTransformError):
    """
    The transformation into a catalog metacard could not be performed, either
    because the input was absent or because the parser collaborator failed.
    """
