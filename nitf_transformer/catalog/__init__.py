"""
The catalog metacard model, and the projection of NITF structures into it.
"""

__classification__ = "UNCLASSIFIED"
