"""
Rendering of the NITF metadata XML document.
"""

__classification__ = "UNCLASSIFIED"
