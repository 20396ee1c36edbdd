"""
Geometry elements and footprint construction.
"""

__classification__ = "UNCLASSIFIED"
