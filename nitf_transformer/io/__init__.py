"""
Parsing collaborators, which produce the NITF structure model from files.
"""

__classification__ = "UNCLASSIFIED"
