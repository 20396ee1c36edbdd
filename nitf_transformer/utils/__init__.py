"""
Command-line utilities.
"""

__classification__ = "UNCLASSIFIED"
