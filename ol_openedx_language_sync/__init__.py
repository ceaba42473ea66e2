"""
Language administration and gettext PO synchronization for Django sites.
"""

__version__ = "0.1.0"
