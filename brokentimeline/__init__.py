"""Broken-timeline story composer"""

__version__ = "0.1.0"
