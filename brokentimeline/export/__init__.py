"""Story export"""

from .clipboard import copy_to_clipboard
from .story import StoryExporter, FORMATS

__all__ = [
    "copy_to_clipboard",
    "StoryExporter",
    "FORMATS",
]
