"""Story composition"""

from .templates import SegmentTemplate, STORY_SCRIPT
from .generator import generate_story, compose_full_text
from .session import StoryDraft

__all__ = [
    "SegmentTemplate",
    "STORY_SCRIPT",
    "generate_story",
    "compose_full_text",
    "StoryDraft",
]
