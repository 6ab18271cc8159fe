"""Pydantic schemas for the story composer"""

from .inputs import StoryInputs
from .segment import TemporalLayer, LayerDisplay, LAYER_DISPLAY, StorySegment
from .story import ComposedStory

__all__ = [
    # Input
    "StoryInputs",
    # Segments
    "TemporalLayer",
    "LayerDisplay",
    "LAYER_DISPLAY",
    "StorySegment",
    # Story
    "ComposedStory",
]
