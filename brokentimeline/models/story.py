"""Composed story container"""

from typing import List
from pydantic import BaseModel, Field

from .inputs import StoryInputs
from .segment import StorySegment


class ComposedStory(BaseModel):
    """Inputs together with everything derived from them"""
    inputs: StoryInputs
    segments: List[StorySegment] = Field(default_factory=list)
    full_text: str = Field(default="", description="Flat text for copy and export")
