"""In-memory draft of the story being edited"""

import logging
from typing import List, Optional

from brokentimeline.models import StoryInputs, StorySegment, ComposedStory
from brokentimeline.export.clipboard import copy_to_clipboard
from .generator import generate_story, compose_full_text

logger = logging.getLogger(__name__)


class StoryDraft:
    """
    Owns the single input record of an editing session.

    Every edit replaces the record wholesale. Segments and full text are
    recomputed from the current record on each access.
    """

    def __init__(self, inputs: Optional[StoryInputs] = None):
        self.inputs = inputs or StoryInputs()
        self.copied = False

    def set_field(self, name: str, value: str) -> StoryInputs:
        """Replace one field and return the new record"""
        self.replace(self.inputs.with_field(name, value))
        logger.debug(f"Field {name} updated")
        return self.inputs

    def replace(self, inputs: StoryInputs):
        self.inputs = inputs
        self.copied = False

    @property
    def segments(self) -> List[StorySegment]:
        return generate_story(self.inputs)

    @property
    def full_text(self) -> str:
        return compose_full_text(self.inputs, self.segments)

    def compose(self) -> ComposedStory:
        segments = generate_story(self.inputs)
        return ComposedStory(
            inputs=self.inputs,
            segments=segments,
            full_text=compose_full_text(self.inputs, segments)
        )

    def copy_to_clipboard(self) -> bool:
        """Copy the full text; ``copied`` reflects the outcome"""
        self.copied = copy_to_clipboard(self.full_text)
        return self.copied
