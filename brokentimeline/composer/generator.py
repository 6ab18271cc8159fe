"""Story composition from the fixed segment script"""

import logging
from typing import List, Sequence

from brokentimeline.models import StoryInputs, StorySegment
from .templates import STORY_SCRIPT

logger = logging.getLogger(__name__)

TITLE_PREFIX = "Título: "


def generate_story(inputs: StoryInputs) -> List[StorySegment]:
    """
    Fill the segment script with the given inputs

    Args:
        inputs: Story inputs; any string (including empty) is accepted

    Returns:
        Segments in script order. Same inputs always yield equal segments.
    """
    fields = inputs.model_dump()
    segments = []
    for template in STORY_SCRIPT:
        title, body = template.render(fields)
        segments.append(StorySegment(id=template.id, layer=template.layer, title=title, body=body))

    logger.debug(f"Composed {len(segments)} segments for '{inputs.title}'")
    return segments


def compose_full_text(inputs: StoryInputs, segments: Sequence[StorySegment]) -> str:
    """Join the title line and every segment into one flat text block"""
    blocks = [f"{TITLE_PREFIX}{inputs.title}"]
    blocks.extend(f"{segment.title}\n{segment.body}" for segment in segments)
    return "\n\n".join(blocks)
