"""
Single entry point for story composition.

Used by the CLI. Inputs are built from the record defaults, then the
``defaults`` section of config, then explicit overrides. Stateless: the
returned story is derived entirely from those three layers.
"""

import logging
from typing import Optional, Dict, Any

from brokentimeline.models import StoryInputs, ComposedStory
from brokentimeline.composer import StoryDraft

logger = logging.getLogger(__name__)


def build_inputs(
    config: Optional[Dict[str, Any]] = None,
    overrides: Optional[Dict[str, Optional[str]]] = None
) -> StoryInputs:
    """
    Build a story input record

    Args:
        config: Loaded configuration (may be empty)
        overrides: Field values taking precedence over config; None values are ignored

    Returns:
        StoryInputs record

    Raises:
        ValueError: If config or overrides name an unknown field
    """
    config = config or {}
    inputs = StoryInputs()

    config_defaults = config.get("defaults") or {}
    if not isinstance(config_defaults, dict):
        raise ValueError(f"Config 'defaults' must be a mapping of field names, got {type(config_defaults).__name__}")
    if config_defaults:
        logger.info(f"Applying config defaults for {sorted(config_defaults)}")
        inputs = inputs.with_fields(config_defaults)

    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    if explicit:
        inputs = inputs.with_fields(explicit)

    return inputs


def compose_story(
    config: Optional[Dict[str, Any]] = None,
    overrides: Optional[Dict[str, Optional[str]]] = None
) -> ComposedStory:
    """Build inputs and compose the full story from them"""
    draft = StoryDraft(build_inputs(config, overrides))
    return draft.compose()
