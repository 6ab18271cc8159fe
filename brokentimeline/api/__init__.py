"""Composition entry points"""

from .composition import build_inputs, compose_story

__all__ = [
    "build_inputs",
    "compose_story",
]
