"""Segment and temporal layer models"""

from enum import Enum
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field


class TemporalLayer(str, Enum):
    """Narrative timeframe of a segment"""
    PRESENT = "A"
    RECENT_PAST = "B"
    DISTANT_PAST = "C"


class LayerDisplay(BaseModel):
    """Display metadata for a temporal layer"""
    model_config = ConfigDict(frozen=True)

    label: str
    color: str = Field(..., description="Rich colour used for the segment border")


LAYER_DISPLAY: Dict[TemporalLayer, LayerDisplay] = {
    TemporalLayer.PRESENT: LayerDisplay(label="Camada A · Presente", color="green"),
    TemporalLayer.RECENT_PAST: LayerDisplay(label="Camada B · Passado Recente", color="yellow"),
    TemporalLayer.DISTANT_PAST: LayerDisplay(label="Camada C · Passado Distante", color="blue"),
}


class StorySegment(BaseModel):
    """One titled block of generated text"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Stable ordering key")
    layer: TemporalLayer = Field(..., description="Temporal layer of the segment")
    title: str = Field(..., description="Generated segment title")
    body: str = Field(..., description="Generated segment text")

    @property
    def label(self) -> str:
        return LAYER_DISPLAY[self.layer].label
