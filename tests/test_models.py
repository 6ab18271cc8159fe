"""Tests for Pydantic models"""

import pytest
from pydantic import ValidationError

from brokentimeline.models import (
    StoryInputs,
    StorySegment,
    TemporalLayer,
    LAYER_DISPLAY,
    ComposedStory,
)


def test_story_inputs_defaults():
    """Test StoryInputs defaults"""
    inputs = StoryInputs()

    assert inputs.title == "Sinos de Pedra Fria"
    assert inputs.protagonist == "Helena"
    assert inputs.confidant == "Davi"
    assert inputs.ambiguous_figure == "Irmã Celina"
    assert inputs.setting == "o mosteiro suspenso sobre a serra"
    assert inputs.chaos_trigger == "os sinos que tocam sozinhos"
    assert inputs.spiritual_symbol == "véu azul"
    assert inputs.hidden_guilt == "abandonar Clara no portão"


def test_story_inputs_has_eight_fields_in_form_order():
    assert StoryInputs.field_names() == [
        "title",
        "protagonist",
        "confidant",
        "ambiguous_figure",
        "setting",
        "chaos_trigger",
        "spiritual_symbol",
        "hidden_guilt",
    ]
    assert StoryInputs.field_label("ambiguous_figure") == "Figura ambígua"


def test_story_inputs_accepts_original_keys():
    """Test the original form's keys are accepted as aliases"""
    inputs = StoryInputs(
        protagonista="Ana",
        antagonista="Padre Tomás",
        gatilhoCaos="a água benta que ferve",
    )

    assert inputs.protagonist == "Ana"
    assert inputs.ambiguous_figure == "Padre Tomás"
    assert inputs.chaos_trigger == "a água benta que ferve"


def test_story_inputs_is_frozen():
    inputs = StoryInputs()

    with pytest.raises(ValidationError):
        inputs.protagonist = "Ana"


def test_with_field_returns_new_record():
    original = StoryInputs()
    edited = original.with_field("protagonist", "Ana")

    assert edited.protagonist == "Ana"
    assert original.protagonist == "Helena"
    assert edited.title == original.title


def test_with_fields_resolves_aliases():
    edited = StoryInputs().with_fields({"confidente": "Marta", "setting": "a capela"})

    assert edited.confidant == "Marta"
    assert edited.setting == "a capela"


def test_with_field_rejects_unknown_field():
    with pytest.raises(ValueError):
        StoryInputs().with_field("villain", "Ninguém")


def test_story_inputs_rejects_non_string():
    with pytest.raises(ValidationError):
        StoryInputs(title=42)

    with pytest.raises(ValidationError):
        StoryInputs().with_field("title", None)


def test_empty_strings_are_valid():
    inputs = StoryInputs(title="", protagonist="")

    assert inputs.title == ""
    assert inputs.protagonist == ""


def test_story_segment():
    """Test StorySegment model"""
    segment = StorySegment(
        id="presente-ruptura",
        layer=TemporalLayer.PRESENT,
        title="Abertura",
        body="Texto"
    )

    assert segment.layer == TemporalLayer.PRESENT
    assert segment.label == "Camada A · Presente"


def test_layer_display_covers_every_layer():
    assert set(LAYER_DISPLAY) == set(TemporalLayer)
    assert LAYER_DISPLAY[TemporalLayer.RECENT_PAST].label == "Camada B · Passado Recente"
    assert LAYER_DISPLAY[TemporalLayer.DISTANT_PAST].label == "Camada C · Passado Distante"


def test_composed_story_serializes():
    """Test ComposedStory model"""
    story = ComposedStory(inputs=StoryInputs(), full_text="Título: Sinos de Pedra Fria")
    data = story.model_dump()

    assert data["inputs"]["protagonist"] == "Helena"
    assert data["segments"] == []
    assert data["full_text"] == "Título: Sinos de Pedra Fria"
