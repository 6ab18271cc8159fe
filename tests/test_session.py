"""Tests for the editing draft"""

import pyperclip
import pytest

from brokentimeline.models import StoryInputs, ComposedStory
from brokentimeline.composer import StoryDraft, generate_story, compose_full_text


@pytest.fixture
def clipboard(monkeypatch):
    """Capture clipboard writes"""
    written = []
    monkeypatch.setattr(pyperclip, "copy", written.append)
    return written


def test_draft_starts_from_defaults():
    draft = StoryDraft()

    assert draft.inputs == StoryInputs()
    assert draft.copied is False


def test_set_field_replaces_record():
    draft = StoryDraft()
    before = draft.inputs

    after = draft.set_field("protagonist", "Ana")

    assert after is draft.inputs
    assert after is not before
    assert before.protagonist == "Helena"
    assert draft.inputs.protagonist == "Ana"


def test_derived_output_recomputed_after_edit():
    draft = StoryDraft()
    assert "Helena" in draft.full_text

    draft.set_field("protagonist", "Ana")

    assert "Helena" not in draft.full_text
    assert draft.segments == generate_story(draft.inputs)


def test_compose_matches_pure_functions():
    draft = StoryDraft(StoryInputs(title="Vigília"))
    story = draft.compose()

    assert isinstance(story, ComposedStory)
    assert story.inputs.title == "Vigília"
    assert story.segments == generate_story(story.inputs)
    assert story.full_text == compose_full_text(story.inputs, story.segments)


def test_copy_sets_copied_and_edit_clears_it(clipboard):
    draft = StoryDraft()

    assert draft.copy_to_clipboard() is True
    assert draft.copied is True
    assert clipboard == [draft.full_text]

    draft.set_field("setting", "a capela")
    assert draft.copied is False


def test_copy_failure_leaves_copied_false(monkeypatch):
    def fail(text):
        raise pyperclip.PyperclipException("no clipboard")

    monkeypatch.setattr(pyperclip, "copy", fail)
    draft = StoryDraft()

    assert draft.copy_to_clipboard() is False
    assert draft.copied is False


def test_set_field_unknown_name_keeps_record():
    draft = StoryDraft()

    with pytest.raises(ValueError):
        draft.set_field("villain", "x")
    assert draft.inputs == StoryInputs()
