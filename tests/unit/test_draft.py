"""
Tests for Draft apply/finish orchestration.
"""

from unittest.mock import Mock, patch

import pytest

from docdraft.backend.memory import MemoryBackend
from docdraft.exceptions import DraftStateError, MediaError
from docdraft.models.draft import Draft
from docdraft.models.list_item import ListItem
from docdraft.models.paragraph import Paragraph


class TestDraftBuilding:
    """Building the element list."""

    def test_factories_share_config(self):
        draft = Draft()
        paragraph = draft.paragraph()
        item = draft.list_item()

        assert draft.children == [paragraph, item]
        assert paragraph.config is draft.config
        assert isinstance(item, ListItem)

    def test_state_starts_empty(self):
        assert Draft().state == {}


class TestDraftApply:
    """Applying a draft to a backend."""

    def test_empty_draft(self, backend):
        draft = Draft()

        draft.apply(backend)

        assert draft.applied
        assert backend.blocks == []

    def test_elements_applied_in_order(self, backend):
        draft = Draft()
        draft.paragraph().text("first")
        draft.list_item().text("second")
        draft.paragraph().text("third")

        draft.apply(backend)

        assert [block.text for block in backend.blocks] == ["first", "second", "third"]
        assert [block.kind for block in backend.blocks] == ["paragraph", "list_item", "paragraph"]

    def test_finish_runs_after_all_applies(self):
        draft = Draft()
        first = draft.paragraph()
        second = draft.paragraph()
        calls = []

        with patch.object(Paragraph, "apply", autospec=True,
                          side_effect=lambda element, backend: calls.append(("apply", element))), \
                patch.object(Paragraph, "finish", autospec=True,
                             side_effect=lambda element, state: calls.append(("finish", element))):
            draft.apply(Mock())

        assert calls == [("apply", first), ("apply", second), ("finish", first), ("finish", second)]

    def test_finish_receives_draft_state(self):
        draft = Draft()
        draft.paragraph()

        with patch.object(Paragraph, "finish", autospec=True) as finish:
            draft.apply(MemoryBackend())

        assert finish.call_args[0][1] is draft.state

    def test_apply_twice_raises(self, backend):
        draft = Draft()
        draft.apply(backend)

        with pytest.raises(DraftStateError):
            draft.apply(backend)

    def test_failure_aborts_remaining(self, backend):
        draft = Draft()
        draft.paragraph().text("kept")
        draft.paragraph().image()
        draft.paragraph().text("never")

        with pytest.raises(MediaError):
            draft.apply(backend)

        # The failing element was inserted before its image failed.
        assert [block.text for block in backend.blocks] == ["kept", ""]

    def test_failure_skips_finish(self):
        draft = Draft()
        draft.paragraph().image()

        with patch.object(Paragraph, "finish", autospec=True) as finish:
            with pytest.raises(MediaError):
                draft.apply(MemoryBackend())

        finish.assert_not_called()
