"""
Tests for DialogueContext and ConversationMemory.
"""

from datetime import datetime

import pytest

from confidant.conversation.context import (
    ConversationMemory,
    ConversationStage,
    DialogueContext,
    TherapeuticTechniques,
    Theme,
)


class TestConversationMemory:
    """Test append-if-absent memory collections."""

    def test_remember_new_value(self):
        memory = ConversationMemory()

        assert memory.remember("concerns", "sleep") is True
        assert memory.concerns == ["sleep"]

    def test_remember_duplicate_is_ignored(self):
        memory = ConversationMemory()
        memory.remember("goals", "more rest")

        assert memory.remember("goals", "more rest") is False
        assert memory.goals == ["more rest"]

    def test_remember_preserves_order(self):
        memory = ConversationMemory()
        for value in ["work", "sleep", "work", "family"]:
            memory.remember("concerns", value)

        assert memory.recall("concerns") == ["work", "sleep", "family"]

    def test_recall_returns_copy(self):
        memory = ConversationMemory()
        memory.remember("emotions", "sad")

        recalled = memory.recall("emotions")
        recalled.append("happy")

        assert memory.emotions == ["sad"]

    def test_contains(self):
        memory = ConversationMemory()
        memory.remember("support_systems", "my sister")

        assert memory.contains("support_systems", "my sister")
        assert not memory.contains("support_systems", "my brother")

    def test_unknown_category_raises(self):
        memory = ConversationMemory()

        with pytest.raises(KeyError):
            memory.remember("hobbies", "chess")

    def test_to_dict_has_all_categories(self):
        data = ConversationMemory().to_dict()

        assert set(data) == set(ConversationMemory.CATEGORIES)
        assert all(values == [] for values in data.values())


class TestDialogueContext:
    """Test context defaults and helpers."""

    def test_defaults(self, context):
        assert context.last_topic is None
        assert context.emotional_state is None
        assert context.conversation_depth == 0
        assert context.user_history == []
        assert context.current_theme is None
        assert context.last_response is None
        assert context.is_greeting is True
        assert context.has_greeted is False
        assert context.conversation_stage is ConversationStage.INITIAL
        assert context.current_focus is None
        assert context.previous_focus is None

    def test_therapeutic_techniques_all_enabled(self, context):
        assert context.therapeutic_techniques == TherapeuticTechniques(
            active_listening=True,
            reflection=True,
            open_questions=True,
            validation=True,
        )

    def test_started_at_sets_both_timestamps(self):
        now = datetime(2024, 1, 2, 3, 4, 5)
        context = DialogueContext.started_at(now)

        assert context.session_start_time == now
        assert context.last_interaction_time == now

    def test_contexts_do_not_share_collections(self):
        first = DialogueContext()
        second = DialogueContext()
        first.user_history.append("hi")
        first.memory.remember("concerns", "work")

        assert second.user_history == []
        assert second.memory.concerns == []

    def test_record_emotion(self, context):
        context.record_emotion("sad")
        context.record_emotion("sad")

        assert context.emotional_state == "sad"
        assert context.memory.emotions == ["sad"]
        assert context.emotion_history == ["sad", "sad"]

    def test_to_dict_snapshot(self):
        context = DialogueContext.started_at(datetime(2024, 5, 14, 9, 0))
        context.current_theme = Theme.DESIRE
        context.conversation_stage = ConversationStage.DEEP_DISCUSSION
        context.memory.remember("goals", "a new job")

        data = context.to_dict()

        assert data["current_theme"] == "desire"
        assert data["conversation_stage"] == "deep_discussion"
        assert data["session_start_time"] == "2024-05-14T09:00:00"
        assert data["memory"]["goals"] == ["a new job"]
        assert data["therapeutic_techniques"]["validation"] is True

    def test_to_dict_is_a_copy(self, context):
        data = context.to_dict()
        data["user_history"].append("hello")
        data["memory"]["concerns"].append("sleep")

        assert context.user_history == []
        assert context.memory.concerns == []
