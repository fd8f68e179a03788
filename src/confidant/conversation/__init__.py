"""
Conversation package: rule-based supportive dialogue.

This package implements a scripted responder that:
- Matches input against an ordered table of regular expressions
- Tracks topic, emotion, theme and stage in a per-session context
- Remembers distinct concerns, goals and supports to spot recurrence
- Falls back to theme, topic or stage banks when nothing matches

Components:
    - DialogueContext: Mutable session state
    - ConversationMemory: Distinct values accumulated across turns
    - PatternTable: Ordered rules with responders
    - ResponseSelector: Layered fallback selection
    - DialogueEngine: Main engine class
"""

from confidant.conversation.context import (
    ConversationMemory,
    ConversationStage,
    DialogueContext,
    TherapeuticTechniques,
    Theme,
)
from confidant.conversation.errors import EngineInternalError, InvalidInputError
from confidant.conversation.patterns import PatternMatch, PatternTable, ResponsePattern
from confidant.conversation.selector import FallbackLayer, ResponseSelector
from confidant.conversation.engine import DialogueEngine

__all__ = [
    # Context
    "DialogueContext",
    "ConversationMemory",
    "ConversationStage",
    "Theme",
    "TherapeuticTechniques",
    # Errors
    "InvalidInputError",
    "EngineInternalError",
    # Patterns
    "PatternTable",
    "ResponsePattern",
    "PatternMatch",
    # Selection
    "ResponseSelector",
    "FallbackLayer",
    # Main
    "DialogueEngine",
]
