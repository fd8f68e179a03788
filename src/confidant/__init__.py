"""
Confidant: rule-based supportive dialogue engine.

This package implements a scripted conversational responder: user text
is matched against an ordered table of regular expressions, a small
per-session context is updated, and a reply is returned.

The system includes:
- Dialogue engine with an injectable clock and random generator
- Per-session context and memory of recurring concerns
- Layered fallback selection when no rule matches
- Environment-backed settings and a dependency container
"""

__version__ = "0.1.0"

from confidant.config.settings import Settings
from confidant.container import ConfidantContainer
from confidant.conversation.context import (
    ConversationMemory,
    ConversationStage,
    DialogueContext,
    Theme,
)
from confidant.conversation.engine import DialogueEngine
from confidant.conversation.errors import EngineInternalError, InvalidInputError
from confidant.conversation.patterns import PatternTable
from confidant.conversation.selector import FallbackLayer, ResponseSelector

__all__ = [
    # Core
    "ConfidantContainer",
    "Settings",
    # Conversation
    "DialogueEngine",
    "DialogueContext",
    "ConversationMemory",
    "ConversationStage",
    "Theme",
    "PatternTable",
    "ResponseSelector",
    "FallbackLayer",
    # Errors
    "InvalidInputError",
    "EngineInternalError",
]
