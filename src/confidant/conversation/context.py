"""
Conversation context for a single dialogue session.

Holds the mutable state that pattern responders read and update on
every turn, including the per-session memory used to detect recurring
concerns and sustained emotional patterns.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class ConversationStage(Enum):
    """Coarse phase of the conversation."""

    INITIAL = "initial"
    EXPLORING = "exploring"
    DEEP_DISCUSSION = "deep_discussion"
    CLOSING = "closing"


class Theme(Enum):
    """Topical category of the current turn; keys the contextual banks."""

    EMOTIONAL_STATE = "emotional_state"
    FEELING_EXPRESSION = "feeling_expression"
    PROBLEM_STATEMENT = "problem_statement"
    UNCERTAINTY = "uncertainty"
    DESIRE = "desire"
    THOUGHT_EXPRESSION = "thought_expression"
    LIMITATION = "limitation"
    COPING = "coping"
    SUPPORT = "support"


@dataclass
class ConversationMemory:
    """
    Per-session accumulator of distinct values seen across turns.

    Each category is an ordered list without duplicates. Values are
    only ever added through ``remember``.

    Example:
        >>> memory = ConversationMemory()
        >>> memory.remember("concerns", "sleep")
        True
        >>> memory.remember("concerns", "sleep")
        False
        >>> memory.recall("concerns")
        ['sleep']
    """

    topics: List[str] = field(default_factory=list)
    emotions: List[str] = field(default_factory=list)
    concerns: List[str] = field(default_factory=list)
    goals: List[str] = field(default_factory=list)
    coping_strategies: List[str] = field(default_factory=list)
    support_systems: List[str] = field(default_factory=list)

    CATEGORIES = (
        "topics",
        "emotions",
        "concerns",
        "goals",
        "coping_strategies",
        "support_systems",
    )

    def _category(self, category: str) -> List[str]:
        if category not in self.CATEGORIES:
            raise KeyError(f"Unknown memory category: {category!r}")
        return getattr(self, category)

    def remember(self, category: str, value: str) -> bool:
        """
        Append value to a category unless already present.

        Args:
            category: One of ``CATEGORIES``
            value: Text to remember

        Returns:
            True if the value was new
        """
        values = self._category(category)
        if value in values:
            return False
        values.append(value)
        return True

    def recall(self, category: str) -> List[str]:
        """Get the ordered values of a category."""
        return list(self._category(category))

    def contains(self, category: str, value: str) -> bool:
        return value in self._category(category)

    def to_dict(self) -> Dict[str, List[str]]:
        return {name: list(getattr(self, name)) for name in self.CATEGORIES}

    def __repr__(self) -> str:
        sizes = ", ".join(f"{name}={len(getattr(self, name))}" for name in self.CATEGORIES)
        return f"ConversationMemory({sizes})"


@dataclass(frozen=True)
class TherapeuticTechniques:
    """Static technique flags. Carried for compatibility; nothing reads them."""

    active_listening: bool = True
    reflection: bool = True
    open_questions: bool = True
    validation: bool = True


@dataclass
class DialogueContext:
    """
    Mutable state of one conversation session.

    Owned by exactly one DialogueEngine. Responders mutate it in place;
    the engine replaces it wholesale on reset.

    Attributes:
        last_topic: Most recent problem statement
        emotional_state: Last detected emotion keyword
        conversation_depth: Count of affirmative replies (not read by any rule)
        user_history: Raw user inputs, append-only
        current_theme: Theme selecting the contextual response bank
        last_response: Most recent reply issued
        session_start_time: When the context was created
        last_interaction_time: When the last input arrived
        is_greeting: Greeting handshake flag
        has_greeted: Whether a greeting was exchanged
        conversation_stage: Coarse dialogue phase
        memory: Distinct values accumulated across turns
        emotion_history: Every detected emotion in order, repeats included
        current_focus: Reserved
        previous_focus: Reserved
        therapeutic_techniques: Static flag bag
    """

    last_topic: Optional[str] = None
    emotional_state: Optional[str] = None
    conversation_depth: int = 0
    user_history: List[str] = field(default_factory=list)
    current_theme: Optional[Theme] = None
    last_response: Optional[str] = None
    session_start_time: datetime = field(default_factory=datetime.now)
    last_interaction_time: datetime = field(default_factory=datetime.now)
    is_greeting: bool = True
    has_greeted: bool = False
    conversation_stage: ConversationStage = ConversationStage.INITIAL
    memory: ConversationMemory = field(default_factory=ConversationMemory)
    emotion_history: List[str] = field(default_factory=list)
    current_focus: Optional[str] = None
    previous_focus: Optional[str] = None
    therapeutic_techniques: TherapeuticTechniques = field(default_factory=TherapeuticTechniques)

    @classmethod
    def started_at(cls, now: datetime) -> "DialogueContext":
        """Create a fresh context whose timestamps are both ``now``."""
        return cls(session_start_time=now, last_interaction_time=now)

    def record_emotion(self, emotion: str) -> None:
        """Set the current emotion and log it in memory and history."""
        self.emotional_state = emotion
        self.memory.remember("emotions", emotion)
        self.emotion_history.append(emotion)

    def to_dict(self) -> dict:
        """
        Plain-data snapshot for diagnostics.

        Enums become their values and datetimes ISO 8601 strings. The
        result is a copy; mutating it does not affect the context.
        """
        return {
            "last_topic": self.last_topic,
            "emotional_state": self.emotional_state,
            "conversation_depth": self.conversation_depth,
            "user_history": list(self.user_history),
            "current_theme": self.current_theme.value if self.current_theme else None,
            "last_response": self.last_response,
            "session_start_time": self.session_start_time.isoformat(),
            "last_interaction_time": self.last_interaction_time.isoformat(),
            "is_greeting": self.is_greeting,
            "has_greeted": self.has_greeted,
            "conversation_stage": self.conversation_stage.value,
            "memory": self.memory.to_dict(),
            "emotion_history": list(self.emotion_history),
            "current_focus": self.current_focus,
            "previous_focus": self.previous_focus,
            "therapeutic_techniques": {
                "active_listening": self.therapeutic_techniques.active_listening,
                "reflection": self.therapeutic_techniques.reflection,
                "open_questions": self.therapeutic_techniques.open_questions,
                "validation": self.therapeutic_techniques.validation,
            },
        }

    def __repr__(self) -> str:
        theme = self.current_theme.value if self.current_theme else None
        return (
            f"DialogueContext(stage={self.conversation_stage.value}, theme={theme}, "
            f"turns={len(self.user_history)})"
        )
