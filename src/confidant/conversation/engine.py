"""
Main dialogue engine orchestrating rules, fallbacks and context.

Provides the object contract consumed by a host: ``process_input``,
``get_context`` and ``reset_context``.
"""

from datetime import datetime
import logging
from typing import Callable, Optional

import numpy as np

from confidant.conversation.context import DialogueContext
from confidant.conversation.errors import InvalidInputError
from confidant.conversation.patterns import PatternTable
from confidant.conversation.selector import ResponseSelector

logger = logging.getLogger(__name__)


class DialogueEngine:
    """
    Rule-based supportive dialogue engine.

    Normalizes input, tries the pattern table in order and falls back
    to the response selector when nothing matches. Owns exactly one
    DialogueContext; hosts serving several sessions create one engine
    per session.

    Attributes:
        _pattern_table: Ordered rules
        _selector: Fallback selection
        _clock: Source of the current time
        _context: Live session context

    Example:
        >>> engine = DialogueEngine()
        >>> engine.process_input("Hello")
        "Good morning! I'm here to listen and support you. How are you feeling today?"
        >>> engine.process_input("My problem is with sleep")
        "I understand you're dealing with sleep. ..."
        >>> engine.get_context().memory.concerns
        ['sleep']
    """

    def __init__(
        self,
        pattern_table: Optional[PatternTable] = None,
        selector: Optional[ResponseSelector] = None,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize dialogue engine.

        Args:
            pattern_table: Rules to scan (default: built with ``clock``)
            selector: Fallback selector (default: built with ``rng``)
            clock: Source of the current time (default: datetime.now)
            rng: Random generator for the default selector

        Raises:
            EngineInternalError: If a theme or stage has no response bank
        """
        self._clock = clock or datetime.now
        self._pattern_table = pattern_table if pattern_table is not None else PatternTable(clock=self._clock)
        self._selector = selector if selector is not None else ResponseSelector(rng=rng)
        self._selector.validate()
        self._context = DialogueContext.started_at(self._clock())

    def process_input(self, text: str) -> str:
        """
        Generate a reply to one line of user input.

        Args:
            text: Raw user text; empty or whitespace-only is allowed

        Returns:
            Non-empty reply

        Raises:
            InvalidInputError: If text is not a string
        """
        if not isinstance(text, str):
            raise InvalidInputError(
                f"Input must be a string, got {type(text).__name__}"
            )

        context = self._context
        context.last_interaction_time = self._clock()
        context.user_history.append(text)

        normalized = text.strip().lower()

        pattern_match = self._pattern_table.match(normalized)
        if pattern_match:
            response = self._pattern_table.respond(pattern_match, context)
        else:
            response = self._selector.select(context)

        context.last_response = response
        return response

    def get_context(self) -> DialogueContext:
        """Get the live session context (not a copy)."""
        return self._context

    def reset_context(self) -> None:
        """Start a new session with a fresh context."""
        logger.info("Resetting dialogue context after %d turns", self.turn_count)
        self._context = DialogueContext.started_at(self._clock())

    @property
    def turn_count(self) -> int:
        """Number of inputs processed this session."""
        return len(self._context.user_history)

    def __repr__(self) -> str:
        return f"DialogueEngine({self._context!r})"
