"""
Fallback response selection.

Chooses a reply when no pattern matched, in fixed layers: greeting
interjection, theme bank, topic continuity, stage bank.
"""

from enum import Enum
import logging
from typing import Dict, List, Optional

import numpy as np

from confidant.conversation import corpus
from confidant.conversation.context import ConversationStage, DialogueContext, Theme
from confidant.conversation.errors import EngineInternalError

logger = logging.getLogger(__name__)


class FallbackLayer(Enum):
    """Which fallback layer produced a reply."""

    INTERJECTION = "interjection"
    CONTEXTUAL = "contextual"
    TOPIC_CONTINUITY = "topic_continuity"
    STAGE = "stage"


class ResponseSelector:
    """
    Select a reply for input that matched no rule.

    Layers are evaluated in order and the first applicable one wins:

    1. Interjection: the session never greeted and is not mid-greeting
    2. Contextual: a theme is set, pick from that theme's bank
    3. Topic continuity: a last topic is known, refer back to it
    4. Stage: pick from the current stage's bank

    Attributes:
        _rng: Random generator used for bank picks
        _contextual: Banks keyed by Theme
        _fallback: Banks keyed by ConversationStage

    Example:
        >>> selector = ResponseSelector(rng=np.random.default_rng(7))
        >>> reply = selector.select(DialogueContext())
        >>> # One of the five initial-stage fallbacks
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        contextual_responses: Optional[Dict[Theme, List[str]]] = None,
        fallback_responses: Optional[Dict[ConversationStage, List[str]]] = None,
    ):
        """
        Initialize response selector.

        Args:
            rng: Random generator (default: unseeded numpy generator)
            contextual_responses: Banks keyed by theme
            fallback_responses: Banks keyed by stage
        """
        self._rng = rng if rng is not None else np.random.default_rng()
        self._contextual = (
            contextual_responses if contextual_responses is not None else corpus.CONTEXTUAL_RESPONSES
        )
        self._fallback = (
            fallback_responses if fallback_responses is not None else corpus.FALLBACK_RESPONSES
        )

    def validate(self) -> None:
        """
        Check every theme and stage has a non-empty bank.

        Raises:
            EngineInternalError: If a bank is missing or empty
        """
        missing = [theme.value for theme in Theme if not self._contextual.get(theme)]
        missing += [stage.value for stage in ConversationStage if not self._fallback.get(stage)]
        if missing:
            logger.error("Response banks missing for: %s", ", ".join(missing))
            raise EngineInternalError(f"No response bank for: {', '.join(missing)}")

    def select_layer(self, context: DialogueContext) -> FallbackLayer:
        """Report which layer would answer, without touching the context."""
        if not context.has_greeted and not context.is_greeting:
            return FallbackLayer.INTERJECTION
        if context.current_theme is not None:
            return FallbackLayer.CONTEXTUAL
        if context.last_topic:
            return FallbackLayer.TOPIC_CONTINUITY
        return FallbackLayer.STAGE

    def select(self, context: DialogueContext) -> str:
        """
        Produce a fallback reply.

        Args:
            context: Session context (the interjection layer sets is_greeting)

        Returns:
            Reply text

        Raises:
            EngineInternalError: If the active theme or stage has no bank
        """
        layer = self.select_layer(context)
        logger.debug("Fallback layer: %s", layer.value)

        if layer is FallbackLayer.INTERJECTION:
            context.is_greeting = True
            return corpus.INTERJECTION_GREETING

        if layer is FallbackLayer.CONTEXTUAL:
            return self._pick(self._contextual.get(context.current_theme), context.current_theme)

        if layer is FallbackLayer.TOPIC_CONTINUITY:
            return corpus.TOPIC_CONTINUITY_TEMPLATE.format(topic=context.last_topic)

        return self._pick(self._fallback.get(context.conversation_stage), context.conversation_stage)

    def _pick(self, bank: Optional[List[str]], key: Enum) -> str:
        """Uniform draw from a bank."""
        if not bank:
            logger.error("No response bank for %s", key.value)
            raise EngineInternalError(f"No response bank for {key.value!r}")
        return bank[int(self._rng.integers(len(bank)))]

    def __repr__(self) -> str:
        return f"ResponseSelector(themes={len(self._contextual)}, stages={len(self._fallback)})"
