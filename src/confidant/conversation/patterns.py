"""
Ordered regular-expression rules and their responders.

Each rule pairs a case-insensitive regex with a responder that updates
the DialogueContext and returns the reply. Rules are scanned in
declaration order and the first match wins, so broader rules must stay
below the narrower ones they would otherwise shadow.
"""

from dataclasses import dataclass
from datetime import datetime
import logging
import re
from typing import Callable, Dict, Optional, Tuple

from confidant.config.constants import (
    AFTERNOON_END_HOUR,
    EMOTION_KEYWORDS,
    EMOTION_PATTERN_LOOKBACK,
    EMOTION_PATTERN_MIN_RUN,
    MORNING_END_HOUR,
)
from confidant.conversation import corpus
from confidant.conversation.context import ConversationStage, DialogueContext, Theme

logger = logging.getLogger(__name__)

Responder = Callable[[re.Match, DialogueContext], str]


@dataclass(frozen=True)
class ResponsePattern:
    """A single matching rule."""

    pattern_id: str
    regex: re.Pattern
    responder: Responder
    theme: Optional[Theme] = None  # Theme the responder assigns, if any

    def __repr__(self) -> str:
        theme = self.theme.value if self.theme else None
        return f"Pattern({self.pattern_id}, theme={theme})"


@dataclass(frozen=True)
class PatternMatch:
    """A rule that matched, with its regex match."""

    pattern: ResponsePattern
    match: re.Match

    @property
    def groups(self) -> Dict[str, Optional[str]]:
        """Named captured groups of the match."""
        return self.match.groupdict()

    def __repr__(self) -> str:
        return f"PatternMatch({self.pattern.pattern_id}, groups={self.groups})"


def _first_capture(match: re.Match) -> str:
    """Get the first participating named group (rules with alternate phrasings)."""
    for value in match.groupdict().values():
        if value is not None:
            return value
    return ""


def _compile(expression: str) -> re.Pattern:
    return re.compile(expression, re.IGNORECASE)


class PatternTable:
    """
    Ordered catalogue of dialogue rules.

    Attributes:
        _clock: Callable returning the current datetime (greeting bucket)
        _morning_end_hour: First hour not greeted as morning
        _afternoon_end_hour: First hour greeted as evening
        _patterns: Rules in scan order

    Example:
        >>> table = PatternTable()
        >>> found = table.match("my problem is with sleep")
        >>> found.pattern.pattern_id
        'problem_statement'
        >>> table.respond(found, context)
        "I understand you're dealing with sleep. ..."
    """

    def __init__(
        self,
        clock: Optional[Callable[[], datetime]] = None,
        morning_end_hour: int = MORNING_END_HOUR,
        afternoon_end_hour: int = AFTERNOON_END_HOUR,
    ):
        """
        Initialize pattern table.

        Args:
            clock: Source of the current time (default: datetime.now)
            morning_end_hour: Hours below this are morning
            afternoon_end_hour: Hours below this (and not morning) are afternoon
        """
        self._clock = clock or datetime.now
        self._morning_end_hour = morning_end_hour
        self._afternoon_end_hour = afternoon_end_hour
        self._patterns: Tuple[ResponsePattern, ...] = self._init_seed_patterns()

    def _init_seed_patterns(self) -> Tuple[ResponsePattern, ...]:
        """Build the rules in their fixed scan order."""
        emotions = "|".join(re.escape(word) for word in EMOTION_KEYWORDS)
        return (
            ResponsePattern(
                pattern_id="greeting",
                regex=_compile(r"^(?:hi|hello|hey|greetings|good (?:morning|afternoon|evening))\b"),
                responder=self._respond_greeting,
            ),
            ResponsePattern(
                pattern_id="farewell",
                regex=_compile(r"^(?:bye|goodbye|see you|take care|farewell)\b"),
                responder=self._respond_farewell,
            ),
            ResponsePattern(
                pattern_id="emotional_state",
                regex=_compile(rf"(?:i am|i'm) (?:feeling )?(?P<emotion>{emotions})\b"),
                responder=self._respond_emotion,
                theme=Theme.EMOTIONAL_STATE,
            ),
            ResponsePattern(
                pattern_id="feeling_expression",
                regex=_compile(r"(?:i feel|i am feeling) (?:like|that) (?P<feeling>.+)"),
                responder=self._respond_feeling,
                theme=Theme.FEELING_EXPRESSION,
            ),
            ResponsePattern(
                pattern_id="problem_statement",
                regex=_compile(
                    r"(?:my|i have) (?:problem|issue|trouble|challenge) (?:is with|is|with) (?P<problem>.+)"
                ),
                responder=self._respond_problem,
                theme=Theme.PROBLEM_STATEMENT,
            ),
            ResponsePattern(
                pattern_id="uncertainty",
                regex=_compile(r"(?:i don't|i do not) (?:know|understand) (?P<uncertainty>.+)"),
                responder=self._respond_uncertainty,
                theme=Theme.UNCERTAINTY,
            ),
            ResponsePattern(
                pattern_id="desire",
                regex=_compile(r"(?:i want|i need|i would like|my goal is) (?P<goal>.+)"),
                responder=self._respond_desire,
                theme=Theme.DESIRE,
            ),
            ResponsePattern(
                pattern_id="thought_expression",
                regex=_compile(r"(?:i think|i believe) (?P<thought>.+)"),
                responder=self._respond_thought,
                theme=Theme.THOUGHT_EXPRESSION,
            ),
            ResponsePattern(
                pattern_id="limitation",
                regex=_compile(r"(?:i can't|i cannot) (?P<limitation>.+)"),
                responder=self._respond_limitation,
                theme=Theme.LIMITATION,
            ),
            ResponsePattern(
                pattern_id="affirmation",
                regex=_compile(r"^(?:yes|yeah|yep)$"),
                responder=self._respond_affirmation,
            ),
            ResponsePattern(
                pattern_id="negation",
                regex=_compile(r"^(?:no|nope|nah)$"),
                responder=self._respond_negation,
            ),
            ResponsePattern(
                pattern_id="coping",
                regex=_compile(
                    r"(?:i (?:try to|usually|often) (?:cope|deal|handle) (?:by|with) (?P<strategy>.+)"
                    r"|when i feel .+ i (?:try to|usually|often) (?P<strategy_alt>.+))"
                ),
                responder=self._respond_coping,
                theme=Theme.COPING,
            ),
            ResponsePattern(
                pattern_id="support",
                regex=_compile(
                    r"(?:i (?:talk to|get help from|rely on|depend on) (?P<support>.+)"
                    r"|(?:my|i have) (?:support|help) (?:from|with) (?P<support_alt>.+))"
                ),
                responder=self._respond_support,
                theme=Theme.SUPPORT,
            ),
        )

    @property
    def patterns(self) -> Tuple[ResponsePattern, ...]:
        """Rules in scan order."""
        return self._patterns

    def match(self, normalized_input: str) -> Optional[PatternMatch]:
        """
        Find the first rule matching the input.

        Args:
            normalized_input: Trimmed, lower-cased user text

        Returns:
            PatternMatch for the first matching rule, or None
        """
        for pattern in self._patterns:
            found = pattern.regex.search(normalized_input)
            if found:
                return PatternMatch(pattern=pattern, match=found)
        return None

    def respond(self, pattern_match: PatternMatch, context: DialogueContext) -> str:
        """Run the matched rule's responder against the context."""
        logger.debug("Pattern %s matched: %s", pattern_match.pattern.pattern_id, pattern_match.groups)
        return pattern_match.pattern.responder(pattern_match.match, context)

    # ------------------------------------------------------------------
    # Responders
    # ------------------------------------------------------------------

    def _part_of_day(self) -> str:
        hour = self._clock().hour
        if hour < self._morning_end_hour:
            return "morning"
        if hour < self._afternoon_end_hour:
            return "afternoon"
        return "evening"

    def _respond_greeting(self, match: re.Match, context: DialogueContext) -> str:
        context.has_greeted = True
        context.is_greeting = False
        context.conversation_stage = ConversationStage.INITIAL

        # Known topics mean we have talked before
        template = corpus.GREETING_RETURNING if context.memory.topics else corpus.GREETING_FIRST_TIME
        return template.format(part=self._part_of_day())

    def _respond_farewell(self, match: re.Match, context: DialogueContext) -> str:
        context.conversation_stage = ConversationStage.CLOSING
        return corpus.FAREWELL

    def _respond_emotion(self, match: re.Match, context: DialogueContext) -> str:
        emotion = match.group("emotion")
        context.current_theme = Theme.EMOTIONAL_STATE
        context.conversation_stage = ConversationStage.EXPLORING
        context.record_emotion(emotion)

        if emotion in corpus.EMOTION_PATTERN_RESPONSES and self._has_emotional_pattern(context):
            return corpus.EMOTION_PATTERN_RESPONSES[emotion]
        return corpus.EMOTION_RESPONSES[emotion]

    @staticmethod
    def _has_emotional_pattern(context: DialogueContext) -> bool:
        """Check whether recent emotions are all the current one."""
        recent = context.emotion_history[-EMOTION_PATTERN_LOOKBACK:]
        return len(recent) >= EMOTION_PATTERN_MIN_RUN and all(
            emotion == context.emotional_state for emotion in recent
        )

    def _respond_feeling(self, match: re.Match, context: DialogueContext) -> str:
        context.current_theme = Theme.FEELING_EXPRESSION
        context.conversation_stage = ConversationStage.EXPLORING
        return corpus.FEELING_TEMPLATE.format(feeling=match.group("feeling"))

    def _respond_problem(self, match: re.Match, context: DialogueContext) -> str:
        problem = match.group("problem")
        context.last_topic = problem
        context.current_theme = Theme.PROBLEM_STATEMENT
        context.conversation_stage = ConversationStage.DEEP_DISCUSSION

        is_new = context.memory.remember("concerns", problem)
        if is_new:
            return corpus.PROBLEM_TEMPLATE.format(problem=problem)
        return corpus.RECURRING_PROBLEM_TEMPLATE.format(problem=problem)

    def _respond_uncertainty(self, match: re.Match, context: DialogueContext) -> str:
        context.current_theme = Theme.UNCERTAINTY
        context.conversation_stage = ConversationStage.EXPLORING
        return corpus.UNCERTAINTY_TEMPLATE.format(uncertainty=match.group("uncertainty"))

    def _respond_desire(self, match: re.Match, context: DialogueContext) -> str:
        goal = match.group("goal")
        context.current_theme = Theme.DESIRE
        context.conversation_stage = ConversationStage.DEEP_DISCUSSION
        context.memory.remember("goals", goal)
        return corpus.DESIRE_TEMPLATE.format(goal=goal)

    def _respond_thought(self, match: re.Match, context: DialogueContext) -> str:
        context.current_theme = Theme.THOUGHT_EXPRESSION
        context.conversation_stage = ConversationStage.DEEP_DISCUSSION
        return corpus.THOUGHT_TEMPLATE.format(thought=match.group("thought"))

    def _respond_limitation(self, match: re.Match, context: DialogueContext) -> str:
        context.current_theme = Theme.LIMITATION
        context.conversation_stage = ConversationStage.DEEP_DISCUSSION
        return corpus.LIMITATION_TEMPLATE.format(limitation=match.group("limitation"))

    def _respond_affirmation(self, match: re.Match, context: DialogueContext) -> str:
        context.conversation_depth += 1
        if context.current_theme:
            return corpus.AFFIRMATION_WITH_THEME
        return corpus.AFFIRMATION

    def _respond_negation(self, match: re.Match, context: DialogueContext) -> str:
        if context.current_theme:
            return corpus.NEGATION_WITH_THEME
        return corpus.NEGATION

    def _respond_coping(self, match: re.Match, context: DialogueContext) -> str:
        strategy = _first_capture(match)
        context.current_theme = Theme.COPING
        context.memory.remember("coping_strategies", strategy)
        return corpus.COPING_TEMPLATE.format(strategy=strategy)

    def _respond_support(self, match: re.Match, context: DialogueContext) -> str:
        support = _first_capture(match)
        context.current_theme = Theme.SUPPORT
        context.memory.remember("support_systems", support)
        return corpus.SUPPORT_TEMPLATE.format(support=support)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternTable(patterns={len(self._patterns)})"
