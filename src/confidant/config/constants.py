"""
Dialogue engine constants.

Defaults for the time-of-day greeting buckets, pattern detection and
configuration lookup. Runtime overrides live in ``settings.py``.
"""

# ==============================================================================
# Time of Day
# ==============================================================================

MORNING_END_HOUR = 12
"""Hours strictly below this are greeted as morning."""

AFTERNOON_END_HOUR = 17
"""Hours strictly below this (and not morning) are greeted as afternoon.
Everything from this hour onward is evening."""

# ==============================================================================
# Emotional Pattern Detection
# ==============================================================================

EMOTION_PATTERN_LOOKBACK = 3
"""Number of most recent detected emotions inspected for a sustained pattern."""

EMOTION_PATTERN_MIN_RUN = 2
"""Minimum number of identical recent emotions that counts as a pattern."""

# ==============================================================================
# Emotion Vocabulary
# ==============================================================================

EMOTION_KEYWORDS = [
    "sad",
    "happy",
    "angry",
    "anxious",
    "depressed",
    "worried",
    "stressed",
    "overwhelmed",
    "frustrated",
    "lonely",
    "confused",
    "excited",
    "peaceful",
    "calm",
]
"""Closed set of emotion words recognised after "i am" / "i'm"."""

# ==============================================================================
# Configuration
# ==============================================================================

ENV_PREFIX = "CONFIDANT_"
"""Prefix for environment variable overrides (e.g. CONFIDANT_DEBUG=true)."""

LOGGER_NAME = "confidant"
"""Root logger of the package."""
