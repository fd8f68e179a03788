"""
Dependency Injection Container for Confidant.

Wires settings, the clock and randomness into dialogue engines so that
every session gets the same configuration and its own state.
"""

from datetime import datetime
import logging
from typing import Callable, Optional

import numpy as np

from confidant.config.constants import LOGGER_NAME
from confidant.config.settings import Settings, get_settings
from confidant.conversation.engine import DialogueEngine
from confidant.conversation.patterns import PatternTable
from confidant.conversation.selector import ResponseSelector


class ConfidantContainer:
    """
    Dependency injection container for Confidant.

    Holds the settings and clock shared by all sessions and provides
    factories for the components that depend on them. Each engine gets
    an independent random generator; with a configured seed the
    generators are spawned from one SeedSequence, so a run is
    reproducible while sessions stay independent.

    Attributes:
        _settings: Runtime settings
        _clock: Source of the current time
        _seed_sequence: Parent seed when ``random_seed`` is set

    Example:
        >>> container = ConfidantContainer(Settings(random_seed=42))
        >>> engine = container.create_engine()
        >>> other = container.create_engine()
        >>> # Separate contexts, reproducible fallbacks
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize container with shared dependencies.

        Args:
            settings: Runtime settings (default: shared get_settings() instance)
            clock: Source of the current time (default: datetime.now)
        """
        self._settings = settings if settings is not None else get_settings()
        self._clock = clock or datetime.now
        self._seed_sequence: Optional[np.random.SeedSequence] = None
        if self._settings.random_seed is not None:
            self._seed_sequence = np.random.SeedSequence(self._settings.random_seed)

        if self._settings.debug:
            logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)

    @property
    def settings(self) -> Settings:
        """Get the shared Settings instance."""
        return self._settings

    def create_rng(self) -> np.random.Generator:
        """
        Create a random generator for one session.

        Returns:
            Generator spawned from the configured seed, or unseeded
        """
        if self._seed_sequence is None:
            return np.random.default_rng()
        child = self._seed_sequence.spawn(1)[0]
        return np.random.default_rng(child)

    def create_pattern_table(self) -> PatternTable:
        """Create a PatternTable using the shared clock and hour buckets."""
        return PatternTable(
            clock=self._clock,
            morning_end_hour=self._settings.morning_end_hour,
            afternoon_end_hour=self._settings.afternoon_end_hour,
        )

    def create_selector(self, rng: Optional[np.random.Generator] = None) -> ResponseSelector:
        """
        Create a ResponseSelector.

        Args:
            rng: Generator to use (default: a new per-session generator)
        """
        return ResponseSelector(rng=rng if rng is not None else self.create_rng())

    def create_engine(self) -> DialogueEngine:
        """
        Create a DialogueEngine for a new session.

        Returns:
            Engine with its own context and random generator
        """
        return DialogueEngine(
            pattern_table=self.create_pattern_table(),
            selector=self.create_selector(),
            clock=self._clock,
        )

    def __repr__(self) -> str:
        return f"ConfidantContainer(seed={self._settings.random_seed}, debug={self._settings.debug})"
