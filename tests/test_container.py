"""
Tests for ConfidantContainer wiring.
"""

import logging

from confidant.config.constants import LOGGER_NAME
from confidant.config.settings import Settings, get_settings
from confidant.container import ConfidantContainer
from confidant.conversation import corpus
from confidant.conversation.context import ConversationStage


def run_fallbacks(engine, count=8):
    return [engine.process_input("asdkjasd") for _ in range(count)]


class TestContainer:
    """Test engine creation from settings."""

    def test_engines_have_separate_contexts(self, clock):
        container = ConfidantContainer(Settings(_env_file=None), clock=clock)
        first = container.create_engine()
        second = container.create_engine()

        first.process_input("i am happy")

        assert first.get_context() is not second.get_context()
        assert second.get_context().emotional_state is None

    def test_seed_makes_runs_reproducible(self, clock):
        settings = Settings(_env_file=None, random_seed=42)

        first_run = run_fallbacks(ConfidantContainer(settings, clock=clock).create_engine())
        second_run = run_fallbacks(ConfidantContainer(settings, clock=clock).create_engine())

        assert first_run == second_run
        assert all(reply in corpus.FALLBACK_RESPONSES[ConversationStage.INITIAL] for reply in first_run)

    def test_hour_settings_reach_greeting(self, clock):
        settings = Settings(_env_file=None, morning_end_hour=6, afternoon_end_hour=9)
        engine = ConfidantContainer(settings, clock=clock).create_engine()

        assert engine.process_input("hello").startswith("Good evening!")

    def test_debug_sets_logger_level(self, clock):
        logger = logging.getLogger(LOGGER_NAME)
        previous = logger.level
        try:
            ConfidantContainer(Settings(_env_file=None, debug=True), clock=clock)

            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)

    def test_unseeded_rng(self, clock):
        container = ConfidantContainer(Settings(_env_file=None), clock=clock)

        assert 0 <= container.create_rng().integers(5) < 5

    def test_settings_property(self):
        settings = Settings(_env_file=None, random_seed=3)

        assert ConfidantContainer(settings).settings is settings

    def test_defaults_to_shared_settings(self, clock, monkeypatch):
        monkeypatch.setenv("CONFIDANT_RANDOM_SEED", "5")
        get_settings.cache_clear()
        try:
            container = ConfidantContainer(clock=clock)

            assert container.settings is get_settings()
            assert container.settings.random_seed == 5
        finally:
            get_settings.cache_clear()
