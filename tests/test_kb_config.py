"""
Tests for knowledge base configuration.
"""

from dataclasses import FrozenInstanceError

import pytest

from kb_config import KBConfig
from kb_errors import CaveConfigError, WumpusKBError
from wumpus_kb import WumpusKnowledgeBase
from wumpus_world import AgentPosition, Orientation


class TestKBConfig:
    def test_defaults(self):
        config = KBConfig()
        assert (config.width, config.height) == (4, 4)
        assert config.start == AgentPosition(1, 1, Orientation.FACING_NORTH)
        assert config.disable_nav_sentences is False
        assert config.procedure == "z3-incremental"

    def test_square(self):
        config = KBConfig.square(5, procedure="z3")
        assert (config.width, config.height) == (5, 5)
        assert config.procedure == "z3"

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (-1, 3), (2.5, 2), ("3", 3), (True, 3)])
    def test_rejects_bad_dimensions(self, width, height):
        with pytest.raises(CaveConfigError):
            KBConfig(width=width, height=height)

    def test_rejects_start_outside_cave(self):
        with pytest.raises(CaveConfigError):
            KBConfig(width=2, height=2, start=AgentPosition(3, 1, Orientation.FACING_EAST))

    def test_unknown_procedure_rejected_by_knowledge_base(self):
        config = KBConfig(procedure="walksat")
        with pytest.raises(CaveConfigError):
            WumpusKnowledgeBase(config)

    def test_is_immutable(self):
        config = KBConfig()
        with pytest.raises(FrozenInstanceError):
            config.disable_nav_sentences = True

    def test_config_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            KBConfig(width=0)
        assert issubclass(CaveConfigError, WumpusKBError)
