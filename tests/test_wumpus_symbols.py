"""
Tests for atom naming.
"""

import pytest

from wumpus_symbols import AtomKey, Feature, action_feature, atom, atom_key, facing
from wumpus_world import Action, Orientation


class TestAtomNames:
    def test_room_atom(self):
        assert str(atom(Feature.PIT, x=1, y=2)) == "P_1_2"

    def test_time_atom(self):
        assert str(atom(Feature.HAVE_ARROW, 0)) == "HaveArrow_0"

    def test_time_and_room_atom(self):
        assert str(atom(Feature.LOCATION, 3, 1, 2)) == "L_3_1_2"

    def test_orientation_and_action_features(self):
        assert str(atom(facing(Orientation.FACING_WEST), 4)) == "FacingWest_4"
        assert str(atom(action_feature(Action.TURN_LEFT), 2)) == "TurnLeft_2"

    def test_same_key_gives_same_atom(self):
        assert atom(Feature.OK_TO_MOVE_INTO, 1, 2, 3).eq(atom(Feature.OK_TO_MOVE_INTO, 1, 2, 3))

    def test_prefixes_have_no_separator(self):
        for feature in Feature:
            assert "_" not in feature.value


class TestInjectivity:
    def test_distinct_keys_give_distinct_names(self):
        times = [None, 0, 1, 2, 11, 12]
        rooms = [None, (1, 1), (1, 2), (2, 1), (1, 11), (11, 1), (12, 1), (1, 12)]
        keys = {
            AtomKey(feature, time, *(room or (None, None)))
            for feature in Feature
            for time in times
            for room in rooms
        }
        names = {key.name for key in keys}
        assert len(names) == len(keys)


class TestInvalidKeys:
    def test_x_without_y(self):
        with pytest.raises(ValueError):
            atom_key(Feature.PIT, x=1)

    def test_negative_time(self):
        with pytest.raises(ValueError):
            atom(Feature.HAVE_ARROW, -1)

    def test_bool_index(self):
        with pytest.raises(ValueError):
            atom(Feature.PIT, x=True, y=1)
