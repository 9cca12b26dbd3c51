"""Tests for StateDef and FSMConfig."""
import dataclasses

import pytest

from undoable_fsm import ConfigError, FSMConfig, StateDef


class TestStateDef:
    """Test StateDef dataclass."""

    def test_default_transitions_empty(self):
        """StateDef with no arguments has no transitions."""
        assert dict(StateDef().transitions) == {}

    def test_frozen(self):
        """StateDef fields cannot be reassigned."""
        state = StateDef(transitions={"go": "b"})
        with pytest.raises(dataclasses.FrozenInstanceError):
            state.transitions = {}  # type: ignore[misc]


class TestFSMConfig:
    """Test FSMConfig dataclass."""

    def test_state_names_in_table_order(self):
        """state_names follows insertion order of states."""
        # Arrange
        config = FSMConfig(
            initial="c",
            states={"c": StateDef(), "a": StateDef(), "b": StateDef()},
        )

        # Act & Assert
        assert config.state_names() == ["c", "a", "b"]

    def test_frozen(self):
        """FSMConfig fields cannot be reassigned."""
        config = FSMConfig(initial="a", states={"a": StateDef()})
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.initial = "b"  # type: ignore[misc]


class TestFromDict:
    """Test FSMConfig.from_dict parsing."""

    def test_parses_plain_mapping(self):
        """Nested dicts become StateDef instances."""
        # Arrange
        data = {
            "initial": "idle",
            "states": {
                "idle": {"transitions": {"start": "running"}},
                "running": {"transitions": {"stop": "idle"}},
            },
        }

        # Act
        config = FSMConfig.from_dict(data)

        # Assert
        assert config.initial == "idle"
        assert config.state_names() == ["idle", "running"]
        assert isinstance(config.states["idle"], StateDef)
        assert config.states["running"].transitions["stop"] == "idle"

    def test_transitions_kept_by_reference(self):
        """The caller's transitions mapping is not copied."""
        # Arrange
        transitions = {"start": "running"}
        data = {"initial": "idle", "states": {"idle": {"transitions": transitions}}}

        # Act
        config = FSMConfig.from_dict(data)

        # Assert
        assert config.states["idle"].transitions is transitions

    def test_accepts_state_def_values(self):
        """StateDef values pass through unchanged."""
        state = StateDef(transitions={"go": "b"})
        config = FSMConfig.from_dict({"initial": "a", "states": {"a": state}})
        assert config.states["a"] is state

    def test_missing_transitions_key_gives_empty_table(self):
        """A state without 'transitions' has no events."""
        config = FSMConfig.from_dict({"initial": "a", "states": {"a": {}}})
        assert dict(config.states["a"].transitions) == {}

    def test_initial_not_validated(self):
        """An initial state absent from states is accepted."""
        config = FSMConfig.from_dict({"initial": "ghost", "states": {"a": {}}})
        assert config.initial == "ghost"

    def test_dangling_target_not_validated(self):
        """Transition targets naming no state are accepted."""
        config = FSMConfig.from_dict({
            "initial": "a",
            "states": {"a": {"transitions": {"go": "ghost"}}},
        })
        assert config.states["a"].transitions["go"] == "ghost"

    def test_missing_initial_gives_none(self):
        """Config without 'initial' starts from None."""
        config = FSMConfig.from_dict({"states": {"a": {}}})
        assert config.initial is None

    def test_missing_states_gives_empty_table(self):
        """Config without 'states' has no states."""
        config = FSMConfig.from_dict({"initial": "a"})
        assert config.state_names() == []

    def test_non_mapping_config_raises(self):
        """A config that is not a mapping raises ConfigError."""
        with pytest.raises(ConfigError):
            FSMConfig.from_dict(["initial", "a"])  # type: ignore[arg-type]

    def test_non_mapping_states_raises(self):
        """'states' that is not a mapping raises ConfigError."""
        with pytest.raises(ConfigError):
            FSMConfig.from_dict({"initial": "a", "states": ["a"]})

    def test_non_mapping_state_kept(self):
        """A state value that is not a mapping is stored as given."""
        config = FSMConfig.from_dict({"initial": "a", "states": {"a": {}, "b": "junk"}})
        assert config.state_names() == ["a", "b"]
        assert config.states["b"].transitions == "junk"

    def test_non_mapping_transitions_kept(self):
        """A transitions value that is not a mapping is stored as given."""
        config = FSMConfig.from_dict({
            "initial": "a",
            "states": {"a": {"transitions": ["go"]}},
        })
        assert config.states["a"].transitions == ["go"]
