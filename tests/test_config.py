"""
Tests for GameConfig.
"""
import pytest
from fivelines.core.config import GameConfig
from fivelines.core.errors import ConfigError


def test_defaults():
    """Test the default board and seed."""
    config = GameConfig()

    assert config.board_size == 21
    assert config.line_length == 8
    assert config.center == 10
    assert config.validate() is config


@pytest.mark.parametrize("board_size", [13, 15, 21, 31])
def test_valid_sizes(board_size):
    """Test odd sizes from 13 upwards."""
    GameConfig(board_size=board_size).validate()


@pytest.mark.parametrize("board_size", [11, 12, 14, 20, 0, -21])
def test_invalid_sizes(board_size):
    """Test that even or too-small boards are refused."""
    with pytest.raises(ConfigError):
        GameConfig(board_size=board_size).validate()


def test_line_length_minimum():
    """Test that seed arms must be at least a window long."""
    GameConfig(line_length=5).validate()
    with pytest.raises(ConfigError):
        GameConfig(line_length=4).validate()


@pytest.mark.parametrize("kwargs", [
    {"board_size": 21.0},
    {"board_size": "21"},
    {"board_size": True},
    {"line_length": 8.5},
])
def test_non_integer_values(kwargs):
    """Test that non-integer settings are refused."""
    with pytest.raises(ConfigError):
        GameConfig(**kwargs).validate()


def test_config_error_is_value_error():
    """Test that ConfigError can be caught as ValueError."""
    with pytest.raises(ValueError):
        GameConfig(board_size=14).validate()


def test_dict_conversion():
    """Test conversion to and from a dictionary."""
    config = GameConfig(board_size=15, line_length=6)

    data = config.to_dict()
    assert data == {"board_size": 15, "line_length": 6}

    restored = GameConfig.from_dict(data)
    assert restored.board_size == 15
    assert restored.line_length == 6
    assert repr(restored) == "GameConfig(board_size=15, line_length=6)"
