"""
Game configuration for Five-Dot Lines.
"""
from typing import Dict

from .errors import ConfigError

DEFAULT_BOARD_SIZE = 21
DEFAULT_LINE_LENGTH = 8
MIN_BOARD_SIZE = 13
WINDOW_LENGTH = 5


class GameConfig:
    """Board extent and seed line length for a game."""

    def __init__(self,
                 board_size: int = DEFAULT_BOARD_SIZE,
                 line_length: int = DEFAULT_LINE_LENGTH):
        self.board_size = board_size
        self.line_length = line_length

    @property
    def center(self) -> int:
        """Index of the middle row/column (well defined because the size is odd)."""
        return self.board_size // 2

    def validate(self) -> 'GameConfig':
        """
        Check the configuration.

        Returns:
            GameConfig: self, so calls can be chained

        Raises:
            ConfigError: if the board size is even or below 13, or the
                line length is shorter than a scoring window
        """
        if not isinstance(self.board_size, int) or isinstance(self.board_size, bool):
            raise ConfigError(f"board_size must be an integer, got {self.board_size!r}")
        if not isinstance(self.line_length, int) or isinstance(self.line_length, bool):
            raise ConfigError(f"line_length must be an integer, got {self.line_length!r}")
        if self.board_size < MIN_BOARD_SIZE:
            raise ConfigError(f"board_size must be at least {MIN_BOARD_SIZE}, got {self.board_size}")
        if self.board_size % 2 == 0:
            raise ConfigError(f"board_size must be odd, got {self.board_size}")
        if self.line_length < WINDOW_LENGTH:
            raise ConfigError(f"line_length must be at least {WINDOW_LENGTH}, got {self.line_length}")
        return self

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict)

    def __repr__(self):
        return f"GameConfig(board_size={self.board_size}, line_length={self.line_length})"
