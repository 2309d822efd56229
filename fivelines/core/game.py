"""
Game implementation for Five-Dot Lines.
"""
import logging
from collections import namedtuple
from enum import Enum

from .board import Board
from .config import DEFAULT_BOARD_SIZE, DEFAULT_LINE_LENGTH, GameConfig
from .enumerator import all_legal_moves, any_legal_move_exists
from .evaluator import NO_SCORE, evaluate
from .ledger import ScoredSegmentLedger

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = 'playing'
    GAME_OVER = 'game_over'


class Rejection(Enum):
    """Why a submitted move was not committed."""
    OUT_OF_BOUNDS = 'out_of_bounds'
    CELL_OCCUPIED = 'cell_occupied'
    ILLEGAL_MOVE = 'illegal_move'
    GAME_OVER = 'game_over'


MoveResult = namedtuple('MoveResult', ['accepted', 'count', 'windows', 'is_game_over', 'rejection'])


def new_game(board_size=DEFAULT_BOARD_SIZE, line_length=DEFAULT_LINE_LENGTH):
    """
    Create a seeded board and an empty ledger.

    Args:
        board_size (int): Odd board size, at least 13
        line_length (int): Seed arm length, at least 5

    Returns:
        tuple: (Board, ScoredSegmentLedger)

    Raises:
        ConfigError: if the configuration is invalid
    """
    config = GameConfig(board_size, line_length).validate()
    return Board(config.board_size, config.line_length), ScoredSegmentLedger()


class Game:
    """
    Manages a Five-Dot Lines game session.

    Commits legal moves to the board and ledger, keeps the score and move
    counter, detects the end of the game and owns the once-per-game hint.
    """

    def __init__(self, config=None):
        """
        Initialize a new game.

        Args:
            config (GameConfig, optional): Board size and seed length;
                defaults to a 21x21 board with arms of 8

        Raises:
            ConfigError: if the configuration is invalid
        """
        self.config = (config or GameConfig()).validate()
        self.board = Board(self.config.board_size, self.config.line_length)
        self.ledger = ScoredSegmentLedger()
        self.score = 0
        self.move_count = 0
        self.hint_used = False
        self.revealed_moves = []
        self._status = GameStatus.PLAYING
        self._update_status()

    @property
    def status(self):
        return self._status

    @property
    def is_game_over(self):
        return self._status is GameStatus.GAME_OVER

    def preview(self, x, y):
        """
        Evaluate (x, y) without committing anything, e.g. for hover feedback.

        Returns:
            Evaluation: What the move would score; nothing once the game is over
        """
        if self.is_game_over:
            return NO_SCORE
        return evaluate(self.board, self.ledger, x, y)

    def submit_move(self, x, y):
        """
        Place a dot if it scores at least one window.

        Args:
            x (int): Column of the dot
            y (int): Row of the dot

        Returns:
            MoveResult: accepted flag, windows scored, whether the game is
                now over, and the rejection reason when not accepted
        """
        if self.is_game_over:
            logger.debug("Move (%s, %s) ignored: game is over", x, y)
            return self._rejected(Rejection.GAME_OVER)

        if not self.board.in_bounds(x, y):
            logger.debug("Move (%s, %s) rejected: out of bounds", x, y)
            return self._rejected(Rejection.OUT_OF_BOUNDS)

        if self.board.is_occupied(x, y):
            logger.debug("Move (%s, %s) rejected: cell occupied", x, y)
            return self._rejected(Rejection.CELL_OCCUPIED)

        result = evaluate(self.board, self.ledger, x, y)
        if result.count == 0:
            logger.debug("Move (%s, %s) rejected: completes no unscored five", x, y)
            return self._rejected(Rejection.ILLEGAL_MOVE)

        assert all((x, y) in window for window in result.windows)
        self.board.place(x, y)
        self.ledger.commit(result.windows)
        self.score += result.count
        self.move_count += 1
        logger.info("Move %d at (%d, %d) scored %d (total %d)",
                    self.move_count, x, y, result.count, self.score)

        self._update_status()
        return MoveResult(True, result.count, result.windows, self.is_game_over, None)

    def reveal_moves(self):
        """
        List all legal moves, once per game.

        Returns:
            list or None: LegalMove tuples on first use while playing,
                None if the hint was already used or the game is over
        """
        if self.hint_used or self.is_game_over:
            return None
        self.revealed_moves = all_legal_moves(self.board, self.ledger)
        self.hint_used = True
        logger.debug("Hint revealed %d legal moves", len(self.revealed_moves))
        return list(self.revealed_moves)

    def reset(self):
        """Start over with a seeded board, an empty ledger and a fresh hint."""
        self.board.reset()
        self.ledger.clear()
        self.score = 0
        self.move_count = 0
        self.hint_used = False
        self.revealed_moves = []
        self._status = GameStatus.PLAYING
        self._update_status()
        logger.info("Game reset (%dx%d, arms of %d)",
                    self.config.board_size, self.config.board_size, self.config.line_length)

    def _rejected(self, reason):
        return MoveResult(False, 0, (), self.is_game_over, reason)

    def _update_status(self):
        if not any_legal_move_exists(self.board, self.ledger):
            self._status = GameStatus.GAME_OVER
            logger.info("Game over: no legal moves remain, final score %d", self.score)


def submit_move(session, x, y):
    """Submit a move to a Game session; see ``Game.submit_move``."""
    return session.submit_move(x, y)
