import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Player, find_winning_line, in_range

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


class IllegalMove(ValueError):
    """
    rejected move, nothing on the board changed
    """
    def __init__(self, row, col, reason):
        super().__init__(f"illegal move at ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason


class RoundStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class RoundState:
    status: RoundStatus = RoundStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[Coord, Coord, Coord]] = None  # display only

    @property
    def is_over(self):
        return self.status is not RoundStatus.IN_PROGRESS


@dataclass(frozen=True)
class Scores:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0


@dataclass(frozen=True)
class MoveResult:
    placed: Coord
    player: Player
    evicted: Optional[Coord]
    state: RoundState
    scores: Scores
    next_player: Player  # unchanged when the round ended


class TurnManager:
    """
    whose turn it is and whether the round is still running
    """
    def __init__(self):
        self.reset()

    def reset(self):
        # X opens every round
        self.current = Player.X
        self.state = RoundState()

    def advance(self):
        self.current = self.current.other

    def conclude(self, state):
        # terminal states only move forward via reset()
        self.state = state


class ScoreTracker:
    """
    session counters, survive new rounds
    """
    def __init__(self):
        self.reset()

    def reset(self):
        self.wins = {Player.X: 0, Player.O: 0}
        self.draws = 0

    def record(self, state):
        if state.status is RoundStatus.WON:
            self.wins[state.winner] += 1
        elif state.status is RoundStatus.DRAWN:
            self.draws += 1

    def snapshot(self):
        return Scores(self.wins[Player.X], self.wins[Player.O], self.draws)


class GameLogic:
    """
    classic tic-tac-toe rules and state

    one instance per game window; the ui calls attempt_move for every
    clicked cell and renders from the returned result and the queries
    """
    title = "Tic-Tac-Toe"

    def __init__(self):
        """
        init board, turn and score counters
        """
        self._board = Board()
        self._turns = TurnManager()
        self._scores = ScoreTracker()

    # -- queries ------------------------------------------------------------

    @property
    def board(self):
        return self._board.snapshot()

    @property
    def current_player(self):
        return self._turns.current

    @property
    def state(self):
        return self._turns.state

    @property
    def scores(self):
        return self._scores.snapshot()

    # -- commands -----------------------------------------------------------

    def attempt_move(self, row, col) -> MoveResult:
        """
        place the current player's mark, check result
        raises IllegalMove when the move is rejected
        """
        self._validate(row, col)
        player = self._turns.current
        evicted = self._place(row, col, player)
        logger.debug("%s placed at (%d, %d)", player.value, row, col)

        # win strictly before draw: full board + line is a win
        winner, line = find_winning_line(self._board)
        if winner is not None:
            self._finish(RoundState(RoundStatus.WON, winner, line))
        elif self._board.is_full():
            self._finish(RoundState(RoundStatus.DRAWN))
        else:
            self._turns.advance()

        return MoveResult(
            placed=(row, col),
            player=player,
            evicted=evicted,
            state=self._turns.state,
            scores=self._scores.snapshot(),
            next_player=self._turns.current,
        )

    def new_round(self):
        """
        clear board, X to move
        """
        self._board = Board()
        self._turns.reset()
        logger.debug("new round")

    def reset_scores(self):
        # scores never reset without a fresh board
        self._scores.reset()
        logger.info("scores reset")
        self.new_round()

    # -- internals ----------------------------------------------------------

    def _validate(self, row, col):
        if self._turns.state.is_over:
            raise IllegalMove(row, col, "round is over")
        if not in_range(row, col):
            raise IllegalMove(row, col, "outside the board")
        if not self._board.is_empty(row, col):
            raise IllegalMove(row, col, "cell taken")

    def _place(self, row, col, player):
        """
        write the mark, returns the evicted coord (never one here)
        """
        self._board.place(row, col, player)
        return None

    def _finish(self, state):
        self._turns.conclude(state)
        self._scores.record(state)
        if state.status is RoundStatus.WON:
            logger.info("player %s wins via %s", state.winner.value, state.winning_line)
        else:
            logger.info("round drawn")
