"""Tests for the classic game logic.

Covers:
- move validation and IllegalMove
- win before draw ordering
- turn switching and terminal rounds
- score tracking across rounds and reset_scores
"""

import pytest

from tictactoe.board import Cell, Player
from tictactoe.game_logic import (
    GameLogic,
    IllegalMove,
    RoundStatus,
    Scores,
    ScoreTracker,
    TurnManager,
    RoundState,
)

X_ROW_WIN = [(0, 0), (1, 1), (0, 1), (1, 2), (0, 2)]
DRAW = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
# last move fills the board and completes row 0
FULL_BOARD_WIN = [(0, 0), (1, 0), (0, 2), (1, 1), (1, 2), (2, 1), (2, 0), (2, 2), (0, 1)]


def play(game, moves):
    result = None
    for row, col in moves:
        result = game.attempt_move(row, col)
    return result


@pytest.fixture
def game():
    return GameLogic()


class TestInitialState:
    def test_fresh_game(self, game):
        assert game.current_player is Player.X
        assert game.state == RoundState()
        assert game.state.status is RoundStatus.IN_PROGRESS
        assert game.scores == Scores(0, 0, 0)
        assert all(c is Cell.EMPTY for row in game.board for c in row)


class TestAttemptMove:
    def test_accepted_move(self, game):
        result = game.attempt_move(1, 1)

        assert result.placed == (1, 1)
        assert result.player is Player.X
        assert result.evicted is None
        assert result.state.status is RoundStatus.IN_PROGRESS
        assert result.next_player is Player.O
        assert game.board[1][1] is Cell.X
        assert game.current_player is Player.O

    def test_turns_alternate(self, game):
        players = [game.attempt_move(r, c).player for r, c in [(0, 0), (1, 1), (2, 2)]]
        assert players == [Player.X, Player.O, Player.X]

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_range(self, game, row, col):
        with pytest.raises(IllegalMove) as exc_info:
            game.attempt_move(row, col)
        assert (exc_info.value.row, exc_info.value.col) == (row, col)
        assert game.current_player is Player.X

    @pytest.mark.parametrize("owner_moves", [[(0, 0)], [(1, 1), (0, 0)]])
    def test_occupied_cell_changes_nothing(self, game, owner_moves):
        """Occupied by either player: rejected, state untouched."""
        play(game, owner_moves)
        board, player, state, scores = game.board, game.current_player, game.state, game.scores

        with pytest.raises(IllegalMove, match="cell taken"):
            game.attempt_move(0, 0)

        assert game.board == board
        assert game.current_player is player
        assert game.state == state
        assert game.scores == scores

    def test_illegal_move_is_value_error(self, game):
        game.attempt_move(0, 0)
        with pytest.raises(ValueError):
            game.attempt_move(0, 0)


class TestRoundOutcome:
    def test_row_win_scenario(self, game):
        result = play(game, X_ROW_WIN)

        assert result.state.status is RoundStatus.WON
        assert result.state.winner is Player.X
        assert result.state.winning_line == ((0, 0), (0, 1), (0, 2))
        assert result.scores == Scores(x_wins=1, o_wins=0, draws=0)
        assert game.state == result.state

    def test_current_player_kept_on_win(self, game):
        result = play(game, X_ROW_WIN)
        assert result.next_player is Player.X
        assert game.current_player is Player.X

    def test_o_can_win(self, game):
        result = play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (2, 2), (1, 2)])
        assert result.state.winner is Player.O
        assert result.scores == Scores(0, 1, 0)

    def test_draw(self, game):
        result = play(game, DRAW)

        assert result.state.status is RoundStatus.DRAWN
        assert result.state.winner is None
        assert result.state.winning_line is None
        assert result.scores == Scores(0, 0, 1)

    def test_full_board_with_line_is_a_win(self, game):
        result = play(game, FULL_BOARD_WIN)

        assert all(c is not Cell.EMPTY for row in game.board for c in row)
        assert result.state.status is RoundStatus.WON
        assert result.state.winner is Player.X
        assert result.scores.draws == 0

    @pytest.mark.parametrize("moves", [X_ROW_WIN, DRAW])
    def test_no_moves_after_round_ends(self, game, moves):
        play(game, moves)
        board, scores = game.board, game.scores

        for row in range(3):
            for col in range(3):
                with pytest.raises(IllegalMove, match="round is over"):
                    game.attempt_move(row, col)

        assert game.board == board
        assert game.scores == scores


class TestRounds:
    def test_new_round_clears_board_keeps_scores(self, game):
        play(game, X_ROW_WIN)
        game.new_round()

        assert all(c is Cell.EMPTY for row in game.board for c in row)
        assert game.state.status is RoundStatus.IN_PROGRESS
        assert game.current_player is Player.X
        assert game.scores == Scores(1, 0, 0)

    def test_new_round_mid_game(self, game):
        play(game, [(0, 0), (1, 1), (2, 2)])
        game.new_round()

        assert game.current_player is Player.X
        game.attempt_move(0, 0)

    def test_scores_accumulate(self, game):
        play(game, X_ROW_WIN)
        game.new_round()
        play(game, DRAW)
        game.new_round()
        play(game, X_ROW_WIN)

        assert game.scores == Scores(2, 0, 1)

    def test_reset_scores(self, game):
        play(game, X_ROW_WIN)
        game.new_round()
        game.attempt_move(1, 1)
        game.attempt_move(0, 0)

        game.reset_scores()

        assert game.scores == Scores(0, 0, 0)
        assert game.state.status is RoundStatus.IN_PROGRESS
        assert game.current_player is Player.X
        assert all(c is Cell.EMPTY for row in game.board for c in row)


class TestHelpers:
    def test_turn_manager(self):
        turns = TurnManager()
        turns.advance()
        assert turns.current is Player.O
        turns.conclude(RoundState(RoundStatus.DRAWN))
        assert turns.state.is_over
        turns.reset()
        assert turns.current is Player.X
        assert not turns.state.is_over

    def test_score_tracker_ignores_in_progress(self):
        tracker = ScoreTracker()
        tracker.record(RoundState())
        tracker.record(RoundState(RoundStatus.WON, Player.O))
        tracker.record(RoundState(RoundStatus.DRAWN))
        assert tracker.snapshot() == Scores(0, 1, 1)
        tracker.reset()
        assert tracker.snapshot() == Scores()
