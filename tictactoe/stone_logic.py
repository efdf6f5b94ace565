"""
Three-stone variant.

Each player may own at most MAX_STONES marks at once. A move by a player
who already owns that many first lifts their oldest surviving stone and
then places the new one, as a single step: win and draw are only checked
once both have happened, so the lifted stone never counts towards a line.
"""
import logging
from collections import deque

from .board import Player
from .game_logic import GameLogic

logger = logging.getLogger(__name__)

MAX_STONES = 3


class StoneRegistry:
    """
    per-player placement order, oldest first
    """
    def __init__(self, limit=MAX_STONES):
        self.limit = limit
        self._positions = {Player.X: deque(), Player.O: deque()}

    def __len__(self):
        return sum(len(q) for q in self._positions.values())

    def positions(self, player):
        return tuple(self._positions[player])

    def is_full(self, player):
        return len(self._positions[player]) >= self.limit

    def oldest(self, player):
        queue = self._positions[player]
        return queue[0] if queue else None

    def pop_oldest(self, player):
        return self._positions[player].popleft()

    def append(self, player, coord):
        # callers evict first, the bound is never exceeded
        if self.is_full(player):
            raise RuntimeError(f"{player.value} already holds {self.limit} stones")
        self._positions[player].append(coord)

    def clear(self):
        for queue in self._positions.values():
            queue.clear()


class StoneGameLogic(GameLogic):
    """
    tic-tac-toe where a fourth stone replaces the player's oldest one
    """
    title = "Tic-Tac-Toe V2 - three-stone rule"

    def __init__(self):
        super().__init__()
        self._registry = StoneRegistry()

    def stones(self, player):
        """
        coords currently owned by player, oldest first
        """
        return self._registry.positions(player)

    def next_eviction(self, player):
        """
        coord the player's next move would lift, None below the limit
        """
        if self._registry.is_full(player):
            return self._registry.oldest(player)
        return None

    def new_round(self):
        self._registry.clear()
        super().new_round()

    def _place(self, row, col, player):
        evicted = None
        if self._registry.is_full(player):
            evicted = self._registry.pop_oldest(player)
            self._board.clear(*evicted)
            logger.debug("%s stone at %s removed", player.value, evicted)
        self._board.place(row, col, player)
        self._registry.append(player, (row, col))
        return evicted
