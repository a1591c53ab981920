"""Position evaluation: differential reachability from each token (flood fill)."""

from collections import deque

try:
    from engine.geometry import CELLS, EMPTY, MOVES, SCORE_PER_CELL, check_player, opponent
except ImportError:
    from Battle_Isolation_AI.engine.geometry import CELLS, EMPTY, MOVES, SCORE_PER_CELL, check_player, opponent


class Scorer:
    """
    Evaluates a board from one player's perspective; positive favors player.
    Scores must stay within +/- MAX_SCORE so they never reach the loss values.
    """

    def get_score(self, board, player):
        raise NotImplementedError


class DistanceScorer(Scorer):
    def get_score(self, board, player):
        return self.reach(board, player) - self.reach(board, opponent(player))

    def reach(self, board, player):
        """
        Breadth-first flood fill over ray moves from player's token.

        Every empty cell reachable through unobstructed rays is discovered once,
        at the layer where it is first seen. Result is
        cells * SCORE_PER_CELL - sum(layer distances), origin included at 0.
        A player with no token yet reaches nothing and scores 0.
        """
        check_player(player)
        cells = board.cells
        origin = board.position(player)
        if origin == 0:
            return 0
        steps = [-1] * CELLS
        steps[origin] = 0
        queue = deque([origin])

        total_cells = 0
        total_steps = 0
        while queue:
            pos = queue.popleft()
            total_steps += steps[pos]
            total_cells += 1
            step = steps[pos] + 1
            for move in MOVES:
                p = pos + move
                # A discovered cell ends the ray like an occupied one.
                while cells[p] == EMPTY and steps[p] == -1:
                    steps[p] = step
                    queue.append(p)
                    p += move

        return total_cells * SCORE_PER_CELL - total_steps
