"""Baseline that answers by reflecting the opponent through the board center."""

from .move_selector import Strategy

try:
    from engine.geometry import SIZE, check_player, opponent, pos_to_xy, xy_to_pos
except ImportError:
    from Battle_Isolation_AI.engine.geometry import SIZE, check_player, opponent, pos_to_xy, xy_to_pos


class MirrorStrategy(Strategy):
    """
    Point-reflect the opponent's token through the center cell.
    No legality check: the reflected cell may be occupied or off the mover's rays.
    """

    def get_move(self, board, player, max_depth=None):
        check_player(player)
        opp_pos = board.position(opponent(player))
        if opp_pos == 0:
            raise ValueError("Opponent has no token to mirror")
        ox, oy = pos_to_xy(opp_pos)
        return xy_to_pos(SIZE - 1 - ox, SIZE - 1 - oy)
