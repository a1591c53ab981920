"""Move validation for the match driver: bounds, occupancy, and ray reachability."""

from . import isolation_rules
from .geometry import player_symbol, xy_to_pos


def check_move(move, board, player):
    """
    Validate a destination (x, y) for player.
    Raises ValueError on invalid moves. A player without a token may place anywhere empty.
    """
    if move is None:
        raise ValueError(f"Player {player_symbol(player)} returned no move")

    x, y = move
    if not board.in_bounds(x, y):
        raise ValueError(f"Move out of bounds: {x}, {y}")
    if not board.is_legal(x, y):
        raise ValueError(f"Cell already occupied: {x}, {y}")

    if board.position(player) != 0 and not isolation_rules.is_reachable(board, player, xy_to_pos(x, y)):
        raise ValueError(f"Cell not reachable by a straight unobstructed move: {x}, {y}")

    return True
