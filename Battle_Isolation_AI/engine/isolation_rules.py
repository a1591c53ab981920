"""Queen-style ray moves with occlusion: a token stops before any non-empty cell."""

from .geometry import EMPTY, MOVES


def iter_moves(cells, pos):
    """Yield every destination reachable from pos, ray by ray, nearest first."""
    for move in MOVES:
        p = pos + move
        while cells[p] == EMPTY:
            yield p
            p += move


def legal_moves(board, player):
    """Return all destinations for player's token (empty if not yet placed)."""
    pos = board.position(player)
    if pos == 0:
        return []
    return list(iter_moves(board.cells, pos))


def is_reachable(board, player, pos):
    return pos in legal_moves(board, player)
