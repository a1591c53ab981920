"""Board geometry: cell markers, ray deltas, and coordinate translation.

The 5x5 playable grid is stored in a 7x7 array. Row/column 0 and 6 hold
BORDER so that walking any ray off the playable area always stops on a
non-empty cell.
"""

# Cell markers
EMPTY = 0
P1 = 1
P2 = 2
BORDER = 5

SIZE = 5
WIDTH = SIZE + 2
CELLS = WIDTH * WIDTH

# Right, left, down, up, then the four diagonals on the 7-wide layout.
MOVES = (1, -1, WIDTH, -WIDTH, WIDTH - 1, -(WIDTH - 1), WIDTH + 1, -(WIDTH + 1))

SCORE_PER_CELL = 16
LOSS_VALUE = -1000
MAX_SCORE = SIZE * SIZE * SCORE_PER_CELL  # bound on any evaluation, within the loss values
INF = 1000000


def xy_to_pos(x, y):
    """Translate playable (row, col) in [0, 4] to a linear index."""
    return x * WIDTH + y + WIDTH + 1


def pos_to_xy(pos):
    return (pos - WIDTH - 1) // WIDTH, (pos - WIDTH - 1) % WIDTH


def opponent(player):
    return P2 if player == P1 else P1


def player_symbol(player):
    return "1" if player == P1 else "2"


def check_player(player):
    if player not in (P1, P2):
        raise ValueError(f"player must be {P1} or {P2}, got {player!r}")
