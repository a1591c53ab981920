"""Board state container with a sentinel ring and loss detection."""

try:
    from engine.geometry import BORDER, CELLS, EMPTY, MOVES, P1, SIZE, WIDTH, check_player, player_symbol, xy_to_pos
    from engine.isolation_rules import iter_moves
except ImportError:
    from Battle_Isolation_AI.engine.geometry import BORDER, CELLS, EMPTY, MOVES, P1, SIZE, WIDTH, check_player, player_symbol, xy_to_pos
    from Battle_Isolation_AI.engine.isolation_rules import iter_moves


class Board:
    def __init__(self):
        # Linear 7x7 array; ring of BORDER around a 5x5 playable region.
        self.cells = [EMPTY] * CELLS
        for i in range(WIDTH):
            self.cells[i] = BORDER
            self.cells[(WIDTH - 1) * WIDTH + i] = BORDER
            self.cells[i * WIDTH] = BORDER
            self.cells[i * WIDTH + WIDTH - 1] = BORDER
        # 0 until the player's first placement
        self.p1 = 0
        self.p2 = 0

    def in_bounds(self, x, y):
        return 0 <= x < SIZE and 0 <= y < SIZE

    def is_legal(self, x, y):
        """True iff the playable cell (x, y) is empty. x is the row, y the column."""
        return self.cells[xy_to_pos(x, y)] == EMPTY

    def play(self, x, y, player):
        """
        Mark (x, y) for player and move the player's token there.
        The cell is not checked; callers validate with is_legal or move generation.
        """
        pos = xy_to_pos(x, y)
        self.cells[pos] = player
        if player == P1:
            self.p1 = pos
        else:
            self.p2 = pos

    def position(self, player):
        return self.p1 if player == P1 else self.p2

    def has_lost(self, pos):
        """True iff the token at pos cannot take a single step in any direction."""
        if pos == 0:
            return False
        cells = self.cells
        return all(cells[pos + move] != EMPTY for move in MOVES)

    def render(self):
        """Return the playable grid as text: player digits, X for trail cells."""
        return self._render_cells(self.cells)

    def render_possible_moves(self, player):
        """Like render(), with every destination open to player marked '*'."""
        check_player(player)
        pos = self.position(player)
        marks = set(iter_moves(self.cells, pos)) if pos else set()
        return self._render_cells(self.cells, marks)

    def _render_cells(self, cells, marks=()):
        lines = []
        for i in range(1, WIDTH - 1):
            row = "| "
            for j in range(1, WIDTH - 1):
                pos = i * WIDTH + j
                cell = cells[pos]
                if pos in marks:
                    row += "* | "
                elif cell == EMPTY:
                    row += "  | "
                elif pos in (self.p1, self.p2):
                    row += player_symbol(cell) + " | "
                else:
                    row += "X | "
            lines.append(row.rstrip())
        return "\n".join(lines)

    def __str__(self):
        return self.render()
