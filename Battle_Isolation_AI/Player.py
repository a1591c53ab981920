"""Player controllers: strategy-driven AI or text-input human."""

try:
    from engine.geometry import pos_to_xy
except ImportError:
    from Battle_Isolation_AI.engine.geometry import pos_to_xy


class Player:
    def __init__(self, mark):
        self.mark = mark

    def next_move(self, board):
        """Return (x, y) destination for the next move."""
        raise NotImplementedError


class AIPlayer(Player):
    """Adapts a move-selection strategy (linear index) to (x, y) moves."""

    def __init__(self, mark, strategy, depth=25):
        super().__init__(mark)
        self.strategy = strategy
        self.depth = depth

    def next_move(self, board):
        pos = self.strategy.get_move(board, self.mark, self.depth)
        if pos is None:
            return None
        return pos_to_xy(pos)


class HumanPlayer(Player):
    def __init__(self, mark, reader=input):
        super().__init__(mark)
        self.reader = reader

    def next_move(self, board):
        raw = self.reader("Enter move as 'x y' (row col, 0-indexed): ").strip()
        try:
            x_str, y_str = raw.split()
            return int(x_str), int(y_str)
        except ValueError as exc:
            raise ValueError("Invalid input format; expected two integers") from exc
