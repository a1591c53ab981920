"""Match driver: opening placements, alternating turns, and loss reporting."""

try:
    from Board import Board
    from engine import referee
    from engine.geometry import P1, opponent, player_symbol
except ImportError:
    from Battle_Isolation_AI.Board import Board
    from Battle_Isolation_AI.engine import referee
    from Battle_Isolation_AI.engine.geometry import P1, opponent, player_symbol


class Isolationgame:
    def __init__(self, first_player, second_player, opening=None, logger=print, renderer=None):
        self.board = Board()
        self.players = {first_player.mark: first_player, second_player.mark: second_player}
        # Placements applied before the first turn, P1 first, alternating.
        self.opening = list(opening or [])
        self.logger = logger
        self.renderer = renderer
        self.plies = 0
        self.history = []
        self.loser = None

    def play(self):
        """Run a single match. Returns the mark of the player who lost."""
        player = P1
        for move in self.opening:
            referee.check_move(move, self.board, player)
            self.board.play(*move, player)
            player = opponent(player)

        last_move = None
        while self.loser is None:
            if self.board.has_lost(self.board.position(player)):
                self.logger(f"Player:{player_symbol(player)} Lost.")
                self.loser = player
                break

            try:
                move = self.players[player].next_move(self.board)
                referee.check_move(move, self.board, player)
            except ValueError as exc:
                self.logger(f"Disqualification: Player {player_symbol(player)} - {exc}")
                self.loser = player
                break

            x, y = move
            self.board.play(x, y, player)
            last_move = move
            self.history.append((player, move))
            self.plies += 1
            self.logger(f"Moved {player_symbol(player)} M: {x}, {y}")
            if self.renderer:
                self.renderer(self.board, last_move, player, None)
            player = opponent(player)

        if self.renderer:
            self.renderer(self.board, last_move, player, self.loser)
        return self.loser
