"""Tests for Isolationgame turn handling, loss reporting, and full matches."""

import pytest

from Battle_Isolation_AI.Isolationgame import Isolationgame
from Battle_Isolation_AI.Player import AIPlayer, HumanPlayer, Player
from Battle_Isolation_AI.ai import transposition
from Battle_Isolation_AI.ai.mirror import MirrorStrategy
from Battle_Isolation_AI.ai.search_negamax import Negamax
from Battle_Isolation_AI.engine.geometry import EMPTY, P1, P2, opponent, xy_to_pos
from Battle_Isolation_AI.utils.logger import silent


class SeqPlayer(Player):
    """Deterministic player that plays a fixed move sequence."""

    def __init__(self, mark, moves):
        super().__init__(mark)
        self._moves = list(moves)
        self._idx = 0

    def next_move(self, board):
        if self._idx >= len(self._moves):
            raise ValueError("No more scripted moves")
        mv = self._moves[self._idx]
        self._idx += 1
        return mv


# P1 ends on (1, 1) with an open diagonal to (3, 3); P2 ends on (4, 4)
# with (3, 3) as its only free neighbor.
TRAP_OPENING = [(0, 1), (3, 4), (0, 0), (4, 3), (1, 1), (4, 4)]

# Ten cells consumed by legal moves; fifteen remain.
MIDGAME_OPENING = [(0, 0), (0, 1), (4, 0), (4, 1), (2, 2), (4, 4), (2, 4), (3, 3), (0, 4), (3, 0)]


def test_opening_is_applied_in_turn_order():
    game = Isolationgame(SeqPlayer(P1, []), SeqPlayer(P2, []), opening=TRAP_OPENING, logger=silent)
    game.play()
    assert game.board.p1 == xy_to_pos(1, 1)
    assert game.board.p2 == xy_to_pos(4, 4)
    assert game.board.cells.count(EMPTY) == 25 - len(TRAP_OPENING)


def test_move_that_isolates_opponent_ends_the_match():
    messages = []
    game = Isolationgame(SeqPlayer(P1, [(3, 3)]), SeqPlayer(P2, []), opening=TRAP_OPENING, logger=messages.append)
    loser = game.play()
    assert loser == P2
    assert game.plies == 1
    assert game.history == [(P1, (3, 3))]
    assert messages == ["Moved 1 M: 3, 3", "Player:2 Lost."]


def test_negamax_player_finds_the_isolating_move():
    game = Isolationgame(
        AIPlayer(P1, Negamax(), depth=3),
        SeqPlayer(P2, []),
        opening=TRAP_OPENING,
        logger=silent,
    )
    assert game.play() == P2
    assert game.history[0] == (P1, (3, 3))


def test_unreachable_move_disqualifies_mover():
    messages = []
    game = Isolationgame(SeqPlayer(P1, [(2, 4)]), SeqPlayer(P2, []), opening=TRAP_OPENING, logger=messages.append)
    assert game.play() == P1
    assert game.plies == 0
    assert messages[-1].startswith("Disqualification: Player 1")


def test_mirror_baseline_is_disqualified_for_unreachable_reflection():
    game = Isolationgame(
        AIPlayer(P1, MirrorStrategy()),
        AIPlayer(P2, Negamax(), depth=3),
        opening=[(0, 0), (0, 1)],
        logger=silent,
    )
    # Reflection of (0, 1) is (4, 3), off every ray from (0, 0).
    assert game.play() == P1


def test_final_render_reports_loser():
    final = []

    def renderer(board, last_move, player, loser):
        if loser is not None:
            final.append((last_move, loser))

    game = Isolationgame(
        SeqPlayer(P1, [(3, 3)]), SeqPlayer(P2, []), opening=TRAP_OPENING, logger=silent, renderer=renderer
    )
    game.play()
    assert final == [((3, 3), P2)]


def check_finished_match(game, loser, empty_before):
    assert loser in (P1, P2)
    assert game.plies <= empty_before
    assert game.board.has_lost(game.board.position(loser))
    moved = [player for player, _ in game.history]
    assert all(moved[i] != moved[i + 1] for i in range(len(moved) - 1))
    cells = [mv for _, mv in game.history]
    assert len(cells) == len(set(cells))
    if moved:
        assert opponent(moved[-1]) == loser


def test_full_depth_negamax_match_from_midgame_terminates():
    game = Isolationgame(
        AIPlayer(P1, Negamax(), depth=25),
        AIPlayer(P2, Negamax(), depth=25),
        opening=MIDGAME_OPENING,
        logger=silent,
    )
    loser = game.play()
    check_finished_match(game, loser, empty_before=25 - len(MIDGAME_OPENING))


def test_shallow_negamax_match_from_adjacent_corner_opening():
    game = Isolationgame(
        AIPlayer(P1, Negamax(), depth=3),
        AIPlayer(P2, Negamax(), depth=3),
        opening=[(0, 0), (0, 1)],
        logger=silent,
    )
    loser = game.play()
    check_finished_match(game, loser, empty_before=23)


def test_full_depth_negamax_match_from_adjacent_corner_opening():
    first = Negamax()
    second = Negamax()
    game = Isolationgame(
        AIPlayer(P1, first, depth=25),
        AIPlayer(P2, second, depth=25),
        opening=[(0, 0), (0, 1)],
        logger=silent,
    )
    loser = game.play()
    check_finished_match(game, loser, empty_before=23)
    assert 0 < first.peak_cache_entries <= transposition.DEFAULT_MAX_ENTRIES
    assert second.peak_cache_entries <= transposition.DEFAULT_MAX_ENTRIES


def test_human_player_parses_input():
    assert HumanPlayer(P1, reader=lambda prompt: " 1 2 ").next_move(None) == (1, 2)
    with pytest.raises(ValueError):
        HumanPlayer(P1, reader=lambda prompt: "one two").next_move(None)
