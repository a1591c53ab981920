"""Negamax with alpha-beta pruning over ray moves, to a fixed depth."""

import time

from . import transposition
from .move_selector import Strategy
from .scorer import DistanceScorer

try:
    from engine.geometry import EMPTY, INF, LOSS_VALUE, MAX_SCORE, MOVES, check_player, opponent
    from engine.isolation_rules import iter_moves
except ImportError:
    from Battle_Isolation_AI.engine.geometry import EMPTY, INF, LOSS_VALUE, MAX_SCORE, MOVES, check_player, opponent
    from Battle_Isolation_AI.engine.isolation_rules import iter_moves


class NegamaxSearcher:
    """
    Encapsulates the state of one negamax search on a shared board.

    Each trial move only marks its destination cell and clears it again
    afterwards; the board's stored token positions keep their root values, so
    the scorer at the horizon reads the root positions.

    Below the root, moves are ordered (cached best move, then immediate
    isolation of the opponent, then mobility), and positions where the two
    tokens can no longer reach a common cell are resolved exactly from each
    token's longest path. Neither changes the value of any node, and the root
    still tries moves in direction order, so ties resolve to the first
    direction's move.
    """

    def __init__(
        self,
        board,
        player,
        max_depth,
        scorer=None,
        use_cache=True,
        zobrist_table=None,
        cache=None,
        path_cache=None,
        cache_entries=transposition.DEFAULT_MAX_ENTRIES,
    ):
        check_player(player)
        if max_depth < 2:
            raise ValueError(f"max_depth must be at least 2 to expand the root, got {max_depth}")
        self.board = board
        self.player = player
        self.max_depth = max_depth
        self.scorer = scorer or DistanceScorer()
        self.cache = None
        self.zobrist_table = None
        if use_cache:
            self.cache = cache if cache is not None else transposition.TranspositionTable(cache_entries)
            self.zobrist_table = zobrist_table or transposition.zobrist_init()
        # Longest paths depend only on geometry, so callers may share this across searches.
        self.path_cache = path_cache if path_cache is not None else transposition.TranspositionTable(cache_entries)

        # Internal state
        self.node_counter = 0
        self.evaluations = 0
        self.start_time = None
        self.elapsed = 0.0

    def choose_move(self):
        """Search from the root and return (score, destination or None)."""
        board = self.board
        ap_pos = board.position(self.player)
        pp_pos = board.position(opponent(self.player))
        if ap_pos == 0 or pp_pos == 0:
            raise ValueError("Both tokens must be placed before searching")

        self.start_time = time.time()
        root_hash = transposition.hash_board(board, self.zobrist_table) if self.cache is not None else 0
        score, move = self._negamax(ap_pos, pp_pos, self.player, 1, -INF, INF, root_hash)
        self.elapsed = time.time() - self.start_time
        return score, move

    def _negamax(self, ap_pos, pp_pos, player, depth, alpha, beta, current_hash):
        self.node_counter += 1
        board = self.board

        # Deeper losses score higher: the loser delays, the winner hurries.
        if board.has_lost(ap_pos):
            return LOSS_VALUE + depth, None

        if depth == self.max_depth:
            self.evaluations += 1
            return self.scorer.get_score(board, player), None

        # No line from here loses before depth + 2 or wins before depth + 1.
        floor = LOSS_VALUE + depth + 2
        if floor <= -MAX_SCORE:
            ceiling = -(LOSS_VALUE + depth + 1)
            if ceiling <= alpha:
                return ceiling, None
            if floor >= beta:
                return floor, None
            alpha = max(alpha, floor)
            beta = min(beta, ceiling)

        key = None
        tt_move = None
        alpha_orig = alpha
        if self.cache is not None:
            key = (current_hash << 12) | (ap_pos << 6) | pp_pos
            cached = self.cache.get(key)
            if cached is not None:
                cached_score, cached_flag, tt_move = cached
                if cached_flag == transposition.EXACT:
                    return cached_score, tt_move
                if cached_flag == transposition.LOWER:
                    alpha = max(alpha, cached_score)
                else:
                    beta = min(beta, cached_score)
                if alpha >= beta:
                    return cached_score, tt_move

        if depth > 1:
            resolved = self._resolve_separated(ap_pos, pp_pos, depth)
            if resolved is not None:
                return resolved, None

        best_score, best_move = self._search_moves(ap_pos, pp_pos, player, depth, alpha, beta, current_hash, tt_move)

        if key is not None:
            self.cache.store(key, best_score, alpha_orig, beta, best_move)
        return best_score, best_move

    def _search_moves(self, ap_pos, pp_pos, player, depth, alpha, beta, current_hash, tt_move):
        cells = self.board.cells
        best_score = -INF
        best_move = None
        mark = transposition.mark_index(player)
        if depth == 1:
            moves = list(iter_moves(cells, ap_pos))
        else:
            moves = self._order_moves(ap_pos, pp_pos, tt_move)

        for pos in moves:
            cells[pos] = player
            next_hash = current_hash ^ self.zobrist_table[pos][mark] if self.cache is not None else 0
            try:
                child_score, _ = self._negamax(pp_pos, pos, opponent(player), depth + 1, -beta, -alpha, next_hash)
            finally:
                cells[pos] = EMPTY
            score = -child_score

            if score > best_score:
                best_score = score
                best_move = pos
            alpha = max(alpha, score)
            if alpha >= beta:
                break

        return best_score, best_move

    def _order_moves(self, ap_pos, pp_pos, tt_move=None):
        cells = self.board.cells
        opp_free = [pp_pos + move for move in MOVES if cells[pp_pos + move] == EMPTY]
        isolating = opp_free[0] if len(opp_free) == 1 else None

        def rank(pos):
            if pos == tt_move:
                return 2, 0
            if pos == isolating:
                return 1, 0
            own_free = sum(1 for move in MOVES if cells[pos + move] == EMPTY)
            return 0, own_free - len(opp_free) + (pos in opp_free)

        moves = list(iter_moves(cells, ap_pos))
        moves.sort(key=rank, reverse=True)
        return moves

    def _region(self, pos):
        """Bitmask of every empty cell the token at pos could ever reach."""
        cells = self.board.cells
        seen = 0
        stack = [pos]
        while stack:
            q = stack.pop()
            for move in MOVES:
                p = q + move
                while cells[p] == EMPTY:
                    if not seen >> p & 1:
                        seen |= 1 << p
                        stack.append(p)
                    p += move
        return seen

    def _resolve_separated(self, ap_pos, pp_pos, depth):
        """
        Exact score when the tokens share no reachable cell, else None.

        Each side then plays alone: the active player loses after its longest
        path unless the passive one runs out first. Returns None when that end
        lies past the horizon.
        """
        active_region = self._region(ap_pos)
        # Any shared cell implies a shared cell next to the passive token.
        if any(active_region >> (pp_pos + move) & 1 for move in MOVES):
            return None

        active_len = self._longest_path(ap_pos, active_region)
        passive_len = self._longest_path(pp_pos, self._region(pp_pos))
        if active_len <= passive_len:
            end = depth + 2 * active_len
            score = LOSS_VALUE + end
        else:
            end = depth + 2 * passive_len + 1
            score = -(LOSS_VALUE + end)
        if end > self.max_depth:
            return None
        return score

    def _longest_path(self, pos, region):
        """Most moves a lone token at pos can make through the empty cells in region."""
        key = (region << 6) | pos
        cached = self.path_cache.get(key)
        if cached is not None:
            return cached

        bound = bin(region).count("1")
        best = 0
        for move in MOVES:
            p = pos + move
            while best < bound and region >> p & 1:
                best = max(best, 1 + self._longest_path(p, region & ~(1 << p)))
                p += move

        self.path_cache.put(key, best)
        return best

    def stats(self):
        total_time = max(self.elapsed, 1e-9)
        return {
            "player": self.player,
            "depth": self.max_depth,
            "nodes": self.node_counter,
            "evaluations": self.evaluations,
            "cache_entries": len(self.cache) if self.cache is not None else 0,
            "time": total_time,
            "nps": self.node_counter / total_time,
        }


class Negamax(Strategy):
    """Move selection by depth-limited negamax search."""

    def __init__(self, scorer=None, use_cache=True, stats=None, cache_entries=transposition.DEFAULT_MAX_ENTRIES):
        self.scorer = scorer or DistanceScorer()
        self.use_cache = use_cache
        self.cache_entries = cache_entries
        self.stats_list = stats
        self.zobrist_table = transposition.zobrist_init() if use_cache else None
        self.path_cache = transposition.TranspositionTable(cache_entries)
        self.depth_count = 0
        self.node_count = 0
        self.peak_cache_entries = 0
        self.last_score = None

    def get_move(self, board, player, max_depth):
        searcher = NegamaxSearcher(
            board,
            player,
            max_depth,
            scorer=self.scorer,
            use_cache=self.use_cache,
            zobrist_table=self.zobrist_table,
            path_cache=self.path_cache,
            cache_entries=self.cache_entries,
        )
        score, move = searcher.choose_move()
        self.last_score = score
        self.depth_count = searcher.evaluations
        self.node_count = searcher.node_counter
        if searcher.cache is not None:
            self.peak_cache_entries = max(self.peak_cache_entries, searcher.cache.peak)
        if self.stats_list is not None:
            self.stats_list.append(searcher.stats())
        return move


def choose_move(board, player, depth, scorer=None, use_cache=True, stats=None):
    """Public function to start a search; returns the best destination index."""
    return Negamax(scorer=scorer, use_cache=use_cache, stats=stats).get_move(board, player, depth)
