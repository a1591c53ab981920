"""Zobrist hashing and a size-capped transposition table."""

import random

try:
    from engine.geometry import CELLS, P1, P2
except ImportError:
    from Battle_Isolation_AI.engine.geometry import CELLS, P1, P2

EXACT = "EXACT"
LOWER = "LOWER"
UPPER = "UPPER"

DEFAULT_MAX_ENTRIES = 1 << 19


def zobrist_init(cells=CELLS, seed=None):
    rng = random.Random(seed)
    return [[rng.getrandbits(64) for _ in range(2)] for _ in range(cells)]


def mark_index(player):
    return 0 if player == P1 else 1


def hash_board(board, table):
    """Compute Zobrist hash over player-marked cells (sentinels and empties ignored)."""
    h = 0
    for pos, v in enumerate(board.cells):
        if v in (P1, P2):
            h ^= table[pos][mark_index(v)]
    return h


class TranspositionTable:
    """
    Dict of search results holding at most max_entries keys.
    Inserting a new key into a full table clears it first.
    """

    def __init__(self, max_entries=DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        self.max_entries = max_entries
        self.entries = {}
        self.peak = 0
        self.clears = 0

    def __len__(self):
        return len(self.entries)

    def get(self, key):
        return self.entries.get(key)

    def put(self, key, value):
        entries = self.entries
        if key not in entries and len(entries) >= self.max_entries:
            entries.clear()
            self.clears += 1
        entries[key] = value
        if len(entries) > self.peak:
            self.peak = len(entries)

    def store(self, key, score, alpha_orig, beta, move=None):
        """Record a search result with the bound it represents and its best move."""
        if score <= alpha_orig:
            flag = UPPER
        elif score >= beta:
            flag = LOWER
        else:
            flag = EXACT
        self.put(key, (score, flag, move))
