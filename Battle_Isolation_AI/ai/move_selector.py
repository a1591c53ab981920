"""Move-selection capability shared by search and baseline strategies."""


class Strategy:
    def get_move(self, board, player, max_depth):
        """Return the linear index of player's destination, or None if there is none."""
        raise NotImplementedError


STRATEGY_KINDS = ("negamax", "mirror")


def build_strategy(kind, **kwargs):
    """Construct a strategy by name; kwargs go to the strategy constructor."""
    if kind == "negamax":
        from .search_negamax import Negamax

        return Negamax(**kwargs)
    if kind == "mirror":
        from .mirror import MirrorStrategy

        return MirrorStrategy()
    raise ValueError(f"Unknown strategy: {kind!r} (expected one of {', '.join(STRATEGY_KINDS)})")
