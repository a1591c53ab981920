"""Entry point for Battle Isolation AI matches. Load config, wire players, play every opening."""

import yaml
from pathlib import Path

try:
    from utils.cli import parse_args
    from utils.logger import log_event, silent
    from Isolationgame import Isolationgame
    from Player import AIPlayer, HumanPlayer
    from ai.move_selector import build_strategy
    from engine.geometry import P1, P2, SIZE, player_symbol
except ImportError:
    from Battle_Isolation_AI.utils.cli import parse_args
    from Battle_Isolation_AI.utils.logger import log_event, silent
    from Battle_Isolation_AI.Isolationgame import Isolationgame
    from Battle_Isolation_AI.Player import AIPlayer, HumanPlayer
    from Battle_Isolation_AI.ai.move_selector import build_strategy
    from Battle_Isolation_AI.engine.geometry import P1, P2, SIZE, player_symbol


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "search_depth": 25,
    "first_strategy": "negamax",
    "second_strategy": "negamax",
    "use_cache": True,
    "show_board": True,
    "opening": [0, 0],
    "cache_entries": 1 << 19,
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Battle_Isolation_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Load settings YAML over the defaults; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        pass
    return settings


def enumerate_openings(first=(0, 0)):
    """Yield every player 2 placement on a cell other than player 1's opening."""
    for i in range(SIZE):
        for j in range(SIZE):
            if (i, j) == tuple(first):
                continue
            yield (i, j)


def make_player(mark, kind, depth, use_cache=True, human=False, cache_entries=1 << 19):
    if human:
        return HumanPlayer(mark)
    if kind == "negamax":
        strategy = build_strategy(kind, use_cache=use_cache, cache_entries=cache_entries)
    else:
        strategy = build_strategy(kind)
    return AIPlayer(mark, strategy, depth=depth)


def print_board(board, last_move, player, loser):
    print(board.render())
    print()


def run_tournament(
    first_kind,
    second_kind,
    depth,
    first=(0, 0),
    openings=None,
    use_cache=True,
    logger=print,
    renderer=None,
    humans=(),
    cache_entries=1 << 19,
):
    """Play one fresh match per player 2 opening. Returns {opening: losing mark}."""
    if openings is None:
        openings = list(enumerate_openings(first))
    results = {}
    for second in openings:
        game = Isolationgame(
            make_player(P1, first_kind, depth, use_cache, human=P1 in humans, cache_entries=cache_entries),
            make_player(P2, second_kind, depth, use_cache, human=P2 in humans, cache_entries=cache_entries),
            opening=[tuple(first), tuple(second)],
            logger=logger,
            renderer=renderer,
        )
        results[tuple(second)] = game.play()
    return results


def main(argv=None):
    args = parse_args(argv)
    settings = load_settings(args.settings)

    depth = args.depth or settings.get("search_depth", 25)
    first_kind = args.first or settings.get("first_strategy", "negamax")
    second_kind = args.second or settings.get("second_strategy", "negamax")
    use_cache = False if args.no_cache else bool(settings.get("use_cache", True))
    cache_entries = args.cache_entries or int(settings.get("cache_entries", 1 << 19))
    first = tuple(args.opening or settings.get("opening", [0, 0]))
    show_board = bool(settings.get("show_board", True)) and not args.quiet

    humans = ()
    if args.mode == "human-vs-ai":
        humans = (P1,)
    elif args.mode == "ai-vs-human":
        humans = (P2,)

    openings = [tuple(args.single)] if args.single else None
    results = run_tournament(
        first_kind,
        second_kind,
        depth,
        first=first,
        openings=openings,
        use_cache=use_cache,
        cache_entries=cache_entries,
        logger=silent if args.quiet else log_event,
        renderer=print_board if show_board or humans else None,
        humans=humans,
    )
    for opening, loser in results.items():
        print(f"P2 at {opening[0]}, {opening[1]}: Player:{player_symbol(loser)} Lost.")
    return results


if __name__ == "__main__":
    main()
