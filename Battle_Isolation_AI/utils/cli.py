"""CLI options for selecting strategies, search depth, openings, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Battle Isolation AI (5x5 queen-move Isolation)")
    parser.add_argument("--depth", type=int, help="Search depth in plies for negamax players")
    parser.add_argument("--first", choices=["negamax", "mirror"], help="Strategy for player 1")
    parser.add_argument("--second", choices=["negamax", "mirror"], help="Strategy for player 2")
    parser.add_argument(
        "--mode",
        choices=["ai-vs-ai", "human-vs-ai", "ai-vs-human"],
        default="ai-vs-ai",
        help="Play mode (who plays player 1 / player 2)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--opening", type=int, nargs=2, metavar=("X", "Y"), help="Player 1 opening cell")
    parser.add_argument(
        "--single",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        help="Play one match with player 2 placed at X Y instead of all 24 openings",
    )
    parser.add_argument("--no-cache", action="store_true", help="Disable the transposition cache")
    parser.add_argument("--cache-entries", type=int, help="Most transposition cache entries kept per search")
    parser.add_argument("--quiet", action="store_true", help="Only print match results")
    return parser.parse_args(argv)
