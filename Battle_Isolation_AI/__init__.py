"""Battle_Isolation_AI package exports."""

from .Board import Board
from .Isolationgame import Isolationgame
from .Player import Player, AIPlayer, HumanPlayer

# Subpackages for rule engine, AI search, and helpers
from . import ai, engine, utils

__all__ = [
    "Board",
    "Isolationgame",
    "Player",
    "AIPlayer",
    "HumanPlayer",
    "ai",
    "engine",
    "utils",
]
