"""Probability_Omok package exports."""

from .Board import Board
from .ProbOmokgame import ProbOmokgame, GameView, ActionResult

# Subpackages for rule engine, front ends, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "ProbOmokgame",
    "GameView",
    "ActionResult",
    "engine",
    "gui",
    "utils",
]
