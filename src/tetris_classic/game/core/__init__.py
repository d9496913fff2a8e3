# src/tetris_classic/game/core/__init__.py
from __future__ import annotations

from tetris_classic.game.core.board import Grid, PlacementError
from tetris_classic.game.core.game import GameEngine, normalize_command
from tetris_classic.game.core.piece import Piece
from tetris_classic.game.core.piece_rules import PieceFactory
from tetris_classic.game.core.pieceset import PieceDef, PieceSet
from tetris_classic.game.core.types import Command, Phase, PieceView, RotationPolicy, State, StepEvent

__all__ = [
    "Command",
    "GameEngine",
    "Grid",
    "Phase",
    "Piece",
    "PieceDef",
    "PieceFactory",
    "PieceSet",
    "PieceView",
    "PlacementError",
    "RotationPolicy",
    "State",
    "StepEvent",
    "normalize_command",
]
