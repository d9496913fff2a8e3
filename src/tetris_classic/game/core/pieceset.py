# src/tetris_classic/game/core/pieceset.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import yaml

from tetris_classic.game.core.rotation import ROTATION_RULES
from tetris_classic.utils.paths import pieces_dir

RGB = Tuple[int, int, int]


def _parse_rgb(v: object) -> RGB:
    if not isinstance(v, (list, tuple)) or len(v) != 3:
        raise ValueError(f"color.rgb must be a 3-item list/tuple, got {v!r}")
    r, g, b = v
    for c in (r, g, b):
        if not isinstance(c, int) or not (0 <= c <= 255):
            raise ValueError(f"color components must be ints in [0,255], got {v!r}")
    return int(r), int(g), int(b)


def _parse_shape(rows: Sequence[str]) -> np.ndarray:
    if not isinstance(rows, (list, tuple)) or len(rows) == 0:
        raise ValueError("shape must be a non-empty list of strings")

    width = None
    out: List[List[int]] = []
    for r in rows:
        if not isinstance(r, str) or len(r) == 0:
            raise ValueError(f"shape rows must be non-empty strings, got {r!r}")
        if width is None:
            width = len(r)
        elif len(r) != width:
            raise ValueError(f"shape rows must have equal width, got widths {width} and {len(r)}")

        out.append([1 if ch == "#" else 0 for ch in r])

    arr = np.asarray(out, dtype=np.uint8)
    if int(arr.sum()) <= 0:
        raise ValueError("shape must have at least one filled cell ('#')")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class PieceDef:
    kind: str
    shape: np.ndarray  # (H,W) uint8 mask 0/1, spawn orientation
    rotation: str  # key into ROTATION_RULES
    color_name: str
    rgb: RGB

    def cell_count(self) -> int:
        return int(self.shape.sum())


@dataclass(frozen=True)
class PieceSet:
    """
    Shape/color/rotation-rule definitions, loaded from YAML.

    Provides:
      - stable ordering of kinds (for kind-index mapping)
      - board_id(kind) in 1..K (0 is reserved for empty grid cells)
      - color lookup by kind or board id
    """

    pieces: Dict[str, PieceDef]
    kind_order: Tuple[str, ...]

    @staticmethod
    def default_classic7_path() -> Path:
        return pieces_dir() / "classic7.yaml"

    @classmethod
    def classic7(cls) -> "PieceSet":
        return cls.from_yaml(cls.default_classic7_path(), expected_cells=4)

    @classmethod
    def from_yaml(cls, path: Path, *, expected_cells: Optional[int] = None) -> "PieceSet":
        p = Path(path)
        data = yaml.safe_load(p.read_text(encoding="utf-8"))

        if not isinstance(data, dict):
            raise ValueError(f"piece YAML must be a mapping at top-level, got {type(data)!r}")

        if expected_cells is None:
            v = data.get("expected_cells", None)
            if v is not None:
                expected_cells = int(v)

        pieces_node = data.get("pieces")
        if not isinstance(pieces_node, dict) or not pieces_node:
            raise ValueError("piece YAML must contain non-empty mapping 'pieces:'")

        pieces: Dict[str, PieceDef] = {}
        kind_order: List[str] = []

        for kind, spec in pieces_node.items():
            if not isinstance(kind, str) or not kind:
                raise ValueError(f"piece key must be a non-empty string, got {kind!r}")
            if not isinstance(spec, dict):
                raise ValueError(f"piece spec for {kind!r} must be a mapping, got {type(spec)!r}")

            shape = _parse_shape(spec.get("shape"))

            if expected_cells is not None and int(shape.sum()) != int(expected_cells):
                raise ValueError(f"{kind!r}: expected {expected_cells} filled cells, got {int(shape.sum())}")

            rotation = str(spec.get("rotation", "cw")).strip().lower()
            if rotation not in ROTATION_RULES:
                raise ValueError(f"{kind!r}: unknown rotation rule {rotation!r}")

            color = spec.get("color")
            if not isinstance(color, dict):
                raise ValueError(f"{kind!r}: 'color' must be a mapping with name/rgb")
            name = color.get("name")
            if not isinstance(name, str) or not name:
                raise ValueError(f"{kind!r}: color.name must be a non-empty string")

            pieces[kind] = PieceDef(
                kind=kind,
                shape=shape,
                rotation=rotation,
                color_name=name,
                rgb=_parse_rgb(color.get("rgb")),
            )
            kind_order.append(kind)

        return cls(pieces=pieces, kind_order=tuple(kind_order))

    def kinds(self) -> Tuple[str, ...]:
        return self.kind_order

    def __contains__(self, kind: str) -> bool:
        return kind in self.pieces

    def __len__(self) -> int:
        return len(self.kind_order)

    def get(self, kind: str) -> PieceDef:
        try:
            return self.pieces[kind]
        except KeyError as e:
            raise KeyError(f"unknown piece kind {kind!r}. known kinds={list(self.kind_order)!r}") from e

    def kind_idx(self, kind: str) -> int:
        try:
            return int(self.kind_order.index(kind))
        except ValueError as e:
            raise KeyError(f"unknown piece kind {kind!r}") from e

    def board_id(self, kind: str) -> int:
        return int(self.kind_idx(kind) + 1)

    def board_id_to_kind(self, board_id: int) -> str:
        bid = int(board_id)
        if bid <= 0 or bid > len(self.kind_order):
            raise ValueError(f"board_id out of range: {bid} (valid 1..{len(self.kind_order)})")
        return self.kind_order[bid - 1]

    def color_of(self, kind: str) -> RGB:
        return self.get(kind).rgb

    def color_for_board_id(self, board_id: int) -> Optional[RGB]:
        if int(board_id) <= 0:
            return None
        return self.color_of(self.board_id_to_kind(board_id))


__all__ = ["PieceDef", "PieceSet", "RGB"]
