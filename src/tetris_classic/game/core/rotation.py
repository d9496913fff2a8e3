# src/tetris_classic/game/core/rotation.py
from __future__ import annotations

from typing import Callable, Dict

import numpy as np

RotationFn = Callable[[np.ndarray], np.ndarray]


def _frozen(m: np.ndarray) -> np.ndarray:
    out = np.ascontiguousarray(m, dtype=np.uint8).copy()
    out.setflags(write=False)
    return out


def rotate_cw(mask: np.ndarray) -> np.ndarray:
    """
    Clockwise 90 degree rotation of an (M,N) mask into (N,M):

      new[j, M-1-i] = old[i, j]
    """
    m = np.asarray(mask)
    rows, cols = m.shape
    out = np.zeros((cols, rows), dtype=np.uint8)
    for i in range(rows):
        for j in range(cols):
            out[j, rows - 1 - i] = m[i, j]
    return _frozen(out)


def transpose(mask: np.ndarray) -> np.ndarray:
    # straight piece: flips between a 1x4 row and a 4x1 column
    return _frozen(np.asarray(mask).T)


def identity(mask: np.ndarray) -> np.ndarray:
    return _frozen(np.asarray(mask))


ROTATION_RULES: Dict[str, RotationFn] = {
    "cw": rotate_cw,
    "transpose": transpose,
    "none": identity,
}


def rotate_mask(mask: np.ndarray, *, rule: str) -> np.ndarray:
    try:
        fn = ROTATION_RULES[rule]
    except KeyError as e:
        raise KeyError(f"unknown rotation rule {rule!r}. known rules={sorted(ROTATION_RULES)!r}") from e
    return fn(mask)


__all__ = ["ROTATION_RULES", "RotationFn", "identity", "rotate_cw", "rotate_mask", "transpose"]
