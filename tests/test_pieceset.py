from __future__ import annotations

from pathlib import Path

import pytest

from tetris_classic.game.core.pieceset import PieceSet

EXPECTED = {
    "I": ([[1, 1, 1, 1]], "cyan", "transpose"),
    "O": ([[1, 1], [1, 1]], "yellow", "none"),
    "T": ([[0, 1, 0], [1, 1, 1]], "magenta", "cw"),
    "S": ([[0, 1, 1], [1, 1, 0]], "green", "cw"),
    "Z": ([[1, 1, 0], [0, 1, 1]], "red", "cw"),
    "J": ([[1, 0, 0], [1, 1, 1]], "blue", "cw"),
    "L": ([[0, 0, 1], [1, 1, 1]], "orange", "cw"),
}


def test_classic7_shapes_colors_and_rules(pieces: PieceSet) -> None:
    assert pieces.kinds() == ("I", "O", "T", "S", "Z", "J", "L")
    for kind, (shape, color, rule) in EXPECTED.items():
        d = pieces.get(kind)
        assert d.shape.tolist() == shape
        assert d.color_name == color
        assert d.rotation == rule
        assert d.cell_count() == 4


def test_board_ids_round_trip(pieces: PieceSet) -> None:
    for i, kind in enumerate(pieces.kinds()):
        assert pieces.board_id(kind) == i + 1
        assert pieces.board_id_to_kind(i + 1) == kind
    assert pieces.color_for_board_id(0) is None
    assert pieces.color_for_board_id(1) == (0, 255, 255)
    with pytest.raises(ValueError, match="board_id out of range"):
        pieces.board_id_to_kind(8)


def test_unknown_kind_raises(pieces: PieceSet) -> None:
    with pytest.raises(KeyError, match="unknown piece kind"):
        pieces.get("X")


def _write(tmp_path: Path, body: str) -> Path:
    p = tmp_path / "pieces.yaml"
    p.write_text(body, encoding="utf-8")
    return p


def test_from_yaml_rejects_unknown_rotation_rule(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        "pieces:\n"
        "  X:\n"
        "    shape: ['##']\n"
        "    rotation: spin\n"
        "    color: {name: grey, rgb: [1, 2, 3]}\n",
    )
    with pytest.raises(ValueError, match="unknown rotation rule"):
        PieceSet.from_yaml(p)


def test_from_yaml_rejects_ragged_rows(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        "pieces:\n"
        "  X:\n"
        "    shape: ['##', '#']\n"
        "    color: {name: grey, rgb: [1, 2, 3]}\n",
    )
    with pytest.raises(ValueError, match="equal width"):
        PieceSet.from_yaml(p)


def test_from_yaml_checks_expected_cells(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        "expected_cells: 4\n"
        "pieces:\n"
        "  X:\n"
        "    shape: ['###']\n"
        "    color: {name: grey, rgb: [1, 2, 3]}\n",
    )
    with pytest.raises(ValueError, match="expected 4 filled cells"):
        PieceSet.from_yaml(p)


def test_from_yaml_rejects_bad_rgb(tmp_path: Path) -> None:
    p = _write(
        tmp_path,
        "pieces:\n"
        "  X:\n"
        "    shape: ['##']\n"
        "    color: {name: grey, rgb: [1, 2, 300]}\n",
    )
    with pytest.raises(ValueError, match=r"\[0,255\]"):
        PieceSet.from_yaml(p)
