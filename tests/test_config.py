from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tetris_classic.config.io import load_play_config, to_plain_dict
from tetris_classic.config.play import GameConfig, PlayConfig, ScoresConfig, resolve_player_name
from tetris_classic.game.core.types import RotationPolicy
from tetris_classic.game.factory import make_engine_from_cfg

REPO_CONFIG = Path(__file__).resolve().parents[1] / "configs" / "play.yaml"


def test_defaults_match_classic_rules() -> None:
    cfg = PlayConfig()
    assert (cfg.game.rows, cfg.game.cols) == (20, 10)
    assert (cfg.game.spawn_x, cfg.game.spawn_y) == (4, 0)
    assert cfg.game.tick_ms == 500
    assert cfg.game.line_score == 100
    assert cfg.game.rotation == "unchecked"
    assert cfg.scores.path == Path("score.txt")
    assert cfg.ui.cell == 30


def test_shipped_yaml_equals_defaults() -> None:
    assert to_plain_dict(load_play_config(REPO_CONFIG)) == to_plain_dict(PlayConfig())


def test_overrides_win_and_none_is_skipped(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("game:\n  tick_ms: 300\n  seed: 7\nui:\n  cell: 20\n", encoding="utf-8")

    cfg = load_play_config(
        p,
        overrides={"game.seed": None, "game.tick_ms": 250, "scores.path": tmp_path / "hs.txt", "log_level": None},
    )

    assert cfg.game.tick_ms == 250
    assert cfg.game.seed == 7
    assert cfg.ui.cell == 20
    assert cfg.scores.path == tmp_path / "hs.txt"
    assert cfg.log_level == "info"


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    p = tmp_path / "play.yaml"
    p.write_text("game:\n  gravity: 3\n", encoding="utf-8")
    with pytest.raises(ValidationError, match="gravity"):
        load_play_config(p)


def test_rotation_and_level_are_case_insensitive() -> None:
    cfg = load_play_config(overrides={"game.rotation": " Reject ", "log_level": "DEBUG"})
    assert cfg.game.rotation == "reject"
    assert cfg.log_level == "debug"

    with pytest.raises(ValidationError):
        GameConfig(rotation="wallkick")


def test_bool_is_not_an_int() -> None:
    with pytest.raises(ValidationError, match="got bool"):
        GameConfig(rows=True)


def test_narrow_board_keeps_the_fixed_spawn_anchor() -> None:
    cfg = PlayConfig(game=GameConfig(cols=4), scores=ScoresConfig(enabled=False))
    assert (cfg.game.cols, cfg.game.spawn_x) == (4, 4)

    engine = make_engine_from_cfg(cfg)
    assert engine.start().game_over


def test_spawn_row_cannot_be_negative() -> None:
    with pytest.raises(ValidationError, match="spawn_y"):
        GameConfig(spawn_y=-1)


def test_string_values_are_stripped() -> None:
    cfg = PlayConfig.model_validate({"player_name": "  Eve ", "ui": {"title": " Tetris  "}})
    assert cfg.player_name == "Eve"
    assert cfg.ui.title == "Tetris"
    assert to_plain_dict(cfg) == cfg.to_dict()
    assert cfg.to_dict()["ui"]["title"] == "Tetris"


def test_config_is_frozen() -> None:
    cfg = PlayConfig()
    with pytest.raises(ValidationError):
        cfg.log_level = "debug"


@pytest.mark.parametrize(
    "raw, expected",
    [(None, "Player"), ("", "Player"), ("   ", "Player"), ("  Alice ", "Alice")],
)
def test_resolve_player_name(raw, expected) -> None:
    assert resolve_player_name(raw) == expected


def test_engine_from_config(tmp_path: Path) -> None:
    cfg = load_play_config(
        overrides={"game.seed": 11, "game.rotation": "reject", "scores.path": tmp_path / "s.txt"}
    )
    engine = make_engine_from_cfg(cfg, player_name="  Dana ")

    assert engine.player_name == "Dana"
    assert engine.rotation is RotationPolicy.REJECT
    assert engine.score_store is not None
    assert engine.score_store.path == tmp_path / "s.txt"

    twin = make_engine_from_cfg(cfg)
    kinds = [engine.factory.generate().kind for _ in range(30)]
    assert kinds == [twin.factory.generate().kind for _ in range(30)]
    assert twin.player_name == "Player"


def test_engine_from_config_without_scores() -> None:
    cfg = PlayConfig.model_validate({"scores": {"enabled": False}, "player_name": "Eve"})
    engine = make_engine_from_cfg(cfg)
    assert engine.score_store is None
    assert engine.player_name == "Eve"
