"""Tests for AppSettings resolution."""

import chess
import pytest

from termchess.app import build_parser
from termchess.settings import AppSettings


class TestFromEnv:
    def test_defaults(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_overrides(self) -> None:
        settings = AppSettings.from_env(
            {
                "TERMCHESS_FLIPPED": "yes",
                "TERMCHESS_THEME": "PLAIN",
                "TERMCHESS_GLYPHS": "ascii",
                "TERMCHESS_PROMOTION": "n",
                "TERMCHESS_LOG_FILE": "/tmp/termchess.log",
            }
        )
        assert settings.flipped is True
        assert settings.theme == "plain"
        assert settings.glyphs == "ascii"
        assert settings.promotion == "n"
        assert settings.log_file == "/tmp/termchess.log"

    def test_false_flag(self) -> None:
        assert AppSettings.from_env({"TERMCHESS_FLIPPED": "0"}).flipped is False

    def test_empty_values_ignored(self) -> None:
        assert AppSettings.from_env({"TERMCHESS_THEME": ""}).theme == "color"


class TestWithArgs:
    def test_cli_overrides_env(self) -> None:
        base = AppSettings.from_env({"TERMCHESS_THEME": "plain"})
        args = build_parser().parse_args(["--theme", "color", "--flip", "--glyphs", "ascii"])
        settings = base.with_args(args)
        assert settings.theme == "color"
        assert settings.flipped is True
        assert settings.glyphs == "ascii"

    def test_unset_flags_keep_base(self) -> None:
        base = AppSettings(flipped=True, promotion="r")
        settings = base.with_args(build_parser().parse_args([]))
        assert settings == base


class TestValidate:
    @pytest.mark.parametrize(
        "kwargs",
        [{"theme": "neon"}, {"glyphs": "emoji"}, {"promotion": "k"}],
    )
    def test_rejects_unknown_values(self, kwargs: dict[str, str]) -> None:
        with pytest.raises(ValueError):
            AppSettings(**kwargs).validate()

    def test_promotion_piece(self) -> None:
        assert AppSettings().promotion_piece == chess.QUEEN
        assert AppSettings(promotion="n").promotion_piece == chess.KNIGHT
