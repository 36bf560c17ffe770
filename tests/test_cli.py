import io

import pytest

from ttt_minimax.cli import (
    DEPTH_RANGE, ITERATIONS_RANGE, KNOB_RANGE, build_parser, config_from_args, lenient_int, main,
)
from ttt_minimax.config import SeatConfig


@pytest.mark.parametrize("value,default,bounds,expected", [
    (None, -1, DEPTH_RANGE, -1),
    ("3", -1, DEPTH_RANGE, 3),
    ("-1", -1, DEPTH_RANGE, -1),
    ("abc", -1, DEPTH_RANGE, -1),
    ("127", -1, DEPTH_RANGE, 127),
    ("128", -1, DEPTH_RANGE, -1),
    ("-129", -1, DEPTH_RANGE, -1),
    ("-4", 0, KNOB_RANGE, 0),
    ("7", 0, KNOB_RANGE, 7),
    ("255", 0, KNOB_RANGE, 255),
    ("300", 0, KNOB_RANGE, 0),
    ("-3", 1, ITERATIONS_RANGE, -3),
    ("99999999999", 1, ITERATIONS_RANGE, 1),
])
def test_lenient_int(value, default, bounds, expected):
    assert lenient_int(value, default, bounds) == expected


def test_config_from_args():
    args = build_parser().parse_args(
        ["-x", "--x-depth", "3", "--o-rand", "2", "--o-bad", "oops", "--it", "5", "-n",
         "--o-tie-break", "uniform", "--seed", "4"]
    )
    config = config_from_args(args)
    assert config.x == SeatConfig(is_ai=True, depth=3)
    assert config.o == SeatConfig(is_ai=False, depth=-1, tie_randomness=2, blunder_rate=0, tie_break="uniform")
    assert config.games == 5
    assert not config.verbose
    assert config.seed == 4


def test_defaults():
    config = config_from_args(build_parser().parse_args([]))
    assert config.x == SeatConfig()
    assert config.o == SeatConfig()
    assert config.games == 1
    assert config.verbose


def test_invalid_depth_plays_nothing(capsys):
    assert main(["-x", "-o", "--x-depth", "0"]) == 0
    out = capsys.readouterr().out
    assert out.strip() == "Max depth cannot be 0, or less than -1"


def test_zero_iterations_plays_nothing(capsys):
    assert main(["-x", "-o", "--it", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Must be at least one iteration!"


def test_ai_game_runs(capsys):
    assert main(["-x", "-o", "--x-depth", "1", "--o-depth", "1", "--seed", "3"]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    assert out[-1] == "Tie!" or out[-1].endswith("has won!")


def test_closed_input_aborts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["-o", "--o-depth", "1"]) == 0
    assert "Game aborted" in capsys.readouterr().out


def test_out_of_range_randomness_falls_back_to_zero():
    args = build_parser().parse_args(["-x", "--x-rand", "300", "--x-bad", "256"])
    config = config_from_args(args)
    assert config.x.tie_randomness == 0
    assert config.x.blunder_rate == 0


def test_negative_iterations_play_nothing(capsys):
    assert main(["-x", "-o", "--it", "-3"]) == 0
    assert capsys.readouterr().out == ""


def test_negative_iterations_still_check_depth(capsys):
    assert main(["-x", "-o", "--it", "-3", "--o-depth", "0"]) == 0
    assert capsys.readouterr().out.strip() == "Max depth cannot be 0, or less than -1"
