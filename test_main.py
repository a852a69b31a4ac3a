"""Command-line parsing."""
import pytest

from main import build_parser


def test_defaults_come_from_config():
    args = build_parser().parse_args([])
    assert (args.width, args.height) == (1024, 700)
    assert args.difficulty is None
    assert args.seed is None


def test_level_and_seed():
    args = build_parser().parse_args(["--difficulty", "hard", "--seed", "7", "--log-level", "debug"])
    assert args.difficulty == "hard"
    assert args.seed == 7
    assert args.log_level == "debug"


def test_unknown_level_is_rejected():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--difficulty", "nightmare"])
