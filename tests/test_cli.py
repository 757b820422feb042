"""Tests for the hearts CLI."""
import pytest

from hearts.cli import build_parser, build_policies, main


def test_simulate_prints_per_seat_summary(capsys):
    main(["simulate", "--games", "2", "--seed", "3", "--agents", "random,low,random,low"])
    out = capsys.readouterr().out
    assert "[game 1/2]" in out
    assert "[game 2/2]" in out
    assert "seat 3 (low)" in out


def test_simulate_simplified_flag():
    args = build_parser().parse_args(["simulate", "--simplified"])
    assert args.simplified is True
    assert args.games == 10


def test_build_policies_validates_names():
    with pytest.raises(ValueError):
        build_policies(["random", "random", "random"], seed=0)
    with pytest.raises(ValueError):
        build_policies(["random", "random", "random", "genius"], seed=0)
