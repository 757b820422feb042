"""
Command-line interface for running Hearts simulations.

Usage examples (after installing in editable mode):

    python -m hearts.cli simulate --games 20 --seed 7 --agents random,low,random,low
    python -m hearts.cli simulate --games 5 --simplified --agents nn,random,random,random
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, Dict, List, Optional

from .agents import LowCardAgent, Policy, RandomAgent
from .game import GameConfig, run_game
from .interpret import interpret_history


def _make_nn(seed: int) -> Policy:
    # torch is only needed when a network seat is requested.
    from .policies import make_nn_policy

    return make_nn_policy(seed=seed)


AGENT_FACTORIES: Dict[str, Callable[[int], Policy]] = {
    "random": lambda seed: RandomAgent(seed=seed),
    "low": lambda seed: LowCardAgent(),
    "nn": _make_nn,
}


def build_policies(names: List[str], seed: int) -> List[Policy]:
    if len(names) != 4:
        raise ValueError(f"Expected 4 agents, got {len(names)}: {names}")
    policies: List[Policy] = []
    for seat, name in enumerate(names):
        factory = AGENT_FACTORIES.get(name)
        if factory is None:
            raise ValueError(f"Unknown agent {name!r}; choose from {sorted(AGENT_FACTORIES)}")
        policies.append(factory(seed * 4 + seat))
    return policies


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play games between agents and report scores and returns.",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=10,
        help="Number of games to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Base random seed; game i is shuffled with seed + i.",
    )
    parser.add_argument(
        "--simplified",
        action="store_true",
        help="Use simplified scoring (no queen of spades penalty).",
    )
    parser.add_argument(
        "--agents",
        type=str,
        default="random,random,random,random",
        help="Comma-separated agent per seat: random, low or nn.",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    names = [n.strip() for n in args.agents.split(",")]
    policies = build_policies(names, args.seed)

    totals = [0, 0, 0, 0]
    returns = [0.0, 0.0, 0.0, 0.0]
    for game in range(1, args.games + 1):
        config = GameConfig(simplified=args.simplified, seed=args.seed + game)
        result = run_game(policies, config)
        for seat, history in enumerate(result.histories):
            returns[seat] += interpret_history(history).reward
            totals[seat] += result.scores[seat]
        print(f"[game {game}/{args.games}] scores={list(result.scores)}", flush=True)

    games = float(max(args.games, 1))
    for seat, name in enumerate(names):
        print(
            f"seat {seat} ({name}): avg_score={totals[seat] / games:.2f} "
            f"avg_return={returns[seat] / games:.2f}"
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hearts", description="Hearts self-play simulator CLI.")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for engine messages.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_simulate_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
