"""
Single game orchestration: shuffle → deal → 13 tricks → terminate histories.

Holder of the two of clubs leads the first trick; afterwards the winner of
each trick leads the next one.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

from .agents import ActionSummary, Policy
from .deck import HAND_SIZE, NUM_SEATS, Suit, deal_hands, make_deck_52, shuffle_deck
from .errors import IntegrityError, PolicyContractError
from .history import History
from .play import player_with_card, valid_plays
from .state import Player, State, initial_state, play_card, resolve_trick

logger = logging.getLogger(__name__)

STARTING_SUIT = Suit.CLUBS
STARTING_RANK = 2


@dataclass
class GameConfig:
    """Settings for one simulated game."""

    simplified: bool = False
    seed: Optional[int] = None

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)


@dataclass
class GameResult:
    """Histories (seat order) and final cumulative scores of one game."""

    histories: Tuple[History, History, History, History]
    scores: Tuple[int, int, int, int]


def select_action(candidates: Iterable[ActionSummary]) -> ActionSummary:
    """Candidate with the strictly highest quality; the first one wins ties."""
    best: ActionSummary | None = None
    for summary in candidates:
        if best is None or summary.quality > best.quality:
            best = summary
    if best is None:
        raise PolicyContractError("No play was determined: policy returned no candidates")
    return best


def play_round(state: State) -> State:
    """Ask each seat for a card in leader-relative order, then resolve the trick."""
    for _ in range(NUM_SEATS):
        player = state.players[state.current_seat()]
        plays = valid_plays(state.trick.suit, state.simplified, state.hearts_broken, player.hand)
        if player.policy is None:
            raise PolicyContractError(f"Seat {player.seat} has no policy")
        play = select_action(player.policy(state, player, plays))
        if play.action not in plays:
            raise PolicyContractError(
                f"Policy for seat {player.seat} chose {play.action}; legal {list(plays)}"
            )
        state = play_card(state, player, play)
    return resolve_trick(state)


def _starting_seat(players: Sequence[Player]) -> int:
    holder = player_with_card(players, STARTING_SUIT, STARTING_RANK)
    if holder is None:
        raise IntegrityError(
            "The two of clubs was not dealt, so no start player can be determined"
        )
    return holder.seat


def play_game(
    policies: Sequence[Policy],
    simplified: bool = False,
    rng: random.Random | None = None,
) -> Tuple[History, History, History, History]:
    """
    Play one full game and return the four sealed histories in seat order.

    ``rng`` only drives the shuffle; pass a seeded ``random.Random`` (and
    deterministic policies) to get identical histories across runs.
    """
    if len(policies) != NUM_SEATS:
        raise ValueError(f"Hearts needs {NUM_SEATS} policies, got {len(policies)}")

    deck = shuffle_deck(make_deck_52(), rng)
    hands = deal_hands(deck)
    players = tuple(
        Player(seat=seat, hand=hands[seat], policy=policy)
        for seat, policy in enumerate(policies)
    )

    state = initial_state(players, simplified, _starting_seat(players))
    logger.debug("Seat %d holds the two of clubs and leads", state.trick_leader)

    for _ in range(HAND_SIZE):
        state = play_round(state)

    logger.info(
        "Game finished (simplified=%s): scores %s",
        simplified,
        [p.score for p in state.players],
    )
    return tuple(p.terminate() for p in state.players)  # type: ignore[return-value]


def final_scores(histories: Sequence[History]) -> Tuple[int, ...]:
    """Cumulative score of each seat, read from the terminal entries."""
    return tuple(h[-1].actor.score for h in histories)


def run_game(policies: Sequence[Policy], config: GameConfig | None = None) -> GameResult:
    """Play one game from a ``GameConfig`` and collect the final scores."""
    config = config or GameConfig()
    histories = play_game(policies, simplified=config.simplified, rng=config.make_rng())
    return GameResult(histories=histories, scores=final_scores(histories))  # type: ignore[arg-type]

