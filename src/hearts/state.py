"""
Immutable game state and its two transitions.

``play_card`` and ``resolve_trick`` never modify their input; each returns a
fresh ``State`` built with ``dataclasses.replace``. Only the per-seat
``ActionRecorder`` is shared (by reference) between successive copies of a
player, since it is the append-only log of that seat's decisions.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple

from .deck import NUM_SEATS, Card, Suit
from .errors import IntegrityError
from .history import ActionRecorder, History
from .play import trick_winner
from .scoring import card_points, trick_points, trick_rewards

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .agents import ActionSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trick:
    """Cards played so far this trick, in play order. ``suit`` is set by the first card."""

    suit: Optional[Suit] = None
    cards: Tuple[Card, ...] = ()


@dataclass(frozen=True)
class Player:
    """
    One seat at the table.

    ``plays_out_of_suit[s]`` becomes True the first time this player discards
    off-suit while suit ``s`` was led; it is public information and is never
    cleared.
    """

    seat: int
    hand: Tuple[Card, ...]
    score: int = 0
    plays_out_of_suit: Tuple[bool, bool, bool, bool] = (False, False, False, False)
    policy: Optional[Callable[..., Any]] = field(default=None, compare=False, repr=False)
    recorder: ActionRecorder = field(default_factory=ActionRecorder, compare=False, repr=False)

    def record_action(self, state: "State", action: Card, quality: float, trace: Any) -> None:
        self.recorder.record_action(state, self, action, quality, trace)

    def assign_reward(self, amount: float) -> None:
        self.recorder.assign_reward(amount)

    def terminate(self, reward: float = 0.0) -> History:
        """Seal this seat's history. Can only be called once per game."""
        return self.recorder.terminate(self, reward=reward)


@dataclass(frozen=True)
class State:
    players: Tuple[Player, Player, Player, Player]
    trick: Trick = field(default_factory=Trick)
    hearts_broken: bool = False
    simplified: bool = False
    trick_leader: int = 0

    def current_seat(self) -> int:
        return (self.trick_leader + len(self.trick.cards)) % NUM_SEATS


def initial_state(players: Tuple[Player, ...], simplified: bool, trick_leader: int) -> State:
    if len(players) != NUM_SEATS:
        raise ValueError(f"Hearts needs {NUM_SEATS} players, got {len(players)}")
    return State(
        players=tuple(players),  # type: ignore[arg-type]
        trick=Trick(),
        hearts_broken=False,
        simplified=simplified,
        trick_leader=trick_leader,
    )


def play_card(state: State, actor: Player, summary: "ActionSummary") -> State:
    """Apply one play. The actor's recorder sees ``state`` as it was before the card hit the table."""
    trick = state.trick
    card = summary.action
    actor.record_action(state, card, summary.quality, summary.trace)

    out_of_suit = actor.plays_out_of_suit
    if trick.suit is not None and card.suit != trick.suit:
        flags = list(out_of_suit)
        flags[trick.suit] = True
        out_of_suit = tuple(flags)  # type: ignore[assignment]

    updated = replace(
        actor,
        hand=tuple(c for c in actor.hand if c != card),
        plays_out_of_suit=out_of_suit,
    )
    players = tuple(updated if p.seat == actor.seat else p for p in state.players)

    return replace(
        state,
        players=players,
        trick=Trick(
            suit=card.suit if trick.suit is None else trick.suit,
            cards=trick.cards + (card,),
        ),
        hearts_broken=state.hearts_broken or card_points(card, state.simplified) != 0,
    )


def resolve_trick(state: State) -> State:
    """
    Close a full trick: hand out rewards, charge points to the winner and
    give the lead to the winning seat.
    """
    trick = state.trick
    if len(trick.cards) != NUM_SEATS:
        raise IntegrityError(
            f"Trick resolved after {len(trick.cards)} plays; expected {NUM_SEATS}"
        )

    card = trick_winner(trick)
    if card is None:
        raise IntegrityError("No trick winner could be determined at round end")
    try:
        card_pos = trick.cards.index(card)
    except ValueError:
        raise IntegrityError("Trick winning card was not found in trick") from None
    winning_seat = (card_pos + state.trick_leader) % NUM_SEATS
    winner = next((p for p in state.players if p.seat == winning_seat), None)
    if winner is None:
        raise IntegrityError(
            "No player could be associated with the card that won the trick"
        )

    points = trick_points(trick.cards, state.simplified)
    rewards = trick_rewards(points, winning_seat, state.simplified)
    for player in state.players:
        player.assign_reward(rewards[player.seat])

    logger.debug(
        "Trick %s won by seat %d with %s (%d points)",
        " ".join(str(c) for c in trick.cards),
        winning_seat,
        card,
        points,
    )

    players = state.players
    if points != 0:
        players = tuple(
            replace(p, score=p.score + points) if p.seat == winning_seat else p
            for p in players
        )  # type: ignore[assignment]

    return replace(
        state,
        players=players,
        trick=Trick(),
        trick_leader=winning_seat,
    )
