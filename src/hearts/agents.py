"""
Policy contract and simple baseline agents.

A policy is any callable ``policy(state, player, legal_plays)`` returning a
non-empty sequence of ``ActionSummary`` candidates. The engine plays the
candidate with the highest ``quality`` and threads its ``trace`` untouched
into the player's history, so a learning policy can stash whatever it needs
there (features, activations, ...).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, List, Protocol, Sequence, TypeVar

from .deck import Card, Suit
from .scoring import card_points

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .state import Player, State

T = TypeVar("T")


@dataclass(frozen=True)
class ActionSummary(Generic[T]):
    """A candidate move: the card, the policy's estimate of its value, and an opaque trace."""

    action: Card
    quality: float
    trace: T | None = None


class Policy(Protocol):
    """Decision function consulted once per play."""

    def __call__(
        self,
        state: "State",
        player: "Player",
        legal_plays: Sequence[Card],
    ) -> Sequence[ActionSummary]:
        """
        Score the legal cards for ``player`` in ``state``.

        ``legal_plays`` is never empty and every returned summary must carry
        one of those cards.
        """


@dataclass
class RandomAgent:
    """
    Baseline policy giving every legal card a uniform random quality.

    Usage:
        agent = RandomAgent(seed=42)
        histories = play_game([agent, RandomAgent(1), RandomAgent(2), RandomAgent(3)])
    """

    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)

    def __call__(
        self,
        state: "State",
        player: "Player",
        legal_plays: Sequence[Card],
    ) -> List[ActionSummary]:
        if not legal_plays:
            raise ValueError("No legal plays available for RandomAgent")
        return [ActionSummary(action=c, quality=self._rng.random()) for c in legal_plays]


@dataclass
class LowCardAgent:
    """
    Deterministic heuristic: duck under the trick when following, dump the
    most dangerous card when void, and otherwise lead low.
    """

    def __call__(
        self,
        state: "State",
        player: "Player",
        legal_plays: Sequence[Card],
    ) -> List[ActionSummary]:
        if not legal_plays:
            raise ValueError("No legal plays available for LowCardAgent")
        trick = state.trick
        return [
            ActionSummary(action=c, quality=self._score(c, trick.suit, trick.cards, state.simplified))
            for c in legal_plays
        ]

    @staticmethod
    def _score(card: Card, led: Suit | None, played: Sequence[Card], simplified: bool) -> float:
        points = card_points(card, simplified)
        if led is not None and card.suit != led:
            # Void in the led suit: get rid of points first, then high cards.
            return 100.0 + 10.0 * points + card.rank
        if led is not None:
            top = max((c.rank for c in played if c.suit == led), default=0)
            if card.rank < top:
                # Ducks under the current winner; the highest such duck keeps low cards for later.
                return 50.0 + card.rank
            return -card.rank - 10.0 * points
        return -card.rank - 10.0 * points


__all__ = ["ActionSummary", "Policy", "RandomAgent", "LowCardAgent"]
