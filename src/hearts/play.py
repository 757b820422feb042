"""
Trick-taking rules: legal moves, trick winner, card lookup.
Must follow suit when able; no leading with point cards until hearts are broken.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

from .deck import Card, Suit
from .scoring import card_points

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .state import Player, Trick


def has_suit(hand: Iterable[Card], suit: Suit) -> bool:
    return any(c.suit == suit for c in hand)


def trick_winner(trick: "Trick") -> Card | None:
    """
    Highest card of the led suit. Off-suit discards never win, whatever their rank.
    Returns None only for an empty trick.
    """
    if not trick.cards:
        return None
    suit = trick.suit if trick.suit is not None else trick.cards[0].suit
    winner: Card | None = None
    for c in trick.cards:
        if c.suit != suit:
            continue
        if winner is None or c.rank > winner.rank:
            winner = c
    return winner


def valid_plays(
    trick_suit: Suit | None,
    simplified: bool,
    hearts_broken: bool,
    hand: Sequence[Card],
) -> tuple[Card, ...]:
    """
    Cards that may legally be played from ``hand``, in hand order.

    - Following: must play the led suit if held, otherwise anything.
    - Leading: anything once hearts are broken (or in simplified mode),
      else only zero-point cards unless the hand holds nothing but points.
    """
    if trick_suit is not None:
        if has_suit(hand, trick_suit):
            return tuple(c for c in hand if c.suit == trick_suit)
        return tuple(hand)
    if simplified or hearts_broken:
        return tuple(hand)
    plays = tuple(c for c in hand if card_points(c, simplified) == 0)
    return plays if plays else tuple(hand)


def player_with_card(players: Iterable["Player"], suit: Suit, rank: int) -> "Player | None":
    """First player whose hand holds the exact (suit, rank) card, or None."""
    for player in players:
        if any(c.suit == suit and c.rank == rank for c in player.hand):
            return player
    return None
