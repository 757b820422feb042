"""
Standard 52-card deck: 4 suits × 13 ranks (2..14, ace high).
Suit order follows the engine's indexing (clubs, diamonds, spades, hearts).
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum


class Suit(IntEnum):
    """Clubs, Diamonds, Spades, Hearts. Values double as indices into per-suit flags."""
    CLUBS = 0
    DIAMONDS = 1
    SPADES = 2
    HEARTS = 3


RANK_MIN = 2
RANK_JACK = 11
RANK_QUEEN = 12
RANK_KING = 13
RANK_ACE = 14

HAND_SIZE = 13
NUM_SEATS = 4

_SUIT_CHARS = "♣♦♠♥"
_RANK_CHARS = {RANK_JACK: "J", RANK_QUEEN: "Q", RANK_KING: "K", RANK_ACE: "A"}


@dataclass(frozen=True, order=True)
class Card:
    """A single playing card. Two cards are equal iff suit and rank match."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not RANK_MIN <= self.rank <= RANK_ACE:
            raise ValueError(f"Card rank out of range: {self.rank}")
        if not isinstance(self.suit, Suit):
            # Accept plain ints (e.g. from encoded observations) and normalise.
            object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        rank_str = _RANK_CHARS.get(self.rank) or str(self.rank)
        return f"{rank_str}{_SUIT_CHARS[self.suit]}"

    def __repr__(self) -> str:
        return str(self)


def make_deck_52() -> list[Card]:
    """Build a sorted 52-card deck, suit-major then rank 2..14."""
    deck: list[Card] = []
    for s in Suit:
        for rank in range(RANK_MIN, RANK_ACE + 1):
            deck.append(Card(s, rank))
    return deck


def shuffle_deck(deck: list[Card], rng: random.Random | None = None) -> list[Card]:
    """Return a shuffled copy of ``deck``. Pass a seeded ``rng`` for reproducible deals."""
    if rng is None:
        rng = random.Random()
    deck = list(deck)
    rng.shuffle(deck)
    return deck


def deal_hands(deck: list[Card]) -> tuple[tuple[Card, ...], ...]:
    """
    Split a 52-card deck into 4 hands of 13 in fixed seat order:
    seat 0 gets cards 0..12, seat 1 gets 13..25, and so on.
    """
    if len(deck) != HAND_SIZE * NUM_SEATS:
        raise ValueError(f"Expected {HAND_SIZE * NUM_SEATS} cards, got {len(deck)}")
    return tuple(
        tuple(deck[seat * HAND_SIZE:(seat + 1) * HAND_SIZE]) for seat in range(NUM_SEATS)
    )
