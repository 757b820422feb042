"""
Point values and per-trick rewards.
Standard: each heart = 1, queen of spades = 13 (26 per deal).
Simplified: hearts only (13 per deal), smaller avoided-points bonus.
"""
from __future__ import annotations

from typing import Iterable

from .deck import NUM_SEATS, RANK_QUEEN, Card, Suit

QUEEN_OF_SPADES_POINTS = 13

# Reward handed to every seat that did not take points in a trick.
AVOIDED_POINTS_BONUS = 0.5
AVOIDED_POINTS_BONUS_SIMPLIFIED = 0.25

# Total points in a deck, keyed by the simplified flag.
TOTAL_POINTS = {False: 13 + QUEEN_OF_SPADES_POINTS, True: 13}


def card_points(card: Card, simplified: bool) -> int:
    """Penalty points carried by a single card."""
    if card.suit == Suit.HEARTS:
        return 1
    if not simplified and card.suit == Suit.SPADES and card.rank == RANK_QUEEN:
        return QUEEN_OF_SPADES_POINTS
    return 0


def trick_points(cards: Iterable[Card], simplified: bool) -> int:
    """Sum of card points over the cards of a trick."""
    return sum(card_points(c, simplified) for c in cards)


def trick_rewards(points: int, winner_seat: int, simplified: bool) -> tuple[float, ...]:
    """
    Learning reward per seat for one resolved trick.

    The winner of a point-bearing trick gets ``-points``; every other seat
    (and the winner of a clean trick) gets the avoided-points bonus. This is
    separate from the cumulative game score.
    """
    bonus = AVOIDED_POINTS_BONUS_SIMPLIFIED if simplified else AVOIDED_POINTS_BONUS
    rewards = [bonus] * NUM_SEATS
    if points != 0:
        rewards[winner_seat] = float(-points)
    return tuple(rewards)
