"""
Observation encoding for learning policies.

Flat, fixed-size vectors describing one candidate play from one seat's point
of view:
- the seat's own hand and the candidate card (52 bits each),
- cards already on the table this trick, by position (4 × 52),
- which seats are known to be void in which suit (4 × 4, relative seats),
- rule flags (hearts broken, simplified) and trick position (4-way one-hot),
- all four scores relative to this seat, scaled by the deck's total points.

The module stays free of numpy/torch; callers convert lists as they need.
"""
from __future__ import annotations

from typing import Iterable, List

from .deck import NUM_SEATS, RANK_MIN, Card, Suit
from .scoring import TOTAL_POINTS
from .state import Player, State

NUM_CARDS: int = 52
OBS_DIM: int = NUM_CARDS * 2 + NUM_CARDS * NUM_SEATS + NUM_SEATS * 4 + 2 + NUM_SEATS + NUM_SEATS  # 338


def _one_hot(index: int | None, size: int) -> List[int]:
    vec = [0] * size
    if index is None:
        return vec
    if 0 <= index < size:
        vec[index] = 1
    return vec


def card_index(card: Card) -> int:
    """Stable index 0..51 matching make_deck_52(): suit-major, then rank 2..14."""
    return int(card.suit) * 13 + (card.rank - RANK_MIN)


def card_from_index(index: int) -> Card:
    if not 0 <= index < NUM_CARDS:
        raise ValueError(f"Card index out of range: {index}")
    return Card(Suit(index // 13), index % 13 + RANK_MIN)


def encode_card_set(cards: Iterable[Card]) -> List[int]:
    """Binary 52-dim vector: 1 if the card is present."""
    vec = [0] * NUM_CARDS
    for c in cards:
        vec[card_index(c)] = 1
    return vec


def encode_trick(state: State) -> List[int]:
    vec: List[int] = []
    for pos in range(NUM_SEATS):
        card = state.trick.cards[pos] if pos < len(state.trick.cards) else None
        vec.extend(_one_hot(card_index(card) if card is not None else None, NUM_CARDS))
    return vec


def encode_observation(state: State, player: Player, card: Card) -> List[float]:
    """Feature vector (length OBS_DIM) for ``player`` considering ``card`` in ``state``."""
    obs: List[float] = []
    obs.extend(encode_card_set(player.hand))
    obs.extend(encode_card_set([card]))
    obs.extend(encode_trick(state))

    # Seats relative to the observer: 0 = self, 1 = next to play after self, ...
    for offset in range(NUM_SEATS):
        other = state.players[(player.seat + offset) % NUM_SEATS]
        obs.extend(1 if flag else 0 for flag in other.plays_out_of_suit)

    obs.append(1 if state.hearts_broken else 0)
    obs.append(1 if state.simplified else 0)
    obs.extend(_one_hot(len(state.trick.cards), NUM_SEATS))

    total = float(TOTAL_POINTS[state.simplified])
    for offset in range(NUM_SEATS):
        other = state.players[(player.seat + offset) % NUM_SEATS]
        obs.append(other.score / total)
    return obs
