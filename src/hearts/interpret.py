"""
Turn a sealed history into supervised feedback.

Walking backwards from the terminal entry, every action gets paired with the
return that actually followed it, so a policy can compare its own
``quality`` estimate (``expected``) against reality (``actual``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, List, Sequence, TypeVar

from .deck import Card
from .errors import IntegrityError
from .state import Player, State

T = TypeVar("T")


@dataclass(frozen=True)
class FeedBack(Generic[T]):
    """
    Feedback for one action.

    ``actual`` is the return from everything after this action (later trick
    rewards plus the terminal reward); the action's own ``reward`` is kept
    separately.
    """

    actual: float
    expected: float
    reward: float
    trace: T | None
    state: State
    actor: Player
    action: Card


@dataclass
class InterpretedHistory:
    reward: float
    score: int
    feedback: List[FeedBack[Any]] = field(default_factory=list)


def interpret_history(history: Sequence[Any], discount: float = 1.0) -> InterpretedHistory:
    """
    Fold a chronological history (ending with its terminal entry) into feedback.

    ``discount`` scales the return carried back past each action; the default
    of 1.0 sums rewards undiscounted. Feedback is returned in chronological
    order.
    """
    if len(history) == 0 or not history[-1].terminal:
        raise IntegrityError("Game history is empty or was not terminated")

    terminal = history[-1]
    running = float(terminal.reward)
    feedback: List[FeedBack[Any]] = []
    for entry in reversed(history[:-1]):
        if entry.terminal:
            raise IntegrityError("Game history has a terminal entry before its end")
        feedback.append(
            FeedBack(
                actual=running,
                expected=entry.quality,
                reward=entry.reward,
                trace=entry.trace,
                state=entry.state,
                actor=entry.actor,
                action=entry.action,
            )
        )
        running = entry.reward + discount * running

    feedback.reverse()
    return InterpretedHistory(reward=running, score=terminal.actor.score, feedback=feedback)
