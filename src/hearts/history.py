"""
Per-seat action recording.

Each player owns one ``ActionRecorder``. During play it appends one
``HistoryEntry`` per card the player plays, trick rewards are attached to the
latest entry, and at game end ``terminate`` seals the record with a
``TerminalEntry`` and hands back the immutable history.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Generic, List, Tuple, TypeVar, Union

from .deck import Card
from .errors import IntegrityError

if TYPE_CHECKING:  # pragma: no cover - import cycle guard for type checking only
    from .state import Player, State

T = TypeVar("T")


@dataclass(frozen=True)
class HistoryEntry(Generic[T]):
    """One decision: the state as seen before the play, the card, and what the policy thought of it."""

    state: "State"
    actor: "Player"
    action: Card
    quality: float
    reward: float = 0.0
    trace: T | None = None
    terminal: bool = field(default=False, init=False)


@dataclass(frozen=True)
class TerminalEntry:
    """Closing marker of a history. ``actor`` is the player as of game end."""

    reward: float
    actor: "Player"
    terminal: bool = field(default=True, init=False)


History = Tuple[Union[HistoryEntry[Any], TerminalEntry], ...]


class ActionRecorder(Generic[T]):
    """Append-only log of one seat's actions, sealed exactly once."""

    def __init__(self) -> None:
        self._entries: List[HistoryEntry[T]] = []
        self._sealed = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def _check_open(self) -> None:
        if self._sealed:
            raise IntegrityError("Action recorder was already terminated")

    def record_action(
        self,
        state: "State",
        actor: "Player",
        action: Card,
        quality: float,
        trace: T | None,
    ) -> None:
        self._check_open()
        self._entries.append(
            HistoryEntry(state=state, actor=actor, action=action, quality=quality, trace=trace)
        )

    def assign_reward(self, amount: float) -> None:
        """Add ``amount`` to the reward of the most recent entry."""
        self._check_open()
        if not self._entries:
            raise IntegrityError("Reward assigned before any action was recorded")
        last = self._entries[-1]
        self._entries[-1] = replace(last, reward=last.reward + amount)

    def terminate(self, actor: "Player", reward: float = 0.0) -> History:
        """Seal the recorder and return the chronological history ending in a terminal entry."""
        self._check_open()
        self._sealed = True
        return tuple(self._entries) + (TerminalEntry(reward=reward, actor=actor),)
