"""Fatal engine errors. None of these are recoverable within a single game."""
from __future__ import annotations


class IntegrityError(RuntimeError):
    """An engine invariant broke (unresolvable trick, missing card, bad history)."""


class PolicyContractError(IntegrityError):
    """A policy returned no candidates or proposed a card outside the legal plays."""
