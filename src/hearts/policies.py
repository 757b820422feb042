"""
Policy wrapper around ``HeartsQNet`` plus helpers to turn its feedback into arrays.

``NNPolicy`` scores every legal card in one batched forward pass and returns
the observation it scored as the trace, so whatever learns from the
interpreted history can rebuild the exact network input.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np
import torch

from .agents import ActionSummary
from .deck import Card
from .env import encode_observation
from .interpret import FeedBack
from .models import HeartsQNet, PolicyConfig
from .state import Player, State


@dataclass
class NNPolicy:
    """
    Scores legal plays with a ``HeartsQNet``.

    With ``epsilon > 0`` the policy occasionally offers only one random
    legal card, so the engine has to play it; the quality reported for it
    is still the network estimate.
    """

    model: HeartsQNet
    policy_cfg: PolicyConfig = field(default_factory=PolicyConfig)
    device: torch.device = field(default_factory=lambda: torch.device("cpu"))
    epsilon: float = 0.0
    seed: int | None = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        self.model.to(self.device)

    def __call__(
        self,
        state: State,
        player: Player,
        legal_plays: Sequence[Card],
    ) -> List[ActionSummary]:
        if len(legal_plays) == 0:
            raise ValueError("Empty legal_plays in NNPolicy")
        obs_np = np.array(
            [encode_observation(state, player, c) for c in legal_plays],
            dtype=np.float32,
        )
        obs_t = torch.from_numpy(obs_np).to(self.device)
        with torch.no_grad():
            qualities = self.model(obs_t).cpu().numpy()

        summaries = [
            ActionSummary(action=card, quality=float(qualities[i]), trace=obs_np[i])
            for i, card in enumerate(legal_plays)
        ]
        if self.epsilon > 0.0 and self._rng.random() < self.epsilon:
            # Exploration: offer a single random candidate, keeping its real estimate.
            return [summaries[self._rng.randrange(len(summaries))]]
        return summaries


def make_nn_policy(
    policy_cfg: PolicyConfig | None = None,
    device: torch.device | None = None,
    epsilon: float = 0.0,
    seed: int | None = None,
) -> NNPolicy:
    """Build an ``NNPolicy`` around a freshly initialised network."""
    policy_cfg = policy_cfg or PolicyConfig()
    device = device or torch.device("cpu")
    if seed is not None:
        torch.manual_seed(seed)
    model = HeartsQNet.from_config(policy_cfg)
    model.eval()
    return NNPolicy(model=model, policy_cfg=policy_cfg, device=device, epsilon=epsilon, seed=seed)


def feedback_arrays(feedback: Sequence[FeedBack]) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Stack the feedback of an ``NNPolicy`` seat into ``(inputs, expected, actual)``.

    ``inputs`` has shape (n, obs_dim); the other two have shape (n,).
    """
    if not feedback:
        raise ValueError("No feedback to stack")
    inputs = np.stack([np.asarray(fb.trace, dtype=np.float32) for fb in feedback])
    expected = np.array([fb.expected for fb in feedback], dtype=np.float32)
    actual = np.array([fb.actual for fb in feedback], dtype=np.float32)
    return inputs, expected, actual


__all__ = ["NNPolicy", "make_nn_policy", "feedback_arrays"]
