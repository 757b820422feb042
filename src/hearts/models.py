"""
Neural network used by ``NNPolicy`` to score candidate plays.

A small MLP mapping one observation from ``hearts.env`` (a seat's view of
the table plus the candidate card) to a scalar quality estimate.
"""
from __future__ import annotations

from dataclasses import dataclass

import torch
from torch import nn

from .env import OBS_DIM


@dataclass
class PolicyConfig:
    """Metadata describing a scoring network architecture."""

    arch_name: str = "hearts_qnet_v1"
    obs_dim: int = OBS_DIM
    hidden_dim: int = 128


class HeartsQNet(nn.Module):
    """
    Quality network.

    - Input: observation tensor of shape (batch, obs_dim)
    - Output: quality estimates of shape (batch,)
    """

    def __init__(self, obs_dim: int = OBS_DIM, hidden_dim: int = 128) -> None:
        super().__init__()
        self.net = nn.Sequential(
            nn.Linear(obs_dim, hidden_dim),
            nn.ReLU(),
            nn.Linear(hidden_dim, hidden_dim),
            nn.ReLU(),
            nn.Linear(hidden_dim, 1),
        )

    @classmethod
    def from_config(cls, cfg: PolicyConfig) -> "HeartsQNet":
        return cls(obs_dim=cfg.obs_dim, hidden_dim=cfg.hidden_dim)

    def forward(self, obs: torch.Tensor) -> torch.Tensor:  # type: ignore[override]
        return self.net(obs).squeeze(-1)


__all__ = ["HeartsQNet", "PolicyConfig"]
