"""Tests for NNPolicy and feedback stacking (if torch is available)."""

import importlib
import random


def _has_torch() -> bool:
    try:
        importlib.import_module("torch")  # noqa: F401
        return True
    except Exception:
        return False


def test_nn_policy_plays_full_game_and_feeds_back():
    if not _has_torch():
        return

    import numpy as np
    import torch

    from hearts.agents import RandomAgent
    from hearts.env import OBS_DIM
    from hearts.game import play_game
    from hearts.interpret import interpret_history
    from hearts.policies import feedback_arrays, make_nn_policy

    policy = make_nn_policy(seed=0)
    histories = play_game(
        [policy, RandomAgent(1), RandomAgent(2), RandomAgent(3)],
        rng=random.Random(0),
    )
    result = interpret_history(histories[0])
    inputs, expected, actual = feedback_arrays(result.feedback)

    assert inputs.shape == (13, OBS_DIM)
    assert expected.shape == (13,)
    assert actual.shape == (13,)

    with torch.no_grad():
        rescored = policy.model(torch.from_numpy(inputs)).numpy()
    assert np.allclose(rescored, expected, atol=1e-5)


def test_nn_policy_scores_each_legal_card():
    if not _has_torch():
        return

    from hearts.deck import Card, Suit
    from hearts.policies import make_nn_policy
    from hearts.state import Player, initial_state

    hands = [[Card(Suit.CLUBS, 2), Card(Suit.CLUBS, 5), Card(Suit.HEARTS, 9)], [], [], []]
    players = tuple(Player(seat=i, hand=tuple(h)) for i, h in enumerate(hands))
    state = initial_state(players, simplified=False, trick_leader=0)
    legal = (Card(Suit.CLUBS, 2), Card(Suit.CLUBS, 5))

    summaries = make_nn_policy(seed=1)(state, state.players[0], legal)
    assert [s.action for s in summaries] == list(legal)
    assert all(isinstance(s.quality, float) for s in summaries)

    explorer = make_nn_policy(seed=1, epsilon=1.0)
    picked = explorer(state, state.players[0], legal)
    assert len(picked) == 1
    assert picked[0].action in legal
