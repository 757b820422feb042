"""Full-game tests for the driver."""
import random

import pytest

from hearts.agents import ActionSummary, LowCardAgent, RandomAgent
from hearts.deck import Card, Suit
from hearts.errors import IntegrityError, PolicyContractError
from hearts.game import GameConfig, _starting_seat, final_scores, play_game, run_game, select_action
from hearts.scoring import TOTAL_POINTS, card_points
from hearts.state import Player


def _random_policies(base_seed: int = 0):
    return [RandomAgent(seed=base_seed + i) for i in range(4)]


def test_play_game_plays_52_cards():
    histories = play_game(_random_policies(), simplified=False, rng=random.Random(1))
    assert len(histories) == 4
    played = []
    for seat, history in enumerate(histories):
        assert len(history) == 14
        assert history[-1].terminal
        assert not any(e.terminal for e in history[:-1])
        assert history[-1].actor.seat == seat
        assert history[-1].actor.hand == ()
        played.extend(entry.action for entry in history[:-1])
    assert len(played) == 52
    assert len(set(played)) == 52


@pytest.mark.parametrize("simplified", [False, True])
def test_scores_sum_to_deck_points(simplified):
    for seed in range(5):
        histories = play_game(_random_policies(seed), simplified=simplified, rng=random.Random(seed))
        assert sum(final_scores(histories)) == TOTAL_POINTS[simplified]


def test_two_of_clubs_holder_leads_first_trick():
    histories = play_game(_random_policies(), rng=random.Random(3))
    first_states = [h[0].state for h in histories]
    opening = first_states[0].trick_leader
    leader_hand = histories[opening][0].actor.hand
    assert Card(Suit.CLUBS, 2) in leader_hand
    assert histories[opening][0].state.trick.cards == ()


def test_follow_suit_and_hearts_rule_hold_throughout():
    histories = play_game([LowCardAgent(), RandomAgent(1), LowCardAgent(), RandomAgent(2)], rng=random.Random(11))
    for history in histories:
        for entry in history[:-1]:
            trick = entry.state.trick
            hand = entry.actor.hand
            assert entry.action in hand
            if trick.suit is not None and any(c.suit == trick.suit for c in hand):
                assert entry.action.suit == trick.suit
            if trick.suit is None and not entry.state.hearts_broken:
                if any(card_points(c, False) == 0 for c in hand):
                    assert card_points(entry.action, False) == 0


def test_rewards_match_points_taken():
    histories = play_game(_random_policies(5), rng=random.Random(5))
    penalties = 0.0
    for history in histories:
        for entry in history[:-1]:
            assert entry.reward == 0.5 or entry.reward < 0
            if entry.reward < 0:
                penalties += entry.reward
        taken = -sum(e.reward for e in history[:-1] if e.reward < 0)
        assert taken == history[-1].actor.score
    assert penalties == -26


def test_out_of_suit_flags_match_discards():
    histories = play_game(_random_policies(9), rng=random.Random(9))
    for history in histories:
        expected = [False] * 4
        for entry in history[:-1]:
            led = entry.state.trick.suit
            if led is not None and entry.action.suit != led:
                expected[led] = True
        assert list(history[-1].actor.plays_out_of_suit) == expected


def test_play_game_is_deterministic():
    a = play_game(_random_policies(4), simplified=False, rng=random.Random(99))
    b = play_game(_random_policies(4), simplified=False, rng=random.Random(99))
    assert a == b


def test_run_game_from_config():
    policies = [LowCardAgent() for _ in range(4)]
    r1 = run_game(policies, GameConfig(simplified=True, seed=3))
    r2 = run_game(policies, GameConfig(simplified=True, seed=3))
    assert r1.scores == r2.scores
    assert sum(r1.scores) == 13
    assert r1.histories == r2.histories


def test_select_action_first_maximum_wins():
    a = ActionSummary(Card(Suit.CLUBS, 2), 1.0)
    b = ActionSummary(Card(Suit.CLUBS, 3), 2.0)
    c = ActionSummary(Card(Suit.CLUBS, 4), 2.0)
    assert select_action([a, b, c]) is b


def test_select_action_empty_is_fatal():
    with pytest.raises(PolicyContractError):
        select_action([])


def test_empty_policy_response_aborts_game():
    def silent(state, player, plays):
        return []

    with pytest.raises(PolicyContractError):
        play_game([silent] + _random_policies()[1:], rng=random.Random(0))


def test_illegal_card_from_policy_aborts_game():
    def cheater(state, player, plays):
        return [ActionSummary(Card(Suit.CLUBS, 2), 1.0)]

    with pytest.raises(PolicyContractError):
        play_game([cheater] * 4, rng=random.Random(0))


def test_policy_exception_propagates():
    def broken(state, player, plays):
        raise KeyError("boom")

    with pytest.raises(KeyError):
        play_game([broken] * 4, rng=random.Random(0))


def test_wrong_number_of_policies():
    with pytest.raises(ValueError):
        play_game(_random_policies()[:3])


def test_integrity_error_is_runtime_error():
    assert issubclass(PolicyContractError, IntegrityError)
    assert issubclass(IntegrityError, RuntimeError)


def test_missing_two_of_clubs_is_fatal():
    players = [Player(seat=i, hand=(Card(Suit.DIAMONDS, 2 + i),)) for i in range(4)]
    with pytest.raises(IntegrityError, match="two of clubs"):
        _starting_seat(players)
    players[2] = Player(seat=2, hand=(Card(Suit.CLUBS, 2),))
    assert _starting_seat(players) == 2
