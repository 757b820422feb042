"""Hearts self-play simulator and training-signal extraction."""

__version__ = "0.1.0"

from .deck import Card, Suit, make_deck_52, shuffle_deck, deal_hands
from .errors import IntegrityError, PolicyContractError
from .play import player_with_card, trick_winner, valid_plays
from .scoring import TOTAL_POINTS, card_points, trick_points, trick_rewards
from .history import ActionRecorder, HistoryEntry, TerminalEntry
from .state import Player, State, Trick, initial_state, play_card, resolve_trick
from .agents import ActionSummary, LowCardAgent, Policy, RandomAgent
from .game import GameConfig, GameResult, play_game, play_round, run_game, select_action
from .interpret import FeedBack, InterpretedHistory, interpret_history
