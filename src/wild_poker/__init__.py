"""Wild card poker hand evaluation package."""

from wild_poker.core.card import Card, DealtCard, Rank, Suit, Visibility, cards_from_string
from wild_poker.evaluation.evaluator import evaluate_best, evaluate_hand
from wild_poker.evaluation.types import HandType, RankingScheme, ResolvedHand

__version__ = "0.1.0"
__all__ = [
    "Card",
    "DealtCard",
    "Rank",
    "Suit",
    "Visibility",
    "cards_from_string",
    "evaluate_best",
    "evaluate_hand",
    "HandType",
    "RankingScheme",
    "ResolvedHand",
]
