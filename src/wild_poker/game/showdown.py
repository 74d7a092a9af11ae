"""Ranking evaluated hands at showdown."""
from typing import Dict, Hashable, List, Union
import logging

from wild_poker.evaluation.types import ResolvedHand
from wild_poker.game.variant_hand import VariantHand

logger = logging.getLogger(__name__)

EvaluatedHand = Union[ResolvedHand, VariantHand]


def find_winners(hands: Dict[Hashable, EvaluatedHand]) -> List[Hashable]:
    """
    Find the player(s) holding the strongest hand.

    Args:
        hands: Each player's evaluated hand, keyed by player

    Returns:
        Every player whose strength equals the best, in input order; more
        than one means the pot is split
    """
    if not hands:
        return []

    best_strength = max(hand.strength for hand in hands.values())
    winners = [player for player, hand in hands.items() if hand.strength == best_strength]
    logger.debug(f"Winners {winners} with strength {best_strength}")
    return winners


def rank_players(hands: Dict[Hashable, EvaluatedHand]) -> List[Hashable]:
    """Order players strongest hand first; tied players keep their input order."""
    return sorted(hands, key=lambda player: hands[player].strength, reverse=True)
