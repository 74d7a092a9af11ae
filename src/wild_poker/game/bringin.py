"""Bring-in determination for wild card stud games."""
from typing import Dict, Hashable, Optional
import logging

from wild_poker.core.card import Card
from wild_poker.evaluation.constants import RANK_VALUES, SUIT_ORDER

logger = logging.getLogger(__name__)


def door_card_key(card: Card) -> tuple:
    """Sort key for door cards: rank with Ace high, then suit (clubs lowest)."""
    return RANK_VALUES[card.rank], SUIT_ORDER[card.suit]


def determine_bring_in(door_cards: Dict[Hashable, Card]) -> Optional[Hashable]:
    """
    Find the player who owes the bring-in.

    The player showing the lowest face-up door card brings it in. Wild cards
    play at face value here. Equal ranks are split by suit, clubs lowest.

    Args:
        door_cards: Each player's first face-up card, keyed by player

    Returns:
        The bring-in player, or None if nobody has a door card
    """
    if not door_cards:
        logger.debug("No door cards, no bring-in")
        return None

    player = min(door_cards, key=lambda p: door_card_key(door_cards[p]))
    logger.debug(f"Player {player} brings in with {door_cards[player]}")
    return player
