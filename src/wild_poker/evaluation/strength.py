"""Hand type determination and strength encoding for natural five-card hands."""
from collections import Counter
from typing import List, Sequence, Tuple
import logging

from wild_poker.core.card import Card
from wild_poker.evaluation.constants import (
    ACE_LOW_VALUE, HAND_SIZE, RANK_VALUES, STRENGTH_BASE, TYPE_MULTIPLIER, WHEEL_VALUES
)
from wild_poker.evaluation.types import HandType, RankingScheme

logger = logging.getLogger(__name__)


def _validate_hand_size(cards: Sequence[Card]) -> None:
    if len(cards) != HAND_SIZE:
        raise ValueError(f"cards: strength encoding requires exactly {HAND_SIZE} cards, got {len(cards)}")


def is_straight(values: Sequence[int]) -> bool:
    """Five distinct values in a run, Ace playing high or low."""
    distinct = set(values)
    if len(distinct) != HAND_SIZE:
        return False
    return max(distinct) - min(distinct) == HAND_SIZE - 1 or distinct == WHEEL_VALUES


def is_wheel(values: Sequence[int]) -> bool:
    return set(values) == WHEEL_VALUES


def determine_hand_type(cards: Sequence[Card]) -> HandType:
    """
    Categorise a natural five-card hand.

    Args:
        cards: Exactly five cards, none of them wild

    Returns:
        The hand's category

    Raises:
        ValueError: If the hand is not exactly five cards
    """
    _validate_hand_size(cards)

    counts = Counter(card.rank for card in cards)
    distinct = len(counts)
    biggest_group = max(counts.values())

    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    if distinct == 2:
        return HandType.QUADS if biggest_group == 4 else HandType.FULL_HOUSE
    if distinct == 3:
        return HandType.TRIPS if biggest_group == 3 else HandType.TWO_PAIR
    if distinct == 4:
        return HandType.ONE_PAIR

    straight = is_straight([RANK_VALUES[card.rank] for card in cards])
    flush = len({card.suit for card in cards}) == 1

    if straight and flush:
        return HandType.STRAIGHT_FLUSH
    if straight:
        return HandType.STRAIGHT
    if flush:
        return HandType.FLUSH
    return HandType.HIGH_CARD


def kicker_values(cards: Sequence[Card], hand_type: HandType) -> List[int]:
    """
    Order card values by poker significance.

    Bigger rank groups come first, then higher ranks. A wheel straight
    plays its Ace as the lowest card.
    """
    values = [RANK_VALUES[card.rank] for card in cards]

    if hand_type in (HandType.STRAIGHT, HandType.STRAIGHT_FLUSH) and is_wheel(values):
        return [5, 4, 3, 2, ACE_LOW_VALUE]

    counts = Counter(values)
    return sorted(values, key=lambda v: (counts[v], v), reverse=True)


def calculate_strength(
    cards: Sequence[Card],
    hand_type: HandType,
    ranking: RankingScheme = RankingScheme.CLASSIC
) -> int:
    """
    Encode a natural hand as a single comparable integer.

    The hand type's position in the ranking scheme fills the most significant
    digits; kickers follow, most significant first, in base 15.
    """
    _validate_hand_size(cards)
    kickers = sum(
        value * STRENGTH_BASE ** (HAND_SIZE - 1 - i)
        for i, value in enumerate(kicker_values(cards, hand_type))
    )
    return ranking.order(hand_type) * TYPE_MULTIPLIER + kickers


def evaluate_natural(
    cards: Sequence[Card],
    ranking: RankingScheme = RankingScheme.CLASSIC
) -> Tuple[HandType, int]:
    """
    Determine type and strength of a natural five-card hand.

    Args:
        cards: Exactly five cards, none of them wild
        ranking: Hand type ordering to encode under

    Returns:
        (hand type, strength)
    """
    hand_type = determine_hand_type(cards)
    return hand_type, calculate_strength(cards, hand_type, ranking)
