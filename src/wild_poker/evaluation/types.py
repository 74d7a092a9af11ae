"""Common types for poker evaluation."""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Tuple

from wild_poker.core.card import Card


class HandType(str, Enum):
    """Poker hand categories."""
    HIGH_CARD = 'High Card'
    ONE_PAIR = 'One Pair'
    TWO_PAIR = 'Two Pair'
    TRIPS = 'Three of a Kind'
    STRAIGHT = 'Straight'
    FLUSH = 'Flush'
    FULL_HOUSE = 'Full House'
    QUADS = 'Four of a Kind'
    STRAIGHT_FLUSH = 'Straight Flush'
    FIVE_OF_A_KIND = 'Five of a Kind'

    def __str__(self) -> str:
        return self.value


class RankingScheme(str, Enum):
    """Relative ordering of hand types."""
    CLASSIC = 'classic'        # Five of a Kind above Straight Flush
    SHORT_DECK = 'short_deck'  # Classic, but Flush beats Full House

    def order(self, hand_type: HandType) -> int:
        """Position of a hand type in this scheme, 1 for the weakest."""
        return HAND_TYPE_ORDERS[self].index(hand_type) + 1


HAND_TYPE_ORDERS = {
    RankingScheme.CLASSIC: [
        HandType.HIGH_CARD,
        HandType.ONE_PAIR,
        HandType.TWO_PAIR,
        HandType.TRIPS,
        HandType.STRAIGHT,
        HandType.FLUSH,
        HandType.FULL_HOUSE,
        HandType.QUADS,
        HandType.STRAIGHT_FLUSH,
        HandType.FIVE_OF_A_KIND,
    ],
    RankingScheme.SHORT_DECK: [
        HandType.HIGH_CARD,
        HandType.ONE_PAIR,
        HandType.TWO_PAIR,
        HandType.TRIPS,
        HandType.STRAIGHT,
        HandType.FULL_HOUSE,
        HandType.FLUSH,
        HandType.QUADS,
        HandType.STRAIGHT_FLUSH,
        HandType.FIVE_OF_A_KIND,
    ],
}


@dataclass(frozen=True)
class ResolvedHand:
    """
    Result of evaluating a hand, wild cards included.

    Positions refer to the order of the cards passed to the evaluator, so two
    structurally identical cards in one hand stay distinguishable.

    Attributes:
        hand_type: Category of the best five-card hand
        strength: Comparable value; higher beats lower under `ranking`
        cards: Every physical card that was evaluated
        best_positions: Positions of the five physical cards used
        wild_positions: Positions of every card flagged wild
        evaluated_cards: The natural hand played, aligned with best_positions;
            a wild card appears as the rank and suit it stood in for
        ranking: Ranking scheme the strength was computed under
    """
    hand_type: HandType
    strength: int
    cards: Tuple[Card, ...]
    best_positions: Tuple[int, ...]
    wild_positions: FrozenSet[int]
    evaluated_cards: Tuple[Card, ...]
    ranking: RankingScheme = RankingScheme.CLASSIC

    @property
    def best_cards(self) -> Tuple[Card, ...]:
        """The five physical cards that produced the result."""
        return tuple(self.cards[i] for i in self.best_positions)

    @property
    def wild_cards(self) -> Tuple[Card, ...]:
        """Every physical card flagged wild, in hand order."""
        return tuple(self.cards[i] for i in sorted(self.wild_positions))

    @property
    def best_wild_flags(self) -> Tuple[bool, ...]:
        """Whether each of best_cards was played as a wild card."""
        return tuple(i in self.wild_positions for i in self.best_positions)

    @property
    def substitutions(self) -> Tuple[Tuple[Card, Card], ...]:
        """(physical wild card, card it stood in for) pairs in the best hand."""
        return tuple(
            (self.cards[pos], played)
            for pos, played in zip(self.best_positions, self.evaluated_cards)
            if pos in self.wild_positions
        )

    def __str__(self) -> str:
        return f"{self.hand_type} ({' '.join(str(c) for c in self.best_cards)})"
