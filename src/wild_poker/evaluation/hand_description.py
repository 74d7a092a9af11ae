"""Human-readable descriptions of evaluated hands."""
from collections import Counter
from typing import Dict, List, Sequence

from wild_poker.core.card import Card, Rank
from wild_poker.evaluation.constants import RANK_VALUES
from wild_poker.evaluation.strength import is_wheel
from wild_poker.evaluation.types import HandType, ResolvedHand


class HandDescriber:
    """Generates human-readable descriptions for poker hands."""

    RANK_NAMES: Dict[Rank, str] = {
        Rank.ACE: 'Ace',
        Rank.KING: 'King',
        Rank.QUEEN: 'Queen',
        Rank.JACK: 'Jack',
        Rank.TEN: 'Ten',
        Rank.NINE: 'Nine',
        Rank.EIGHT: 'Eight',
        Rank.SEVEN: 'Seven',
        Rank.SIX: 'Six',
        Rank.FIVE: 'Five',
        Rank.FOUR: 'Four',
        Rank.THREE: 'Three',
        Rank.TWO: 'Deuce',
    }

    def describe(self, resolved: ResolvedHand) -> str:
        """Describe a resolved hand from the cards it actually played."""
        return self.describe_cards(resolved.hand_type, resolved.evaluated_cards)

    def describe_cards(self, hand_type: HandType, cards: Sequence[Card]) -> str:
        """
        Describe a natural five-card hand of a known type.

        Args:
            hand_type: The hand's category
            cards: The five cards played, wild cards already substituted
        """
        groups = self._groups(cards)

        if hand_type == HandType.HIGH_CARD:
            return f"{self.name(groups[0])} high"
        if hand_type == HandType.ONE_PAIR:
            return f"Pair of {self.plural(groups[0])}"
        if hand_type == HandType.TWO_PAIR:
            return f"Two pair, {self.plural(groups[0])} and {self.plural(groups[1])}"
        if hand_type == HandType.TRIPS:
            return f"Three of a kind, {self.plural(groups[0])}"
        if hand_type == HandType.STRAIGHT:
            return f"Straight to the {self.name(self._straight_high(cards))}"
        if hand_type == HandType.FLUSH:
            return f"{self.name(groups[0])} high flush"
        if hand_type == HandType.FULL_HOUSE:
            return f"Full house, {self.plural(groups[0])} full of {self.plural(groups[1])}"
        if hand_type == HandType.QUADS:
            return f"Four of a kind, {self.plural(groups[0])}"
        if hand_type == HandType.STRAIGHT_FLUSH:
            high = self._straight_high(cards)
            if high == Rank.ACE:
                return "Royal flush"
            return f"Straight flush to the {self.name(high)}"
        if hand_type == HandType.FIVE_OF_A_KIND:
            return f"Five of a kind, {self.plural(groups[0])}"
        raise ValueError(f"Unknown hand type: {hand_type}")

    def name(self, rank: Rank) -> str:
        return self.RANK_NAMES[rank]

    def plural(self, rank: Rank) -> str:
        if rank == Rank.SIX:
            return 'Sixes'
        return f"{self.RANK_NAMES[rank]}s"

    @staticmethod
    def _groups(cards: Sequence[Card]) -> List[Rank]:
        """Distinct ranks, biggest group first, then highest rank."""
        counts = Counter(card.rank for card in cards)
        return sorted(counts, key=lambda r: (counts[r], RANK_VALUES[r]), reverse=True)

    @staticmethod
    def _straight_high(cards: Sequence[Card]) -> Rank:
        if is_wheel([RANK_VALUES[card.rank] for card in cards]):
            return Rank.FIVE
        return max((card.rank for card in cards), key=lambda r: RANK_VALUES[r])
