"""Best-hand evaluation with wild card substitution."""
from collections import Counter
from itertools import combinations, combinations_with_replacement
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple
import logging

from wild_poker.core.card import Card, Rank, Suit
from wild_poker.evaluation.constants import BASE_RANKS, HAND_SIZE, STRAIGHT_WINDOWS
from wild_poker.evaluation.strength import evaluate_natural
from wild_poker.evaluation.types import HandType, RankingScheme, ResolvedHand
from wild_poker.evaluation.wild_rules import WildCardContext, WildCardRule

logger = logging.getLogger(__name__)

# Order in which a wild card tries suits when the suit does not matter
SUIT_PREFERENCE = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]

# (hand type, strength, played cards aligned with the subset)
SubsetResult = Tuple[HandType, int, Tuple[Card, ...]]


class WildCardHandEvaluator:
    """
    Finds the best five-card hand a set of cards can make when some of them
    are wild.

    Every five-card subset of the hand is tried. Within a subset each wild
    card may stand in for any rank and suit; only substitutions that can
    matter are searched:

    - ranks already held, ranks completing a straight around the natural
      cards, and the five highest ranks (for flush kickers)
    - the natural cards' suit plus one other when they share a suit,
      otherwise a single suit, since no flush is reachable

    Wild cards are interchangeable, so substitutions are drawn as multisets.
    When several candidates tie on strength the first one enumerated is kept.
    Subsets whose type ceiling ranks below the best hand found so far are not
    searched, and the search stops once Five Aces is found.
    """

    def evaluate_best(
        self,
        cards: Sequence[Card],
        wild_positions: Iterable[int] = (),
        ranking: RankingScheme = RankingScheme.CLASSIC
    ) -> ResolvedHand:
        """
        Evaluate the best hand with the given cards flagged wild.

        Args:
            cards: Every physical card available, at least five
            wild_positions: Positions into `cards` that are wild
            ranking: Hand type ordering for strength

        Returns:
            ResolvedHand for the strongest five-card hand

        Raises:
            ValueError: If fewer than five cards are given or a wild position
                does not refer to one of the cards
        """
        cards = tuple(cards)
        wild = frozenset(wild_positions)

        if len(cards) < HAND_SIZE:
            raise ValueError(f"cards: at least {HAND_SIZE} cards are required, got {len(cards)}")
        for position in wild:
            if not isinstance(position, int) or not 0 <= position < len(cards):
                raise ValueError(
                    f"wild_positions: {position} does not refer to a card in a {len(cards)}-card hand"
                )

        best: Optional[Tuple[Tuple[int, ...], SubsetResult]] = None
        skipped = 0
        for subset in combinations(range(len(cards)), HAND_SIZE):
            if best is not None:
                if self._is_unbeatable(best[1]):
                    break
                naturals = [cards[pos] for pos in subset if pos not in wild]
                ceiling = self.type_ceiling(naturals, HAND_SIZE - len(naturals), ranking)
                if ranking.order(ceiling) < ranking.order(best[1][0]):
                    skipped += 1
                    continue

            result = self._evaluate_subset(cards, subset, wild, ranking)
            if best is None or result[1] > best[1][1]:
                best = (subset, result)

        if skipped:
            logger.debug(f"Skipped {skipped} subsets that could not beat {best[1][0]}")

        subset, (hand_type, strength, played) = best
        resolved = ResolvedHand(
            hand_type=hand_type,
            strength=strength,
            cards=cards,
            best_positions=subset,
            wild_positions=wild,
            evaluated_cards=played,
            ranking=ranking
        )
        logger.debug(
            f"Best hand from {[str(c) for c in cards]} with wild positions {sorted(wild)}: "
            f"{hand_type} {[str(c) for c in played]} (strength {strength})"
        )
        return resolved

    def evaluate_hand(
        self,
        cards: Sequence[Card],
        rule: Optional[WildCardRule] = None,
        context: Optional[WildCardContext] = None,
        ranking: RankingScheme = RankingScheme.CLASSIC
    ) -> ResolvedHand:
        """
        Evaluate a hand under a wild card rule.

        Rules with more than one reading of the hand (an Ace that may or may
        not be the lowest card) are evaluated once per reading; the strongest
        result is kept along with the wild cards of that reading.

        Args:
            cards: Every physical card the player holds
            rule: Wild card rule, None for a natural hand
            context: Table-wide deal information the rule may need
            ranking: Hand type ordering for strength
        """
        cards = tuple(cards)
        if rule is None:
            return self.evaluate_best(cards, (), ranking)

        best: Optional[ResolvedHand] = None
        for interpretation in rule.interpretations(cards, context):
            wild = rule.resolve_wild_positions(cards, interpretation)
            result = self.evaluate_best(cards, wild, ranking)
            logger.debug(
                f"{rule.rule_type.value} rule, ace_low={interpretation.ace_low}: "
                f"{result.hand_type} (strength {result.strength})"
            )
            if best is None or result.strength > best.strength:
                best = result
        return best

    def _evaluate_subset(
        self,
        cards: Tuple[Card, ...],
        subset: Tuple[int, ...],
        wild: FrozenSet[int],
        ranking: RankingScheme
    ) -> SubsetResult:
        wild_slots = [i for i, pos in enumerate(subset) if pos in wild]
        naturals = [cards[pos] for pos in subset if pos not in wild]

        if not wild_slots:
            hand_type, strength = evaluate_natural(naturals, ranking)
            return hand_type, strength, tuple(naturals)

        natural_ranks = {card.rank for card in naturals}
        if len(natural_ranks) <= 1:
            # Every wild joins the natural rank (Aces if all wild)
            rank = naturals[0].rank if naturals else Rank.ACE
            substitutes = self._spread_suits(naturals, [Card(rank, SUIT_PREFERENCE[0])] * len(wild_slots))
            hand_type, strength = evaluate_natural(naturals + substitutes, ranking)
            return hand_type, strength, self._align(subset, wild_slots, naturals, substitutes)

        options = [
            Card(rank, suit)
            for rank in self._candidate_ranks(natural_ranks)
            for suit in self._candidate_suits(naturals)
        ]

        best_type, best_strength, best_subs = None, -1, None
        for combo in combinations_with_replacement(options, len(wild_slots)):
            hand_type, strength = evaluate_natural(naturals + list(combo), ranking)
            if strength > best_strength:
                best_type, best_strength, best_subs = hand_type, strength, list(combo)

        if best_type not in (HandType.FLUSH, HandType.STRAIGHT_FLUSH):
            spread = self._spread_suits(naturals, best_subs)
            if evaluate_natural(naturals + spread, ranking)[1] == best_strength:
                best_subs = spread

        return best_type, best_strength, self._align(subset, wild_slots, naturals, best_subs)

    @staticmethod
    def type_ceiling(
        naturals: Sequence[Card],
        wild_count: int,
        ranking: RankingScheme = RankingScheme.CLASSIC
    ) -> HandType:
        """
        Highest hand type a five-card subset could possibly make.

        The bound may be too high but is never too low, so a subset whose
        ceiling ranks below the best hand found so far can be skipped.

        Args:
            naturals: The subset's natural cards
            wild_count: Number of wild cards in the subset
            ranking: Hand type ordering
        """
        counts = Counter(card.rank for card in naturals)
        most = max(counts.values(), default=0) + wild_count
        suited = len({card.suit for card in naturals}) <= 1
        ranks = set(counts)
        straight = len(ranks) == len(naturals) and any(ranks <= window for window in STRAIGHT_WINDOWS)

        reachable = [HandType.HIGH_CARD, HandType.ONE_PAIR, HandType.TWO_PAIR]
        if most >= 3:
            reachable.append(HandType.TRIPS)
        if straight:
            reachable.append(HandType.STRAIGHT)
        if suited:
            reachable.append(HandType.FLUSH)
        if len(ranks) <= 2:
            reachable.append(HandType.FULL_HOUSE)
        if most >= 4:
            reachable.append(HandType.QUADS)
        if straight and suited:
            reachable.append(HandType.STRAIGHT_FLUSH)
        if most >= 5:
            reachable.append(HandType.FIVE_OF_A_KIND)
        return max(reachable, key=ranking.order)

    @staticmethod
    def _is_unbeatable(result: SubsetResult) -> bool:
        """Five Aces is the strongest hand under every ranking scheme."""
        hand_type, _, played = result
        return hand_type == HandType.FIVE_OF_A_KIND and all(card.rank == Rank.ACE for card in played)

    @staticmethod
    def _candidate_ranks(natural_ranks: set) -> List[Rank]:
        """Ranks worth substituting, highest first."""
        candidates = set(natural_ranks)
        candidates.update(BASE_RANKS[:HAND_SIZE])
        for window in STRAIGHT_WINDOWS:
            if natural_ranks <= window:
                candidates.update(window)
        return [rank for rank in BASE_RANKS if rank in candidates]

    @staticmethod
    def _candidate_suits(naturals: List[Card]) -> List[Suit]:
        """Suits worth substituting: a flush suit if one is possible, plus one other."""
        natural_suits = {card.suit for card in naturals}
        if len(natural_suits) == 1:
            flush_suit = next(iter(natural_suits))
            other = next(s for s in SUIT_PREFERENCE if s != flush_suit)
            return [flush_suit, other]
        return [SUIT_PREFERENCE[0]]

    @staticmethod
    def _spread_suits(naturals: List[Card], substitutes: List[Card]) -> List[Card]:
        """Re-suit substitutes so none duplicates a card already in the hand, where possible."""
        used = set(naturals)
        spread = []
        for sub in substitutes:
            if sub in used:
                sub = next(
                    (Card(sub.rank, s) for s in SUIT_PREFERENCE if Card(sub.rank, s) not in used),
                    sub
                )
            used.add(sub)
            spread.append(sub)
        return spread

    @staticmethod
    def _align(
        subset: Tuple[int, ...],
        wild_slots: List[int],
        naturals: List[Card],
        substitutes: List[Card]
    ) -> Tuple[Card, ...]:
        """Put played cards back in subset order."""
        natural_iter = iter(naturals)
        sub_iter = iter(substitutes)
        return tuple(
            next(sub_iter) if i in wild_slots else next(natural_iter)
            for i in range(len(subset))
        )


# Global evaluator instance
evaluator = WildCardHandEvaluator()


def evaluate_best(
    cards: Sequence[Card],
    wild_positions: Iterable[int] = (),
    ranking: RankingScheme = RankingScheme.CLASSIC
) -> ResolvedHand:
    """Convenience function for WildCardHandEvaluator.evaluate_best."""
    return evaluator.evaluate_best(cards, wild_positions, ranking)


def evaluate_hand(
    cards: Sequence[Card],
    rule: Optional[WildCardRule] = None,
    context: Optional[WildCardContext] = None,
    ranking: RankingScheme = RankingScheme.CLASSIC
) -> ResolvedHand:
    """Convenience function for WildCardHandEvaluator.evaluate_hand."""
    return evaluator.evaluate_hand(cards, rule, context, ranking)
