"""Wild card rules: which of a hand's cards count as wild."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple
import logging

from wild_poker.core.card import Card, DealtCard, Rank
from wild_poker.evaluation.constants import ACE_LOW_VALUE, RANK_VALUES

logger = logging.getLogger(__name__)


class WildRuleType(str, Enum):
    """Shapes of wild card rule."""
    FIXED_RANK = 'fixed_rank'   # Named ranks (and optionally named cards) are wild
    LOWEST = 'lowest'           # A designated rank plus the hand's lowest other rank
    FOLLOW = 'follow'           # A designated rank plus the rank dealt up after it


@dataclass(frozen=True)
class WildCardContext:
    """
    Information from outside the hand that a rule may need.

    Attributes:
        face_up_cards: Face-up cards dealt to the whole table, in deal order
        ace_low: Whether Aces count as rank 1 when looking for the lowest card
    """
    face_up_cards: Tuple[Card, ...] = ()
    ace_low: bool = False

    @classmethod
    def from_deals(cls, deals: Iterable[DealtCard]) -> 'WildCardContext':
        """Build a context from the table's chronological deal events."""
        return cls(face_up_cards=tuple(deal.card for deal in deals if deal.face_up))

    def with_ace_low(self, ace_low: bool) -> 'WildCardContext':
        return replace(self, ace_low=ace_low)


class WildCardRule(ABC):
    """Base class for wild card rules."""

    rule_type: ClassVar[WildRuleType]

    @abstractmethod
    def resolve_wild_positions(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> FrozenSet[int]:
        """
        Determine which positions in `cards` hold wild cards.

        Args:
            cards: Every card the player holds
            context: Table-wide deal information and Ace interpretation

        Returns:
            Positions into `cards`
        """

    def determine_wild_cards(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> List[Card]:
        """The wild cards themselves, in hand order."""
        return [cards[i] for i in sorted(self.resolve_wild_positions(cards, context))]

    def interpretations(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> List[WildCardContext]:
        """
        Contexts the evaluator must try, best result kept.

        Most rules have exactly one reading of a hand.
        """
        return [context or WildCardContext()]


@dataclass(frozen=True)
class FixedRankRule(WildCardRule):
    """
    Cards of the named ranks, and any individually named cards, are wild.

    Baseball uses Threes and Nines; Twos, Jacks, Man with the Axe uses
    Deuces, Jacks and the King of Diamonds.
    """
    rule_type: ClassVar[WildRuleType] = WildRuleType.FIXED_RANK

    ranks: FrozenSet[Rank]
    cards: FrozenSet[Card] = field(default_factory=frozenset)

    def resolve_wild_positions(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> FrozenSet[int]:
        return frozenset(
            i for i, card in enumerate(cards)
            if card.rank in self.ranks or card in self.cards
        )


@dataclass(frozen=True)
class LowestRankRule(WildCardRule):
    """
    A designated rank is always wild, and so is every card sharing the lowest
    rank among the remaining cards.

    Whether an Ace is the lowest card depends on the Ace interpretation in the
    context; `interpretations` offers both when it matters.

    Attributes:
        wild_rank: The always-wild rank (Kings in Kings and Lows)
        wild_rank_required: Low cards are wild only if the hand holds the wild rank
    """
    rule_type: ClassVar[WildRuleType] = WildRuleType.LOWEST

    wild_rank: Rank = Rank.KING
    wild_rank_required: bool = False

    def resolve_wild_positions(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> FrozenSet[int]:
        ace_low = context.ace_low if context else False

        wild = {i for i, card in enumerate(cards) if card.rank == self.wild_rank}
        if self.wild_rank_required and not wild:
            return frozenset()

        others = [i for i, card in enumerate(cards) if card.rank != self.wild_rank]
        if others:
            values = {i: self._value(cards[i], ace_low) for i in others}
            lowest = min(values.values())
            wild.update(i for i in others if values[i] == lowest)

        return frozenset(wild)

    def interpretations(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> List[WildCardContext]:
        context = context or WildCardContext()
        ace_high = context.with_ace_low(False)
        if not any(card.rank == Rank.ACE for card in cards):
            return [ace_high]

        ace_low = context.with_ace_low(True)
        if self.resolve_wild_positions(cards, ace_high) == self.resolve_wild_positions(cards, ace_low):
            return [ace_high]
        return [ace_high, ace_low]

    @staticmethod
    def _value(card: Card, ace_low: bool) -> int:
        if ace_low and card.rank == Rank.ACE:
            return ACE_LOW_VALUE
        return RANK_VALUES[card.rank]


@dataclass(frozen=True)
class FollowRankRule(WildCardRule):
    """
    A designated rank is always wild, plus the rank of the face-up card dealt
    right after the most recent face-up card of the designated rank.

    The scan covers face-up cards dealt to every player. If the designated
    rank is the last face-up card dealt, nothing follows it and only the
    designated rank is wild.
    """
    rule_type: ClassVar[WildRuleType] = WildRuleType.FOLLOW

    wild_rank: Rank = Rank.QUEEN

    def wild_ranks(self, face_up_cards: Sequence[Card]) -> FrozenSet[Rank]:
        """Ranks that are wild given the face-up cards so far, in deal order."""
        following: Optional[Rank] = None
        for i, card in enumerate(face_up_cards):
            if card.rank == self.wild_rank:
                following = face_up_cards[i + 1].rank if i + 1 < len(face_up_cards) else None

        ranks = {self.wild_rank}
        if following is not None:
            ranks.add(following)
        logger.debug(
            f"Wild ranks after {[str(c) for c in face_up_cards]}: {sorted(str(r) for r in ranks)}"
        )
        return frozenset(ranks)

    def resolve_wild_positions(
        self,
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None
    ) -> FrozenSet[int]:
        face_up_cards = context.face_up_cards if context else ()
        ranks = self.wild_ranks(face_up_cards)
        return frozenset(i for i, card in enumerate(cards) if card.rank in ranks)


def _rank_from_config(value: str) -> Rank:
    try:
        return Rank(value.upper())
    except ValueError:
        raise ValueError(f"Invalid rank in wild card rule: {value}")


def wild_rule_from_config(config: Dict[str, Any]) -> WildCardRule:
    """
    Build a wild card rule from its configuration.

    Args:
        config: e.g. {"type": "fixed_rank", "ranks": ["3", "9"]},
                {"type": "lowest", "rank": "K", "rankRequired": false} or
                {"type": "follow", "rank": "Q"}

    Raises:
        ValueError: If the rule type or a rank is unknown
    """
    rule_type = config.get("type")

    if rule_type == WildRuleType.FIXED_RANK:
        return FixedRankRule(
            ranks=frozenset(_rank_from_config(r) for r in config.get("ranks", [])),
            cards=frozenset(Card.from_string(c) for c in config.get("cards", []))
        )
    if rule_type == WildRuleType.LOWEST:
        return LowestRankRule(
            wild_rank=_rank_from_config(config.get("rank", "K")),
            wild_rank_required=bool(config.get("rankRequired", False))
        )
    if rule_type == WildRuleType.FOLLOW:
        return FollowRankRule(wild_rank=_rank_from_config(config.get("rank", "Q")))

    raise ValueError(f"Unknown wild card rule type: {rule_type}")
