"""Per-variant hands: card layout plus wild card rule, evaluated once."""
import logging
from typing import Iterable, Optional, Sequence, Tuple, Union

from wild_poker.config.variant_loader import VariantConfig, get_variant_config
from wild_poker.core.card import Card, DealtCard, Rank
from wild_poker.evaluation.evaluator import evaluator
from wild_poker.evaluation.types import HandType, ResolvedHand
from wild_poker.evaluation.wild_rules import WildCardContext, WildCardRule

logger = logging.getLogger(__name__)


class VariantHand:
    """
    A player's hand in a wild card variant.

    The hand is evaluated when it is built and never changes afterwards, so
    it can be shared between threads freely.

    Attributes:
        variant: Configuration of the variant the hand belongs to
        cards: Every physical card the player holds, in layout order
        rule: Wild card rule the hand was evaluated under
        result: The evaluation
    """

    def __init__(
        self,
        variant: Union[str, VariantConfig],
        cards: Sequence[Card],
        context: Optional[WildCardContext] = None,
        rule: Optional[WildCardRule] = None
    ):
        """
        Evaluate a hand.

        Args:
            variant: Variant id or configuration
            cards: Physical cards, already assembled in the variant's layout
            context: Table-wide deal information for order dependent rules
            rule: Rule to use instead of the variant's configured one

        Raises:
            ValueError: If the variant is unknown or the card count does not
                fit its layout
        """
        if isinstance(variant, str):
            variant = get_variant_config(variant)

        variant.layout.validate_size(cards, variant.name)
        self.variant = variant
        self.cards: Tuple[Card, ...] = tuple(cards)
        self.rule = rule or variant.build_rule()
        self.result: ResolvedHand = evaluator.evaluate_hand(
            self.cards, self.rule, context, variant.ranking
        )
        logger.debug(f"{variant.name} hand {[str(c) for c in self.cards]}: {self.result}")

    @property
    def type(self) -> HandType:
        return self.result.hand_type

    @property
    def strength(self) -> int:
        return self.result.strength

    @property
    def wild_cards(self) -> Tuple[Card, ...]:
        """Every wild card the player holds, in hand order."""
        return self.result.wild_cards

    @property
    def best_cards(self) -> Tuple[Card, ...]:
        """The five physical cards of the best hand, wild cards included."""
        return self.result.best_cards

    @property
    def evaluated_best_cards(self) -> Tuple[Card, ...]:
        """The best hand with each wild card shown as the card it played as."""
        return self.result.evaluated_cards

    def __str__(self) -> str:
        return f"{self.variant.name}: {self.result}"

    def __repr__(self) -> str:
        return f"VariantHand({self.variant.id!r}, {[str(c) for c in self.cards]})"


def baseball_hand(
    hole_cards: Sequence[Card],
    board_cards: Sequence[Card],
    down_cards: Sequence[Card]
) -> VariantHand:
    """
    Baseball: Threes and Nines wild.

    A face-up Four earns an extra board card, so there is no upper bound on
    the board, and a player may end with one or two down cards.
    """
    config = get_variant_config('baseball')
    cards = config.layout.assemble_stud(hole_cards, board_cards, down_cards, config.name)
    return VariantHand(config, cards)


def follow_the_queen_hand(
    hole_cards: Sequence[Card],
    board_cards: Sequence[Card],
    down_card: Card,
    face_up_cards: Optional[Sequence[Card]] = None,
    deals: Optional[Iterable[DealtCard]] = None
) -> VariantHand:
    """
    Follow the Queen: Queens wild, plus the rank dealt face up after the
    last face-up Queen.

    Args:
        hole_cards: The two face-down cards dealt first
        board_cards: Up to four face-up cards
        down_card: The final face-down card
        face_up_cards: Every face-up card dealt to the table, in deal order
        deals: The table's deal events, as an alternative to face_up_cards

    Raises:
        ValueError: If the card counts are wrong or neither face_up_cards
            nor deals is given
    """
    config = get_variant_config('follow_the_queen')
    cards = config.layout.assemble_stud(hole_cards, board_cards, [down_card], config.name)

    if deals is not None:
        context = WildCardContext.from_deals(deals)
    elif face_up_cards is not None:
        context = WildCardContext(face_up_cards=tuple(face_up_cards))
    else:
        raise ValueError(
            "face_up_cards: Follow the Queen needs the face-up cards dealt to the whole table"
        )
    return VariantHand(config, cards, context)


def kings_and_lows_hand(
    hole_cards: Sequence[Card],
    board_cards: Sequence[Card],
    down_card: Card,
    king_required: bool = False
) -> VariantHand:
    """
    Kings and Lows (stud): Kings wild, plus every card of the lowest other rank.

    Args:
        king_required: Low cards are wild only for a player holding a King
    """
    config = get_variant_config('kings_and_lows')
    cards = config.layout.assemble_stud(hole_cards, board_cards, [down_card], config.name)
    return VariantHand(config, cards, rule=config.build_rule(rankRequired=king_required))


def kings_and_lows_draw_hand(cards: Sequence[Card], king_required: bool = False) -> VariantHand:
    """Kings and Lows (draw): five cards, Kings and the lowest other rank wild."""
    config = get_variant_config('kings_and_lows_draw')
    cards = config.layout.assemble_draw(cards, config.name)
    return VariantHand(config, cards, rule=config.build_rule(rankRequired=king_required))


class TwosJacksManWithTheAxeHand(VariantHand):
    """Five card draw with Deuces, Jacks and the King of Diamonds wild."""

    def has_natural_pair_of_sevens(self) -> bool:
        """
        Whether the hand holds at least two real Sevens.

        Opening the pot requires a pair of Sevens or better made without
        wild cards.
        """
        return sum(1 for card in self.cards if card.rank == Rank.SEVEN) >= 2


def twos_jacks_man_with_the_axe_hand(cards: Sequence[Card]) -> TwosJacksManWithTheAxeHand:
    config = get_variant_config('twos_jacks_man_with_the_axe')
    cards = config.layout.assemble_draw(cards, config.name)
    return TwosJacksManWithTheAxeHand(config, cards)
