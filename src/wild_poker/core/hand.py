"""Card layouts for the hands a variant deals."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from .card import Card

logger = logging.getLogger(__name__)


class LayoutType(str, Enum):
    """How a variant's cards are arranged."""
    STUD = 'stud'    # hole + board + down cards
    DRAW = 'draw'    # a flat five-card hand


@dataclass(frozen=True)
class HandLayout:
    """
    Describes how many cards of each kind a variant's hand holds.

    Attributes:
        layout_type: Stud or draw
        hole_cards: Exact number of face-down cards dealt first (stud)
        max_board_cards: Upper bound on face-up cards, None if unbounded (stud)
        min_down_cards: Fewest final face-down cards (stud)
        max_down_cards: Most final face-down cards (stud)
        draw_cards: Exact size of a draw hand
    """
    layout_type: LayoutType
    hole_cards: int = 0
    max_board_cards: Optional[int] = None
    min_down_cards: int = 0
    max_down_cards: int = 0
    draw_cards: int = 5

    @classmethod
    def stud(
        cls,
        hole_cards: int,
        max_board_cards: Optional[int] = None,
        down_cards: int = 1,
        max_down_cards: Optional[int] = None
    ) -> 'HandLayout':
        return cls(
            layout_type=LayoutType.STUD,
            hole_cards=hole_cards,
            max_board_cards=max_board_cards,
            min_down_cards=down_cards,
            max_down_cards=down_cards if max_down_cards is None else max_down_cards
        )

    @classmethod
    def draw(cls, draw_cards: int = 5) -> 'HandLayout':
        return cls(layout_type=LayoutType.DRAW, draw_cards=draw_cards)

    @property
    def min_cards(self) -> int:
        if self.layout_type == LayoutType.DRAW:
            return self.draw_cards
        return self.hole_cards + self.min_down_cards

    @property
    def max_cards(self) -> Optional[int]:
        """Most cards a hand can hold, None if the board is unbounded."""
        if self.layout_type == LayoutType.DRAW:
            return self.draw_cards
        if self.max_board_cards is None:
            return None
        return self.hole_cards + self.max_board_cards + self.max_down_cards

    def validate_size(self, cards: Sequence[Card], name: str = 'this variant') -> None:
        """
        Check an already assembled hand holds a possible number of cards.

        Raises:
            ValueError: If the count is outside the layout's range
        """
        count = len(cards)
        if self.layout_type == LayoutType.DRAW:
            if count != self.draw_cards:
                raise ValueError(
                    f"cards: {name} needs exactly {self.draw_cards} cards, got {count}"
                )
            return

        if count < self.min_cards:
            raise ValueError(f"cards: {name} needs at least {self.min_cards} cards, got {count}")
        if self.max_cards is not None and count > self.max_cards:
            raise ValueError(f"cards: {name} has at most {self.max_cards} cards, got {count}")

    def assemble_stud(
        self,
        hole_cards: Sequence[Card],
        board_cards: Sequence[Card],
        down_cards: Sequence[Card],
        name: str = 'this variant'
    ) -> Tuple[Card, ...]:
        """
        Validate and combine stud cards as hole + board + down.

        Raises:
            ValueError: If the layout is not stud or a count is out of range
        """
        if self.layout_type != LayoutType.STUD:
            raise ValueError(f"{name} is not a stud game")
        if len(hole_cards) != self.hole_cards:
            raise ValueError(
                f"hole_cards: {name} needs exactly {self.hole_cards} hole cards, got {len(hole_cards)}"
            )
        if self.max_board_cards is not None and len(board_cards) > self.max_board_cards:
            raise ValueError(
                f"board_cards: {name} has at most {self.max_board_cards} board cards, got {len(board_cards)}"
            )
        if not self.min_down_cards <= len(down_cards) <= self.max_down_cards:
            if self.min_down_cards == self.max_down_cards:
                expected = f"exactly {self.min_down_cards}"
            else:
                expected = f"{self.min_down_cards} to {self.max_down_cards}"
            raise ValueError(
                f"down_cards: {name} needs {expected} down cards, got {len(down_cards)}"
            )

        cards = tuple(hole_cards) + tuple(board_cards) + tuple(down_cards)
        logger.debug(f"Assembled {name} stud hand: {[str(c) for c in cards]}")
        return cards

    def assemble_draw(self, cards: Sequence[Card], name: str = 'this variant') -> Tuple[Card, ...]:
        """
        Validate a flat draw hand.

        Raises:
            ValueError: If the layout is not draw or the hand is the wrong size
        """
        if self.layout_type != LayoutType.DRAW:
            raise ValueError(f"{name} is not a draw game")
        self.validate_size(cards, name)
        return tuple(cards)
