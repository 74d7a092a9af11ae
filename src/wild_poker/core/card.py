"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List
import re


class Suit(Enum):
    """Card suits."""
    CLUBS = 'c'
    DIAMONDS = 'd'
    HEARTS = 'h'
    SPADES = 's'

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    """Card ranks."""
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'
    TEN = 'T'
    JACK = 'J'
    QUEEN = 'Q'
    KING = 'K'
    ACE = 'A'

    def __str__(self) -> str:
        return self.value


class Visibility(Enum):
    """Card visibility states."""
    FACE_DOWN = auto()
    FACE_UP = auto()


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values: two cards are equal when rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit (clubs, diamonds, hearts, spades)
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank}{self.suit}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) != 2:
            raise ValueError(f"Invalid card string: {card_str}")

        rank_str, suit_str = card_str[0], card_str[1]

        try:
            rank = next(r for r in Rank if r.value == rank_str.upper())
            suit = next(s for s in Suit if s.value == suit_str.lower())
        except StopIteration:
            raise ValueError(f"Invalid rank or suit in: {card_str}")

        return cls(rank=rank, suit=suit)


@dataclass(frozen=True)
class DealtCard:
    """
    A single deal event in a hand's chronological deal sequence.

    Attributes:
        card: The card that was dealt
        visibility: Whether it was dealt face up or face down
    """
    card: Card
    visibility: Visibility = Visibility.FACE_DOWN

    @property
    def face_up(self) -> bool:
        return self.visibility == Visibility.FACE_UP


def cards_from_string(hand_str: str) -> List[Card]:
    """
    Parse a list of cards from a string.

    Args:
        hand_str: Cards separated by whitespace or commas ("Kh 2d, 5c"),
                  or concatenated ("Kh2d5c")

    Returns:
        Cards in the order given

    Raises:
        ValueError: If any card is invalid
    """
    tokens = [t for t in re.split(r'[\s,]+', hand_str.strip()) if t]
    if len(tokens) == 1 and len(tokens[0]) > 2:
        concatenated = tokens[0]
        if len(concatenated) % 2 != 0:
            raise ValueError(f"Invalid hand string length: {hand_str} (must be multiple of 2)")
        tokens = [concatenated[i:i + 2] for i in range(0, len(concatenated), 2)]

    cards = []
    for i, card_str in enumerate(tokens):
        try:
            cards.append(Card.from_string(card_str))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")
    return cards
