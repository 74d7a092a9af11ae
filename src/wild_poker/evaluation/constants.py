"""Constants for poker hand evaluation."""
from wild_poker.core.card import Rank, Suit

# Numeric rank values, Ace high
RANK_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,
}

# Value of an Ace played low (wheel straights, lowest-card wild rules)
ACE_LOW_VALUE = 1

# Suit ordering for bring-in and low-card tie-breaks (clubs lowest)
SUIT_ORDER = {
    Suit.CLUBS: 0,
    Suit.DIAMONDS: 1,
    Suit.HEARTS: 2,
    Suit.SPADES: 3,
}

# Standard rank ordering (A high)
BASE_RANKS = [
    Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN, Rank.NINE, Rank.EIGHT,
    Rank.SEVEN, Rank.SIX, Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO
]

# Every five-rank run, wheel first
STRAIGHT_WINDOWS = [
    frozenset([Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR, Rank.FIVE])
] + [
    frozenset(BASE_RANKS[::-1][start:start + 5]) for start in range(9)
]

WHEEL_VALUES = {14, 2, 3, 4, 5}

# Positional base for strength kickers; rank values never reach it
STRENGTH_BASE = 15

# Kicker digits occupy the low five positions, hand type the rest
TYPE_MULTIPLIER = STRENGTH_BASE ** 5

HAND_SIZE = 5
