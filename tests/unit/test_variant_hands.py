"""Tests for the per-variant hands."""
import pytest

from wild_poker.core.card import Card, DealtCard, Rank, Visibility, cards_from_string
from wild_poker.evaluation.types import HandType
from wild_poker.game.variant_hand import (
    VariantHand, baseball_hand, follow_the_queen_hand, kings_and_lows_draw_hand,
    kings_and_lows_hand, twos_jacks_man_with_the_axe_hand
)


def c(hand: str):
    return cards_from_string(hand)


def ranks(cards):
    return {card.rank for card in cards}


class TestBaseball:
    def test_threes_and_nines_wild(self):
        hand = baseball_hand(c("3h 9d"), c("5c 8s Ts Jc"), c("Qd"))

        assert len(hand.wild_cards) == 2
        assert ranks(hand.wild_cards) == {Rank.THREE, Rank.NINE}

    def test_wild_cards_independent_of_order(self):
        hand1 = baseball_hand(c("3h 9d"), c("5c 8s"), c("Ts"))
        hand2 = baseball_hand(c("Ts 5c"), c("9d 8s"), c("3h"))

        assert set(hand1.wild_cards) == set(hand2.wild_cards) == set(c("3h 9d"))
        assert hand1.strength == hand2.strength

    def test_five_of_a_kind(self):
        hand = baseball_hand(c("3h 9d"), c("As Ah Ad"), c("Ac"))
        assert hand.type == HandType.FIVE_OF_A_KIND

    def test_no_wild_cards(self):
        hand = baseball_hand(c("As Ah"), c("5c 6s 7h 8d"), c("Jc"))

        assert hand.wild_cards == ()
        assert hand.type == HandType.ONE_PAIR

    @pytest.mark.parametrize("hole,board,down", [
        ("3h Kd", "Ks Kh Kc 5c", "2d"),
        ("9h As", "Ah Ad Ac 5c", "2d"),
    ])
    def test_single_wild_makes_five_of_a_kind(self, hole, board, down):
        assert baseball_hand(c(hole), c(board), c(down)).type == HandType.FIVE_OF_A_KIND

    def test_extra_cards(self):
        """A face-up Four earns an extra board card."""
        hand = baseball_hand(c("As Ah"), c("4c Kc Qc Jc Tc"), c("9c"))

        assert len(hand.cards) == 8
        assert [str(card) for card in hand.wild_cards] == ["9c"]
        assert hand.type == HandType.STRAIGHT_FLUSH

    def test_straight_flush(self):
        hand = baseball_hand(c("3h Kh"), c("Ah Qh Jh Th"), c("2d"))
        assert hand.type == HandType.STRAIGHT_FLUSH

    def test_hole_card_count(self):
        with pytest.raises(ValueError, match="^hole_cards:"):
            baseball_hand(c("3h"), c("5c 8s Ts Jc"), c("Qd"))


class TestFollowTheQueen:
    def test_queen_and_following_rank(self):
        hand = follow_the_queen_hand(c("Kh 2d"), c("Qh 5c 8s Ts"), Card.from_string("Jc"), c("Qh 5c 8s Ts"))

        assert len(hand.wild_cards) == 2
        assert ranks(hand.wild_cards) == {Rank.QUEEN, Rank.FIVE}

    def test_five_of_a_kind(self):
        hand = follow_the_queen_hand(c("Qh 5d"), c("As Ah Ad Ac"), Card.from_string("2c"), c("Qh 5d As Ah"))
        assert hand.type == HandType.FIVE_OF_A_KIND

    def test_no_queens(self):
        hand = follow_the_queen_hand(c("As Ah"), c("3c 5s 7h 9d"), Card.from_string("Jc"), c("3c 5s 7h 9d"))

        assert hand.wild_cards == ()
        assert hand.type == HandType.ONE_PAIR

    def test_queens_always_wild(self):
        hand = follow_the_queen_hand(c("Qh Qs"), c("5c 8s Ts Jc"), Card.from_string("Kd"), c("5c 8s Ts Jc"))
        assert ranks(hand.wild_cards) == {Rank.QUEEN}
        assert len(hand.wild_cards) == 2

    def test_queen_dealt_last(self):
        hand = follow_the_queen_hand(c("Qh 5d"), c("3c 8s Ts Qc"), Card.from_string("Kd"), c("3c 8s Ts Qc"))
        assert [str(card) for card in hand.wild_cards] == ["Qh", "Qc"]

    def test_second_queen_changes_wild_rank(self):
        hand = follow_the_queen_hand(c("5h 8d"), c("Qh 5d Qc 8s"), Card.from_string("Kd"), c("Qh 5d Qc 8s"))

        assert len(hand.wild_cards) == 4
        assert ranks(hand.wild_cards) == {Rank.QUEEN, Rank.EIGHT}

    def test_deal_order_matters(self):
        hole, board, down = c("5h 8d"), c("Qh 5d 8s Ts"), Card.from_string("Jc")

        hand1 = follow_the_queen_hand(hole, board, down, c("Qh 5d 8s Ts"))
        hand2 = follow_the_queen_hand(hole, board, down, c("5d Qh 8s Ts"))

        assert ranks(hand1.wild_cards) == {Rank.QUEEN, Rank.FIVE}
        assert ranks(hand2.wild_cards) == {Rank.QUEEN, Rank.EIGHT}

    def test_table_deals(self):
        """Face-up cards dealt to other players count; face-down ones do not."""
        deals = [
            DealtCard(Card.from_string("2c"), Visibility.FACE_DOWN),
            DealtCard(Card.from_string("Qd"), Visibility.FACE_UP),
            DealtCard(Card.from_string("7s"), Visibility.FACE_UP),
            DealtCard(Card.from_string("Qh"), Visibility.FACE_DOWN),
            DealtCard(Card.from_string("5c"), Visibility.FACE_UP),
        ]
        hand = follow_the_queen_hand(c("7h 7d"), c("Ac Kc"), Card.from_string("2h"), deals=deals)

        assert ranks(hand.wild_cards) == {Rank.SEVEN}
        assert hand.type == HandType.TRIPS

    def test_table_cards_required(self):
        """Without the table's face-up cards the following rank is unknown."""
        with pytest.raises(ValueError, match="^face_up_cards:"):
            follow_the_queen_hand(c("5h 8d"), c("Qh 5d 8s Ts"), Card.from_string("Jc"))

    def test_empty_table_is_explicit(self):
        hand = follow_the_queen_hand(c("Qh 8d"), c("5d 8s Ts"), Card.from_string("Jc"), [])
        assert ranks(hand.wild_cards) == {Rank.QUEEN}

    def test_wild_hand_beats_natural(self):
        face_up = c("Qh 5d 8s Ts")
        wild = follow_the_queen_hand(c("Qh Ad"), c("As Ah Ac 8c"), Card.from_string("2d"), face_up)
        natural = follow_the_queen_hand(c("3h 4d"), c("As Ah Ac 8c"), Card.from_string("2d"), face_up)

        assert wild.strength > natural.strength

    def test_board_card_limit(self):
        with pytest.raises(ValueError, match="^board_cards:"):
            follow_the_queen_hand(c("Kh 2d"), c("5c 8s Ts Jc Ac"), Card.from_string("Qd"), [])


class TestKingsAndLows:
    def test_king_and_deuce_wild(self):
        hand = kings_and_lows_hand(c("Kh 2d"), c("5c 8s Ts Jc"), Card.from_string("Qd"))
        assert ranks(hand.wild_cards) == {Rank.KING, Rank.TWO}

    def test_five_of_a_kind(self):
        hand = kings_and_lows_hand(c("Kh 2d"), c("As Ah Ad"), Card.from_string("Ac"))
        assert hand.type == HandType.FIVE_OF_A_KIND

    def test_king_required_without_king(self):
        hand = kings_and_lows_hand(c("As Ah"), c("3c 5s 7h 9d"), Card.from_string("Jc"), king_required=True)

        assert hand.wild_cards == ()
        assert hand.type == HandType.ONE_PAIR

    def test_king_required_with_king(self):
        hand = kings_and_lows_hand(c("Kh 2d"), c("5c 8s Ts Jc"), Card.from_string("Qd"), king_required=True)
        assert len(hand.wild_cards) == 2

    def test_king_improves_hand(self):
        wild = kings_and_lows_hand(c("Kh 9d"), c("5c 5s 5h"), Card.from_string("8d"), king_required=True)
        natural = kings_and_lows_hand(c("9h 9s"), c("5c 5s 5h"), Card.from_string("8d"), king_required=True)

        assert natural.type == HandType.FULL_HOUSE
        assert wild.type == HandType.FIVE_OF_A_KIND
        assert wild.strength > natural.strength

    def test_pair_of_lowest(self):
        hand = kings_and_lows_hand(c("2h 2d"), c("5c 8s Ts Jc"), Card.from_string("Qd"))
        assert [str(card) for card in hand.wild_cards] == ["2h", "2d"]


class TestKingsAndLowsDraw:
    def test_wild_cards(self):
        hand = kings_and_lows_draw_hand(c("Kh 2d 5c 8s Ts"))
        assert ranks(hand.wild_cards) == {Rank.KING, Rank.TWO}

    def test_five_of_a_kind(self):
        assert kings_and_lows_draw_hand(c("Kh 2d As Ah Ad")).type == HandType.FIVE_OF_A_KIND

    def test_ace_low(self):
        hand = kings_and_lows_draw_hand(c("6h 7d 8c 9s Ah"))

        assert hand.type == HandType.STRAIGHT
        assert [str(card) for card in hand.wild_cards] == ["Ah"]

    def test_ace_high(self):
        hand = kings_and_lows_draw_hand(c("Ah Ad Ac As 2h"))

        assert hand.type == HandType.FIVE_OF_A_KIND
        assert [str(card) for card in hand.wild_cards] == ["2h"]

    def test_wheel(self):
        assert kings_and_lows_draw_hand(c("Ah 2d 3c 4s 6h")).type == HandType.STRAIGHT

    def test_hand_size(self):
        with pytest.raises(ValueError, match="^cards:"):
            kings_and_lows_draw_hand(c("Kh 2d 5c 8s"))


class TestTwosJacksManWithTheAxe:
    @pytest.mark.parametrize("hand,wild_count,expected", [
        ("Ah Kh Qh 9c 8c", 0, HandType.HIGH_CARD),
        ("2h Ah Qh 9c 8c", 1, HandType.ONE_PAIR),
        ("2h 2d Ah 9c 8c", 2, HandType.TRIPS),
        ("Jh Ah Qh 9c 8c", 1, HandType.ONE_PAIR),
        ("Kd Ah Qh 9c 8c", 1, HandType.ONE_PAIR),
        ("Kh Ah Qh 9c 8c", 0, HandType.HIGH_CARD),
        ("Jh Jd Jc Js 2h", 5, HandType.FIVE_OF_A_KIND),
        ("5h 6d 7c 8s 2h", 1, HandType.STRAIGHT),
        ("Ah Kh Qh 9h Jd", 1, HandType.FLUSH),
    ])
    def test_evaluation(self, hand, wild_count, expected):
        result = twos_jacks_man_with_the_axe_hand(c(hand))

        assert len(result.wild_cards) == wild_count
        assert result.type == expected

    def test_three_wild_cards(self):
        hand = twos_jacks_man_with_the_axe_hand(c("2h Jd Kd Ah Kh"))

        assert len(hand.wild_cards) == 3
        assert hand.type == HandType.STRAIGHT_FLUSH

    @pytest.mark.parametrize("hand,expected", [
        ("7h 7d Ah Kh Qh", True),
        ("7h 7d 7c 7s Ah", True),
        ("7h Ah Kh Qh Jc", False),
        ("Ah Kh Qh 9c 8c", False),
    ])
    def test_natural_pair_of_sevens(self, hand, expected):
        assert twos_jacks_man_with_the_axe_hand(c(hand)).has_natural_pair_of_sevens() == expected

    def test_evaluated_best_cards(self):
        hand = twos_jacks_man_with_the_axe_hand(c("2h Ah Kh Qh 9c"))

        assert len(hand.evaluated_best_cards) == 5
        assert len(hand.best_cards) == 5
        assert Card.from_string("2h") in hand.best_cards
        assert Card.from_string("2h") not in hand.evaluated_best_cards


def test_variant_hand_by_id():
    hand = VariantHand('baseball', c("3h 9d 5c 8s Ts"))

    assert hand.variant.name == 'Baseball'
    assert hand.result.hand_type == hand.type
    assert str(hand).startswith('Baseball: ')


def test_unknown_variant():
    with pytest.raises(ValueError, match="No configuration found"):
        VariantHand('razz', c("3h 9d 5c 8s Ts"))


@pytest.mark.parametrize("variant,hand", [
    ("kings_and_lows_draw", "Kh Kd Ks Kc 2h 2d 7s"),
    ("twos_jacks_man_with_the_axe", "2h Jd Kd"),
    ("follow_the_queen", "Kh 2d 5c 8s Ts Jc Qd 3h 4s 6c"),
    ("kings_and_lows", "Kh 2d 5c 8s Ts Jc Qd 3h"),
    ("baseball", "3h 9d"),
])
def test_card_count_checked(variant, hand):
    """Cards built without a factory must still fit the variant's layout."""
    with pytest.raises(ValueError, match="^cards:"):
        VariantHand(variant, c(hand))


def test_unbounded_board_accepts_many_cards():
    hand = VariantHand('baseball', c("As Ah 4c 4d Kc Qc Jc Tc 9c 8c"))
    assert len(hand.cards) == 10
