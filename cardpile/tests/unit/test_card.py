"""
扑克牌与枚举类型的单元测试.

测试Rank、Suit的名称与代码，以及Card、Joker的不可变性、显示和解析.
"""

import pytest

from cardpile.core.deck import Card, Joker, Rank, Suit, card_sort_key, joker, new_card, parse_card
from cardpile.core.deck.types import get_all_ranks, get_all_suits
from cardpile.core.exceptions import CardParseError


class TestEnums:
    """Rank与Suit枚举的单元测试."""

    def test_rank_values(self):
        """测试点数编号从A=1到K=13."""
        ranks = get_all_ranks()
        assert len(ranks) == 13
        assert ranks[0] is Rank.ACE and Rank.ACE == 1
        assert ranks[-1] is Rank.KING and Rank.KING == 13

    def test_rank_short_codes(self):
        """测试点数的单字符代码."""
        assert "".join(rank.short for rank in Rank) == "A23456789TJQK"

    def test_rank_labels(self):
        assert Rank.ACE.label == "Ace"
        assert Rank.TEN.label == "Ten"
        assert Rank.QUEEN.label == "Queen"

    def test_suit_order_and_codes(self):
        """测试花色编号从1开始，代码为S、H、D、C."""
        suits = get_all_suits()
        assert suits == [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]
        assert [int(suit) for suit in suits] == [1, 2, 3, 4]
        assert "".join(suit.short for suit in suits) == "SHDC"
        assert [suit.label for suit in suits] == ["Spades", "Hearts", "Diamonds", "Clubs"]

    def test_suit_symbols(self):
        assert Suit.HEARTS.symbol == "♥"
        assert Suit.SPADES.symbol == "♠"


class TestCard:
    """Card类的单元测试."""

    def test_card_creation(self):
        card = new_card(Rank.KING, Suit.SPADES)
        assert card.rank is Rank.KING
        assert card.suit is Suit.SPADES
        assert not card.is_joker

    def test_card_immutability(self):
        """测试Card对象的不可变性."""
        card = Card(Rank.KING, Suit.SPADES)
        with pytest.raises(AttributeError):
            card.suit = Suit.HEARTS
        with pytest.raises(AttributeError):
            card.rank = Rank.ACE

    def test_card_display(self):
        """测试完整名称与两字符简写."""
        test_cases = [
            (Card(Rank.ACE, Suit.HEARTS), "Ace of Hearts", "AH"),
            (Card(Rank.KING, Suit.SPADES), "King of Spades", "KS"),
            (Card(Rank.TEN, Suit.DIAMONDS), "Ten of Diamonds", "TD"),
            (Card(Rank.TWO, Suit.CLUBS), "Two of Clubs", "2C"),
        ]

        for card, name, short in test_cases:
            assert card.name == name
            assert str(card) == name
            assert card.short == short

    def test_card_equality_and_hash(self):
        """相同点数花色的两张牌相等但不是同一对象."""
        card1 = Card(Rank.ACE, Suit.HEARTS)
        card2 = Card(Rank.ACE, Suit.HEARTS)
        card3 = Card(Rank.ACE, Suit.SPADES)

        assert card1 == card2
        assert card1 is not card2
        assert hash(card1) == hash(card2)
        assert card1 != card3

    def test_card_validation(self):
        with pytest.raises(TypeError):
            Card("invalid", Suit.HEARTS)
        with pytest.raises(TypeError):
            Card(Rank.ACE, 2)

    def test_card_from_string(self):
        """测试从字符串创建Card对象."""
        test_cases = [
            ("AH", Card(Rank.ACE, Suit.HEARTS)),
            ("ks", Card(Rank.KING, Suit.SPADES)),
            ("10D", Card(Rank.TEN, Suit.DIAMONDS)),
            ("Th", Card(Rank.TEN, Suit.HEARTS)),
            ("2c", Card(Rank.TWO, Suit.CLUBS)),
        ]

        for card_str, expected in test_cases:
            assert Card.from_str(card_str) == expected

    def test_card_from_string_invalid(self):
        """测试无效字符串."""
        for invalid_str in ["", "A", "XH", "AX", "123H", "JO"]:
            with pytest.raises(CardParseError):
                Card.from_str(invalid_str)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_str("ZZ")

    def test_from_string_type_error(self):
        with pytest.raises(TypeError):
            Card.from_str(12)


class TestJoker:
    """Joker类的单元测试."""

    def test_joker_accessors(self):
        card = joker()
        assert card.is_joker
        assert card.rank is None
        assert card.suit is None
        assert card.name == "Joker"
        assert str(card) == "Joker"
        assert card.short == "JO"

    def test_jokers_are_equal(self):
        assert Joker() == joker()
        assert hash(Joker()) == hash(joker())
        assert Joker() != Card(Rank.ACE, Suit.SPADES)

    def test_parse_joker(self):
        assert parse_card("JO") == Joker()
        assert parse_card(" jo ") == Joker()
        assert parse_card("QD") == Card(Rank.QUEEN, Suit.DIAMONDS)


class TestSortKey:
    """排序键的单元测试."""

    def test_joker_before_standard_cards(self):
        assert card_sort_key(joker()) < card_sort_key(Card(Rank.ACE, Suit.SPADES))

    def test_suit_before_rank(self):
        king_spades = Card(Rank.KING, Suit.SPADES)
        ace_hearts = Card(Rank.ACE, Suit.HEARTS)
        assert card_sort_key(king_spades) < card_sort_key(ace_hearts)

    def test_rank_within_suit(self):
        assert card_sort_key(Card(Rank.TWO, Suit.CLUBS)) < card_sort_key(Card(Rank.THREE, Suit.CLUBS))
