"""
扑克牌相关类型定义.

定义扑克牌的花色、点数等基础枚举类型.
"""

from enum import IntEnum
from typing import Dict, List


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    定义四种标准扑克牌花色，从1开始编号.
    排序时按数值升序：黑桃 < 红桃 < 方块 < 梅花.
    """

    SPADES = 1      # 黑桃
    HEARTS = 2      # 红桃
    DIAMONDS = 3    # 方块
    CLUBS = 4       # 梅花

    @property
    def label(self) -> str:
        """
        花色的可读名称.

        Returns:
            str: 如"Spades"
        """
        return self.name.capitalize()

    @property
    def short(self) -> str:
        """
        花色的单字符代码.

        Returns:
            str: S、H、D或C
        """
        return _SUIT_SHORT[self]

    @property
    def symbol(self) -> str:
        """花色的Unicode符号，用于显示."""
        return _SUIT_SYMBOL[self]


class Rank(IntEnum):
    """
    扑克牌点数枚举.

    定义13种扑克牌点数，A为1，K为13.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def label(self) -> str:
        """
        点数的可读名称.

        Returns:
            str: 如"Ace"、"Ten"
        """
        return self.name.capitalize()

    @property
    def short(self) -> str:
        """
        点数的单字符代码.

        Returns:
            str: A、2-9、T、J、Q或K
        """
        return _RANK_SHORT[self]


_SUIT_SHORT: Dict[Suit, str] = {
    Suit.SPADES: "S", Suit.HEARTS: "H",
    Suit.DIAMONDS: "D", Suit.CLUBS: "C"
}

_SUIT_SYMBOL: Dict[Suit, str] = {
    Suit.SPADES: "♠", Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦", Suit.CLUBS: "♣"
}

_RANK_SHORT: Dict[Rank, str] = {
    Rank.ACE: "A", Rank.TWO: "2", Rank.THREE: "3", Rank.FOUR: "4",
    Rank.FIVE: "5", Rank.SIX: "6", Rank.SEVEN: "7", Rank.EIGHT: "8",
    Rank.NINE: "9", Rank.TEN: "T", Rank.JACK: "J",
    Rank.QUEEN: "Q", Rank.KING: "K"
}


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按编号升序排列的四种花色
    """
    return list(Suit)


def get_all_ranks() -> List[Rank]:
    """
    获取所有点数.

    Returns:
        List[Rank]: 从A到K的13种点数
    """
    return list(Rank)
