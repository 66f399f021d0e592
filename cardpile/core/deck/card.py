"""
扑克牌数据结构.

定义不可变的Card(标准牌)与Joker(王牌)两种牌，两者提供相同的只读接口.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

from ..exceptions import CardParseError
from .types import Suit, Rank


@dataclass(frozen=True)
class Card:
    """
    表示一张标准扑克牌.

    不可变数据类，包含点数和花色. 点数和花色相同的两张牌相等且哈希值相同，
    但不要求是同一个对象.

    Attributes:
        rank: 点数
        suit: 花色

    Examples:
        >>> card = Card(Rank.KING, Suit.SPADES)
        >>> str(card)
        'King of Spades'
        >>> card.short
        'KS'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当点数或花色类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    @property
    def is_joker(self) -> bool:
        """标准牌永远不是王牌."""
        return False

    @property
    def name(self) -> str:
        """
        返回完整名称.

        Returns:
            str: 格式为"点数 of 花色"，如"Ace of Hearts"
        """
        return f"{self.rank.label} of {self.suit.label}"

    @property
    def short(self) -> str:
        """
        返回两字符简写.

        Returns:
            str: 点数代码加花色代码，如"AH"、"TD"
        """
        return self.rank.short + self.suit.short

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从简写字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"Td"、"10c"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            CardParseError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        text = card_str.strip().upper()
        if len(text) < 2:
            raise CardParseError(f"Invalid card text: {card_str!r}")

        # 处理10的特殊情况
        if text.startswith("10"):
            rank_str, suit_str = "T", text[2:]
        else:
            rank_str, suit_str = text[0], text[1:]

        if rank_str not in _RANK_BY_SHORT:
            raise CardParseError(f"Invalid rank in {card_str!r}")
        if suit_str not in _SUIT_BY_SHORT:
            raise CardParseError(f"Invalid suit in {card_str!r}")

        return cls(_RANK_BY_SHORT[rank_str], _SUIT_BY_SHORT[suit_str])


@dataclass(frozen=True)
class Joker:
    """
    表示一张王牌.

    王牌没有点数和花色，rank与suit均返回None. 所有王牌彼此相等.
    """

    @property
    def rank(self) -> Optional[Rank]:
        return None

    @property
    def suit(self) -> Optional[Suit]:
        return None

    @property
    def is_joker(self) -> bool:
        return True

    @property
    def name(self) -> str:
        return "Joker"

    @property
    def short(self) -> str:
        return "JO"

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "Joker()"


AnyCard = Union[Card, Joker]

_RANK_BY_SHORT: Dict[str, Rank] = {rank.short: rank for rank in Rank}
_SUIT_BY_SHORT: Dict[str, Suit] = {suit.short: suit for suit in Suit}


def new_card(rank: Rank, suit: Suit) -> Card:
    """创建一张标准牌."""
    return Card(rank, suit)


def joker() -> Joker:
    """创建一张王牌."""
    return Joker()


def parse_card(text: str) -> AnyCard:
    """
    解析牌面简写，支持王牌.

    Args:
        text: 如"KS"、"10h"或"JO"

    Returns:
        AnyCard: 标准牌或王牌

    Raises:
        CardParseError: 当字符串格式无效时
    """
    if isinstance(text, str) and text.strip().upper() == "JO":
        return Joker()
    return Card.from_str(text)


def card_sort_key(card: AnyCard) -> Tuple[int, int, int]:
    """
    牌的排序键.

    王牌排在所有标准牌之前；标准牌先按花色升序，同花色再按点数升序.

    Args:
        card: 任意一张牌

    Returns:
        Tuple[int, int, int]: 可直接比较的排序键
    """
    if card.is_joker:
        return (0, 0, 0)
    return (1, int(card.suit), int(card.rank))
