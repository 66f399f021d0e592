"""
牌堆(Group)管理.

Group表示一组有序的牌（整副牌、手牌、牌堆），每个位置同时记录牌面朝向.
位置0为最底部，最后一个位置为最顶部；负数索引从顶部开始计数(-1为顶牌).
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from ..exceptions import GroupRangeError
from .card import AnyCard, Card, card_sort_key
from .types import get_all_suits, get_all_ranks


class Group:
    """
    表示一组有序的牌.

    牌与朝向分别保存在两个等长列表中，任何移动（交换、抽取、插入、翻转）都会
    同时移动牌和它的朝向. 朝向属于占据该位置的牌，而不是牌的身份.

    位置参数的两类处理方式:
        - 截断: draw、draw_bottom、insert_at的位置以及card()，越界时截断到
          合法范围（card()返回None）
        - 校验: flip、draw_at、less、swap、flipped、set_flipped，越界时在修改
          前抛出GroupRangeError

    Group没有内部锁，多线程并发修改需要由调用方自行加锁.

    Attributes:
        _cards: 从底到顶的牌列表
        _faceup: 与_cards对齐的朝向列表，True表示正面朝上

    Examples:
        >>> group = new_standard_deck()
        >>> hand = group.draw(5)
        >>> len(group), len(hand)
        (47, 5)
    """

    def __init__(self, cards: Iterable[AnyCard] = ()) -> None:
        """
        初始化牌堆，所有牌默认背面朝上.

        Args:
            cards: 从底到顶的初始牌，内容会被复制
        """
        self._cards: List[AnyCard] = list(cards)
        self._faceup: List[bool] = [False] * len(self._cards)

    @classmethod
    def _from_parts(cls, cards: List[AnyCard], faceup: List[bool]) -> 'Group':
        group = cls()
        group._cards = cards
        group._faceup = faceup
        return group

    def _index(self, i: int) -> int:
        """将负数索引转换为从底部开始的位置."""
        if i < 0:
            i += len(self._cards)
        return i

    def _position(self, i: int) -> int:
        """规范化单个位置，越界时抛出GroupRangeError."""
        n = self._index(i)
        if n < 0 or n >= len(self._cards):
            raise GroupRangeError(
                f"Position {i} out of range for group of {len(self._cards)} cards"
            )
        return n

    def _range(self, i: int, j: int) -> Tuple[int, int]:
        """规范化半开区间[i, j)，越界或反向时抛出GroupRangeError."""
        start, stop = self._index(i), self._index(j)
        if not 0 <= start <= stop <= len(self._cards):
            raise GroupRangeError(
                f"Range [{i}, {j}) invalid for group of {len(self._cards)} cards"
            )
        return start, stop

    def _clamp(self, n: int) -> int:
        return max(0, min(n, len(self._cards)))

    # 索引与排序

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[AnyCard]:
        return iter(list(self._cards))

    def less(self, i: int, j: int) -> bool:
        """
        比较两个位置上的牌.

        王牌排在所有标准牌之前；标准牌先比较花色，再比较点数.

        Args:
            i: 第一个位置
            j: 第二个位置

        Returns:
            bool: 位置i的牌应排在位置j的牌之前时返回True

        Raises:
            GroupRangeError: 当位置越界时
        """
        ci = self._cards[self._position(i)]
        cj = self._cards[self._position(j)]
        return card_sort_key(ci) < card_sort_key(cj)

    def swap(self, i: int, j: int) -> None:
        """交换两个位置上的牌及其朝向."""
        i, j = self._position(i), self._position(j)
        self._cards[i], self._cards[j] = self._cards[j], self._cards[i]
        self._faceup[i], self._faceup[j] = self._faceup[j], self._faceup[i]

    def sort(self) -> 'Group':
        """
        按排序规则就地稳定排序，朝向随牌移动.

        Returns:
            Group: 牌堆本身
        """
        pairs = sorted(zip(self._cards, self._faceup), key=lambda pair: card_sort_key(pair[0]))
        self._cards = [card for card, _ in pairs]
        self._faceup = [faceup for _, faceup in pairs]
        return self

    def card(self, i: int) -> Optional[AnyCard]:
        """
        获取指定位置的牌.

        Args:
            i: 位置，负数从顶部计数

        Returns:
            Optional[AnyCard]: 该位置的牌，位置越界时返回None
        """
        i = self._index(i)
        if i < 0 or i >= len(self._cards):
            return None
        return self._cards[i]

    def cards(self) -> List[AnyCard]:
        """返回从底到顶的牌列表副本."""
        return list(self._cards)

    # 朝向

    def flipped(self, i: int) -> bool:
        """
        查询指定位置是否正面朝上.

        Raises:
            GroupRangeError: 当位置越界时
        """
        return self._faceup[self._position(i)]

    def set_flipped(self, i: int, faceup: bool) -> None:
        """设置指定位置的朝向."""
        self._faceup[self._position(i)] = bool(faceup)

    def flipped_array(self) -> List[bool]:
        """
        返回所有位置的朝向副本.

        Returns:
            List[bool]: 与牌的顺序对齐，修改它不会影响牌堆
        """
        return list(self._faceup)

    def flip_each(self, faceup: bool) -> 'Group':
        """
        将所有牌设置为同一朝向.

        Args:
            faceup: True为正面朝上

        Returns:
            Group: 牌堆本身，便于链式调用
        """
        self._faceup = [bool(faceup)] * len(self._cards)
        return self

    def _flip(self, start: int, stop: int) -> None:
        toggled = [not faceup for faceup in self._faceup[start:stop]]
        self._faceup[start:stop] = toggled[::-1]
        self._cards[start:stop] = self._cards[start:stop][::-1]

    def flip(self, i: int, j: int) -> None:
        """
        将区间[i, j)内的牌作为一个整体翻转.

        区间内每张牌的朝向取反，同时牌（连同取反后的朝向）的顺序倒转.
        对同一区间翻转两次会恢复原状.

        Args:
            i: 区间起点（含），负数从顶部计数
            j: 区间终点（不含），负数从顶部计数

        Raises:
            GroupRangeError: 当区间越界或起点大于终点时
        """
        start, stop = self._range(i, j)
        self._flip(start, stop)

    def flip_all(self) -> 'Group':
        """翻转整个牌堆，返回牌堆本身."""
        self._flip(0, len(self._cards))
        return self

    # 抽牌

    def _draw_range(self, start: int, stop: int) -> 'Group':
        drawn = Group._from_parts(self._cards[start:stop], self._faceup[start:stop])
        del self._cards[start:stop]
        del self._faceup[start:stop]
        return drawn

    def draw(self, n: int) -> 'Group':
        """
        从顶部抽出n张牌.

        Args:
            n: 抽牌数量，截断到[0, len]

        Returns:
            Group: 新牌堆，保持原有相对顺序和朝向
        """
        n = self._clamp(n)
        return self._draw_range(len(self._cards) - n, len(self._cards))

    def draw_bottom(self, n: int) -> 'Group':
        """从底部抽出n张牌，n截断到[0, len]."""
        return self._draw_range(0, self._clamp(n))

    def draw_at(self, i: int, j: int) -> 'Group':
        """
        抽出区间[i, j)内的牌.

        Args:
            i: 区间起点（含），负数从顶部计数
            j: 区间终点（不含），负数从顶部计数

        Returns:
            Group: 新牌堆，保持原有相对顺序和朝向

        Raises:
            GroupRangeError: 当区间越界或起点大于终点时
        """
        start, stop = self._range(i, j)
        return self._draw_range(start, stop)

    # 插入

    def insert(self, group: 'Group') -> None:
        """将另一牌堆的牌放到顶部，保持其顺序和朝向."""
        cards, faceup = group.cards(), group.flipped_array()
        self._cards.extend(cards)
        self._faceup.extend(faceup)

    def insert_bottom(self, group: 'Group') -> None:
        """将另一牌堆的牌放到底部，保持其顺序和朝向."""
        self.insert_at(0, group)

    def insert_at(self, i: int, group: 'Group') -> None:
        """
        将另一牌堆的牌插入到位置i.

        原位置i及其之上的牌整体上移. 传入的牌堆内容被复制，之后不再引用它.

        Args:
            i: 插入位置，负数从顶部计数，截断到[0, len]
            group: 要插入的牌堆
        """
        cards, faceup = group.cards(), group.flipped_array()
        i = self._clamp(self._index(i))
        self._cards[i:i] = cards
        self._faceup[i:i] = faceup

    # 显示

    def __str__(self) -> str:
        """
        返回牌堆的字符串表示.

        Returns:
            str: 如"[ 2S 3S 4S ]"，从底到顶，不体现朝向
        """
        return "[ " + " ".join(card.short for card in self._cards) + " ]"

    def __repr__(self) -> str:
        return f"Group({len(self._cards)} cards)"


def new_group(*cards: AnyCard) -> Group:
    """创建包含指定牌的牌堆，所有牌背面朝上."""
    return Group(cards)


def new_standard_deck() -> Group:
    """
    创建一副标准52张牌.

    按花色(黑桃、红桃、方块、梅花)再按点数(A到K)升序排列，全部背面朝上.

    Returns:
        Group: 标准牌组
    """
    return Group(
        Card(rank, suit)
        for suit in get_all_suits()
        for rank in get_all_ranks()
    )
