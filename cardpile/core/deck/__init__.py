"""
扑克牌与牌堆模块.

提供Card、Joker和Group类以及洗牌、倒序、排序算法.
"""

from .types import Rank, Suit, get_all_ranks, get_all_suits
from .card import AnyCard, Card, Joker, card_sort_key, joker, new_card, parse_card
from .group import Group, new_group, new_standard_deck
from .order import SwappableGroup, perfect_shuffle, reverse, sort_group

__all__ = [
    'Rank', 'Suit', 'get_all_ranks', 'get_all_suits',
    'AnyCard', 'Card', 'Joker', 'card_sort_key', 'joker', 'new_card', 'parse_card',
    'Group', 'new_group', 'new_standard_deck',
    'SwappableGroup', 'perfect_shuffle', 'reverse', 'sort_group',
]
