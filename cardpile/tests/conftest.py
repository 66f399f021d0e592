"""
Test Configuration - pytest配置文件

提供通用的牌堆fixture，并注册测试标记.
"""

import random

import pytest

from cardpile.core.deck import Card, Group, Rank, Suit, joker, new_group, new_standard_deck


@pytest.fixture
def standard_deck() -> Group:
    """标准52张牌"""
    return new_standard_deck()


@pytest.fixture
def spades_run() -> Group:
    """从底到顶为2S 3S 4S的牌堆"""
    return new_group(
        Card(Rank.TWO, Suit.SPADES),
        Card(Rank.THREE, Suit.SPADES),
        Card(Rank.FOUR, Suit.SPADES),
    )


@pytest.fixture
def mixed_group() -> Group:
    """包含王牌、不同花色且朝向各异的牌堆"""
    group = new_group(
        Card(Rank.KING, Suit.CLUBS),
        Card(Rank.ACE, Suit.HEARTS),
        joker(),
        Card(Rank.TWO, Suit.SPADES),
        Card(Rank.TEN, Suit.HEARTS),
    )
    group.set_flipped(1, True)
    group.set_flipped(3, True)
    return group


@pytest.fixture
def seeded_rng() -> random.Random:
    """固定种子的随机数生成器"""
    return random.Random(42)


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
