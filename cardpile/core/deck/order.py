"""
牌堆顺序算法.

洗牌、倒序与排序只依赖牌堆的长度、交换和比较操作，因此适用于任何满足
SwappableGroup协议的牌堆实现.
"""

import logging
import random
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class SwappableGroup(Protocol):
    """可按位置交换与比较的牌堆协议."""

    def __len__(self) -> int:
        ...

    def swap(self, i: int, j: int) -> None:
        ...

    def less(self, i: int, j: int) -> bool:
        ...


def perfect_shuffle(group: SwappableGroup, rng: Optional[random.Random] = None) -> None:
    """
    使用Fisher-Yates算法洗牌.

    从最后一个位置向前，每一步将位置i与[0, i]内均匀选取的位置交换. 默认使用
    操作系统熵源(random.SystemRandom)，randrange采用拒绝采样，不存在取模偏差，
    因此每种排列出现的概率相同.

    Args:
        group: 要洗的牌堆
        rng: 随机数生成器，传入固定种子的random.Random可得到确定的结果
    """
    rng = rng or random.SystemRandom()
    logger.debug(f"洗牌: {len(group)} 张牌")
    for i in range(len(group) - 1, 0, -1):
        group.swap(i, rng.randrange(i + 1))


def reverse(group: SwappableGroup) -> None:
    """从两端向中间逐对交换，倒转牌堆顺序，朝向随牌移动."""
    n = len(group)
    for i in range(n // 2 - 1, -1, -1):
        group.swap(i, n - 1 - i)


def sort_group(group: SwappableGroup) -> None:
    """
    仅通过less与swap对牌堆就地稳定排序.

    使用插入排序，相等的牌保持原有相对顺序.

    Args:
        group: 要排序的牌堆
    """
    for i in range(1, len(group)):
        j = i
        while j > 0 and group.less(j, j - 1):
            group.swap(j, j - 1)
            j -= 1
