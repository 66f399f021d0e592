"""测试辅助函数"""

from typing import List, Tuple

from cardpile.core.deck import AnyCard, Group


def state(group: Group) -> List[Tuple[AnyCard, bool]]:
    """牌与朝向的快照，用于比较两个牌堆是否完全一致"""
    return list(zip(group.cards(), group.flipped_array()))
