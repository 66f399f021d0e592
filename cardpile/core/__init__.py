"""
Core Module - 纯领域逻辑层

核心模块只包含牌与牌堆的领域逻辑，不依赖应用层或UI层。

Modules:
    deck: 牌、牌堆以及洗牌/排序算法
    exceptions: 异常定义
"""

from .exceptions import CardPileError, GroupRangeError, CardParseError, CommandError

__all__ = ['CardPileError', 'GroupRangeError', 'CardParseError', 'CommandError']
