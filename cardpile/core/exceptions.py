"""
牌堆异常定义
区分调用方错误(立即抛出)和可恢复的命令错误(由UI层捕获)
"""


class CardPileError(Exception):
    """cardpile基础异常类"""
    pass


class GroupRangeError(CardPileError, IndexError):
    """牌堆位置或区间越界异常"""
    pass


class CardParseError(CardPileError, ValueError):
    """牌面字符串解析失败异常"""
    pass


class CommandError(CardPileError):
    """牌桌会话命令错误异常"""
    pass
