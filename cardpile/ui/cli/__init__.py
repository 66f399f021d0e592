"""
cardpile CLI模块.

提供命令行界面的牌堆操作.
"""

from .cli import main

__all__ = ['main']
