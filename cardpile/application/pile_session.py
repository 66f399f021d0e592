"""
PileSession - 牌桌会话

维护一副牌(deck)和一手牌(hand)，按命令对它们执行抽牌、插入、翻转、洗牌与
排序操作. 抽牌命令把牌从deck移到hand顶部，插入命令把整手牌放回deck.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..core.deck import Group, new_standard_deck, perfect_shuffle, reverse
from ..core.exceptions import CardPileError, CommandError

__all__ = ['PileCommand', 'PileSession', 'COMMAND_SPECS', 'PILE_NAMES']

PILE_NAMES = ('deck', 'hand')


@dataclass(frozen=True)
class CommandSpec:
    """命令格式: 整数参数个数，以及是否可以指定目标牌堆"""
    int_args: int
    takes_pile: bool
    help: str


COMMAND_SPECS: Dict[str, CommandSpec] = {
    'show': CommandSpec(0, False, "显示deck和hand"),
    'shuffle': CommandSpec(0, True, "洗牌"),
    'sort': CommandSpec(0, True, "排序（王牌在前，再按花色、点数）"),
    'reverse': CommandSpec(0, True, "倒转顺序"),
    'flip': CommandSpec(2, True, "翻转区间[I, J)"),
    'flipall': CommandSpec(0, True, "翻转整个牌堆"),
    'faceup': CommandSpec(0, True, "全部正面朝上"),
    'facedown': CommandSpec(0, True, "全部背面朝上"),
    'draw': CommandSpec(1, False, "从deck顶部抽N张到hand"),
    'drawbottom': CommandSpec(1, False, "从deck底部抽N张到hand"),
    'drawat': CommandSpec(2, False, "从deck区间[I, J)抽牌到hand"),
    'insert': CommandSpec(0, False, "把hand放到deck顶部"),
    'insertbottom': CommandSpec(0, False, "把hand放到deck底部"),
    'insertat': CommandSpec(1, False, "把hand插入deck位置I"),
    'help': CommandSpec(0, False, "显示命令列表"),
    'quit': CommandSpec(0, False, "结束会话"),
}


@dataclass(frozen=True)
class PileCommand:
    """解析后的会话命令"""
    name: str
    args: Tuple[int, ...] = ()
    pile: str = 'deck'

    def __post_init__(self):
        spec = COMMAND_SPECS.get(self.name)
        if spec is None:
            raise CommandError(f"未知命令: {self.name}")
        if len(self.args) != spec.int_args:
            raise CommandError(f"命令 {self.name} 需要 {spec.int_args} 个整数参数，实际 {len(self.args)} 个")
        if self.pile not in PILE_NAMES:
            raise CommandError(f"未知牌堆: {self.pile}")


@dataclass
class PileSession:
    """
    牌桌会话

    Attributes:
        deck: 主牌堆
        hand: 手牌
        rng: 洗牌用的随机数生成器，None表示使用系统熵源
        history: 已成功执行的命令
    """
    deck: Group = field(default_factory=new_standard_deck)
    hand: Group = field(default_factory=Group)
    rng: Optional[random.Random] = None
    history: List[PileCommand] = field(default_factory=list)
    finished: bool = False

    def __post_init__(self):
        self.logger = logging.getLogger(__name__)

    def pile(self, name: str) -> Group:
        """按名称获取牌堆"""
        if name == 'deck':
            return self.deck
        if name == 'hand':
            return self.hand
        raise CommandError(f"未知牌堆: {name}")

    def execute(self, command: PileCommand) -> str:
        """
        执行一条命令

        Args:
            command: 已解析的命令

        Returns:
            str: 执行结果描述

        Raises:
            CommandError: 会话已结束时
            GroupRangeError: 区间越界时，牌堆保持不变
        """
        if self.finished:
            raise CommandError("会话已结束")

        handler = getattr(self, f"_do_{command.name}")
        try:
            message = handler(self.pile(command.pile), *command.args)
        except CardPileError as e:
            self.logger.warning(f"命令 {command.name} 执行失败: {e}")
            raise

        self.history.append(command)
        self.logger.info(f"{command.name} {command.pile} {command.args}: {message}")
        return message

    def _moved(self, drawn: Group) -> str:
        self.hand.insert(drawn)
        return f"抽出 {len(drawn)} 张牌，hand现有 {len(self.hand)} 张"

    def _returned(self, count: int) -> str:
        self.hand = Group()
        return f"放回 {count} 张牌，deck现有 {len(self.deck)} 张"

    def _do_show(self, pile: Group) -> str:
        return f"deck {len(self.deck)} 张，hand {len(self.hand)} 张"

    def _do_shuffle(self, pile: Group) -> str:
        perfect_shuffle(pile, self.rng)
        return "洗牌完成"

    def _do_sort(self, pile: Group) -> str:
        pile.sort()
        return "排序完成"

    def _do_reverse(self, pile: Group) -> str:
        reverse(pile)
        return "倒序完成"

    def _do_flip(self, pile: Group, i: int, j: int) -> str:
        pile.flip(i, j)
        return f"翻转区间 [{i}, {j})"

    def _do_flipall(self, pile: Group) -> str:
        pile.flip_all()
        return "整体翻转完成"

    def _do_faceup(self, pile: Group) -> str:
        pile.flip_each(True)
        return "全部正面朝上"

    def _do_facedown(self, pile: Group) -> str:
        pile.flip_each(False)
        return "全部背面朝上"

    def _do_draw(self, pile: Group, n: int) -> str:
        return self._moved(self.deck.draw(n))

    def _do_drawbottom(self, pile: Group, n: int) -> str:
        return self._moved(self.deck.draw_bottom(n))

    def _do_drawat(self, pile: Group, i: int, j: int) -> str:
        return self._moved(self.deck.draw_at(i, j))

    def _do_insert(self, pile: Group) -> str:
        self.deck.insert(self.hand)
        return self._returned(len(self.hand))

    def _do_insertbottom(self, pile: Group) -> str:
        self.deck.insert_bottom(self.hand)
        return self._returned(len(self.hand))

    def _do_insertat(self, pile: Group, i: int) -> str:
        self.deck.insert_at(i, self.hand)
        return self._returned(len(self.hand))

    def _do_help(self, pile: Group) -> str:
        return "\n".join(f"  {name:<13}{spec.help}" for name, spec in COMMAND_SPECS.items())

    def _do_quit(self, pile: Group) -> str:
        self.finished = True
        return "会话结束"
