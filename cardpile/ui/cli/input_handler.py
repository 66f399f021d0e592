"""CLI输入处理器.

负责把一行文本解析为会话命令，并校验参数格式。
"""

import shlex
from typing import List, Optional

from cardpile.application.pile_session import COMMAND_SPECS, PILE_NAMES, PileCommand
from cardpile.core.exceptions import CommandError


class CLIInputHandler:
    """CLI输入处理器.

    文本格式为 `命令 [整数参数...] [deck|hand]`，大小写不敏感，
    `#` 之后的内容视为注释。
    """

    @staticmethod
    def parse_line(line: str) -> Optional[PileCommand]:
        """解析一行输入.

        Args:
            line: 用户输入的一行文本

        Returns:
            解析后的命令，空行或纯注释返回None

        Raises:
            CommandError: 命令或参数格式错误
        """
        line = line.split('#', 1)[0].strip()
        if not line:
            return None

        try:
            tokens = shlex.split(line.lower())
        except ValueError as e:
            raise CommandError(f"无法解析输入 '{line}': {e}") from e

        name, rest = tokens[0], tokens[1:]
        spec = COMMAND_SPECS.get(name)
        if spec is None:
            raise CommandError(f"无法识别命令 '{name}'，输入 help 查看命令列表")

        pile = 'deck'
        if spec.takes_pile and rest and rest[-1] in PILE_NAMES:
            pile = rest.pop()

        return PileCommand(name=name, args=CLIInputHandler._parse_ints(name, rest), pile=pile)

    @staticmethod
    def _parse_ints(name: str, tokens: List[str]) -> tuple:
        values = []
        for token in tokens:
            try:
                values.append(int(token))
            except ValueError:
                raise CommandError(f"命令 {name} 的参数必须是整数: '{token}'") from None
        return tuple(values)
