"""cardpile命令行入口.

`cardpile deck` 显示一副标准牌，`cardpile session` 从标准输入逐行读取命令
操作deck与hand。
"""

import logging

import click

from cardpile.application.config_service import ConfigService, DisplayConfig
from cardpile.application.pile_session import PileSession
from cardpile.core.deck import Group, joker, new_standard_deck, perfect_shuffle, reverse
from cardpile.core.exceptions import CardPileError
from cardpile.ui.cli.input_handler import CLIInputHandler
from cardpile.ui.cli.render import CLIRenderer

logger = logging.getLogger(__name__)


def _build_deck(jokers: int, shuffle: bool) -> Group:
    deck = new_standard_deck()
    deck.insert(Group(joker() for _ in range(jokers)))
    if shuffle:
        perfect_shuffle(deck)
    return deck


def _display_config(ctx: click.Context, reveal: bool) -> DisplayConfig:
    config = ctx.obj['config'].get_display_config(ctx.obj['display'])
    if reveal and not config.reveal_face_down:
        config = DisplayConfig(
            reveal_face_down=True,
            face_down_marker=config.face_down_marker,
            use_symbols=config.use_symbols
        )
    return config


@click.group()
@click.option('--profile', default='default', show_default=True,
              help="日志配置名称 (default, debug, quiet)")
@click.option('--display', default='default', show_default=True,
              help="显示配置名称 (default, reveal, symbols)")
@click.pass_context
def main(ctx: click.Context, profile: str, display: str) -> None:
    """cardpile: 扑克牌堆操作工具."""
    config = ConfigService()
    config.configure_logging(config.get_logging_config(profile))
    ctx.obj = {'config': config, 'display': display}


@main.command()
@click.option('--shuffle', is_flag=True, help="洗牌")
@click.option('--sort', 'sort_', is_flag=True, help="排序")
@click.option('--reverse', 'reverse_', is_flag=True, help="倒序")
@click.option('--jokers', default=0, show_default=True, type=click.IntRange(0, 2),
              help="加入的王牌数量")
@click.option('--face-up', is_flag=True, help="全部正面朝上")
@click.option('--reveal', is_flag=True, help="显示背面朝上的牌")
@click.pass_context
def deck(ctx: click.Context, shuffle: bool, sort_: bool, reverse_: bool,
         jokers: int, face_up: bool, reveal: bool) -> None:
    """显示一副标准牌."""
    group = _build_deck(jokers, shuffle)
    if sort_:
        group.sort()
    if reverse_:
        reverse(group)
    if face_up:
        group.flip_each(True)

    logger.info(f"牌组: {group}")
    click.echo(CLIRenderer.render_group(group, _display_config(ctx, reveal)))


@main.command()
@click.option('--jokers', default=0, show_default=True, type=click.IntRange(0, 2),
              help="加入的王牌数量")
@click.option('--shuffle', is_flag=True, help="开始前洗牌")
@click.option('--reveal', is_flag=True, help="显示背面朝上的牌")
@click.pass_context
def session(ctx: click.Context, jokers: int, shuffle: bool, reveal: bool) -> None:
    """从标准输入逐行读取命令，操作deck与hand."""
    display = _display_config(ctx, reveal)
    table = PileSession(deck=_build_deck(jokers, shuffle))
    stdin = click.get_text_stream('stdin')

    for line in stdin:
        try:
            command = CLIInputHandler.parse_line(line)
            if command is None:
                continue
            message = table.execute(command)
        except CardPileError as e:
            click.echo(f"错误: {e}")
            continue

        if command.name == 'show':
            click.echo(CLIRenderer.render_table(table.deck, table.hand, display))
        else:
            click.echo(message)
        if table.finished:
            break

    click.echo(CLIRenderer.render_table(table.deck, table.hand, display))
