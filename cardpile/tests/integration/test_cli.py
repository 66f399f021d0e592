"""
CLI端到端测试

通过click.testing.CliRunner驱动`cardpile deck`与`cardpile session`.
"""

import logging

import pytest
from click.testing import CliRunner

from cardpile.ui.cli import main


@pytest.fixture
def runner():
    """CliRunner，测试结束后移除CLI安装的日志处理器"""
    yield CliRunner()
    target = logging.getLogger('cardpile')
    for handler in list(target.handlers):
        if getattr(handler, '_cardpile_handler', False):
            target.removeHandler(handler)
            handler.close()
    target.setLevel(logging.NOTSET)


def _last_line(output: str) -> str:
    return output.strip().splitlines()[-1]


@pytest.mark.integration
class TestDeckCommand:
    """`cardpile deck`命令"""

    def test_face_down_deck_hidden(self, runner):
        result = runner.invoke(main, ['deck'])
        assert result.exit_code == 0
        assert result.output.strip() == "[ " + " ".join(["##"] * 52) + " ]"

    def test_reveal(self, runner):
        result = runner.invoke(main, ['deck', '--reveal'])
        assert result.exit_code == 0
        assert result.output.startswith("[ AS 2S 3S")
        assert result.output.strip().endswith("QC KC ]")

    def test_face_up_with_jokers_sorted(self, runner):
        result = runner.invoke(main, ['deck', '--jokers', '2', '--shuffle', '--sort', '--face-up'])
        assert result.exit_code == 0
        assert result.output.startswith("[ JO JO AS 2S")

    def test_reverse(self, runner):
        result = runner.invoke(main, ['deck', '--reverse', '--face-up'])
        assert result.exit_code == 0
        assert result.output.startswith("[ KC QC")

    def test_symbols_display(self, runner):
        result = runner.invoke(main, ['--display', 'symbols', 'deck', '--face-up'])
        assert result.exit_code == 0
        assert result.output.startswith("[ A♠ 2♠")

    def test_too_many_jokers(self, runner):
        result = runner.invoke(main, ['deck', '--jokers', '5'])
        assert result.exit_code != 0


@pytest.mark.integration
class TestSessionCommand:
    """`cardpile session`命令"""

    def test_draw_flip_and_show(self, runner):
        script = "\n".join([
            "draw 3",
            "flip 1 3 hand",
            "show",
            "quit",
        ])
        result = runner.invoke(main, ['session'], input=script)
        assert result.exit_code == 0
        assert "deck (49): [ " in result.output
        assert "hand (3): [ ## KC QC ]" in result.output

    def test_errors_do_not_end_session(self, runner):
        script = "\n".join([
            "deal 3",
            "flip 5 60",
            "# comment",
            "",
            "drawbottom 1",
        ])
        result = runner.invoke(main, ['--profile', 'quiet', 'session', '--reveal'], input=script)
        assert result.exit_code == 0
        assert "错误: 无法识别命令 'deal'" in result.output
        assert "错误: Range [5, 60)" in result.output
        assert _last_line(result.output) == "hand (1): [ AS ]"

    def test_input_stops_after_quit(self, runner):
        result = runner.invoke(main, ['session'], input="quit\ndraw 5\n")
        assert result.exit_code == 0
        assert "hand (0): [  ]" in result.output

    def test_jokers_in_session(self, runner):
        result = runner.invoke(
            main, ['--profile', 'quiet', 'session', '--jokers', '1', '--reveal'],
            input="draw 1\n"
        )
        assert result.exit_code == 0
        assert _last_line(result.output) == "hand (1): [ JO ]"
