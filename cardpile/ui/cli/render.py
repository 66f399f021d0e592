"""cardpile CLI渲染模块.

这个模块负责将牌堆渲染为命令行显示，与牌堆自身的字符串表示不同，
渲染结果会体现每张牌的朝向。
"""

from cardpile.application.config_service import DisplayConfig
from cardpile.core.deck import AnyCard, Group


class CLIRenderer:
    """CLI渲染器.

    所有渲染方法都是纯函数，仅依赖传入的牌堆和显示配置。
    """

    @staticmethod
    def render_card(card: AnyCard, faceup: bool, config: DisplayConfig) -> str:
        """渲染单张牌.

        Args:
            card: 牌
            faceup: 是否正面朝上
            config: 显示配置

        Returns:
            两字符的牌面，背面朝上且不揭示时为背面标记
        """
        if not faceup and not config.reveal_face_down:
            return config.face_down_marker
        if config.use_symbols and not card.is_joker:
            return card.rank.short + card.suit.symbol
        return card.short

    @staticmethod
    def render_group(group: Group, config: DisplayConfig) -> str:
        """渲染牌堆，从底到顶.

        Returns:
            如"[ ## ## KS ]"的字符串
        """
        faces = [
            CLIRenderer.render_card(card, faceup, config)
            for card, faceup in zip(group.cards(), group.flipped_array())
        ]
        return "[ " + " ".join(faces) + " ]"

    @staticmethod
    def render_table(deck: Group, hand: Group, config: DisplayConfig) -> str:
        """渲染deck与hand."""
        lines = [
            f"deck ({len(deck)}): {CLIRenderer.render_group(deck, config)}",
            f"hand ({len(hand)}): {CLIRenderer.render_group(hand, config)}",
        ]
        return "\n".join(lines)
