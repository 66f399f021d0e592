"""
cardpile - 扑克牌组模型

提供扑克牌、牌堆(Group)以及洗牌/排序等操作。

Modules:
    core: 纯领域逻辑层（牌、牌堆、洗牌与排序）
    application: 配置管理与牌桌会话
    ui: 命令行界面
"""

__version__ = "1.0.0"
