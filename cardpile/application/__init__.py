"""
Application Layer - 应用服务层

Modules:
    config_service: 日志与显示配置
    pile_session: 牌桌会话（deck + hand）
"""

from .config_service import ConfigService, ConfigType, DisplayConfig, LoggingConfig
from .pile_session import PileCommand, PileSession

__all__ = [
    'ConfigService', 'ConfigType', 'DisplayConfig', 'LoggingConfig',
    'PileCommand', 'PileSession',
]
