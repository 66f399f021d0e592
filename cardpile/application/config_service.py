#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理cardpile的配置，包括：
- 日志配置
- 牌面显示配置

每类配置按名称提供若干预设(profile)，未知名称回退到default.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigType(Enum):
    """配置类型枚举"""
    LOGGING = "logging"
    DISPLAY = "display"


@dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = 'WARNING'
    log_format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    enable_console_logging: bool = True
    enable_file_logging: bool = False
    log_file_path: str = "cardpile.log"

    def __post_init__(self):
        """验证日志级别"""
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"日志级别无效: {self.log_level}")


@dataclass
class DisplayConfig:
    """牌面显示配置"""
    reveal_face_down: bool = False
    face_down_marker: str = "##"
    use_symbols: bool = False

    def __post_init__(self):
        """背面标记必须与牌的简写等宽"""
        if len(self.face_down_marker) != 2:
            raise ValueError(f"背面标记必须为2个字符，当前为: {self.face_down_marker!r}")


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, object]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'quiet': LoggingConfig(
                log_level='ERROR',
                enable_console_logging=False
            )
        }

        self._configs[ConfigType.DISPLAY] = {
            'default': DisplayConfig(),
            'reveal': DisplayConfig(reveal_face_down=True),
            'symbols': DisplayConfig(use_symbols=True)
        }

        self.logger.debug("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str):
        config_profiles = self._configs[config_type]
        if profile not in config_profiles:
            self.logger.warning(f"未找到{config_type.value}配置 '{profile}'，使用默认配置")
            profile = 'default'
        return config_profiles[profile]

    def get_logging_config(self, profile: str = "default") -> LoggingConfig:
        """
        获取日志配置

        Args:
            profile: 配置名称 (default, debug, quiet)

        Returns:
            LoggingConfig: 日志配置
        """
        return self._get(ConfigType.LOGGING, profile)

    def get_display_config(self, profile: str = "default") -> DisplayConfig:
        """
        获取显示配置

        Args:
            profile: 配置名称 (default, reveal, symbols)

        Returns:
            DisplayConfig: 显示配置
        """
        return self._get(ConfigType.DISPLAY, profile)

    def list_profiles(self, config_type: ConfigType) -> List[str]:
        """列出某类配置的所有预设名称"""
        return sorted(self._configs.get(config_type, {}))

    def register_profile(self, config_type: ConfigType, profile: str, config) -> None:
        """
        注册或覆盖一个配置预设

        Raises:
            TypeError: 当配置对象类型与配置类型不匹配时
        """
        expected = LoggingConfig if config_type is ConfigType.LOGGING else DisplayConfig
        if not isinstance(config, expected):
            raise TypeError(f"{config_type.value}配置必须是{expected.__name__}类型，实际: {type(config)}")
        self._configs[config_type][profile] = config
        self.logger.info(f"注册{config_type.value}配置: {profile}")

    @staticmethod
    def configure_logging(config: LoggingConfig,
                          logger: Optional[logging.Logger] = None) -> logging.Logger:
        """
        按配置安装日志处理器

        重复调用时会替换之前安装的处理器.

        Args:
            config: 日志配置
            logger: 目标logger，默认为cardpile包的根logger

        Returns:
            logging.Logger: 已配置的logger
        """
        target = logger or logging.getLogger('cardpile')
        target.setLevel(getattr(logging, config.log_level))

        for handler in list(target.handlers):
            if getattr(handler, '_cardpile_handler', False):
                target.removeHandler(handler)
                handler.close()

        formatter = logging.Formatter(config.log_format)
        handlers: List[logging.Handler] = []
        if config.enable_console_logging:
            handlers.append(logging.StreamHandler())
        if config.enable_file_logging:
            handlers.append(logging.FileHandler(config.log_file_path, mode='a', encoding='utf-8'))

        for handler in handlers:
            handler.setFormatter(formatter)
            handler._cardpile_handler = True
            target.addHandler(handler)

        return target
