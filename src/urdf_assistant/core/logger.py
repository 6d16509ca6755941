"""
统一日志管理模块
使用 Rich 提供美观的控制台输出
"""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


class Logger:
    """统一日志管理器"""

    def __init__(self, name: str = "urdf_assistant", level: str = "INFO", log_file: Optional[str] = None):
        self.name = name
        self.level = getattr(logging, level.upper())
        self.log_file = Path(log_file) if log_file else None
        self.console = Console(stderr=True)

        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.level)

        # 关闭并移除现有的处理器 (FileHandler 持有文件句柄)
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

        rich_handler = RichHandler(
            console=self.console,
            show_time=True,
            show_level=True,
            show_path=False,
            markup=False
        )
        rich_handler.setLevel(self.level)
        self.logger.addHandler(rich_handler)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def get_logger(self) -> logging.Logger:
        """获取配置好的 logger 实例"""
        return self.logger


# 全局日志实例
_global_logger = None

def get_logger(name: str = "urdf_assistant", level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """
    获取日志器

    首次调用时在包根 logger (urdf_assistant) 上安装处理器，
    模块 logger (urdf_assistant.description.link 等) 通过传播输出。
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = Logger("urdf_assistant", level, log_file)
    if name == "urdf_assistant" or name.startswith("urdf_assistant."):
        return logging.getLogger(name)
    return _global_logger.get_logger().getChild(name)


def _enable_package_loggers():
    # logging.config.dictConfig(disable_existing_loggers=True) 会禁用导入时已创建的 logger
    for name, item in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(item, logging.Logger) and (name == "urdf_assistant" or name.startswith("urdf_assistant.")):
            item.disabled = False


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """按配置重建全局日志器 (CLI 入口使用)"""
    global _global_logger
    _global_logger = Logger("urdf_assistant", level, log_file)
    _enable_package_loggers()
    return _global_logger.get_logger()
