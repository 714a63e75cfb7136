"""
配置管理模块，支持环境变量
"""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """
    应用配置类

    hosts 文件路径和 root 检查只能在构造时指定，不从环境变量读取。
    """

    hosts_file_path: str = "/etc/hosts"
    log_level: str = "INFO"
    require_root: bool = True

    @classmethod
    def from_env(cls) -> "Config":
        """
        从环境变量加载配置

        环境变量说明:
            LOG_LEVEL: 日志级别 (默认: INFO)
        """
        return cls(
            log_level=os.getenv("LOG_LEVEL", "INFO").upper()
        )

    def validate(self) -> None:
        """验证配置是否有效"""
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.log_level not in valid_log_levels:
            raise ValueError(
                f"无效的 LOG_LEVEL: {self.log_level}. "
                f"必须是以下之一: {', '.join(sorted(valid_log_levels))}"
            )
        if not self.hosts_file_path:
            raise ValueError("hosts 文件路径不能为空")
