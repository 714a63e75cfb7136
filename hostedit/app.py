"""
hostedit 主应用模块
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator

from hostedit.config import Config
from hostedit.hosts_manager import HostList
from hostedit.privilege import am_i_root


class HostsEditor:
    """
    主应用控制器

    每次调用的流程：
    - 检查 root 权限
    - 读取 hosts 文件并执行命令
    - 有修改时写回文件
    """

    def __init__(self, config: Config):
        """
        初始化应用

        参数:
            config: 应用配置

        异常:
            ValueError: 如果配置无效
        """
        self.config = config
        self.config.validate()

        self.logger = self._setup_logging()

    def _setup_logging(self) -> logging.Logger:
        """
        配置日志系统

        日志只输出到 stderr，stdout 留给 list 的输出；
        不向根日志记录器传播，避免重复输出。

        返回:
            配置好的日志记录器实例
        """
        logger = logging.getLogger('hostedit')
        logger.setLevel(self.config.log_level)
        logger.propagate = False

        if logger.handlers:
            for handler in logger.handlers:
                handler.setLevel(self.config.log_level)
            return logger

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(self.config.log_level)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

        logger.addHandler(handler)
        return logger

    def is_permitted(self) -> bool:
        """当前用户是否可以修改 hosts 文件"""
        if not self.config.require_root:
            return True
        return am_i_root(self.logger)

    @contextmanager
    def session(self) -> Iterator[HostList]:
        """
        读取 hosts 文件，交给调用方修改，有修改时写回

        代码块中抛出异常时不写回文件。

        异常:
            OSError: 如果 hosts 文件读写失败
        """
        hosts = HostList(self.config.hosts_file_path, self.logger)
        hosts.load()

        yield hosts

        if hosts.changed:
            self.logger.info(f"正在将修改写入 {self.config.hosts_file_path}")
            hosts.save()
