"""
运行权限检查模块
"""

import logging
import subprocess


def am_i_root(logger: logging.Logger) -> bool:
    """
    通过 whoami 检查当前用户是否为 root

    whoami 无法执行时放行：没有 root 权限的用户写入 hosts 文件时
    仍会被文件权限拒绝。

    参数:
        logger: 日志记录器实例

    返回:
        当前用户为 root 或无法确定时返回 True
    """
    try:
        result = subprocess.run(
            ['whoami'],
            capture_output=True,
            text=True,
            check=True
        )
    except (OSError, subprocess.CalledProcessError) as e:
        logger.warning(f"无法确定当前用户，继续运行: {e}")
        return True

    user = result.stdout.strip()
    logger.debug(f"当前用户: {user}")
    return user == 'root'
