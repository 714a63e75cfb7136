"""
Hosts 文件管理模块，按行编辑
"""

import logging
from pathlib import Path
from typing import List

from hostedit.models import HostEntry


def contains_part(line: str, thing: str) -> bool:
    """
    检查 thing 是否作为完整字段出现在行中

    行首的 # 不属于第一个字段，因此被注释的行仍能按地址或主机名匹配。
    CRLF 行尾的回车符不属于最后一个字段。空字符串不匹配任何行。

    参数:
        line: hosts 文件中的一行
        thing: IP 地址或主机名

    返回:
        thing 等于某个以制表符分隔的字段时返回 True
    """
    if not thing:
        return False
    return thing in line.lstrip('#').rstrip('\r').split('\t')


class HostList:
    """
    hosts 文件的内存副本

    文件内容按行保存，注释行、空行和条目行不做区分。
    任何修改操作都会设置 changed 标志，调用方据此决定是否写回文件。
    """

    def __init__(self, hosts_path: str, logger: logging.Logger):
        """
        初始化 hosts 列表

        参数:
            hosts_path: hosts 文件路径
            logger: 日志记录器实例
        """
        self.hosts_path = Path(hosts_path)
        self.logger = logger
        self.lines: List[str] = []
        self.changed = False

    def load(self) -> None:
        """
        读取整个 hosts 文件

        异常:
            PermissionError: 如果没有读取权限
            OSError: 如果文件不存在或无法读取
        """
        with open(self.hosts_path, 'r', encoding='utf-8', newline='') as f:
            self.parse(f.read())

        self.logger.debug(f"已读取 {len(self.lines)} 行: {self.hosts_path}")

    def parse(self, text: str) -> None:
        """按换行符拆分文本，替换当前所有行"""
        self.lines = text.split('\n')

    def serialize(self) -> str:
        """用换行符重新拼接所有行，不补充结尾换行"""
        return '\n'.join(self.lines)

    def save(self) -> None:
        """
        将内容写回 hosts 文件

        直接覆盖写入，不使用临时文件。

        异常:
            PermissionError: 如果没有写入权限
            OSError: 如果写入失败
        """
        with open(self.hosts_path, 'w', encoding='utf-8', newline='') as f:
            f.write(self.serialize())

        self.logger.debug(f"已写入 {len(self.lines)} 行: {self.hosts_path}")
        self.changed = False

    def contains(self, a: str, b: str) -> bool:
        """
        检查是否存在与 <IP>\t<主机名> 完全相同的行（忽略 CRLF 行尾的回车符）

        参数:
            a: IP 地址或主机名
            b: IP 地址或主机名

        异常:
            AddressError: 如果无法确定哪个参数是地址
        """
        target = HostEntry.resolve(a, b).to_hosts_line()
        return any(line.rstrip('\r') == target for line in self.lines)

    def add(self, a: str, b: str) -> HostEntry:
        """
        在末尾追加一条 <IP>\t<主机名> 记录

        不检查重复，也不排序。

        异常:
            AddressError: 如果无法确定哪个参数是地址
        """
        entry = HostEntry.resolve(a, b)
        self.lines.append(entry.to_hosts_line())
        self.changed = True
        self.logger.info(f"已添加主机记录: {entry}")
        return entry

    def remove(self, thing: str) -> int:
        """
        删除所有包含 thing 字段的行

        没有匹配行时也会标记为已修改。

        返回:
            删除的行数
        """
        kept = [line for line in self.lines if not contains_part(line, thing)]
        removed = len(self.lines) - len(kept)
        self.lines = kept
        self.changed = True
        self.logger.info(f"已删除 {removed} 行: {thing}")
        return removed

    def comment(self, thing: str) -> int:
        """
        在所有包含 thing 字段的行前加上 #

        重复调用会叠加多个 #。

        返回:
            注释的行数
        """
        count = 0
        for i, line in enumerate(self.lines):
            if contains_part(line, thing):
                self.lines[i] = '#' + line
                count += 1

        self.changed = True
        self.logger.info(f"已注释 {count} 行: {thing}")
        return count

    def uncomment(self, thing: str) -> int:
        """
        去掉所有包含 thing 字段的行开头的全部 #

        返回:
            处理的行数
        """
        count = 0
        for i, line in enumerate(self.lines):
            if contains_part(line, thing):
                self.lines[i] = line.lstrip('#')
                count += 1

        self.changed = True
        self.logger.info(f"已取消注释 {count} 行: {thing}")
        return count
