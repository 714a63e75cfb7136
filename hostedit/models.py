"""
hostedit 数据模型
"""

import ipaddress
from dataclasses import dataclass


class AddressError(ValueError):
    """参数中没有（或不止一个）合法的 IP 地址"""


def is_address(value: str) -> bool:
    """判断字符串是否为合法的 IPv4 或 IPv6 地址"""
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class HostEntry:
    """
    代表 hosts 文件中的单个条目

    属性:
        ip_address: IP 地址
        hostname: 要映射的主机名
    """

    ip_address: str
    hostname: str

    @classmethod
    def resolve(cls, a: str, b: str) -> "HostEntry":
        """
        从两个参数中确定哪个是地址、哪个是主机名

        参数顺序不限。恰好一个参数是合法地址时，另一个参数
        无论格式如何都被当作主机名。

        参数:
            a: 第一个参数
            b: 第二个参数

        返回:
            HostEntry 实例

        异常:
            AddressError: 两个参数都不是地址，或两个参数都是地址
        """
        a_is_address = is_address(a)
        b_is_address = is_address(b)

        if not a_is_address and not b_is_address:
            raise AddressError(f"{a} 和 {b} 都不是合法的 IP 地址")
        if a_is_address and b_is_address:
            raise AddressError(f"{a} 和 {b} 都是 IP 地址，无法确定主机名")

        if a_is_address:
            return cls(ip_address=a, hostname=b)
        return cls(ip_address=b, hostname=a)

    def to_hosts_line(self) -> str:
        """
        转换为 hosts 文件行格式

        格式: <IP>\t<主机名>
        """
        return f"{self.ip_address}\t{self.hostname}"

    def __str__(self) -> str:
        return f"{self.hostname} -> {self.ip_address}"
