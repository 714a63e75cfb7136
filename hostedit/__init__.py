"""
hostedit - 在命令行中编辑 /etc/hosts 条目
"""

__version__ = "1.0.0"
__author__ = "hostedit Project"

from hostedit.app import HostsEditor
from hostedit.config import Config
from hostedit.hosts_manager import HostList
from hostedit.models import AddressError, HostEntry

__all__ = [
    "HostsEditor",
    "Config",
    "HostList",
    "HostEntry",
    "AddressError",
]
