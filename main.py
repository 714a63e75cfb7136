#!/usr/bin/env python3
"""
hostedit - 主入口点

在命令行中列出、添加、删除、注释 /etc/hosts 条目。
"""

import sys
from pathlib import Path
from typing import List, Optional

import click

# 将当前目录添加到路径以导入 hostedit 模块
sys.path.insert(0, str(Path(__file__).parent))

from hostedit import Config
from hostedit.cli import cli


def main(argv: Optional[List[str]] = None, config: Optional[Config] = None) -> None:
    """主入口点，致命错误只输出一行到 stderr"""

    try:
        exit_code = cli.main(
            args=argv,
            prog_name="hostedit",
            obj=config,
            standalone_mode=False,
        )
    except click.ClickException as e:
        click.echo(f"Error: {e.format_message()}", err=True)
        sys.exit(e.exit_code)
    except click.Abort:
        click.echo("已中止", err=True)
        sys.exit(1)

    sys.exit(exit_code or 0)


if __name__ == '__main__':
    main()
