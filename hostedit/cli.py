"""hostedit CLI — 在命令行中编辑 /etc/hosts。

Commands:
    hostedit list | ls                      显示整个 hosts 文件
    hostedit add | + IP HOSTNAME            追加一条记录（参数顺序不限）
    hostedit del | rm | - THING             删除匹配的行
    hostedit com THING                      注释匹配的行
    hostedit ucom THING                     取消注释匹配的行
    hostedit has | ? | contains IP HOSTNAME 存在时退出码为 0，否则为 1
    hostedit help                           显示帮助
"""

from typing import Dict, List, Optional, Tuple

import click

from hostedit.app import HostsEditor
from hostedit.config import Config
from hostedit.models import AddressError


# 命令别名 -> 命令名
ALIASES: Dict[str, str] = {
    'ls': 'list',
    'rm': 'del',
    '-': 'del',
    '+': 'add',
    'has': 'contains',
    '?': 'contains',
}

# 不需要 root 权限的命令
UNPRIVILEGED = {'help'}


class AliasedGroup(click.Group):
    """支持命令别名的命令组"""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def resolve_command(
        self, ctx: click.Context, args: List[str]
    ) -> Tuple[Optional[str], Optional[click.Command], List[str]]:
        # 使用命令的正式名称，便于在命令组回调中判断
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


def _editor(ctx: click.Context) -> HostsEditor:
    return ctx.find_object(HostsEditor)


def _fail(exc: Exception) -> click.ClickException:
    return click.ClickException(str(exc))


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(
    cls=AliasedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-v", "--verbose", is_flag=True, help="输出调试日志")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """hostedit — 编辑 /etc/hosts 条目。"""
    config = ctx.obj if isinstance(ctx.obj, Config) else Config.from_env()
    if verbose:
        config.log_level = "DEBUG"

    try:
        ctx.obj = HostsEditor(config)
    except ValueError as exc:
        raise click.ClickException(f"初始化 hostedit 失败: {exc}") from exc

    if ctx.invoked_subcommand in UNPRIVILEGED:
        return

    if not ctx.obj.is_permitted():
        raise click.ClickException("请以 root 身份运行本程序！")

    if ctx.invoked_subcommand is None:
        raise click.ClickException("无事可做，请指定命令")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@cli.command("list")
@click.pass_context
def list_(ctx: click.Context) -> None:
    """显示整个 hosts 文件"""
    try:
        with _editor(ctx).session() as hosts:
            click.echo(hosts.serialize())
    except OSError as exc:
        raise _fail(exc) from exc


@cli.command("add")
@click.argument("address")
@click.argument("hostname")
@click.pass_context
def add(ctx: click.Context, address: str, hostname: str) -> None:
    """追加一条 IP 与主机名的记录（参数顺序不限）"""
    try:
        with _editor(ctx).session() as hosts:
            hosts.add(address, hostname)
    except (AddressError, OSError) as exc:
        raise _fail(exc) from exc


@cli.command("del")
@click.argument("thing")
@click.pass_context
def delete(ctx: click.Context, thing: str) -> None:
    """删除包含该 IP 或主机名的所有行"""
    try:
        with _editor(ctx).session() as hosts:
            hosts.remove(thing)
    except OSError as exc:
        raise _fail(exc) from exc


@cli.command("com")
@click.argument("thing")
@click.pass_context
def comment(ctx: click.Context, thing: str) -> None:
    """注释包含该 IP 或主机名的所有行"""
    try:
        with _editor(ctx).session() as hosts:
            hosts.comment(thing)
    except OSError as exc:
        raise _fail(exc) from exc


@cli.command("ucom")
@click.argument("thing")
@click.pass_context
def uncomment(ctx: click.Context, thing: str) -> None:
    """取消注释包含该 IP 或主机名的所有行"""
    try:
        with _editor(ctx).session() as hosts:
            hosts.uncomment(thing)
    except OSError as exc:
        raise _fail(exc) from exc


@cli.command("contains")
@click.argument("address")
@click.argument("hostname")
@click.pass_context
def contains(ctx: click.Context, address: str, hostname: str) -> None:
    """记录存在时退出码为 0，否则为 1"""
    editor = _editor(ctx)
    try:
        with editor.session() as hosts:
            found = hosts.contains(address, hostname)
    except (AddressError, OSError) as exc:
        raise _fail(exc) from exc

    editor.logger.debug(f"查询结果: {found}")
    ctx.exit(0 if found else 1)


@cli.command("help")
@click.pass_context
def help_(ctx: click.Context) -> None:
    """显示帮助"""
    click.echo(ctx.parent.get_help())
