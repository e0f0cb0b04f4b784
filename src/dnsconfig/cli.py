"""Root CLI group for dnsconfig with global flags and command registration."""

from __future__ import annotations

import click

from dnsconfig import __version__
from dnsconfig.commands import register_commands
from dnsconfig.commands._base import DnsGroup
from dnsconfig.commands._context import AppContext
from dnsconfig.config.settings import DnsConfigSettings


@click.group(
    cls=DnsGroup,
    invoke_without_command=True,
    examples="""\
  dnsconfig show -s marathon
  dnsconfig -v write -s mesos-master --restart
  dnsconfig -c ./dnsconfig.toml exec -s zookeeper""",
)
@click.version_option(version=__version__, prog_name="dnsconfig")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--fsprefix", default=None, help="Root directory prepended to all output paths.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    fsprefix: str | None,
) -> None:
    """dnsconfig — configure cluster services from DNS TXT records."""
    ctx.ensure_object(dict)
    settings = DnsConfigSettings.from_cli(
        config_path=config_path,
        fsprefix=fsprefix,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
