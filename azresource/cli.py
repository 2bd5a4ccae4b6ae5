"""
azresource CLI entry point.
"""
import sys
from typing import List, Optional

import click
from rich.markup import escape
from rich.table import Table

from azresource import __version__, console, lister, workflow
from azresource.client import ResourceManager, authenticate, credential_from_settings
from azresource.config import ConfigError, Settings, load_settings
from azresource.models.result import StepResult, StepStatus

_STATUS_COLORS = {
    StepStatus.SUCCEEDED: "green",
    StepStatus.FAILED: "bold red",
    StepStatus.SKIPPED: "dim",
    StepStatus.NOOP: "yellow",
}


def _print_banner() -> None:
    console.err.print(f"[bold blue]azresource[/bold blue] [dim]v{__version__}[/dim]")


def _print_summary_table(steps: List[StepResult]) -> None:
    """Print a summary of every workflow step to stderr."""
    tbl = Table(title="Workflow Summary", show_header=True, header_style="bold")
    tbl.add_column("#", style="dim", width=3)
    tbl.add_column("Step", width=30)
    tbl.add_column("Status", width=10)
    tbl.add_column("Detail")

    for i, s in enumerate(steps, 1):
        color = _STATUS_COLORS.get(s.status, "")
        tbl.add_row(
            str(i),
            s.step,
            f"[{color}]{s.status.value}[/{color}]",
            escape(s.detail[:80] + "…" if len(s.detail) > 80 else s.detail),
        )

    console.err.print(tbl)


def build_manager(settings: Settings, http_logging: bool) -> ResourceManager:
    if http_logging:
        console.enable_http_logging()
    credential = credential_from_settings(settings)
    return authenticate(credential, settings.profile())


def _connect(ctx: click.Context) -> Optional[ResourceManager]:
    opts = ctx.obj
    try:
        opts["settings"] = load_settings(opts["config"]).validate()
    except ConfigError as exc:
        console.err.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        sys.exit(2)

    try:
        return build_manager(opts["settings"], opts["http_logging"])
    except Exception as exc:
        console.report_exception(exc)
        return None


def _finish(ctx: click.Context, ok: bool) -> None:
    if not ok and ctx.obj["fail_on_error"]:
        console.err.print("[red]Command failed[/red] (--fail-on-error).")
        sys.exit(1)
    sys.exit(0)


@click.group(context_settings=dict(help_option_names=["-h", "--help"]))
@click.version_option(__version__)
@click.option(
    "--config", "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML settings file (default: ./azresource.yaml when present).",
)
@click.option(
    "--http-logging",
    is_flag=True,
    default=False,
    help="Log Azure SDK HTTP calls (method, URL, status, headers) to stderr.",
)
@click.option(
    "--fail-on-error",
    is_flag=True,
    default=False,
    help="Exit with code 1 when the command reports a failure.",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable rich terminal color output.",
)
@click.pass_context
def cli(ctx, config_file: Optional[str], http_logging: bool, fail_on_error: bool, no_color: bool):
    """azresource: Azure resource management sample."""
    console.configure(no_color=no_color)
    ctx.ensure_object(dict)
    ctx.obj.update(
        config=config_file,
        http_logging=http_logging,
        fail_on_error=fail_on_error,
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit()


@cli.command("list-all")
@click.pass_context
def list_all(ctx) -> None:
    """List every resource in the subscription and print the total count."""
    _print_banner()
    manager = _connect(ctx)
    ok = manager is not None and lister.list_all(manager)
    _finish(ctx, ok)


@cli.command("run")
@click.option("--region", default=None, help="Azure region (default: configured region).")
@click.option(
    "--sku",
    default="Standard_RAGRS",
    show_default=True,
    help="SKU the first storage account is updated to.",
)
@click.option(
    "--wait/--no-wait",
    default=False,
    show_default=True,
    help="Wait for the resource group deletion to complete during cleanup.",
)
@click.option(
    "--summary",
    is_flag=True,
    default=False,
    help="Print a step summary table when the workflow ends.",
)
@click.pass_context
def run(ctx, region: Optional[str], sku: str, wait: bool, summary: bool) -> None:
    """
    Create a resource group and storage accounts, update, list and delete
    them, then delete the resource group.
    """
    _print_banner()
    manager = _connect(ctx)
    if manager is None:
        _finish(ctx, False)

    options = workflow.WorkflowOptions(
        region=region or ctx.obj["settings"].region,
        updated_sku=sku,
        wait_for_group_delete=wait,
    )
    report = workflow.execute(manager, options)
    failed = report.failed_step
    if failed is not None:
        console.err.print(f"[red]Workflow stopped at:[/red] {failed.step}")

    if summary:
        steps = list(report.steps)
        if report.cleanup is not None:
            steps.append(report.cleanup)
        _print_summary_table(steps)

    _finish(ctx, report.succeeded)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
