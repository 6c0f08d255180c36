# plugin_deploy/cli/utils/output.py
"""Output formatting utilities"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from ...constants import (
    MSG_COPY_DONE,
    MSG_LINK_CREATED,
    MSG_LINK_REUSED,
)
from ...models import DeployResult, DeploymentMode, NoopReason, OperationStatus

console = Console()


def clickable_path(path: Path) -> str:
    """Render a path as a terminal hyperlink to the local file"""
    path = Path(path)
    uri = path.absolute().as_uri()
    return f"[link={uri}]{escape(str(path))}[/link]"


def format_deploy_result(result: DeployResult,
                         quiet: bool = False,
                         verbose: bool = False) -> None:
    """Format and display deploy operation result"""
    if result.status == OperationStatus.FAILED:
        print_error(result.error or "Deployment failed")
        return

    if quiet:
        return

    if result.noop_reason in (NoopReason.ENV_MISSING, NoopReason.IDENTICAL_PATH):
        print_warning(result.message)
        return

    print_info(f"Deploying in {result.mode.value} mode")
    print_info(f"Source: {clickable_path(result.output_dir)}")
    print_info(f"Target: {clickable_path(result.target_path)}")

    for warning in result.warnings:
        print_warning(warning)

    source = result.output_dir.name
    if result.noop_reason == NoopReason.LINK_REUSED:
        print_success(MSG_LINK_REUSED.format(source=source, plugin_id=result.plugin_id))
        return

    if result.mode == DeploymentMode.LINK:
        print_success(MSG_LINK_CREATED.format(source=source, plugin_id=result.plugin_id))
    else:
        print_success(MSG_COPY_DONE.format(
            source=source,
            plugin_id=result.plugin_id,
            count=len(result.entries),
            names=", ".join(result.entries) or "empty",
        ))

    if result.plan and result.plan.preserved_file:
        print_info(f"Preserved user data: {escape(str(result.plan.preserved_file))}")

    print_success("Deployment complete")

    if verbose and result.duration is not None:
        console.print(f"[dim]Duration: {result.duration:.2f}s[/dim]")


def print_error(message: str, error: Exception = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message (may contain markup)"""
    console.print(f"[blue]Info:[/blue] {message}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]Success:[/green] {escape(message)}")
