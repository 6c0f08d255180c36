# plugin_deploy/cli/main.py
"""Main CLI entry point for plugin-deploy"""

import logging
import sys
from pathlib import Path

import click
from rich.logging import RichHandler

from .utils.output import console, format_deploy_result
from ..__version__ import __version__
from ..api import Deployer
from ..constants import APP_NAME, EXIT_FAILURE, LOG_FORMAT


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )
    logging.getLogger().setLevel(level)


@click.command(name=APP_NAME)
@click.argument('mode', required=False)
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              help='Plugin project root (defaults to the current directory)')
@click.option('--env-file', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file holding VAULT_PATH (default: .env)')
@click.option('--manifest', type=click.Path(dir_okay=False, path_type=Path),
              help='Plugin descriptor (default: manifest.json)')
@click.option('--output-dir', type=click.Path(file_okay=False, path_type=Path),
              help='Build output directory (default: dist)')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, mode, project_root, env_file, manifest, output_dir, verbose, debug, quiet):
    """Deploy a plugin build into a vault

    MODE is "dev" to link the vault's plugin directory to the build output
    for live development, or "build" to copy the build output into it.

    The vault location is read from VAULT_PATH in the project's .env file;
    without that file deployment is skipped. The plugin directory name is
    the "id" field of manifest.json.

    Examples:

        # Link dist/ into <vault>/.obsidian/plugins/<id>
        plugin-deploy dev

        # Copy dist/ into the vault, keeping the plugin's data.json
        plugin-deploy build
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    deployer = Deployer(
        project_root=project_root,
        env_file=env_file,
        manifest_file=manifest,
        output_dir=output_dir,
    )
    result = deployer.deploy(mode)

    format_deploy_result(result, quiet=quiet, verbose=verbose or debug)
    ctx.exit(result.exit_code)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    main()
