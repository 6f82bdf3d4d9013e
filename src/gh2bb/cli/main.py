"""Main CLI entry point for gh2bb."""

import sys
from pathlib import Path
from typing import Optional

import click
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config.config import Config
from ..exceptions import ConfigurationError
from ..git.runner import CommandRunner
from ..migration.orchestrator import MigrationResult, MirrorMigration
from ..utils.logging import setup_logging

console = Console()

DEFAULT_CONFIG_PATHS = ['gh2bb.yaml', 'gh2bb.yml', '.gh2bb.yaml']


@click.command()
@click.version_option(version=__version__, prog_name='gh2bb')
@click.option(
    '--dest-url',
    required=True,
    help='SSH URL of Bitbucket repo to migrate to (e.g. git@bitbucket.org:workspace/name-of-the-repo.git)',
)
@click.option(
    '--dry-run',
    is_flag=True,
    help='Print commands without executing',
)
@click.option(
    '--config',
    '-c',
    'config_path',
    type=click.Path(exists=True, dir_okay=False),
    help='Path to configuration file',
)
@click.option(
    '--source-host',
    help='SSH host to mirror from (default: github.com)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose logging',
)
def cli(
    dest_url: str,
    dry_run: bool,
    config_path: Optional[str],
    source_host: Optional[str],
    verbose: bool,
) -> None:
    """Migrate a GitHub repo → Bitbucket by mirror-push over SSH."""
    setup_logging('DEBUG' if verbose else 'INFO')

    try:
        config = _load_config(config_path)
        if source_host:
            config = Config._build({**config.model_dump(), 'source_host': source_host})
    except (ConfigurationError, FileNotFoundError) as e:
        logger.error(f'Configuration error: {e}')
        console.print(f'[red]✗[/red] Configuration error: {escape(str(e))}')
        sys.exit(1)

    _setup_logging_with_config(config, verbose)

    console.print(
        Panel.fit(
            '[bold blue]gh2bb[/bold blue]\nMirroring repository...',
            border_style='blue',
        )
    )
    if dry_run:
        console.print(
            '[yellow]Running in dry-run mode - no commands will be executed[/yellow]'
        )

    try:
        migration = MirrorMigration(config, CommandRunner(dry_run=dry_run))
        result = migration.migrate(dest_url)
    except Exception as e:
        logger.error(f'Error: {e}')
        console.print(f'[red]✗[/red] Migration failed: {escape(str(e))}')
        if verbose:
            console.print_exception()
        sys.exit(1)

    if result.dry_run:
        console.print('[green]✓[/green] Dry run completed')
    else:
        console.print('[green]✓[/green] Migration completed')
    _display_migration_summary(result)


def _load_config(config_path: Optional[str]) -> Config:
    """Load configuration from file or environment."""
    if config_path:
        return Config.from_file(config_path)

    for path in DEFAULT_CONFIG_PATHS:
        if Path(path).exists():
            return Config.from_file(path)

    return Config.from_env()


def _setup_logging_with_config(config: Config, verbose: bool) -> None:
    """Setup logging with configuration settings, verbose flag wins."""
    log_level = 'DEBUG' if verbose else config.logging.level
    setup_logging(
        level=log_level,
        log_file=config.logging.file,
        log_format=config.logging.format,
    )


def _display_migration_summary(result: MigrationResult) -> None:
    """Display migration summary results."""
    table = Table(title='Migration Summary')
    table.add_column('Setting', style='cyan')
    table.add_column('Value', style='green')

    table.add_row('Source URL', escape(result.source_url))
    table.add_row('Destination URL', escape(result.destination_url))
    table.add_row('Repository', escape(result.repository_name))
    table.add_row('Mode', 'dry run' if result.dry_run else 'mirror push')
    for index, command in enumerate(result.commands, start=1):
        table.add_row(f'Command {index}', escape(command))

    console.print(table)


def main() -> None:
    """Main entry point for the CLI application."""
    cli(prog_name='gh2bb')


if __name__ == '__main__':
    main()
