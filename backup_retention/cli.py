"""Command-line interface for backup retention."""

import json
import logging
import sys
from typing import Optional

import click

from .config.config_manager import ConfigManager
from .core.classifier import RetentionClassifier
from .core.metadata import MetadataLoader
from .core.pipeline import RetentionPipeline
from .core.store import SystemClock
from .errors import RetentionError
from .utils.formatters import format_file_size, format_rfc3339


def setup_logging(level: str, log_file: Optional[str] = None):
    """Set up logging configuration."""
    # Convert string level to logging constant
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f'Invalid log level: {level}')

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Add file handler if specified
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            click.echo(f"Warning: Could not set up file logging: {e}", err=True)


def _load_config_manager(ctx) -> ConfigManager:
    config_manager = ConfigManager(ctx.obj.get('config_path'))
    config_manager.load_config()
    return config_manager


@click.group()
@click.option('--config', '-c', 'config_path',
              help='Path to configuration file')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (overrides logging.level)')
@click.option('--log-file',
              help='Log file path (overrides logging.file)')
@click.pass_context
def cli(ctx, config_path: Optional[str], log_level: Optional[str], log_file: Optional[str]):
    """Backup Retention - Delete aged backups and copy recent ones."""

    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path

    # Logging settings from the config file apply unless overridden
    logging_config = {}
    try:
        logging_config = _load_config_manager(ctx).get_logging_config()
    except (FileNotFoundError, RetentionError):
        # Reported by the subcommand that loads the configuration
        pass

    setup_logging(log_level or logging_config.get('level', 'INFO'),
                  log_file or logging_config.get('file'))


@cli.command()
@click.option('--retention-days', type=click.IntRange(min=0),
              help='Delete backups older than this many days')
@click.option('--metadata', 'metadata_file',
              help='Path to the backup metadata JSON file')
@click.pass_context
def run(ctx, retention_days: Optional[int], metadata_file: Optional[str]):
    """Apply the retention policy and write audit logs."""
    try:
        config_manager = _load_config_manager(ctx)
        config = config_manager.build_retention_config(retention_days, metadata_file)
    except (FileNotFoundError, RetentionError) as e:
        click.echo(f"Error loading configuration: {e}", err=True)
        sys.exit(1)

    click.echo(f"Applying {config.retention_days}-day retention to {config.source_dir}...")

    result = RetentionPipeline(config).run()

    if not result.succeeded:
        click.echo(f"Retention run aborted during {result.failed_stage.value}: {result.error}", err=True)
        sys.exit(1)

    execution = result.execution
    click.echo("\nSummary:")
    click.echo(f"  Records loaded: {len(result.records)}")
    click.echo(f"  Removed: {len(execution.removed)}")
    click.echo(f"  Already absent: {len(execution.already_absent)}")
    click.echo(f"  Copied: {len(execution.copied)}")

    if execution.failure_count:
        click.echo(f"  Failures: {execution.failure_count}")
        for name in execution.remove_failures:
            click.echo(f"    remove: {name}")
        for name in execution.copy_failures:
            click.echo(f"    copy: {name}")

    click.echo(f"  Full log: {config.full_log}")
    click.echo(f"  Copied log: {config.copied_log}")
    click.echo("\nRetention run completed successfully")


@cli.command()
@click.option('--retention-days', type=click.IntRange(min=0),
              help='Delete backups older than this many days')
@click.option('--metadata', 'metadata_file',
              help='Path to the backup metadata JSON file')
@click.option('--output', '-o', type=click.Choice(['text', 'json']), default='text',
              help='Output format')
@click.pass_context
def plan(ctx, retention_days: Optional[int], metadata_file: Optional[str], output: str):
    """Show which backups would be deleted or copied, without touching files."""
    try:
        config = _load_config_manager(ctx).build_retention_config(retention_days, metadata_file)
        records = MetadataLoader(config.metadata_file).load()
    except (FileNotFoundError, RetentionError) as e:
        click.echo(f"Error building plan: {e}", err=True)
        sys.exit(1)

    result = RetentionClassifier(config.retention_days).classify(records, SystemClock().now())

    if output == 'json':
        plan_data = {
            'cutoff': format_rfc3339(result.cutoff),
            'retention_days': config.retention_days,
            'to_copy': [record.name for record in result.to_copy],
            'to_delete': [record.name for record in result.to_delete]
        }
        click.echo(json.dumps(plan_data, indent=2))
        return

    click.echo(f"Cutoff: {format_rfc3339(result.cutoff)} ({config.retention_days} days)")
    click.echo("=" * 50)

    click.echo(f"To delete ({len(result.to_delete)}):")
    for record in result.to_delete:
        click.echo(f"  - {record.name} ({format_file_size(record.size_bytes)}, "
                   f"created {format_rfc3339(record.created_at)})")

    click.echo(f"To copy ({len(result.to_copy)}):")
    for record in result.to_copy:
        click.echo(f"  + {record.name} ({format_file_size(record.size_bytes)}, "
                   f"created {format_rfc3339(record.created_at)})")


@cli.command()
@click.pass_context
def validate_config(ctx):
    """Validate configuration file."""
    try:
        config_manager = _load_config_manager(ctx)
        config = config_manager.build_retention_config()
    except (FileNotFoundError, RetentionError) as e:
        click.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)

    source = config_manager.config_file or "built-in defaults"
    click.echo(f"Configuration loaded successfully ({source})")
    click.echo("\nConfiguration Summary:")
    click.echo(f"   Metadata file: {config.metadata_file}")
    click.echo(f"   Source directory: {config.source_dir}")
    click.echo(f"   Destination directory: {config.destination_dir}")
    click.echo(f"   Full log: {config.full_log}")
    click.echo(f"   Copied log: {config.copied_log}")
    click.echo(f"   Retention days: {config.retention_days}")


def main():
    """Main CLI entry point."""
    cli()


if __name__ == '__main__':
    main()
