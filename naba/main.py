"""Command-line entry point."""

import sys

import click
from loguru import logger

from naba import __version__
from naba.commands.common import RunContext, RunOptions
from naba.commands.config import config_group
from naba.commands.edit import edit, restore
from naba.commands.generate import diagram, generate, icon, pattern, story
from naba.config import Settings


LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str) -> None:
    """Send log records to stderr, keeping stdout for results."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--json", "json_output", is_flag=True, help="Output structured JSON (default when stdout is not a TTY)")
@click.option("-o", "--output", default=None, help="Output file path or directory")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output")
@click.option("-m", "--model", default=None, help="Override Gemini model")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, output: str | None, quiet: bool, model: str | None, verbose: bool):
    """Generate, edit, and transform images using Google Gemini."""
    settings = Settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    if not json_output and not sys.stdout.isatty():
        json_output = True

    options = RunOptions(json_output=json_output, output=output, quiet=quiet, model=model, verbose=verbose)
    logger.debug(f"naba v{__version__} (json: {options.json_output}, output: {options.output or 'auto'})")
    ctx.obj = RunContext(options, settings)


@cli.command()
def version():
    """Show version information."""
    click.echo(f"naba {__version__}")


cli.add_command(generate)
cli.add_command(edit)
cli.add_command(restore)
cli.add_command(icon)
cli.add_command(pattern)
cli.add_command(story)
cli.add_command(diagram)
cli.add_command(config_group)


def run():
    """Run the CLI."""
    cli(prog_name="naba")


if __name__ == "__main__":
    run()
