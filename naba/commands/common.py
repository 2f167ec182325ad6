"""Per-invocation state shared by the generating commands."""

import functools
import time

import click
from loguru import logger
from pydantic import BaseModel

from naba.config import ConfigFile, Settings, load_config_file, resolve_api_key, resolve_model
from naba.errors import ApiError, ConfigError, ExitCode
from naba.models.response import ImageResult, Result
from naba.services.provider import GeminiImageProvider
from naba.services.report import preview, print_results
from naba.services.writer import write_image


MISSING_KEY_MESSAGE = (
    "GEMINI_API_KEY not set.\n\n"
    "Set it with: export GEMINI_API_KEY=<your-key>\n"
    "Or run: naba config set api_key <your-key>"
)


class RunOptions(BaseModel):
    """Global options of one CLI invocation."""

    json_output: bool = False
    output: str | None = None
    quiet: bool = False
    model: str | None = None
    verbose: bool = False


class CommandError(click.ClickException):
    """Click error that exits with one of the :class:`ExitCode` values."""

    def __init__(self, message: str, exit_code: int = ExitCode.GENERAL):
        super().__init__(message)
        self.exit_code = int(exit_code)


def translate_errors(f):
    """Turn :class:`ApiError` raised by a command into a :class:`CommandError`."""

    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ApiError as e:
            raise CommandError(e.message, e.exit_code) from e

    return wrapper


class RunContext:
    """Options, settings and collected results for one invocation."""

    def __init__(self, options: RunOptions, settings: Settings):
        self.options = options
        self.settings = settings
        self.start = time.monotonic()
        self.results: list[Result] = []
        self._config: ConfigFile | None = None

    @property
    def config(self) -> ConfigFile:
        if self._config is None:
            try:
                self._config = load_config_file(self.settings)
            except ConfigError as e:
                logger.warning(f"Ignoring unreadable config: {e}")
                self._config = ConfigFile()
        return self._config

    def provider(self) -> GeminiImageProvider:
        api_key = resolve_api_key(self.settings)
        if not api_key:
            raise CommandError(MISSING_KEY_MESSAGE, ExitCode.AUTH)
        model = resolve_model(self.settings, self.options.model)
        return GeminiImageProvider.from_settings(self.settings, api_key, model)

    def progress(self, message: str) -> None:
        if not self.options.quiet:
            click.echo(message, err=True)

    def save(
        self,
        image: ImageResult,
        command: str,
        prompt: str,
        index: int,
        params: dict | None = None,
        output_path: str | None = None,
        open_preview: bool = False,
    ) -> Result:
        """Write one image and record its result."""
        path = write_image(
            image.data,
            image.mime_type,
            output_path if output_path is not None else self.options.output,
            command,
            index,
            output_dir=self.config.default_output_dir or None,
        )
        result = Result.new(path, command, prompt, self.start)
        result.params = params or None
        self.results.append(result)

        if not self.options.json_output and not self.options.quiet:
            click.echo(f"Saved: {path}")
        if open_preview:
            preview(path)
        return result

    def finish(self, always_list: bool = False) -> None:
        if self.options.json_output:
            print_results(self.results, always_list=always_list)


pass_run = click.make_pass_decorator(RunContext)
