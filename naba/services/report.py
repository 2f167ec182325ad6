"""Result reporting and system preview."""

import json
import subprocess
import sys

import click
from loguru import logger

from naba.models.response import Result


def _as_dict(result: Result) -> dict:
    data = result.model_dump()
    if not data["params"]:
        del data["params"]
    return data


def dump_results(results: list[Result], always_list: bool = False) -> str:
    """One result renders as a JSON object, several (or ``always_list``) as an array."""
    if len(results) == 1 and not always_list:
        return json.dumps(_as_dict(results[0]), indent=2)
    return json.dumps([_as_dict(r) for r in results], indent=2)


def print_results(results: list[Result], always_list: bool = False) -> None:
    click.echo(dump_results(results, always_list))


def preview_command(platform: str = sys.platform) -> list[str]:
    if platform == "darwin":
        return ["open"]
    if platform.startswith("win"):
        return ["cmd", "/c", "start", ""]
    return ["xdg-open"]


def preview(path: str) -> None:
    """Open ``path`` in the system viewer without waiting for it."""
    try:
        subprocess.Popen(
            [*preview_command(), path],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        logger.warning(f"Could not open preview for {path}: {e}")
