"""Image-to-image commands: edit and restore."""

from pathlib import Path

import click

from naba.commands.common import CommandError, RunContext, pass_run, translate_errors
from naba.errors import ExitCode
from naba.prompts import enrich_edit_prompt, enrich_restore_prompt


def _transform(
    run: RunContext, command: str, image_path: str, prompt: str, enriched: str, preview: bool, progress: str
) -> None:
    provider = run.provider()
    if not Path(image_path).exists():
        raise CommandError(f"input file not found: {image_path}", ExitCode.FILE_IO)
    run.progress(progress)

    images = provider.generate_with_image(enriched, image_path)
    for i, image in enumerate(images):
        run.save(image, command, prompt, i, {"input": image_path}, open_preview=preview)

    run.finish()


@click.command()
@click.argument("file", type=click.Path())
@click.argument("prompt")
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def edit(run: RunContext, file: str, prompt: str, preview: bool):
    """Edit the image in FILE following the instructions in PROMPT."""
    _transform(run, "edit", file, prompt, enrich_edit_prompt(prompt), preview, "Editing image...")


@click.command()
@click.argument("file", type=click.Path())
@click.argument("prompt", required=False, default="")
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def restore(run: RunContext, file: str, prompt: str, preview: bool):
    """Restore or enhance the image in FILE, optionally guided by PROMPT."""
    _transform(run, "restore", file, prompt, enrich_restore_prompt(prompt), preview, "Restoring image...")
