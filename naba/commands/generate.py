"""Text-to-image commands: generate, icon, pattern, story, diagram."""

from pathlib import Path

import click

from naba.commands.common import RunContext, pass_run, translate_errors
from naba.prompts import (
    enrich_diagram_prompt,
    enrich_generate_prompt,
    enrich_icon_prompt,
    enrich_pattern_prompt,
    enrich_story_prompt,
)
from naba.services.writer import ext_for_format


@click.command()
@click.argument("prompt")
@click.option("-s", "--style", default="", help="Art style (photorealistic, watercolor, sketch, pixel-art, anime, ...)")
@click.option("-n", "--count", default=1, type=click.IntRange(1, 8), help="Number of variations (1-8)")
@click.option(
    "-V",
    "--variation",
    "variations",
    multiple=True,
    help="Variation type (lighting, angle, color-palette, composition, mood, season, time-of-day)",
)
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def generate(run: RunContext, prompt: str, style: str, count: int, variations: tuple[str, ...], preview: bool):
    """Generate an image from a text PROMPT."""
    provider = run.provider()
    enriched = enrich_generate_prompt(prompt, style, variations)

    for i in range(count):
        if count > 1:
            run.progress(f"Generating image {i + 1}/{count}...")
        else:
            run.progress("Generating image...")

        images = provider.generate(enriched)
        for j, image in enumerate(images):
            idx = i * len(images) + j
            params = {}
            if style:
                params["style"] = style
            if variations:
                params["variations"] = list(variations)
            if count > 1:
                params["index"] = idx + 1
                params["count"] = count
            run.save(image, "generate", prompt, idx, params, open_preview=preview)

    run.finish()


@click.command()
@click.argument("prompt")
@click.option("--style", default="modern", help="Visual style (flat, skeuomorphic, minimal, modern)")
@click.option("--size", "sizes", multiple=True, type=int, default=(256,), show_default=True, help="Icon size in px (repeatable)")
@click.option("--format", "fmt", default="png", type=click.Choice(["png", "jpeg"]), help="Output format")
@click.option("--background", default="transparent", help="Background (transparent, white, black, or color name)")
@click.option("--corners", default="rounded", type=click.Choice(["rounded", "sharp"]), help="Corner style")
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def icon(
    run: RunContext,
    prompt: str,
    style: str,
    sizes: tuple[int, ...],
    fmt: str,
    background: str,
    corners: str,
    preview: bool,
):
    """Generate app icons from PROMPT, one request per size."""
    provider = run.provider()

    for size in sizes:
        enriched = enrich_icon_prompt(prompt, style, size, background, corners)
        run.progress(f"Generating {size}x{size} icon...")

        images = provider.generate(enriched)
        for j, image in enumerate(images):
            out_path = run.options.output
            if not out_path:
                out_path = f"icon-{size}{ext_for_format(fmt)}"
            elif Path(out_path).is_dir():
                out_path = str(Path(out_path) / f"icon-{size}{ext_for_format(fmt)}")
            elif len(sizes) > 1:
                p = Path(out_path)
                out_path = str(p.with_name(f"{p.stem}-{size}{p.suffix}"))

            params = {
                "size": size,
                "style": style,
                "format": fmt,
                "background": background,
                "corners": corners,
            }
            run.save(image, "icon", prompt, j, params, output_path=out_path, open_preview=preview)

    run.finish()


@click.command()
@click.argument("prompt")
@click.option("--style", default="abstract", help="Pattern style (geometric, organic, abstract, floral, tech)")
@click.option("--colors", default="colorful", help="Color scheme (mono, duotone, colorful)")
@click.option("--density", default="medium", type=click.Choice(["sparse", "medium", "dense"]), help="Element density")
@click.option("--tile-size", default="256x256", help="Pattern tile size")
@click.option("--repeat", default="tile", type=click.Choice(["tile", "mirror"]), help="Tiling method")
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def pattern(
    run: RunContext,
    prompt: str,
    style: str,
    colors: str,
    density: str,
    tile_size: str,
    repeat: str,
    preview: bool,
):
    """Generate a seamless pattern or texture from PROMPT."""
    provider = run.provider()
    enriched = enrich_pattern_prompt(prompt, style, colors, density, tile_size, repeat)
    run.progress("Generating pattern...")

    images = provider.generate(enriched)
    params = {
        "style": style,
        "colors": colors,
        "density": density,
        "tile_size": tile_size,
        "repeat": repeat,
    }
    for i, image in enumerate(images):
        run.save(image, "pattern", prompt, i, params, open_preview=preview)

    run.finish()


@click.command()
@click.argument("prompt")
@click.option("--steps", default=4, type=click.IntRange(2, 8), help="Number of frames (2-8)")
@click.option("--style", default="consistent", type=click.Choice(["consistent", "evolving"]), help="Visual consistency")
@click.option(
    "--transition",
    default="smooth",
    type=click.Choice(["smooth", "dramatic", "fade"]),
    help="Transition style",
)
@click.option("--layout", default="separate", help="Output layout (separate, grid, comic)")
@click.option("--preview", is_flag=True, help="Open results in system viewer")
@pass_run
@translate_errors
def story(run: RunContext, prompt: str, steps: int, style: str, transition: str, layout: str, preview: bool):
    """Generate a sequence of STEPS frames telling the story in PROMPT."""
    provider = run.provider()

    for step in range(1, steps + 1):
        enriched = enrich_story_prompt(prompt, step, steps, style, transition)
        run.progress(f"Generating frame {step}/{steps}...")

        images = provider.generate(enriched)
        for image in images:
            params = {
                "step": step,
                "total": steps,
                "style": style,
                "transition": transition,
                "layout": layout,
            }
            run.save(image, "story", prompt, step - 1, params, open_preview=preview)

    run.finish(always_list=True)


@click.command()
@click.argument("prompt")
@click.option(
    "--type",
    "diagram_type",
    default="flowchart",
    help="Diagram type (flowchart, architecture, network, database, wireframe, mindmap, sequence)",
)
@click.option("--style", default="professional", help="Visual style (professional, clean, hand-drawn, technical)")
@click.option("--layout", default="hierarchical", help="Layout (horizontal, vertical, hierarchical, circular)")
@click.option(
    "--complexity",
    default="detailed",
    type=click.Choice(["simple", "detailed", "comprehensive"]),
    help="Detail level",
)
@click.option("--colors", default="accent", help="Color scheme (mono, accent, categorical)")
@click.option("--preview", is_flag=True, help="Open result in system viewer")
@pass_run
@translate_errors
def diagram(
    run: RunContext,
    prompt: str,
    diagram_type: str,
    style: str,
    layout: str,
    complexity: str,
    colors: str,
    preview: bool,
):
    """Generate a technical diagram from PROMPT."""
    provider = run.provider()
    enriched = enrich_diagram_prompt(prompt, diagram_type, style, layout, complexity, colors)
    run.progress("Generating diagram...")

    images = provider.generate(enriched)
    params = {
        "type": diagram_type,
        "style": style,
        "layout": layout,
        "complexity": complexity,
        "colors": colors,
    }
    for i, image in enumerate(images):
        run.save(image, "diagram", prompt, i, params, open_preview=preview)

    run.finish()
