"""Prompt enrichment for each command."""


def _join(parts: list[str]) -> str:
    return ". ".join(parts)


def enrich_generate_prompt(prompt: str, style: str = "", variations: list[str] | tuple[str, ...] = ()) -> str:
    parts = [prompt]
    if style:
        parts.append(f"Style: {style}")
    for v in variations:
        parts.append(f"Vary the {v}")
    return _join(parts)


def enrich_edit_prompt(prompt: str) -> str:
    return f"Edit this image: {prompt}"


def enrich_restore_prompt(prompt: str = "") -> str:
    if not prompt:
        return "Restore and enhance this image. Improve quality, fix artifacts, and sharpen details."
    return f"Restore and enhance this image: {prompt}"


def enrich_icon_prompt(prompt: str, style: str, size: int, background: str, corners: str) -> str:
    parts = [
        f"Generate an app icon: {prompt}",
        f"Style: {style}",
        f"Size: {size}x{size} pixels",
        f"Background: {background}",
    ]
    if corners == "rounded":
        parts.append("Rounded corners suitable for app icons")
    else:
        parts.append("Sharp corners")
    parts.append("Clean, centered design suitable for use as an application icon")
    return _join(parts)


def enrich_pattern_prompt(prompt: str, style: str, colors: str, density: str, tile_size: str, repeat: str) -> str:
    parts = [
        f"Generate a seamless {style} pattern: {prompt}",
        f"Color scheme: {colors}",
        f"Element density: {density}",
        f"Tile size: {tile_size}",
    ]
    if repeat == "mirror":
        parts.append("Use mirror tiling for seamless repetition")
    else:
        parts.append("Design for seamless tile repetition")
    return _join(parts)


def enrich_story_prompt(prompt: str, step: int, total_steps: int, style: str, transition: str) -> str:
    """Prompt for frame ``step`` (1-based) of a ``total_steps`` frame story."""
    parts = [f"Generate frame {step} of {total_steps} for a visual story: {prompt}"]

    if style == "consistent":
        parts.append("Maintain consistent visual style, characters, and setting across all frames")
    else:
        parts.append("Allow the visual style to evolve naturally across frames")

    if transition == "dramatic":
        parts.append("Use dramatic transitions between scenes")
    elif transition == "fade":
        parts.append("Use subtle, fading transitions between scenes")
    else:
        parts.append("Use smooth, natural transitions between scenes")

    if step == 1:
        parts.append("This is the opening scene, establish the setting and characters")
    elif step == total_steps:
        parts.append("This is the final scene, bring the story to a conclusion")
    else:
        parts.append(f"This is scene {step}, continue developing the narrative")

    return _join(parts)


def enrich_diagram_prompt(
    prompt: str, diagram_type: str, style: str, layout: str, complexity: str, colors: str
) -> str:
    return _join(
        [
            f"Generate a {diagram_type} diagram: {prompt}",
            f"Visual style: {style}",
            f"Layout: {layout}",
            f"Level of detail: {complexity}",
            f"Color scheme: {colors}",
            "Include clear labels and annotations",
            "Professional quality suitable for documentation or presentations",
        ]
    )
