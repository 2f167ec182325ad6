"""Write decoded images to disk with collision-free names."""

import os
from datetime import datetime
from pathlib import Path

from loguru import logger

from naba.errors import ApiError, ExitCode


MAX_DEDUP_ATTEMPTS = 999

_EXTENSIONS = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def mime_type_to_ext(mime_type: str) -> str:
    return _EXTENSIONS.get(mime_type, ".png")


def ext_for_format(fmt: str) -> str:
    """Extension for a user-facing format name (``png``, ``jpeg``, ``jpg``)."""
    if fmt.lower() in ("jpeg", "jpg"):
        return ".jpg"
    return ".png"


def with_suffix_number(path: Path, number: int) -> Path:
    """``dir/name.ext`` -> ``dir/name-{number}.ext``."""
    return path.with_name(f"{path.stem}-{number}{path.suffix}")


def generate_filename(command: str, mime_type: str, index: int, now: datetime | None = None) -> str:
    ext = mime_type_to_ext(mime_type)
    ts = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    if index > 0:
        return f"naba-{command}-{ts}-{index + 1}{ext}"
    return f"naba-{command}-{ts}{ext}"


def resolve_output_path(
    mime_type: str,
    output_path: str | Path | None,
    command: str,
    index: int,
    output_dir: str | Path | None = None,
) -> Path:
    """Work out the target path before deduplication."""
    if output_path and Path(output_path).is_dir():
        return Path(output_path) / generate_filename(command, mime_type, index)
    if not output_path:
        name = generate_filename(command, mime_type, index)
        return Path(output_dir) / name if output_dir else Path(name)

    path = Path(output_path)
    if index > 0:
        path = with_suffix_number(path, index + 1)
    return path


def dedup(path: Path) -> Path:
    """
    Return ``path`` if it is free, else the first free ``-1``, ``-2``, ... variant.

    Raises:
        ApiError: with ``ExitCode.FILE_IO`` when every candidate is taken
    """
    if not path.exists():
        return path
    for i in range(1, MAX_DEDUP_ATTEMPTS + 1):
        candidate = with_suffix_number(path, i)
        if not candidate.exists():
            logger.debug(f"{path} exists, writing to {candidate}")
            return candidate
    raise ApiError(
        f"write image: no free file name for {path} after {MAX_DEDUP_ATTEMPTS} attempts",
        ExitCode.FILE_IO,
    )


def write_image(
    data: bytes,
    mime_type: str,
    output_path: str | Path | None,
    command: str,
    index: int = 0,
    output_dir: str | Path | None = None,
) -> str:
    """
    Write one image and return the absolute path actually written.

    Args:
        data: Decoded image bytes
        mime_type: MIME type reported by the API, used for synthesized names
        output_path: Requested file (or directory); empty to synthesize a name
        command: Name of the command that produced the image
        index: Position among the images written by this call; ``index > 0``
            appends ``-{index + 1}`` before the extension
        output_dir: Directory for synthesized names when no path was requested

    Raises:
        ApiError: with ``ExitCode.FILE_IO`` on any filesystem failure
    """
    path = resolve_output_path(mime_type, output_path, command, index, output_dir)

    parent = path.parent
    if str(parent) not in ("", "."):
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ApiError(f"create output directory: {e}", ExitCode.FILE_IO) from e

    path = dedup(path)

    try:
        path.write_bytes(data)
    except OSError as e:
        raise ApiError(f"write image: {e}", ExitCode.FILE_IO) from e

    abs_path = os.path.abspath(path)
    logger.info(f"Wrote {len(data)} bytes to {abs_path}")
    return abs_path
