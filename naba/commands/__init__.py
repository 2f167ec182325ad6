"""CLI commands."""

from .config import config_group
from .edit import edit, restore
from .generate import diagram, generate, icon, pattern, story

__all__ = [
    "config_group",
    "diagram",
    "edit",
    "generate",
    "icon",
    "pattern",
    "restore",
    "story",
]
