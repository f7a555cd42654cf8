"""CLI commands for truncstr."""

from .cut import cut
from .preview import preview
from .version import version
from .config_cmd import config

__all__ = [
    "cut",
    "preview",
    "version",
    "config",
]
