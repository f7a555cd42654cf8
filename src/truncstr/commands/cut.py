"""Cut command - truncate text to a fixed width."""

import click

from ..config import load_config
from ..utils import truncate


@click.command()
@click.argument("text", nargs=-1)
@click.option("--width", "-w", type=click.IntRange(min=0), default=None,
              help="Maximum width of each line (default: config width)")
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def cut(text, width, config_path):
    """Truncate TEXT arguments, or stdin lines, to a maximum width.

    Lines longer than the width end with a '.' marker.
    """
    cfg = load_config(config_path)
    if width is None:
        width = cfg.width

    if text:
        lines = text
    else:
        lines = (raw.rstrip("\r\n") for raw in click.get_text_stream("stdin"))

    for line in lines:
        line = cfg.prepare_line(line)
        if cfg.skip_empty and not line:
            continue
        click.echo(truncate(line, width))
