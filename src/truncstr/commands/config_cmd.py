"""Config management commands."""

from __future__ import annotations

import sys
from dataclasses import asdict
from io import StringIO
from pathlib import Path

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from ruamel.yaml import YAML, YAMLError

from ..config import (
    KNOWN_KEYS,
    find_config_path,
    get_default_config_yaml,
    load_config,
    save_config_value,
    validate_config,
)

console = Console()

DEFAULT_FILENAME = "truncstr.yaml"


def _resolve_path(config_path):
    if config_path:
        return Path(config_path)
    return find_config_path()


@click.group("config")
def config():
    """Manage truncstr configuration.

    Settings: width, strip_whitespace, skip_empty.
    """


@config.command()
@click.option("--width", "-w", type=click.IntRange(min=0), default=80,
              help="Width to write into the new file (default: 80)")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config file")
@click.option("--filename", default=DEFAULT_FILENAME,
              help="Config filename (default: truncstr.yaml)")
def init(width, force, filename):
    """Write a commented truncstr.yaml template to the current directory."""
    target = Path.cwd() / filename

    if target.exists() and not force:
        console.print(f"[yellow]Refusing to overwrite[/yellow] {target} [dim](pass --force)[/dim]")
        return

    target.write_text(get_default_config_yaml(width), encoding="utf-8")
    console.print(f"[green]Wrote[/green] {target} [dim](width {width})[/dim]")


@config.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def show(config_path):
    """Show the effective configuration (defaults + config file)."""
    cfg = load_config(config_path)

    yaml = YAML()
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump({"truncstr": asdict(cfg)}, buf)

    console.print(Syntax(buf.getvalue(), "yaml", theme="monokai", line_numbers=False))

    found = _resolve_path(config_path)
    if found:
        console.print(f"\n[dim]Config file: {found.resolve()}[/dim]")
    else:
        console.print("\n[dim]No config file found (using defaults)[/dim]")


@config.command()
@click.argument("key", type=click.Choice(sorted(KNOWN_KEYS)))
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def get(key, config_path):
    """Print the effective value of KEY."""
    value = asdict(load_config(config_path))[key]
    click.echo(str(value).lower() if isinstance(value, bool) else value)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def set_value(key, value, config_path):
    """Store VALUE for KEY in the config file.

    width takes a non-negative integer; strip_whitespace and skip_empty
    take true or false. The file is checked before it is rewritten.
    """
    path = _resolve_path(config_path)

    if path is None or not path.exists():
        console.print("[red]No config file found.[/red] [dim]Run 'truncstr config init' first.[/dim]")
        sys.exit(1)

    try:
        save_config_value(path, key, value)
    except ValueError as e:
        console.print(f"[red]Rejected:[/red] {e}")
        sys.exit(1)
    except (OSError, YAMLError) as e:
        console.print(f"[red]Error writing config:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]{key}[/green] = {value} [dim]({path})[/dim]")


@config.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def validate(config_path):
    """Check the config file for unknown keys and bad values."""
    path = _resolve_path(config_path)

    if path is None:
        console.print("[yellow]No config file found, defaults apply.[/yellow]")
        return

    if not path.exists():
        console.print(f"[red]Config file not found:[/red] {path}")
        sys.exit(1)

    errors = validate_config(path)
    if not errors:
        console.print(f"[green]Config is valid:[/green] {path}")
        return

    table = Table(title=f"{len(errors)} error(s) in {path.name}")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Problem", style="red")
    for i, err in enumerate(errors, 1):
        table.add_row(str(i), err)
    console.print(table)
    sys.exit(1)
