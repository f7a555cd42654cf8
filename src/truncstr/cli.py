"""truncstr CLI entry point."""

import click

from .commands import cut, preview, version, config


@click.group()
def main():
    """truncstr - fit strings into a fixed display width.

    Text longer than the width is cut and marked with a trailing '.'.
    """


main.add_command(cut)
main.add_command(preview)
main.add_command(version)
main.add_command(config)


if __name__ == "__main__":
    main()
