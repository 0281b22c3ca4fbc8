"""Allow running as ``python -m ssvv_cli``."""

from ssvv_cli.cli import cli

if __name__ == "__main__":
    cli()
