"""Main entry point for pillcolor."""

from pillcolor.cli.main import cli

if __name__ == "__main__":
    cli()
