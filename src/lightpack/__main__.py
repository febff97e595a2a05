"""Allow running as `python -m lightpack`."""

from lightpack.cli.main import cli

if __name__ == "__main__":
    cli()
