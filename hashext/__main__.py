"""
Entry point for the `hashext` command-line interface.

Delegates to the Click CLI in hashext.cli.
"""


def main():
    """Main entry point for the hashext CLI."""
    from .cli import cli

    cli()


if __name__ == "__main__":
    main()
