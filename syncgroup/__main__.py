"""
Main entry point for the syncgroup CLI.
"""

from syncgroup.cli import cli


def main() -> None:
    """Main function for the syncgroup CLI."""
    cli()


if __name__ == "__main__":
    main()
