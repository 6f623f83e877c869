"""
Terminal text decoration.

Pure functions from text (and a style name) to ANSI-decorated text. Nothing here
writes to the terminal; callers hand the result to ``typer.echo`` which strips the
escape codes when stdout is not a TTY.
"""

import typer

STYLES: dict[str, dict[str, object]] = {
    "red": {"fg": "red"},
    "green": {"fg": "green"},
    "yellow": {"fg": "yellow"},
    "bold": {"bold": True},
    "underline": {"underline": True},
}

SEPARATOR = "--------------------"


def colorize(text: str, style: str) -> str:
    """Wrap ``text`` in the escape codes for ``style``.

    Args:
        text: Text to decorate
        style: One of ``red``, ``green``, ``yellow``, ``bold``, ``underline``

    Returns:
        str: Decorated text terminated by a reset code

    Raises:
        ValueError: If the style is unknown
    """
    try:
        options = STYLES[style]
    except KeyError:
        raise ValueError(f"Unknown style: {style}") from None
    return typer.style(text, **options)


def red(text: str) -> str:
    return colorize(text, "red")


def green(text: str) -> str:
    return colorize(text, "green")


def yellow(text: str) -> str:
    return colorize(text, "yellow")


def bold(text: str) -> str:
    return colorize(text, "bold")


def underline(text: str) -> str:
    return colorize(text, "underline")


def error_header() -> str:
    return red(bold("Error!"))


def error_text(description: str, value: str | None = None) -> str:
    """Build the two-line error block shown before the process exits."""
    body = yellow(description)
    if value:
        body = f"{body} {yellow(bold(value))}"
    return f"{error_header()}\n{body}\n"


def summary_line(verb: str, count: int) -> str:
    """``Added 3 files.`` with the count in bold."""
    return f"{verb} {bold(str(count))} files."
