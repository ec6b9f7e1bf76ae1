"""Terminal message helpers for the personcheck CLI.

One-line status messages with emoji glyphs that fall back to ASCII when
stderr cannot encode them. Messages go to stderr so stdout stays
machine-readable (``personcheck locate`` prints only the class name there).
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
FAILURE = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if `character` can be encoded on stderr.

    The stream is looked up on every call so tests (and redirected streams)
    are honoured.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(pair: tuple[str, str]) -> str:
    """Return the emoji of `pair` if stderr supports it, else its ASCII fallback."""
    emoji, fallback = pair
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  rename``
    """
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr.

    Example:
        ``❌  birthday: Age went from 20 to 20, expected 21.``
    """
    click.secho(f"{glyph(FAILURE)}  {msg}", fg="red", bold=True, err=True)
