import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

_logger = logging.getLogger(__name__)


def _create_plain_handler():
    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    return h


def _create_rich_handler():
    console = Console(stderr=True)
    h = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=True,
    )
    h.setFormatter(logging.Formatter("%(message)s"))
    return h


class _PlainFilter(logging.Filter):
    """Strips rich markup so the plain handler prints readable text."""

    def filter(self, record):
        record.msg = Text.from_markup(str(record.msg)).plain
        return True


_handler = _create_rich_handler()
_logger.setLevel(logging.INFO)
_logger.propagate = False
_logger.addHandler(_handler)


def configure(colorize=True, level=None):
    """Swaps the active handler for a rich or a plain one. Log output goes to stderr."""
    global _handler

    _logger.removeHandler(_handler)
    if colorize:
        _handler = _create_rich_handler()
    else:
        _handler = _create_plain_handler()
        _handler.addFilter(_PlainFilter())
    _logger.addHandler(_handler)
    if level is not None:
        set_default_level(level)


def debug(msg):
    _logger.debug(msg)


def info(msg):
    _logger.info(msg)


def success(msg):
    _logger.info(f"[green]✓ {msg}[/green]")


def warning(msg):
    _logger.warning(f"[yellow]{msg}[/yellow]")


def error(msg):
    _logger.error(f"[red]{msg}[/red]")


def set_default_level(level):
    _logger.setLevel(level)


def quote(value) -> str:
    # paths and error messages can contain brackets that rich would read as tags
    return escape(str(value))
