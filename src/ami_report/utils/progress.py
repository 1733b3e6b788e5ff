"""Progress spinner shown on stderr while the report is gathered."""

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console


@contextmanager
def spinner(message: str, enabled: bool = True, console: Optional[Console] = None) -> Iterator[None]:
    """Show a transient spinner while the block runs.

    Nothing is drawn when disabled or when stderr is not a terminal, so
    piped JSON output stays clean.
    """
    console = console or Console(stderr=True)
    if not enabled or not console.is_terminal:
        yield
        return

    with console.status(message, spinner="dots"):
        yield
