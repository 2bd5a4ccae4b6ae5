import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.traceback import Traceback

# Progress lines go to stdout, warnings and tracebacks to stderr.
out = Console()
err = Console(stderr=True)


def configure(no_color: bool = False) -> None:
    global out, err
    out = Console(no_color=no_color)
    err = Console(stderr=True, no_color=no_color)


def say(message: str) -> None:
    # messages carry remote names and ids; print them literally
    out.print(message, soft_wrap=True, highlight=False, markup=False)


def report_exception(exc: BaseException) -> None:
    """Print the error message and its full traceback to stderr."""
    err.print(f"[red]Error:[/red] {escape(str(exc) or type(exc).__name__)}", soft_wrap=True)
    err.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))


def enable_http_logging(level: int = logging.INFO) -> None:
    """
    Route the Azure SDK's request/response logging through rich.

    At INFO the SDK's HTTP logging policy reports method, URL, status and
    headers of every call; bodies are never logged.
    """
    logger = logging.getLogger("azure")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err, show_path=False))
