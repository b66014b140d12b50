import functools
import logging
import sys

from rich.console import Console

logger = logging.getLogger("hostinfo")
console = Console(stderr=True)


class HostInfoError(Exception):
    """Base class for errors raised by hostinfo."""


class ParseError(HostInfoError):
    """A release file exists but its contents could not be interpreted."""

    def __init__(self, path, reason="no KEY=value lines"):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot parse {self.path}: {reason}")


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            logger.error(f"{func.__name__} ▶ {e}")
            console.print(f"[bold red][!] {func.__name__} failed:[/] {e}")
            sys.exit(1)

    return wrapper
