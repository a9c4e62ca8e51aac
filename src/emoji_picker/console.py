"""
Shared rich console and verbose logging.

stdout is reserved for the picked character, so diagnostics and verbose
output go to stderr.
"""

from rich.console import Console
from rich.markup import escape

from emoji_picker.errors import UsageError

console = Console(stderr=True)

# Global verbose flag and log file
verbose_mode = False
verbose_log_file = None


def configure_logging(verbose: bool = False, log_file=None):
    """Set verbose mode; a log file implies verbose."""
    global verbose_mode, verbose_log_file
    verbose_mode = bool(verbose)
    verbose_log_file = None
    if log_file:
        try:
            open(log_file, "a", encoding="utf-8").close()
        except OSError as e:
            raise UsageError(
                f"Cannot write log file '{log_file}': {e.strerror or e}"
            )
        verbose_mode = True
        verbose_log_file = str(log_file)


def log_verbose(message: str):
    """Write a verbose message to the log file or the console."""
    if not verbose_mode:
        return

    if verbose_log_file:
        with open(verbose_log_file, "a", encoding="utf-8") as f:
            f.write(f"{message}\n")
    else:
        console.print(f"[dim]{escape(message)}[/dim]", highlight=False)


def print_error(message: str):
    console.print(f"[red]✗ {escape(message)}[/red]", highlight=False)
