"""Rich-based diagnostic output for the sampledigest CLI.

Digest lines go to stdout as plain text; everything else goes to stderr
so output can be piped into other tools.
"""

from rich.console import Console
from rich.markup import escape


class RichOutputFormatter:
    """Terminal formatter for CLI diagnostics."""

    def __init__(self, verbose: bool = False):
        """Initialize Rich output formatter.

        Args:
            verbose: Whether to enable verbose output
        """
        self.verbose = verbose
        self.console = Console(stderr=True, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        """Print an error message."""
        self.console.print(f"[red][ERROR][/red] {escape(message)}", style="red")

    def verbose_info(self, message: str) -> None:
        """Print a verbose info message if verbose mode is enabled."""
        if self.verbose:
            self.console.print(f"[cyan][DEBUG][/cyan] {escape(message)}")
