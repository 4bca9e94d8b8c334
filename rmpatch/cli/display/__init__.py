"""Display implementations for the CLI."""

from .CLIDisplay import CLIDisplay
from .Display import Display


def get_display() -> CLIDisplay:
    """Display used by all CLI commands."""
    return CLIDisplay()


__all__ = ["CLIDisplay", "Display", "get_display"]
