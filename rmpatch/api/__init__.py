"""API module for rmpatch commands.

Command functions (``cmd_*``) return a StageResult and are shared by the CLI
and by tests; they never raise for expected failures.
"""

__all__ = []
