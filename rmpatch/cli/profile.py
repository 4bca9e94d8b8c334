"""Profile Typer app factory."""

import typer

from rmpatch.api.profile.cmd_list import cmd_list
from rmpatch.api.profile.cmd_show import cmd_show
from rmpatch.cli._handle_stage_result import _handle_stage_result


def profile() -> typer.Typer:
    """Create and configure the profile Typer app."""
    app = typer.Typer(
        name="profile",
        help="Patch profile operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="list")
    def list_cmd() -> None:
        """List built-in and configured patch profiles."""
        _handle_stage_result(cmd_list)()

    @app.command(name="show")
    def show_cmd(
        name: str = typer.Argument(..., help="Profile name"),
    ) -> None:
        """Show one patch profile and its payload header."""
        _handle_stage_result(cmd_show)(name)

    return app
