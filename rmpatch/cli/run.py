"""Run Typer app factory."""

from pathlib import Path

import typer

from rmpatch.api.config.RMPatchConfig import RMPatchConfig
from rmpatch.api.profile.get_profile import get_profile
from rmpatch.api.profile.ProfileError import ProfileError
from rmpatch.api.run.cmd_patch import cmd_patch
from rmpatch.api.run.cmd_status import cmd_status
from rmpatch.api.run.cmd_undo import cmd_undo
from rmpatch.cli._handle_stage_result import _handle_stage_result
from rmpatch.cli.display import get_display

OVERRIDE_WARNING = (
    "This will override {remote_path} on the device. Make sure the device is unlocked "
    "and stays connected until rmpatch has completed."
)


def _confirm(profile_name: str | None, undo: bool) -> None:
    """Show the disclaimers and ask the operator to proceed.

    An unresolvable profile is reported by the command itself.
    """
    display = get_display()
    remote_path = "the device binary"
    try:
        config = RMPatchConfig.load()
        resolved = get_profile(profile_name or config.profile, config.profiles)
    except (ValueError, ProfileError):
        resolved = None
    if resolved is not None:
        remote_path = resolved.remote_path
        if resolved.disclaimer and not undo:
            display.disclaimer(f"Profile {resolved.name}", resolved.disclaimer)
    display.disclaimer("Warning", OVERRIDE_WARNING.format(remote_path=remote_path))

    if not typer.confirm("Proceed?", default=False, err=True):
        typer.echo("Aborted. No changes were made to the device.", err=True)
        raise typer.Exit(1)


def run() -> typer.Typer:
    """Create and configure the run Typer app."""
    app = typer.Typer(
        name="run",
        help="Patch, restore or inspect a device",
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

    @app.command(name="patch")
    def patch_cmd(
        target: str | None = typer.Option(None, "--target", "-t", help="Device address (default: remote.host)"),
        profile: str | None = typer.Option(None, "--profile", "-p", help="Patch profile (default: config profile)"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    ) -> None:
        """Patch the device binary."""
        if not yes:
            _confirm(profile, undo=False)
        _handle_stage_result(cmd_patch)(target, profile)

    @app.command(name="undo")
    def undo_cmd(
        backup: Path = typer.Option(..., "--backup", "-b", help="Backup of the original binary"),
        target: str | None = typer.Option(None, "--target", "-t", help="Device address (default: remote.host)"),
        profile: str | None = typer.Option(None, "--profile", "-p", help="Patch profile (default: config profile)"),
        yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
    ) -> None:
        """Restore the original binary from a backup."""
        if not yes:
            _confirm(profile, undo=True)
        _handle_stage_result(cmd_undo)(backup, target, profile)

    @app.command(name="status")
    def status_cmd(
        target: str | None = typer.Option(None, "--target", "-t", help="Device address (default: remote.host)"),
        profile: str | None = typer.Option(None, "--profile", "-p", help="Patch profile (default: config profile)"),
    ) -> None:
        """Report whether the device runs the unpatched or the patched binary."""
        _handle_stage_result(cmd_status)(target, profile)

    return app
