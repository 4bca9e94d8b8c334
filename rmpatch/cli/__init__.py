"""CLI - main entry point."""

import sys


def _configure_logging() -> None:
    from rmpatch.api.config.RMPatchConfig import RMPatchConfig
    from rmpatch.utils.logger import configure_logging

    try:
        log = RMPatchConfig.load().log
    except ValueError:
        # Commands report the broken config themselves
        configure_logging()
        return
    configure_logging(level=log.level, file_name=log.file, max_bytes=log.max_bytes, backup_count=log.backup_count)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from rmpatch.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from rmpatch.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"rmpatch {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    _configure_logging()

    app = _create_app()
    try:
        # Non-standalone so usage errors map to exit code 1; exit code 2 means FetchError
        code = app(argv, standalone_mode=False)
        return code if isinstance(code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else (0 if e.code is None else 1)
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        typer.echo("Aborted. No changes were made to the device.", err=True)
        return 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
