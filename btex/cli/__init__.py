"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from btex.api.config.BtexConfig import BtexConfig
    from btex.cli._create_app import _create_app
    from btex.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    try:
        level = BtexConfig.load().log.level
    except ValueError:
        level = "INFO"
    configure_logging(BtexConfig.get_home_dir(), level)

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
