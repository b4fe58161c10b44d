"""CLI for kubedash."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from kubedash import __version__
from kubedash.constants.defaults import LOG_FILE_DEFAULT, LOG_LEVEL_DEFAULT
from kubedash.constants.limits import REFRESH_INTERVAL_MIN

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def configure_logging(level: str, log_file: Path | None) -> None:
    """Send log records to a file so they never draw over the TUI."""
    handlers: list[logging.Handler] = []
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    else:
        handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=_LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "--version")
@click.option("--api-url", help="Dashboard API root (default: from settings)")
@click.option("-n", "--namespace", help="Namespace to show on startup")
@click.option(
    "--auto-refresh/--no-auto-refresh",
    default=None,
    help="Start with periodic refresh on or off",
)
@click.option(
    "-i",
    "--interval",
    type=click.FloatRange(min=REFRESH_INTERVAL_MIN),
    help="Auto-refresh period in seconds",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Settings file (default: ~/.config/kubedash/settings.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=LOG_LEVEL_DEFAULT,
    show_default=True,
    help="Log verbosity",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=LOG_FILE_DEFAULT,
    show_default=True,
    help="Where to write logs",
)
def cli(api_url, namespace, auto_refresh, interval, config_path, log_level, log_file):
    """
    Terminal dashboard for a cluster monitoring REST API.

    \b
    Shows CPU, memory and storage charts, namespace resource counts and
    pod status tallies, refreshed from the API on demand or periodically.

    \b
    Keys:
      r  refresh now        a  toggle auto-refresh
      n  next namespace     h  cluster health check
      q  quit
    """
    configure_logging(log_level, Path(log_file).expanduser() if log_file else None)

    from kubedash.app import DashboardApp

    app = DashboardApp(
        config_path=config_path,
        api_base_url=api_url,
        namespace=namespace,
        auto_refresh=auto_refresh,
        refresh_interval=interval,
    )
    app.run()


def main() -> None:
    """Console script entry point."""
    cli()


__all__ = [
    "cli",
    "configure_logging",
    "main",
]
