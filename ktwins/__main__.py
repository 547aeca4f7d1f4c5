"""Command line entry point: ``ktwins [NAMESPACE]``."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from ktwins import __version__
from ktwins.app import KtwinsApp
from ktwins.utils.logging_config import configure_logging

app = typer.Typer(
    name="ktwins",
    help="Keyboard-driven Kubernetes dashboard for the terminal.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"ktwins version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    namespace: str = typer.Argument(
        "",
        help="Namespace to start with; empty or 'all' shows every namespace.",
    ),
    context: str | None = typer.Option(
        None,
        "--context",
        help="kubeconfig context passed to every kubectl call.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Settings file (defaults to $KTWINS_CONFIG or ~/.config/ktwins/config.yaml).",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Run the dashboard until quit (q) or interrupted (Ctrl+C)."""
    tui = KtwinsApp(namespace=namespace, context=context, config_path=config)
    configure_logging(tui.settings.log_level, tui.settings.log_file)
    tui.run()


def run() -> None:
    app()


if __name__ == "__main__":
    run()
