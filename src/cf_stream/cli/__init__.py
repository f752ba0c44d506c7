"""
CLI application for Cloudflare Stream live inputs.

Credentials come from `CLOUDFLARE_API_TOKEN` (or `CLOUDFLARE_API_KEY` +
`CLOUDFLARE_API_EMAIL`); a `.env` file in the working directory is loaded first.
"""

from __future__ import annotations

import typer
from dotenv import find_dotenv, load_dotenv

from cf_stream.cli.live_inputs import app as live_inputs_app
from cf_stream.cli.utils import console

app = typer.Typer(
    name="cfstream",
    help="Cloudflare Stream CLI - manage live inputs.",
    add_completion=False,
)

app.add_typer(live_inputs_app, name="live-inputs")


@app.callback()
def main() -> None:
    """Cloudflare Stream CLI."""
    load_dotenv(find_dotenv(usecwd=True))


@app.command()
def version() -> None:
    """Show version information."""
    from cf_stream import __version__

    console.print(f"cf-stream v{__version__}")
