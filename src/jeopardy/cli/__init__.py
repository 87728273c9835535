"""CLI commands using Typer."""

import typer

from jeopardy.cli.categories import app as categories_app
from jeopardy.cli.play import play as play_command

app = typer.Typer(name="jeopardy", help="Jeopardy CLI")

app.add_typer(categories_app, name="categories")
app.command("play")(play_command)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Trivia board game backed by the jService API."""
    from jeopardy.logging import setup_logging

    log_level = "DEBUG" if verbose else None
    ctx.obj = {"log_level": log_level}
    setup_logging(log_level)


@app.command()
def version():
    """Show version information."""
    from jeopardy import __version__

    typer.echo(f"Jeopardy v{__version__}")


@app.command()
def serve(
    ctx: typer.Context,
    host: str = typer.Option("0.0.0.0", help="Host to bind to"),
    port: int = typer.Option(8000, help="Port to bind to"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the API server."""
    import uvicorn

    from jeopardy.logging import get_log_config

    uvicorn.run(
        "jeopardy.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=get_log_config((ctx.obj or {}).get("log_level")),
    )


if __name__ == "__main__":
    app()
