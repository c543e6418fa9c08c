"""hc CLI - launches the local server that hosts the HTTP client UI."""

import sys

import click
import uvicorn

from .config import get_settings
from .logger import configure_logging, get_logger
from .main import create_app


@click.group(help="HC (HTTP Client) runs a local server with a browser-based GUI for making HTTP requests.")
def main():
    pass


@main.command(help="Start the HTTP client server.")
@click.option("-p", "--port", type=int, default=None, help="Port to run the server on. [default: 8080]")
@click.option("--host", default=None, help="Address to bind. [default: 127.0.0.1]")
def serve(port: int | None, host: str | None):
    overrides = {}
    if port is not None:
        overrides["port"] = port
    if host is not None:
        overrides["host"] = host
    settings = get_settings().model_copy(update=overrides)

    configure_logging(settings.log_level)
    log = get_logger("hc.cli")

    try:
        settings.database_path()
    except OSError as e:
        click.echo(f"Error: failed to initialize database: {e}", err=True)
        sys.exit(1)

    app = create_app(settings, check_origin=True)

    log.info("Starting HC server on port %d", settings.port)
    log.info("Open http://localhost:%d in your browser", settings.port)

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
