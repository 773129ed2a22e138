"""
CLI entry point for the Datastar demo.
"""

import os
from pathlib import Path

import typer
import uvicorn
from dotenv import load_dotenv
from loguru import logger

from pydom_datastar.core.config import get_settings
from pydom_datastar.core.logging import configure_logging
from pydom_datastar.templates.demo import render_demo_page

HERE = os.path.dirname(os.path.abspath(__file__))

app = typer.Typer(
    name="datastar-demo",
    help="Datastar attributes demo - serve the demo page or generate it as static docs",
)


@app.command()
def serve(
    host: str | None = typer.Option(
        None,
        "--host",
        "-h",
        help="Server host (env: DATASTAR_DEMO_HOST). Default: 127.0.0.1",
    ),
    port: int | None = typer.Option(
        None,
        "--port",
        "-p",
        help="Server port (env: DATASTAR_DEMO_PORT). Default: 8080",
    ),
    reload: bool = typer.Option(False, "--reload", "-r", help="Enable auto-reload on code changes"),
    log_level: str = typer.Option("info", "--log-level", "-l", help="Logging level"),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
) -> None:
    """Start the demo server."""
    load_dotenv()

    configure_logging(log_level=log_level, debug=debug)

    # Precedence: CLI args > environment variables > defaults
    settings = get_settings()
    resolved_host = host or settings.host
    resolved_port = port if port is not None else settings.port

    logger.info(f"Demo server running at http://{resolved_host}:{resolved_port}")

    uvicorn.run(
        "pydom_datastar.main:app",
        host=resolved_host,
        port=resolved_port,
        reload=reload or settings.reload,
        reload_dirs=HERE,
        log_level="debug" if debug else log_level,
    )


@app.command()
def generate(
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (env: DATASTAR_DEMO_DOCS_DIR). Default: docs/index.html",
    ),
    log_level: str = typer.Option("info", "--log-level", "-l", help="Logging level"),
) -> None:
    """Generate the demo page as a static HTML file and exit."""
    load_dotenv()

    configure_logging(log_level=log_level)

    target = output or get_settings().docs_index
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_demo_page(), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write {target}: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Generated {target}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
