"""Command line entry point for the platform MCP servers."""

from __future__ import annotations

import asyncio
import importlib
import sys

import click
import structlog

from servers import PLATFORMS
from shared.config import check_settings, get_settings
from shared.log import configure_logging

logger = structlog.get_logger()

TRANSPORTS = ("stdio", "http")


def _server_module(platform: str):
    """Import ``servers.<platform>.main``."""
    return importlib.import_module(f"servers.{platform}.main")


def run_server(platform: str, transport: str | None = None, port: int | None = None) -> None:
    """Check settings, build the dispatcher and serve until interrupted.

    Exits with status 1 when a required setting is missing or the platform
    client cannot be built.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    main = _server_module(platform)

    missing = check_settings(settings, main.REQUIRED_SETTINGS)
    if missing:
        logger.error("missing_settings", server=platform, missing=missing)
        click.echo(f"Error: {', '.join(missing)} not set. Please set these environment variables.", err=True)
        sys.exit(1)

    warn = getattr(main, "startup_warnings", None)
    if warn is not None:
        for message in warn(settings):
            logger.warning("startup_warning", server=platform, message=message)

    transport = transport or settings.mcp_transport or main.DEFAULT_TRANSPORT
    if transport not in TRANSPORTS:
        logger.error("invalid_transport", server=platform, transport=transport)
        click.echo(f"Error: unknown transport '{transport}' (expected stdio or http).", err=True)
        sys.exit(1)

    try:
        dispatcher = main.create_dispatcher(settings)
    except (OSError, ValueError) as e:
        logger.error("server_init_failed", server=platform, error=str(e))
        click.echo(f"Error: could not start {platform} server: {e}", err=True)
        sys.exit(1)

    try:
        if transport == "http":
            from shared.mcp_http import run_http

            asyncio.run(run_http(dispatcher, port or settings.port))
        else:
            from shared.mcp_stdio import run_stdio

            asyncio.run(run_stdio(dispatcher))
    except KeyboardInterrupt:
        logger.info("server_interrupted", server=platform)


@click.group()
def cli():
    """Platform MCP servers."""
    pass


@cli.command()
@click.argument("platform", type=click.Choice(PLATFORMS))
@click.option("--transport", type=click.Choice(TRANSPORTS), default=None, help="Override MCP_TRANSPORT")
@click.option("--port", type=int, default=None, help="HTTP port (overrides PORT)")
def serve(platform, transport, port):
    """Run the MCP server for PLATFORM."""
    run_server(platform, transport=transport, port=port)


@cli.command()
@click.argument("platform", type=click.Choice(PLATFORMS))
def tools(platform):
    """List the tools PLATFORM exposes."""
    manifest = _server_module(platform).MANIFEST
    click.echo(f"{manifest.platform} ({len(manifest.tools)} tools)")
    for tool in manifest.tools:
        required = ", ".join(tool.required) or "-"
        click.echo(f"  {tool.name:<28} required: {required}")


if __name__ == "__main__":
    cli()
