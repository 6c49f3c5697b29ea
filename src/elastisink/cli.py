# src/elastisink/cli.py
"""Command line for rendering the connector reference and checking config files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import typer

from elastisink import __version__
from elastisink.contracts.errors import (
    ConfigError,
    ConfigurationConflictError,
    ConfigValidationError,
    MissingRequiredFieldError,
    TypeCoercionError,
)
from elastisink.core.loader import ConfigLoadError

__all__ = ["app"]

app = typer.Typer(
    name="elastisink",
    help="elastisink: configuration tooling for the Elasticsearch sink connector.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"elastisink version {__version__}")
        raise typer.Exit()


def _load_dotenv(env_file: Path | None = None) -> bool:
    """Load a .env file so ${VAR} references in config files can resolve.

    Without ``env_file`` the nearest .env above the working directory is used.
    Variables already in the environment win. A missing explicit file exits 1.
    """
    from dotenv import load_dotenv

    if env_file is not None:
        if not env_file.exists():
            typer.secho(
                f"Error: .env file not found: {env_file}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(1)
        return load_dotenv(env_file, override=False)

    return load_dotenv(override=False)


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_dotenv: bool = typer.Option(
        False,
        "--no-dotenv",
        help="Skip loading .env file.",
    ),
    env_file: Path | None = typer.Option(
        None,
        "--env-file",
        help="Path to .env file (skips automatic search).",
        exists=False,  # checked in _load_dotenv
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """elastisink: configuration tooling for the Elasticsearch sink connector."""
    from elastisink.core.logging import configure_logging

    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(json_output=json_logs, level=log_level)

    if not no_dotenv:
        _load_dotenv(env_file=env_file)
    elif env_file is not None:
        typer.secho(
            "Warning: --env-file ignored because --no-dotenv is set.",
            fg=typer.colors.YELLOW,
            err=True,
        )


@app.command()
def docs(
    enriched: bool = typer.Option(
        True,
        "--enriched/--plain",
        help="Group keys by section with display names, or list them flat by importance.",
    ),
) -> None:
    """Print the connector configuration reference as reStructuredText."""
    from elastisink.connector.definitions import CONFIG
    from elastisink.core.docs import render_enriched_rst, render_rst

    typer.echo(render_enriched_rst(CONFIG) if enriched else render_rst(CONFIG))


def _format_validation_error(
    title: str,
    message: str,
    hint: str | None = None,
    details: list[str] | None = None,
) -> None:
    """Print a red rich panel to stderr describing why a config was rejected."""
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(stderr=True)

    content = Text()
    content.append(message, style="white")

    if details:
        content.append("\n\n")
        for detail in details:
            content.append(f"  • {detail}\n", style="dim")

    if hint:
        content.append("\n")
        content.append("Hint: ", style="yellow bold")
        content.append(hint, style="yellow")

    panel = Panel(
        content,
        title=f"[red bold]❌ {title}[/]",
        border_style="red",
        padding=(0, 1),
    )
    console.print(panel)


def _report_config_error(error: ConfigError, config_name: str) -> None:
    if isinstance(error, MissingRequiredFieldError):
        _format_validation_error(
            title="Missing Required Configuration",
            message=str(error),
            details=[error.key],
            hint="Required keys have no default and must be supplied.",
        )
    elif isinstance(error, TypeCoercionError):
        _format_validation_error(
            title="Invalid Value",
            message=str(error),
            details=[error.key],
            hint="Check the value's type and allowed range.",
        )
    elif isinstance(error, ConfigValidationError):
        _format_validation_error(
            title="Invalid Value",
            message=str(error),
            details=[error.key],
            hint="Enumerated values are case-sensitive.",
        )
    elif isinstance(error, ConfigurationConflictError):
        _format_validation_error(
            title="Conflicting Configuration",
            message=str(error),
            details=list(error.keys),
        )
    else:
        _format_validation_error(
            title="Configuration Error",
            message=f"Invalid configuration in {config_name}: {error}",
        )


@app.command()
def validate(
    config: Path = typer.Option(
        ...,
        "--config",
        "-c",
        help="Path to connector config (.yaml, .yml, .json or .properties).",
    ),
    output_format: Literal["console", "json"] = typer.Option(
        "console",
        "--format",
        "-f",
        help="Output format: 'console' (human-readable) or 'json' (structured JSON).",
    ),
) -> None:
    """Validate a connector configuration file.

    Resolves every key against the connector registry, applies the
    cross-field rules, and prints the effective configuration with
    secrets hidden.
    """
    from elastisink.connector.sink_config import ElasticsearchSinkConfig
    from elastisink.core.loader import load_raw_config

    try:
        raw = load_raw_config(config)
    except ConfigLoadError as e:
        error_msg = str(e)
        if "environment variable" in error_msg.lower():
            _format_validation_error(
                title="Missing Environment Variable",
                message=error_msg,
                hint="Set the variable, or use optional syntax: ${VAR:-default}",
            )
        else:
            _format_validation_error(
                title="Cannot Load Configuration",
                message=error_msg,
                hint="Check the path, the file extension and the file syntax.",
            )
        raise typer.Exit(1) from None

    try:
        sink_config = ElasticsearchSinkConfig(raw)
    except ConfigError as e:
        _report_config_error(e, config.name)
        raise typer.Exit(1) from None

    effective = sink_config.redacted()
    if output_format == "json":
        typer.echo(json.dumps(effective, indent=2, sort_keys=True))
        return

    typer.echo("✅ Connector configuration valid!")
    typer.echo(f"  Connection URLs: {', '.join(sink_config.connection_urls)}")
    typer.echo(f"  Write method: {sink_config.write_method}")
    typer.echo(f"  Security protocol: {sink_config.security_protocol}")
    if sink_config.is_basic_proxy_configured():
        typer.echo(f"  Proxy: {sink_config.proxy_host}:{sink_config.proxy_port}")
    typer.echo("")
    for key in sorted(effective):
        typer.echo(f"  {key} = {effective[key]}")


if __name__ == "__main__":
    app()
