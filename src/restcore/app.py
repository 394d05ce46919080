"""Typer application and CLI entry point for restcore.

The ``restcore`` command sends one request and prints the response body::

    restcore get https://example.com/node/1 -P _format=json
    restcore post https://example.com/node --body '{"title": "Hello"}'
    restcore --verbose delete https://example.com/node/1 -H "X-CSRF-Token: abc"

Client settings come from :func:`~restcore.config.resolve_config` (config
file, then ``RESTCORE_*`` environment variables); command-line options win
over both. Any :class:`~restcore.exceptions.RestcoreError` is printed to
stderr and mapped to its exit code.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import typer

from restcore import __version__
from restcore.client import RestClient
from restcore.config import resolve_config
from restcore.exceptions import RestcoreError, ResponseError
from restcore.models import HTTPMethod, Request
from restcore.output import OutputFormat, OutputManager, get_output, set_output

app = typer.Typer(
    name="restcore",
    help="Send REST requests and print the decoded response.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"restcore {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("restcore").setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    config: Optional[str] = typer.Option(
        None, "--config", "-c", help="Path to a JSON or YAML client config."
    ),
    json_output: bool = typer.Option(False, "--json", help="JSON output format."),
    plain_output: bool = typer.Option(False, "--plain", help="Plain text output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable color output."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-essential output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output."),
) -> None:
    """Root callback: set up output and logging, remember shared options."""
    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN
    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


def parse_params(values: Optional[list[str]]) -> dict[str, Any]:
    """Turn ``key=value`` options into query params.

    A key given more than once becomes a list, in the order given.

    Raises:
        typer.BadParameter: If an entry has no ``=``.
    """
    params: dict[str, Any] = {}
    for entry in values or []:
        if "=" not in entry:
            raise typer.BadParameter(f"Expected key=value, got '{entry}'", param_hint="--param")
        key, value = entry.split("=", 1)
        if key in params:
            existing = params[key]
            params[key] = [*existing, value] if isinstance(existing, list) else [existing, value]
        else:
            params[key] = value
    return params


def _build_client(ctx: typer.Context, format_name: Optional[str]) -> RestClient:
    config = resolve_config(ctx.obj.get("config") if ctx.obj else None)
    if format_name is not None:
        config.format = None if format_name.lower() == "none" else format_name
    return RestClient.from_config(config)


def _parse_body(client: RestClient, body: Optional[str]) -> Any:
    """JSON-decode *body* when the client serializes through JSON."""
    if body is None or client.format is None or client.format.name != "json":
        return body
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Body is not valid JSON: {exc}", param_hint="--body") from exc


def _run(
    ctx: typer.Context,
    method: HTTPMethod,
    url: str,
    params: Optional[list[str]],
    headers: Optional[list[str]],
    format_name: Optional[str],
    body: Optional[str] = None,
) -> None:
    output = get_output()
    try:
        client = _build_client(ctx, format_name)
        request = Request(
            method=method,
            url=url,
            params=parse_params(params),
            headers=list(headers or []),
            body=_parse_body(client, body),
        )
        # Before auth, so query-string credentials stay off the console.
        display_url = request.render_url()
        result = client.execute(request)
    except RestcoreError as exc:
        output.error(str(exc))
        if isinstance(exc, ResponseError) and exc.response is not None:
            output.debug(exc.response.raw_headers)
        raise typer.Exit(code=exc.exit_code)

    output.info(f"{method.value} {display_url} -> 200")
    output.format_response(result)


_PARAM_HELP = "Query parameter as key=value. Repeat a key to send an array."
_HEADER_HELP = "Extra header as 'Name: Value'."
_FORMAT_HELP = "Body format: json, pickle or none (raw)."


@app.command()
def get(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Request URL."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-P", help=_PARAM_HELP),
    header: Optional[list[str]] = typer.Option(None, "--header", "-H", help=_HEADER_HELP),
    format_name: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Send a GET request."""
    _run(ctx, HTTPMethod.GET, url, param, header, format_name)


@app.command()
def post(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Request URL."),
    body: Optional[str] = typer.Option(None, "--body", "-d", help="Request body."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-P", help=_PARAM_HELP),
    header: Optional[list[str]] = typer.Option(None, "--header", "-H", help=_HEADER_HELP),
    format_name: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Send a POST request."""
    _run(ctx, HTTPMethod.POST, url, param, header, format_name, body)


@app.command()
def put(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Request URL."),
    body: Optional[str] = typer.Option(None, "--body", "-d", help="Request body."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-P", help=_PARAM_HELP),
    header: Optional[list[str]] = typer.Option(None, "--header", "-H", help=_HEADER_HELP),
    format_name: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Send a PUT request."""
    _run(ctx, HTTPMethod.PUT, url, param, header, format_name, body)


@app.command()
def delete(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Request URL."),
    param: Optional[list[str]] = typer.Option(None, "--param", "-P", help=_PARAM_HELP),
    header: Optional[list[str]] = typer.Option(None, "--header", "-H", help=_HEADER_HELP),
    format_name: Optional[str] = typer.Option(None, "--format", "-f", help=_FORMAT_HELP),
) -> None:
    """Send a DELETE request."""
    _run(ctx, HTTPMethod.DELETE, url, param, header, format_name)


def main() -> None:
    """Console-script entry point."""
    app()
