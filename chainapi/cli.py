# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""CLI entry point — resolve method paths and call them from a shell."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any

import click

from .config import ClientConfig
from .exceptions import ChainApiError
from .models import RequestKind
from .namespace import namespace_chain


def _split_method(method: str) -> list[str]:
    """``foo.bar.baz`` or ``/foo/bar/baz`` -> ``["foo", "bar", "baz"]``."""
    separator = "/" if "/" in method else "."
    segments = [s for s in method.split(separator) if s]
    if not segments:
        raise click.BadParameter("method path is empty", param_hint="METHOD")
    return segments


@click.group()
@click.option("--base-url", default=None, help="API base URL (default: $CHAINAPI_BASE_URL)")
@click.option("--token", default=None, help="Bearer token (default: $CHAINAPI_TOKEN)")
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
@click.pass_context
def cli(ctx: click.Context, base_url: str | None, token: str | None, verbose: bool) -> None:
    """chainapi — call remote API methods by namespace path."""
    ctx.ensure_object(dict)
    config = ClientConfig.from_env()
    if base_url:
        config.base_url = base_url
    if token:
        config.api_token = token
    ctx.obj["config"] = config

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command("path")
@click.argument("method")
def path_cmd(method: str) -> None:
    """Print the resolved path of METHOD without calling it."""
    segments = _split_method(method)
    if len(segments) == 1:
        click.echo("/" + segments[0])
        return
    try:
        click.echo(namespace_chain(None, segments[:-1]).resolve_path(segments[-1]))
    except ChainApiError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)


@cli.command("call")
@click.argument("method")
@click.argument("params", required=False, default=None)
@click.option(
    "--method-type", "-X",
    type=click.Choice([k.value for k in RequestKind], case_sensitive=False),
    default=RequestKind.GET.value,
    help="HTTP verb",
)
@click.pass_context
def call_cmd(ctx: click.Context, method: str, params: str | None, method_type: str) -> None:
    """Call remote METHOD (e.g. page.getInfo). PARAMS is a JSON string."""
    from .client import Client

    parsed: Any = {}
    if params:
        try:
            parsed = json.loads(params)
        except json.JSONDecodeError:
            click.echo(f"ERROR: Invalid JSON params: {params}", err=True)
            sys.exit(1)

    segments = _split_method(method)
    try:
        with Client(ctx.obj["config"]) as client:
            result = client.namespace(*segments)(parsed, method_type=method_type.upper())
    except ChainApiError as e:
        click.echo(f"ERROR: {e}", err=True)
        sys.exit(1)
    click.echo(json.dumps(result, indent=2, default=str))


def main() -> None:
    """Entry point for the ``chainapi`` console script."""
    cli(standalone_mode=True)
