"""
CLI entry point for the Headless Admin SDK.

Provides a command-line interface for sending ad-hoc requests to the admin
API using the same request builder as the library.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from headless_admin._version import __version__
from headless_admin.cli.context import CLIContext, pass_context
from headless_admin.client import Client
from headless_admin.config.settings import get_default_config_path, load_config
from headless_admin.endpoint.endpoint import Endpoint
from headless_admin.endpoint.query import SortSpec
from headless_admin.endpoint.request import (
    DeleteEndpointRequest,
    GetEndpointRequest,
    PostEndpointRequest,
    PutEndpointRequest,
)
from headless_admin.exceptions import HeadlessError, InvalidConfigurationError
from headless_admin.logging_config import setup_logging

REQUEST_TYPES = {
    "GET": GetEndpointRequest,
    "POST": PostEndpointRequest,
    "PUT": PutEndpointRequest,
    "DELETE": DeleteEndpointRequest,
}


def parse_arg(value: str) -> Tuple[str, str]:
    """
    Parse a ``key=value`` argument.

    Raises:
        click.BadParameter: If the value has no ``=``
    """
    if "=" not in value:
        raise click.BadParameter(f"Expected key=value, got '{value}'")
    key, _, arg = value.partition("=")
    if not key:
        raise click.BadParameter(f"Argument key cannot be empty in '{value}'")
    return key, arg


def endpoint_for(name: str) -> type:
    """Ad-hoc endpoint definition for a name given on the command line."""
    return type("CommandLineEndpoint", (Endpoint,), {"endpoint_name": name})


@click.group()
@click.option(
    '--config',
    '-c',
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help=f'Path to configuration file (default: {get_default_config_path()})',
)
@click.option(
    '--log-level',
    '-l',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    default=None,
    help='Set logging level (overrides configuration)',
)
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose output',
)
@click.version_option(version=__version__, prog_name='headless-admin')
@pass_context
def cli(ctx: CLIContext, config: Optional[Path], log_level: Optional[str], verbose: bool):
    """
    Headless Admin SDK - client for headless CMS administration APIs.
    """
    ctx.verbose = verbose
    ctx.config_path = str(config) if config else None
    
    try:
        ctx.config = load_config(ctx.config_path)
    except InvalidConfigurationError as e:
        click.echo(f"Error: Invalid configuration: {e}", err=True)
        sys.exit(1)
    
    effective_log_level = log_level.upper() if log_level else ctx.config.logging.level
    log_file = Path(ctx.config.logging.file) if ctx.config.logging.file else None
    setup_logging(
        level=effective_log_level,
        log_file=log_file,
        json_format=ctx.config.logging.format == "json",
    )
    
    if verbose:
        logger = logging.getLogger("headless_admin")
        logger.info(f"Loaded configuration from: {ctx.config_path or 'defaults'}")
        logger.info(f"Log level: {effective_log_level}")


@cli.command()
@click.argument('endpoint')
@click.option(
    '--method',
    '-m',
    type=click.Choice(sorted(REQUEST_TYPES), case_sensitive=False),
    default='GET',
    help='HTTP method',
)
@click.option('--arg', '-a', 'args', multiple=True, help='Argument as key=value (repeatable)')
@click.option('--token', '-t', 'tokens', multiple=True, help='Endpoint token as key=value, e.g. {id}=5')
@click.option('--expand', '-e', multiple=True, help='Field to expand (repeatable)')
@click.option('--sort', '-s', default=None, help='Sort fields, e.g. "id,-name"')
@click.option('--filter', '-f', 'filter_json', default=None, help='Filter as JSON object')
@click.option('--page', type=int, default=None, help='Page number')
@click.option('--per-page', type=int, default=None, help='Rows per page')
@click.option('--server-url', default=None, help='Override the configured server URL')
@pass_context
def request(
    ctx: CLIContext,
    endpoint: str,
    method: str,
    args: Tuple[str, ...],
    tokens: Tuple[str, ...],
    expand: Tuple[str, ...],
    sort: Optional[str],
    filter_json: Optional[str],
    page: Optional[int],
    per_page: Optional[int],
    server_url: Optional[str],
):
    """
    Send a request to ENDPOINT and print the status and JSON body.
    
    Example: headless-admin request "{{%api-admin-user}}" --filter '{"is_deleted": 0}' --sort -id
    """
    try:
        endpoint_request = REQUEST_TYPES[method.upper()](endpoint_for(endpoint))
        endpoint_request.set_args(dict(parse_arg(a) for a in args))
        if tokens:
            endpoint_request.set_tokens(dict(parse_arg(t) for t in tokens))
        if expand:
            endpoint_request.set_expand(expand)
        if sort:
            endpoint_request.set_sort(SortSpec.parse(sort))
        if filter_json:
            try:
                endpoint_request.set_filter(json.loads(filter_json))
            except ValueError as e:
                raise click.BadParameter(f"Filter is not valid JSON: {e}", param_hint='--filter')
        if page is not None:
            endpoint_request.set_page(page)
        if per_page is not None:
            endpoint_request.set_per_page(per_page)
        
        if server_url:
            ctx.config.client.server_url = server_url
        
        with Client.from_config(ctx.config) as client:
            response = endpoint_request.response(client)
            click.echo(f"Status: {response.status_code}")
            if response.total_count is not None:
                click.echo(
                    f"Page {response.current_page}/{response.page_count} "
                    f"({response.total_count} total)"
                )
            click.echo(json.dumps(response.content, indent=2))
        
        if response.is_error:
            sys.exit(1)
    
    except HeadlessError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    cli()
