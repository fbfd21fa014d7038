"""CLI interface for siteimprove.

Command-line tool for checking the Siteimprove integration of a site.
"""

import json
import logging
import sys
from pathlib import Path

import click
import httpx

from siteimprove.app import SiteimproveApp, create_app
from siteimprove.config import Config
from siteimprove.domains import default_registry
from siteimprove.entity import ContentEntity, EntityMalformedError
from siteimprove.frontend import ACTIONS, INPUT_URL, get_settings
from siteimprove.routing import RequestContext

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover siteimprove.toml)",
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Siteimprove integration tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@config_option
def request_token(config_path: Path | None) -> None:
    """Request a new token from Siteimprove."""
    config = _load_config(config_path)
    with _create_http_client() as http_client:
        app = _create_app(config, http_client)
        click.echo(f"Requesting token from {app.token_client.request_url}...")
        new_token = app.request_token()

    if new_token is None:
        click.echo(
            click.style("Error: There was an error requesting a new token.", fg="red"),
            err=True,
        )
        sys.exit(1)

    click.echo(click.style("Token received!", fg="green"))
    click.echo(new_token)


@cli.command()
@config_option
def token(config_path: Path | None) -> None:
    """Show the token stored in configuration."""
    config = _load_config(config_path)
    if config.siteimprove.token is None:
        click.echo(
            click.style("Error: no token in configuration", fg="red"),
            err=True,
        )
        click.echo("\nRun 'siteimprove request-token' and add it to siteimprove.toml:")
        click.echo("\n[siteimprove]")
        click.echo('token = "your-token"')
        sys.exit(1)
    click.echo(config.siteimprove.token)


@cli.command()
@config_option
def domains(config_path: Path | None) -> None:
    """List available domain plugins."""
    config = _load_config(config_path)
    active = config.siteimprove.domain_plugin_id
    for definition in default_registry().definitions():
        marker = "*" if definition.id == active else " "
        click.echo(f"{marker} {definition.id}: {definition.label}")


@cli.command()
@click.argument("entity_type")
@click.argument("entity_id")
@click.option("--path", "-p", default=None, help="Canonical path of the entity")
@click.option(
    "--domain-id",
    "-d",
    "domain_ids",
    multiple=True,
    help="Domain the entity is assigned to (repeatable)",
)
@click.option("--route", "-r", default=None, help="Name of the current route")
@click.option(
    "--front-page",
    is_flag=True,
    help="Treat the current request as served on the front page",
)
@click.option(
    "--plugin",
    default=None,
    help="Domain plugin id (overrides config)",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the overlay settings as JSON",
)
@click.option(
    "--action",
    type=click.Choice(ACTIONS),
    default=INPUT_URL,
    help="Overlay action for --json output",
)
@click.option(
    "--auto/--no-auto",
    default=True,
    help="Run the overlay action automatically (for --json output)",
)
@config_option
def urls(
    entity_type: str,
    entity_id: str,
    path: str | None,
    domain_ids: tuple[str, ...],
    route: str | None,
    front_page: bool,
    plugin: str | None,
    as_json: bool,
    action: str,
    auto: bool,
    config_path: Path | None,
) -> None:
    """Print front-end URLs for an entity."""
    config = _load_config(config_path).with_overrides(domain_plugin_id=plugin)
    entity = ContentEntity(
        entity_type=entity_type,
        id=entity_id,
        path=path,
        domain_ids=domain_ids,
    )
    request = RequestContext(route_name=route, is_front_page=front_page)

    with _create_http_client() as http_client:
        app = _create_app(config, http_client)
        try:
            entity_urls = app.resolver(request).get_entity_urls(entity)
        except EntityMalformedError as e:
            click.echo(click.style(f"Error: {e}", fg="red"), err=True)
            sys.exit(1)

    if as_json:
        click.echo(json.dumps(get_settings(entity_urls, action, auto=auto), indent=2))
        return

    if not entity_urls:
        click.echo(click.style("No URLs for this entity.", fg="yellow"), err=True)
        return
    for url in entity_urls:
        click.echo(url)


def _load_config(config_path: Path | None) -> Config:
    """Load configuration or exit with error.

    Raises:
        SystemExit: If configuration is invalid
    """
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


def _create_app(config: Config, http_client: httpx.Client) -> SiteimproveApp:
    """Create the app or exit when the domain plugin is unknown.

    Raises:
        SystemExit: If the configured domain plugin is not registered
    """
    try:
        return create_app(config, http_client)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        click.echo("\nRun 'siteimprove domains' to list available plugins.")
        sys.exit(1)


def _create_http_client() -> httpx.Client:
    return httpx.Client()
