"""CLI commands for bbcheckout."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from bbcheckout.endpoints import endpoint_for
from bbcheckout.errors import CheckoutError
from bbcheckout.models.checkout import GitCheckoutConfiguration, MercurialCheckoutConfiguration
from bbcheckout.models.repository import BackendType, SourceContext, TransportProtocol
from bbcheckout.request import CheckoutRequest
from bbcheckout.resolver import resolve_repository_uri

console = Console()

SERVER_URL_ENV = "BBCHECKOUT_SERVER_URL"


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """bbcheckout - Checkout configurations for Bitbucket repositories."""
    setup_logging(verbose)


@main.command("resolve-uri")
@click.argument("owner")
@click.argument("repository")
@click.option(
    "--backend", "-b", type=click.Choice([b.value for b in BackendType]), default="git",
    help="Version control backend",
)
@click.option(
    "--protocol", "-p", type=click.Choice([p.value for p in TransportProtocol]), default="https",
    help="Clone protocol",
)
@click.option("--server-url", "-s", envvar=SERVER_URL_ENV, default=None,
              help="Bitbucket Server root URL (blank for Bitbucket Cloud)")
@click.option("--ssh-port", type=int, default=None, help="SSH port of a Bitbucket Server")
@click.pass_context
def resolve_uri(
    ctx: click.Context,
    owner: str,
    repository: str,
    backend: str,
    protocol: str,
    server_url: str | None,
    ssh_port: int | None,
) -> None:
    """Print the default clone URL of a repository."""
    try:
        context = SourceContext.for_server_url(server_url, owner, repository)
        url = resolve_repository_uri(
            owner,
            repository,
            BackendType(backend),
            context.deployment_model,
            context.server_root_url,
            TransportProtocol(protocol),
            ssh_port,
        )
    except (CheckoutError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        ctx.exit(1)
    console.print(url, highlight=False, soft_wrap=True)


@main.command()
@click.argument("owner")
@click.argument("repository")
@click.option("--server-url", "-s", envvar=SERVER_URL_ENV, default=None,
              help="Bitbucket Server root URL (blank for Bitbucket Cloud)")
def browse(owner: str, repository: str, server_url: str | None) -> None:
    """Print the web URL of a repository."""
    console.print(
        endpoint_for(server_url).repository_url(owner, repository),
        highlight=False,
        soft_wrap=True,
    )


@main.command()
@click.argument("request_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of tables")
@click.pass_context
def build(ctx: click.Context, request_file: Path, as_json: bool) -> None:
    """Compute the checkout configuration described by a request file."""
    try:
        request = CheckoutRequest.from_yaml(request_file)
        config = request.build()
    except ValidationError as e:
        console.print(f"[red]Invalid request {request_file}:[/red]\n{e}")
        ctx.exit(1)
    except (CheckoutError, ValueError) as e:
        console.print(f"[red]{e}[/red]")
        ctx.exit(1)

    if as_json:
        click.echo(config.model_dump_json(indent=2))
        return

    if isinstance(config, GitCheckoutConfiguration):
        _print_git(config)
    else:
        _print_mercurial(config)


def _print_git(config: GitCheckoutConfiguration) -> None:
    table = Table(title="Remotes")
    table.add_column("Name", style="cyan")
    table.add_column("URL", style="green")
    table.add_column("Refspec")
    table.add_column("Credential", style="dim")

    for remote in config.remotes:
        table.add_row(remote.name, remote.url, remote.refspec, remote.credential_id or "-")

    console.print(table)
    if config.pin:
        console.print(f"Pin: {config.pin.branch_name} @ {config.pin.commit_hash}")
    if config.merge:
        base = config.merge.base_hash or "[dim]unpinned[/dim]"
        console.print(f"Merge onto: {config.merge.base_remote_ref} @ {base}")
    console.print(f"Browser: {config.browser_url}", highlight=False)


def _print_mercurial(config: MercurialCheckoutConfiguration) -> None:
    console.print(f"Source: {config.source}", highlight=False)
    console.print(f"Revision: {config.pin.kind.value} {config.pin.value}")
    if config.credential_id:
        console.print(f"Credential: {config.credential_id}")
    console.print(f"Browser: {config.browser_url}", highlight=False)


if __name__ == "__main__":
    main()
