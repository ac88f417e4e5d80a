import logging

import click

from shopclient.infrastructure.bootstrap import api_client
from shopclient.infrastructure.cli.shell_commands import catalog, orders, shell
from shopclient.infrastructure.config import settings


@click.group()
@click.option("--api-url", default=None, help="Shop API base URL (default: $SHOP_API_URL).")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log HTTP traffic.")
@click.pass_context
def cli(ctx: click.Context, api_url: str | None, timeout: float | None, verbose: bool) -> None:
    """Shop client: browse the catalog, fill a cart, place orders."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    api = api_client(api_url, timeout)
    ctx.call_on_close(api.close)
    ctx.obj = api


# Register subcommands
cli.add_command(shell)
cli.add_command(catalog)
cli.add_command(orders)
