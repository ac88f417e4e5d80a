"""CLI commands: the interactive shell and its one-shot shortcuts."""

from __future__ import annotations

import click

from shopclient.application.shop_app import ShopApp
from shopclient.infrastructure.bootstrap import shop_app
from shopclient.infrastructure.config import settings
from shopclient.infrastructure.http.api_client import HttpApiClient
from shopclient.infrastructure.ui.console_view import ConsoleView
from shopclient.infrastructure.ui.wiring import ControlBoard, LoginForm, start

HELP_TEXT = """\
Commands:
  products              reload the catalog
  add <id> [qty]        add a product from the catalog to the cart
  cart                  show the cart
  close-cart            close the cart
  remove <n>            remove line <n> of the cart as last shown
  checkout              place an order for the cart
  orders                show order history (after login)
  close-orders          close the order history
  signup | login        prompt for credentials
  logout                forget the session token
  help                  this text
  quit                  leave the shell"""

# Shell word -> control id
_CONTROL_COMMANDS = {
    "cart": "view-cart-btn",
    "close-cart": "close-cart",
    "checkout": "checkout-btn",
    "orders": "view-orders-btn",
    "close-orders": "close-orders",
    "logout": "logout-btn",
}


def _parse_int(raw: str, what: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid {what} '{raw}'.")


def _read_credentials(form: LoginForm) -> None:
    form.username = click.prompt("Username", default="", show_default=False)
    form.password = click.prompt("Password", default="", show_default=False, hide_input=True)


def run_command(
    line: str,
    app: ShopApp,
    board: ControlBoard,
    view: ConsoleView,
    form: LoginForm,
) -> bool:
    """Execute one shell line. Returns False when the shell should exit."""
    words = line.split()
    if not words:
        return True
    command, args = words[0].lower(), words[1:]

    if command in ("quit", "exit"):
        return False

    if command == "help":
        click.echo(HELP_TEXT)
    elif command == "products":
        app.catalog.load_products()
    elif command == "add":
        if not args:
            raise click.UsageError("add <id> [qty]")
        product_id = _parse_int(args[0], "product id")
        action = view.product_action(product_id)
        if action is None:
            raise click.ClickException(f"Product #{product_id} is not in the catalog.")
        if len(args) > 1:
            app.cart.add_to_cart(product_id, _parse_int(args[1], "quantity"))
        else:
            action()
    elif command == "remove":
        if not args:
            raise click.UsageError("remove <n>")
        line_number = _parse_int(args[0], "line number")
        action = view.remove_action(line_number)
        if action is None:
            raise click.ClickException(f"There is no line {line_number} in the cart.")
        action()
    elif command in ("signup", "login"):
        _read_credentials(form)
        board.activate(f"{command}-btn")
    elif command in _CONTROL_COMMANDS:
        control_id = _CONTROL_COMMANDS[command]
        if not view.is_control_visible(control_id):
            raise click.ClickException(f"'{command}' is not available right now.")
        board.activate(control_id)
    else:
        raise click.UsageError(f"Unknown command '{command}'. Type 'help'.")
    return True


@click.command("shell")
@click.pass_obj
def shell(api: HttpApiClient) -> None:
    """Start an interactive shopping session."""
    view = ConsoleView(currency=settings.CURRENCY_SYMBOL)
    app = shop_app(api, view)
    form = LoginForm()
    board = start(app, form, view)
    click.echo("Type 'help' for commands.")

    while True:
        try:
            line = click.prompt("shop", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break
        try:
            if not run_command(line, app, board, view, form):
                break
        except click.ClickException as exc:
            exc.show()


@click.command("catalog")
@click.pass_obj
def catalog(api: HttpApiClient) -> None:
    """Print the product catalog."""
    view = ConsoleView(currency=settings.CURRENCY_SYMBOL)
    shop_app(api, view).catalog.load_products()


@click.command("orders")
@click.pass_obj
def orders(api: HttpApiClient) -> None:
    """Print the order history."""
    view = ConsoleView(currency=settings.CURRENCY_SYMBOL)
    shop_app(api, view).orders.load_orders()
