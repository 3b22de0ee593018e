# cli.py
import asyncio
import logging
import sys
from typing import Any, Awaitable, Callable, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn

from catalog_sdk.client import CatalogClient
from catalog_sdk.commands import (
    CreateProduct, DeleteProduct, GetProduct, ListProducts, Operation,
    UsageError, interpret,
)
from catalog_sdk.formatting import format_product, format_product_list
from catalog_sdk.results import Failure

logger = logging.getLogger("catalog_sdk")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

HELP_TEXT = """
PRODUCT MANAGEMENT SYSTEM - FakeStore API

AVAILABLE COMMANDS:

   List all products:
   catalog GET products
   catalog GET productos

   Get a single product:
   catalog GET products/<productId>
   catalog GET productos/<productId>
   Example: catalog GET productos/15

   Create a new product:
   catalog POST products <title> <price> <category> [description]
   catalog POST productos <title> <price> <category> [description]
   Example: catalog POST productos "T-Shirt Rex" 300 "remeras"

   Delete a product:
   catalog DELETE products/<productId>
   catalog DELETE productos/<productId>
   Example: catalog DELETE productos/7

NOTES:
   • Prices must be valid numbers greater than 0
   • Categories can be: electronics, jewelery, men's clothing, women's clothing
   • The description is optional for new products
   • Both 'products' and 'productos' are accepted
"""


# ---------------------------
# Output helpers
# ---------------------------
def configure_logging(err_console: Console, level: int = logging.WARNING) -> None:
    """Send client logs to stderr through rich."""
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=err_console, show_time=False, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def show_help(console: Console) -> None:
    console.out(HELP_TEXT, highlight=False)


def show_error(err_console: Console, message: str) -> None:
    err_console.print(message, style="bold red", markup=False, highlight=False, soft_wrap=True)


def show_usage_error(error: UsageError, console: Console, err_console: Console) -> None:
    if error.message:
        show_error(err_console, error.message)
    if error.hint:
        err_console.print(error.hint, style="yellow", markup=False, highlight=False, soft_wrap=True)
    if error.show_help:
        # a bare invocation prints help to stdout, help after an error goes to stderr
        show_help(console if not error.message else err_console)


async def with_spinner(err_console: Console, description: str, call: Callable[[], Awaitable[Any]]) -> Any:
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=err_console,
        transient=True,
    ) as progress:
        progress.add_task(description=description, total=None)
        return await call()


# ---------------------------
# Dispatch
# ---------------------------
async def execute(operation: Operation, client: CatalogClient, console: Console, err_console: Console) -> int:
    # a Failure is already logged by the client
    if isinstance(operation, ListProducts):
        result = await with_spinner(err_console, "Fetching products...", client.list_products)
        if not isinstance(result, Failure):
            console.out(format_product_list(result.value), highlight=False)

    elif isinstance(operation, GetProduct):
        result = await with_spinner(
            err_console, f"Fetching product with ID {operation.product_id}...",
            lambda: client.get_product(operation.product_id),
        )
        if not isinstance(result, Failure):
            console.out("Product found:", highlight=False)
            console.out(format_product(result.value), highlight=False)

    elif isinstance(operation, CreateProduct):
        result = await with_spinner(
            err_console, "Creating new product...",
            lambda: client.create_product(operation.title, operation.price, operation.category, operation.description),
        )
        if not isinstance(result, Failure):
            console.out("Product created successfully:", highlight=False)
            console.out(format_product(result.value), highlight=False)

    elif isinstance(operation, DeleteProduct):
        result = await with_spinner(
            err_console, f"Deleting product with ID {operation.product_id}...",
            lambda: client.delete_product(operation.product_id),
        )
        if not isinstance(result, Failure):
            console.out("Product deleted successfully", highlight=False)
            console.out("Server response:", highlight=False)
            console.print_json(data=result.value)

    else:
        raise TypeError(f"unknown operation: {operation!r}")

    return EXIT_OK


async def dispatch(
    argv: Sequence[str],
    client: CatalogClient,
    console: Console,
    err_console: Console,
) -> int:
    """Run at most one catalog operation for ``argv`` and return the exit code.

    Usage errors exit with EXIT_USAGE. Remote failures and errors caught here
    are reported and still exit with EXIT_OK; only ``run`` exits non-zero for
    errors that escape this boundary.
    """
    operation = interpret(argv)
    if isinstance(operation, UsageError):
        show_usage_error(operation, console, err_console)
        return EXIT_USAGE

    try:
        return await execute(operation, client, console, err_console)
    except Exception as e:
        show_error(err_console, f"Error processing command: {e}")
        return EXIT_OK


def main(
    argv: Optional[Sequence[str]] = None,
    client: Optional[CatalogClient] = None,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None,
) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    console = console or Console()
    err_console = err_console or Console(stderr=True)
    configure_logging(err_console)
    return asyncio.run(dispatch(args, client or CatalogClient(), console, err_console))


def run() -> None:
    err_console = Console(stderr=True)
    try:
        sys.exit(main(err_console=err_console))
    except KeyboardInterrupt:
        err_console.print("\n[bold red]Interrupted by user[/bold red]")
        sys.exit(EXIT_FAILURE)
    except Exception as e:
        logger.exception("Fatal error: %s", e)
        sys.exit(EXIT_FAILURE)


if __name__ == "__main__":
    run()
