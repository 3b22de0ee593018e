# catalog_sdk/commands.py
"""
Turns a raw argument list into one catalog operation, or into a UsageError.

Parsing never raises and never touches the network: every rejection is a
UsageError value with a kind, so callers can tell each one apart.
"""
import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

CANONICAL_RESOURCE = "products"
RESOURCE_ALIAS = "productos"

NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

POST_USAGE = "Format: POST products <title> <price> <category> [description]"


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class UsageErrorKind(str, Enum):
    NO_ARGUMENTS = "no_arguments"
    MISSING_ARGUMENTS = "missing_arguments"
    UNSUPPORTED_METHOD = "unsupported_method"
    UNRECOGNIZED_RESOURCE = "unrecognized_resource"
    INVALID_PRODUCT_ID = "invalid_product_id"
    MISSING_PARAMETERS = "missing_parameters"
    INVALID_PRICE = "invalid_price"


@dataclass(frozen=True)
class UsageError:
    kind: UsageErrorKind
    message: str = ""
    hint: str = ""
    show_help: bool = False


@dataclass(frozen=True)
class ParsedCommand:
    method: Method
    resource: str
    parameters: Tuple[str, ...] = ()


# Operations
@dataclass(frozen=True)
class ListProducts:
    pass


@dataclass(frozen=True)
class GetProduct:
    product_id: str


@dataclass(frozen=True)
class CreateProduct:
    title: str
    price: float
    category: str
    description: str


@dataclass(frozen=True)
class DeleteProduct:
    product_id: str


Operation = Union[ListProducts, GetProduct, CreateProduct, DeleteProduct]


# ---------------------------
# Helpers
# ---------------------------
def parse_number(raw: str) -> Optional[float]:
    """Return the finite number ``raw`` spells, or None.

    Only plain ASCII decimal notation is accepted: no surrounding whitespace,
    no ``_`` digit groups, no ``nan``/``inf``.
    """
    if not isinstance(raw, str) or not NUMBER_PATTERN.fullmatch(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def normalize_resource(resource: str) -> str:
    if resource == RESOURCE_ALIAS:
        return CANONICAL_RESOURCE
    if resource.startswith(RESOURCE_ALIAS + "/"):
        return CANONICAL_RESOURCE + resource[len(RESOURCE_ALIAS):]
    return resource


def split_item_path(resource: str) -> Optional[str]:
    """Return the id part of ``products/<id>``, or None if ``resource`` is not an item path."""
    prefix, sep, product_id = resource.partition("/")
    if prefix != CANONICAL_RESOURCE or not sep:
        return None
    return product_id


def _product_id(product_id: str) -> Union[str, UsageError]:
    if not product_id or parse_number(product_id) is None:
        return UsageError(UsageErrorKind.INVALID_PRODUCT_ID, message=f"Invalid product ID: {product_id!r}")
    return product_id


# ---------------------------
# Parsing and routing
# ---------------------------
def parse_command(argv: Sequence[str]) -> Union[ParsedCommand, UsageError]:
    if not argv:
        return UsageError(UsageErrorKind.NO_ARGUMENTS, show_help=True)
    if len(argv) < 2 or not argv[0] or not argv[1]:
        return UsageError(
            UsageErrorKind.MISSING_ARGUMENTS,
            message="Invalid command. Use the format: <METHOD> <resource> [parameters]",
            show_help=True,
        )

    method, resource, *parameters = argv
    try:
        parsed_method = Method(method.upper())
    except ValueError:
        return UsageError(
            UsageErrorKind.UNSUPPORTED_METHOD,
            message=f"Unsupported HTTP method: {method}",
            show_help=True,
        )
    return ParsedCommand(method=parsed_method, resource=resource, parameters=tuple(parameters))


def _route_get(resource: str, raw: str) -> Union[Operation, UsageError]:
    if resource == CANONICAL_RESOURCE:
        return ListProducts()
    product_id = split_item_path(resource)
    if product_id is not None:
        checked = _product_id(product_id)
        return checked if isinstance(checked, UsageError) else GetProduct(checked)
    return UsageError(
        UsageErrorKind.UNRECOGNIZED_RESOURCE,
        message=f"Unrecognized resource: {raw}",
        hint="Valid resources: products, productos, products/<id>, productos/<id>",
    )


def _route_post(resource: str, raw: str, parameters: Tuple[str, ...]) -> Union[Operation, UsageError]:
    if resource != CANONICAL_RESOURCE:
        return UsageError(
            UsageErrorKind.UNRECOGNIZED_RESOURCE,
            message=f"Unsupported resource for POST: {raw}",
            hint="Valid resources: products, productos",
        )

    title, price, category = (list(parameters[:3]) + ["", "", ""])[:3]
    if not title or not price or not category:
        return UsageError(UsageErrorKind.MISSING_PARAMETERS, message="Missing parameters.", hint=POST_USAGE)

    value = parse_number(price)
    if value is None or value <= 0:
        return UsageError(
            UsageErrorKind.INVALID_PRICE,
            message=f"The price must be a valid number greater than 0 (got {price!r})",
        )

    description_parts = parameters[3:]
    if description_parts:
        description = " ".join(description_parts)
    else:
        description = f"Product {title} in category {category}"
    return CreateProduct(title=title, price=value, category=category, description=description)


def _route_delete(resource: str, raw: str) -> Union[Operation, UsageError]:
    product_id = split_item_path(resource)
    if product_id is None:
        return UsageError(
            UsageErrorKind.UNRECOGNIZED_RESOURCE,
            message=f"Unsupported resource for DELETE: {raw}",
            hint="Valid resources: products/<id>, productos/<id>",
        )
    checked = _product_id(product_id)
    return checked if isinstance(checked, UsageError) else DeleteProduct(checked)


def route_command(command: ParsedCommand) -> Union[Operation, UsageError]:
    resource = normalize_resource(command.resource)
    if command.method is Method.GET:
        return _route_get(resource, command.resource)
    if command.method is Method.POST:
        return _route_post(resource, command.resource, command.parameters)
    return _route_delete(resource, command.resource)


def interpret(argv: Sequence[str]) -> Union[Operation, UsageError]:
    """Parse and route ``argv`` in one step."""
    parsed = parse_command(argv)
    if isinstance(parsed, UsageError):
        return parsed
    return route_command(parsed)
