# catalog_sdk/formatting.py
from typing import Optional, Sequence

from .models import Product

BORDER = "*" * 122
RULE = "=" * 50
DESCRIPTION_LIMIT = 100
ELLIPSIS = "..."

NOT_FOUND = "Product not found"
NO_PRODUCTS = "No products found"


def _format_price(price: float) -> str:
    # 300.0 -> "300", 109.95 -> "109.95"
    if float(price).is_integer():
        return str(int(price))
    return str(price)


def truncate_description(description: Optional[str], limit: int = DESCRIPTION_LIMIT) -> str:
    text = description or ""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def format_product(product: Optional[Product]) -> str:
    if product is None:
        return NOT_FOUND

    lines = [
        BORDER,
        f"│ ID: {product.id}",
        f"│ Title: {product.title}",
        f"│ Price: {_format_price(product.price)}",
        f"│ Category: {product.category}",
        f"│ Description: {truncate_description(product.description)}",
        BORDER,
    ]
    return "\n".join(lines)


def format_product_list(products: Optional[Sequence[Product]]) -> str:
    if not products:
        return NO_PRODUCTS

    header = f"AVAILABLE PRODUCTS ({len(products)} items)\n{RULE}"
    return "\n".join([header] + [format_product(p) for p in products])
