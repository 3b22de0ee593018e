from .client import API_BASE_URL, CatalogClient
from .formatting import format_product, format_product_list
from .models import Product, ProductIn
from .results import Failure, Success

__all__ = [
    "API_BASE_URL",
    "CatalogClient",
    "Failure",
    "Product",
    "ProductIn",
    "Success",
    "format_product",
    "format_product_list",
]
