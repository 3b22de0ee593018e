# catalog_sdk/client.py
import logging
from typing import Any, List, Optional, Union

import httpx
from pydantic import TypeAdapter, ValidationError

from .models import Product, ProductIn
from .results import Failure, Result, Success

logger = logging.getLogger(__name__)

API_BASE_URL = "https://fakestoreapi.com"
DEFAULT_TIMEOUT = 10.0
PLACEHOLDER_IMAGE = "https://i.pravatar.cc/640?img=placeholder"
DEFAULT_DESCRIPTION = "Product created from the command line"

_PRODUCT_LIST = TypeAdapter(List[Product])


class CatalogClient:
    """Async client for the product catalog REST API.

    Every operation returns a ``Success`` or a ``Failure``; transport errors,
    non-2xx answers and malformed payloads are logged and turned into a
    ``Failure`` instead of being raised.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def _fail(self, operation: str, reason: str, status_code: Optional[int] = None) -> Failure:
        logger.error("Error %s: %s", operation, reason)
        return Failure(operation=operation, reason=reason, status_code=status_code)

    async def _request(self, operation: str, method: str, path: str, payload: Optional[dict] = None) -> Result[Any]:
        headers = {"Content-Type": "application/json"} if payload is not None else None
        try:
            async with self._client() as client:
                r = await client.request(method, path, json=payload, headers=headers)
                r.raise_for_status()
                # an empty 2xx body decodes to None
                data = r.json() if r.content.strip() else None
        except httpx.HTTPStatusError as e:
            return self._fail(operation, f"HTTP {e.response.status_code}", e.response.status_code)
        except httpx.HTTPError as e:
            return self._fail(operation, str(e) or type(e).__name__)
        except ValueError:
            return self._fail(operation, "response body is not valid JSON")
        return Success(data)

    # Products
    async def list_products(self) -> Result[List[Product]]:
        operation = "fetching products"
        result = await self._request(operation, "GET", "/products")
        if isinstance(result, Failure):
            return result
        if result.value is None:
            return self._fail(operation, "empty response")
        try:
            return Success(_PRODUCT_LIST.validate_python(result.value))
        except ValidationError:
            return self._fail(operation, "unexpected response payload")

    async def get_product(self, product_id: Union[int, str]) -> Result[Product]:
        operation = f"fetching product {product_id}"
        result = await self._request(operation, "GET", f"/products/{product_id}")
        if isinstance(result, Failure):
            return result
        # the remote answers unknown ids with 200 and no body
        if result.value is None:
            return self._fail(operation, "product not found")
        try:
            return Success(Product.model_validate(result.value))
        except ValidationError:
            return self._fail(operation, "unexpected response payload")

    async def create_product(
        self,
        title: str,
        price: Union[float, str],
        category: str,
        description: Optional[str] = None,
    ) -> Result[Product]:
        operation = "creating product"
        try:
            draft = ProductIn(
                title=title,
                price=price,
                description=DEFAULT_DESCRIPTION if description is None else description,
                image=PLACEHOLDER_IMAGE,
                category=category,
            )
        except ValidationError as e:
            reason = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
            return self._fail(operation, f"invalid product ({reason})")

        result = await self._request(operation, "POST", "/products", payload=draft.model_dump())
        if isinstance(result, Failure):
            return result
        if result.value is None:
            return self._fail(operation, "empty response")
        try:
            return Success(Product.model_validate(result.value))
        except ValidationError:
            return self._fail(operation, "unexpected response payload")

    async def delete_product(self, product_id: Union[int, str]) -> Result[Any]:
        # the acknowledgement shape is up to the server, so it is passed through as-is
        return await self._request(f"deleting product {product_id}", "DELETE", f"/products/{product_id}")
