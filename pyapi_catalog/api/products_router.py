from typing import Any

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from pyapi_catalog.api.dependencies import admin_key_protection, get_catalog_client
from pyapi_catalog.error_handler import ErrorHandler
from pyapi_catalog.integrations.contracts.errors import CatalogError
from pyapi_catalog.integrations.contracts.interfaces import CatalogClient
from pyapi_catalog.rendering.product_grid import DEFAULT_LIMIT, render_product_listing

router = APIRouter()
error_handler = ErrorHandler()


class ProductCreateRequest(BaseModel):
    # Raw values; the client sanitizes and validates every field.
    name: Any = ""
    price_eur: Any = 0
    slug: Any = ""
    description: Any = ""
    image: Any = ""
    category: Any = ""
    in_stock: Any = False
    rating: Any = 0


def _error_response(error: CatalogError) -> JSONResponse:
    return JSONResponse(status_code=error_handler.status_code(error), content=error_handler.to_payload(error))


@router.get("/api/v1/products", tags=["Products"])
def list_products(client: CatalogClient = Depends(get_catalog_client)):
    result = client.list_products()
    if not result.ok:
        return _error_response(result.error)
    return {"products": [p.to_payload() for p in result.value]}


@router.get("/products", response_class=HTMLResponse, tags=["Products"])
def products_page(
    limit: int = Query(default=DEFAULT_LIMIT),
    client: CatalogClient = Depends(get_catalog_client),
):
    """Public product grid; upstream failures render as a visible error block."""
    return HTMLResponse(render_product_listing(client.list_products(), limit=limit))


@router.post("/api/v1/products", tags=["Admin"], dependencies=[Depends(admin_key_protection)])
def add_product(request: ProductCreateRequest, client: CatalogClient = Depends(get_catalog_client)):
    result = client.add_product(request.model_dump())
    if not result.ok:
        return _error_response(result.error)
    product_id = result.value.product_id
    return {"product_id": product_id, "message": f"Product added successfully! ID: {product_id}"}


@router.post("/api/v1/products/cache/invalidate", tags=["Admin"], dependencies=[Depends(admin_key_protection)])
def invalidate_cache(client: CatalogClient = Depends(get_catalog_client)):
    client.invalidate_cache()
    return {"invalidated": True}
