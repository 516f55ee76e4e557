"""
Product endpoints for API v1.

These routes expose CRUD operations over the in-memory product store.
The store reports missing records and missing bodies as result values;
this module turns them into ``HTTPException`` responses (404 and 400
respectively) carrying the store's message as ``detail``.
"""

from typing import List, NoReturn, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from product_catalog_api.app.core.dependencies import get_product_store
from product_catalog_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from product_catalog_api.app.services.product_store import ProductStore, StoreError, StoreResult


router = APIRouter()

_ERROR_STATUS = {
    StoreError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    StoreError.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
}


def _raise_for_error(result: StoreResult) -> NoReturn:
    raise HTTPException(status_code=_ERROR_STATUS[result.error], detail=result.message)


@router.get("", response_model=List[ProductRead])
async def list_products(store: ProductStore = Depends(get_product_store)) -> List[ProductRead]:
    """Return every product in insertion order.  No filtering or paging."""
    return store.list_products().value


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(product_id: int, store: ProductStore = Depends(get_product_store)) -> ProductRead:
    """Retrieve a single product by ID.

    Returns HTTP 404 with ``Product with ID {id} not found`` if the
    product does not exist.
    """
    result = store.get_product(product_id)
    if not result.ok:
        _raise_for_error(result)
    return result.value


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: Request,
    response: Response,
    product_in: Optional[ProductCreate] = Body(None),
    store: ProductStore = Depends(get_product_store),
) -> ProductRead:
    """Create a product and point the ``Location`` header at it.

    The identifier is assigned by the store; an ``id`` in the body is
    ignored.  A missing body yields HTTP 400.
    """
    result = store.create_product(product_in)
    if not result.ok:
        _raise_for_error(result)
    product = result.value
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    product_in: Optional[ProductUpdate] = Body(None),
    store: ProductStore = Depends(get_product_store),
) -> Response:
    """Replace name, price and stock flag of a product (204, no body)."""
    result = store.update_product(product_id, product_in)
    if not result.ok:
        _raise_for_error(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(product_id: int, store: ProductStore = Depends(get_product_store)) -> Response:
    """Delete a product (204, no body)."""
    result = store.delete_product(product_id)
    if not result.ok:
        _raise_for_error(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
