# sampleshop/api/routers/carts.py
from typing import Iterable

from fastapi import APIRouter, Depends, HTTPException

from sampleshop.api.deps import get_cart_store, get_catalog_service
from sampleshop.data.models.cart_event import CartResult
from sampleshop.data.models.cart_line import CartLine
from sampleshop.domain.schemas import (
    CartEventOut,
    CartLineOut,
    CartMutationOut,
    CartOut,
    SelectionIn,
    SetQuantityIn,
)
from sampleshop.errors import UnknownProductError
from sampleshop.services.cart_service import CartStore
from sampleshop.services.catalog_service import CatalogService

router = APIRouter(prefix="/cart", tags=["cart"])


def cart_out(lines: Iterable[CartLine]) -> CartOut:
    items = [CartLineOut.model_validate(line) for line in lines]
    return CartOut(
        items=items,
        total=sum(i.quantity for i in items),
        line_count=len(items),
    )


def mutation_out(result: CartResult) -> CartMutationOut:
    return CartMutationOut(
        cart=cart_out(result.lines),
        events=[CartEventOut.model_validate(e) for e in result.events],
    )


@router.get("", response_model=CartOut)
def get_cart(store: CartStore = Depends(get_cart_store)):
    return cart_out(store.lines())


@router.post("/items", response_model=CartMutationOut)
def add_item(
    payload: SelectionIn,
    store: CartStore = Depends(get_cart_store),
    catalog: CatalogService = Depends(get_catalog_service),
):
    try:
        product = catalog.get_product(payload.product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return mutation_out(
        store.add(product, variant_id=payload.variant_id, color=payload.color, size=payload.size)
    )


@router.put("/items", response_model=CartMutationOut)
def set_item_quantity(payload: SetQuantityIn, store: CartStore = Depends(get_cart_store)):
    try:
        result = store.set_quantity(
            payload.product_id,
            payload.quantity,
            variant_id=payload.variant_id,
            color=payload.color,
            size=payload.size,
        )
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return mutation_out(result)


@router.delete("/items", response_model=CartMutationOut)
def remove_item(payload: SelectionIn, store: CartStore = Depends(get_cart_store)):
    return mutation_out(
        store.remove(payload.product_id, variant_id=payload.variant_id, color=payload.color, size=payload.size)
    )


@router.delete("", response_model=CartMutationOut)
def clear_cart(store: CartStore = Depends(get_cart_store)):
    return mutation_out(store.clear())
