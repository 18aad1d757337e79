# sampleshop/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from sampleshop.api.deps import get_cart_store, get_order_service
from sampleshop.domain.schemas import CheckoutForm, OrderOut
from sampleshop.errors import EmptyCartError
from sampleshop.services.cart_service import CartStore
from sampleshop.services.order_service import OrderService
from sampleshop.utils.csv_export import CSV_FILENAME

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderOut)
def create_order(
    payload: CheckoutForm,
    cart: CartStore = Depends(get_cart_store),
    svc: OrderService = Depends(get_order_service),
):
    """
    Submits the cart with the checkout form.
    Webhook failures are not errors, the response carries the CSV fallback.
    """
    try:
        return svc.submit(cart, payload)
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/csv")
def download_csv(
    cart: CartStore = Depends(get_cart_store),
    svc: OrderService = Depends(get_order_service),
):
    return Response(
        content=svc.export_csv(cart),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
