# sampleshop/api/deps.py
from fastapi import Request, Response

from sampleshop.services.cart_service import CartStore
from sampleshop.services.catalog_service import CatalogService
from sampleshop.services.config_service import ConfigService
from sampleshop.services.order_service import OrderService

CART_COOKIE = "cart_session"


# services are built once in create_app and kept on app.state
def get_cart_store(request: Request, response: Response) -> CartStore:
    """Cart of the calling session, a new session cookie is issued when there is none."""
    registry = request.app.state.cart_registry
    session_id = request.cookies.get(CART_COOKIE)

    store = registry.get(session_id) if session_id else None
    if store is None:
        # unknown or expired ids are never adopted
        session_id, store = registry.create()
        response.set_cookie(CART_COOKIE, session_id, httponly=True, samesite="lax")

    return store


def get_catalog_service(request: Request) -> CatalogService:
    return request.app.state.catalog_service


def get_config_service(request: Request) -> ConfigService:
    return request.app.state.config_service


def get_order_service(request: Request) -> OrderService:
    return request.app.state.order_service
