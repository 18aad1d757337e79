# sampleshop/api/__init__.py
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from sampleshop.api.routers import carts, config, health, orders, products
from sampleshop.services.cart_registry import CartRegistry
from sampleshop.services.catalog_service import CatalogService
from sampleshop.services.config_service import ConfigService
from sampleshop.services.order_service import OrderService
from sampleshop.utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    count = app.state.catalog_service.refresh()
    logger.info(f"Catalog ready with {count} products")
    yield


def create_app(
    config_service: Optional[ConfigService] = None,
    catalog_service: Optional[CatalogService] = None,
) -> FastAPI:
    app = FastAPI(title="Sample Shop", version="1.0.0", lifespan=lifespan)

    # one instance of each service per app, one cart per session
    config_service = config_service or ConfigService()
    catalog_service = catalog_service or CatalogService(config_service)
    cart_registry = CartRegistry(product_lookup=catalog_service.find_product)

    app.state.config_service = config_service
    app.state.catalog_service = catalog_service
    app.state.cart_registry = cart_registry
    app.state.order_service = OrderService(config_service)

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(carts.router)
    app.include_router(orders.router)
    app.include_router(config.router)

    return app
