"""Pytest configuration and fixtures"""
import os

import pytest

# keep the app away from any real spreadsheet
os.environ["SHEETS_WEBHOOK_URL"] = ""
os.environ["SHEETS_FETCH_URL"] = ""

from sampleshop.domain.schemas import OptionsProduct, Variant, VariantProduct
from sampleshop.services.cart_service import CartStore


@pytest.fixture
def tshirt():
    """Product with structured variants"""
    return VariantProduct(
        id="1",
        name="Character T-shirt",
        type="tshirt",
        variants=[
            Variant(id="1-1", color="white", size="M", sku="TS-WH-M"),
            Variant(id="1-2", color="black", size="M", sku="TS-BL-M"),
        ],
    )


@pytest.fixture
def hoodie():
    """Product with free-form color/size options"""
    return OptionsProduct(id="2", name="Logo Hoodie", type="hoodie", color="gray, black", size="M, L")


@pytest.fixture
def poster():
    return VariantProduct(id="4", name="Art Poster", type="poster", variants=[Variant(id="4-1", sku="PS-A3")])


@pytest.fixture
def catalog_products(tshirt, hoodie, poster):
    return {p.id: p for p in (tshirt, hoodie, poster)}


@pytest.fixture
def store(catalog_products):
    return CartStore(product_lookup=catalog_products.get)


@pytest.fixture
def events(store):
    """Every event the store publishes, in order"""
    received = []
    store.subscribe_events(received.append)
    return received
