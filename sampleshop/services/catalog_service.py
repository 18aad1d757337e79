# sampleshop/services/catalog_service.py
import threading
from typing import Callable, List, Optional, Union

import requests

from sampleshop.data.seed import default_products
from sampleshop.domain.schemas import OptionsProduct, VariantProduct
from sampleshop.errors import CatalogFormatError, UnknownProductError
from sampleshop.services.config_service import ConfigService
from sampleshop.services.product_client import ProductClient
from sampleshop.utils.logging import get_logger

logger = get_logger(__name__)

ProductModel = Union[VariantProduct, OptionsProduct]


class CatalogService:
    """
    Product list shown in the storefront.
    Starts with the built-in catalog and switches to the sheet once a fetch
    returns products. A failed or empty fetch keeps the current list.
    """

    def __init__(
        self,
        config_service: ConfigService,
        client_factory: Callable[[str], ProductClient] = ProductClient,
    ):
        self.config_service = config_service
        self.client_factory = client_factory
        self._lock = threading.Lock()
        self._products: List[ProductModel] = default_products()

    def refresh(self) -> int:
        """Re-fetch from the sheet, returns the number of products now listed."""
        fetch_url = self.config_service.get_config().fetch_url

        if not fetch_url:
            logger.info("No products fetch URL configured, keeping current catalog")
            return len(self._products)

        try:
            fetched = self.client_factory(fetch_url).fetch_products()
        except (requests.RequestException, CatalogFormatError, ValueError) as e:
            logger.error(f"Error fetching products: {e}")
            return len(self._products)

        if not fetched:
            logger.warning("Sheet returned no products, keeping current catalog")
            return len(self._products)

        with self._lock:
            self._products = fetched
        logger.info(f"Catalog updated with {len(fetched)} products")
        return len(fetched)

    def list_products(self, product_type: Optional[str] = None) -> List[ProductModel]:
        with self._lock:
            products = list(self._products)
        if product_type:
            products = [p for p in products if p.type == product_type]
        return products

    def find_product(self, product_id: str) -> Optional[ProductModel]:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def get_product(self, product_id: str) -> ProductModel:
        product = self.find_product(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return product
