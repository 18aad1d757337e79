# sampleshop/services/product_client.py
from typing import Any, Dict, List, Optional, Union

import requests

from sampleshop.domain.schemas import PRODUCT_TYPES, OptionsProduct, Variant, VariantProduct
from sampleshop.errors import CatalogFormatError
from sampleshop.utils.logging import get_logger
from sampleshop.utils.retry import http_retry
from sampleshop.utils.settings import HTTP_TIMEOUT_SECONDS

logger = get_logger(__name__)


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def product_from_record(item: Dict[str, Any], index: int) -> Union[VariantProduct, OptionsProduct]:
    """
    Build a Product from one row of the product sheet.
    Rows with a variants list become VariantProduct, everything else keeps
    its raw color/size strings as OptionsProduct.
    """
    product_id = _text(item.get("id")) or str(index)
    ptype = item.get("type")

    common = {
        "id": product_id,
        "name": _text(item.get("name")) or f"Product {index + 1}",
        "type": ptype if ptype in PRODUCT_TYPES else "other",
        "description": _text(item.get("description")) or "",
        "image": _text(item.get("image")) or "/placeholder.svg",
    }

    raw_variants = item.get("variants")
    if isinstance(raw_variants, list) and raw_variants:
        variants = [
            Variant(
                id=_text(v.get("id")) or f"{product_id}-{n}",
                color=_text(v.get("color")),
                size=_text(v.get("size")),
                sku=_text(v.get("sku")) or "",
            )
            for n, v in enumerate(raw_variants)
            if isinstance(v, dict)
        ]
        return VariantProduct(variants=variants, **common)

    return OptionsProduct(
        color=_text(item.get("colors", item.get("color"))),
        size=_text(item.get("sizes", item.get("size"))),
        **common,
    )


class ProductClient:
    def __init__(self, fetch_url: str, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.fetch_url = fetch_url
        self.timeout = timeout

    @http_retry()
    def _get_sheet(self) -> Any:
        logger.info(f"ProductClient GET {self.fetch_url}")

        resp = requests.get(self.fetch_url, timeout=self.timeout)
        resp.raise_for_status()
        return resp.json()

    def fetch_products(self) -> List[Union[VariantProduct, OptionsProduct]]:
        data = self._get_sheet()

        if not isinstance(data, dict) or not isinstance(data.get("products"), list):
            raise CatalogFormatError("Invalid response format, expected a 'products' list")

        products = [
            product_from_record(item, index)
            for index, item in enumerate(data["products"])
            if isinstance(item, dict)
        ]
        logger.info(f"Fetched {len(products)} products")
        return products
