# sampleshop/errors.py
"""Exceptions raised by the sample shop services."""


class SampleShopError(Exception):
    pass


class UnknownProductError(SampleShopError, LookupError):
    """No Product could be resolved for a product id."""

    def __init__(self, product_id: str):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class EmptyCartError(SampleShopError, ValueError):
    def __init__(self):
        super().__init__("Cart is empty")


class CatalogFormatError(SampleShopError, ValueError):
    """The catalog endpoint answered with something other than a product sheet."""
