# sampleshop/data/models/cart_line.py
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from sampleshop.domain.schemas import OptionsProduct, VariantProduct

LineKey = Tuple[str, Optional[str], Optional[str], Optional[str]]


def _unset(value: Optional[str]) -> Optional[str]:
    # "" and None both mean "not selected"
    return value or None


def line_key(
    product_id: str,
    variant_id: Optional[str] = None,
    color: Optional[str] = None,
    size: Optional[str] = None,
) -> LineKey:
    """Identity of a cart line: all four fields, unset values normalised to None."""
    return (product_id, _unset(variant_id), _unset(color), _unset(size))


def selection_label(name: str, color: Optional[str], size: Optional[str]) -> str:
    picked = [v for v in (color, size) if v]
    if not picked:
        return name
    return f"{name} ({' / '.join(picked)})"


@dataclass
class CartLine:
    product: Union[VariantProduct, OptionsProduct]
    quantity: int
    variant_id: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None

    def __post_init__(self):
        self.variant_id = _unset(self.variant_id)
        self.color = _unset(self.color)
        self.size = _unset(self.size)

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def key(self) -> LineKey:
        return (self.product.id, self.variant_id, self.color, self.size)

    @property
    def name(self) -> str:
        return self.product.name

    @property
    def label(self) -> str:
        return selection_label(self.product.name, self.color, self.size)

    @property
    def sku(self) -> str:
        # only structured products know their SKUs
        if isinstance(self.product, VariantProduct):
            variant = self.product.find_variant(self.variant_id)
            if variant:
                return variant.sku
        return ""
