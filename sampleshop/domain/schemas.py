# sampleshop/domain/schemas.py
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationInfo, field_validator

ProductType = Literal[
    "tshirt",
    "hoodie",
    "cap",
    "poster",
    "keychain",
    "mug",
    "sticker",
    "other",
]

PRODUCT_TYPES = ProductType.__args__


# =====================================================
# CATALOG
# =====================================================
class Variant(BaseModel):
    """Sellable configuration of a product with its own SKU."""

    model_config = ConfigDict(frozen=True)

    id: str
    color: Optional[str] = None
    size: Optional[str] = None
    sku: str


class _ProductBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: ProductType = "other"
    description: str = ""
    image: str = "/placeholder.svg"


class VariantProduct(_ProductBase):
    """Product exposing structured variants, selections match by variant id."""

    kind: Literal["variants"] = "variants"
    variants: List[Variant] = Field(default_factory=list)

    def find_variant(self, variant_id: Optional[str]) -> Optional[Variant]:
        if not variant_id:
            return None
        return next((v for v in self.variants if v.id == variant_id), None)


class OptionsProduct(_ProductBase):
    """Product carrying raw color/size option strings instead of variants."""

    kind: Literal["options"] = "options"
    color: Optional[str] = None
    size: Optional[str] = None


Product = Annotated[Union[VariantProduct, OptionsProduct], Field(discriminator="kind")]


# =====================================================
# CART
# =====================================================
class SelectionIn(BaseModel):
    """Identifies a cart line: product plus optional variant/color/size."""

    product_id: str = Field(..., min_length=1)
    variant_id: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None


class SetQuantityIn(SelectionIn):
    quantity: int = Field(..., description="Absolute quantity, <= 0 removes the line")


class CartLineOut(BaseModel):
    product_id: str
    variant_id: Optional[str] = None
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int
    name: str
    label: str
    sku: str = ""

    model_config = ConfigDict(from_attributes=True)


class CartOut(BaseModel):
    items: List[CartLineOut]
    total: int
    line_count: int


class CartEventOut(BaseModel):
    kind: Literal["added", "updated", "limited", "removed"]
    product_label: str
    quantity: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class CartMutationOut(BaseModel):
    cart: CartOut
    events: List[CartEventOut]


# =====================================================
# CHECKOUT
# =====================================================
class CheckoutForm(BaseModel):
    """Shipping details collected before an order is submitted."""

    author_name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    manga_title: str = Field(..., min_length=1, max_length=200)
    postal_code: str = Field(..., min_length=1, max_length=20)
    address: str = Field(..., min_length=1, max_length=500)
    phone_number: str = Field(..., min_length=1, max_length=40)
    notes: str = ""

    @field_validator("author_name", "manga_title", "postal_code", "address", "phone_number")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class OrderOut(BaseModel):
    delivered: bool
    message: str
    csv_data: str
    total_items: int


# =====================================================
# CONFIG
# =====================================================
class SheetsConfig(BaseModel):
    """Spreadsheet integration endpoints."""

    webhook_url: str = ""
    fetch_url: str = ""


class SheetsConfigIn(BaseModel):
    webhook_url: str = Field(..., min_length=1)
    fetch_url: str = ""

    @field_validator("webhook_url", "fetch_url")
    @classmethod
    def http_url(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        if not value and info.field_name == "webhook_url":
            raise ValueError("webhook URL is required")
        if value and not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value
