# sampleshop/data/seed.py
from typing import List

from sampleshop.domain.schemas import Variant, VariantProduct


# built-in catalog, used until the sheet answers with real products
def default_products() -> List[VariantProduct]:
    def v(vid, sku, color=None, size=None):
        return Variant(id=vid, color=color, size=size, sku=sku)

    return [
        VariantProduct(
            id="1",
            name="Character T-shirt",
            type="tshirt",
            description="T-shirt featuring a popular character",
            variants=[
                v("1-1", "TS-WH-S", "white", "S"),
                v("1-2", "TS-WH-M", "white", "M"),
                v("1-3", "TS-WH-L", "white", "L"),
                v("1-4", "TS-BL-S", "black", "S"),
                v("1-5", "TS-BL-M", "black", "M"),
                v("1-6", "TS-BL-L", "black", "L"),
            ],
        ),
        VariantProduct(
            id="2",
            name="Logo Hoodie",
            type="hoodie",
            description="Hoodie with the series logo",
            variants=[
                v("2-1", "HD-GY-M", "gray", "M"),
                v("2-2", "HD-GY-L", "gray", "L"),
                v("2-3", "HD-BL-M", "black", "M"),
                v("2-4", "HD-BL-L", "black", "L"),
            ],
        ),
        VariantProduct(
            id="3",
            name="Character Cap",
            type="cap",
            description="Cap decorated with a character",
            variants=[
                v("3-1", "CP-NV", "navy"),
                v("3-2", "CP-BL", "black"),
            ],
        ),
        VariantProduct(
            id="4",
            name="Art Poster",
            type="poster",
            description="Poster with original artwork",
            variants=[v("4-1", "PS-A3")],
        ),
        VariantProduct(
            id="5",
            name="Character Keychain",
            type="keychain",
            description="Keychain with a cute character",
            variants=[v("5-1", "KC-01")],
        ),
        VariantProduct(
            id="6",
            name="Logo Mug",
            type="mug",
            description="Mug printed with the series logo",
            variants=[v("6-1", "MG-01")],
        ),
        VariantProduct(
            id="7",
            name="Character Stickers",
            type="sticker",
            description="Sticker set with character designs",
            variants=[v("7-1", "ST-01")],
        ),
    ]
