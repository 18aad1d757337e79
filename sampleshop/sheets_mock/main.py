# sampleshop/sheets_mock/main.py
# dev mock of the spreadsheet web app: product sheet + order webhook
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException

app = FastAPI(title="Sheets (dev mock)")


PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "101",
        "name": "Cover Art Tote Bag",
        "type": "other",
        "description": "Tote bag printed with volume 1 cover art",
        "variants": [
            {"id": "101-natural", "color": "natural", "sku": "TB-NT"},
            {"id": "101-black", "color": "black", "sku": "TB-BL"},
        ],
    },
    {
        "id": "102",
        "name": "Chapter Sticker Pack",
        "type": "sticker",
        "description": "Stickers from the first chapter",
    },
    {
        "id": "103",
        "name": "Staff Hoodie",
        "type": "hoodie",
        "colors": "gray, black",
        "sizes": "M, L, XL",
    },
]

ORDERS: List[Dict[str, Any]] = []


@app.get("/products")
def get_products():
    return {"products": PRODUCTS}


@app.post("/orders")
def receive_order(order: Dict[str, Any]):
    if not order.get("products"):
        raise HTTPException(status_code=400, detail="Order has no products")
    ORDERS.append(order)
    return {"result": "success", "row": len(ORDERS)}
