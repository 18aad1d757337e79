# sampleshop/utils/csv_export.py
import csv
import io
from typing import Iterable, Optional

from sampleshop.data.models.cart_line import CartLine
from sampleshop.domain.schemas import CheckoutForm

CSV_HEADER = ["Author", "Email", "Title", "PostalCode", "Address", "Phone", "Notes", "Products"]
CSV_FILENAME = "manga-samples.csv"


def variant_text(color: Optional[str], size: Optional[str]) -> str:
    return "/".join(v for v in (color, size) if v)


def line_summary(line: CartLine) -> str:
    variant = variant_text(line.color, line.size)
    info = f"{line.name} ({variant})" if variant else line.name
    return f"{info} - {line.quantity} pcs [SKU: {line.sku}]"


def format_order_csv(form: Optional[CheckoutForm], lines: Iterable[CartLine]) -> str:
    """One header row and one order row, products packed into the last cell."""
    products = "; ".join(line_summary(line) for line in lines)

    if form is None:
        row = ["", "", "", "", "", "", "", products]
    else:
        row = [
            form.author_name,
            form.email,
            form.manga_title,
            form.postal_code,
            form.address,
            form.phone_number,
            form.notes,
            products,
        ]

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerow(row)
    return buf.getvalue()
