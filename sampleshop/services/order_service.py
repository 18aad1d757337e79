# sampleshop/services/order_service.py
from datetime import datetime, timezone
from typing import Any, Dict, List, Tuple

import requests

from sampleshop.data.models.cart_line import CartLine
from sampleshop.domain.schemas import CheckoutForm
from sampleshop.errors import EmptyCartError
from sampleshop.services.cart_service import CartStore
from sampleshop.services.config_service import ConfigService
from sampleshop.utils.csv_export import format_order_csv, variant_text
from sampleshop.utils.logging import get_logger
from sampleshop.utils.settings import HTTP_TIMEOUT_SECONDS

logger = get_logger(__name__)


class OrderService:
    """
    Sends the cart and the checkout form to the spreadsheet webhook.
    The CSV of the order is always returned so the user can download it
    when the webhook is missing or fails.
    """

    def __init__(self, config_service: ConfigService, timeout: float = HTTP_TIMEOUT_SECONDS):
        self.config_service = config_service
        self.timeout = timeout

    def build_payload(self, form: CheckoutForm, lines: Tuple[CartLine, ...]) -> Dict[str, Any]:
        products: List[Dict[str, Any]] = [
            {
                "name": line.name,
                "variant": variant_text(line.color, line.size),
                "quantity": line.quantity,
                "sku": line.sku,
            }
            for line in lines
        ]

        return {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "products": products,
            "totalItems": sum(line.quantity for line in lines),
            "authorName": form.author_name,
            "email": form.email,
            "mangaTitle": form.manga_title,
            "postalCode": form.postal_code,
            "address": form.address,
            "phoneNumber": form.phone_number,
            "notes": form.notes,
        }

    def export_csv(self, cart: CartStore) -> str:
        return format_order_csv(None, cart.lines())

    def submit(self, cart: CartStore, form: CheckoutForm) -> Dict[str, Any]:
        """
        Use case: checkout.

        1. Rejects an empty cart
        2. Builds the CSV fallback
        3. POSTs the order to the webhook, if one is configured
        4. Clears the cart only after the webhook accepted the order
        """
        lines = cart.lines()
        total_items = sum(line.quantity for line in lines)

        if total_items == 0:
            raise EmptyCartError()

        csv_data = format_order_csv(form, lines)
        webhook_url = self.config_service.get_config().webhook_url

        if not webhook_url:
            logger.info("No webhook configured, returning CSV only")
            return {
                "delivered": False,
                "message": "Spreadsheet webhook is not configured. The order is available as CSV.",
                "csv_data": csv_data,
                "total_items": total_items,
            }

        payload = self.build_payload(form, lines)

        try:
            logger.info(f"Submitting order with {total_items} items to webhook")
            resp = requests.post(webhook_url, json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error submitting order to webhook: {e}")
            return {
                "delivered": False,
                "message": f"Sending to the spreadsheet failed: {e}. The order is available as CSV.",
                "csv_data": csv_data,
                "total_items": total_items,
            }

        cart.clear()
        logger.info("Order submitted, cart cleared")

        return {
            "delivered": True,
            "message": "Order sent to the spreadsheet.",
            "csv_data": csv_data,
            "total_items": total_items,
        }
