from sampleshop.data.models.cart_line import CartLine, LineKey, line_key, selection_label
from sampleshop.data.models.cart_event import CartEvent, CartResult

__all__ = ["CartLine", "LineKey", "line_key", "selection_label", "CartEvent", "CartResult"]
