# sampleshop/repos/cart_repo.py
from typing import List, Optional

from sampleshop.data.models.cart_line import CartLine, LineKey


class CartRepo:
    """
    In-memory storage of cart lines, kept in order of first add.
    Not thread safe on its own, CartStore serialises access.
    """

    def __init__(self):
        self._lines: List[CartLine] = []

    def get_cart_items(self) -> List[CartLine]:
        return list(self._lines)

    def get_cart_item(self, key: LineKey) -> Optional[CartLine]:
        return next((line for line in self._lines if line.key == key), None)

    def add_cart_item(self, line: CartLine) -> CartLine:
        if self.get_cart_item(line.key) is not None:
            raise ValueError(f"Duplicate cart line {line.key}")
        self._lines.append(line)
        return line

    def delete_cart_item(self, key: LineKey) -> Optional[CartLine]:
        line = self.get_cart_item(key)
        if line is not None:
            self._lines.remove(line)
        return line

    def clear(self) -> None:
        self._lines.clear()
