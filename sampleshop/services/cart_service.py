# sampleshop/services/cart_service.py
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, List, Optional, Tuple, Union

from sampleshop.data.models.cart_event import CartEvent, CartResult, EventKind
from sampleshop.data.models.cart_line import CartLine, line_key, selection_label
from sampleshop.domain.schemas import OptionsProduct, VariantProduct
from sampleshop.errors import UnknownProductError
from sampleshop.repos.cart_repo import CartRepo
from sampleshop.services.notification_service import NotificationService
from sampleshop.utils.logging import get_logger
from sampleshop.utils.settings import MAX_QUANTITY

logger = get_logger(__name__)

ProductModel = Union[VariantProduct, OptionsProduct]
ProductLookup = Callable[[str], Optional[ProductModel]]


@dataclass
class _Transaction:
    events: List[CartEvent] = field(default_factory=list)
    changed: bool = False
    result: Optional[CartResult] = None

    def emit(self, kind: EventKind, label: str, quantity: Optional[int] = None) -> None:
        self.events.append(CartEvent(kind, label, quantity))


class CartStore:
    """
    Cart of sample items for one storefront session.

    Commands (add, set_quantity, remove, clear) change the cart and return a
    CartResult with the resulting lines and the events the call produced.
    Queries (lines, total, line_count) only read.

    A line is identified by (product_id, variant_id, color, size); empty and
    missing selection values are the same "unset" value. Each line keeps
    1 <= quantity <= max_quantity, over-limit requests are clamped and
    reported with a "limited" event instead of raising.

    Every command runs as one read-modify-write under the store lock.
    Subscribers are notified after the lock is released.
    """

    def __init__(
        self,
        product_lookup: Optional[ProductLookup] = None,
        max_quantity: int = MAX_QUANTITY,
    ):
        self.repo = CartRepo()
        self.product_lookup = product_lookup
        self.max_quantity = max_quantity
        self._lock = threading.RLock()
        self.state_notifications: NotificationService[Tuple[CartLine, ...]] = NotificationService("cart-state")
        self.event_notifications: NotificationService[CartEvent] = NotificationService("cart-events")

    def subscribe(self, listener: Callable[[Tuple[CartLine, ...]], None]) -> Callable[[], None]:
        """Listener gets the line snapshot after every mutation."""
        return self.state_notifications.subscribe(listener)

    def subscribe_events(self, listener: Callable[[CartEvent], None]) -> Callable[[], None]:
        return self.event_notifications.subscribe(listener)

    #query
    def lines(self) -> Tuple[CartLine, ...]:
        with self._lock:
            return self._snapshot()

    def total(self) -> int:
        with self._lock:
            return sum(line.quantity for line in self.repo.get_cart_items())

    def line_count(self) -> int:
        with self._lock:
            return len(self.repo.get_cart_items())

    #commands
    def add(
        self,
        product: ProductModel,
        variant_id: Optional[str] = None,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> CartResult:
        with self._transaction() as tx:
            existing = self.repo.get_cart_item(line_key(product.id, variant_id, color, size))

            if existing is None:
                line = self.repo.add_cart_item(
                    CartLine(product=product, quantity=1, variant_id=variant_id, color=color, size=size)
                )
                logger.info(f"Added {line.label} to cart")
                tx.emit("added", line.label, 1)
                tx.changed = True
            elif existing.quantity >= self.max_quantity:
                logger.warning(f"{existing.label} already at the limit of {self.max_quantity}")
                tx.emit("limited", existing.label, self.max_quantity)
            else:
                existing.quantity += 1
                logger.info(f"{existing.label} quantity increased to {existing.quantity}")
                tx.emit("updated", existing.label, existing.quantity)
                tx.changed = True

        return tx.result

    def set_quantity(
        self,
        product: Union[ProductModel, str],
        quantity: int,
        variant_id: Optional[str] = None,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> CartResult:
        """
        Set the absolute quantity of a line.

        `product` may be a Product or a bare product id. A bare id is enough
        to update or remove a line; creating a new line needs the Product,
        which is then resolved through `product_lookup`.
        """
        product_id = product if isinstance(product, str) else product.id

        with self._transaction() as tx:
            key = line_key(product_id, variant_id, color, size)
            existing = self.repo.get_cart_item(key)

            if quantity > self.max_quantity:
                label = existing.label if existing else self._label_for(product, color, size)
                logger.warning(f"Requested {quantity} x {label}, clamped to {self.max_quantity}")
                tx.emit("limited", label, self.max_quantity)
                quantity = self.max_quantity

            if quantity <= 0:
                # nothing to remove -> pure no-op
                if existing is not None:
                    self.repo.delete_cart_item(key)
                    logger.info(f"Removed {existing.label} from cart")
                    tx.emit("removed", existing.label)
                    tx.changed = True
            elif existing is not None:
                existing.quantity = quantity
                logger.info(f"{existing.label} quantity set to {quantity}")
                tx.emit("updated", existing.label, quantity)
                tx.changed = True
            else:
                line = self.repo.add_cart_item(
                    CartLine(
                        product=self._resolve(product),
                        quantity=quantity,
                        variant_id=variant_id,
                        color=color,
                        size=size,
                    )
                )
                logger.info(f"Added {quantity} x {line.label} to cart")
                tx.emit("added", line.label, quantity)
                tx.changed = True

        return tx.result

    def remove(
        self,
        product_id: str,
        variant_id: Optional[str] = None,
        color: Optional[str] = None,
        size: Optional[str] = None,
    ) -> CartResult:
        with self._transaction() as tx:
            removed = self.repo.delete_cart_item(line_key(product_id, variant_id, color, size))

            if removed is not None:
                logger.info(f"Removed {removed.label} from cart")
                tx.emit("removed", removed.label)
                tx.changed = True

        return tx.result

    def clear(self) -> CartResult:
        with self._transaction() as tx:
            self.repo.clear()
            tx.changed = True
            logger.info("Cart cleared")

        return tx.result

    #helpers
    @contextmanager
    def _transaction(self) -> Iterator[_Transaction]:
        tx = _Transaction()
        with self._lock:
            yield tx
            tx.result = CartResult(lines=self._snapshot(), events=list(tx.events))

        # fire-and-forget, outside the lock
        if tx.changed:
            # current lines, a later command may already have committed
            self.state_notifications.publish_latest(self.lines)
        for event in tx.events:
            self.event_notifications.publish(event)

    def _snapshot(self) -> Tuple[CartLine, ...]:
        return tuple(replace(line) for line in self.repo.get_cart_items())

    def _lookup(self, product_id: str) -> Optional[ProductModel]:
        return self.product_lookup(product_id) if self.product_lookup else None

    def _resolve(self, product: Union[ProductModel, str]) -> ProductModel:
        if not isinstance(product, str):
            return product

        found = self._lookup(product)
        if found is None:
            raise UnknownProductError(product)
        return found

    def _label_for(self, product: Union[ProductModel, str], color: Optional[str], size: Optional[str]) -> str:
        if isinstance(product, str):
            found = self._lookup(product)
            name = found.name if found else product
        else:
            name = product.name
        return selection_label(name, color, size)
