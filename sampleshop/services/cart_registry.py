# sampleshop/services/cart_registry.py
import secrets
import threading
import time
from typing import Callable, Dict, Optional, Tuple

from sampleshop.services.cart_service import CartStore, ProductLookup
from sampleshop.utils.logging import get_logger
from sampleshop.utils.settings import CART_TTL_SECONDS, MAX_QUANTITY

logger = get_logger(__name__)


class CartRegistry:
    """
    One CartStore per shopper session, keyed by an opaque session id.
    Carts idle for longer than ttl seconds are dropped on the next access.
    """

    def __init__(
        self,
        product_lookup: Optional[ProductLookup] = None,
        max_quantity: int = MAX_QUANTITY,
        ttl: int = CART_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.product_lookup = product_lookup
        self.max_quantity = max_quantity
        self.ttl = ttl
        self.clock = clock
        self._lock = threading.Lock()
        self._stores: Dict[str, CartStore] = {}
        self._last_seen: Dict[str, float] = {}

    def get(self, session_id: str) -> Optional[CartStore]:
        with self._lock:
            self._expire()
            store = self._stores.get(session_id)
            if store is not None:
                self._last_seen[session_id] = self.clock()
            return store

    def create(self) -> Tuple[str, CartStore]:
        session_id = secrets.token_urlsafe(16)
        store = CartStore(product_lookup=self.product_lookup, max_quantity=self.max_quantity)

        with self._lock:
            self._expire()
            self._stores[session_id] = store
            self._last_seen[session_id] = self.clock()

        logger.info(f"New cart session, {len(self._stores)} active")
        return session_id, store

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def _expire(self) -> None:
        now = self.clock()
        stale = [sid for sid, seen in self._last_seen.items() if now - seen > self.ttl]
        for sid in stale:
            del self._stores[sid]
            del self._last_seen[sid]
        if stale:
            logger.info(f"Dropped {len(stale)} idle carts")
