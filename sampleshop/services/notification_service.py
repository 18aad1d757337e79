# sampleshop/services/notification_service.py
from typing import Callable, Generic, List, TypeVar

from sampleshop.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class NotificationService(Generic[T]):
    """
    Fan-out of cart notifications to subscribed listeners.
    Delivery is fire-and-forget: a failing listener is logged and skipped,
    the caller and the remaining listeners are not affected.
    """

    def __init__(self, name: str):
        self.name = name
        self._listeners: List[Callable[[T], None]] = []

    def subscribe(self, listener: Callable[[T], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, payload: T) -> None:
        self.publish_latest(lambda: payload)

    def publish_latest(self, read: Callable[[], T]) -> None:
        """Like publish, but each listener gets the value read at its own delivery."""
        for listener in list(self._listeners):
            try:
                listener(read())
            except Exception:
                logger.exception(f"[{self.name}] listener {listener!r} failed")
