"""Broadcast of listing states to subscribers."""
from collections import deque
from typing import Callable, Deque, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Subscription:
    """Handle returned by ``StatePublisher.subscribe``."""

    def __init__(self, publisher: "StatePublisher", callback: Callable):
        self._publisher = publisher
        self._callback = callback
        self.active = True

    def cancel(self):
        """Stop receiving states. Safe to call more than once."""
        if self.active:
            self._publisher._remove(self)
            self.active = False


class StatePublisher(Generic[T]):
    """Single-writer, multi-reader channel holding the latest value.

    ``send`` delivers synchronously to the subscribers attached at send time,
    in subscription order. A value sent from inside a subscriber callback is
    queued and delivered once every subscriber has seen the current one, so
    all subscribers observe values in send order and finish on ``latest``.
    Late subscribers do not receive earlier values.
    """

    def __init__(self):
        self._subscriptions: List[Subscription] = []
        self._pending: Deque[T] = deque()
        self._delivering = False
        self.latest: Optional[T] = None

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        return subscription

    def send(self, value: T):
        self.latest = value
        self._pending.append(value)
        if self._delivering:
            return

        self._delivering = True
        try:
            while self._pending:
                current = self._pending.popleft()
                for subscription in list(self._subscriptions):
                    if subscription.active:
                        subscription._callback(current)
        finally:
            self._delivering = False
            self._pending.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def _remove(self, subscription: Subscription):
        self._subscriptions.remove(subscription)
