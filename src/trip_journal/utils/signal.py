"""Observable boolean used to publish the authentication status."""

from __future__ import annotations

import logging
from typing import Callable

logger = logging.getLogger(__name__)

Subscriber = Callable[[bool], None]


class AuthStatusSignal:
    """Current value plus a registry of subscribers.

    Every ``publish`` reaches every current subscriber exactly once, in
    publish order. A new subscriber is called immediately with the current
    value.
    """

    def __init__(self, initial: bool = False) -> None:
        self._value = initial
        self._subscribers: list[Subscriber] = []

    @property
    def value(self) -> bool:
        return self._value

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback and replay the current value to it.

        Returns:
            A function that removes the subscription.
        """
        self._subscribers.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, value: bool) -> None:
        self._value = value
        logger.debug(f"Authentication status -> {value} ({len(self._subscribers)} subscribers)")
        for callback in list(self._subscribers):
            callback(value)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
