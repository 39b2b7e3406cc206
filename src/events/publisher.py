from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT")

Subscriber = Callable[[EventT], None]


class EventPublisher(Generic[EventT]):
    """Delivers one payload type to an explicit list of subscribers.

    Subscribers run synchronously in subscription order and may mutate the
    payload; the final payload state depends on that order. Exceptions raised
    by a subscriber propagate to the caller of ``publish`` and stop delivery.
    """

    def __init__(self, subscribers: list[Subscriber[EventT]] | None = None) -> None:
        self._subscribers: list[Subscriber[EventT]] = list(subscribers or [])

    def subscribe(self, subscriber: Subscriber[EventT]) -> None:
        self._subscribers.append(subscriber)

    def unsubscribe(self, subscriber: Subscriber[EventT]) -> None:
        if subscriber in self._subscribers:
            self._subscribers.remove(subscriber)

    @property
    def subscribers(self) -> tuple[Subscriber[EventT], ...]:
        return tuple(self._subscribers)

    def publish(self, event: EventT) -> None:
        logger.debug("Publishing %s to %d subscribers", type(event).__name__, len(self._subscribers))
        for subscriber in list(self._subscribers):
            subscriber(event)
