from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Optional

from ..core.enums import RefreshTopic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshEvent:
    """Signal that data under ``topic`` changed and dependent views should reload."""

    topic: RefreshTopic
    reason: str = ""
    payload: dict[str, Any] = field(default_factory=dict)


Subscriber = Callable[[RefreshEvent], None]


class RefreshBus:
    """Typed publish/subscribe channel for refresh signals.

    A subscriber registered without topics receives every event. Events on
    ``RefreshTopic.ALL`` reach every subscriber. Subscriber exceptions propagate
    to the publisher.
    """

    def __init__(self):
        self._subscribers: list[tuple[Subscriber, Optional[frozenset[RefreshTopic]]]] = []

    def subscribe(self, callback: Subscriber, topics: Optional[Iterable[RefreshTopic]] = None) -> Callable[[], None]:
        entry = (callback, frozenset(topics) if topics is not None else None)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def publish(self, event: RefreshEvent) -> int:
        """Deliver ``event`` to matching subscribers; returns how many were called."""
        delivered = 0
        for callback, topics in list(self._subscribers):
            if topics is None or event.topic == RefreshTopic.ALL or event.topic in topics:
                callback(event)
                delivered += 1
        logger.debug("refresh %s (%s) -> %d subscriber(s)", event.topic.value, event.reason, delivered)
        return delivered

    def notify(self, topic: RefreshTopic, reason: str = "", **payload: Any) -> int:
        return self.publish(RefreshEvent(topic=topic, reason=reason, payload=payload))
