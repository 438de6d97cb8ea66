"""Named colony events and a small publish/subscribe notifier."""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

EVENT_ENEMY_ATTACK = "AttackOnNest: Everyone, defend the nest!"
EVENT_SOLDIERS_HELP = "EnemyDetected: Soldiers to the rescue!"
EVENT_LARGE_FOOD = "LargeFoodSourceFound: Harvesters, gather round!"
EVENT_HEAVY_BRANCH = "HeavyBranchFound: Builders, let's carry it!"
EVENT_NEST_DIRTY = "NestIsDirty: Cleaners, clean the nest!"

Callback = Callable[[Any], None]


class EventNotifier:
    """Keeps callbacks per event type and calls them with the anthill."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[Optional[Callback]]] = defaultdict(list)

    def subscribe(self, event_type: str, callback: Optional[Callback]) -> None:
        """Register ``callback`` for ``event_type``."""
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: Callback) -> None:
        """Remove every registration of ``callback`` for ``event_type``."""
        callbacks = self._subscribers.get(event_type)
        if callbacks:
            self._subscribers[event_type] = [cb for cb in callbacks if cb != callback]

    def notify(self, event_type: str, home: Any) -> None:
        """Call each callback registered for ``event_type`` with ``home``."""
        for callback in list(self._subscribers.get(event_type, ())):
            if callback:
                callback(home)