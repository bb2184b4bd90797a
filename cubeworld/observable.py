"""A minimal observer pattern."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives notifications from an Observable."""

    @abstractmethod
    def notify(self, observable: Observable) -> None:
        """Process a notification from observable."""


class Observable:
    """Keeps a list of observers and notifies them of changes."""

    @property
    def _observers(self) -> list[Observer]:
        return self.__dict__.setdefault("_observer_list", [])

    def add_observer(self, observer: Observer) -> None:
        """Register observer and notify it immediately."""
        self._observers.append(observer)
        observer.notify(self)

    def notify_observers(self) -> None:
        """Notify every registered observer."""
        for observer in list(self._observers):
            observer.notify(self)