"""
Observable state containers.

State is created per consumer (one per HTTP request) and passed explicitly
to whoever mutates it. Listeners receive the container itself after every
change.
"""
from typing import Callable


class Observable:
    def __init__(self) -> None:
        self._listeners: list[Callable] = []

    def subscribe(self, listener: Callable) -> Callable[[], None]:
        """Register a listener, call it once with the current state, return an unsubscribe function."""
        self._listeners.append(listener)
        listener(self)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)


class ClinicListState(Observable):
    """Clinic list plus the loading/error flags a UI renders from."""

    def __init__(self) -> None:
        super().__init__()
        self.clinics: list = []
        self.is_loading: bool = True
        self.error: str | None = None
        # Set when client-side filters ran over a full server page
        self.truncated: bool = False

    def start_loading(self) -> None:
        self.is_loading = True
        self.error = None
        self.truncated = False
        self._notify()

    def set_clinics(self, clinics: list, truncated: bool = False) -> None:
        self.clinics = clinics
        self.truncated = truncated
        self._notify()

    def fail(self, message: str) -> None:
        self.error = message
        self.clinics = []
        self.truncated = False
        self._notify()

    def finish_loading(self) -> None:
        self.is_loading = False
        self._notify()
