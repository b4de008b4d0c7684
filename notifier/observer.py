# notifier/observer.py
from abc import ABC, abstractmethod
from typing import Callable, Union

ResultCallback = Callable[[float], None]

class IObserver(ABC):
    @abstractmethod
    def update(self, result: float) -> None:
        """Called when the subject has a new result."""
        ...

    def __call__(self, result: float) -> None:
        self.update(result)

class Subscription:
    """Handle for one registration; distinct even for identical callbacks."""
    __slots__ = ("callback",)

    def __init__(self, callback: ResultCallback) -> None:
        self.callback = callback

    def __repr__(self) -> str:
        return f"Subscription({self.callback!r})"

class ISubject(ABC):
    @abstractmethod
    def subscribe(self, observer: ResultCallback) -> Subscription: ...
    @abstractmethod
    def unsubscribe(self, observer: Union[ResultCallback, Subscription]) -> None: ...
    @abstractmethod
    def notify(self, result: float) -> None: ...
