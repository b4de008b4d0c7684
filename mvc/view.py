# mvc/view.py
from typing import Callable, List, Optional
from notifier.observer import IObserver

class ConsoleView(IObserver):
    """Prints each result as `Result: <value>`."""
    def __init__(self, write_line: Callable[[str], None] = print) -> None:
        self.write_line = write_line

    def update(self, result: float) -> None:
        self.write_line(f"Result: {result}")

class HistoryView(IObserver):
    """Keeps every result it has been notified with, oldest first."""
    def __init__(self) -> None:
        self.results: List[float] = []

    def update(self, result: float) -> None:
        self.results.append(result)

    @property
    def last(self) -> Optional[float]:
        return self.results[-1] if self.results else None
