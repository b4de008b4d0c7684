from abc import ABC, abstractmethod

class IFunction(ABC):
    @abstractmethod
    def evaluate(self, x: float) -> float:
        """Return the function value at x."""
