from abc import ABC, abstractmethod
from integrand.base import IFunction

class IIntegrationRule(ABC):
    @abstractmethod
    def integrate(self, function: IFunction, lower: float, upper: float) -> float:
        """Return the approximate integral of function over [lower, upper]."""
