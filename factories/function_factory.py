from abc import ABC, abstractmethod
from typing import Sequence
from integrand.base import IFunction
from integrand.polynomial import PolynomialFunction

class IFunctionFactory(ABC):
    @abstractmethod
    def create_function(self, coefficients: Sequence[float]) -> IFunction: ...

class PolynomialFunctionFactory(IFunctionFactory):
    def create_function(self, coefficients: Sequence[float]) -> IFunction:
        return PolynomialFunction(coefficients)
